"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: password.py
@DateTime: 2026-10-19
@Docs: Password field validator.
密码字段校验器。

Check order / 检查顺序:
    length -> character classes -> repeating -> sequential -> common words
    -> strength -> includes -> excludes -> regex
"""

import re
from typing import Any

from fastapi_field_validators.algorithms.password import (
    DIGIT_RE,
    LOWERCASE_RE,
    SPECIAL_RE,
    UPPERCASE_RE,
    PasswordStrength,
    contains_common_password,
    has_repeating,
    has_sequential,
    strength_at_least,
)
from fastapi_field_validators.core import FieldOptions, FieldValidator, Rule, check, excludes_rule, text_rules
from fastapi_field_validators.normalization import stringify


class PasswordOptions(FieldOptions):
    """
    Password options.
    密码选项。

    Attributes:
        min: Minimum length.
        min: 最小长度。
        max: Maximum length.
        max: 最大长度。
        uppercase: Require an upper-case letter.
        uppercase: 要求包含大写字母。
        lowercase: Require a lower-case letter.
        lowercase: 要求包含小写字母。
        digits: Require a digit.
        digits: 要求包含数字。
        special: Require a special character.
        special: 要求包含特殊字符。
        no_repeating: Forbid 3+ identical characters in a row.
        no_repeating: 禁止连续 3 个及以上相同字符。
        no_sequential: Forbid runs such as ``abc`` or ``123``.
        no_sequential: 禁止 ``abc``、``123`` 这类连续序列。
        no_common_words: Forbid well-known weak passwords.
        no_common_words: 禁止常见弱密码。
        min_strength: Minimum strength level.
        min_strength: 最低强度等级。
        regex: Pattern the password must match.
        regex: 密码必须匹配的模式。
    """

    min: int | None = None
    max: int | None = None
    uppercase: bool = False
    lowercase: bool = False
    digits: bool = False
    special: bool = False
    no_repeating: bool = False
    no_sequential: bool = False
    no_common_words: bool = False
    min_strength: PasswordStrength | None = None
    includes: str | None = None
    excludes: str | tuple[str, ...] | None = None
    regex: re.Pattern[str] | None = None


class PasswordValidator(FieldValidator[PasswordOptions]):
    """Password validator; the value is never trimmed.
    密码校验器；不会裁剪空白。
    """

    kind = "password"
    options_model = PasswordOptions

    def normalize(self, value: Any) -> str:
        text = stringify(value)
        if self.options.transform is not None:
            text = self.options.transform(text)
        return text

    def build_rules(self) -> list[Rule]:
        opts = self.options
        rules = text_rules(min_length=opts.min, max_length=opts.max, min_key="min", max_key="max")
        if opts.uppercase:
            rules.append(lambda v: check(UPPERCASE_RE.search(v) is not None, "uppercase"))
        if opts.lowercase:
            rules.append(lambda v: check(LOWERCASE_RE.search(v) is not None, "lowercase"))
        if opts.digits:
            rules.append(lambda v: check(DIGIT_RE.search(v) is not None, "digits"))
        if opts.special:
            rules.append(lambda v: check(SPECIAL_RE.search(v) is not None, "special"))
        if opts.no_repeating:
            rules.append(lambda v: check(not has_repeating(v), "noRepeating"))
        if opts.no_sequential:
            rules.append(lambda v: check(not has_sequential(v), "noSequential"))
        if opts.no_common_words:
            rules.append(lambda v: check(not contains_common_password(v), "noCommonWords"))
        if opts.min_strength is not None:
            rules.append(lambda v: check(strength_at_least(v, opts.min_strength), "minStrength", minStrength=opts.min_strength.value))
        if opts.includes is not None:
            rules.append(lambda v: check(opts.includes in v, "includes", includes=opts.includes))
        if opts.excludes is not None:
            rules.append(excludes_rule(opts.excludes))
        if opts.regex is not None:
            pattern = opts.regex
            rules.append(lambda v: check(pattern.search(v) is not None, "invalid", regex=pattern))
        return rules


def password(required: bool | None = None, /, **options: Any) -> PasswordValidator:
    """
    Create a password validator.
    创建密码校验器。

    Examples:
        >>> password(min=8, digits=True).parse("s3cretpass")
        's3cretpass'
    """
    return PasswordValidator.create(required, **options)
