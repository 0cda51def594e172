"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: postal_code.py
@DateTime: 2026-10-19
@Docs: Taiwan postal code validator.
台湾邮递区号校验器。

Check order / 检查顺序:
    single-format length -> deprecated 5-digit -> suffix range -> prefix tables
"""

import logging
import re
from typing import Any

from fastapi_field_validators.algorithms.taiwan_postal import PostalCodeFormat, suffix_in_range, validate_taiwan_postal_code
from fastapi_field_validators.core import PASS, ConstraintResult, FieldOptions, FieldValidator, Rule, check, fail
from fastapi_field_validators.messages import resolve_message
from fastapi_field_validators.normalization import normalize_text

logger = logging.getLogger(__name__)

_SEPARATORS_RE = re.compile(r"[-\s]")

_SINGLE_FORMAT_KEYS: dict[PostalCodeFormat, tuple[int, str]] = {
    PostalCodeFormat.THREE: (3, "format3Only"),
    PostalCodeFormat.FIVE: (5, "format5Only"),
    PostalCodeFormat.SIX: (6, "format6Only"),
}


class PostalCodeOptions(FieldOptions):
    """
    Postal code options.
    邮递区号选项。

    Attributes:
        format: Accepted lengths (``3``, ``5``, ``6``, ``3+5``, ``3+6``, ``5+6``, ``all``).
        format: 允许的长度组合。
        strict_validation: Require official 3-digit prefixes.
        strict_validation: 是否要求官方 3 码前缀。
        strict_suffix_validation: Check suffix ranges of 5/6-digit codes.
        strict_suffix_validation: 是否校验 5/6 码后缀范围。
        allow_dashes: Strip dashes and spaces before checking.
        allow_dashes: 检查前是否去除连字符与空格。
        warn_5_digit: Log a warning for legacy 5-digit codes.
        warn_5_digit: 对旧制 5 码记录警告日志。
        deprecate_5_digit: Reject 5-digit codes.
        deprecate_5_digit: 拒绝 5 码。
        allowed_prefixes: Explicit prefix allow-list.
        allowed_prefixes: 显式前缀允许列表。
        blocked_prefixes: Prefix block-list.
        blocked_prefixes: 前缀阻止列表。
    """

    format: PostalCodeFormat = PostalCodeFormat.THREE_OR_SIX
    strict_validation: bool = True
    strict_suffix_validation: bool = False
    allow_dashes: bool = True
    warn_5_digit: bool = True
    deprecate_5_digit: bool = False
    allowed_prefixes: tuple[str, ...] | None = None
    blocked_prefixes: tuple[str, ...] | None = None


class PostalCodeValidator(FieldValidator[PostalCodeOptions]):
    """Taiwan postal code validator; returns the code without separators.
    台湾邮递区号校验器；返回去除分隔符后的号码。
    """

    kind = "postalCode"
    options_model = PostalCodeOptions

    def normalize(self, value: Any) -> str:
        text = normalize_text(value)
        if self.options.allow_dashes:
            text = _SEPARATORS_RE.sub("", text)
        if self.options.transform is not None:
            text = self.options.transform(text)
        return text

    def build_rules(self) -> list[Rule]:
        opts = self.options
        rules: list[Rule] = []
        single = _SINGLE_FORMAT_KEYS.get(opts.format)
        if single is not None:
            length, key = single
            rules.append(lambda v: check(len(_SEPARATORS_RE.sub("", v)) == length, key))
        if opts.deprecate_5_digit:
            rules.append(lambda v: check(len(_SEPARATORS_RE.sub("", v)) != 5, "deprecated5Digit"))
        if opts.strict_suffix_validation:
            rules.append(self._suffix_ok)
        rules.append(
            lambda v: check(
                validate_taiwan_postal_code(
                    v,
                    opts.format,
                    opts.strict_validation,
                    opts.strict_suffix_validation,
                    opts.allow_dashes,
                    opts.allowed_prefixes,
                    opts.blocked_prefixes,
                ),
                "invalid",
            )
        )
        return rules

    def _suffix_ok(self, value: str) -> ConstraintResult:
        clean = _SEPARATORS_RE.sub("", value)
        if len(clean) in (5, 6) and not suffix_in_range(clean):
            return fail("invalidSuffix")
        return PASS

    def finalize(self, value: str) -> str:
        opts = self.options
        if opts.warn_5_digit and len(value) == 5 and opts.format is not PostalCodeFormat.FIVE and not opts.deprecate_5_digit:
            logger.warning(
                "%s: %s",
                resolve_message(self.kind, "legacy5DigitWarning", overrides=opts.i18n),
                value,
            )
        return value


def postal_code(required: bool | None = None, /, **options: Any) -> PostalCodeValidator:
    """
    Create a Taiwan postal code validator.
    创建台湾邮递区号校验器。

    Examples:
        >>> postal_code().parse("100-001")
        '100001'
    """
    return PostalCodeValidator.create(required, **options)
