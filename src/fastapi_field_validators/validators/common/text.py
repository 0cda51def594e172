"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: text.py
@DateTime: 2026-10-19
@Docs: Free text field validator.
自由文本字段校验器。
"""

import re
from typing import Any

from fastapi_field_validators.core import FieldOptions, FieldValidator, Rule, check, text_rules
from fastapi_field_validators.normalization import Casing, TrimMode, normalize_text


class TextOptions(FieldOptions):
    """
    Text options.
    文本选项。

    Attributes:
        min_length: Minimum length.
        min_length: 最小长度。
        max_length: Maximum length.
        max_length: 最大长度。
        starts_with: Required prefix.
        starts_with: 必需前缀。
        ends_with: Required suffix.
        ends_with: 必需后缀。
        includes: Required substring.
        includes: 必须包含的子串。
        excludes: Forbidden substring(s).
        excludes: 禁止出现的子串。
        regex: Pattern the whole value must match.
        regex: 整个值必须匹配的模式。
        trim_mode: Whitespace trimming.
        trim_mode: 空白裁剪方式。
        casing: Letter casing applied after trimming.
        casing: 裁剪后应用的大小写转换。
        not_empty: Reject whitespace-only values.
        not_empty: 是否拒绝仅含空白的值。
    """

    min_length: int | None = None
    max_length: int | None = None
    starts_with: str | None = None
    ends_with: str | None = None
    includes: str | None = None
    excludes: str | tuple[str, ...] | None = None
    regex: re.Pattern[str] | None = None
    trim_mode: TrimMode = TrimMode.TRIM
    casing: Casing = Casing.NONE
    not_empty: bool = False


class TextValidator(FieldValidator[TextOptions]):
    """Text validator.
    文本校验器。
    """

    kind = "text"
    options_model = TextOptions

    def normalize(self, value: Any) -> str:
        opts = self.options
        return normalize_text(value, trim_mode=opts.trim_mode, casing=opts.casing, transform=opts.transform)

    def build_rules(self) -> list[Rule]:
        opts = self.options
        rules: list[Rule] = []
        if opts.not_empty:
            rules.append(lambda v: check(bool(v.strip()), "notEmpty"))
        rules.extend(
            text_rules(
                min_length=opts.min_length,
                max_length=opts.max_length,
                starts_with=opts.starts_with,
                ends_with=opts.ends_with,
                includes=opts.includes,
                excludes=opts.excludes,
            )
        )
        if opts.regex is not None:
            pattern = opts.regex
            rules.append(lambda v: check(pattern.search(v) is not None, "invalid", regex=pattern))
        return rules


def text(required: bool | None = None, /, **options: Any) -> TextValidator:
    """
    Create a text validator.
    创建文本校验器。

    Args:
        required: Reject empty input (default False).
        required: 是否拒绝空输入（默认 False）。
        **options: See ``TextOptions``.
        **options: 参见 ``TextOptions``。

    Returns:
        TextValidator: Validator instance.
        TextValidator: 校验器实例。
    """
    return TextValidator.create(required, **options)
