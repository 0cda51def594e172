"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: color.py
@DateTime: 2026-10-19
@Docs: CSS color field validator.
CSS 颜色字段校验器。
"""

from typing import Any

from fastapi_field_validators.algorithms.color import ColorFormat, validate_color
from fastapi_field_validators.core import PASS, ConstraintResult, FieldOptions, FieldValidator, Rule, fail
from fastapi_field_validators.normalization import normalize_text

_FAILED_FORMAT_KEYS: dict[ColorFormat, str] = {
    ColorFormat.HEX: "notHex",
    ColorFormat.RGB: "notRgb",
    ColorFormat.HSL: "notHsl",
}


class ColorOptions(FieldOptions):
    """
    Color options.
    颜色选项。

    Attributes:
        format: One grammar or several; ``any`` accepts all of them.
        format: 单个或多个语法；``any`` 接受全部语法。
        allow_alpha: Accept alpha channels.
        allow_alpha: 是否接受透明度通道。
    """

    format: ColorFormat | tuple[ColorFormat, ...] = ColorFormat.ANY
    allow_alpha: bool = True


class ColorValidator(FieldValidator[ColorOptions]):
    """Color validator.
    颜色校验器。
    """

    kind = "color"
    options_model = ColorOptions

    def normalize(self, value: Any) -> str:
        return normalize_text(value, transform=self.options.transform)

    def build_rules(self) -> list[Rule]:
        return [self._color_ok]

    def _color_ok(self, value: str) -> ConstraintResult:
        fmt = self.options.format
        formats = (fmt,) if isinstance(fmt, ColorFormat) else fmt
        ok, failed = validate_color(value, formats, self.options.allow_alpha)
        if ok:
            return PASS
        return fail(_FAILED_FORMAT_KEYS.get(failed, "invalid"))


def color(required: bool | None = None, /, **options: Any) -> ColorValidator:
    """
    Create a color validator.
    创建颜色校验器。

    Args:
        required: Reject empty input (default False).
        required: 是否拒绝空输入（默认 False）。
        **options: See ``ColorOptions``.
        **options: 参见 ``ColorOptions``。

    Returns:
        ColorValidator: Validator instance.
        ColorValidator: 校验器实例。
    """
    return ColorValidator.create(required, **options)
