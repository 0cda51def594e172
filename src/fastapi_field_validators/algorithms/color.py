"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: color.py
@DateTime: 2026-10-19
@Docs: CSS color grammars (hex, rgb/rgba, hsl/hsla).
CSS 颜色语法（hex、rgb/rgba、hsl/hsla）。
"""

import re
from collections.abc import Sequence
from enum import StrEnum


class ColorFormat(StrEnum):
    """Color grammars.
    颜色语法。
    """

    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    ANY = "any"


_HEX_SHORT_RE = re.compile(r"^#[0-9a-f]{3}\Z", re.IGNORECASE)
_HEX_LONG_RE = re.compile(r"^#[0-9a-f]{6}\Z", re.IGNORECASE)
_HEX_ALPHA_RE = re.compile(r"^#[0-9a-f]{8}\Z", re.IGNORECASE)
_NUM = r"(-?\d+(?:\.\d+)?)"
_RGB_RE = re.compile(rf"^(rgba?)\(\s*{_NUM}\s*,\s*{_NUM}\s*,\s*{_NUM}\s*(?:,\s*{_NUM})?\s*\)\Z", re.ASCII)
_HSL_RE = re.compile(rf"^(hsla?)\(\s*{_NUM}\s*,\s*{_NUM}%\s*,\s*{_NUM}%\s*(?:,\s*{_NUM})?\s*\)\Z", re.ASCII)


def _is_byte(n: float) -> bool:
    return n.is_integer() and 0 <= n <= 255


def _alpha_ok(func: str, alpha: str | None, allow_alpha: bool) -> bool:
    if alpha is not None:
        if not allow_alpha or not 0 <= float(alpha) <= 1:
            return False
    # rgba()/hsla() need alpha; rgb()/hsl() must not have it
    return (alpha is not None) == func.endswith("a")


def validate_hex(value: str, allow_alpha: bool = True) -> bool:
    """``#rgb``/``#rrggbb``, plus ``#rrggbbaa`` when alpha is allowed.
    ``#rgb``/``#rrggbb``，允许透明度时还接受 ``#rrggbbaa``。
    """
    if _HEX_SHORT_RE.match(value) or _HEX_LONG_RE.match(value):
        return True
    return allow_alpha and bool(_HEX_ALPHA_RE.match(value))


def validate_rgb(value: str, allow_alpha: bool = True) -> bool:
    """``rgb(r, g, b)`` / ``rgba(r, g, b, a)`` with integer channels 0-255.
    ``rgb(r, g, b)`` / ``rgba(r, g, b, a)``，通道为 0-255 的整数。
    """
    m = _RGB_RE.match(value)
    if m is None:
        return False
    func, r, g, b, alpha = m.groups()
    if not all(_is_byte(float(c)) for c in (r, g, b)):
        return False
    return _alpha_ok(func, alpha, allow_alpha)


def validate_hsl(value: str, allow_alpha: bool = True) -> bool:
    """``hsl(h, s%, l%)`` / ``hsla(h, s%, l%, a)``.
    ``hsl(h, s%, l%)`` / ``hsla(h, s%, l%, a)``。
    """
    m = _HSL_RE.match(value)
    if m is None:
        return False
    func, h, s, lightness, alpha = m.groups()
    if not 0 <= float(h) <= 360:
        return False
    if not (0 <= float(s) <= 100 and 0 <= float(lightness) <= 100):
        return False
    return _alpha_ok(func, alpha, allow_alpha)


_CHECKERS = {
    ColorFormat.HEX: validate_hex,
    ColorFormat.RGB: validate_rgb,
    ColorFormat.HSL: validate_hsl,
}


def validate_color(
    value: str,
    formats: Sequence[ColorFormat | str] = (ColorFormat.ANY,),
    allow_alpha: bool = True,
) -> tuple[bool, ColorFormat | None]:
    """
    Validate a color against one or more grammars.
    按一种或多种语法校验颜色。

    Args:
        value: Color string.
        value: 颜色字符串。
        formats: Accepted grammars; ``any`` means all of them.
        formats: 允许的语法；``any`` 表示全部。
        allow_alpha: Accept alpha channels.
        allow_alpha: 是否接受透明度通道。

    Returns:
        tuple[bool, ColorFormat | None]: Validity, and the single requested
            format when exactly one was requested and it failed.
        tuple[bool, ColorFormat | None]: 是否有效；仅请求单一格式且失败时返回该格式。
    """
    wanted = [ColorFormat(f) for f in formats]
    if ColorFormat.ANY in wanted:
        wanted = [ColorFormat.HEX, ColorFormat.RGB, ColorFormat.HSL]
        single = None
    else:
        single = wanted[0] if len(wanted) == 1 else None
    for fmt in wanted:
        if _CHECKERS[fmt](value, allow_alpha):
            return True, None
    return False, single
