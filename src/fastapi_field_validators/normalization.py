"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: normalization.py
@DateTime: 2026-10-19
@Docs: String normalization helpers (stringify, trim, casing).
字符串规范化助手（字符串化、去空白、大小写）。
"""

import math
import re
from collections.abc import Callable
from enum import StrEnum
from typing import Any


class TrimMode(StrEnum):
    """Whitespace trimming mode.
    空白裁剪模式。
    """

    TRIM = "trim"
    TRIM_START = "trim_start"
    TRIM_END = "trim_end"
    NONE = "none"


class Casing(StrEnum):
    """Letter casing mode.
    字母大小写模式。
    """

    NONE = "none"
    UPPER = "upper"
    LOWER = "lower"
    TITLE = "title"


_TITLE_WORD_RE = re.compile(r"\w\S*")


def stringify(value: Any) -> str:
    """
    Convert a primitive to its canonical string form.
    将基本类型转换为规范字符串形式。

    Args:
        value: Raw value.
        value: 原始值。

    Returns:
        str: String form; integral floats keep integer formatting.
        str: 字符串形式；整数值浮点数保持整数格式。
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def apply_trim(value: str, mode: TrimMode | str = TrimMode.TRIM) -> str:
    """Apply a trim mode.
    应用裁剪模式。
    """
    match TrimMode(mode):
        case TrimMode.TRIM_START:
            return value.lstrip()
        case TrimMode.TRIM_END:
            return value.rstrip()
        case TrimMode.NONE:
            return value
        case _:
            return value.strip()


def apply_casing(value: str, casing: Casing | str = Casing.NONE) -> str:
    """Apply a casing mode.
    应用大小写模式。
    """
    match Casing(casing):
        case Casing.UPPER:
            return value.upper()
        case Casing.LOWER:
            return value.lower()
        case Casing.TITLE:
            return _TITLE_WORD_RE.sub(lambda m: m.group(0)[:1].upper() + m.group(0)[1:].lower(), value)
        case _:
            return value


def normalize_text(
    value: Any,
    *,
    trim_mode: TrimMode | str = TrimMode.TRIM,
    casing: Casing | str = Casing.NONE,
    transform: Callable[[str], str] | None = None,
) -> str:
    """
    Run the standard string normalization chain.
    执行标准字符串规范化链。

    Order: stringify -> trim -> casing -> transform.
    顺序：字符串化 -> 裁剪 -> 大小写 -> 自定义转换。

    Args:
        value: Raw value.
        value: 原始值。
        trim_mode: Trim mode.
        trim_mode: 裁剪模式。
        casing: Casing mode.
        casing: 大小写模式。
        transform: Caller transform; its exceptions propagate.
        transform: 调用方转换函数；其异常直接向上抛出。

    Returns:
        str: Normalized string.
        str: 规范化后的字符串。
    """
    text = apply_casing(apply_trim(stringify(value), trim_mode), casing)
    if transform is not None:
        text = transform(text)
    return text


def strip_chars(value: str, pattern: str = r"[\s-]") -> str:
    """Remove every match of a pattern (separators by default).
    移除所有匹配字符（默认移除分隔符）。
    """
    return re.sub(pattern, "", value)
