"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-10-19
@Docs: Built-in message catalogs keyed by locale tag.
按语言标签索引的内置消息目录。
"""

from collections.abc import Mapping

from fastapi_field_validators.locales import en, zh_tw

CATALOGS: dict[str, dict[str, dict[str, str]]] = {
    "en": en.MESSAGES,
    "zh-TW": zh_tw.MESSAGES,
}

SUPPORTED_LOCALES: tuple[str, ...] = tuple(CATALOGS)


def get_catalog(locale: str) -> Mapping[str, Mapping[str, str]] | None:
    """Return the built-in catalog for a locale tag.
    返回语言标签对应的内置消息目录。

    Args:
        locale: Locale tag.
            语言标签。

    Returns:
        Catalog mapping (kind -> key -> template), or None when unknown.
            消息目录（类型 -> 键 -> 模板）；未知语言返回 None。
    """
    return CATALOGS.get(locale)
