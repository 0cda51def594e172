"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: messages.py
@DateTime: 2026-10-19
@Docs: Message resolution and ``${name}`` interpolation.
消息解析与 ``${name}`` 插值。
"""

import logging
import re
from collections.abc import Mapping
from typing import Any

from fastapi_field_validators.locale import candidate_locales, fallback_locale, get_locale
from fastapi_field_validators.locales import get_catalog

logger = logging.getLogger(__name__)

_PLACEHOLDER_RE = re.compile(r"\$\{(\w+)\}")

type MessageOverrides = Mapping[str, Mapping[str, str]]


def format_param(value: Any) -> str:
    """
    Stringify an interpolation parameter.
    将插值参数转换为字符串。

    Sequences are joined with ``", "``; integral floats drop their ``.0``.
    序列以 ``", "`` 连接；整数值浮点数去掉 ``.0``。

    Args:
        value: Parameter value.
        value: 参数值。

    Returns:
        str: Display text.
        str: 显示文本。
    """
    if isinstance(value, (list, tuple, set, frozenset)):
        return ", ".join(format_param(v) for v in value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, re.Pattern):
        return value.pattern
    return str(value)


def interpolate(template: str, params: Mapping[str, Any] | None = None) -> str:
    """
    Substitute ``${name}`` placeholders.
    替换 ``${name}`` 占位符。

    Unknown names are kept as the literal ``${name}``.
    未知名称保留为字面量 ``${name}``。

    Args:
        template: Message template.
        template: 消息模板。
        params: Interpolation parameters.
        params: 插值参数。

    Returns:
        str: Interpolated message.
        str: 插值后的消息。
    """
    values = params or {}

    def _sub(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in values or values[name] is None:
            return match.group(0)
        return format_param(values[name])

    return _PLACEHOLDER_RE.sub(_sub, template)


def _lookup(source: Mapping[str, Mapping[str, str]] | None, key: str) -> str | None:
    if not source:
        return None
    template = source.get(key)
    return template if isinstance(template, str) and template else None


def resolve_template(
    kind: str,
    key: str,
    *,
    locale: str | None = None,
    overrides: MessageOverrides | None = None,
) -> str:
    """
    Resolve the template for a message key.
    解析消息键对应的模板。

    Precedence / 优先级:
        1) ``overrides[locale][key]``
        2) built-in ``[locale][kind][key]``
        3) built-in fallback locale (``en``)

    Args:
        kind: Validator kind (catalog section).
        kind: 校验器类型（目录分区）。
        key: Message key.
        key: 消息键。
        locale: Locale tag; defaults to the current locale.
        locale: 语言标签；默认使用当前语言。
        overrides: Caller-supplied templates per locale.
        overrides: 调用方按语言提供的模板。

    Returns:
        str: Template text; the key itself when nothing matches.
        str: 模板文本；无匹配时返回键本身。
    """
    tag = locale or get_locale()
    candidates = candidate_locales(tag)
    if overrides:
        for cand in candidates:
            found = _lookup(overrides.get(cand), key)
            if found is not None:
                return found
    for cand in candidates:
        catalog = get_catalog(cand)
        if catalog is None:
            continue
        found = _lookup(catalog.get(kind), key)
        if found is not None:
            return found
    fallback = get_catalog(fallback_locale()) or {}
    found = _lookup(fallback.get(kind), key)
    if found is not None:
        return found
    logger.warning("No message template for %s.%s (locale=%s)", kind, key, tag)
    return key


def resolve_message(
    kind: str,
    key: str,
    params: Mapping[str, Any] | None = None,
    *,
    locale: str | None = None,
    overrides: MessageOverrides | None = None,
) -> str:
    """
    Resolve and interpolate a localized message.
    解析并插值本地化消息。

    Args:
        kind: Validator kind.
        kind: 校验器类型。
        key: Message key.
        key: 消息键。
        params: Interpolation parameters.
        params: 插值参数。
        locale: Locale tag; defaults to the current locale.
        locale: 语言标签；默认使用当前语言。
        overrides: Caller-supplied templates per locale.
        overrides: 调用方按语言提供的模板。

    Returns:
        str: Final message.
        str: 最终消息。
    """
    template = resolve_template(kind, key, locale=locale, overrides=overrides)
    return interpolate(template, params)
