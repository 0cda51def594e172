"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: locale.py
@DateTime: 2026-10-19
@Docs: Process-wide current locale registry.
进程级当前语言注册表。

The current locale is read when an error message is built, never when a
validator is constructed, so one validator instance reports in whichever
locale is active at ``parse`` time.
当前语言在构建错误消息时读取，而非在构建校验器时捕获；
同一个校验器实例会使用 ``parse`` 时生效的语言。
"""

import logging

from fastapi_field_validators.config import resolve_config

logger = logging.getLogger(__name__)

_config = resolve_config()
_current_locale: str = _config.default_locale


def set_locale(locale: str) -> None:
    """Replace the global current locale.
    替换全局当前语言。

    Args:
        locale: Locale tag such as ``"en"`` or ``"zh-TW"``.
            语言标签，例如 ``"en"`` 或 ``"zh-TW"``。
    """
    global _current_locale
    tag = str(locale).strip()
    if not tag:
        raise ValueError("Locale tag must not be empty / 语言标签不能为空")
    logger.debug("Switching validator locale %s -> %s", _current_locale, tag)
    _current_locale = tag


def get_locale() -> str:
    """Return the global current locale.
    返回全局当前语言。

    Returns:
        str: Current locale tag.
            当前语言标签。
    """
    return _current_locale


def reset_locale() -> None:
    """Restore the configured default locale.
    恢复配置的默认语言。
    """
    set_locale(_config.default_locale)


def fallback_locale() -> str:
    """Return the configured fallback locale.
    返回配置的回退语言。
    """
    return _config.fallback_locale


def candidate_locales(locale: str) -> list[str]:
    """
    Expand a locale tag into lookup candidates.
    将语言标签展开为查找候选列表。

    ``"en-US"`` is tried as itself and then as its language ``"en"``.
    ``"en-US"`` 先按原值查找，再按语言部分 ``"en"`` 查找。

    Args:
        locale: Locale tag.
            语言标签。

    Returns:
        list[str]: Candidate tags in priority order.
        list[str]: 按优先级排列的候选标签。
    """
    candidates = [locale]
    language = locale.replace("_", "-").split("-", 1)[0]
    if language and language != locale:
        candidates.append(language)
    return candidates


def default_timezone() -> str | None:
    """Return the configured default IANA timezone (None means system local).
    返回配置的默认 IANA 时区（None 表示系统本地时区）。
    """
    return _config.timezone
