"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: config.py
@DateTime: 2026-10-19
@Docs: Validator configuration helpers.
校验器配置助手。

Process-level defaults for the validator package.
校验器包的进程级默认配置。

Environment variables / 环境变量:
        - FIELD_VALIDATORS_LOCALE:
            Locale active at import time (default: zh-TW).
            导入时生效的语言（默认 zh-TW）。
        - FIELD_VALIDATORS_FALLBACK_LOCALE:
            Locale used when a message is missing (default: en).
            消息缺失时使用的回退语言（默认 en）。
        - FIELD_VALIDATORS_TIMEZONE:
            IANA timezone used by datetime validators without an explicit timezone.
            datetime 校验器未显式指定时区时使用的 IANA 时区。

Examples:
        >>> from fastapi_field_validators.config import resolve_config
        >>> cfg = resolve_config(default_locale="en")
        >>> cfg.default_locale
        'en'
"""

import os
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi_field_validators.exceptions import ConfigurationError

DEFAULT_LOCALE = "zh-TW"
FALLBACK_LOCALE = "en"


@dataclass(frozen=True, slots=True)
class ValidatorsConfig:
    """Validator package configuration.

    校验器包配置。

    Attributes:
        default_locale: Locale active when the package is imported.
            包导入时生效的语言。
        fallback_locale: Locale whose built-in messages are the final fallback.
            内置消息的最终回退语言。
        timezone: Default IANA timezone for datetime validators.
            datetime 校验器的默认 IANA 时区。
    """

    default_locale: str = DEFAULT_LOCALE
    fallback_locale: str = FALLBACK_LOCALE
    timezone: str | None = None


def _env_get(*names: str) -> str | None:
    """Get the first non-empty environment variable value.

    获取第一个非空环境变量值。

    Args:
        *names: Candidate environment variable names in priority order.
            候选环境变量名（按优先级顺序）。

    Returns:
        The first non-empty value, or None.
            返回第一个非空值；若都为空则返回 None。
    """
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip():
            return v.strip()
    return None


def _check_timezone(name: str | None) -> str | None:
    """
    Validate an IANA timezone name.
    校验 IANA 时区名称。

    Args:
        name: Timezone name.
            时区名称。

    Returns:
        str | None: The name when valid.
        str | None: 合法时返回原名称。
    """
    if name is None:
        return None
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigurationError(
            message=f"Unknown timezone: {name} / 未知时区: {name}",
            details={"timezone": name},
            error_code="invalid_timezone",
        ) from exc
    return name


def resolve_config(
    *,
    default_locale: str | None = None,
    fallback_locale: str | None = None,
    timezone: str | None = None,
    env_prefix: str = "FIELD_VALIDATORS",
) -> ValidatorsConfig:
    """Resolve configuration from parameters and environment variables.

    从参数和环境变量解析配置。

     Resolution order / 解析优先级:
        1) function parameters / 函数参数
        2) env: `{env_prefix}_LOCALE`, `{env_prefix}_FALLBACK_LOCALE`, `{env_prefix}_TIMEZONE`
           环境变量
        3) defaults / 默认值

    Args:
        default_locale: Initial locale.
            初始语言。
        fallback_locale: Fallback locale.
            回退语言。
        timezone: Default IANA timezone.
            默认 IANA 时区。
        env_prefix: Prefix for environment variables.
            环境变量前缀（默认 FIELD_VALIDATORS）。

    Returns:
        A ValidatorsConfig instance.
            返回 ValidatorsConfig 配置实例。
    """
    resolved_tz = timezone if timezone is not None else _env_get(f"{env_prefix}_TIMEZONE")
    return ValidatorsConfig(
        default_locale=default_locale or _env_get(f"{env_prefix}_LOCALE") or DEFAULT_LOCALE,
        fallback_locale=fallback_locale or _env_get(f"{env_prefix}_FALLBACK_LOCALE") or FALLBACK_LOCALE,
        timezone=_check_timezone(resolved_tz),
    )
