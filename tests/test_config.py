"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_config.py
@DateTime: 2026-10-19
@Docs: Tests for config.py module.
config.py 模块测试。
"""

import os
from unittest.mock import patch

import pytest

from fastapi_field_validators.config import DEFAULT_LOCALE, FALLBACK_LOCALE, _check_timezone, _env_get, resolve_config
from fastapi_field_validators.exceptions import ConfigurationError


class TestEnvGet:
    """Tests for _env_get helper.
    _env_get 辅助函数测试。
    """

    def test_returns_first_nonempty(self) -> None:
        """Return first non-empty env var / 返回第一个非空环境变量。"""
        with patch.dict(os.environ, {"A": "", "B": "hello"}):
            assert _env_get("A", "B") == "hello"

    def test_returns_none_when_all_empty(self) -> None:
        """Return None when all candidates are empty / 所有候选为空时返回 None。"""
        with patch.dict(os.environ, {}, clear=True):
            assert _env_get("NONEXISTENT_1", "NONEXISTENT_2") is None

    def test_strips_whitespace(self) -> None:
        """Strip surrounding whitespace / 去除前后空格。"""
        with patch.dict(os.environ, {"X": "  val  "}):
            assert _env_get("X") == "val"


class TestCheckTimezone:
    """Tests for _check_timezone.
    _check_timezone 测试。
    """

    def test_none_passes(self) -> None:
        assert _check_timezone(None) is None

    def test_known_zone(self) -> None:
        assert _check_timezone("Asia/Taipei") == "Asia/Taipei"

    def test_unknown_zone_raises(self) -> None:
        """Unknown zones raise ConfigurationError / 未知时区抛出 ConfigurationError。"""
        with pytest.raises(ConfigurationError) as exc_info:
            _check_timezone("Mars/Olympus")
        assert exc_info.value.error_code == "invalid_timezone"


class TestResolveConfig:
    """Tests for resolve_config.
    resolve_config 测试。
    """

    def test_defaults(self) -> None:
        """Defaults when nothing is set / 未设置时使用默认值。"""
        with patch.dict(os.environ, {}, clear=True):
            cfg = resolve_config()
        assert cfg.default_locale == DEFAULT_LOCALE == "zh-TW"
        assert cfg.fallback_locale == FALLBACK_LOCALE == "en"
        assert cfg.timezone is None

    def test_env_values(self) -> None:
        """Environment variables are read / 读取环境变量。"""
        env = {
            "FIELD_VALIDATORS_LOCALE": "en",
            "FIELD_VALIDATORS_FALLBACK_LOCALE": "zh-TW",
            "FIELD_VALIDATORS_TIMEZONE": "Asia/Taipei",
        }
        with patch.dict(os.environ, env, clear=True):
            cfg = resolve_config()
        assert cfg.default_locale == "en"
        assert cfg.fallback_locale == "zh-TW"
        assert cfg.timezone == "Asia/Taipei"

    def test_params_override_env(self) -> None:
        """Parameters win over environment / 参数优先于环境变量。"""
        with patch.dict(os.environ, {"FIELD_VALIDATORS_LOCALE": "en"}, clear=True):
            cfg = resolve_config(default_locale="zh-TW")
        assert cfg.default_locale == "zh-TW"

    def test_custom_prefix(self) -> None:
        with patch.dict(os.environ, {"APP_LOCALE": "en"}, clear=True):
            cfg = resolve_config(env_prefix="APP")
        assert cfg.default_locale == "en"

    def test_invalid_env_timezone_raises(self) -> None:
        with patch.dict(os.environ, {"FIELD_VALIDATORS_TIMEZONE": "Nowhere/City"}, clear=True):
            with pytest.raises(ConfigurationError):
                resolve_config()
