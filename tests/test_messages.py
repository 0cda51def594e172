"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_messages.py
@DateTime: 2026-10-19
@Docs: Tests for locale.py and messages.py.
locale.py 与 messages.py 测试。
"""

import pytest

from fastapi_field_validators import number, set_locale
from fastapi_field_validators.exceptions import ValidationError
from fastapi_field_validators.locale import candidate_locales, get_locale, reset_locale
from fastapi_field_validators.messages import format_param, interpolate, resolve_message, resolve_template


class TestLocaleRegistry:
    """Tests for the global locale registry.
    全局语言注册表测试。
    """

    def test_set_and_get(self) -> None:
        set_locale("zh-TW")
        assert get_locale() == "zh-TW"

    def test_reset_restores_default(self) -> None:
        set_locale("en")
        reset_locale()
        assert get_locale() == "zh-TW"

    def test_empty_tag_rejected(self) -> None:
        with pytest.raises(ValueError):
            set_locale("  ")

    def test_candidates(self) -> None:
        assert candidate_locales("en-US") == ["en-US", "en"]
        assert candidate_locales("en") == ["en"]
        assert candidate_locales("zh_TW") == ["zh_TW", "zh"]


class TestInterpolate:
    """Tests for ${name} interpolation.
    ${name} 插值测试。
    """

    def test_substitutes_params(self) -> None:
        assert interpolate("Must be at least ${min}", {"min": 3}) == "Must be at least 3"

    def test_missing_param_kept_literal(self) -> None:
        """Unknown placeholders stay visible / 未知占位符保持原样。"""
        assert interpolate("Between ${min} and ${max}", {"min": 1}) == "Between 1 and ${max}"

    def test_repeated_placeholder(self) -> None:
        assert interpolate("${a}-${a}", {"a": "x"}) == "x-x"

    def test_format_param(self) -> None:
        assert format_param(["http", "https"]) == "http, https"
        assert format_param(5.0) == "5"
        assert format_param(2.5) == "2.5"
        assert format_param(True) == "true"


class TestResolveMessage:
    """Tests for template precedence.
    模板优先级测试。
    """

    def test_builtin_locale(self) -> None:
        assert resolve_template("number", "min", locale="zh-TW") == "不可小於 ${min}"

    def test_override_wins(self) -> None:
        overrides = {"en": {"min": "Too small (${min})"}}
        assert resolve_message("number", "min", {"min": 2}, locale="en", overrides=overrides) == "Too small (2)"

    def test_override_other_locale_ignored(self) -> None:
        overrides = {"zh-TW": {"min": "太小"}}
        assert resolve_message("number", "min", {"min": 2}, locale="en", overrides=overrides) == "Must be at least 2"

    def test_unknown_locale_falls_back_to_english(self) -> None:
        assert resolve_message("boolean", "required", locale="fr") == "Required"

    def test_region_falls_back_to_language(self) -> None:
        assert resolve_message("boolean", "required", locale="en-GB") == "Required"

    def test_unknown_key_returns_key(self) -> None:
        assert resolve_message("boolean", "noSuchKey", locale="en") == "noSuchKey"


class TestLocaleAtParseTime:
    """The locale is read when the error is built, not when the validator is made.
    语言在构建错误时读取，而非创建校验器时。
    """

    def test_same_validator_switches_language(self) -> None:
        validator = number(True, min=10)
        set_locale("zh-TW")
        with pytest.raises(ValidationError) as zh:
            validator.parse(5)
        set_locale("en")
        with pytest.raises(ValidationError) as en:
            validator.parse(5)
        assert zh.value.message == "不可小於 10"
        assert en.value.message == "Must be at least 10"

    def test_round_trip_keeps_outcome(self) -> None:
        """Switching locale changes text only / 切换语言只改变文本。"""
        validator = number(max=3)
        outcomes = []
        for tag in ("en", "zh-TW", "en"):
            set_locale(tag)
            outcomes.append((validator.is_valid(3), validator.is_valid(4)))
        assert outcomes == [(True, False)] * 3

    def test_i18n_option(self) -> None:
        validator = number(True, i18n={"en": {"required": "Please enter a number"}})
        with pytest.raises(ValidationError) as exc_info:
            validator.parse("")
        assert exc_info.value.message == "Please enter a number"
