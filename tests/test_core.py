"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_core.py
@DateTime: 2026-10-19
@Docs: Tests for the shared validation pipeline in core.py.
core.py 共享校验流水线测试。
"""

from typing import Any

import pytest

from fastapi_field_validators import boolean, business_id, number, text, tw_mobile, tw_tel
from fastapi_field_validators.core import (
    PASS,
    FieldOptions,
    FieldValidator,
    Rule,
    WhitelistMode,
    WhitelistOptions,
    check,
    excludes_rule,
    fail,
    first_failure,
    text_rules,
)
from fastapi_field_validators.exceptions import ConfigurationError, ValidationError


class _CodeValidator(FieldValidator[WhitelistOptions]):
    kind = "text"
    options_model = WhitelistOptions
    whitelist_mode = WhitelistMode.BYPASS

    def build_rules(self) -> list[Rule]:
        return [lambda v: check(v.isdigit(), "invalid")]


class TestRuleHelpers:
    """Tests for check/fail/first_failure.
    check/fail/first_failure 测试。
    """

    def test_check_pass_and_fail(self) -> None:
        assert check(True, "invalid") is PASS
        result = check(False, "min", min=3)
        assert not result.ok
        assert result.key == "min"
        assert result.params == {"min": 3}

    def test_first_failure_stops_early(self) -> None:
        """Later rules never run after a failure / 失败后不再执行后续规则。"""
        calls: list[str] = []

        def rule(name: str, ok: bool) -> Rule:
            def _r(_: Any) -> Any:
                calls.append(name)
                return PASS if ok else fail(name)

            return _r

        result = first_failure([rule("a", True), rule("b", False), rule("c", False)], "x")
        assert result is not None and result.key == "b"
        assert calls == ["a", "b"]

    def test_first_failure_all_pass(self) -> None:
        assert first_failure([lambda v: PASS], 1) is None

    def test_text_rules_order(self) -> None:
        """Length runs before membership / 长度检查先于包含检查。"""
        rules = text_rules(min_length=5, includes="@")
        result = first_failure(rules, "ab")
        assert result is not None and result.key == "minLength"
        assert result.params == {"minLength": 5}

    def test_text_rules_custom_keys(self) -> None:
        rules = text_rules(max_length=2, max_key="max")
        result = first_failure(rules, "abc")
        assert result is not None and result.key == "max" and result.params == {"max": 2}

    def test_excludes_rule_reports_item(self) -> None:
        rule = excludes_rule(["foo", "bar"])
        result = rule("xbarx")
        assert not result.ok and result.params == {"excludes": "bar"}


class TestCreate:
    """Tests for FieldValidator.create.
    FieldValidator.create 测试。
    """

    def test_unknown_option_raises(self) -> None:
        """Unknown options raise ConfigurationError / 未知选项抛出 ConfigurationError。"""
        with pytest.raises(ConfigurationError) as exc_info:
            text(min_lenght=3)
        assert exc_info.value.error_code == "invalid_options"

    def test_options_are_frozen(self) -> None:
        validator = text(min_length=1)
        with pytest.raises(Exception):
            validator.options.min_length = 5  # type: ignore[misc]

    def test_required_keyword_and_positional(self) -> None:
        assert text(True).options.required is True
        assert text(required=True).options.required is True
        assert text().options.required is False

    def test_positional_wins_over_keyword(self) -> None:
        assert text(False, required=True).options.required is False

    def test_base_options_model(self) -> None:
        assert isinstance(text().options, FieldOptions)


class TestEmptiness:
    """Tests for empty/default resolution.
    空值/默认值解析测试。
    """

    @pytest.mark.parametrize("empty", [None, "", "   "])
    def test_optional_empty_returns_none(self, empty: Any) -> None:
        assert text().parse(empty) is None

    @pytest.mark.parametrize("empty", [None, "", "  "])
    def test_required_empty_raises(self, empty: Any) -> None:
        with pytest.raises(ValidationError) as exc_info:
            text(True).parse(empty)
        assert exc_info.value.key == "required"
        assert exc_info.value.issues[0]["message"] == "Required"

    def test_default_substituted(self) -> None:
        assert text(True, default_value="guest").parse("") == "guest"

    @pytest.mark.parametrize("empty", [None, ""])
    def test_default_still_validated(self, empty: Any) -> None:
        """Defaults are checked against rules / 默认值仍受规则约束。"""
        validator = boolean(should_be=True, default_value=False)
        with pytest.raises(ValidationError) as exc_info:
            validator.parse(empty)
        assert exc_info.value.key == "shouldBeTrue"

    def test_none_for_every_kind(self) -> None:
        for validator in (text(), number(), boolean(), business_id(), tw_mobile()):
            assert validator.parse(None) is None


class TestWhitelist:
    """Tests for whitelist modes.
    白名单模式测试。
    """

    def test_bypass_skips_rules(self) -> None:
        """Whitelisted values bypass format checks / 白名单值跳过格式检查。"""
        validator = _CodeValidator.create(whitelist=("N/A",))
        assert validator.parse("N/A") == "N/A"
        assert validator.parse("123") == "123"
        with pytest.raises(ValidationError):
            validator.parse("abc")

    def test_whitelist_only_rejects_others(self) -> None:
        validator = _CodeValidator.create(whitelist=("N/A",), whitelist_only=True)
        with pytest.raises(ValidationError) as exc_info:
            validator.parse("123")
        assert exc_info.value.key == "notInWhitelist"

    def test_whitelist_only_trusts_default(self) -> None:
        validator = _CodeValidator.create(whitelist=("N/A",), whitelist_only=True, default_value="x")
        assert validator.parse("") == "x"

    def test_empty_string_whitelisted(self) -> None:
        validator = _CodeValidator.create(whitelist=("",))
        assert validator.parse("") == ""

    def test_empty_resolution_order(self) -> None:
        """Empty input resolves before the whitelist / 空输入先于白名单解析。"""
        assert _CodeValidator.create(whitelist=("",), default_value="1").parse("") == ""
        with pytest.raises(ValidationError) as exc_info:
            _CodeValidator.create(True, whitelist=("",)).parse("")
        assert exc_info.value.key == "required"
        assert _CodeValidator.create(whitelist=("N/A",), default_value="N/A").parse(None) == "N/A"

    def test_exclusive_mode(self) -> None:
        """Tel whitelist accepts only listed values / 电话白名单只接受列出的值。"""
        validator = tw_tel(whitelist=("0223456789",))
        assert validator.parse("0223456789") == "0223456789"
        with pytest.raises(ValidationError) as exc_info:
            validator.parse("0287654321")
        assert exc_info.value.key == "notInWhitelist"

    def test_bypass_mode_mobile(self) -> None:
        validator = tw_mobile(whitelist=("unknown",))
        assert validator.parse("unknown") == "unknown"
        assert validator.parse("0912345678") == "0912345678"


class TestParseHelpers:
    """Tests for is_valid and transform handling.
    is_valid 与 transform 处理测试。
    """

    def test_is_valid(self) -> None:
        validator = text(True, min_length=2)
        assert validator.is_valid("ab")
        assert not validator.is_valid("a")
        assert not validator.is_valid(None)

    def test_transform_errors_propagate(self) -> None:
        """Transform exceptions are not wrapped / transform 异常不被包装。"""

        def boom(value: str) -> str:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            text(transform=boom).parse("abc")

    def test_idempotent_output(self) -> None:
        """Re-parsing output yields the same value / 再次解析输出得到相同结果。"""
        validator = text(casing="upper")
        first = validator.parse("  hello ")
        assert validator.parse(first) == first == "HELLO"
