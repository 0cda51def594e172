"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_validators_taiwan.py
@DateTime: 2026-10-19
@Docs: Tests for the Taiwan-specific validators.
台湾专用校验器测试。
"""

import logging
from typing import Any

import pytest

from fastapi_field_validators import (
    business_id,
    national_id,
    postal_code,
    set_locale,
    tw_bank_account,
    tw_fax,
    tw_invoice,
    tw_license_plate,
    tw_mobile,
    tw_passport,
    tw_tel,
)
from fastapi_field_validators.exceptions import ValidationError


def _key(validator: Any, value: Any) -> str:
    with pytest.raises(ValidationError) as exc_info:
        validator.parse(value)
    return exc_info.value.key


class TestNationalId:
    """Tests for national_id().
    national_id() 测试。
    """

    def test_required_by_default(self) -> None:
        assert _key(national_id(), None) == "required"

    def test_upper_cases(self) -> None:
        assert national_id().parse(" a123456789 ") == "A123456789"

    def test_checksum(self) -> None:
        assert _key(national_id(), "A123456788") == "checksum"

    def test_shape(self) -> None:
        assert _key(national_id(), "12345") == "invalid"

    def test_residents(self) -> None:
        assert national_id().parse("A800000014") == "A800000014"
        assert national_id(type="resident").parse("AA00000001") == "AA00000001"
        assert _key(national_id(type="resident", allow_old_resident=False), "AA00000001") == "invalid"

    def test_localized_message(self) -> None:
        set_locale("zh-TW")
        with pytest.raises(ValidationError) as exc_info:
            national_id().parse("A123456788")
        assert exc_info.value.message == "無效的身分證字號檢查碼"


class TestBusinessId:
    """Tests for business_id().
    business_id() 测试。
    """

    def test_valid(self) -> None:
        assert business_id().parse("12345675") == "12345675"
        assert business_id().parse("04595257") == "04595257"

    def test_rule_order(self) -> None:
        """digits -> length -> checksum / 数字 -> 长度 -> 检查码。"""
        assert _key(business_id(), "1234567a") == "digits"
        assert _key(business_id(), "1234567") == "length"
        assert _key(business_id(), "12345672") == "checksum"

    def test_full_width_digits(self) -> None:
        assert _key(business_id(), "１２３４５６７５") == "digits"
        assert _key(national_id(), "A１２３４５６７８９") == "invalid"

    def test_message(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            business_id().parse("1234567")
        assert exc_info.value.message == "Must be exactly 8 digits"


class TestPhones:
    """Tests for tw_mobile(), tw_tel() and tw_fax().
    tw_mobile()、tw_tel() 与 tw_fax() 测试。
    """

    def test_mobile(self) -> None:
        assert tw_mobile().parse("0912-345-678") == "0912-345-678"
        assert _key(tw_mobile(), "0812345678") == "invalid"

    def test_tel(self) -> None:
        assert tw_tel().parse("02-2345-6789") == "02-2345-6789"
        assert _key(tw_tel(), "0912345678") == "invalid"

    def test_fax(self) -> None:
        assert tw_fax().parse("0223456789") == "0223456789"
        assert _key(tw_fax(), "0800123456") == "invalid"

    def test_fax_whitelist_exclusive(self) -> None:
        validator = tw_fax(whitelist=["0223456789"])
        assert _key(validator, "0287654321") == "notInWhitelist"

    def test_mobile_whitelist_only_message(self) -> None:
        validator = tw_mobile(whitelist=["0900000000"], whitelist_only=True)
        assert validator.parse("0900000000") == "0900000000"
        with pytest.raises(ValidationError) as exc_info:
            validator.parse("0912345678")
        assert exc_info.value.key == "notInWhitelist"
        assert exc_info.value.message == "Not in allowed mobile phone list"
        set_locale("zh-TW")
        with pytest.raises(ValidationError) as exc_info:
            validator.parse("0912345678")
        assert exc_info.value.message == "不在允許的手機號碼清單中"


class TestPostalCode:
    """Tests for postal_code().
    postal_code() 测试。
    """

    def test_strips_separators(self) -> None:
        assert postal_code().parse("100-001") == "100001"
        assert postal_code().parse("100") == "100"

    def test_default_rejects_five_digits(self) -> None:
        assert _key(postal_code(), "10001") == "invalid"

    def test_single_format_keys(self) -> None:
        assert _key(postal_code(format="3"), "100001") == "format3Only"
        assert _key(postal_code(format="6"), "100") == "format6Only"
        assert _key(postal_code(format="5"), "100") == "format5Only"

    def test_deprecated_five_digit(self) -> None:
        assert _key(postal_code(format="all", deprecate_5_digit=True), "10001") == "deprecated5Digit"

    def test_strict_suffix(self) -> None:
        validator = postal_code(strict_suffix_validation=True)
        assert validator.parse("880500") == "880500"
        assert _key(validator, "880501") == "invalidSuffix"

    def test_unknown_prefix(self) -> None:
        assert _key(postal_code(), "101") == "invalid"
        assert postal_code(strict_validation=False).parse("101") == "101"

    def test_legacy_five_digit_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """Legacy codes pass but are logged / 旧制号码通过但记录日志。"""
        with caplog.at_level(logging.WARNING, logger="fastapi_field_validators"):
            assert postal_code(format="all").parse("10001") == "10001"
        assert "legacy format" in caplog.text

    def test_no_warning_for_five_only(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="fastapi_field_validators"):
            postal_code(format="5").parse("10001")
        assert "legacy format" not in caplog.text


class TestDocuments:
    """Tests for bank account, invoice, plate and passport validators.
    银行账号、发票、车牌与护照校验器测试。
    """

    def test_bank_account(self) -> None:
        assert tw_bank_account().parse("004-1234567890") == "004-1234567890"
        assert tw_bank_account().parse("004 - 1234567890") == "004-1234567890"
        assert _key(tw_bank_account(), "999-1234567890") == "invalidBankCode"
        assert _key(tw_bank_account(), "004-12") == "invalidAccountNumber"
        assert _key(tw_bank_account(), "004-123-4567890") == "invalid"

    def test_bank_code_option(self) -> None:
        assert tw_bank_account(bank_code="004").parse("1234567890") == "004-1234567890"

    def test_invoice(self) -> None:
        assert tw_invoice().parse("ab-12345678") == "AB12345678"
        assert _key(tw_invoice(), "A123456789") == "invalid"

    def test_license_plate(self) -> None:
        assert tw_license_plate().parse("abc-1234") == "ABC1234"
        assert _key(tw_license_plate(plate_type="car"), "123ABC") == "invalid"
        assert tw_license_plate(plate_type="motorcycle").parse("123-abc") == "123ABC"

    def test_passport(self) -> None:
        assert tw_passport().parse("3 1234 5678") == "312345678"
        assert _key(tw_passport(passport_type="diplomatic"), "212345678") == "invalid"
