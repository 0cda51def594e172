"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: documents.py
@DateTime: 2026-10-19
@Docs: Taiwan bank account, invoice, license plate and passport validators.
台湾银行账号、统一发票、车牌与护照号码校验器。
"""

from typing import Any

from fastapi_field_validators.algorithms.taiwan_documents import (
    PassportType,
    PlateType,
    account_number_ok,
    bank_code_ok,
    split_bank_account,
    validate_taiwan_invoice,
    validate_taiwan_license_plate,
    validate_taiwan_passport,
)
from fastapi_field_validators.core import PASS, ConstraintResult, FieldOptions, FieldValidator, Rule, check, fail
from fastapi_field_validators.normalization import Casing, normalize_text, strip_chars


class BankAccountOptions(FieldOptions):
    """
    Bank account options.
    银行账号选项。

    Attributes:
        validate_bank_code: Require a known bank code.
        validate_bank_code: 是否要求为已知银行代码。
        bank_code: Prefixed as ``code-`` when the input has no dash.
        bank_code: 输入不含连字符时以 ``代码-`` 形式前置。
    """

    validate_bank_code: bool = True
    bank_code: str | None = None


class BankAccountValidator(FieldValidator[BankAccountOptions]):
    """Taiwan bank account validator (``[code-]account``).
    台湾银行账号校验器（``[代码-]账号``）。
    """

    kind = "bankAccount"
    options_model = BankAccountOptions

    def normalize(self, value: Any) -> str:
        opts = self.options
        text = normalize_text(strip_chars(normalize_text(value), r"\s"), transform=opts.transform)
        if opts.bank_code and "-" not in text:
            text = f"{opts.bank_code}-{text}"
        return text

    def build_rules(self) -> list[Rule]:
        return [self._account_ok]

    def _account_ok(self, value: str) -> ConstraintResult:
        parts = split_bank_account(value)
        if parts is None:
            return fail("invalid")
        if parts.bank_code is not None:
            if not bank_code_ok(parts.bank_code, self.options.validate_bank_code):
                return fail("invalidBankCode")
        if not account_number_ok(parts.account_number):
            return fail("invalidAccountNumber")
        return PASS


def tw_bank_account(required: bool | None = None, /, **options: Any) -> BankAccountValidator:
    """
    Create a Taiwan bank account validator.
    创建台湾银行账号校验器。

    Examples:
        >>> tw_bank_account().parse("004-1234567890")
        '004-1234567890'
    """
    return BankAccountValidator.create(required, **options)


class InvoiceValidator(FieldValidator[FieldOptions]):
    """Taiwan uniform invoice validator; returns e.g. ``AB12345678``.
    台湾统一发票校验器；返回形如 ``AB12345678`` 的号码。
    """

    kind = "invoice"
    options_model = FieldOptions

    def normalize(self, value: Any) -> str:
        text = normalize_text(value, casing=Casing.UPPER).replace("-", "")
        return normalize_text(text, transform=self.options.transform)

    def build_rules(self) -> list[Rule]:
        return [lambda v: check(validate_taiwan_invoice(v), "invalid")]


def tw_invoice(required: bool | None = None, /, **options: Any) -> InvoiceValidator:
    """Create a Taiwan uniform invoice validator.
    创建台湾统一发票校验器。
    """
    return InvoiceValidator.create(required, **options)


class LicensePlateOptions(FieldOptions):
    """
    License plate options.
    车牌选项。

    Attributes:
        plate_type: ``car``, ``motorcycle`` or ``any``.
        plate_type: ``car``、``motorcycle`` 或 ``any``。
    """

    plate_type: PlateType = PlateType.ANY


class LicensePlateValidator(FieldValidator[LicensePlateOptions]):
    """Taiwan license plate validator; returns upper case without separators.
    台湾车牌校验器；返回去除分隔符的大写号码。
    """

    kind = "licensePlate"
    options_model = LicensePlateOptions

    def normalize(self, value: Any) -> str:
        text = strip_chars(normalize_text(value, casing=Casing.UPPER))
        return normalize_text(text, transform=self.options.transform)

    def build_rules(self) -> list[Rule]:
        plate_type = self.options.plate_type
        return [lambda v: check(validate_taiwan_license_plate(v, plate_type), "invalid")]


def tw_license_plate(required: bool | None = None, /, **options: Any) -> LicensePlateValidator:
    """
    Create a Taiwan license plate validator.
    创建台湾车牌校验器。

    Examples:
        >>> tw_license_plate().parse("abc-1234")
        'ABC1234'
    """
    return LicensePlateValidator.create(required, **options)


class PassportOptions(FieldOptions):
    """
    Passport options.
    护照选项。

    Attributes:
        passport_type: ``diplomatic``, ``official``, ``ordinary``, ``travel`` or ``any``.
        passport_type: 护照类别或 ``any``。
    """

    passport_type: PassportType = PassportType.ANY


class PassportValidator(FieldValidator[PassportOptions]):
    """Taiwan passport validator.
    台湾护照号码校验器。
    """

    kind = "passport"
    options_model = PassportOptions

    def normalize(self, value: Any) -> str:
        return normalize_text(strip_chars(normalize_text(value)), transform=self.options.transform)

    def build_rules(self) -> list[Rule]:
        passport_type = self.options.passport_type
        return [lambda v: check(validate_taiwan_passport(v, passport_type), "invalid")]


def tw_passport(required: bool | None = None, /, **options: Any) -> PassportValidator:
    """Create a Taiwan passport validator.
    创建台湾护照号码校验器。
    """
    return PassportValidator.create(required, **options)
