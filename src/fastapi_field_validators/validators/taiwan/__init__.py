"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-10-19
@Docs: Taiwan-specific field validators.
台湾专用字段校验器。
"""

from fastapi_field_validators.validators.taiwan.documents import (
    BankAccountOptions,
    BankAccountValidator,
    InvoiceValidator,
    LicensePlateOptions,
    LicensePlateValidator,
    PassportOptions,
    PassportValidator,
    tw_bank_account,
    tw_invoice,
    tw_license_plate,
    tw_passport,
)
from fastapi_field_validators.validators.taiwan.ids import (
    BusinessIdValidator,
    NationalIdOptions,
    NationalIdValidator,
    business_id,
    national_id,
)
from fastapi_field_validators.validators.taiwan.phone import FaxValidator, MobileValidator, PhoneOptions, TelValidator, tw_fax, tw_mobile, tw_tel
from fastapi_field_validators.validators.taiwan.postal_code import PostalCodeOptions, PostalCodeValidator, postal_code

__all__ = [
    "BankAccountOptions",
    "BankAccountValidator",
    "InvoiceValidator",
    "LicensePlateOptions",
    "LicensePlateValidator",
    "PassportOptions",
    "PassportValidator",
    "tw_bank_account",
    "tw_invoice",
    "tw_license_plate",
    "tw_passport",
    "BusinessIdValidator",
    "NationalIdOptions",
    "NationalIdValidator",
    "business_id",
    "national_id",
    "FaxValidator",
    "MobileValidator",
    "PhoneOptions",
    "TelValidator",
    "tw_fax",
    "tw_mobile",
    "tw_tel",
    "PostalCodeOptions",
    "PostalCodeValidator",
    "postal_code",
]
