"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-10-19
@Docs: Pure checksum and format algorithms (no exceptions, no locale).
纯校验和与格式算法（不抛异常、与语言无关）。
"""

from fastapi_field_validators.algorithms.cards import CardType, detect_card_type, luhn_checksum_ok, validate_credit_card
from fastapi_field_validators.algorithms.color import ColorFormat, validate_color, validate_hex, validate_hsl, validate_rgb
from fastapi_field_validators.algorithms.datetime_formats import (
    DATETIME_PATTERNS,
    TIME_PATTERNS,
    normalize_datetime_value,
    normalize_time,
    parse_datetime_value,
    parse_time_to_minutes,
    validate_datetime_format,
    validate_time_format,
)
from fastapi_field_validators.algorithms.identifiers import ID_PATTERNS, IdType, detect_id_type, validate_id_type
from fastapi_field_validators.algorithms.network import IpVersion, parse_url, validate_email, validate_ipv4, validate_ipv6
from fastapi_field_validators.algorithms.password import PasswordStrength, calculate_password_strength
from fastapi_field_validators.algorithms.taiwan_documents import (
    TAIWAN_BANK_CODES,
    PassportType,
    PlateType,
    validate_taiwan_bank_account,
    validate_taiwan_invoice,
    validate_taiwan_license_plate,
    validate_taiwan_passport,
)
from fastapi_field_validators.algorithms.taiwan_ids import NationalIdType, validate_taiwan_business_id, validate_taiwan_national_id
from fastapi_field_validators.algorithms.taiwan_phone import validate_taiwan_fax, validate_taiwan_mobile, validate_taiwan_tel
from fastapi_field_validators.algorithms.taiwan_postal import (
    POSTAL_CODE_RANGES,
    VALID_3_DIGIT_PREFIXES,
    PostalCodeFormat,
    get_postal_code_ranges,
    validate_3_digit_postal_code,
    validate_5_digit_postal_code,
    validate_6_digit_postal_code,
    validate_taiwan_postal_code,
)

__all__ = [
    "CardType",
    "detect_card_type",
    "luhn_checksum_ok",
    "validate_credit_card",
    "ColorFormat",
    "validate_color",
    "validate_hex",
    "validate_rgb",
    "validate_hsl",
    "DATETIME_PATTERNS",
    "TIME_PATTERNS",
    "normalize_datetime_value",
    "normalize_time",
    "parse_datetime_value",
    "parse_time_to_minutes",
    "validate_datetime_format",
    "validate_time_format",
    "ID_PATTERNS",
    "IdType",
    "detect_id_type",
    "validate_id_type",
    "IpVersion",
    "parse_url",
    "validate_email",
    "validate_ipv4",
    "validate_ipv6",
    "PasswordStrength",
    "calculate_password_strength",
    "TAIWAN_BANK_CODES",
    "PassportType",
    "PlateType",
    "validate_taiwan_bank_account",
    "validate_taiwan_invoice",
    "validate_taiwan_license_plate",
    "validate_taiwan_passport",
    "NationalIdType",
    "validate_taiwan_business_id",
    "validate_taiwan_national_id",
    "validate_taiwan_fax",
    "validate_taiwan_mobile",
    "validate_taiwan_tel",
    "POSTAL_CODE_RANGES",
    "VALID_3_DIGIT_PREFIXES",
    "PostalCodeFormat",
    "get_postal_code_ranges",
    "validate_3_digit_postal_code",
    "validate_5_digit_postal_code",
    "validate_6_digit_postal_code",
    "validate_taiwan_postal_code",
]
