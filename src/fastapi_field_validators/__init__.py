"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-10-19
@Docs: Package exports for fastapi_field_validators.
fastapi_field_validators 包导出定义。
"""

from fastapi_field_validators.algorithms import (
    DATETIME_PATTERNS,
    ID_PATTERNS,
    POSTAL_CODE_RANGES,
    TAIWAN_BANK_CODES,
    TIME_PATTERNS,
    VALID_3_DIGIT_PREFIXES,
    CardType,
    ColorFormat,
    IdType,
    IpVersion,
    NationalIdType,
    PassportType,
    PasswordStrength,
    PlateType,
    PostalCodeFormat,
    calculate_password_strength,
    detect_card_type,
    detect_id_type,
    get_postal_code_ranges,
    normalize_datetime_value,
    normalize_time,
    parse_datetime_value,
    parse_time_to_minutes,
    validate_3_digit_postal_code,
    validate_5_digit_postal_code,
    validate_6_digit_postal_code,
    validate_color,
    validate_credit_card,
    validate_datetime_format,
    validate_email,
    validate_hex,
    validate_hsl,
    validate_id_type,
    validate_ipv4,
    validate_ipv6,
    validate_rgb,
    validate_taiwan_bank_account,
    validate_taiwan_business_id,
    validate_taiwan_fax,
    validate_taiwan_invoice,
    validate_taiwan_license_plate,
    validate_taiwan_mobile,
    validate_taiwan_national_id,
    validate_taiwan_passport,
    validate_taiwan_postal_code,
    validate_taiwan_tel,
    validate_time_format,
)
from fastapi_field_validators.annotated import annotated, as_pydantic_validator
from fastapi_field_validators.batch import validate_dataframe, validate_rows
from fastapi_field_validators.config import ValidatorsConfig, resolve_config
from fastapi_field_validators.core import (
    PASS,
    ConstraintResult,
    FieldOptions,
    FieldValidator,
    WhitelistMode,
    WhitelistOptions,
    check,
    fail,
    first_failure,
)
from fastapi_field_validators.exceptions import ConfigurationError, FieldValidatorError, ValidationError
from fastapi_field_validators.locale import get_locale, reset_locale, set_locale
from fastapi_field_validators.messages import interpolate, resolve_message
from fastapi_field_validators.normalization import Casing, TrimMode
from fastapi_field_validators.validators.common import (
    boolean,
    color,
    coordinate,
    credit_card,
    date,
    datetime,
    email,
    file,
    format_file_size,
    identifier,
    ip,
    number,
    password,
    text,
    time,
    url,
    validate_latitude,
    validate_longitude,
)
from fastapi_field_validators.validators.taiwan import (
    business_id,
    national_id,
    postal_code,
    tw_bank_account,
    tw_fax,
    tw_invoice,
    tw_license_plate,
    tw_mobile,
    tw_passport,
    tw_tel,
)

__all__ = [
    "boolean",
    "color",
    "coordinate",
    "credit_card",
    "date",
    "datetime",
    "email",
    "file",
    "identifier",
    "ip",
    "number",
    "password",
    "text",
    "time",
    "url",
    "business_id",
    "national_id",
    "postal_code",
    "tw_bank_account",
    "tw_fax",
    "tw_invoice",
    "tw_license_plate",
    "tw_mobile",
    "tw_passport",
    "tw_tel",
    "FieldValidatorError",
    "ValidationError",
    "ConfigurationError",
    "ValidatorsConfig",
    "resolve_config",
    "set_locale",
    "get_locale",
    "reset_locale",
    "resolve_message",
    "interpolate",
    "PASS",
    "ConstraintResult",
    "FieldOptions",
    "FieldValidator",
    "WhitelistMode",
    "WhitelistOptions",
    "check",
    "fail",
    "first_failure",
    "Casing",
    "TrimMode",
    "annotated",
    "as_pydantic_validator",
    "validate_rows",
    "validate_dataframe",
    "CardType",
    "ColorFormat",
    "IdType",
    "IpVersion",
    "NationalIdType",
    "PassportType",
    "PasswordStrength",
    "PlateType",
    "PostalCodeFormat",
    "DATETIME_PATTERNS",
    "ID_PATTERNS",
    "POSTAL_CODE_RANGES",
    "TAIWAN_BANK_CODES",
    "TIME_PATTERNS",
    "VALID_3_DIGIT_PREFIXES",
    "calculate_password_strength",
    "detect_card_type",
    "detect_id_type",
    "format_file_size",
    "get_postal_code_ranges",
    "normalize_datetime_value",
    "normalize_time",
    "parse_datetime_value",
    "parse_time_to_minutes",
    "validate_3_digit_postal_code",
    "validate_5_digit_postal_code",
    "validate_6_digit_postal_code",
    "validate_color",
    "validate_credit_card",
    "validate_datetime_format",
    "validate_email",
    "validate_hex",
    "validate_hsl",
    "validate_id_type",
    "validate_ipv4",
    "validate_ipv6",
    "validate_latitude",
    "validate_longitude",
    "validate_rgb",
    "validate_taiwan_bank_account",
    "validate_taiwan_business_id",
    "validate_taiwan_fax",
    "validate_taiwan_invoice",
    "validate_taiwan_license_plate",
    "validate_taiwan_mobile",
    "validate_taiwan_national_id",
    "validate_taiwan_passport",
    "validate_taiwan_postal_code",
    "validate_taiwan_tel",
    "validate_time_format",
]
