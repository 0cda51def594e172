"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-10-19
@Docs: General-purpose field validators.
通用字段校验器。
"""

from fastapi_field_validators.validators.common.boolean import BooleanOptions, BooleanValidator, boolean
from fastapi_field_validators.validators.common.color import ColorOptions, ColorValidator, color
from fastapi_field_validators.validators.common.coordinate import (
    CoordinateOptions,
    CoordinateType,
    CoordinateValidator,
    coordinate,
    validate_latitude,
    validate_longitude,
)
from fastapi_field_validators.validators.common.credit_card import CreditCardOptions, CreditCardValidator, credit_card
from fastapi_field_validators.validators.common.email import EmailOptions, EmailValidator, email
from fastapi_field_validators.validators.common.file import (
    ARCHIVE_TYPES,
    AUDIO_TYPES,
    DOCUMENT_TYPES,
    IMAGE_TYPES,
    VIDEO_TYPES,
    FileInfo,
    FileOptions,
    FileValidator,
    describe_file,
    file,
    file_extension,
    format_file_size,
    normalize_extension,
)
from fastapi_field_validators.validators.common.identifier import IdOptions, IdValidator, identifier
from fastapi_field_validators.validators.common.ip import IpOptions, IpValidator, ip
from fastapi_field_validators.validators.common.number import NumberOptions, NumberType, NumberValidator, number, parse_number
from fastapi_field_validators.validators.common.password import PasswordOptions, PasswordValidator, password
from fastapi_field_validators.validators.common.temporal import (
    DateOptions,
    DateTimeOptions,
    DateTimeValidator,
    DateValidator,
    TimeOptions,
    TimeValidator,
    date,
    datetime,
    time,
)
from fastapi_field_validators.validators.common.text import TextOptions, TextValidator, text
from fastapi_field_validators.validators.common.url import UrlOptions, UrlValidator, url

__all__ = [
    "BooleanOptions",
    "BooleanValidator",
    "boolean",
    "ColorOptions",
    "ColorValidator",
    "color",
    "CoordinateOptions",
    "CoordinateType",
    "CoordinateValidator",
    "coordinate",
    "validate_latitude",
    "validate_longitude",
    "CreditCardOptions",
    "CreditCardValidator",
    "credit_card",
    "EmailOptions",
    "EmailValidator",
    "email",
    "ARCHIVE_TYPES",
    "AUDIO_TYPES",
    "DOCUMENT_TYPES",
    "IMAGE_TYPES",
    "VIDEO_TYPES",
    "FileInfo",
    "FileOptions",
    "FileValidator",
    "describe_file",
    "file",
    "file_extension",
    "format_file_size",
    "normalize_extension",
    "IdOptions",
    "IdValidator",
    "identifier",
    "IpOptions",
    "IpValidator",
    "ip",
    "NumberOptions",
    "NumberType",
    "NumberValidator",
    "number",
    "parse_number",
    "PasswordOptions",
    "PasswordValidator",
    "password",
    "DateOptions",
    "DateTimeOptions",
    "DateTimeValidator",
    "DateValidator",
    "TimeOptions",
    "TimeValidator",
    "date",
    "datetime",
    "time",
    "TextOptions",
    "TextValidator",
    "text",
    "UrlOptions",
    "UrlValidator",
    "url",
]
