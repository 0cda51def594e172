"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: ids.py
@DateTime: 2026-10-19
@Docs: Taiwan national ID and unified business number validators.
台湾身份证号与统一编号校验器。
"""

import re
from typing import Any

from fastapi_field_validators.algorithms.taiwan_ids import (
    NationalIdType,
    national_id_shape_ok,
    validate_taiwan_business_id,
    validate_taiwan_national_id,
)
from fastapi_field_validators.core import FieldOptions, FieldValidator, Rule, check
from fastapi_field_validators.normalization import Casing, normalize_text

_DIGITS_RE = re.compile(r"^\d+\Z", re.ASCII)


class NationalIdOptions(FieldOptions):
    """
    National ID options.
    身份证号选项。

    Attributes:
        type: ``citizen``, ``resident`` or ``both``.
        type: ``citizen``、``resident`` 或 ``both``。
        allow_old_resident: Accept old-format resident certificates.
        allow_old_resident: 是否接受旧式居留证号码。
    """

    type: NationalIdType = NationalIdType.BOTH
    allow_old_resident: bool = True


class NationalIdValidator(FieldValidator[NationalIdOptions]):
    """Taiwan national ID validator; returns the upper-cased ID.
    台湾身份证号校验器；返回大写号码。
    """

    kind = "nationalId"
    options_model = NationalIdOptions
    default_required = True

    def normalize(self, value: Any) -> str:
        return normalize_text(value, casing=Casing.UPPER, transform=self.options.transform)

    def build_rules(self) -> list[Rule]:
        opts = self.options
        return [
            lambda v: check(national_id_shape_ok(v, opts.type, opts.allow_old_resident), "invalid"),
            lambda v: check(validate_taiwan_national_id(v, opts.type, opts.allow_old_resident), "checksum"),
        ]


def national_id(required: bool | None = None, /, **options: Any) -> NationalIdValidator:
    """
    Create a Taiwan national ID validator (required by default).
    创建台湾身份证号校验器（默认必填）。

    Examples:
        >>> national_id().parse("a123456789")
        'A123456789'
    """
    return NationalIdValidator.create(required, **options)


class BusinessIdValidator(FieldValidator[FieldOptions]):
    """Taiwan unified business number validator.
    台湾统一编号校验器。
    """

    kind = "businessId"
    options_model = FieldOptions

    def normalize(self, value: Any) -> str:
        return normalize_text(value, transform=self.options.transform)

    def build_rules(self) -> list[Rule]:
        return [
            lambda v: check(bool(_DIGITS_RE.match(v)), "digits"),
            lambda v: check(len(v) == 8, "length"),
            lambda v: check(validate_taiwan_business_id(v), "checksum"),
        ]


def business_id(required: bool | None = None, /, **options: Any) -> BusinessIdValidator:
    """
    Create a Taiwan unified business number validator.
    创建台湾统一编号校验器。

    Examples:
        >>> business_id().parse("12345675")
        '12345675'
    """
    return BusinessIdValidator.create(required, **options)
