"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: coordinate.py
@DateTime: 2026-10-19
@Docs: Latitude/longitude field validator.
经纬度字段校验器。
"""

import math
from enum import StrEnum
from typing import Any

from fastapi_field_validators.core import PASS, ConstraintResult, FieldOptions, FieldValidator, Rule, fail
from fastapi_field_validators.normalization import normalize_text
from fastapi_field_validators.validators.common.number import decimal_places, parse_number


class CoordinateType(StrEnum):
    """Coordinate input shapes.
    坐标输入形态。
    """

    PAIR = "pair"
    LATITUDE = "latitude"
    LONGITUDE = "longitude"


def validate_latitude(value: float) -> bool:
    """Latitude in [-90, 90].
    纬度位于 [-90, 90]。
    """
    return math.isfinite(value) and -90 <= value <= 90


def validate_longitude(value: float) -> bool:
    """Longitude in [-180, 180].
    经度位于 [-180, 180]。
    """
    return math.isfinite(value) and -180 <= value <= 180


class CoordinateOptions(FieldOptions):
    """
    Coordinate options.
    坐标选项。

    Attributes:
        type: ``pair`` (``"lat,lng"``), ``latitude`` or ``longitude``.
        type: ``pair``（``"纬度,经度"``）、``latitude`` 或 ``longitude``。
        precision: Maximum decimal places of each number.
        precision: 每个数字的最大小数位数。
    """

    type: CoordinateType = CoordinateType.PAIR
    precision: int | None = None


class CoordinateValidator(FieldValidator[CoordinateOptions]):
    """Coordinate validator; returns the normalized string.
    坐标校验器；返回规范化后的字符串。
    """

    kind = "coordinate"
    options_model = CoordinateOptions

    def normalize(self, value: Any) -> str:
        return normalize_text(value, transform=self.options.transform)

    def build_rules(self) -> list[Rule]:
        match self.options.type:
            case CoordinateType.LATITUDE:
                return [lambda v: self._single(v, validate_latitude, "invalidLatitude")]
            case CoordinateType.LONGITUDE:
                return [lambda v: self._single(v, validate_longitude, "invalidLongitude")]
            case _:
                return [self._pair]

    def _precision_ok(self, *numbers: float) -> bool:
        precision = self.options.precision
        return precision is None or all(decimal_places(n) <= precision for n in numbers)

    def _single(self, value: str, in_range: Any, key: str) -> ConstraintResult:
        n = parse_number(value)
        if not in_range(n):
            return fail(key)
        return PASS if self._precision_ok(n) else fail("invalid")

    def _pair(self, value: str) -> ConstraintResult:
        parts = value.split(",")
        if len(parts) != 2:
            return fail("invalid")
        lat, lng = parse_number(parts[0]), parse_number(parts[1])
        if math.isnan(lat) or math.isnan(lng):
            return fail("invalid")
        if not validate_latitude(lat):
            return fail("invalidLatitude")
        if not validate_longitude(lng):
            return fail("invalidLongitude")
        return PASS if self._precision_ok(lat, lng) else fail("invalid")


def coordinate(required: bool | None = None, /, **options: Any) -> CoordinateValidator:
    """
    Create a coordinate validator.
    创建坐标校验器。

    Examples:
        >>> coordinate().parse("25.0330, 121.5654")
        '25.0330, 121.5654'
    """
    return CoordinateValidator.create(required, **options)
