"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: number.py
@DateTime: 2026-10-19
@Docs: Number field validator.
数字字段校验器。

Check order / 检查顺序:
    NaN -> finite -> integer/float -> sign -> min -> max -> multipleOf -> precision
"""

import math
import re
from decimal import Decimal, InvalidOperation
from enum import StrEnum
from typing import Any

from fastapi_field_validators.core import PASS, ConstraintResult, FieldOptions, FieldValidator, Rule, check, fail

_DECIMAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\Z", re.ASCII)
_INTEGER_RE = re.compile(r"^[+-]?\d+\Z", re.ASCII)
_INFINITY_RE = re.compile(r"^([+-]?)Infinity\Z")


class NumberType(StrEnum):
    """Accepted number shapes.
    允许的数字形态。
    """

    INTEGER = "integer"
    FLOAT = "float"
    BOTH = "both"


def parse_number(text: str, *, parse_commas: bool = False) -> int | float:
    """
    Parse a decimal literal.
    解析十进制字面量。

    Args:
        text: Input text (surrounding whitespace is ignored).
        text: 输入文本（忽略首尾空白）。
        parse_commas: Strip grouping commas first.
        parse_commas: 是否先去除千分位逗号。

    Returns:
        int | float: ``int`` for integer literals, ``float`` otherwise;
            ``nan`` when the text is not a number.
        int | float: 整数字面量返回 ``int``，否则返回 ``float``；非数字时返回 ``nan``。
    """
    s = text.strip()
    if parse_commas:
        s = s.replace(",", "")
    if _INTEGER_RE.match(s):
        return int(s)
    if _DECIMAL_RE.match(s):
        return float(s)
    m = _INFINITY_RE.match(s)
    if m is not None:
        return -math.inf if m.group(1) == "-" else math.inf
    return math.nan


def _is_nan(value: int | float) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _is_integral(value: int | float) -> bool:
    return isinstance(value, int) or (math.isfinite(value) and value.is_integer())


def decimal_places(value: int | float) -> int:
    """Count decimal places of a number's shortest representation.
    统计数字最短表示形式的小数位数。
    """
    if isinstance(value, int):
        return 0
    exponent = Decimal(repr(value)).as_tuple().exponent
    return max(0, -exponent) if isinstance(exponent, int) else 0


def is_multiple_of(value: int | float, step: int | float) -> bool:
    """Exact decimal multiple check (``0.3`` is a multiple of ``0.1``).
    精确的十进制倍数判断（``0.3`` 是 ``0.1`` 的倍数）。
    """
    try:
        return Decimal(repr(value)) % Decimal(repr(step)) == 0
    except (InvalidOperation, ZeroDivisionError):
        return False


class NumberOptions(FieldOptions):
    """
    Number options.
    数字选项。

    Attributes:
        min: Inclusive lower bound.
        min: 下界（含）。
        max: Inclusive upper bound.
        max: 上界（含）。
        type: ``integer``, ``float`` or ``both``.
        type: ``integer``、``float`` 或 ``both``。
        positive: Require > 0.
        positive: 要求 > 0。
        negative: Require < 0.
        negative: 要求 < 0。
        non_negative: Require >= 0.
        non_negative: 要求 >= 0。
        non_positive: Require <= 0.
        non_positive: 要求 <= 0。
        multiple_of: Required step.
        multiple_of: 要求的步长。
        precision: Maximum decimal places.
        precision: 最大小数位数。
        finite: Reject infinities.
        finite: 是否拒绝无穷大。
        parse_commas: Strip grouping commas from strings.
        parse_commas: 是否去除字符串中的千分位逗号。
    """

    min: float | None = None
    max: float | None = None
    type: NumberType = NumberType.BOTH
    positive: bool = False
    negative: bool = False
    non_negative: bool = False
    non_positive: bool = False
    multiple_of: float | None = None
    precision: int | None = None
    finite: bool = True
    parse_commas: bool = False


class NumberValidator(FieldValidator[NumberOptions]):
    """Number validator.
    数字校验器。
    """

    kind = "number"
    options_model = NumberOptions

    def is_empty(self, value: Any) -> bool:
        return value is None or (isinstance(value, str) and not value.strip())

    def coerce(self, value: Any) -> int | float:
        if isinstance(value, bool):
            raise self.error("invalid")
        if isinstance(value, str):
            number = parse_number(value, parse_commas=self.options.parse_commas)
        elif isinstance(value, (int, float)):
            number = value
        else:
            raise self.error("invalid")
        if self.options.transform is not None and not _is_nan(number) and math.isfinite(number):
            number = self.options.transform(number)
        return number

    def build_rules(self) -> list[Rule]:
        opts = self.options
        rules: list[Rule] = [self._not_nan]
        if opts.finite:
            rules.append(lambda v: check(math.isfinite(v), "finite"))
        if opts.type is NumberType.INTEGER:
            rules.append(lambda v: check(_is_integral(v), "integer"))
        elif opts.type is NumberType.FLOAT:
            rules.append(lambda v: check(not _is_integral(v), "float"))
        if opts.positive:
            rules.append(lambda v: check(v > 0, "positive"))
        if opts.negative:
            rules.append(lambda v: check(v < 0, "negative"))
        if opts.non_negative:
            rules.append(lambda v: check(v >= 0, "nonNegative"))
        if opts.non_positive:
            rules.append(lambda v: check(v <= 0, "nonPositive"))
        if opts.min is not None:
            rules.append(lambda v: check(v >= opts.min, "min", min=opts.min))
        if opts.max is not None:
            rules.append(lambda v: check(v <= opts.max, "max", max=opts.max))
        if opts.multiple_of is not None:
            rules.append(lambda v: check(is_multiple_of(v, opts.multiple_of), "multipleOf", multipleOf=opts.multiple_of))
        if opts.precision is not None:
            rules.append(lambda v: check(decimal_places(v) <= opts.precision, "precision", precision=opts.precision))
        return rules

    def _not_nan(self, value: int | float) -> ConstraintResult:
        if not _is_nan(value):
            return PASS
        match self.options.type:
            case NumberType.INTEGER:
                return fail("integer")
            case NumberType.FLOAT:
                return fail("float")
            case _:
                return fail("invalid")


def number(required: bool | None = None, /, **options: Any) -> NumberValidator:
    """
    Create a number validator.
    创建数字校验器。

    Args:
        required: Reject empty input (default False).
        required: 是否拒绝空输入（默认 False）。
        **options: See ``NumberOptions``.
        **options: 参见 ``NumberOptions``。

    Returns:
        NumberValidator: Validator instance.
        NumberValidator: 校验器实例。

    Examples:
        >>> number(parse_commas=True).parse("1,234.5")
        1234.5
    """
    return NumberValidator.create(required, **options)
