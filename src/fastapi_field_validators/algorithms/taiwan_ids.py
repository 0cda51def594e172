"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: taiwan_ids.py
@DateTime: 2026-10-19
@Docs: Taiwan national ID / resident certificate and business ID checksums.
台湾身份证 / 居留证号码与统一编号校验和。
"""

import re
from enum import StrEnum


class NationalIdType(StrEnum):
    """Accepted national ID families.
    允许的身份证号码类别。
    """

    CITIZEN = "citizen"
    RESIDENT = "resident"
    BOTH = "both"


# Official letter-to-number table for the leading region letter.
REGION_CODES: dict[str, int] = {
    "A": 10, "B": 11, "C": 12, "D": 13, "E": 14, "F": 15, "G": 16, "H": 17,
    "I": 34, "J": 18, "K": 19, "L": 20, "M": 21, "N": 22, "O": 35, "P": 23,
    "Q": 24, "R": 25, "S": 26, "T": 27, "U": 28, "V": 29, "W": 32, "X": 30,
    "Y": 31, "Z": 33,
}  # fmt: skip

ID_WEIGHTS: tuple[int, ...] = (1, 9, 8, 7, 6, 5, 4, 3, 2, 1)
BUSINESS_ID_WEIGHTS: tuple[int, ...] = (1, 2, 1, 2, 1, 2, 4)

_ID_SHAPE_RE = re.compile(r"^[A-Z].{9}\Z")
_CITIZEN_RE = re.compile(r"^[A-Z][12]\d{8}\Z", re.ASCII)
_NEW_RESIDENT_RE = re.compile(r"^[A-Z][89]\d{8}\Z", re.ASCII)
_OLD_RESIDENT_RE = re.compile(r"^[A-Z][ABCD]\d{8}\Z", re.ASCII)
_BUSINESS_ID_RE = re.compile(r"^\d{8}\Z", re.ASCII)


def _check_digit(values: list[int]) -> int:
    """Weighted check digit over region digits plus body digits.
    对地区码数字与主体数字加权计算检查码。
    """
    total = sum(v * w for v, w in zip(values, ID_WEIGHTS, strict=False))
    return (10 - total % 10) % 10


def _region_digits(letter: str) -> list[int] | None:
    code = REGION_CODES.get(letter)
    if code is None:
        return None
    return [code // 10, code % 10]


def _numeric_id_ok(value: str) -> bool:
    region = _region_digits(value[0])
    if region is None:
        return False
    digits = [int(c) for c in value[1:]]
    return _check_digit(region + digits[:8]) == digits[8]


def validate_citizen_id(value: str) -> bool:
    """Citizen ID: letter, gender digit 1/2, 8 digits.
    国民身份证：字母 + 性别码 1/2 + 8 位数字。
    """
    return bool(_CITIZEN_RE.match(value)) and _numeric_id_ok(value)


def validate_new_resident_id(value: str) -> bool:
    """New-format resident certificate: letter, 8/9, 8 digits.
    新式居留证：字母 + 8/9 + 8 位数字。
    """
    return bool(_NEW_RESIDENT_RE.match(value)) and _numeric_id_ok(value)


def validate_old_resident_id(value: str) -> bool:
    """
    Old-format resident certificate: letter, gender letter A-D, 8 digits.
    旧式居留证：字母 + 性别字母 A-D + 8 位数字。

    The gender letter counts as 1 (A/C) or 0 (B/D) at the third weight.
    性别字母以 1（A/C）或 0（B/D）参与第三个权重计算。
    """
    if not _OLD_RESIDENT_RE.match(value):
        return False
    region = _region_digits(value[0])
    if region is None:
        return False
    gender = 1 if value[1] in ("A", "C") else 0
    digits = [int(c) for c in value[2:]]
    return _check_digit(region + [gender] + digits[:7]) == digits[7]


def national_id_shape_ok(value: str, id_type: NationalIdType | str = NationalIdType.BOTH, allow_old_resident: bool = True) -> bool:
    """
    Check only the structure (no checksum) for the accepted families.
    仅校验结构（不含检查码）。
    """
    if not _ID_SHAPE_RE.match(value):
        return False
    patterns: list[re.Pattern[str]] = []
    kind = NationalIdType(id_type)
    if kind in (NationalIdType.CITIZEN, NationalIdType.BOTH):
        patterns.append(_CITIZEN_RE)
    if kind in (NationalIdType.RESIDENT, NationalIdType.BOTH):
        patterns.append(_NEW_RESIDENT_RE)
        if allow_old_resident:
            patterns.append(_OLD_RESIDENT_RE)
    return value[0] in REGION_CODES and any(p.match(value) for p in patterns)


def validate_taiwan_national_id(
    value: str,
    id_type: NationalIdType | str = NationalIdType.BOTH,
    allow_old_resident: bool = True,
) -> bool:
    """
    Validate a Taiwan national ID or resident certificate number.
    校验台湾身份证或居留证号码。

    Args:
        value: Upper-case ID string.
        value: 大写身份证号码。
        id_type: ``citizen``, ``resident`` or ``both``.
        id_type: ``citizen``、``resident`` 或 ``both``。
        allow_old_resident: Accept old-format resident certificates.
        allow_old_resident: 是否接受旧式居留证。

    Returns:
        bool: True when structure and check digit are valid.
        bool: 结构与检查码均有效时返回 True。
    """
    if not isinstance(value, str) or not _ID_SHAPE_RE.match(value):
        return False
    kind = NationalIdType(id_type)
    if kind is NationalIdType.CITIZEN:
        return validate_citizen_id(value)
    resident_ok = (allow_old_resident and validate_old_resident_id(value)) or validate_new_resident_id(value)
    if kind is NationalIdType.RESIDENT:
        return resident_ok
    return validate_citizen_id(value) or resident_ok


def _digit_sum(n: int) -> int:
    return n // 10 + n % 10


def validate_taiwan_business_id(value: str) -> bool:
    """
    Validate a Taiwan unified business number (統一編號).
    校验台湾统一编号。

    Products of the weights ``1,2,1,2,1,2,4`` have their digits added, then the
    check digit. The total must be divisible by 5 (or by 10 under the old rule).
    When the 7th digit is 7 the product 28 may also count as 1, so ``total + 1``
    is accepted as well.
    权重乘积的各位数字相加后再加检查码，总和须被 5（旧规则为 10）整除；
    第 7 位为 7 时也接受 ``total + 1``。

    Args:
        value: 8-digit string.
        value: 8 位数字字符串。

    Returns:
        bool: True when valid.
        bool: 有效时返回 True。
    """
    if not isinstance(value, str) or not _BUSINESS_ID_RE.match(value):
        return False
    digits = [int(c) for c in value]
    total = sum(_digit_sum(d * w) for d, w in zip(digits[:7], BUSINESS_ID_WEIGHTS, strict=True)) + digits[7]
    if total % 5 == 0 or total % 10 == 0:
        return True
    if digits[6] == 7:
        alt = total + 1
        return alt % 5 == 0 or alt % 10 == 0
    return False
