"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: taiwan_phone.py
@DateTime: 2026-10-19
@Docs: Table-driven Taiwan landline, fax and mobile number checks.
表驱动的台湾市话、传真与手机号码校验。

Each area code maps to the subscriber leading digits it allows and the total
digit counts (area code included). Longer area codes are matched first, and
mobile prefixes (09) have no entry.
每个区号对应允许的用户号码首位数字与总位数（含区号）；
优先匹配较长区号，手机前缀（09）不在表中。
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AreaRule:
    """Rule for one area code.
    单个区号的规则。

    Attributes:
        leading: Allowed first subscriber digits, or None for any digit.
            允许的用户号码首位数字；None 表示任意。
        lengths: Allowed total digit counts.
            允许的总位数。
    """

    leading: str | None
    lengths: frozenset[int]


def _rule(leading: str | None, *lengths: int) -> AreaRule:
    return AreaRule(leading=leading, lengths=frozenset(lengths))


TEL_AREA_RULES: dict[str, AreaRule] = {
    "0800": _rule(None, 10),
    "0809": _rule(None, 10),
    "0836": _rule(None, 9, 10),
    "037": _rule("23456789", 9, 10),
    "049": _rule(None, 9, 10),
    "082": _rule(None, 9),
    "089": _rule(None, 9),
    "02": _rule("23456789", 10),
    "03": _rule(None, 9, 10),
    "04": _rule(None, 9, 10),
    "05": _rule(None, 9),
    "06": _rule(None, 9),
    "07": _rule("23456789", 9, 10),
    "08": _rule("478", 9),
}

FAX_AREA_RULES: dict[str, AreaRule] = {
    "0826": _rule("6", 9),
    "0836": _rule("23456789", 9),
    "037": _rule("23456789", 9),
    "049": _rule("23456789", 10),
    "082": _rule("2345789", 9),
    "089": _rule("23456789", 9),
    "02": _rule("235678", 10),
    "03": _rule(None, 9),
    "04": _rule(None, 9),
    "05": _rule(None, 9),
    "06": _rule(None, 9),
    "07": _rule("23456789", 9),
    "08": _rule("478", 9),
}

_LANDLINE_SHAPE_RE = re.compile(r"^0\d{7,10}\Z", re.ASCII)
_MOBILE_RE = re.compile(r"^09\d{8}\Z", re.ASCII)
_SEPARATORS_RE = re.compile(r"[-\s]")


def clean_phone(value: str) -> str:
    """Remove hyphens and whitespace.
    移除连字符与空白。
    """
    return _SEPARATORS_RE.sub("", value)


def match_area_rule(digits: str, table: dict[str, AreaRule]) -> tuple[str, AreaRule] | None:
    """
    Find the longest area code prefix present in a table.
    在表中查找最长的区号前缀。

    Args:
        digits: Cleaned number.
        digits: 清理后的号码。
        table: Area-code table.
        table: 区号表。

    Returns:
        tuple[str, AreaRule] | None: Matched area code and rule.
        tuple[str, AreaRule] | None: 匹配到的区号与规则。
    """
    for size in (4, 3, 2):
        code = digits[:size]
        rule = table.get(code)
        if rule is not None:
            return code, rule
    return None


def _landline_ok(value: str, table: dict[str, AreaRule]) -> bool:
    digits = clean_phone(value)
    if not _LANDLINE_SHAPE_RE.match(digits):
        return False
    found = match_area_rule(digits, table)
    if found is None:
        return False
    code, rule = found
    if len(digits) not in rule.lengths:
        return False
    if rule.leading is not None and digits[len(code)] not in rule.leading:
        return False
    return True


def validate_taiwan_tel(value: str) -> bool:
    """
    Validate a Taiwan landline number.
    校验台湾市话号码。

    Args:
        value: Number; hyphens and spaces are ignored.
        value: 号码；忽略连字符与空格。

    Returns:
        bool: True when valid.
        bool: 有效时返回 True。
    """
    return _landline_ok(value, TEL_AREA_RULES)


def validate_taiwan_fax(value: str) -> bool:
    """Validate a Taiwan fax number.
    校验台湾传真号码。
    """
    return _landline_ok(value, FAX_AREA_RULES)


def validate_taiwan_mobile(value: str) -> bool:
    """Validate a Taiwan mobile number (``09`` + 8 digits).
    校验台湾手机号码（``09`` + 8 位数字）。
    """
    return bool(_MOBILE_RE.match(clean_phone(value)))
