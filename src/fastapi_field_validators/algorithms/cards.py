"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: cards.py
@DateTime: 2026-10-19
@Docs: Payment card checksum and brand detection.
支付卡校验和与卡组织识别。
"""

import re
from enum import StrEnum


class CardType(StrEnum):
    """Card brands.
    卡组织。
    """

    VISA = "visa"
    MASTERCARD = "mastercard"
    AMEX = "amex"
    JCB = "jcb"
    DISCOVER = "discover"
    UNIONPAY = "unionpay"
    ANY = "any"


# (prefix pattern, prefix length, min digits, max digits, brand)
CARD_PREFIXES: tuple[tuple[re.Pattern[str], int, int, int, CardType], ...] = (
    (re.compile(r"^6011"), 4, 16, 19, CardType.DISCOVER),
    (re.compile(r"^64[4-9]"), 3, 16, 19, CardType.DISCOVER),
    (re.compile(r"^65"), 2, 16, 19, CardType.DISCOVER),
    (re.compile(r"^62"), 2, 16, 19, CardType.UNIONPAY),
    (re.compile(r"^35"), 2, 16, 19, CardType.JCB),
    (re.compile(r"^3[47]"), 2, 15, 15, CardType.AMEX),
    (re.compile(r"^5[1-5]"), 2, 16, 16, CardType.MASTERCARD),
    (re.compile(r"^2[2-7]"), 2, 16, 16, CardType.MASTERCARD),
    (re.compile(r"^4"), 1, 13, 19, CardType.VISA),
)

_SEPARATORS_RE = re.compile(r"[\s-]")
_CARD_DIGITS_RE = re.compile(r"^\d{13,19}\Z", re.ASCII)


def clean_card_number(value: str) -> str:
    """Remove spaces and hyphens.
    移除空格与连字符。
    """
    return _SEPARATORS_RE.sub("", value)


def luhn_checksum_ok(digits: str) -> bool:
    """
    Check a digit string with the Luhn algorithm.
    使用 Luhn 算法校验数字串。

    Every second digit from the right is doubled; doubled values above 9
    have 9 subtracted. The total must be a multiple of 10.
    自右向左每隔一位乘 2，大于 9 的结果减 9；总和须为 10 的倍数。
    """
    if not digits or not (digits.isascii() and digits.isdigit()):
        return False
    total = 0
    for index, char in enumerate(reversed(digits)):
        n = int(char)
        if index % 2 == 1:
            n *= 2
            if n > 9:
                n -= 9
        total += n
    return total % 10 == 0


def validate_credit_card(value: str) -> bool:
    """
    Validate a card number (13-19 digits, Luhn).
    校验卡号（13-19 位数字，Luhn）。

    Args:
        value: Card number; spaces and hyphens are ignored.
        value: 卡号；忽略空格与连字符。

    Returns:
        bool: True when valid.
        bool: 有效时返回 True。
    """
    digits = clean_card_number(str(value))
    if not _CARD_DIGITS_RE.match(digits):
        return False
    return luhn_checksum_ok(digits)


def detect_card_type(value: str) -> CardType:
    """
    Detect the card brand by longest matching prefix.
    通过最长匹配前缀识别卡组织。

    Args:
        value: Card number.
        value: 卡号。

    Returns:
        CardType: Detected brand, or ``CardType.ANY`` when unknown.
        CardType: 识别出的卡组织；未知时返回 ``CardType.ANY``。
    """
    digits = clean_card_number(str(value))
    best: tuple[int, CardType] | None = None
    for pattern, prefix_len, min_len, max_len, brand in CARD_PREFIXES:
        if not pattern.match(digits) or not min_len <= len(digits) <= max_len:
            continue
        if best is None or prefix_len > best[0]:
            best = (prefix_len, brand)
    return best[1] if best is not None else CardType.ANY
