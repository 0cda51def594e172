"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: password.py
@DateTime: 2026-10-19
@Docs: Password composition checks and strength scoring.
密码组成检查与强度评分。
"""

import re
from enum import StrEnum


class PasswordStrength(StrEnum):
    """Strength levels, weakest first.
    强度等级（由弱到强）。
    """

    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    VERY_STRONG = "very-strong"


STRENGTH_ORDER: tuple[PasswordStrength, ...] = tuple(PasswordStrength)

COMMON_PASSWORDS: tuple[str, ...] = (
    "password",
    "123456",
    "123456789",
    "12345678",
    "12345",
    "1234567",
    "admin",
    "qwerty",
    "abc123",
    "password123",
    "letmein",
    "welcome",
    "monkey",
    "dragon",
    "sunshine",
    "princess",
)

UPPERCASE_RE = re.compile(r"[A-Z]")
LOWERCASE_RE = re.compile(r"[a-z]")
DIGIT_RE = re.compile(r"[0-9]")
SPECIAL_RE = re.compile(r"[!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?]")
REPEATING_RE = re.compile(r"(.)\1{2,}")
SEQUENTIAL_RE = re.compile(
    r"(?:abc|bcd|cde|def|efg|fgh|ghi|hij|ijk|jkl|klm|lmn|mno|nop|opq|pqr|qrs|rst|stu|tuv|uvw|vwx|wxy|xyz"
    r"|012|123|234|345|456|567|678|789)",
    re.IGNORECASE,
)


def has_repeating(value: str) -> bool:
    """Three or more identical characters in a row.
    连续三个及以上相同字符。
    """
    return bool(REPEATING_RE.search(value))


def has_sequential(value: str) -> bool:
    """An ascending run such as ``abc`` or ``123``.
    递增序列，例如 ``abc`` 或 ``123``。
    """
    return bool(SEQUENTIAL_RE.search(value))


def contains_common_password(value: str) -> bool:
    """Case-insensitive substring match against the common password list.
    与常见密码列表做不区分大小写的子串匹配。
    """
    lowered = value.lower()
    return any(common in lowered for common in COMMON_PASSWORDS)


def calculate_password_strength(value: str) -> PasswordStrength:
    """
    Score a password.
    为密码评分。

    One point each for length >= 8, 12 and 16 and for each character class;
    one point off for repeats and for sequences.
    长度 >= 8、12、16 及每种字符类别各加 1 分；重复与连续序列各扣 1 分。

    Args:
        value: Password.
        value: 密码。

    Returns:
        PasswordStrength: 0-2 weak, 3-4 medium, 5-6 strong, 7+ very-strong.
        PasswordStrength: 0-2 弱，3-4 中，5-6 强，7 及以上非常强。
    """
    score = sum(len(value) >= n for n in (8, 12, 16))
    score += sum(bool(p.search(value)) for p in (LOWERCASE_RE, UPPERCASE_RE, DIGIT_RE, SPECIAL_RE))
    score -= has_repeating(value)
    score -= has_sequential(value)
    if score <= 2:
        return PasswordStrength.WEAK
    if score <= 4:
        return PasswordStrength.MEDIUM
    if score <= 6:
        return PasswordStrength.STRONG
    return PasswordStrength.VERY_STRONG


def strength_at_least(value: str, minimum: PasswordStrength | str) -> bool:
    """Whether the password reaches a minimum strength.
    密码是否达到最低强度。
    """
    return STRENGTH_ORDER.index(calculate_password_strength(value)) >= STRENGTH_ORDER.index(PasswordStrength(minimum))
