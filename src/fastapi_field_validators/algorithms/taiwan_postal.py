"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: taiwan_postal.py
@DateTime: 2026-10-19
@Docs: Taiwan postal code (3 / 3+2 / 3+3) tables and checks.
台湾邮递区号（3 码 / 3+2 / 3+3）数据表与校验。
"""

import re
from collections.abc import Collection
from dataclasses import dataclass
from enum import StrEnum


class PostalCodeFormat(StrEnum):
    """Accepted postal code lengths.
    允许的邮递区号长度组合。
    """

    THREE = "3"
    FIVE = "5"
    SIX = "6"
    THREE_OR_FIVE = "3+5"
    THREE_OR_SIX = "3+6"
    FIVE_OR_SIX = "5+6"
    ALL = "all"


FORMAT_LENGTHS: dict[PostalCodeFormat, frozenset[int]] = {
    PostalCodeFormat.THREE: frozenset({3}),
    PostalCodeFormat.FIVE: frozenset({5}),
    PostalCodeFormat.SIX: frozenset({6}),
    PostalCodeFormat.THREE_OR_FIVE: frozenset({3, 5}),
    PostalCodeFormat.THREE_OR_SIX: frozenset({3, 6}),
    PostalCodeFormat.FIVE_OR_SIX: frozenset({5, 6}),
    PostalCodeFormat.ALL: frozenset({3, 5, 6}),
}


def _span(start: int, end: int) -> list[str]:
    return [f"{n:03d}" for n in range(start, end + 1)]


VALID_3_DIGIT_PREFIXES: frozenset[str] = frozenset(
    # Taipei City
    ["100"] + _span(103, 106) + ["108"] + _span(110, 112) + _span(114, 116)
    # Keelung City, New Taipei City, Lienchiang County
    + _span(200, 212) + _span(220, 224) + _span(226, 228) + _span(231, 239)
    + _span(241, 244) + _span(247, 249) + _span(251, 253)
    # Yilan County
    + _span(260, 269)
    # Hsinchu, Taoyuan
    + ["300"] + _span(302, 308) + _span(310, 318) + ["320"] + _span(324, 328) + ["330"] + _span(333, 338)
    # Miaoli County
    + _span(350, 354) + _span(356, 358) + _span(360, 369)
    # Taichung City
    + _span(400, 404) + _span(406, 408) + _span(411, 414) + _span(420, 424) + _span(426, 429) + _span(432, 439)
    # Changhua County
    + ["500"] + _span(502, 516) + _span(520, 528) + ["530"]
    # Nantou County
    + _span(540, 542) + _span(544, 546) + _span(551, 553) + _span(555, 558)
    # Chiayi
    + ["600"] + _span(602, 608) + _span(611, 616) + _span(621, 625)
    # Yunlin County
    + _span(630, 638) + ["640", "643"] + _span(646, 649) + _span(651, 655)
    # Tainan City
    + _span(700, 702) + ["704"] + _span(708, 727) + _span(730, 737) + _span(741, 745)
    # Kaohsiung City
    + _span(800, 807) + _span(811, 815) + _span(820, 833) + ["840"] + _span(842, 849) + ["851", "852"]
    # Penghu, Kinmen
    + _span(880, 885) + _span(890, 896)
    # Pingtung County
    + _span(900, 909) + _span(911, 913) + _span(920, 929) + ["931", "932"] + _span(940, 947)
    # Taitung County
    + _span(950, 959) + _span(961, 966)
    # Hualien County
    + _span(970, 979) + _span(981, 983)
)


@dataclass(frozen=True, slots=True)
class SuffixRange:
    """Inclusive suffix ranges for one prefix.
    单个前缀的后缀范围（闭区间）。
    """

    range5: tuple[int, int] = (1, 99)
    range6: tuple[int, int] = (1, 999)


DEFAULT_SUFFIX_RANGE = SuffixRange()

POSTAL_CODE_RANGES: dict[str, SuffixRange] = {
    **{p: DEFAULT_SUFFIX_RANGE for p in ["100", "103", "104", "105", "106", "108", "110", "111", "112", "114", "115", "116"]},
    **{p: DEFAULT_SUFFIX_RANGE for p in ["220", "221", "222", "223", "224"]},
    **{p: DEFAULT_SUFFIX_RANGE for p in ["320", "324", "330"]},
    **{p: DEFAULT_SUFFIX_RANGE for p in ["400", "401", "402", "403", "404"]},
    **{p: DEFAULT_SUFFIX_RANGE for p in ["700", "701", "702"]},
    **{p: DEFAULT_SUFFIX_RANGE for p in ["800", "801", "802", "803"]},
    # Smaller postal networks
    "880": SuffixRange(range5=(1, 50), range6=(1, 500)),
    "890": SuffixRange(range5=(1, 30), range6=(1, 300)),
    "209": SuffixRange(range5=(1, 20), range6=(1, 200)),
}

_SEPARATORS_RE = re.compile(r"[-\s]")
_3_DIGIT_RE = re.compile(r"^\d{3}\Z", re.ASCII)
_5_DIGIT_RE = re.compile(r"^\d{5}\Z", re.ASCII)
_6_DIGIT_RE = re.compile(r"^\d{6}\Z", re.ASCII)


def get_postal_code_ranges(prefix: str) -> SuffixRange:
    """Return the suffix ranges for a prefix (defaults when unlisted).
    返回前缀对应的后缀范围（未列出时使用默认值）。
    """
    return POSTAL_CODE_RANGES.get(prefix, DEFAULT_SUFFIX_RANGE)


def suffix_in_range(value: str) -> bool:
    """
    Check the 2- or 3-digit suffix of a 5/6-digit code against its prefix range.
    按前缀范围校验 5/6 码的后缀。
    """
    prefix, suffix = value[:3], value[3:]
    if not (suffix.isascii() and suffix.isdigit()):
        return False
    ranges = get_postal_code_ranges(prefix)
    low, high = ranges.range5 if len(value) == 5 else ranges.range6
    return low <= int(suffix) <= high


def validate_3_digit_postal_code(
    value: str,
    strict_validation: bool = True,
    allowed_prefixes: Collection[str] | None = None,
    blocked_prefixes: Collection[str] | None = None,
) -> bool:
    """
    Validate a 3-digit postal code.
    校验 3 码邮递区号。

    Args:
        value: Code to validate.
        value: 待校验号码。
        strict_validation: Require an official prefix.
        strict_validation: 是否要求为官方前缀。
        allowed_prefixes: Explicit allow-list; overrides strict validation.
        allowed_prefixes: 显式允许列表，优先于严格校验。
        blocked_prefixes: Prefixes always rejected.
        blocked_prefixes: 始终拒绝的前缀。

    Returns:
        bool: True when valid.
        bool: 有效时返回 True。
    """
    if not _3_DIGIT_RE.match(value):
        return False
    if blocked_prefixes and value in blocked_prefixes:
        return False
    if allowed_prefixes is not None:
        return value in allowed_prefixes
    if strict_validation:
        return value in VALID_3_DIGIT_PREFIXES
    return 100 <= int(value) <= 999


def _validate_long_code(
    value: str,
    pattern: re.Pattern[str],
    strict_validation: bool,
    strict_suffix_validation: bool,
    allowed_prefixes: Collection[str] | None,
    blocked_prefixes: Collection[str] | None,
) -> bool:
    if not pattern.match(value):
        return False
    if not validate_3_digit_postal_code(value[:3], strict_validation, allowed_prefixes, blocked_prefixes):
        return False
    return not strict_suffix_validation or suffix_in_range(value)


def validate_5_digit_postal_code(
    value: str,
    strict_validation: bool = True,
    strict_suffix_validation: bool = False,
    allowed_prefixes: Collection[str] | None = None,
    blocked_prefixes: Collection[str] | None = None,
) -> bool:
    """Validate a legacy 5-digit (3+2) postal code.
    校验旧制 5 码（3+2）邮递区号。
    """
    return _validate_long_code(value, _5_DIGIT_RE, strict_validation, strict_suffix_validation, allowed_prefixes, blocked_prefixes)


def validate_6_digit_postal_code(
    value: str,
    strict_validation: bool = True,
    strict_suffix_validation: bool = False,
    allowed_prefixes: Collection[str] | None = None,
    blocked_prefixes: Collection[str] | None = None,
) -> bool:
    """Validate a 6-digit (3+3) postal code.
    校验 6 码（3+3）邮递区号。
    """
    return _validate_long_code(value, _6_DIGIT_RE, strict_validation, strict_suffix_validation, allowed_prefixes, blocked_prefixes)


def validate_taiwan_postal_code(
    value: str,
    format: PostalCodeFormat | str = PostalCodeFormat.THREE_OR_SIX,
    strict_validation: bool = True,
    strict_suffix_validation: bool = False,
    allow_dashes: bool = True,
    allowed_prefixes: Collection[str] | None = None,
    blocked_prefixes: Collection[str] | None = None,
) -> bool:
    """
    Validate a Taiwan postal code in any accepted format.
    按允许的格式校验台湾邮递区号。

    Args:
        value: Postal code.
        value: 邮递区号。
        format: Accepted lengths (``3``, ``5``, ``6``, ``3+5``, ``3+6``, ``5+6``, ``all``).
        format: 允许的长度组合。
        strict_validation: Require official prefixes.
        strict_validation: 是否要求官方前缀。
        strict_suffix_validation: Check suffix ranges.
        strict_suffix_validation: 是否校验后缀范围。
        allow_dashes: Ignore dashes and spaces; when False they make the code invalid.
        allow_dashes: 是否忽略连字符与空格；为 False 时出现即无效。
        allowed_prefixes: Explicit prefix allow-list.
        allowed_prefixes: 显式前缀允许列表。
        blocked_prefixes: Prefix block-list.
        blocked_prefixes: 前缀阻止列表。

    Returns:
        bool: True when valid.
        bool: 有效时返回 True。
    """
    if not value or not isinstance(value, str):
        return False
    if allow_dashes:
        clean = _SEPARATORS_RE.sub("", value)
    elif _SEPARATORS_RE.search(value):
        return False
    else:
        clean = value
    lengths = FORMAT_LENGTHS[PostalCodeFormat(format)]
    if len(clean) not in lengths:
        return False
    if len(clean) == 3:
        return validate_3_digit_postal_code(clean, strict_validation, allowed_prefixes, blocked_prefixes)
    if len(clean) == 5:
        return validate_5_digit_postal_code(clean, strict_validation, strict_suffix_validation, allowed_prefixes, blocked_prefixes)
    return validate_6_digit_postal_code(clean, strict_validation, strict_suffix_validation, allowed_prefixes, blocked_prefixes)
