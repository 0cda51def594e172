"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: datetime_formats.py
@DateTime: 2026-10-19
@Docs: Token-format date/time grammar (``YYYY-MM-DD HH:mm`` style) plus ISO/RFC/UNIX.
基于格式标记的日期时间语法（``YYYY-MM-DD HH:mm`` 风格），以及 ISO/RFC/UNIX。

Supported tokens / 支持的标记:
    YYYY YY MMMM MMM MM M DD D dddd ddd HH H hh h mm m ss s SSS A a ZZ Z
    Text inside ``[...]`` is literal. / ``[...]`` 内为字面量。
"""

import re
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, timezone, tzinfo
from email.utils import parsedate_to_datetime
from functools import lru_cache
from zoneinfo import ZoneInfo

ISO = "ISO"
RFC = "RFC"
UNIX = "UNIX"

DATETIME_PATTERNS: dict[str, re.Pattern[str]] = {
    "YYYY-MM-DD HH:mm": re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}\Z", re.ASCII),
    "YYYY-MM-DD HH:mm:ss": re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\Z", re.ASCII),
    "YYYY-MM-DD hh:mm A": re.compile(r"^\d{4}-\d{2}-\d{2} \d{1,2}:\d{2} (AM|PM)\Z", re.IGNORECASE | re.ASCII),
    "YYYY-MM-DD hh:mm:ss A": re.compile(r"^\d{4}-\d{2}-\d{2} \d{1,2}:\d{2}:\d{2} (AM|PM)\Z", re.IGNORECASE | re.ASCII),
    "DD/MM/YYYY HH:mm": re.compile(r"^\d{1,2}/\d{1,2}/\d{4} \d{2}:\d{2}\Z", re.ASCII),
    "DD/MM/YYYY HH:mm:ss": re.compile(r"^\d{1,2}/\d{1,2}/\d{4} \d{2}:\d{2}:\d{2}\Z", re.ASCII),
    "DD/MM/YYYY hh:mm A": re.compile(r"^\d{1,2}/\d{1,2}/\d{4} \d{1,2}:\d{2} (AM|PM)\Z", re.IGNORECASE | re.ASCII),
    "MM/DD/YYYY HH:mm": re.compile(r"^\d{1,2}/\d{1,2}/\d{4} \d{2}:\d{2}\Z", re.ASCII),
    "MM/DD/YYYY hh:mm A": re.compile(r"^\d{1,2}/\d{1,2}/\d{4} \d{1,2}:\d{2} (AM|PM)\Z", re.IGNORECASE | re.ASCII),
    "YYYY/MM/DD HH:mm": re.compile(r"^\d{4}/\d{2}/\d{2} \d{2}:\d{2}\Z", re.ASCII),
    "DD-MM-YYYY HH:mm": re.compile(r"^\d{1,2}-\d{1,2}-\d{4} \d{2}:\d{2}\Z", re.ASCII),
    "MM-DD-YYYY HH:mm": re.compile(r"^\d{1,2}-\d{1,2}-\d{4} \d{2}:\d{2}\Z", re.ASCII),
    ISO: re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d{3})?Z?\Z", re.ASCII),
    RFC: re.compile(r"^[A-Za-z]{3}, \d{1,2} [A-Za-z]{3} \d{4} \d{2}:\d{2}:\d{2} [A-Z]{3}\Z", re.ASCII),
    UNIX: re.compile(r"^\d{10}\Z", re.ASCII),
}

TIME_PATTERNS: dict[str, re.Pattern[str]] = {
    "HH:mm": re.compile(r"^([01]?[0-9]|2[0-3]):[0-5][0-9]\Z"),
    "HH:mm:ss": re.compile(r"^([01]?[0-9]|2[0-3]):[0-5][0-9]:[0-5][0-9]\Z"),
    "hh:mm A": re.compile(r"^(0?[1-9]|1[0-2]):[0-5][0-9]\s?(AM|PM)\Z", re.IGNORECASE),
    "hh:mm:ss A": re.compile(r"^(0?[1-9]|1[0-2]):[0-5][0-9]:[0-5][0-9]\s?(AM|PM)\Z", re.IGNORECASE),
    "H:mm": re.compile(r"^([0-9]|1[0-9]|2[0-3]):[0-5][0-9]\Z"),
    "h:mm A": re.compile(r"^([1-9]|1[0-2]):[0-5][0-9]\s?(AM|PM)\Z", re.IGNORECASE),
}

MONTH_NAMES = ("January", "February", "March", "April", "May", "June", "July", "August", "September", "October", "November", "December")
WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

_TOKEN_RE = re.compile(r"\[([^\]]*)\]|YYYY|YY|MMMM|MMM|MM|M|DD|D|dddd|ddd|HH|H|hh|h|mm|m|ss|s|SSS|A|a|ZZ|Z|.", re.DOTALL)

_TOKEN_PATTERNS: dict[str, str] = {
    "YYYY": r"(?P<year>\d{4})",
    "YY": r"(?P<year2>\d{2})",
    "MMMM": r"(?P<month_name>[A-Za-z]+)",
    "MMM": r"(?P<month_abbr>[A-Za-z]{3})",
    "MM": r"(?P<month>\d{2})",
    "M": r"(?P<month>\d{1,2})",
    "DD": r"(?P<day>\d{2})",
    "D": r"(?P<day>\d{1,2})",
    "dddd": r"(?P<weekday_name>[A-Za-z]+)",
    "ddd": r"(?P<weekday_abbr>[A-Za-z]{3})",
    "HH": r"(?P<hour>\d{2})",
    "H": r"(?P<hour>\d{1,2})",
    "hh": r"(?P<hour12>\d{2})",
    "h": r"(?P<hour12>\d{1,2})",
    "mm": r"(?P<minute>\d{2})",
    "m": r"(?P<minute>\d{1,2})",
    "ss": r"(?P<second>\d{2})",
    "s": r"(?P<second>\d{1,2})",
    "SSS": r"(?P<millis>\d{3})",
    "A": r"(?P<meridiem>AM|PM)",
    "a": r"(?P<meridiem>am|pm)",
    "ZZ": r"(?P<offset>[+-]\d{4})",
    "Z": r"(?P<offset>Z|[+-]\d{2}:\d{2})",
}


@dataclass(frozen=True, slots=True)
class CompiledFormat:
    """
    A token format compiled to a strict regex.
    编译为严格正则的格式标记。
    """

    format: str
    tokens: tuple[str, ...]
    regex: re.Pattern[str]


@lru_cache(maxsize=256)
def compile_format(fmt: str) -> CompiledFormat:
    """
    Compile a token format.
    编译格式标记。

    Args:
        fmt: Format such as ``"YYYY-MM-DD HH:mm"``.
        fmt: 格式，例如 ``"YYYY-MM-DD HH:mm"``。

    Returns:
        CompiledFormat: Tokens and strict regex.
        CompiledFormat: 标记与严格正则。
    """
    tokens: list[str] = []
    parts: list[str] = []
    seen: set[str] = set()
    for m in _TOKEN_RE.finditer(fmt):
        literal = m.group(1)
        token = m.group(0)
        if literal is not None:
            tokens.append(token)
            parts.append(re.escape(literal))
            continue
        tokens.append(token)
        pattern = _TOKEN_PATTERNS.get(token)
        if pattern is None:
            parts.append(re.escape(token))
            continue
        group = pattern[4 : pattern.index(">")]
        if group in seen:
            # repeated field: match the shape without capturing twice
            parts.append(pattern.replace(f"?P<{group}>", "?:"))
        else:
            seen.add(group)
            parts.append(pattern)
    return CompiledFormat(format=fmt, tokens=tuple(tokens), regex=re.compile("^" + "".join(parts) + r"\Z", re.ASCII))


def _month_from_name(name: str, *, abbreviated: bool) -> int | None:
    for index, full in enumerate(MONTH_NAMES, start=1):
        candidate = full[:3] if abbreviated else full
        if candidate.lower() == name.lower():
            return index
    return None


def _parse_offset(raw: str) -> tzinfo:
    if raw == "Z":
        return UTC
    sign = -1 if raw[0] == "-" else 1
    digits = raw[1:].replace(":", "")
    return timezone(sign * timedelta(hours=int(digits[:2]), minutes=int(digits[2:])))


def parse_with_format(value: str, fmt: str) -> datetime | None:
    """
    Strictly parse a value with a token format.
    按格式标记严格解析值。

    Args:
        value: Input string.
        value: 输入字符串。
        fmt: Token format.
        fmt: 格式标记。

    Returns:
        datetime | None: Parsed moment (naive unless the format has an offset),
            or None when the value does not fit the format or calendar.
        datetime | None: 解析结果（格式不含偏移时为 naive）；不符合格式或日历时返回 None。
    """
    compiled = compile_format(fmt)
    m = compiled.regex.match(value)
    if m is None:
        return None
    g = m.groupdict()
    if g.get("year") is not None:
        year = int(g["year"])
    elif g.get("year2") is not None:
        year = 2000 + int(g["year2"])
    else:
        year = 1970
    if g.get("month") is not None:
        month = int(g["month"])
    elif g.get("month_name") is not None:
        month = _month_from_name(g["month_name"], abbreviated=False) or 0
    elif g.get("month_abbr") is not None:
        month = _month_from_name(g["month_abbr"], abbreviated=True) or 0
    else:
        month = 1
    day = int(g["day"]) if g.get("day") is not None else 1
    if g.get("hour12") is not None:
        hour12 = int(g["hour12"])
        if not 1 <= hour12 <= 12:
            return None
        meridiem = (g.get("meridiem") or "AM").upper()
        hour = hour12 % 12 + (12 if meridiem == "PM" else 0)
    else:
        hour = int(g["hour"]) if g.get("hour") is not None else 0
    minute = int(g["minute"]) if g.get("minute") is not None else 0
    second = int(g["second"]) if g.get("second") is not None else 0
    micro = int(g["millis"]) * 1000 if g.get("millis") is not None else 0
    try:
        moment = datetime(year, month, day, hour, minute, second, micro)
    except ValueError:
        return None
    if g.get("offset") is not None:
        moment = moment.replace(tzinfo=_parse_offset(g["offset"]))
    weekday = g.get("weekday_name") or g.get("weekday_abbr")
    if weekday is not None:
        expected = WEEKDAY_NAMES[moment.weekday()]
        if weekday.lower() not in (expected.lower(), expected[:3].lower()):
            return None
    return moment


def format_datetime(moment: datetime, fmt: str) -> str:
    """
    Render a moment with a token format.
    按格式标记渲染时间。
    """
    out: list[str] = []
    hour12 = moment.hour % 12 or 12
    for token in compile_format(fmt).tokens:
        match token:
            case "YYYY":
                out.append(f"{moment.year:04d}")
            case "YY":
                out.append(f"{moment.year % 100:02d}")
            case "MMMM":
                out.append(MONTH_NAMES[moment.month - 1])
            case "MMM":
                out.append(MONTH_NAMES[moment.month - 1][:3])
            case "MM":
                out.append(f"{moment.month:02d}")
            case "M":
                out.append(str(moment.month))
            case "DD":
                out.append(f"{moment.day:02d}")
            case "D":
                out.append(str(moment.day))
            case "dddd":
                out.append(WEEKDAY_NAMES[moment.weekday()])
            case "ddd":
                out.append(WEEKDAY_NAMES[moment.weekday()][:3])
            case "HH":
                out.append(f"{moment.hour:02d}")
            case "H":
                out.append(str(moment.hour))
            case "hh":
                out.append(f"{hour12:02d}")
            case "h":
                out.append(str(hour12))
            case "mm":
                out.append(f"{moment.minute:02d}")
            case "m":
                out.append(str(moment.minute))
            case "ss":
                out.append(f"{moment.second:02d}")
            case "s":
                out.append(str(moment.second))
            case "SSS":
                out.append(f"{moment.microsecond // 1000:03d}")
            case "A":
                out.append("PM" if moment.hour >= 12 else "AM")
            case "a":
                out.append("pm" if moment.hour >= 12 else "am")
            case "Z" | "ZZ":
                offset = moment.utcoffset()
                if offset is None:
                    continue
                total = int(offset.total_seconds() // 60)
                sign = "-" if total < 0 else "+"
                hh, mm = divmod(abs(total), 60)
                out.append(f"{sign}{hh:02d}:{mm:02d}" if token == "Z" else f"{sign}{hh:02d}{mm:02d}")
            case _ if token.startswith("[") and token.endswith("]"):
                out.append(token[1:-1])
            case _:
                out.append(token)
    return "".join(out)


def resolve_zone(name: str | None) -> tzinfo | None:
    """Return a ZoneInfo for a name, or None.
    根据名称返回 ZoneInfo；为空时返回 None。
    """
    return ZoneInfo(name) if name else None


def localize(moment: datetime, zone: tzinfo | None) -> datetime:
    """
    Attach or convert to the target zone.
    附加或转换到目标时区。

    Naive moments are read as wall-clock time in ``zone`` (system local when None);
    aware moments are converted.
    naive 时间视为 ``zone``（为空时为系统本地）中的挂钟时间；aware 时间执行转换。
    """
    if moment.tzinfo is None:
        return moment.replace(tzinfo=zone) if zone is not None else moment.astimezone()
    return moment.astimezone(zone) if zone is not None else moment.astimezone()


def now_in(zone: tzinfo | None) -> datetime:
    """Current aware time in a zone (system local when None).
    指定时区的当前时间（为空时为系统本地）。
    """
    return datetime.now(zone) if zone is not None else datetime.now().astimezone()


def parse_datetime_value(value: str, fmt: str, timezone: str | None = None) -> datetime | None:
    """
    Parse a datetime string (token format, ``ISO``, ``RFC`` or ``UNIX``).
    解析日期时间字符串（格式标记、``ISO``、``RFC`` 或 ``UNIX``）。

    Args:
        value: Input string.
        value: 输入字符串。
        fmt: Format name.
        fmt: 格式名称。
        timezone: IANA timezone used for wall-clock values and output.
        timezone: 用于挂钟时间与输出的 IANA 时区。

    Returns:
        datetime | None: Aware moment, or None when invalid.
        datetime | None: aware 时间；无效时返回 None。
    """
    clean = value.strip()
    zone = resolve_zone(timezone)
    moment: datetime | None
    try:
        if fmt == ISO:
            moment = datetime.fromisoformat(clean) if DATETIME_PATTERNS[ISO].match(clean) else None
        elif fmt == RFC:
            moment = parsedate_to_datetime(clean) if DATETIME_PATTERNS[RFC].match(clean) else None
        elif fmt == UNIX:
            moment = datetime.fromtimestamp(int(clean), tz=UTC) if DATETIME_PATTERNS[UNIX].match(clean) else None
        else:
            moment = parse_with_format(clean, fmt)
    except (ValueError, TypeError, OverflowError):
        return None
    if moment is None:
        return None
    return localize(moment, zone)


def datetime_shape_ok(value: str, fmt: str) -> bool:
    """
    Check only the loose shape of a value for a format.
    仅校验值相对于格式的宽松形状。
    """
    pattern = DATETIME_PATTERNS.get(fmt) or compile_format(fmt).regex
    return bool(pattern.match(value.strip()))


def validate_datetime_format(value: str, fmt: str) -> bool:
    """Shape and calendar check for a datetime string.
    日期时间字符串的形状与日历校验。
    """
    return datetime_shape_ok(value, fmt) and parse_datetime_value(value, fmt) is not None


def normalize_datetime_value(value: str, fmt: str, timezone: str | None = None) -> str | None:
    """
    Re-render a datetime in the canonical form of its format.
    按格式的规范形式重新渲染日期时间。

    ``ISO`` renders as UTC with milliseconds, ``RFC`` as GMT, ``UNIX`` as epoch seconds.
    ``ISO`` 输出为带毫秒的 UTC，``RFC`` 输出为 GMT，``UNIX`` 输出为秒级时间戳。
    """
    moment = parse_datetime_value(value, fmt, timezone)
    if moment is None:
        return None
    if fmt == ISO:
        utc = moment.astimezone(UTC)
        return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"
    if fmt == RFC:
        return format_datetime(moment.astimezone(UTC), "ddd, DD MMM YYYY HH:mm:ss [GMT]")
    if fmt == UNIX:
        return str(int(moment.timestamp()))
    return format_datetime(moment, fmt)


@dataclass(frozen=True, slots=True)
class TimeOfDay:
    """Parsed time of day.
    解析后的一天中的时间。
    """

    hour: int
    minute: int
    second: int

    @property
    def minutes(self) -> int:
        return self.hour * 60 + self.minute


_TIME_12H_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?\s?(AM|PM)\Z", re.IGNORECASE | re.ASCII)
_TIME_24H_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?\Z", re.ASCII)


def parse_time(value: str, fmt: str) -> TimeOfDay | None:
    """
    Parse a time string for a time format.
    按时间格式解析时间字符串。

    Args:
        value: Input such as ``"14:30"`` or ``"2:30 PM"``.
        value: 输入，例如 ``"14:30"`` 或 ``"2:30 PM"``。
        fmt: Time format.
        fmt: 时间格式。

    Returns:
        TimeOfDay | None: 24-hour time, or None when invalid.
        TimeOfDay | None: 24 小时制时间；无效时返回 None。
    """
    clean = value.strip()
    if "A" in fmt:
        m = _TIME_12H_RE.match(clean)
        if m is None:
            return None
        hour, minute = int(m.group(1)), int(m.group(2))
        second = int(m.group(3) or 0)
        if not 1 <= hour <= 12:
            return None
        hour = hour % 12 + (12 if m.group(4).upper() == "PM" else 0)
    else:
        m = _TIME_24H_RE.match(clean)
        if m is None:
            return None
        hour, minute = int(m.group(1)), int(m.group(2))
        second = int(m.group(3) or 0)
        if hour > 23:
            return None
    if minute > 59 or second > 59:
        return None
    return TimeOfDay(hour=hour, minute=minute, second=second)


def parse_time_to_minutes(value: str, fmt: str) -> int | None:
    """Minutes since midnight, or None.
    自午夜起的分钟数；无效时返回 None。
    """
    parsed = parse_time(value, fmt)
    return parsed.minutes if parsed is not None else None


def validate_time_format(value: str, fmt: str) -> bool:
    """Check a time string against its format pattern.
    按格式模式校验时间字符串。
    """
    pattern = TIME_PATTERNS.get(fmt) or compile_format(fmt).regex
    return bool(pattern.match(value.strip()))


def normalize_time(value: str, fmt: str) -> str | None:
    """
    Convert a time to zero-padded 24-hour form.
    将时间转换为补零的 24 小时制形式。

    12-hour formats become ``HH:mm`` (or ``HH:mm:ss``), ``H:mm`` is zero-padded,
    other formats are returned trimmed.
    12 小时制转换为 ``HH:mm``（或 ``HH:mm:ss``），``H:mm`` 补零，其余格式去空白后返回。
    """
    clean = value.strip()
    if "A" in fmt:
        parsed = parse_time(clean, fmt)
        if parsed is None:
            return None
        if "ss" in fmt:
            return f"{parsed.hour:02d}:{parsed.minute:02d}:{parsed.second:02d}"
        return f"{parsed.hour:02d}:{parsed.minute:02d}"
    if fmt == "H:mm":
        m = re.match(r"^(\d{1,2}):(\d{2})\Z", clean, re.ASCII)
        if m is None:
            return None
        return f"{int(m.group(1)):02d}:{m.group(2)}"
    return clean
