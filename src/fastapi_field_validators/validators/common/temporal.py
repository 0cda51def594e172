"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: temporal.py
@DateTime: 2026-10-19
@Docs: Date, datetime and time-of-day field validators.
日期、日期时间与一天中时间的字段校验器。

Wall-clock values without an offset are read in the validator ``timezone``,
else the configured default timezone, else system local time.
不含偏移的挂钟时间按校验器 ``timezone`` 解释；未设置时使用配置的默认时区，
再否则使用系统本地时区。
"""

import datetime as dt
import re
from dataclasses import dataclass
from typing import Any, Self

from pydantic import field_validator, model_validator

from fastapi_field_validators.algorithms.datetime_formats import (
    TimeOfDay,
    datetime_shape_ok,
    format_datetime,
    localize,
    now_in,
    parse_datetime_value,
    parse_time,
    parse_with_format,
    resolve_zone,
    validate_time_format,
)
from fastapi_field_validators.config import _check_timezone
from fastapi_field_validators.core import (
    PASS,
    ConstraintResult,
    FieldOptions,
    FieldValidator,
    Rule,
    WhitelistMode,
    WhitelistOptions,
    check,
    excludes_rule,
    fail,
)
from fastapi_field_validators.locale import default_timezone
from fastapi_field_validators.normalization import Casing, TrimMode, normalize_text


def _check_bounds(options: Any, parse: Any) -> None:
    """Reject string bounds that do not parse in ``format``.
    拒绝无法按 ``format`` 解析的字符串边界。
    """
    for name in ("min", "max"):
        bound = getattr(options, name)
        if isinstance(bound, str) and parse(bound) is None:
            raise ValueError(f"{name} {bound!r} does not match format {options.format!r}")


def _today(zone: dt.tzinfo | None) -> dt.date:
    return now_in(zone).date()


def _hour_rules(min_hour: int | None, max_hour: int | None, allowed_hours: tuple[int, ...], hour_of: Any) -> list[Rule]:
    rules: list[Rule] = []
    if min_hour is not None or max_hour is not None:
        low = 0 if min_hour is None else min_hour
        high = 23 if max_hour is None else max_hour
        rules.append(lambda v: check(low <= hour_of(v) <= high, "hour", minHour=low, maxHour=high))
    if allowed_hours:
        rules.append(
            lambda v: check(
                hour_of(v) in allowed_hours,
                "hour",
                minHour=min(allowed_hours),
                maxHour=max(allowed_hours),
                allowedHours=allowed_hours,
            )
        )
    return rules


# Date


class DateOptions(FieldOptions):
    """
    Date options.
    日期选项。

    Attributes:
        format: Token format, e.g. ``YYYY-MM-DD``.
        format: 格式标记，例如 ``YYYY-MM-DD``。
        min: Earliest accepted date (inclusive); string in ``format`` or a ``date``.
        min: 最早可接受日期（含）；``format`` 格式的字符串或 ``date``。
        max: Latest accepted date (inclusive).
        max: 最晚可接受日期（含）。
        must_be_past: Strictly before today.
        must_be_past: 严格早于今天。
        must_be_future: Strictly after today.
        must_be_future: 严格晚于今天。
        must_be_today: Equal to today.
        must_be_today: 等于今天。
        must_not_be_today: Different from today.
        must_not_be_today: 不等于今天。
        weekdays_only: Monday to Friday.
        weekdays_only: 仅周一至周五。
        weekends_only: Saturday and Sunday.
        weekends_only: 仅周六与周日。
    """

    format: str = "YYYY-MM-DD"
    min: str | dt.date | None = None
    max: str | dt.date | None = None
    includes: str | None = None
    excludes: str | tuple[str, ...] | None = None
    must_be_past: bool = False
    must_be_future: bool = False
    must_be_today: bool = False
    must_not_be_today: bool = False
    weekdays_only: bool = False
    weekends_only: bool = False

    @model_validator(mode="after")
    def _parsable_bounds(self) -> Self:
        _check_bounds(self, lambda b: parse_with_format(b.strip(), self.format))
        return self


@dataclass(frozen=True, slots=True)
class DateValue:
    text: str
    day: dt.date | None


class DateValidator(FieldValidator[DateOptions]):
    """Date validator; returns the normalized string.
    日期校验器；返回规范化后的字符串。
    """

    kind = "date"
    options_model = DateOptions
    default_required = True

    def normalize(self, value: Any) -> str:
        if isinstance(value, dt.date) and not isinstance(value, dt.datetime):
            value = format_datetime(dt.datetime.combine(value, dt.time()), self.options.format)
        return normalize_text(value, transform=self.options.transform)

    def _to_date(self, value: str | dt.date) -> dt.date | None:
        if isinstance(value, dt.datetime):
            return value.date()
        if isinstance(value, dt.date):
            return value
        parsed = parse_with_format(value.strip(), self.options.format)
        return parsed.date() if parsed is not None else None

    def coerce(self, value: Any) -> DateValue:
        text = str(value)
        return DateValue(text=text, day=self._to_date(text))

    def finalize(self, value: DateValue) -> str:
        return value.text

    def build_rules(self) -> list[Rule]:
        opts = self.options
        rules: list[Rule] = [lambda v: check(v.day is not None, "format", format=opts.format)]
        if opts.min is not None:
            low = self._to_date(opts.min)
            rules.append(lambda v: check(v.day >= low, "min", min=opts.min))
        if opts.max is not None:
            high = self._to_date(opts.max)
            rules.append(lambda v: check(v.day <= high, "max", max=opts.max))
        if opts.includes is not None:
            rules.append(lambda v: check(opts.includes in v.text, "includes", includes=opts.includes))
        if opts.excludes is not None:
            banned = excludes_rule(opts.excludes)
            rules.append(lambda v: banned(v.text))
        zone = resolve_zone(default_timezone())
        if opts.must_be_past:
            rules.append(lambda v: check(v.day < _today(zone), "past"))
        if opts.must_be_future:
            rules.append(lambda v: check(v.day > _today(zone), "future"))
        if opts.must_be_today:
            rules.append(lambda v: check(v.day == _today(zone), "today"))
        if opts.must_not_be_today:
            rules.append(lambda v: check(v.day != _today(zone), "notToday"))
        if opts.weekdays_only:
            rules.append(lambda v: check(v.day.weekday() < 5, "weekday"))
        if opts.weekends_only:
            rules.append(lambda v: check(v.day.weekday() >= 5, "weekend"))
        return rules


def date(required: bool | None = None, /, **options: Any) -> DateValidator:
    """
    Create a date validator (required by default).
    创建日期校验器（默认必填）。

    Examples:
        >>> date(format="DD/MM/YYYY").parse("31/12/2024")
        '31/12/2024'
    """
    return DateValidator.create(required, **options)


# Shared by datetime and time


class _ClockOptions(WhitelistOptions):
    regex: re.Pattern[str] | None = None
    includes: str | None = None
    excludes: str | tuple[str, ...] | None = None
    min_hour: int | None = None
    max_hour: int | None = None
    allowed_hours: tuple[int, ...] = ()
    minute_step: int | None = None
    trim_mode: TrimMode = TrimMode.TRIM
    casing: Casing = Casing.NONE


class _ClockValidator[O: _ClockOptions](FieldValidator[O]):
    whitelist_mode = WhitelistMode.BYPASS
    default_required = True

    def normalize(self, value: Any) -> str:
        opts = self.options
        return normalize_text(value, trim_mode=opts.trim_mode, casing=opts.casing, transform=opts.transform)

    def finalize(self, value: Any) -> str:
        return value.text

    def _shape_rules(self, shape_ok: Any) -> list[Rule]:
        opts = self.options
        rules: list[Rule] = []
        if opts.regex is not None:
            pattern = opts.regex
            rules.append(lambda v: check(pattern.search(v.text) is not None, "customRegex"))
        else:
            rules.append(lambda v: check(shape_ok(v.text), "format", format=opts.format))
        if opts.includes is not None:
            rules.append(lambda v: check(opts.includes in v.text, "includes", includes=opts.includes))
        if opts.excludes is not None:
            banned = excludes_rule(opts.excludes)
            rules.append(lambda v: banned(v.text))
        return rules


# Datetime


class DateTimeOptions(_ClockOptions):
    """
    Datetime options.
    日期时间选项。

    Attributes:
        format: Token format, or ``ISO`` / ``RFC`` / ``UNIX``.
        format: 格式标记，或 ``ISO`` / ``RFC`` / ``UNIX``。
        regex: Custom pattern; replaces format parsing and every moment check.
        regex: 自定义模式；替代格式解析与所有时间检查。
        min: Earliest moment (inclusive), in ``format`` or as a ``datetime``.
        min: 最早时间（含），``format`` 格式或 ``datetime``。
        max: Latest moment (inclusive).
        max: 最晚时间（含）。
        min_hour: Lowest accepted hour.
        min_hour: 最小允许小时。
        max_hour: Highest accepted hour.
        max_hour: 最大允许小时。
        allowed_hours: Exact hours that are accepted.
        allowed_hours: 允许的精确小时。
        minute_step: Minutes must be a multiple of this.
        minute_step: 分钟必须为其倍数。
        timezone: IANA timezone for wall-clock values and "now".
        timezone: 挂钟时间与“当前时间”使用的 IANA 时区。
        whitelist: Values accepted verbatim.
        whitelist: 原样接受的值。
        whitelist_only: Reject anything not in the whitelist.
        whitelist_only: 拒绝白名单以外的值。
    """

    format: str = "YYYY-MM-DD HH:mm"
    min: str | dt.datetime | None = None
    max: str | dt.datetime | None = None
    timezone: str | None = None
    must_be_past: bool = False
    must_be_future: bool = False
    must_be_today: bool = False
    must_not_be_today: bool = False
    weekdays_only: bool = False
    weekends_only: bool = False

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, v: str | None) -> str | None:
        return _check_timezone(v)

    @model_validator(mode="after")
    def _parsable_bounds(self) -> Self:
        if self.regex is None:
            _check_bounds(self, lambda b: parse_datetime_value(b, self.format, self.timezone))
        return self


@dataclass(frozen=True, slots=True)
class DateTimeValue:
    text: str
    moment: dt.datetime | None


class DateTimeValidator(_ClockValidator[DateTimeOptions]):
    """Datetime validator; returns the normalized string.
    日期时间校验器；返回规范化后的字符串。
    """

    kind = "datetime"
    options_model = DateTimeOptions

    @property
    def timezone(self) -> str | None:
        return self.options.timezone or default_timezone()

    def _to_moment(self, value: str | dt.datetime) -> dt.datetime | None:
        if isinstance(value, dt.datetime):
            return localize(value, resolve_zone(self.timezone))
        return parse_datetime_value(value, self.options.format, self.timezone)

    def coerce(self, value: Any) -> DateTimeValue:
        text = str(value)
        moment = None if self.options.regex is not None else self._to_moment(text)
        return DateTimeValue(text=text, moment=moment)

    def build_rules(self) -> list[Rule]:
        opts = self.options
        rules = self._shape_rules(lambda text: datetime_shape_ok(text, opts.format))
        if opts.regex is not None:
            return rules
        rules.append(lambda v: check(v.moment is not None, "invalid"))
        rules.extend(_hour_rules(opts.min_hour, opts.max_hour, opts.allowed_hours, lambda v: v.moment.hour))
        if opts.minute_step:
            step = opts.minute_step
            rules.append(lambda v: check(v.moment.minute % step == 0, "minute", minuteStep=step))
        if opts.min is not None:
            low = self._to_moment(opts.min)
            rules.append(lambda v: check(v.moment >= low, "min", min=opts.min))
        if opts.max is not None:
            high = self._to_moment(opts.max)
            rules.append(lambda v: check(v.moment <= high, "max", max=opts.max))
        zone = resolve_zone(self.timezone)
        if opts.must_be_past:
            rules.append(lambda v: check(v.moment < now_in(zone), "past"))
        if opts.must_be_future:
            rules.append(lambda v: check(v.moment > now_in(zone), "future"))
        if opts.must_be_today:
            rules.append(lambda v: check(v.moment.astimezone(zone).date() == _today(zone), "today"))
        if opts.must_not_be_today:
            rules.append(lambda v: check(v.moment.astimezone(zone).date() != _today(zone), "notToday"))
        if opts.weekdays_only:
            rules.append(lambda v: check(v.moment.weekday() < 5, "weekday"))
        if opts.weekends_only:
            rules.append(lambda v: check(v.moment.weekday() >= 5, "weekend"))
        return rules


def datetime(required: bool | None = None, /, **options: Any) -> DateTimeValidator:
    """
    Create a datetime validator (required by default).
    创建日期时间校验器（默认必填）。

    Examples:
        >>> datetime(minute_step=15).parse("2024-03-01 09:45")
        '2024-03-01 09:45'
    """
    return DateTimeValidator.create(required, **options)


# Time of day


class TimeOptions(_ClockOptions):
    """
    Time-of-day options.
    一天中时间的选项。

    Attributes:
        format: ``HH:mm``, ``HH:mm:ss``, ``hh:mm A``, ``hh:mm:ss A``, ``H:mm`` or ``h:mm A``.
        format: 时间格式。
        min: Earliest accepted time (inclusive), in ``format``.
        min: 最早可接受时间（含），``format`` 格式。
        max: Latest accepted time (inclusive).
        max: 最晚可接受时间（含）。
        second_step: Seconds must be a multiple of this (formats with seconds).
        second_step: 秒必须为其倍数（含秒的格式）。
    """

    format: str = "HH:mm"
    min: str | None = None
    max: str | None = None
    second_step: int | None = None

    @model_validator(mode="after")
    def _parsable_bounds(self) -> Self:
        if self.regex is None:
            _check_bounds(self, lambda b: parse_time(b, self.format))
        return self


@dataclass(frozen=True, slots=True)
class TimeValue:
    text: str
    time: TimeOfDay | None


def _seconds(t: TimeOfDay) -> int:
    return t.hour * 3600 + t.minute * 60 + t.second


class TimeValidator(_ClockValidator[TimeOptions]):
    """Time-of-day validator; returns the normalized string.
    一天中时间的校验器；返回规范化后的字符串。
    """

    kind = "time"
    options_model = TimeOptions

    def coerce(self, value: Any) -> TimeValue:
        text = str(value)
        parsed = None if self.options.regex is not None else parse_time(text, self.options.format)
        return TimeValue(text=text, time=parsed)

    def build_rules(self) -> list[Rule]:
        opts = self.options
        rules = self._shape_rules(lambda text: validate_time_format(text, opts.format))
        if opts.regex is not None:
            return rules
        rules.append(lambda v: check(v.time is not None, "invalid"))
        rules.extend(_hour_rules(opts.min_hour, opts.max_hour, opts.allowed_hours, lambda v: v.time.hour))
        if opts.minute_step:
            step = opts.minute_step
            rules.append(lambda v: check(v.time.minute % step == 0, "minute", minuteStep=step))
        if opts.second_step and "ss" in opts.format:
            sstep = opts.second_step
            rules.append(lambda v: check(v.time.second % sstep == 0, "second", secondStep=sstep))
        if opts.min is not None:
            rules.append(self._bound_rule(opts.min, "min"))
        if opts.max is not None:
            rules.append(self._bound_rule(opts.max, "max"))
        return rules

    def _bound_rule(self, bound: str, key: str) -> Rule:
        limit = parse_time(bound, self.options.format)

        def _rule(value: TimeValue) -> ConstraintResult:
            ok = _seconds(value.time) >= _seconds(limit) if key == "min" else _seconds(value.time) <= _seconds(limit)
            return PASS if ok else fail(key, **{key: bound})

        return _rule


def time(required: bool | None = None, /, **options: Any) -> TimeValidator:
    """
    Create a time-of-day validator (required by default).
    创建一天中时间的校验器（默认必填）。

    Examples:
        >>> time(format="hh:mm A").parse("02:30 PM")
        '02:30 PM'
    """
    return TimeValidator.create(required, **options)
