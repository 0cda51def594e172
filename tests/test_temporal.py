"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_temporal.py
@DateTime: 2026-10-19
@Docs: Tests for date(), datetime() and time().
date()、datetime() 与 time() 测试。
"""

import datetime as dt
from typing import Any

import pytest

from fastapi_field_validators import date, datetime, time
from fastapi_field_validators.algorithms import normalize_datetime_value, normalize_time, parse_time_to_minutes
from fastapi_field_validators.exceptions import ConfigurationError, ValidationError


def _key(validator: Any, value: Any) -> str:
    with pytest.raises(ValidationError) as exc_info:
        validator.parse(value)
    return exc_info.value.key


class TestDate:
    """Tests for date().
    date() 测试。
    """

    def test_required_by_default(self) -> None:
        assert _key(date(), "") == "required"
        assert date(False).parse("") is None

    def test_default_format(self) -> None:
        assert date().parse("2024-02-29") == "2024-02-29"
        assert _key(date(), "2023-02-29") == "format"
        assert _key(date(), "2024/01/01") == "format"

    def test_format_message(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            date().parse("01/02/2024")
        assert exc_info.value.message == "Must be in YYYY-MM-DD format"

    def test_custom_format(self) -> None:
        assert date(format="DD/MM/YYYY").parse("31/12/2024") == "31/12/2024"
        assert _key(date(format="DD/MM/YYYY"), "12/31/2024") == "format"

    def test_date_object_rendered(self) -> None:
        assert date().parse(dt.date(2024, 5, 6)) == "2024-05-06"

    def test_bounds_inclusive(self) -> None:
        validator = date(min="2024-01-01", max="2024-12-31")
        assert validator.parse("2024-01-01") == "2024-01-01"
        assert validator.parse("2024-12-31") == "2024-12-31"
        assert _key(validator, "2023-12-31") == "min"
        assert _key(validator, "2025-01-01") == "max"

    def test_unparsable_bound_rejected(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            date(format="DD/MM/YYYY", min="2024-01-01")
        assert exc_info.value.error_code == "invalid_options"
        assert date(format="DD/MM/YYYY", max=dt.date(2024, 1, 1)).parse("31/12/2023") == "31/12/2023"

    def test_past_and_future(self) -> None:
        assert date(must_be_past=True).parse("2000-01-01") == "2000-01-01"
        assert _key(date(must_be_past=True), "2999-01-01") == "past"
        assert _key(date(must_be_future=True), "2000-01-01") == "future"

    def test_today(self) -> None:
        today = dt.date.today().isoformat()
        assert date(must_be_today=True).parse(today) == today
        assert _key(date(must_not_be_today=True), today) == "notToday"

    def test_weekday_weekend(self) -> None:
        """2024-03-01 is a Friday, 2024-03-02 a Saturday / 2024-03-01 为周五。"""
        assert date(weekdays_only=True).parse("2024-03-01") == "2024-03-01"
        assert _key(date(weekdays_only=True), "2024-03-02") == "weekday"
        assert _key(date(weekends_only=True), "2024-03-01") == "weekend"


class TestDateTime:
    """Tests for datetime().
    datetime() 测试。
    """

    def test_default_format(self) -> None:
        assert datetime().parse(" 2024-03-01 09:45 ") == "2024-03-01 09:45"

    def test_shape_then_calendar(self) -> None:
        """Bad shape reports format, impossible dates report invalid / 形状错误报告 format，不存在日期报告 invalid。"""
        assert _key(datetime(), "2024-03-01") == "format"
        assert _key(datetime(), "2024-02-30 10:00") == "invalid"

    def test_hour_range(self) -> None:
        validator = datetime(min_hour=9, max_hour=17)
        assert validator.parse("2024-03-01 17:00") == "2024-03-01 17:00"
        with pytest.raises(ValidationError) as exc_info:
            validator.parse("2024-03-01 08:00")
        assert exc_info.value.message == "Hour must be between 9 and 17"

    def test_allowed_hours(self) -> None:
        assert _key(datetime(allowed_hours=[9, 14]), "2024-03-01 10:00") == "hour"

    def test_minute_step(self) -> None:
        assert datetime(minute_step=15).parse("2024-03-01 09:45") == "2024-03-01 09:45"
        assert _key(datetime(minute_step=15), "2024-03-01 09:40") == "minute"

    def test_bounds(self) -> None:
        validator = datetime(min="2024-01-01 00:00", max="2024-12-31 23:59")
        assert _key(validator, "2023-12-31 23:59") == "min"
        assert _key(validator, "2025-01-01 00:00") == "max"
        assert validator.parse("2024-01-01 00:00") == "2024-01-01 00:00"

    def test_unparsable_bound_rejected(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            datetime(max="tomorrow")
        assert exc_info.value.error_code == "invalid_options"
        assert datetime(regex=r"^\d+$", max="tomorrow").parse("42") == "42"

    def test_past_future(self) -> None:
        assert _key(datetime(must_be_past=True), "2999-01-01 00:00") == "past"
        assert _key(datetime(must_be_future=True), "2000-01-01 00:00") == "future"

    def test_weekend(self) -> None:
        assert _key(datetime(weekends_only=True), "2024-03-01 10:00") == "weekend"

    def test_iso_and_unix(self) -> None:
        assert datetime(format="ISO").parse("2024-03-01T10:00:00Z") == "2024-03-01T10:00:00Z"
        assert datetime(format="UNIX").parse("1700000000") == "1700000000"
        assert _key(datetime(format="UNIX"), "17000") == "format"

    def test_regex_skips_moment_checks(self) -> None:
        validator = datetime(regex=r"^\d{8}$", must_be_future=True)
        assert validator.parse("20000101") == "20000101"
        assert _key(validator, "2024") == "customRegex"

    def test_whitelist_bypasses(self) -> None:
        validator = datetime(whitelist=["N/A"])
        assert validator.parse("N/A") == "N/A"
        assert _key(validator, "soon") == "format"

    def test_timezone_option(self) -> None:
        validator = datetime(timezone="Asia/Taipei")
        assert validator.timezone == "Asia/Taipei"
        with pytest.raises(ConfigurationError):
            datetime(timezone="Mars/Olympus_Mons")


class TestTime:
    """Tests for time().
    time() 测试。
    """

    def test_default_format(self) -> None:
        assert time().parse("14:30") == "14:30"
        assert _key(time(), "24:00") == "format"
        assert _key(time(), "") == "required"

    def test_twelve_hour(self) -> None:
        assert time(format="hh:mm A").parse("02:30 PM") == "02:30 PM"
        assert _key(time(format="hh:mm A"), "14:30") == "format"

    def test_seconds(self) -> None:
        validator = time(format="HH:mm:ss", second_step=30)
        assert validator.parse("10:00:30") == "10:00:30"
        assert _key(validator, "10:00:15") == "second"

    def test_second_step_needs_seconds_format(self) -> None:
        assert time(second_step=30).parse("10:01") == "10:01"

    def test_minute_and_hour(self) -> None:
        assert _key(time(minute_step=30), "10:15") == "minute"
        assert _key(time(min_hour=8, max_hour=18), "19:00") == "hour"

    def test_bounds_compare_clock_values(self) -> None:
        """Bounds use the same format as the value / 边界与值使用相同格式。"""
        validator = time(format="hh:mm A", min="09:00 AM", max="05:00 PM")
        assert validator.parse("12:00 PM") == "12:00 PM"
        assert _key(validator, "08:59 AM") == "min"
        assert _key(validator, "05:01 PM") == "max"

    def test_unparsable_bound_rejected(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            time(format="HH:mm", min="9am")
        assert exc_info.value.error_code == "invalid_options"

    def test_regex(self) -> None:
        assert _key(time(regex=r"^\d{4}$"), "12:00") == "customRegex"


class TestTemporalUtilities:
    """Tests for no-throw datetime helpers.
    不抛异常的日期时间辅助函数测试。
    """

    def test_parse_time_to_minutes(self) -> None:
        assert parse_time_to_minutes("02:30 PM", "hh:mm A") == 870
        assert parse_time_to_minutes("25:00", "HH:mm") is None

    def test_normalize_time(self) -> None:
        assert normalize_time("2:05 pm", "h:mm A") == "14:05"
        assert normalize_time("9:05", "H:mm") == "09:05"

    def test_normalize_iso(self) -> None:
        assert normalize_datetime_value("2024-03-01T10:00:00Z", "ISO") == "2024-03-01T10:00:00.000Z"
        assert normalize_datetime_value("nope", "ISO") is None
