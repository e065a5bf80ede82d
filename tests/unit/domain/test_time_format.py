"""Tests for floor time formatting."""

from datetime import datetime, timezone

from nightbase.domain.policies.time_format import format_date, format_time


def test_format_time_converts_utc_to_tokyo():
    value = datetime(2026, 10, 19, 12, 5, tzinfo=timezone.utc)
    assert format_time(value) == "21:05"


def test_format_time_naive_is_utc():
    assert format_time(datetime(2026, 10, 19, 15, 30)) == "00:30"


def test_format_time_iso_string_with_z():
    assert format_time("2026-10-19T10:00:00Z") == "19:00"


def test_format_time_other_timezone():
    value = datetime(2026, 1, 1, 0, 0, tzinfo=timezone.utc)
    assert format_time(value, tz="UTC") == "00:00"


def test_format_time_missing_or_bad_value():
    assert format_time(None) == "-"
    assert format_time("") == "-"
    assert format_time("not a date") == "-"


def test_format_date_crosses_midnight():
    value = datetime(2026, 10, 19, 16, 0, tzinfo=timezone.utc)
    assert format_date(value) == "10月20日"


def test_format_date_missing():
    assert format_date(None) == "-"


def test_unknown_timezone_gives_placeholder():
    assert format_time("2026-10-19T10:00:00Z", tz="Asia/Tokio") == "-"
    assert format_date("2026-10-19T10:00:00Z", tz="Asia/Tokio") == "-"
