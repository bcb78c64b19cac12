"""Tests for date parsing and named periods."""

import pytest
from datetime import date, timedelta
from cashbook.utils.date_parser import get_date_range, month_bounds, parse_date


def test_parse_iso_date():
    assert parse_date("2025-01-15") == date(2025, 1, 15)


def test_parse_day_first_date():
    assert parse_date("05/01/2025") == date(2025, 1, 5)


def test_parse_relative_dates():
    today = date.today()
    assert parse_date("today") == today
    assert parse_date("Yesterday") == today - timedelta(days=1)
    assert parse_date("tomorrow") == today + timedelta(days=1)


def test_parse_invalid_date():
    with pytest.raises(ValueError):
        parse_date("not-a-date")


def test_month_bounds_handles_february():
    assert month_bounds(date(2024, 2, 10)) == (date(2024, 2, 1), date(2024, 2, 29))


def test_this_month_covers_whole_month():
    assert get_date_range("this-month", today=date(2025, 1, 15)) == (
        date(2025, 1, 1),
        date(2025, 1, 31),
    )


def test_last_month_crosses_year():
    assert get_date_range("last-month", today=date(2025, 1, 15)) == (
        date(2024, 12, 1),
        date(2024, 12, 31),
    )


def test_years():
    assert get_date_range("this-year", today=date(2025, 6, 1)) == (
        date(2025, 1, 1),
        date(2025, 12, 31),
    )
    assert get_date_range("last-year", today=date(2025, 6, 1)) == (
        date(2024, 1, 1),
        date(2024, 12, 31),
    )


def test_weeks_start_on_monday():
    # 2025-01-15 is a Wednesday
    assert get_date_range("this-week", today=date(2025, 1, 15)) == (
        date(2025, 1, 13),
        date(2025, 1, 19),
    )
    assert get_date_range("last-week", today=date(2025, 1, 15)) == (
        date(2025, 1, 6),
        date(2025, 1, 12),
    )


def test_unknown_period():
    with pytest.raises(ValueError, match="Unknown period"):
        get_date_range("next-decade")
