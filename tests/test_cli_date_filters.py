"""Tests for CLI date filter helper."""

from datetime import date

import click
import pytest

from cashbook.cli.date_filters import resolve_cli_date_range
from cashbook.utils.date_parser import get_date_range


def _ctx() -> click.Context:
    return click.Context(click.Command("test"))


def test_resolve_cli_date_range_rejects_multiple_periods(capsys):
    period_flags = {"this-month": True, "last-month": True}

    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_date_range(
            _ctx(), start_date=None, end_date=None, period_flags=period_flags
        )

    assert excinfo.value.exit_code == 1
    assert "Only one period option" in capsys.readouterr().err


def test_resolve_cli_date_range_rejects_period_with_start_end(capsys):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_date_range(
            _ctx(),
            start_date="2025-01-01",
            end_date=None,
            period_flags={"this-month": True},
        )

    assert excinfo.value.exit_code == 1
    assert "cannot be combined" in capsys.readouterr().err


def test_resolve_cli_date_range_returns_period_range():
    start, end = resolve_cli_date_range(
        _ctx(), start_date=None, end_date=None, period_flags={"this-month": True}
    )

    assert (start, end) == get_date_range("this-month")


def test_resolve_cli_date_range_parses_explicit_dates():
    start, end = resolve_cli_date_range(
        _ctx(), start_date="2025-01-02", end_date="2025-01-05", period_flags={}
    )

    assert start == date(2025, 1, 2)
    assert end == date(2025, 1, 5)


def test_resolve_cli_date_range_no_dates():
    assert resolve_cli_date_range(
        _ctx(), start_date=None, end_date=None, period_flags={"this-month": False}
    ) == (None, None)


def test_resolve_cli_date_range_invalid_start_date(capsys):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_date_range(
            _ctx(), start_date="not-a-date", end_date=None, period_flags={}
        )

    assert excinfo.value.exit_code == 1
    assert "Invalid start date" in capsys.readouterr().err


def test_resolve_cli_date_range_rejects_reversed_range(capsys):
    with pytest.raises(click.exceptions.Exit):
        resolve_cli_date_range(
            _ctx(), start_date="2025-02-01", end_date="2025-01-01", period_flags={}
        )

    assert "must not be after" in capsys.readouterr().err


def test_resolve_cli_date_range_uses_default_range():
    default = (date(2025, 1, 1), date(2025, 1, 31))

    assert resolve_cli_date_range(
        _ctx(), start_date=None, end_date=None, period_flags={}, default_range=default
    ) == default


def test_resolve_cli_date_range_explicit_dates_override_default():
    start, end = resolve_cli_date_range(
        _ctx(),
        start_date="2024-06-01",
        end_date=None,
        period_flags={},
        default_range=(date(2025, 1, 1), date(2025, 1, 31)),
    )

    assert start == date(2024, 6, 1)
    assert end is None
