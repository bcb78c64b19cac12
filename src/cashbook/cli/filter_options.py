"""Shared click options for selecting and ordering entries."""

import functools
from datetime import date

import click

from cashbook.cli.date_filters import resolve_cli_date_range
from cashbook.domain.entities import (
    CATEGORIES,
    DateRange,
    EntryKind,
    EntryStatus,
    FilterCriteria,
    SortDirection,
)
from cashbook.utils.date_parser import PERIODS, month_bounds


def filter_options(command=None, *, this_month_by_default: bool = False):
    """Attach search, filter, date range and sort options to a command.

    The wrapped command receives a single ``criteria`` keyword argument.
    With ``this_month_by_default`` the date range falls back to the current
    month when no dates or period are given, and an ``--all`` flag lifts it.
    """
    if command is None:
        return functools.partial(
            filter_options, this_month_by_default=this_month_by_default
        )

    @click.option("--search", help="Text to find in description or note")
    @click.option("--category", type=click.Choice(CATEGORIES), help="Category filter")
    @click.option(
        "--status", type=click.Choice([s.value for s in EntryStatus]), help="Status filter"
    )
    @click.option(
        "--kind", type=click.Choice([k.value for k in EntryKind]), help="Kind filter"
    )
    @click.option("--start-date", help="Start of due date range (YYYY-MM-DD or 'today')")
    @click.option("--end-date", help="End of due date range (YYYY-MM-DD or 'today')")
    @click.option("--this-month", is_flag=True, help="Due this month")
    @click.option("--this-year", is_flag=True, help="Due this year")
    @click.option("--this-week", is_flag=True, help="Due this week")
    @click.option("--last-month", is_flag=True, help="Due last month")
    @click.option("--last-year", is_flag=True, help="Due last year")
    @click.option("--last-week", is_flag=True, help="Due last week")
    @click.option(
        "--asc/--desc",
        "ascending",
        default=False,
        help="Oldest due date first (default: newest first)",
    )
    @functools.wraps(command)
    def wrapper(*args, **kwargs):
        ctx = click.get_current_context()
        period_flags = {
            period: kwargs.pop(period.replace("-", "_")) for period in PERIODS
        }
        default_range = None
        if this_month_by_default and not kwargs.pop("show_all"):
            default_range = month_bounds(date.today())
        start, end = resolve_cli_date_range(
            ctx,
            start_date=kwargs.pop("start_date"),
            end_date=kwargs.pop("end_date"),
            period_flags=period_flags,
            default_range=default_range,
        )
        status = kwargs.pop("status")
        kind = kwargs.pop("kind")
        kwargs["criteria"] = FilterCriteria(
            search_text=kwargs.pop("search") or None,
            category=kwargs.pop("category"),
            status=EntryStatus(status) if status else None,
            kind=EntryKind(kind) if kind else None,
            date_range=DateRange(start, end) if start or end else None,
            sort_direction=(
                SortDirection.ASCENDING if kwargs.pop("ascending") else SortDirection.DESCENDING
            ),
        )
        return command(*args, **kwargs)

    if this_month_by_default:
        wrapper = click.option(
            "--all", "show_all", is_flag=True, help="Any due date (default: this month)"
        )(wrapper)
    return wrapper
