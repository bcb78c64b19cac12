"""Chart commands: the monthly and per-description aggregations as tables."""

import click
from cashbook.cli.filter_options import filter_options
from cashbook.domain.aggregation import (
    expense_totals_by_description,
    monthly_balance,
    monthly_costs,
)
from cashbook.domain.entities import FilterCriteria
from cashbook.domain.entry_filter import EntryFilter
from cashbook.utils.amount_parser import format_currency

_entry_filter = EntryFilter()


def _selected_entries(ctx, criteria: FilterCriteria):
    return _entry_filter.apply(ctx.obj["service"].list(), criteria)


@click.group()
def chart_group():
    """Show chart data for entries."""
    pass


@chart_group.command("costs")
@filter_options
@click.pass_context
def costs_chart(ctx, criteria: FilterCriteria) -> None:
    """Monthly expenses split into fixed and variable cost."""
    rows = monthly_costs(_selected_entries(ctx, criteria))
    if not rows:
        click.echo("No dated expenses found.")
        return

    click.echo(f"{'Month':<9} {'Fixed':>16} {'Variable':>16} {'Total':>16}")
    for row in rows:
        click.echo(
            f"{row.month.label:<9} {format_currency(row.fixed_cost):>16} "
            f"{format_currency(row.variable_cost):>16} {format_currency(row.total):>16}"
        )


@chart_group.command("balance")
@filter_options
@click.pass_context
def balance_chart(ctx, criteria: FilterCriteria) -> None:
    """Monthly income against expenses (undated entries are left out)."""
    rows = monthly_balance(_selected_entries(ctx, criteria))
    if not rows:
        click.echo("No dated entries found.")
        return

    click.echo(f"{'Month':<9} {'Income':>16} {'Expenses':>16} {'Net':>16}")
    for row in rows:
        click.echo(
            f"{row.month.label:<9} {format_currency(row.income):>16} "
            f"{format_currency(row.expense):>16} {format_currency(row.net):>16}"
        )


@chart_group.command("descriptions")
@click.option("--ranked", is_flag=True, help="Order by value, highest first")
@filter_options
@click.pass_context
def descriptions_chart(ctx, ranked: bool, criteria: FilterCriteria) -> None:
    """Expense totals grouped by description."""
    rows = expense_totals_by_description(_selected_entries(ctx, criteria), ranked=ranked)
    if not rows:
        click.echo("No expenses found.")
        return

    click.echo(f"{'Description':<40} {'Value':>16} {'Count':>6} {'Share':>6}")
    for row in rows:
        click.echo(
            f"{row.description[:40]:<40} {format_currency(row.value):>16} "
            f"{row.count:>6} {row.share:>6.0%}"
        )


def register_commands(cli: click.Group) -> None:
    """Register chart commands with main CLI."""
    cli.add_command(chart_group, name="chart")
