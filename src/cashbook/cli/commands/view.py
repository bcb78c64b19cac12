"""Entry listing command."""

import click
from cashbook.cli.filter_options import filter_options
from cashbook.cli.formatting import echo_entry_details, echo_entry_table
from cashbook.domain.aggregation import compute_summary
from cashbook.domain.entities import FilterCriteria
from cashbook.domain.entry_filter import apply_filters
from cashbook.utils.amount_parser import format_currency


@click.command("list")
@click.option("--verbose", "-v", is_flag=True, help="Show all fields including note and barcode")
@filter_options(this_month_by_default=True)
@click.pass_context
def list_entries(ctx, verbose: bool, criteria: FilterCriteria):
    """List entries with optional search, filters and ordering.

    Without a period or dates only entries due this month are listed; use
    --all to list every entry. Entries without a due date are always listed.
    """
    service = ctx.obj["service"]
    entries = apply_filters(service.list(), criteria)

    if not entries:
        click.echo("No entries found.")
        return

    click.echo(f"\nFound {len(entries)} entr{'y' if len(entries) == 1 else 'ies'}:")
    if verbose:
        for entry in entries:
            echo_entry_details(entry)
    else:
        echo_entry_table(entries)

    totals = compute_summary(entries)
    click.echo("-" * 110)
    click.echo(
        f"Income: {format_currency(totals.total_income)} | "
        f"Expenses: {format_currency(totals.total_expense)} | "
        f"Balance: {format_currency(totals.balance)}"
    )


def register_commands(cli):
    """Register list command with main CLI."""
    cli.add_command(list_entries)
