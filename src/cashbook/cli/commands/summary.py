"""Summary command."""

import click
from cashbook.domain.aggregation import compute_summary
from cashbook.utils.amount_parser import format_currency


@click.command("summary")
@click.pass_context
def summary(ctx):
    """Show headline totals for all entries."""
    service = ctx.obj["service"]
    totals = compute_summary(service.list())

    balance_note = "positive" if totals.balance >= 0 else "negative"
    click.echo(f"{'Balance':<20} {format_currency(totals.balance):>18}  ({balance_note})")
    click.echo(f"{'Income':<20} {format_currency(totals.total_income):>18}")
    click.echo(f"{'Expenses':<20} {format_currency(totals.total_expense):>18}")
    click.echo(f"{'Open expenses':<20} {totals.open_count:>18}")
    click.echo(f"{'Closed expenses':<20} {totals.closed_count:>18}")


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
