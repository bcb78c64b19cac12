"""Add entry command."""

import click
from cashbook.cli.error_handling import handle_domain_error
from cashbook.domain.entities import CATEGORIES, EntryKind, EntryStatus
from cashbook.domain.errors import DomainError
from cashbook.utils.amount_parser import format_currency, parse_amount
from cashbook.utils.date_parser import parse_date


@click.command("add")
@click.option("--description", required=True, help="Entry description")
@click.option("--category", required=True, type=click.Choice(CATEGORIES), help="Entry category")
@click.option(
    "--kind", required=True, type=click.Choice([k.value for k in EntryKind]), help="Income or Expense"
)
@click.option("--amount", required=True, help="Positive amount (e.g., 150.00 or 1.234,56)")
@click.option("--due-date", help="Due date (YYYY-MM-DD or relative like 'today', 'tomorrow')")
@click.option("--note", default="", help="Free text note")
@click.option(
    "--status",
    type=click.Choice([s.value for s in EntryStatus]),
    default=EntryStatus.OPEN.value,
    show_default=True,
    help="Open (pending) or Closed (settled)",
)
@click.option("--barcode", help="Payment slip code")
@click.option("--id", "entry_id", help="Entry ID (auto-generated if not provided)")
@click.pass_context
def add_entry(
    ctx,
    description: str,
    category: str,
    kind: str,
    amount: str,
    due_date: str | None,
    note: str,
    status: str,
    barcode: str | None,
    entry_id: str | None,
):
    """Add an income or expense entry.

    Examples:
        cashbook add --description "Electricity" --category FixedCost --kind Expense --amount 150.00 --due-date 2025-01-15
        cashbook add --description "Salary" --category Income --kind Income --amount 5000
    """
    service = ctx.obj["service"]

    due = None
    if due_date:
        try:
            due = parse_date(due_date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    try:
        entry_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        entry = service.create(
            description=description,
            category=category,
            kind=kind,
            amount=entry_amount,
            due_date=due,
            note=note,
            status=status,
            barcode=barcode,
            entry_id=entry_id,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created entry {entry.id}")
    click.echo(f"  Description: {entry.description}")
    click.echo(f"  Amount: {format_currency(entry.amount)}")
    if entry.due_date:
        click.echo(f"  Due date: {entry.due_date}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_entry)
