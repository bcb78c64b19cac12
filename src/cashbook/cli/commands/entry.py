"""Entry management commands."""

import click
from cashbook.cli.error_handling import handle_domain_error
from cashbook.cli.formatting import echo_entry_details
from cashbook.domain.entities import CATEGORIES, EntryKind, EntryStatus
from cashbook.domain.errors import DomainError
from cashbook.utils.amount_parser import parse_amount
from cashbook.utils.date_parser import parse_date


@click.group()
def entry_group():
    """Manage entries."""
    pass


@entry_group.command("show")
@click.argument("entry_id")
@click.pass_context
def show_entry(ctx, entry_id: str) -> None:
    """Show every field of an entry."""
    service = ctx.obj["service"]
    try:
        entry = service.require(entry_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    echo_entry_details(entry)


@entry_group.command("update")
@click.argument("entry_id")
@click.option("--description", help="Entry description")
@click.option("--category", type=click.Choice(CATEGORIES), help="Entry category")
@click.option("--kind", type=click.Choice([k.value for k in EntryKind]), help="Income or Expense")
@click.option("--amount", help="Positive amount")
@click.option("--due-date", help="Due date (YYYY-MM-DD, 'today') or empty string to clear")
@click.option("--note", help="Free text note")
@click.option("--status", type=click.Choice([s.value for s in EntryStatus]), help="Open or Closed")
@click.option("--barcode", help="Payment slip code or empty string to clear")
@click.pass_context
def update_entry(
    ctx,
    entry_id: str,
    description: str | None,
    category: str | None,
    kind: str | None,
    amount: str | None,
    due_date: str | None,
    note: str | None,
    status: str | None,
    barcode: str | None,
) -> None:
    """Update an entry.

    Updates only the fields that are provided. Use --due-date "" to clear
    the due date.

    Examples:
        cashbook entry update exp-1 --amount 175.00
        cashbook entry update exp-1 --due-date ""  # Clear due date
    """
    service = ctx.obj["service"]
    patch = {}

    for field, value in (
        ("description", description),
        ("category", category),
        ("kind", kind),
        ("note", note),
        ("status", status),
        ("barcode", barcode),
    ):
        if value is not None:
            patch[field] = value

    if amount is not None:
        try:
            patch["amount"] = parse_amount(amount)
        except ValueError as e:
            click.echo(f"Error: Invalid amount format: {e}", err=True)
            ctx.exit(1)

    if due_date is not None:
        if due_date == "":
            patch["due_date"] = None
        else:
            try:
                patch["due_date"] = parse_date(due_date)
            except ValueError as e:
                click.echo(f"Error: Invalid date format: {e}", err=True)
                ctx.exit(1)

    if not patch:
        click.echo("Nothing to update.")
        return

    try:
        service.update(entry_id, **patch)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated entry {entry_id}")


@entry_group.command("delete")
@click.argument("entry_id")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_entry(ctx, entry_id: str, yes: bool) -> None:
    """Delete an entry.

    Examples:
        cashbook entry delete exp-1
    """
    service = ctx.obj["service"]

    if service.get(entry_id) is None:
        click.echo(f"Error: Entry '{entry_id}' not found", err=True)
        ctx.exit(1)

    if not yes and not click.confirm(f"Are you sure you want to delete entry {entry_id}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete(entry_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted entry {entry_id}")


@entry_group.command("toggle")
@click.argument("entry_id")
@click.pass_context
def toggle_entry(ctx, entry_id: str) -> None:
    """Flip an entry between Open and Closed."""
    service = ctx.obj["service"]
    try:
        entry = service.toggle_status(entry_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Entry {entry_id} is now {entry.status.value}")


def register_commands(cli: click.Group) -> None:
    """Register entry commands with main CLI."""
    cli.add_command(entry_group, name="entry")
