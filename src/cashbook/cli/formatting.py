"""Text rendering of entries for the terminal."""

import click

from cashbook.domain.entities import Entry
from cashbook.utils.amount_parser import format_currency


def format_due_date(entry: Entry) -> str:
    """Render a due date as DD/MM/YYYY, or '-' when absent."""
    if entry.due_date is None:
        return "-"
    return entry.due_date.strftime("%d/%m/%Y")


def echo_entry_table(entries: list[Entry]) -> None:
    """Compact one-line-per-entry listing."""
    click.echo("-" * 110)
    click.echo(
        f"{'ID':<38} {'Due':<11} {'Amount':>14} {'Kind':<8} {'Status':<7} {'Description':<30}"
    )
    click.echo("-" * 110)
    for entry in entries:
        click.echo(
            f"{entry.id:<38} {format_due_date(entry):<11} "
            f"{format_currency(entry.amount):>14} {entry.kind.value:<8} "
            f"{entry.status.value:<7} {entry.description[:30]:<30}"
        )


def echo_entry_details(entry: Entry) -> None:
    """Multi-line listing with every field."""
    click.echo(f"\nEntry ID: {entry.id}")
    click.echo(f"  Due date: {format_due_date(entry)}")
    click.echo(f"  Description: {entry.description}")
    if entry.note:
        click.echo(f"  Note: {entry.note}")
    click.echo(f"  Category: {entry.category}")
    click.echo(f"  Kind: {entry.kind.value}")
    click.echo(f"  Amount: {format_currency(entry.amount)}")
    click.echo(f"  Status: {entry.status.value}")
    if entry.barcode:
        click.echo(f"  Barcode: {entry.barcode}")
