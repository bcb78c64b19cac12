"""Import, export and template commands for delimited entry text."""

from datetime import date

import click
from cashbook.cli.error_handling import handle_domain_error
from cashbook.cli.filter_options import filter_options
from cashbook.domain import record_codec
from cashbook.domain.entities import FilterCriteria
from cashbook.domain.entry_filter import apply_filters
from cashbook.domain.errors import DomainError


@click.command("import")
@click.argument("records_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def import_entries(ctx, records_file: str):
    """Import entries from a delimited text file.

    The whole file is rejected if any line is invalid.
    """
    service = ctx.obj["service"]

    try:
        entries = record_codec.import_file(records_file)
        stored = service.import_batch(entries)
    except DomainError as e:
        handle_domain_error(ctx, e, importing=True)

    click.echo("\nImport complete:")
    click.echo(f"  Imported: {len(stored)} entries")


@click.command("export")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Output file path")
@filter_options
@click.pass_context
def export_entries(ctx, output: str | None, criteria: FilterCriteria):
    """Export the selected entries to a delimited text file."""
    service = ctx.obj["service"]
    entries = apply_filters(service.list(), criteria)

    path = output or f"cashbook-{date.today():%d-%m-%Y}.csv"
    target = record_codec.export_file(entries, path)
    click.echo(f"Exported {len(entries)} entries to {target}")


@click.command("template")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Output file path")
def write_template(output: str | None):
    """Write an example file showing the import format."""
    target = record_codec.write_template(output)
    click.echo(f"Template written to {target}")


def register_commands(cli):
    """Register import/export commands with main CLI."""
    cli.add_command(import_entries)
    cli.add_command(export_entries)
    cli.add_command(write_template)
