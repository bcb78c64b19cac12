"""CLI error handling helpers."""

import click

from cashbook.domain.errors import DomainError, StoreUnavailableError

STORE_HINT = "Check --db-path or the CASHBOOK_DB_PATH environment variable."
IMPORT_HINT = "No entries were imported."


def handle_domain_error(
    ctx: click.Context, error: DomainError, importing: bool = False
) -> None:
    """Render a domain error and exit with failure.

    Store failures add a hint about the database location. A failed import
    says so explicitly, since a rejected batch is never partially stored.
    """
    click.echo(f"Error: {error}", err=True)
    if isinstance(error, StoreUnavailableError):
        click.echo(STORE_HINT, err=True)
    elif importing:
        click.echo(IMPORT_HINT, err=True)
    ctx.exit(1)
