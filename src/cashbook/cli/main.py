"""Main CLI entry point."""

import logging

import click
from cashbook.database.factories import create_sqlite_database
from cashbook.domain.entry import EntryService
from cashbook.domain.errors import DomainError
from cashbook.cli.error_handling import handle_domain_error

# Import and register all commands at module level
from cashbook.cli.commands import add, entry, view, summary, chart, transfer

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides CASHBOOK_DB_PATH environment variable)",
    envvar="CASHBOOK_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    envvar="CASHBOOK_LOG_LEVEL",
    show_default=True,
    help="Logging verbosity (overrides CASHBOOK_LOG_LEVEL environment variable)",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Cashbook - Income and expense ledger.

    Record income and expense entries, filter and search them, view monthly
    charts, and move entries in and out as delimited text.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(level=log_level.upper(), format=LOG_FORMAT)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.call_on_close(db.disconnect)
        ctx.obj["db"] = db
        try:
            ctx.obj["service"] = EntryService(db)
        except DomainError as e:
            handle_domain_error(ctx, e)


# Register all commands
add.register_commands(cli)
entry.register_commands(cli)
view.register_commands(cli)
summary.register_commands(cli)
chart.register_commands(cli)
transfer.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
