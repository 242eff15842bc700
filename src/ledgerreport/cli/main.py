"""Main CLI entry point."""

from dataclasses import replace

import click
from dotenv import load_dotenv

from ledgerreport.cli.error_handling import handle_domain_error
from ledgerreport.config import Settings, configure_logging
from ledgerreport.database.factories import create_database
from ledgerreport.domain.errors import DomainError

# Import and register all commands at module level
from ledgerreport.cli.commands import cashflow, entries, reconcile, seed, serve

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--database-url",
    help="SQLAlchemy database URL (overrides LEDGERREPORT_DATABASE_URL environment variable)",
    envvar="LEDGERREPORT_DATABASE_URL",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    envvar="LEDGERREPORT_LOG_LEVEL",
    default="WARNING",
    show_default=True,
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx, database_url: str | None, log_level: str):
    """ledgerreport - cash-flow and bank reconciliation reports.

    Reads double-entry ledger rows from a relational database and produces
    cash-flow statements and bank reconciliation reports.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    # Open the ledger store only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is None:
        return

    try:
        settings = Settings.from_env()
    except ValueError as e:
        click.echo(f"Error: Invalid configuration: {e}", err=True)
        ctx.exit(1)
    settings = replace(settings, log_level=log_level.upper())
    if database_url:
        settings = replace(settings, database_url=database_url)

    db = create_database(settings.database_url)
    try:
        db.connect()
        db.initialize_schema()
    except DomainError as e:
        handle_domain_error(ctx, e)
    ctx.call_on_close(db.disconnect)

    ctx.obj["settings"] = settings
    ctx.obj["db"] = db


# Register all commands
cashflow.register_commands(cli)
reconcile.register_commands(cli)
entries.register_commands(cli)
seed.register_commands(cli)
serve.register_commands(cli)


def main():
    """Main entry point for CLI."""
    load_dotenv()
    cli()


if __name__ == "__main__":
    main()
