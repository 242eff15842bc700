"""CLI error handling helpers."""

import logging

import click

from ledgerreport.domain.errors import GENERIC_DATASTORE_MESSAGE, DatastoreError, DomainError

log = logging.getLogger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure.

    Datastore failures are logged in full but shown to the user generically.
    """
    if isinstance(error, DatastoreError):
        log.error("%s", error, exc_info=error)
        click.echo(f"Error: {GENERIC_DATASTORE_MESSAGE}", err=True)
    else:
        click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
