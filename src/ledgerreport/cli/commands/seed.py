"""Sample data command."""

import click

from ledgerreport.cli.error_handling import handle_domain_error
from ledgerreport.cli.options import COMPANY_ID
from ledgerreport.database.seed import seed_sample_data
from ledgerreport.domain.errors import DomainError


@click.command("seed")
@click.option("--company-id", type=COMPANY_ID, default=1, show_default=True, help="Company ID to seed")
@click.pass_context
def seed(ctx, company_id: int):
    """Load the sample January 2025 ledger if the company has no entries."""
    try:
        inserted = seed_sample_data(ctx.obj["db"], company_id=company_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if inserted:
        click.echo(f"Seeded {inserted} ledger entries for company {company_id}")
    else:
        click.echo(f"Company {company_id} already has ledger entries; nothing seeded")


def register_commands(cli):
    """Register seed command with main CLI."""
    cli.add_command(seed)
