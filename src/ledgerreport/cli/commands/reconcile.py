"""Bank reconciliation command."""

import click

from ledgerreport.cli.error_handling import handle_domain_error
from ledgerreport.cli.options import COMPANY_ID
from ledgerreport.cli.output import money, to_json
from ledgerreport.domain.errors import DomainError, invalid_amount
from ledgerreport.domain.reconciliation import ReconciliationService, fixed_bank_balance
from ledgerreport.utils.amount_parser import parse_amount


@click.command("reconcile")
@click.option("--company-id", type=COMPANY_ID, required=True, help="Company ID")
@click.option("--bank-account", required=True, help="Bank account identifier (e.g., MainBank)")
@click.option(
    "--bank-balance",
    help="Bank statement balance (defaults to LEDGERREPORT_BANK_BALANCE)",
)
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.pass_context
def reconcile(ctx, company_id: int, bank_account: str, bank_balance: str | None, as_json: bool):
    """Reconcile a bank account against its statement balance.

    Examples:
        ledgerreport reconcile --company-id 1 --bank-account MainBank
        ledgerreport reconcile --company-id 1 --bank-account MainBank --bank-balance 15500
    """
    statement_balance = None
    if bank_balance is not None:
        try:
            statement_balance = parse_amount(bank_balance)
        except ValueError as e:
            click.echo(f"Error: {invalid_amount(bank_balance, e)}", err=True)
            ctx.exit(1)

    settings = ctx.obj["settings"]
    service = ReconciliationService(
        ctx.obj["db"], bank_balance_provider=fixed_bank_balance(settings.bank_balance)
    )

    try:
        report = service.generate_reconciliation(
            company_id, bank_account, bank_balance=statement_balance
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if as_json:
        click.echo(to_json(report.to_dict()))
        return

    click.echo(f"\nBank Reconciliation - company {company_id}, account {bank_account}")
    click.echo("-" * 60)
    click.echo(f"{'Ledger balance':<40} {money(report.ledger_balance):>19}")
    click.echo(f"{'Bank statement balance':<40} {money(report.bank_balance):>19}")

    if report.reconciling_items:
        click.echo("\nReconciling items:")
        for item in report.reconciling_items:
            reference = item.reference or "-"
            click.echo(f"  {reference:<12} {item.type:<26} {money(item.amount):>18}")
    else:
        click.echo("\nNo reconciling items.")

    click.echo("-" * 60)
    click.echo(f"{'Adjusted bank balance':<40} {money(report.adjusted_balance):>19}")


def register_commands(cli):
    """Register reconcile command with main CLI."""
    cli.add_command(reconcile)
