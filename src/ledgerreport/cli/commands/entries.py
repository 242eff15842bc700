"""Ledger entry listing command."""

import click

from ledgerreport.cli.date_filters import resolve_cli_date_range
from ledgerreport.cli.error_handling import handle_domain_error
from ledgerreport.cli.options import COMPANY_ID, ENTRY_ID
from ledgerreport.cli.output import money
from ledgerreport.domain.entities import CashflowCategory
from ledgerreport.domain.errors import DomainError
from ledgerreport.domain.ledger import LedgerService


@click.command("entries")
@click.option("--id", "entry_id", type=ENTRY_ID, help="Show a single entry by ID")
@click.option("--company-id", type=COMPANY_ID, help="Company ID")
@click.option("--start-date", help="Start date (YYYY-MM-DD)")
@click.option("--end-date", help="End date (YYYY-MM-DD)")
@click.option("--bank-account", help="Bank account identifier")
@click.option(
    "--category",
    type=click.Choice([c.value for c in CashflowCategory], case_sensitive=False),
    help="Only show entries classified into this activity",
)
@click.option("--unreconciled", is_flag=True, help="Only show entries not yet reconciled")
@click.option("--cash-only", is_flag=True, help="Only show cash transactions")
@click.pass_context
def list_entries(
    ctx,
    entry_id: int | None,
    company_id: int | None,
    start_date: str | None,
    end_date: str | None,
    bank_account: str | None,
    category: str | None,
    unreconciled: bool,
    cash_only: bool,
):
    """List ledger entries with their derived cash-flow classification.

    With --id, show only that entry; the other filters are ignored.
    """
    service = LedgerService(ctx.obj["db"])
    if entry_id is not None:
        try:
            entry = service.get_entry(entry_id)
        except DomainError as e:
            handle_domain_error(ctx, e)
            return
        _print_entries([entry])
        return

    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, period_flags={}
    )
    selected_category = None
    if category is not None:
        selected_category = next(c for c in CashflowCategory if c.value.lower() == category.lower())

    try:
        entries = service.list_entries(
            company_id=company_id,
            start_date=start,
            end_date=end,
            bank_account=bank_account,
            unreconciled_only=unreconciled,
            cash_only=cash_only,
            category=selected_category,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not entries:
        click.echo("No ledger entries found.")
        return

    click.echo(f"\nFound {len(entries)} entr{'y' if len(entries) == 1 else 'ies'}:")
    _print_entries(entries)


def _print_entries(entries):
    click.echo("-" * 110)
    click.echo(
        f"{'ID':<5} {'Date':<11} {'Account':<18} {'Net':>12}  {'Activity':<10} {'Cash':<5} "
        f"{'Bank':<10} {'Ref':<8} {'Rec':<4} Note"
    )
    click.echo("-" * 110)
    for entry in entries:
        click.echo(
            f"{entry.id:<5} {str(entry.date):<11} {entry.account[:18]:<18} {money(entry.net):>12}  "
            f"{entry.cashflow_category.value:<10} {'yes' if entry.is_cash_transaction else 'no':<5} "
            f"{(entry.bank_account or '')[:10]:<10} {(entry.reference or '')[:8]:<8} "
            f"{'yes' if entry.reconciled else 'no':<4} {entry.note or ''}"
        )


def register_commands(cli):
    """Register entries command with main CLI."""
    cli.add_command(list_entries)
