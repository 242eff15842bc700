"""Cash-flow statement command."""

import click

from ledgerreport.cli.date_filters import period_options, resolve_cli_date_range
from ledgerreport.cli.error_handling import handle_domain_error
from ledgerreport.cli.options import COMPANY_ID
from ledgerreport.cli.output import money, to_json
from ledgerreport.domain.cashflow import CashFlowService
from ledgerreport.domain.entities import CashflowCategory, ClosingBalanceScope
from ledgerreport.domain.errors import DomainError

SCOPE_CHOICES = [scope.value for scope in ClosingBalanceScope]


@click.command("cashflow")
@click.option("--company-id", type=COMPANY_ID, required=True, help="Company ID")
@click.option("--from", "from_date", help="Start date (YYYY-MM-DD or relative like 'last month')")
@click.option("--to", "to_date", help="End date (YYYY-MM-DD or relative like 'today')")
@period_options
@click.option(
    "--scope",
    type=click.Choice(SCOPE_CHOICES),
    help="Entries counted in the closing balance (defaults to LEDGERREPORT_CLOSING_BALANCE_SCOPE)",
)
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.pass_context
def cashflow(
    ctx,
    company_id: int,
    from_date: str | None,
    to_date: str | None,
    this_month: bool,
    last_month: bool,
    this_year: bool,
    last_year: bool,
    scope: str | None,
    as_json: bool,
):
    """Show the cash-flow statement for a company.

    Examples:
        ledgerreport cashflow --company-id 1 --from 2025-01-01 --to 2025-01-31
        ledgerreport cashflow --company-id 1 --last-month --json
    """
    start, end = resolve_cli_date_range(
        ctx,
        start_date=from_date,
        end_date=to_date,
        period_flags={
            "this-month": this_month,
            "last-month": last_month,
            "this-year": this_year,
            "last-year": last_year,
        },
    )
    if start is None or end is None:
        click.echo("Error: Provide both --from and --to, or one period option.", err=True)
        ctx.exit(1)

    settings = ctx.obj["settings"]
    closing_scope = ClosingBalanceScope(scope) if scope else settings.closing_balance_scope
    service = CashFlowService(ctx.obj["db"], closing_balance_scope=closing_scope)

    try:
        report = service.generate_cash_flow(company_id, start, end)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if as_json:
        click.echo(to_json(report.to_dict()))
        return

    click.echo(f"\nCash Flow Statement - company {company_id}, {start} to {end}")
    click.echo("-" * 64)
    click.echo(f"{'Activity':<16} {'Inflows':>15} {'Outflows':>15} {'Net':>15}")
    click.echo("-" * 64)
    for category in CashflowCategory:
        totals = report.for_category(category)
        click.echo(
            f"{category.value:<16} {money(totals.inflows):>15} "
            f"{money(totals.outflows):>15} {money(totals.net):>15}"
        )
    click.echo("-" * 64)
    click.echo(f"{'Net change':<48} {money(report.net_change):>15}")
    click.echo(f"{'Closing balance (' + closing_scope.value + ')':<48} {money(report.closing_balance):>15}")


def register_commands(cli):
    """Register cashflow command with main CLI."""
    cli.add_command(cashflow)
