"""CLI helpers for date range resolution."""

from datetime import date

import click

from ledgerreport.utils.date_parser import get_date_range, parse_date

PERIOD_OPTIONS = "--this-month, --last-month, --this-year, --last-year"


def period_options(command):
    """Attach the reporting-period flags to a click command."""
    for flag, help_text in reversed(
        [
            ("--this-month", "Report on the current month to date"),
            ("--last-month", "Report on the previous calendar month"),
            ("--this-year", "Report on the current year to date"),
            ("--last-year", "Report on the previous calendar year"),
        ]
    ):
        command = click.option(flag, is_flag=True, help=help_text)(command)
    return command


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    period_flags: dict[str, bool],
) -> tuple[date | None, date | None]:
    """Resolve CLI date range from period flags or explicit dates."""
    selected = [period for period, is_set in period_flags.items() if is_set]

    if len(selected) > 1:
        click.echo(f"Error: Only one period option ({PERIOD_OPTIONS}) can be specified at a time.", err=True)
        ctx.exit(1)

    if selected and (start_date or end_date):
        click.echo("Error: Period options cannot be combined with explicit start or end dates.", err=True)
        ctx.exit(1)

    if selected:
        return get_date_range(selected[0])

    start = None
    end = None
    if start_date:
        try:
            start = parse_date(start_date)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    if end_date:
        try:
            end = parse_date(end_date)
        except ValueError as e:
            click.echo(f"Error: Invalid end date: {e}", err=True)
            ctx.exit(1)

    return start, end
