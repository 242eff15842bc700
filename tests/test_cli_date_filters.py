"""Tests for CLI date filter helper."""

from datetime import date

import click
import pytest

from ledgerreport.cli.date_filters import resolve_cli_date_range
from ledgerreport.utils.date_parser import get_date_range


def _ctx() -> click.Context:
    return click.Context(click.Command("test"))


def test_rejects_multiple_periods(capsys):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_date_range(
            _ctx(),
            start_date=None,
            end_date=None,
            period_flags={"this-month": True, "last-month": True},
        )

    assert excinfo.value.exit_code == 1
    assert "Only one period option" in capsys.readouterr().err


def test_rejects_period_with_start_end(capsys):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_date_range(
            _ctx(),
            start_date="2025-01-01",
            end_date=None,
            period_flags={"this-month": True},
        )

    assert excinfo.value.exit_code == 1
    assert "cannot be combined" in capsys.readouterr().err


def test_returns_period_range():
    start, end = resolve_cli_date_range(
        _ctx(),
        start_date=None,
        end_date=None,
        period_flags={"last-year": True, "this-month": False},
    )

    assert (start, end) == get_date_range("last-year")


def test_parses_explicit_dates():
    start, end = resolve_cli_date_range(
        _ctx(),
        start_date="2025-01-01",
        end_date="2025-01-31",
        period_flags={},
    )

    assert start == date(2025, 1, 1)
    assert end == date(2025, 1, 31)


def test_open_ended_range():
    start, end = resolve_cli_date_range(_ctx(), start_date=None, end_date="2025-01-31", period_flags={})

    assert start is None
    assert end == date(2025, 1, 31)


def test_invalid_end_date(capsys):
    with pytest.raises(click.exceptions.Exit):
        resolve_cli_date_range(_ctx(), start_date=None, end_date="gibberish", period_flags={})

    assert "Invalid end date" in capsys.readouterr().err
