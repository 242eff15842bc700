"""Date parsing utilities."""

from datetime import date, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

PERIODS = ("this-month", "last-month", "this-year", "last-year")


def parse_iso_date(date_str: str) -> date:
    """Parse a strict ISO calendar date (YYYY-MM-DD).

    Raises:
        ValueError: If the string is not an ISO date
    """
    try:
        return date.fromisoformat(date_str.strip())
    except (ValueError, AttributeError) as e:
        raise ValueError(f"expected YYYY-MM-DD ({e})")


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Accepts ISO dates, anything dateutil understands ("January 31, 2025"),
    and a few relative forms: "today", "yesterday", "this month",
    "last month", "this year", "last year". Month and year forms resolve
    to the first day of the period.

    Raises:
        ValueError: If date string cannot be parsed
    """
    text = date_str.strip().lower()
    today = date.today()

    if text == "today":
        return today
    if text == "yesterday":
        return today - timedelta(days=1)

    relative = {
        "this month": today.replace(day=1),
        "last month": (today - relativedelta(months=1)).replace(day=1),
        "this year": today.replace(month=1, day=1),
        "last year": today.replace(month=1, day=1) - relativedelta(years=1),
    }
    if text in relative:
        return relative[text]

    try:
        return date_parser.parse(text).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def get_date_range(period: str, today: date | None = None) -> tuple[date, date]:
    """Get inclusive start and end dates for a reporting period.

    Args:
        period: One of this-month, last-month, this-year, last-year
        today: Reference date, defaults to date.today()

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = today or date.today()

    if period == "this-month":
        return today.replace(day=1), today
    if period == "this-year":
        return today.replace(month=1, day=1), today
    if period == "last-month":
        first_of_month = today.replace(day=1)
        return first_of_month - relativedelta(months=1), first_of_month - timedelta(days=1)
    if period == "last-year":
        first_of_year = today.replace(month=1, day=1)
        return first_of_year - relativedelta(years=1), first_of_year - timedelta(days=1)

    raise ValueError(f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}")
