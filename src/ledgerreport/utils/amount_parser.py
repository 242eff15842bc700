"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

# Largest magnitude a Numeric(14, 2) column holds
MAX_AMOUNT = Decimal("999999999999.99")


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles "19000", "19,000.50", "$19000", "-500" and "(500)" (negative in
    parentheses).

    Raises:
        ValueError: If amount string cannot be parsed or is out of range
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    text = amount_str.strip()

    is_negative = text.startswith("(") and text.endswith(")")
    if is_negative:
        text = text[1:-1]

    text = re.sub(r"[$€£¥,\s]", "", text)

    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if abs(amount) > MAX_AMOUNT:
        raise ValueError(f"Amount '{amount_str}' exceeds {MAX_AMOUNT}")
    return -amount if is_negative else amount
