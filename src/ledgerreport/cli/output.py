"""Rendering helpers shared by report commands."""

import json
from decimal import Decimal
from typing import Any


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(payload: dict[str, Any]) -> str:
    """Serialize a report payload with amounts as JSON numbers."""
    return json.dumps(payload, indent=2, default=_json_default)


def money(amount: Decimal) -> str:
    """Format an amount for terminal display."""
    return f"${amount:,.2f}"
