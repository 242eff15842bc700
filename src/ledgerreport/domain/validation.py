"""Input checks shared by the report services."""

from typing import Any

from ledgerreport.domain.errors import ValidationError, invalid_company_id, missing_parameters


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def require_parameters(**values: Any) -> None:
    """Raise ValidationError naming every parameter that is absent or blank."""
    missing = [name for name, value in values.items() if _is_missing(value)]
    if missing:
        raise ValidationError(missing_parameters(missing))


# Company ids are stored as signed 64-bit integers
MIN_COMPANY_ID = 1
MAX_COMPANY_ID = 2**63 - 1


def parse_company_id(raw: str) -> int:
    """Parse a company id, rejecting values outside the stored id range.

    Raises:
        ValidationError: If the value is not an integer in range
    """
    try:
        company_id = int(raw)
    except (TypeError, ValueError):
        raise ValidationError(invalid_company_id(raw))
    if not MIN_COMPANY_ID <= company_id <= MAX_COMPANY_ID:
        raise ValidationError(invalid_company_id(raw))
    return company_id
