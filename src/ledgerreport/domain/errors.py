"""Shared domain error messages and error types."""

from typing import Iterable


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid or missing input supplied by the caller."""


class NotFoundError(DomainError):
    """Requested ledger entry does not exist."""


class DatastoreError(DomainError):
    """The ledger store could not be reached or a query failed.

    The message is safe to show to callers; driver details stay on
    ``__cause__``.
    """


GENERIC_DATASTORE_MESSAGE = "Internal server error"


def missing_parameters(names: Iterable[str]) -> str:
    """Return message for absent required parameters."""
    return f"Missing query params: {', '.join(names)}"


def invalid_company_id(value: object) -> str:
    """Return message for a company id that is not a positive integer."""
    return f"Invalid company id '{value}': must be a positive integer"


def invalid_date(value: str, reason: object) -> str:
    """Return message for an unparsable date."""
    return f"Invalid date '{value}': {reason}"


def invalid_amount(value: str, reason: object) -> str:
    """Return message for an unparsable monetary amount."""
    return f"Invalid amount '{value}': {reason}"


def negative_amount(field_name: str) -> str:
    """Return message for a negative debit or credit."""
    return f"{field_name} must not be negative"


def entry_not_found(entry_id: int) -> str:
    """Return message for missing ledger entry."""
    return f"Ledger entry {entry_id} not found"


def datastore_failure(operation: str) -> str:
    """Return message for a failed datastore operation."""
    return f"Ledger store failure during {operation}"
