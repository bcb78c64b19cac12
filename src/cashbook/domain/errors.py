"""Shared domain error messages and error types."""

from typing import Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid field value in a record or form input."""

    def __init__(
        self, reason: str, line: Optional[int] = None, field: Optional[str] = None
    ):
        self.reason = reason
        self.line = line
        self.field = field
        super().__init__(_with_line(reason, line))


class MalformedRecordError(DomainError):
    """Structurally broken record text, such as a wrong column count."""

    def __init__(self, reason: str, line: Optional[int] = None):
        self.reason = reason
        self.line = line
        super().__init__(_with_line(reason, line))


class NotFoundError(DomainError):
    """Requested entry does not exist."""


class StoreUnavailableError(DomainError):
    """The backing store failed; local state was left unchanged."""


def _with_line(reason: str, line: Optional[int]) -> str:
    if line is None:
        return reason
    return f"Line {line}: {reason}"


def entry_not_found(entry_id: str) -> str:
    """Return message for missing entry."""
    return f"Entry '{entry_id}' not found"


def wrong_field_count(expected: int, found: int) -> str:
    """Return message for a record with too few fields."""
    return f"expected at least {expected} fields, found {found}"


def store_failure(operation: str) -> str:
    """Return message for a failed store operation."""
    return f"Could not {operation}: the entry store is unavailable"
