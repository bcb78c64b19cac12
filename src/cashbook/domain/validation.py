"""Field validation shared by the record codec and the entry store."""

from datetime import date
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional, Union

from cashbook.domain.entities import EntryKind, EntryStatus
from cashbook.domain.errors import ValidationError

CENTS = Decimal("0.01")

# Largest value the amount column (12 digits, 2 fractional) can hold.
MAX_AMOUNT = Decimal("9999999999.99")


def require_text(value: Optional[str], field: str, line: Optional[int] = None) -> str:
    """Return the trimmed value, rejecting empty text."""
    text = (value or "").strip()
    if not text:
        raise ValidationError(f"{field} required", line=line, field=field)
    return text


def parse_kind(value: Union[str, EntryKind], line: Optional[int] = None) -> EntryKind:
    try:
        return EntryKind(value)
    except ValueError:
        raise ValidationError("invalid kind", line=line, field="kind")


def parse_status(
    value: Union[str, EntryStatus], line: Optional[int] = None
) -> EntryStatus:
    try:
        return EntryStatus(value)
    except ValueError:
        raise ValidationError("invalid status", line=line, field="status")


def to_cents(amount: Decimal) -> Decimal:
    """Quantize an amount to currency scale."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def parse_positive_amount(
    value: Union[str, Decimal, int], line: Optional[int] = None
) -> Decimal:
    """Parse a plain decimal amount that must be greater than zero.

    Accepts only plain decimal notation (no currency symbol, no thousands
    separators). The result is quantized to two fractional digits and must
    fit the stored amount column.
    """
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError("invalid amount", line=line, field="amount")
    if not amount.is_finite():
        raise ValidationError("invalid amount", line=line, field="amount")
    try:
        amount = to_cents(amount)
    except InvalidOperation:
        raise ValidationError("invalid amount", line=line, field="amount")
    if amount <= 0 or amount > MAX_AMOUNT:
        raise ValidationError("invalid amount", line=line, field="amount")
    return amount


def parse_due_date(value: Optional[str], line: Optional[int] = None) -> Optional[date]:
    """Parse an ISO ``YYYY-MM-DD`` due date; empty means no due date."""
    text = (value or "").strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise ValidationError("invalid due date", line=line, field="due_date")
