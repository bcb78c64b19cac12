"""Mapper functions to convert between domain models and SQLAlchemy models."""

from decimal import Decimal

from cashbook.domain import entities as domain
from cashbook.database.models import Entry as ORMEntry


def entry_to_domain(orm_entry: ORMEntry) -> domain.Entry:
    """Convert SQLAlchemy Entry model to domain Entry entity."""
    return domain.Entry(
        id=orm_entry.id,
        due_date=orm_entry.due_date,
        description=orm_entry.description,
        note=orm_entry.note or "",
        category=orm_entry.category,
        kind=domain.EntryKind(orm_entry.kind),
        amount=Decimal(orm_entry.amount).quantize(Decimal("0.01")),
        status=domain.EntryStatus(orm_entry.status),
        barcode=orm_entry.barcode,
        created_at=orm_entry.created_at,
    )


def apply_entry_fields(orm_entry: ORMEntry, entry: domain.Entry) -> ORMEntry:
    """Copy domain Entry fields onto a SQLAlchemy Entry model."""
    orm_entry.due_date = entry.due_date
    orm_entry.description = entry.description
    orm_entry.note = entry.note or ""
    orm_entry.category = entry.category
    orm_entry.kind = entry.kind.value
    orm_entry.amount = entry.amount
    orm_entry.status = entry.status.value
    orm_entry.barcode = entry.barcode
    return orm_entry
