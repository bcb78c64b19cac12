"""Entry domain service: the authoritative in-memory entry collection."""

from __future__ import annotations

import dataclasses
import logging
from datetime import date
from decimal import Decimal
from typing import Any, Callable, Iterable, Optional, TypeVar, Union

from sqlalchemy.exc import SQLAlchemyError

from cashbook.database.base import Database
from cashbook.domain.entities import (
    Entry,
    EntryKind,
    EntryStatus,
    new_entry_id,
)
from cashbook.domain.errors import (
    NotFoundError,
    StoreUnavailableError,
    entry_not_found,
    store_failure,
)
from cashbook.domain.validation import (
    parse_kind,
    parse_positive_amount,
    parse_status,
    require_text,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

PATCHABLE_FIELDS = frozenset(
    {
        "due_date",
        "description",
        "note",
        "category",
        "kind",
        "amount",
        "status",
        "barcode",
    }
)


class EntryService:
    """Service for managing ledger entries.

    Holds the entry collection as an immutable tuple that is replaced on
    every successful mutation, and mirrors each mutation to the database.
    When the database fails the snapshot is left untouched.
    """

    def __init__(self, db: Database, load: bool = True):
        """Initialize entry service.

        Args:
            db: Database instance
            load: If True, load the current entries from the database
        """
        self.db = db
        self._entries: tuple[Entry, ...] = ()
        if load:
            self.load()

    def _call_store(self, operation: str, action: Callable[[], T]) -> T:
        try:
            return action()
        except SQLAlchemyError as e:
            logger.error("Entry store failed to %s: %s", operation, e)
            raise StoreUnavailableError(store_failure(operation)) from e

    def load(self) -> tuple[Entry, ...]:
        """Replace the in-memory collection with the stored entries."""
        self._entries = tuple(self._call_store("load entries", self.db.list_entries))
        logger.info("Loaded %d entries", len(self._entries))
        return self._entries

    def list(self) -> tuple[Entry, ...]:
        """Return the current entry snapshot in insertion order."""
        return self._entries

    def get(self, entry_id: str) -> Optional[Entry]:
        """Get entry by ID.

        Returns:
            Entry or None if not found
        """
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def require(self, entry_id: str) -> Entry:
        entry = self.get(entry_id)
        if entry is None:
            raise NotFoundError(entry_not_found(entry_id))
        return entry

    def create(
        self,
        description: str,
        category: str,
        kind: Union[str, EntryKind],
        amount: Union[str, Decimal],
        due_date: Optional[date] = None,
        note: Optional[str] = None,
        status: Union[str, EntryStatus] = EntryStatus.OPEN,
        barcode: Optional[str] = None,
        entry_id: Optional[str] = None,
    ) -> Entry:
        """Create an entry.

        Args:
            description: Entry description (required)
            category: Entry category (required)
            kind: Income or Expense
            amount: Positive amount
            due_date: Optional due date
            note: Optional free text
            status: Open or Closed
            barcode: Optional payment slip code
            entry_id: Optional ID (generated if not provided)

        Returns:
            Created entry

        Raises:
            ValidationError: If a field is invalid
            StoreUnavailableError: If the database fails
        """
        entry = validate_entry(
            Entry(
                id=(entry_id or "").strip() or new_entry_id(),
                due_date=due_date,
                description=description,
                note=note or "",
                category=category,
                kind=kind,
                amount=amount,
                status=status,
                barcode=barcode,
            )
        )
        if entry_id and self.get(entry.id) is not None:
            entry = dataclasses.replace(entry, id=new_entry_id())

        stored = self._call_store("create entry", lambda: self.db.create_entry(entry))
        self._entries = self._entries + (stored,)
        logger.info("Created entry %s", stored.id)
        return stored

    def update(self, entry_id: str, **patch: Any) -> Entry:
        """Update entry fields.

        Only the given fields change; ``id`` cannot be patched.

        Raises:
            NotFoundError: If the entry doesn't exist
            ValidationError: If a patched field is invalid
            StoreUnavailableError: If the database fails
        """
        unknown = set(patch) - PATCHABLE_FIELDS
        if unknown:
            raise TypeError(f"Cannot update fields: {', '.join(sorted(unknown))}")

        current = self.require(entry_id)
        if "note" in patch:
            patch["note"] = patch["note"] or ""
        updated = validate_entry(dataclasses.replace(current, **patch))

        stored = self._call_store("update entry", lambda: self.db.update_entry(updated))
        self._entries = tuple(
            stored if entry.id == entry_id else entry for entry in self._entries
        )
        logger.info("Updated entry %s", entry_id)
        return stored

    def delete(self, entry_id: str) -> None:
        """Delete an entry.

        Raises:
            NotFoundError: If the entry doesn't exist
            StoreUnavailableError: If the database fails
        """
        self.require(entry_id)
        self._call_store("delete entry", lambda: self.db.delete_entry(entry_id))
        self._entries = tuple(e for e in self._entries if e.id != entry_id)
        logger.info("Deleted entry %s", entry_id)

    def toggle_status(self, entry_id: str) -> Entry:
        """Flip an entry between Open and Closed."""
        current = self.require(entry_id)
        return self.update(entry_id, status=current.status.toggled())

    def import_batch(self, entries: Iterable[Entry]) -> list[Entry]:
        """Append entries in one database transaction.

        Nothing is merged: an entry whose trimmed ID is empty, already
        taken, or repeated within the batch is stored under a fresh ID.

        Returns:
            The stored entries

        Raises:
            ValidationError: If an entry is invalid (nothing is stored)
            StoreUnavailableError: If the database fails (nothing is stored)
        """
        taken = {entry.id for entry in self._entries}
        batch = []
        for entry in entries:
            entry_id = (entry.id or "").strip()
            if not entry_id or entry_id in taken:
                entry_id = new_entry_id()
            taken.add(entry_id)
            batch.append(dataclasses.replace(validate_entry(entry), id=entry_id))

        if not batch:
            return []

        stored = self._call_store("import entries", lambda: self.db.create_entries(batch))
        self._entries = self._entries + tuple(stored)
        logger.info("Imported %d entries", len(stored))
        return stored


def validate_entry(entry: Entry) -> Entry:
    """Return a normalized copy of the entry, or raise ValidationError.

    Text fields are trimmed where required, an empty note becomes ``""``
    and an empty barcode becomes ``None``, matching decoded records.
    """
    return dataclasses.replace(
        entry,
        description=require_text(entry.description, "description"),
        category=require_text(entry.category, "category"),
        kind=parse_kind(entry.kind),
        amount=parse_positive_amount(entry.amount),
        status=parse_status(entry.status),
        note=entry.note or "",
        barcode=entry.barcode or None,
    )
