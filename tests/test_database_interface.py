"""Tests for Database interface returning domain models."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from cashbook.domain import entities
from cashbook.domain.entities import EntryKind, EntryStatus
from cashbook.domain.errors import NotFoundError
from conftest import make_entry


class TestDatabaseInterface:
    """Tests to verify Database interface returns domain models."""

    def test_create_entry_returns_domain_model(self, temp_db):
        entry = temp_db.create_entry(make_entry("e1", barcode="8990"))

        assert isinstance(entry, entities.Entry)
        assert entry.id == "e1"
        assert entry.kind is EntryKind.EXPENSE
        assert entry.status is EntryStatus.OPEN
        assert entry.amount == Decimal("100.00")
        assert entry.barcode == "8990"
        assert isinstance(entry.created_at, datetime)

    def test_get_entry(self, temp_db):
        temp_db.create_entry(make_entry("e1", due_date=None))

        entry = temp_db.get_entry("e1")

        assert entry.due_date is None
        assert temp_db.get_entry("missing") is None

    def test_list_entries_in_insertion_order(self, temp_db):
        temp_db.create_entry(make_entry("z"))
        temp_db.create_entries([make_entry("a"), make_entry("m")])

        assert [e.id for e in temp_db.list_entries()] == ["z", "a", "m"]

    def test_update_entry(self, temp_db):
        temp_db.create_entry(make_entry("e1"))

        updated = temp_db.update_entry(
            make_entry("e1", date(2025, 5, 5), status=EntryStatus.CLOSED, amount="12.30")
        )

        assert updated.status is EntryStatus.CLOSED
        assert updated.due_date == date(2025, 5, 5)
        assert temp_db.get_entry("e1").amount == Decimal("12.30")

    def test_update_missing_entry(self, temp_db):
        with pytest.raises(NotFoundError):
            temp_db.update_entry(make_entry("missing"))

    def test_delete_entry(self, temp_db):
        temp_db.create_entry(make_entry("e1"))

        temp_db.delete_entry("e1")

        assert temp_db.list_entries() == []

    def test_create_entries_rolls_back_on_duplicate(self, temp_db):
        temp_db.create_entry(make_entry("e1"))

        with pytest.raises(Exception):
            temp_db.create_entries([make_entry("e2"), make_entry("e1")])

        assert [e.id for e in temp_db.list_entries()] == ["e1"]
