"""Shared pytest fixtures for cashbook tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from cashbook.database.factories import create_sqlite_database
from cashbook.domain.entities import Entry, EntryKind, EntryStatus, FIXED_COST
from cashbook.domain.entry import EntryService


def make_entry(
    entry_id="e1",
    due_date=date(2025, 1, 10),
    description="Conta de Luz",
    note="",
    category=FIXED_COST,
    kind=EntryKind.EXPENSE,
    amount="100.00",
    status=EntryStatus.OPEN,
    barcode=None,
) -> Entry:
    """Build an entry with sensible defaults for tests."""
    return Entry(
        id=entry_id,
        due_date=due_date,
        description=description,
        note=note,
        category=category,
        kind=kind,
        amount=Decimal(amount),
        status=status,
        barcode=barcode,
    )


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def entry_service(temp_db):
    """Create an EntryService with a temporary database."""
    return EntryService(temp_db)


@pytest.fixture
def scenario_entries():
    """Two January expenses and one February income."""
    return [
        make_entry("a", date(2025, 1, 10), "Rent", category="FixedCost", amount="100"),
        make_entry("b", date(2025, 1, 20), "Market", category="VariableCost", amount="50"),
        make_entry(
            "c",
            date(2025, 2, 1),
            "Salary",
            category="Income",
            kind=EntryKind.INCOME,
            amount="500",
        ),
    ]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
