"""Domain model entities for cashbook.

These are pure data classes representing ledger concepts, independent of
the database schema. Entries are immutable: edits produce a new value.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import NamedTuple, Optional


FIXED_COST = "FixedCost"
VARIABLE_COST = "VariableCost"
INCOME_CATEGORY = "Income"

CATEGORIES = (FIXED_COST, VARIABLE_COST, INCOME_CATEGORY)


class EntryKind(str, Enum):
    """Whether an entry adds to or subtracts from the balance."""

    INCOME = "Income"
    EXPENSE = "Expense"


class EntryStatus(str, Enum):
    """Settlement status of an entry."""

    OPEN = "Open"
    CLOSED = "Closed"

    def toggled(self) -> "EntryStatus":
        return EntryStatus.CLOSED if self is EntryStatus.OPEN else EntryStatus.OPEN


class SortDirection(str, Enum):
    """Due date ordering for entry listings."""

    DESCENDING = "desc"
    ASCENDING = "asc"


@dataclass(frozen=True)
class Entry:
    """Ledger entry domain entity."""

    id: str
    due_date: Optional[date]
    description: str
    note: str
    category: str
    kind: EntryKind
    amount: Decimal
    status: EntryStatus
    barcode: Optional[str] = None
    created_at: Optional[datetime] = field(default=None, compare=False)

    @property
    def is_expense(self) -> bool:
        return self.kind is EntryKind.EXPENSE


class MonthKey(NamedTuple):
    """Calendar month bucket, ordered by (year, month)."""

    year: int
    month: int

    @classmethod
    def from_date(cls, value: date) -> "MonthKey":
        return cls(value.year, value.month)

    @property
    def label(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True)
class DateRange:
    """Inclusive due date range. Either bound may be open."""

    start: Optional[date] = None
    end: Optional[date] = None

    def contains(self, value: date) -> bool:
        if self.start is not None and value < self.start:
            return False
        if self.end is not None and value > self.end:
            return False
        return True


@dataclass(frozen=True)
class FilterCriteria:
    """Filters and ordering for an entry listing.

    ``None`` on any dimension matches every entry.
    """

    search_text: Optional[str] = None
    category: Optional[str] = None
    status: Optional[EntryStatus] = None
    kind: Optional[EntryKind] = None
    date_range: Optional[DateRange] = None
    sort_direction: SortDirection = SortDirection.DESCENDING


@dataclass(frozen=True)
class Summary:
    """Headline statistics for a set of entries."""

    total_income: Decimal
    total_expense: Decimal
    balance: Decimal
    open_count: int
    closed_count: int


@dataclass(frozen=True)
class MonthlyCostRow:
    """Expense totals for one month split by cost category."""

    month: MonthKey
    fixed_cost: Decimal
    variable_cost: Decimal
    total: Decimal


@dataclass(frozen=True)
class MonthlyBalanceRow:
    """Income against expense for one month."""

    month: MonthKey
    income: Decimal
    expense: Decimal
    net: Decimal


@dataclass(frozen=True)
class DescriptionTotal:
    """Expense total for entries sharing a description."""

    description: str
    value: Decimal
    count: int
    share: Decimal


def new_entry_id() -> str:
    """Generate a fresh opaque entry id."""
    return f"exp-{uuid.uuid4().hex}"
