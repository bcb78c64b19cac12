"""Filtering and ordering of entry listings."""

from datetime import date
from typing import Optional, Sequence

from cashbook.domain.entities import Entry, FilterCriteria, SortDirection


def matches_search(entry: Entry, search_text: Optional[str]) -> bool:
    """Case-insensitive substring match on description or note."""
    if not search_text:
        return True
    needle = search_text.casefold()
    return (
        needle in (entry.description or "").casefold()
        or needle in (entry.note or "").casefold()
    )


def matches_criteria(entry: Entry, criteria: FilterCriteria) -> bool:
    """Check whether an entry passes every filter in the criteria.

    Entries without a due date always pass the date range filter.
    """
    if not matches_search(entry, criteria.search_text):
        return False
    if criteria.category is not None and entry.category != criteria.category:
        return False
    if criteria.status is not None and entry.status != criteria.status:
        return False
    if criteria.kind is not None and entry.kind != criteria.kind:
        return False
    if criteria.date_range is not None and entry.due_date is not None:
        return criteria.date_range.contains(entry.due_date)
    return True


def apply_filters(
    entries: Sequence[Entry],
    criteria: FilterCriteria,
    today: Optional[date] = None,
) -> list[Entry]:
    """Filter and sort entries by due date.

    Undated entries sort as if due ``today``. The sort is stable, so entries
    with equal dates keep their input order in both directions.

    Args:
        entries: Entries in insertion order
        criteria: Filters and sort direction
        today: Date used for undated entries (defaults to the current date)

    Returns:
        New list of matching entries
    """
    reference = today or date.today()
    filtered = [entry for entry in entries if matches_criteria(entry, criteria)]
    return sorted(
        filtered,
        key=lambda entry: entry.due_date or reference,
        reverse=criteria.sort_direction == SortDirection.DESCENDING,
    )


class EntryFilter:
    """Memoizing wrapper around ``apply_filters``.

    Remembers the last result, keyed on the identity of the entry
    collection plus the criteria and reference date. The entry store
    replaces its snapshot on every mutation, so identity tracks changes.
    """

    def __init__(self):
        self._entries: Optional[Sequence[Entry]] = None
        self._key: Optional[tuple] = None
        self._result: list[Entry] = []
        self.hits = 0
        self.misses = 0

    def apply(
        self,
        entries: Sequence[Entry],
        criteria: FilterCriteria,
        today: Optional[date] = None,
    ) -> list[Entry]:
        reference = today or date.today()
        key = (criteria, reference)
        if self._entries is entries and self._key == key:
            self.hits += 1
            return list(self._result)

        self.misses += 1
        self._result = apply_filters(entries, criteria, reference)
        # Holding the collection keeps its id from being reused.
        self._entries = entries
        self._key = key
        return list(self._result)
