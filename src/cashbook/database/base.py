"""Abstract database interface for the entries collection."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

# Import entities directly to avoid circular import through domain/__init__.py
from cashbook.domain.entities import Entry


class Database(ABC):
    """Abstract record store holding a single flat ``entries`` collection."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def list_entries(self) -> list[Entry]:
        """List all entries in insertion order."""
        pass

    @abstractmethod
    def get_entry(self, entry_id: str) -> Optional[Entry]:
        """Get entry by ID."""
        pass

    @abstractmethod
    def create_entry(self, entry: Entry) -> Entry:
        """Store a new entry. Returns the stored entry."""
        pass

    @abstractmethod
    def create_entries(self, entries: Sequence[Entry]) -> list[Entry]:
        """Store several entries in one transaction. Returns stored entries."""
        pass

    @abstractmethod
    def update_entry(self, entry: Entry) -> Entry:
        """Replace the stored fields of an existing entry."""
        pass

    @abstractmethod
    def delete_entry(self, entry_id: str) -> None:
        """Delete an entry."""
        pass
