"""Journal storage interface."""

from datetime import date
from typing import Protocol, runtime_checkable

from illien.core.entries import JournalEntry


@runtime_checkable
class JournalStore(Protocol):
    """Interface for reading and writing journal entries by filename."""

    def save(self, filename: str, content: str) -> None:
        """Write/overwrite an entry."""
        ...

    def load(self, filename: str) -> str | None:
        """Read an entry. Returns None if not found."""
        ...

    def delete(self, filename: str) -> None:
        """Remove an entry. Raises EntryNotFoundError if it does not exist."""
        ...

    def list_entries(self) -> list[JournalEntry]:
        """List all entries, daily first (newest first), then titled."""
        ...

    def save_daily(self, day: date | str, content: str) -> None:
        """Write the daily entry for a date."""
        ...

    def load_daily(self, day: date | str) -> str | None:
        """Read the daily entry for a date. Returns None if not found."""
        ...

    def list_daily_dates(self) -> list[str]:
        """Dates of daily entries, newest first."""
        ...
