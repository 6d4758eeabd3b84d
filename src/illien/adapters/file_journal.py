"""File-based journal storage adapter."""

import logging
from datetime import date
from pathlib import Path

from illien.core.entries import (
    MD_SUFFIX,
    JournalEntry,
    classify,
    daily_filename,
    sort_entries,
)
from illien.errors import EntryNotFoundError, JournalError

logger = logging.getLogger(__name__)


class FileJournalStore:
    """
    File-based journal storage.

    Implements JournalStore protocol. Each entry is a markdown file in a flat
    directory, identified by its filename. The directory is never created
    here; pointing at a missing one is an error for listing and writing.
    """

    def __init__(self, journal_dir: Path | str):
        self.journal_dir = Path(journal_dir).expanduser()

    def _path_for(self, filename: str) -> Path:
        return self.journal_dir / filename

    def save(self, filename: str, content: str) -> None:
        """Write/overwrite an entry."""
        try:
            self._path_for(filename).write_text(content, encoding="utf-8")
        except OSError as e:
            raise JournalError(f"Failed to save journal entry: {e}") from e

    def load(self, filename: str) -> str | None:
        """Read an entry. Returns None if not found."""
        try:
            return self._path_for(filename).read_text(encoding="utf-8")
        except (FileNotFoundError, NotADirectoryError):
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise JournalError(f"Failed to load journal entry: {e}") from e

    def delete(self, filename: str) -> None:
        """Remove an entry. Unlike load, a missing entry is an error."""
        try:
            self._path_for(filename).unlink()
        except (FileNotFoundError, NotADirectoryError) as e:
            raise EntryNotFoundError("File does not exist") from e
        except OSError as e:
            raise JournalError(f"Failed to delete journal entry: {e}") from e

    def list_entries(self) -> list[JournalEntry]:
        """List all markdown entries, daily first (newest first), then titled."""
        try:
            names = [child.name for child in self.journal_dir.iterdir()]
        except OSError as e:
            raise JournalError(f"Failed to read directory: {e}") from e

        entries = []
        for name in names:
            if not name.endswith(MD_SUFFIX):
                logger.debug(f"Skipping non-markdown file: {name}")
                continue
            entries.append(classify(name))
        return sort_entries(entries)

    # ============== Daily (bare date) view ==============

    def save_daily(self, day: date | str, content: str) -> None:
        """Write the daily entry for a date, given as a date or YYYY-MM-DD."""
        self.save(daily_filename(day), content)

    def load_daily(self, day: date | str) -> str | None:
        """Read the daily entry for a date. Returns None if not found."""
        return self.load(daily_filename(day))

    def list_daily_dates(self) -> list[str]:
        """Dates (YYYY-MM-DD) of daily entries, newest first. Titled entries are left out."""
        return [entry.date for entry in self.list_entries() if entry.is_daily]
