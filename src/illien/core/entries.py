"""Journal entry classification and ordering - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterable

MD_SUFFIX = ".md"

# "YYYY-MM-DD.md"
_DAILY_LENGTH = 13


class EntryType(Enum):
    """Kind of journal entry, derived from its filename."""

    DAILY = "daily"  # YYYY-MM-DD.md
    TITLED = "titled"  # anything else ending in .md


@dataclass(frozen=True)
class JournalEntry:
    """Metadata for one Markdown file in a journal directory."""

    filename: str
    entry_type: EntryType
    title: str
    date: str | None = None

    @property
    def is_daily(self) -> bool:
        return self.entry_type is EntryType.DAILY

    def to_dict(self) -> dict:
        return {
            "filename": self.filename,
            "entry_type": self.entry_type.value,
            "title": self.title,
            "date": self.date,
        }


def _ascii_digits(segment: str) -> bool:
    return segment.isascii() and segment.isdigit()


def is_daily_filename(filename: str) -> bool:
    """
    Check if a filename names a daily entry (YYYY-MM-DD.md).

    Only the shape is checked, not the calendar: "9999-99-99.md" is daily.
    """
    return (
        len(filename) == _DAILY_LENGTH
        and filename.endswith(MD_SUFFIX)
        and filename[4] == "-"
        and filename[7] == "-"
        and _ascii_digits(filename[0:4])
        and _ascii_digits(filename[5:7])
        and _ascii_digits(filename[8:10])
    )


def classify(filename: str) -> JournalEntry:
    """Build entry metadata for a Markdown filename."""
    if is_daily_filename(filename):
        entry_date = filename[:10]
        return JournalEntry(
            filename=filename,
            entry_type=EntryType.DAILY,
            title=entry_date,
            date=entry_date,
        )

    title = filename[: -len(MD_SUFFIX)] if filename.endswith(MD_SUFFIX) else filename
    return JournalEntry(filename=filename, entry_type=EntryType.TITLED, title=title)


def sort_entries(entries: Iterable[JournalEntry]) -> list[JournalEntry]:
    """
    Order entries for display.

    Daily entries come first, newest date first. Titled entries follow,
    alphabetically ignoring case. Equal keys keep their input order.
    """
    entries = list(entries)
    daily = [e for e in entries if e.is_daily]
    titled = [e for e in entries if not e.is_daily]
    # Zero-padded YYYY-MM-DD sorts lexicographically in date order
    daily.sort(key=lambda e: e.date or "", reverse=True)
    titled.sort(key=lambda e: e.title.lower())
    return daily + titled


def daily_filename(day: date | str) -> str:
    """Filename for a daily entry, from a date or a YYYY-MM-DD string."""
    if isinstance(day, date):
        day = day.isoformat()
    return f"{day}{MD_SUFFIX}"
