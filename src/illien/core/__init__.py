"""Functional core - pure journal entry logic with no I/O."""

from .entries import (
    MD_SUFFIX,
    EntryType,
    JournalEntry,
    classify,
    daily_filename,
    is_daily_filename,
    sort_entries,
)

__all__ = [
    "MD_SUFFIX",
    "EntryType",
    "JournalEntry",
    "classify",
    "daily_filename",
    "is_daily_filename",
    "sort_entries",
]
