"""Command surface shared by the desktop UI and the CLI.

Each function is stateless: it builds a store for the given directory or
reads settings from disk, does one operation, and returns plain values.
Failures are raised as IllienError subclasses whose message is meant to be
shown to the user as-is.
"""

from datetime import date

from . import config
from .adapters.file_journal import FileJournalStore
from .core.entries import JournalEntry
from .ports import JournalStore


def get_journal(directory: str) -> JournalStore:
    """Journal store for a directory."""
    return FileJournalStore(directory)


# ============== Journal ==============


def save_journal(filename: str, content: str, directory: str) -> None:
    """Write content to <directory>/<filename>, overwriting."""
    get_journal(directory).save(filename, content)


def load_journal(filename: str, directory: str) -> str | None:
    """Content of <directory>/<filename>, or None if it does not exist."""
    return get_journal(directory).load(filename)


def delete_journal(filename: str, directory: str) -> None:
    """Delete <directory>/<filename>. Raises EntryNotFoundError if absent."""
    get_journal(directory).delete(filename)


def list_journal_entries(directory: str) -> list[JournalEntry]:
    return get_journal(directory).list_entries()


def save_daily_journal(day: date | str, content: str, directory: str) -> None:
    """Like save_journal, but takes a bare date and appends .md."""
    get_journal(directory).save_daily(day, content)


def load_daily_journal(day: date | str, directory: str) -> str | None:
    """Like load_journal, but takes a bare date and appends .md."""
    return get_journal(directory).load_daily(day)


def list_journal_dates(directory: str) -> list[str]:
    """Dates of daily entries only, newest first."""
    return get_journal(directory).list_daily_dates()


# ============== Settings ==============


def get_journal_directory() -> str | None:
    return config.get_journal_directory()


def set_journal_directory(directory: str) -> None:
    config.set_journal_directory(directory)


def get_dark_mode() -> bool | None:
    return config.get_dark_mode()


def set_dark_mode(dark_mode: bool) -> None:
    config.set_dark_mode(dark_mode)
