"""Tests for the command surface."""

import pytest

from illien.commands import (
    delete_journal,
    get_dark_mode,
    get_journal,
    get_journal_directory,
    list_journal_dates,
    list_journal_entries,
    load_daily_journal,
    load_journal,
    save_daily_journal,
    save_journal,
    set_dark_mode,
    set_journal_directory,
)
from illien.errors import EntryNotFoundError, IllienError, JournalError


class TestGetJournal:
    def test_uses_given_directory(self, journal_dir):
        assert get_journal(str(journal_dir)).journal_dir == journal_dir


class TestJournalCommands:
    def test_save_then_load(self, journal_dir):
        save_journal("notes.md", "hello", str(journal_dir))
        assert load_journal("notes.md", str(journal_dir)) == "hello"

    def test_load_absent(self, journal_dir):
        assert load_journal("notes.md", str(journal_dir)) is None

    def test_delete_then_load(self, journal_dir):
        save_journal("notes.md", "hello", str(journal_dir))
        delete_journal("notes.md", str(journal_dir))
        assert load_journal("notes.md", str(journal_dir)) is None

    def test_delete_absent_raises(self, journal_dir):
        with pytest.raises(EntryNotFoundError):
            delete_journal("notes.md", str(journal_dir))

    def test_list(self, journal_dir):
        for name in ["b.md", "2024-01-01.md", "2023-12-31.md", "a.md"]:
            save_journal(name, "x", str(journal_dir))

        entries = list_journal_entries(str(journal_dir))
        assert [e.filename for e in entries] == [
            "2024-01-01.md",
            "2023-12-31.md",
            "a.md",
            "b.md",
        ]

    def test_list_missing_directory_is_error_not_empty(self, tmp_path):
        with pytest.raises(JournalError):
            list_journal_entries(str(tmp_path / "missing"))

    def test_os_errors_surface_as_journal_errors(self, journal_dir):
        name = "a" * 300 + ".md"
        with pytest.raises(JournalError):
            load_journal(name, str(journal_dir))
        with pytest.raises(JournalError):
            delete_journal(name, str(journal_dir))

    def test_errors_share_base_class(self, tmp_path):
        with pytest.raises(IllienError):
            save_journal("notes.md", "x", str(tmp_path / "missing"))


class TestDailyCommands:
    def test_bare_date_roundtrip(self, journal_dir):
        save_daily_journal("2025-01-15", "today", str(journal_dir))
        assert load_journal("2025-01-15.md", str(journal_dir)) == "today"
        assert load_daily_journal("2025-01-15", str(journal_dir)) == "today"

    def test_list_dates(self, journal_dir):
        save_daily_journal("2025-01-15", "x", str(journal_dir))
        save_journal("ideas.md", "x", str(journal_dir))
        assert list_journal_dates(str(journal_dir)) == ["2025-01-15"]


class TestSettingsCommands:
    def test_defaults_are_none(self):
        assert get_journal_directory() is None
        assert get_dark_mode() is None

    def test_set_and_get(self, journal_dir):
        set_journal_directory(str(journal_dir))
        set_dark_mode(True)
        assert get_journal_directory() == str(journal_dir)
        assert get_dark_mode() is True
