"""Error types raised by the journal and settings stores."""


class IllienError(Exception):
    """Base class for all backend errors. str(err) is the user-facing message."""

    pass


class SettingsError(IllienError):
    """Raised when settings cannot be serialized or written."""

    pass


class JournalError(IllienError):
    """Raised when a journal file or directory operation fails."""

    pass


class EntryNotFoundError(JournalError):
    """Raised when deleting an entry that does not exist."""

    pass
