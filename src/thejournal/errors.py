"""Exception hierarchy for thejournal.

Kept dependency-free: imported by every subpackage and by the tests.
"""


class JournalError(Exception):
    """Base exception for all thejournal errors."""


class JournalConfigError(JournalError):
    """Raised for an invalid or unreadable ``thejournal.toml``."""


class PreferenceStoreError(JournalError):
    """Raised when the language preference cannot be read or written."""


class PostValidationError(JournalError):
    """Raised when a post submission is missing required fields."""
