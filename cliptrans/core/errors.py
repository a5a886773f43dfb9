"""
Error conditions for preference persistence.

Load-path conditions (PathUnavailable, ReadFailed, ParseFailed,
ValidationWarning) are never raised out of a store's ``load()``: they are
logged and recorded in the store's ``issues`` list while defaults are used.
WriteFailed is raised from ``save()`` so callers know the write did not land.
"""


class PreferenceError(Exception):
    """Base class for configuration and last-selection conditions."""

    def __init__(self, message: str, path: str = None):
        super().__init__(message)
        self.path = path


class PathUnavailable(PreferenceError):
    """The platform configuration directory could not be determined."""


class ReadFailed(PreferenceError):
    """A preference file exists but could not be opened or read."""


class ParseFailed(PreferenceError):
    """A preference file does not match the expected schema."""


class ValidationWarning(PreferenceError):
    """Primary or secondary language is missing from the selectable set."""


class WriteFailed(PreferenceError):
    """Directory creation, temp-file write, sync or rename failed during save."""
