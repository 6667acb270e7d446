"""Exceptions raised by the import pipeline and the store.

Skipped legacy lines are not errors; parsers return None for those.
"""

from pathlib import Path


class ChronicError(Exception):
    """Base class for failures the CLI reports and exits on."""


class LegacyStoreError(ChronicError):
    """A habitctl file is missing, unreadable, or cannot be imported."""


class MalformedDateError(LegacyStoreError):
    """A log line whose fixed-width date field is not a calendar date."""

    def __init__(self, line: str, *, lineno: int | None = None, path: Path | None = None) -> None:
        self.line = line
        self.lineno = lineno
        self.path = path
        where = str(path) if path is not None else "log"
        if lineno is not None:
            where = f"{where}:{lineno}"
        super().__init__(f"{where}: malformed date in {line!r}")


class StoreError(ChronicError):
    """The chronic store could not be written or read back."""


class ConfigError(ChronicError):
    """An environment setting has a value chronic cannot use."""
