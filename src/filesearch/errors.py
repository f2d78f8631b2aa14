"""Exceptions raised by the search pipeline."""

from __future__ import annotations

from pathlib import Path


class FileSearchError(Exception):
    """Base class for fatal search errors."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class EnumerationError(FileSearchError):
    """A directory could not be listed while walking in strict mode."""


class OutputError(FileSearchError):
    """The output destination could not be created or written."""
