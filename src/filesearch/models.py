"""Core filesearch data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


@dataclass(frozen=True, slots=True)
class FileRecord:
    """A discovered file with the metadata the filters need."""

    path: Path
    name: str
    size_bytes: int


class WarningKind(str, Enum):
    """Category of a recoverable search warning."""

    MISSING_ROOT = "missing_root"
    NOT_A_DIRECTORY = "not_a_directory"
    UNREADABLE_ENTRY = "unreadable_entry"
    UNREADABLE_DIRECTORY = "unreadable_directory"
    INVALID_PATTERN = "invalid_pattern"


@dataclass(frozen=True, slots=True)
class SearchWarning:
    """Recoverable problem reported while searching.

    ``message`` is the cause shown after the ``warning:`` tag and ``skipping``
    the follow-up line describing what was left out.
    """

    kind: WarningKind
    message: str
    skipping: str
    path: Path | None = None
    pattern: str | None = None
