"""Recursive file enumeration."""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Sequence, Tuple

from filesearch.errors import EnumerationError
from filesearch.models import FileRecord, SearchWarning, WarningKind
from filesearch.utils.files import display_path, is_decodable_name, size_on_disk

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class EnumerationResult:
    records: List[FileRecord] = field(default_factory=list)
    warnings: List[SearchWarning] = field(default_factory=list)


def build_record(entry: os.DirEntry[str]) -> FileRecord | None:
    """Build a record for a directory entry, or None if it cannot be read."""
    if not is_decodable_name(entry.name):
        return None
    try:
        stat_result = entry.stat()
    except OSError as exc:
        LOGGER.debug("stat failed for %s: %s", display_path(entry.path), exc)
        return None
    return FileRecord(path=Path(entry.path), name=entry.name, size_bytes=size_on_disk(stat_result))


def _is_dir(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


class _Walker:
    """Pre-order depth-first walk over an explicit stack of open listings."""

    def __init__(self, result: EnumerationResult, *, strict: bool) -> None:
        self.result = result
        self.strict = strict
        self._stack: List[Tuple[Path, Iterator[os.DirEntry[str]]]] = []

    def walk(self, root: Path) -> None:
        try:
            self._push(root)
            while self._stack:
                directory, listing = self._stack[-1]
                try:
                    entry = next(listing)
                except StopIteration:
                    self._pop()
                    continue
                except OSError as exc:
                    self._pop()
                    self._listing_failed(directory, exc)
                    continue

                if _is_dir(entry):
                    self._push(Path(entry.path))
                    continue

                record = build_record(entry)
                if record is None:
                    shown = display_path(entry.path)
                    self.result.warnings.append(
                        SearchWarning(
                            kind=WarningKind.UNREADABLE_ENTRY,
                            message=f"could not access file: {shown}",
                            skipping=f"skipping file: {shown}",
                            path=Path(entry.path),
                        )
                    )
                    continue
                self.result.records.append(record)
        finally:
            while self._stack:
                self._pop()

    def _push(self, directory: Path) -> None:
        try:
            listing = os.scandir(directory)
        except OSError as exc:
            self._listing_failed(directory, exc)
            return
        LOGGER.debug("Entering %s", display_path(directory))
        self._stack.append((directory, listing))

    def _pop(self) -> None:
        _, listing = self._stack.pop()
        listing.close()

    def _listing_failed(self, directory: Path, exc: OSError) -> None:
        shown = display_path(directory)
        if self.strict:
            raise EnumerationError(f"could not read directory {shown}: {exc}", path=directory) from exc
        self.result.warnings.append(
            SearchWarning(
                kind=WarningKind.UNREADABLE_DIRECTORY,
                message=f"could not read directory: {shown} ({exc.strerror or exc})",
                skipping=f"skipping search in directory: {shown}",
                path=directory,
            )
        )


def enumerate_files(dirs: Sequence[Path], *, strict: bool = False) -> EnumerationResult:
    """Walk every root directory in order and collect the files found.

    Missing roots and unreadable entries are reported as warnings and skipped.
    An unreadable subdirectory is skipped with a warning too, unless
    ``strict`` is set, in which case :class:`EnumerationError` is raised.
    """
    result = EnumerationResult()
    walker = _Walker(result, strict=strict)
    for root in dirs:
        root = Path(root)
        shown = display_path(root)
        try:
            root_stat = root.stat()
        except OSError as exc:
            if isinstance(exc, FileNotFoundError):
                cause = "no such file or directory"
            else:
                cause = (exc.strerror or str(exc)).lower()
            result.warnings.append(
                SearchWarning(
                    kind=WarningKind.MISSING_ROOT,
                    message=f"{cause}: {shown}",
                    skipping=f"skipping search in directory: {shown}",
                    path=root,
                )
            )
            continue
        if not stat.S_ISDIR(root_stat.st_mode):
            result.warnings.append(
                SearchWarning(
                    kind=WarningKind.NOT_A_DIRECTORY,
                    message=f"not a directory: {shown}",
                    skipping=f"skipping search in directory: {shown}",
                    path=root,
                )
            )
            continue
        walker.walk(root)

    LOGGER.debug("Enumerated %d files with %d warnings", len(result.records), len(result.warnings))
    return result
