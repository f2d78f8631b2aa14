"""Write search results to the console or to a file."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Sequence, TextIO

from filesearch.errors import OutputError
from filesearch.models import FileRecord
from filesearch.utils.files import display_path

LOGGER = logging.getLogger(__name__)


def write_paths(files: Sequence[FileRecord], stream: TextIO) -> None:
    """Write one path per line to an open text stream.

    Undecodable bytes in a path are written as backslash escapes.
    """
    for record in files:
        stream.write(display_path(record.path))
        stream.write("\n")


def emit(
    files: Sequence[FileRecord],
    destination: Path | None = None,
    *,
    stream: TextIO | None = None,
) -> None:
    """Emit result paths to ``destination`` or, when it is None, to ``stream``.

    ``stream`` defaults to the current standard output. The destination file
    is truncated or created; any failure raises :class:`OutputError`.
    """
    if destination is None:
        try:
            write_paths(files, stream if stream is not None else sys.stdout)
        except UnicodeError as exc:
            raise OutputError(f"could not write to standard output: {exc}") from exc
        return

    try:
        with open(destination, "w", encoding="utf-8", newline="\n") as handle:
            write_paths(files, handle)
    except (OSError, UnicodeError) as exc:
        raise OutputError(f"could not write output file {display_path(destination)}: {exc}", path=destination) from exc
    LOGGER.debug("Wrote %d paths to %s", len(files), destination)
