"""Utility helpers for working with files."""

from __future__ import annotations

import os

# st_blocks is always expressed in 512-byte units, whatever the block size.
_BLOCK_UNIT = 512


def size_on_disk(stat_result: os.stat_result) -> int:
    """Return the allocated size of a file from its stat result.

    Platforms without ``st_blocks`` (Windows) fall back to the logical size.
    """
    blocks = getattr(stat_result, "st_blocks", None)
    if blocks is None:
        return stat_result.st_size
    return blocks * _BLOCK_UNIT


def is_decodable_name(name: str) -> bool:
    """Return True if a file name round-trips to UTF-8.

    Undecodable bytes show up as lone surrogates after ``os.fsdecode``.
    """
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def display_path(path: os.PathLike[str] | str) -> str:
    """Render a path for the console, escaping undecodable bytes."""
    return os.fspath(path).encode("utf-8", "backslashreplace").decode("utf-8")
