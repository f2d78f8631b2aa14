"""Shared fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from filesearch.models import FileRecord


@pytest.fixture
def sample_files() -> List[FileRecord]:
    """Four records with known names and sizes."""
    return [
        FileRecord(path=Path("/path/to/file1.txt"), name="file1.txt", size_bytes=1024),
        FileRecord(path=Path("/path/to/file2.jpg"), name="file2.jpg", size_bytes=2048),
        FileRecord(path=Path("/path/to/file3.txt"), name="file3.txt", size_bytes=4096),
        FileRecord(path=Path("/path/to/file4.png"), name="file4.png", size_bytes=1024),
    ]
