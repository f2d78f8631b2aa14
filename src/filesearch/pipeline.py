"""Search pipeline: enumerate, filter, collect warnings."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from filesearch.config import SearchConfig
from filesearch.filtering.filters import apply_filters
from filesearch.models import FileRecord, SearchWarning
from filesearch.walk.enumerator import enumerate_files

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class SearchResult:
    files: List[FileRecord] = field(default_factory=list)
    warnings: List[SearchWarning] = field(default_factory=list)


def run_search(config: SearchConfig) -> SearchResult:
    """Enumerate the configured roots and apply the configured filters.

    Warnings come back in the order they were raised: enumeration first,
    then filtering. Fatal errors propagate.
    """
    enumerated = enumerate_files(config.dirs, strict=config.strict)
    filtered = apply_filters(enumerated.records, config)
    LOGGER.debug("%d of %d files matched", len(filtered.files), len(enumerated.records))
    return SearchResult(
        files=filtered.files,
        warnings=enumerated.warnings + filtered.warnings,
    )
