"""Composable file filters.

Every stage returns a new list holding the same record objects in their
original relative order.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from filesearch.config import SearchConfig
from filesearch.models import FileRecord, SearchWarning, WarningKind

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class FilterResult:
    files: List[FileRecord] = field(default_factory=list)
    warnings: List[SearchWarning] = field(default_factory=list)


def compile_patterns(patterns: Sequence[str]) -> Tuple[List[re.Pattern[str]], List[SearchWarning]]:
    """Compile patterns, dropping the ones that are not valid regexes."""
    compiled: List[re.Pattern[str]] = []
    warnings: List[SearchWarning] = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern))
        except re.error as exc:
            warnings.append(
                SearchWarning(
                    kind=WarningKind.INVALID_PATTERN,
                    message=f"invalid regex: {exc}",
                    skipping=f"skipping regex match: {pattern}",
                    pattern=pattern,
                )
            )
    return compiled, warnings


def filter_by_patterns(files: Sequence[FileRecord], patterns: Sequence[str]) -> FilterResult:
    """Keep files whose name matches at least one pattern.

    Matching is unanchored. When no pattern compiles, nothing passes.
    """
    compiled, warnings = compile_patterns(patterns)
    kept = [record for record in files if any(regex.search(record.name) for regex in compiled)]
    return FilterResult(files=kept, warnings=warnings)


def filter_by_size_min(files: Sequence[FileRecord], size_min: int) -> List[FileRecord]:
    return [record for record in files if record.size_bytes >= size_min]


def filter_by_size_max(files: Sequence[FileRecord], size_max: int) -> List[FileRecord]:
    return [record for record in files if record.size_bytes <= size_max]


def apply_filters(files: Sequence[FileRecord], config: SearchConfig) -> FilterResult:
    """Run the configured filters in order: name, minimum size, maximum size."""
    result = FilterResult(files=list(files))

    if config.patterns is not None:
        by_name = filter_by_patterns(result.files, config.patterns)
        result.files = by_name.files
        result.warnings.extend(by_name.warnings)
        LOGGER.debug("%d files left after name filter", len(result.files))

    if config.size_min is not None:
        result.files = filter_by_size_min(result.files, config.size_min)
        LOGGER.debug("%d files left after size_min=%d", len(result.files), config.size_min)

    if config.size_max is not None:
        result.files = filter_by_size_max(result.files, config.size_max)
        LOGGER.debug("%d files left after size_max=%d", len(result.files), config.size_max)

    return result
