"""Search configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass(slots=True)
class SearchConfig:
    dirs: List[Path] = field(default_factory=list)
    patterns: Optional[List[str]] = None
    size_min: Optional[int] = None
    size_max: Optional[int] = None
    output: Optional[Path] = None
    strict: bool = False

    def __post_init__(self) -> None:
        self.dirs = [Path(item) for item in self.dirs]
        if self.patterns is not None:
            self.patterns = list(self.patterns)
        if self.output is not None:
            self.output = Path(self.output)
        for label, value in (("size_min", self.size_min), ("size_max", self.size_max)):
            if value is not None and value < 0:
                raise ValueError(f"{label} must be non-negative, got {value}")

    def resolve_output(self, base_dir: Path | None = None) -> Path | None:
        if self.output is None:
            return None
        if self.output.is_absolute() or base_dir is None:
            return self.output
        return base_dir / self.output
