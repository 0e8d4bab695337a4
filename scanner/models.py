from dataclasses import dataclass, field
from typing import Optional, Tuple, List, Any

from scanner.errors import SourceError


@dataclass(frozen=True)
class MatchResult:
    """One regex match found on a single line of a source."""
    full_value: str
    groups: Tuple[Optional[str], ...]
    source: str = ""
    line_number: int = 0
    start: int = 0
    end: int = 0

    def group(self, index):
        return self.groups[index]


@dataclass(frozen=True)
class ScanConfiguration:
    pattern: str
    sources: Tuple[Any, ...]
    unique_group: Optional[int] = None
    fail_fast: bool = False

    def __post_init__(self):
        # Freeze a caller's list so the source order can't change mid-scan
        object.__setattr__(self, "sources", tuple(self.sources))


@dataclass
class ScanReport:
    results: List[MatchResult] = field(default_factory=list)
    errors: List[SourceError] = field(default_factory=list)
    lines_processed: int = 0
    sources_scanned: int = 0
    elapsed: float = 0.0

    @property
    def ok(self):
        return not self.errors
