"""Data models for scan input and output."""

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, List, Optional

from .scanning.profile import BranchingProfile


@dataclass(frozen=True)
class FileEntry:
    """One record from the directory walk."""

    path: Path
    rel_path: str
    name: str
    size: int
    modified: float
    is_dir: bool = False

    @property
    def extension(self) -> str:
        return self.path.suffix.lower().lstrip(".")


@dataclass
class FileAnalysis:
    """Content-derived facts about one readable file."""

    line_count: int
    summary: str
    purpose: str
    exports: List[str] = field(default_factory=list)
    imports: List[str] = field(default_factory=list)
    api_surface: List[str] = field(default_factory=list)
    complexity_score: float = 0.0
    importance_score: float = 0.0
    branching: Optional[BranchingProfile] = None


@dataclass
class FileReport:
    """Everything reported for one walked entry.

    ``analysis`` is None for directories, for scans without enhanced
    analysis, and for files that could not be read.
    """

    path: str
    name: str
    size: int
    modified: float
    is_dir: bool = False
    language: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    analysis: Optional[FileAnalysis] = None

    @property
    def branching(self) -> Optional[BranchingProfile]:
        return self.analysis.branching if self.analysis else None


@dataclass
class ScanStats:
    total_files: int = 0
    total_dirs: int = 0
    total_size: int = 0
    scan_duration_ms: float = 0.0
    files_per_second: float = 0.0


@dataclass
class ScoreSummary:
    """Distribution of scores over analysed files."""

    analyzed_files: int
    complexity_mean: float
    complexity_median: float
    complexity_p90: float
    complexity_max: float
    importance_mean: float
    importance_median: float
    importance_p90: float
    importance_max: float


@dataclass
class ScanResult:
    root_path: str
    files: List[FileReport] = field(default_factory=list)
    stats: ScanStats = field(default_factory=ScanStats)
    errors: List[str] = field(default_factory=list)
    score_summary: Optional[ScoreSummary] = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
