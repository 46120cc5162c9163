"""
Branchmap - heuristic branching profiles for source trees

Scans a file tree and, for each source file, derives a branching profile:
conditional, loop and switch counts, nesting depth, purity of conditional
logic, date and version gated branches and hardcoded literals. The profile
feeds a complexity and importance score for ranking files.
"""

__version__ = "0.3.0"
__author__ = "Naman Agarwal"

from .analysis.content import ContentAnalyzer
from .config import ScanConfig, load_config
from .models import FileAnalysis, FileEntry, FileReport, ScanResult, ScanStats
from .scanner import DirectoryScanner, scan_directory
from .scanning import BranchingProfile, Language, analyze_branching, detect_language

__all__ = [
    "analyze_branching",  # Core engine entry point
    "scan_directory",  # Whole-tree entry point
    "BranchingProfile",
    "Language",
    "detect_language",
    "ContentAnalyzer",
    "DirectoryScanner",
    "ScanConfig",
    "load_config",
    "FileEntry",
    "FileAnalysis",
    "FileReport",
    "ScanResult",
    "ScanStats",
]
