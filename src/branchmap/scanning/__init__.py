"""Source-text branch classification engine."""

from .languages import (
    Language,
    LanguageConfig,
    detect_language,
    get_language_config,
    structure_weights,
)
from .nesting import IndentNestingTracker, NestingTracker
from .profile import BranchingProfile, ProfileBuilder, analyze_branching
from .recognizers import BranchKind, LineClassification, classify_line
from .sanitizer import is_comment_line, sanitize_line, strip_comments

__all__ = [
    "Language",
    "LanguageConfig",
    "detect_language",
    "get_language_config",
    "structure_weights",
    "NestingTracker",
    "IndentNestingTracker",
    "BranchingProfile",
    "ProfileBuilder",
    "analyze_branching",
    "BranchKind",
    "LineClassification",
    "classify_line",
    "is_comment_line",
    "sanitize_line",
    "strip_comments",
]
