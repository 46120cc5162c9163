"""Exception hierarchy for Branchmap."""

from .analysis import (
    AnalysisError,
    FileAccessError,
    UnsupportedLanguageError,
)
from .base import BranchmapError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)

__all__ = [
    "BranchmapError",
    "AnalysisError",
    "FileAccessError",
    "UnsupportedLanguageError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
]
