"""Per-file content analysis: summary, purpose, declarations and scores."""

import re
from functools import lru_cache
from pathlib import Path
from typing import Optional, Sequence

from ..config import DEFAULT_CONFIG, ScanConfig
from ..file_ops import read_source
from ..logging_config import get_logger
from ..models import FileAnalysis
from ..scanning.languages import Language, detect_language
from ..scanning.profile import analyze_branching
from .scoring import complexity_score, importance_score

logger = get_logger(__name__)

SUMMARY_SCAN_LINES = 10
SUMMARY_MAX_CHARS = 100
_SUMMARY_MARKERS = ("//", "#", "/*", '"""')

_FALLBACK_SUMMARIES = {
    "rust": "Rust source code",
    "python": "Python script",
    "javascript": "JavaScript code",
    "typescript": "TypeScript code",
    "go": "Go source code",
    "java": "Java source code",
    "c": "C/C++ source code",
    "cpp": "C/C++ source code",
    "markdown": "Documentation file",
    "json": "JSON configuration",
}

# Checked in order against the lowercased path
_PATH_PURPOSES = (
    (("test",), "Test code"),
    (("example", "demo"), "Example/demo code"),
    (("lib", "core"), "Core library functionality"),
    (("cli", "bin"), "Command-line interface"),
    (("config",), "Configuration"),
)

_ENTRY_POINT_MARKERS = ("main(", "fn main")


@lru_cache(maxsize=None)
def _compiled(patterns: tuple[str, ...]) -> tuple["re.Pattern[str]", ...]:
    return tuple(re.compile(p) for p in patterns)


def _comment_text(trimmed: str) -> Optional[str]:
    if trimmed.startswith("#!"):
        return None
    for marker in _SUMMARY_MARKERS:
        if trimmed.startswith(marker):
            text = trimmed.lstrip("/#*\"").strip()
            for closer in ("*/", '"""'):
                if text.endswith(closer):
                    text = text[: -len(closer)].rstrip()
            return text
    return None


def summarize(content: str, kind: Optional[str]) -> str:
    """First meaningful comment in the opening lines, else a stock phrase."""
    if not content.strip():
        return "Empty file"

    for line in content.splitlines()[:SUMMARY_SCAN_LINES]:
        text = _comment_text(line.strip())
        if text is not None and len(text) > 10:
            return text[:SUMMARY_MAX_CHARS]

    if kind in _FALLBACK_SUMMARIES:
        return _FALLBACK_SUMMARIES[kind]
    return f"{len(content.splitlines())} lines of code"


def infer_purpose(path: str, content: str, kind: Optional[str]) -> str:
    lowered = path.lower()
    for needles, purpose in _PATH_PURPOSES:
        if any(needle in lowered for needle in needles):
            return purpose

    if any(marker in content for marker in _ENTRY_POINT_MARKERS):
        return "Application entry point"

    if kind == "markdown":
        return "Documentation"
    if kind in ("json", "yaml", "toml"):
        return "Configuration file"
    if kind == "shell":
        return "Shell script"
    return "Source code"


def _extract(content: str, patterns: Sequence[str], whole_line: bool = False) -> list[str]:
    compiled = _compiled(tuple(patterns))
    if not compiled:
        return []

    found: list[str] = []
    for line in content.splitlines():
        for pattern in compiled:
            match = pattern.match(line)
            if match:
                found.append(line.strip() if whole_line else match.group(1).strip())
                break
    return found


def extract_exports(content: str, language: Language) -> list[str]:
    return _extract(content, language.config.export_patterns)


def extract_imports(content: str, language: Language) -> list[str]:
    return _extract(content, language.config.import_patterns)


def extract_api_surface(content: str, language: Language) -> list[str]:
    return _extract(content, language.config.api_patterns, whole_line=True)


class ContentAnalyzer:
    """Builds a FileAnalysis from a file's text.

    ``path`` arguments are the path relative to the scan root; purpose and
    importance heuristics look at it, so absolute prefixes such as a temp
    directory never leak into the result.
    """

    def __init__(self, config: ScanConfig = DEFAULT_CONFIG):
        self.config = config

    def analyze_content(
        self,
        path: str,
        content: str,
        size: Optional[int] = None,
        kind: Optional[str] = None,
    ) -> FileAnalysis:
        if kind is None:
            kind = detect_language(path)
        if size is None:
            size = len(content.encode("utf-8"))
        language = Language.from_name(kind)

        profile = analyze_branching(
            content,
            language,
            extra_impure_tokens=self.config.extra_impure_tokens,
            track_block_comments=self.config.track_block_comments,
            indent_nesting=self.config.indent_nesting,
        )
        api_surface = extract_api_surface(content, language)
        complexity = complexity_score(content, kind or language, profile)

        return FileAnalysis(
            line_count=len(content.splitlines()),
            summary=summarize(content, kind),
            purpose=infer_purpose(path, content, kind),
            exports=extract_exports(content, language),
            imports=extract_imports(content, language),
            api_surface=api_surface,
            complexity_score=complexity,
            importance_score=importance_score(size, complexity, len(api_surface), path),
            branching=profile,
        )

    def analyze_file(self, filepath: Path, rel_path: Optional[str] = None) -> FileAnalysis:
        """Read and analyse one file.

        Raises:
            FileAccessError: If the file cannot be read as text
        """
        content = read_source(filepath, max_bytes=self.config.max_file_size_bytes)
        rel = rel_path if rel_path is not None else filepath.name
        logger.debug(f"Analyzing {rel} ({len(content)} chars)")
        return self.analyze_content(rel, content, size=len(content.encode("utf-8")))
