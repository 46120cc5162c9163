"""Language families and their recognizer tables.

Every per-language difference in the branch engine lives here as data:
keyword sets, comment markers, nesting mode, structural score weights and
the line-prefix patterns used for export/import/API extraction.

Adding a language family:
  1. Add a member to ``Language``.
  2. Add a LanguageConfig entry to ``LANGUAGE_CONFIGS``.
  3. Map its file kinds in ``_FAMILY_BY_KIND``.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from ..exceptions import UnsupportedLanguageError


class Language(Enum):
    """Closed set of recognizer families."""

    RUST = "rust"
    JS_TS = "javascript"
    PYTHON = "python"
    JAVA = "java"
    GO = "go"
    C_FAMILY = "c"
    GENERIC = "generic"

    @classmethod
    def from_name(cls, name: Optional[str]) -> "Language":
        """Map a file kind name (``"typescript"``, ``"cpp"``...) to its family.

        Unknown or missing names fall back to GENERIC.
        """
        if not name:
            return cls.GENERIC
        key = name.lower()
        if key in _FAMILY_BY_KIND:
            return _FAMILY_BY_KIND[key]
        for language in cls:
            if language.name.lower() == key:
                return language
        return cls.GENERIC

    @property
    def config(self) -> "LanguageConfig":
        return LANGUAGE_CONFIGS[self]


@dataclass(frozen=True)
class LanguageConfig:
    """Everything the branch engine needs to know about a language family."""

    name: str

    # Keywords matched with the boundary rule (see recognizers.keyword_pattern)
    conditional_keywords: tuple[str, ...] = ()
    loop_keywords: tuple[str, ...] = ()
    switch_keywords: tuple[str, ...] = ()

    # A line starting with this keyword is a switch arm
    case_label: Optional[str] = None

    # Marker counted once per line as an extra conditional (Rust match arms)
    arm_marker: Optional[str] = None

    # " ? " together with " : " counts as a conditional
    ternary: bool = False

    # Padded substrings; every occurrence counts
    logical_operators: tuple[str, ...] = ()

    # Rust counts every keyword occurrence on a line, others at most one
    count_every_occurrence: bool = False

    # Comment syntax understood by the sanitizer
    line_comments: tuple[str, ...] = ("//",)

    # "indent" families may opt into ':'-terminated block nesting;
    # braces are counted otherwise
    nesting_mode: str = "brace"

    # (token, weight) pairs for the structural part of the complexity score
    structure_weights: tuple[tuple[str, float], ...] = ()

    # Line-prefix patterns. Group 1 is captured for exports and imports;
    # api patterns keep the whole stripped line.
    export_patterns: tuple[str, ...] = ()
    import_patterns: tuple[str, ...] = ()
    api_patterns: tuple[str, ...] = ()


_C_LOGICAL = (" && ", " || ")
_RUST_STRUCTURE = (("impl ", 0.5), ("trait ", 0.3), ("struct ", 0.2))


LANGUAGE_CONFIGS: dict[Language, LanguageConfig] = {
    Language.RUST: LanguageConfig(
        name="rust",
        conditional_keywords=("if",),
        loop_keywords=("while", "for", "loop"),
        switch_keywords=("match",),
        arm_marker="=>",
        logical_operators=_C_LOGICAL,
        count_every_occurrence=True,
        structure_weights=_RUST_STRUCTURE,
        export_patterns=(r"^\s*pub\s+(?:fn|struct|enum|trait)\s+(\w+)",),
        import_patterns=(r"^\s*use\s+([^;]+);?",),
        api_patterns=(r"^\s*pub\s+(?:fn|struct|enum|trait)\b",),
    ),
    Language.JS_TS: LanguageConfig(
        name="javascript",
        conditional_keywords=("if", "catch"),
        loop_keywords=("while", "for"),
        switch_keywords=("switch",),
        case_label="case",
        ternary=True,
        logical_operators=_C_LOGICAL,
        structure_weights=(("class ", 0.4), ("function ", 0.3), ("async ", 0.2)),
        export_patterns=(
            r"^\s*export\s+(?:default\s+)?(?:declare\s+)?(?:abstract\s+)?(?:async\s+)?"
            r"(?:function\*?|class|const|let|var|interface|type|enum)\s+(\w+)",
            r"^\s*export\s+(\w+)",
        ),
        import_patterns=(r"^\s*(import\s.+?);?\s*$",),
        api_patterns=(r"^\s*export\s",),
    ),
    Language.PYTHON: LanguageConfig(
        name="python",
        conditional_keywords=("if", "elif", "except"),
        loop_keywords=("while", "for"),
        logical_operators=(" and ", " or "),
        line_comments=("#",),
        nesting_mode="indent",
        structure_weights=(("class ", 0.4), ("def ", 0.3), ("async ", 0.2)),
        export_patterns=(r"^(?:async\s+)?(?:def|class)\s+([A-Za-z]\w*)",),
        import_patterns=(
            r"^\s*import\s+([\w.]+)",
            r"^\s*from\s+([\w.]+)\s+import\b",
        ),
        api_patterns=(r"^(?:async\s+)?(?:def|class)\s+[A-Za-z]",),
    ),
    Language.JAVA: LanguageConfig(
        name="java",
        conditional_keywords=("if", "catch"),
        loop_keywords=("while", "for"),
        switch_keywords=("switch",),
        case_label="case",
        ternary=True,
        logical_operators=_C_LOGICAL,
        structure_weights=(("class ", 0.4), ("interface ", 0.3)),
        export_patterns=(
            r"^\s*public\s+(?:(?:abstract|final|static|sealed)\s+)*"
            r"(?:class|interface|enum|record)\s+(\w+)",
        ),
        import_patterns=(r"^\s*import\s+(?:static\s+)?([\w.*]+)\s*;",),
        api_patterns=(r"^\s*public\s",),
    ),
    Language.GO: LanguageConfig(
        name="go",
        conditional_keywords=("if",),
        loop_keywords=("for",),
        switch_keywords=("switch", "select"),
        case_label="case",
        logical_operators=_C_LOGICAL,
        structure_weights=(("func ", 0.3), ("struct ", 0.2), ("interface ", 0.3)),
        export_patterns=(
            r"^func\s+(?:\([^)]*\)\s*)?([A-Z]\w*)",
            r"^type\s+([A-Z]\w*)",
        ),
        import_patterns=(
            r'^\s*import\s+(?:\w+\s+)?"([^"]+)"',
            r'^\s*(?:[\w.]+\s+)?"([^"]+)"\s*$',
        ),
        api_patterns=(r"^func\s+(?:\([^)]*\)\s*)?[A-Z]", r"^type\s+[A-Z]"),
    ),
    Language.C_FAMILY: LanguageConfig(
        name="c",
        conditional_keywords=("if",),
        loop_keywords=("while", "for"),
        switch_keywords=("switch",),
        case_label="case",
        ternary=True,
        logical_operators=_C_LOGICAL,
        structure_weights=_RUST_STRUCTURE,
        import_patterns=(r'^\s*#\s*include\s*[<"]([^>"]+)[>"]',),
    ),
    Language.GENERIC: LanguageConfig(
        name="generic",
        conditional_keywords=("if",),
        loop_keywords=("while", "for"),
        switch_keywords=("switch",),
        logical_operators=(" && ", " || ", " and ", " or "),
    ),
}


# File kind -> family. Kinds without an entry (markdown, json...) are GENERIC.
_FAMILY_BY_KIND: dict[str, Language] = {
    "rust": Language.RUST,
    "javascript": Language.JS_TS,
    "typescript": Language.JS_TS,
    "python": Language.PYTHON,
    "java": Language.JAVA,
    "go": Language.GO,
    "c": Language.C_FAMILY,
    "cpp": Language.C_FAMILY,
    "generic": Language.GENERIC,
}

_KIND_BY_EXTENSION: dict[str, str] = {
    "rs": "rust",
    "py": "python",
    "js": "javascript",
    "jsx": "javascript",
    "mjs": "javascript",
    "cjs": "javascript",
    "ts": "typescript",
    "tsx": "typescript",
    "go": "go",
    "java": "java",
    "c": "c",
    "h": "c",
    "cpp": "cpp",
    "cxx": "cpp",
    "cc": "cpp",
    "hpp": "cpp",
    "hxx": "cpp",
    "md": "markdown",
    "json": "json",
    "yaml": "yaml",
    "yml": "yaml",
    "toml": "toml",
    "sh": "shell",
    "bash": "shell",
}

SOURCE_KINDS = frozenset(k for k, fam in _FAMILY_BY_KIND.items() if fam is not Language.GENERIC)

# Kinds that share a family table but not its structural weights
_STRUCTURE_BY_KIND: dict[str, tuple[tuple[str, float], ...]] = {"c": ()}


def detect_language(path: Union[str, Path]) -> Optional[str]:
    """Return the file kind for a path from its extension, or None."""
    suffix = Path(path).suffix.lower().lstrip(".")
    if not suffix:
        return None
    return _KIND_BY_EXTENSION.get(suffix)


def get_language_config(name: str) -> LanguageConfig:
    """Strict lookup of a recognizer table by file kind or family name.

    Raises:
        UnsupportedLanguageError: If the name maps to no recognizer set
    """
    key = name.lower()
    if key in _FAMILY_BY_KIND:
        return LANGUAGE_CONFIGS[_FAMILY_BY_KIND[key]]
    for language in Language:
        if language.name.lower() == key:
            return language.config
    raise UnsupportedLanguageError(name, sorted(_FAMILY_BY_KIND))


def structure_weights(language: Union[Language, str, None]) -> tuple[tuple[str, float], ...]:
    """Structural score weights for a family, or for a file kind name.

    Plain C shares the C-family recognizers but has no ``impl``/``trait``
    declarations, so it gets no structural weights.
    """
    if isinstance(language, Language):
        return language.config.structure_weights
    if language and language.lower() in _STRUCTURE_BY_KIND:
        return _STRUCTURE_BY_KIND[language.lower()]
    return Language.from_name(language).config.structure_weights
