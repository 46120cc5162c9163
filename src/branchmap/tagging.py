"""Tag classification by file name and path."""

from typing import List, Optional

from .models import FileAnalysis, FileEntry

DOCUMENTATION_EXTENSIONS = frozenset({"md", "txt", "rst"})
CONFIGURATION_EXTENSIONS = frozenset({"json", "yaml", "yml", "toml", "ini", "cfg"})
SCRIPT_EXTENSIONS = frozenset({"sh", "bash", "zsh", "fish", "ps1", "bat", "cmd"})
SOURCE_EXTENSIONS = frozenset(
    {
        "rs", "py", "js", "jsx", "mjs", "cjs", "ts", "tsx", "go", "java",
        "c", "h", "cpp", "cxx", "cc", "hpp", "hxx",
    }
)

_PURPOSE_TAGS = {
    "Application entry point": "entrypoint",
    "Core library functionality": "core-api",
    "Command-line interface": "cli",
}


def generic_tags(entry: FileEntry) -> List[str]:
    if entry.is_dir:
        return ["directory"]

    tags: List[str] = []
    name = entry.name.lower()
    ext = entry.extension
    rel = entry.rel_path.lower()

    if name.startswith("readme") or ext in DOCUMENTATION_EXTENSIONS:
        tags.append("documentation")
    if ext in CONFIGURATION_EXTENSIONS:
        tags.append("configuration")
    if ext in SCRIPT_EXTENSIONS:
        tags.append("script")
    if ext in SOURCE_EXTENSIONS:
        tags.append("source")
    if "test" in rel or "spec" in rel:
        tags.append("test")
    if "example" in rel or "demo" in rel:
        tags.append("example")

    return tags or ["unclassified"]


def enhanced_tags(
    base: List[str],
    language: Optional[str],
    analysis: Optional[FileAnalysis],
) -> List[str]:
    """Add language, purpose and score tags to the generic set."""
    tags = [t for t in base if t != "unclassified"]

    def add(tag: str) -> None:
        if tag not in tags:
            tags.append(tag)

    if language:
        add(language)

    if analysis is not None:
        purpose_tag = _PURPOSE_TAGS.get(analysis.purpose)
        if purpose_tag:
            add(purpose_tag)
        if analysis.importance_score > 5.0:
            add("high-importance")
        elif analysis.importance_score > 2.0:
            add("moderate-importance")
        if analysis.complexity_score > 5.0:
            add("high-complexity")

    return tags or ["unclassified"]
