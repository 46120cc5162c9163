"""Output formatters for Branchmap."""

from .base import BaseFormatter
from .json_formatter import JsonFormatter
from .rich_formatter import RichFormatter
from .text_formatter import (
    BasicFormatter,
    CompactFormatter,
    DetailedFormatter,
    HierarchicalFormatter,
    format_size,
    format_time_ago,
)
from .yaml_formatter import YamlFormatter


def get_formatter(name: str) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "basic", "compact", "detailed", "hierarchical",
              "json", "yaml", "rich"

    Raises:
        ValueError: If name is not recognized
    """
    formatters = {
        "basic": BasicFormatter,
        "compact": CompactFormatter,
        "detailed": DetailedFormatter,
        "hierarchical": HierarchicalFormatter,
        "json": JsonFormatter,
        "yaml": YamlFormatter,
        "rich": RichFormatter,
    }
    cls = formatters.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(formatters))}")
    return cls()


__all__ = [
    "BaseFormatter",
    "BasicFormatter",
    "CompactFormatter",
    "DetailedFormatter",
    "HierarchicalFormatter",
    "JsonFormatter",
    "YamlFormatter",
    "RichFormatter",
    "format_size",
    "format_time_ago",
    "get_formatter",
]
