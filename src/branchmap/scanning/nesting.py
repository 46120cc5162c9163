"""Running nesting depth and the conditional depth histogram."""

from collections import Counter
from typing import Optional


class NestingTracker:
    """Brace depth over a file.

    ``step`` applies one sanitized line: an opening brace is applied before a
    closing one, and depth never goes below zero, so unbalanced input only
    skews the counts.
    """

    def __init__(self) -> None:
        self.depth = 0
        self.max_depth = 0
        self.histogram: Counter = Counter()

    def step(self, text: str, raw_line: str = "") -> Optional[int]:
        """Apply one line and return the depth the line opened, if any."""
        opened = None
        if "{" in text:
            self.depth += 1
            opened = self.depth
            if self.depth > self.max_depth:
                self.max_depth = self.depth
        if "}" in text and self.depth > 0:
            self.depth -= 1
        return opened

    def record(self, level: int) -> None:
        """Count one conditional opened at ``level``."""
        self.histogram[level] += 1

    def distribution(self) -> dict[int, int]:
        return dict(sorted(self.histogram.items()))


class IndentNestingTracker(NestingTracker):
    """Depth of ':'-terminated blocks for indentation-scoped languages.

    A line at or left of an open block's indentation closes that block.
    A line whose code ends with ':' opens a block one level deeper.
    """

    def __init__(self, tab_size: int = 4) -> None:
        super().__init__()
        self.tab_size = tab_size
        self._indents: list[int] = []

    def step(self, text: str, raw_line: str = "") -> Optional[int]:
        expanded = raw_line.expandtabs(self.tab_size)
        indent = len(expanded) - len(expanded.lstrip())

        while self._indents and self._indents[-1] >= indent:
            self._indents.pop()
        self.depth = len(self._indents)

        if not text.rstrip().endswith(":"):
            return None

        self._indents.append(indent)
        self.depth = len(self._indents)
        if self.depth > self.max_depth:
            self.max_depth = self.depth
        return self.depth


def tracker_for(nesting_mode: str, indent_nesting: bool = False) -> NestingTracker:
    """Brace tracker unless indentation nesting is enabled for an "indent" family."""
    if indent_nesting and nesting_mode == "indent":
        return IndentNestingTracker()
    return NestingTracker()
