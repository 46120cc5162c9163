"""Construct recognition for one sanitized line."""

import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Optional

from .languages import LanguageConfig


class BranchKind(str, Enum):
    CONDITIONAL = "conditional"
    LOOP = "loop"
    SWITCH = "switch"


@lru_cache(maxsize=None)
def keyword_pattern(keyword: str) -> "re.Pattern[str]":
    """Regex for ``keyword`` as a whole token.

    The keyword must be at line start or follow whitespace or one of
    ``{ ( ) ;``, and must be followed by whitespace, one of ``{ ( ) ; :``
    or the end of the line. "if" never matches inside "gift" or "elif".
    """
    return re.compile(r"(?<![^\s{();])" + re.escape(keyword) + r"(?![^\s{();:])")


def count_keyword(line: str, keyword: str, every_occurrence: bool = True) -> int:
    matches = keyword_pattern(keyword).finditer(line)
    if every_occurrence:
        return sum(1 for _ in matches)
    return 1 if next(matches, None) is not None else 0


@dataclass(frozen=True)
class LineClassification:
    """What one sanitized line contributes to a branching profile.

    ``conditionals`` counts keyword conditionals (``if``, ``except``...);
    ``implicit_conditionals`` counts match arms and ternaries, which add to
    cyclomatic complexity but carry no cognitive weight. ``case_arms`` are
    switch arms: branches, but not new switch statements.
    """

    conditionals: int = 0
    implicit_conditionals: int = 0
    loops: int = 0
    switches: int = 0
    case_arms: int = 0
    logical_operators: int = 0

    @property
    def conditional_count(self) -> int:
        return self.conditionals + self.implicit_conditionals

    @property
    def decision_points(self) -> int:
        return self.conditional_count + self.loops + self.switches + self.case_arms

    @property
    def is_branch(self) -> bool:
        return self.decision_points > 0

    @property
    def kind(self) -> Optional[BranchKind]:
        """Dominant construct on the line: loop, then conditional, then switch."""
        if self.loops:
            return BranchKind.LOOP
        if self.conditional_count:
            return BranchKind.CONDITIONAL
        if self.switches or self.case_arms:
            return BranchKind.SWITCH
        return None


EMPTY = LineClassification()


def classify_line(line: str, config: LanguageConfig) -> LineClassification:
    """Recognize conditional, loop and switch constructs on a sanitized, trimmed line."""
    if not line:
        return EMPTY

    every = config.count_every_occurrence

    conditionals = sum(count_keyword(line, kw, every) for kw in config.conditional_keywords)
    loops = sum(count_keyword(line, kw, every) for kw in config.loop_keywords)
    switches = sum(count_keyword(line, kw, False) for kw in config.switch_keywords)

    implicit = 0
    if config.arm_marker and config.arm_marker in line:
        implicit += 1
    if config.ternary and " ? " in line and " : " in line:
        implicit += 1

    case_arms = 0
    if config.case_label and line.startswith(config.case_label):
        if keyword_pattern(config.case_label).match(line):
            case_arms = 1

    logical = sum(line.count(op) for op in config.logical_operators)

    return LineClassification(
        conditionals=conditionals,
        implicit_conditionals=implicit,
        loops=loops,
        switches=switches,
        case_arms=case_arms,
        logical_operators=logical,
    )
