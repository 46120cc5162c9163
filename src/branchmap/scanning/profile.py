"""Branching profile: the single forward pass over a file's lines.

Each line goes through the same steps:

1. Skip blank lines and lines starting with a comment marker.
2. Sanitize (comments and strings removed) and classify constructs.
3. Update nesting depth; a conditional that opens a scope is recorded
   in the depth histogram at the depth it opened.
4. Accumulate counts and complexity.
5. For branch lines, run the literal, purity and temporal judgments on
   the comment-stripped line with string literals kept.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Iterable, Optional, Union

from .judgments import (
    DEFAULT_IMPURE_TOKENS,
    count_hardcoded_values,
    has_hardcoded_date,
    is_future_logic,
    is_past_logic,
    is_pure,
)
from .languages import Language
from .nesting import tracker_for
from .recognizers import BranchKind, classify_line
from .sanitizer import is_comment_line, scan_line


@dataclass(frozen=True)
class BranchingProfile:
    """Branch statistics for one file.

    ``pure_branches + non_pure_branches == total_branches`` always holds.
    ``nesting_distribution`` maps brace (or block) depth to the number of
    conditionals that opened a scope at that depth.
    """

    conditional_count: int = 0
    loop_count: int = 0
    switch_count: int = 0
    max_nesting: int = 0
    nesting_distribution: dict[int, int] = field(default_factory=dict)
    logical_operators: int = 0
    cyclomatic_complexity: float = 1.0
    cognitive_complexity: float = 0.0
    hardcoded_dates_count: int = 0
    hardcoded_values_count: int = 0
    pure_branches: int = 0
    non_pure_branches: int = 0
    future_logic_count: int = 0
    past_logic_count: int = 0
    total_branches: int = 0

    @property
    def hardcoded_total(self) -> int:
        return self.hardcoded_dates_count + self.hardcoded_values_count

    @property
    def pure_ratio(self) -> float:
        if self.total_branches == 0:
            return 1.0
        return self.pure_branches / self.total_branches

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class ProfileBuilder:
    """Folds lines into a BranchingProfile.

    Args:
        language: Recognizer family (or a file kind name such as "typescript")
        impure_tokens: Substrings that make a branch non-pure
        track_block_comments: Carry ``/* ... */`` state from line to line
        indent_nesting: Track Python-like files by block indentation instead
            of braces
    """

    def __init__(
        self,
        language: Union[Language, str, None] = Language.GENERIC,
        impure_tokens: Iterable[str] = DEFAULT_IMPURE_TOKENS,
        track_block_comments: bool = False,
        indent_nesting: bool = False,
    ):
        if not isinstance(language, Language):
            language = Language.from_name(language)
        self.language = language
        self.config = language.config
        self.impure_tokens = tuple(impure_tokens)
        self.track_block_comments = track_block_comments
        self.indent_nesting = indent_nesting

        self._tracker = tracker_for(self.config.nesting_mode, indent_nesting)
        self._in_block = False

        self.conditional_count = 0
        self.loop_count = 0
        self.switch_count = 0
        self.logical_operators = 0
        self.cyclomatic = 1.0
        self.cognitive = 0.0
        self.dates = 0
        self.values = 0
        self.pure = 0
        self.non_pure = 0
        self.future = 0
        self.past = 0
        self.total_branches = 0

    def feed(self, raw_line: str) -> None:
        trimmed = raw_line.strip()
        comments = self.config.line_comments

        if self._in_block:
            code, self._in_block = scan_line(trimmed, comments, in_block=True)
            view = scan_line(trimmed, comments, keep_strings=True, in_block=True)[0]
            if code.strip():
                self._analyze(code.strip(), view.strip(), raw_line)
            return

        if not trimmed or is_comment_line(trimmed):
            if self.track_block_comments and trimmed.startswith("/*"):
                self._in_block = scan_line(trimmed, comments)[1]
            return

        code, ends_in_block = scan_line(trimmed, comments)
        if self.track_block_comments:
            self._in_block = ends_in_block
        view = scan_line(trimmed, comments, keep_strings=True)[0]
        self._analyze(code.strip(), view.strip(), raw_line)

    def _analyze(self, code: str, view: str, raw_line: str) -> None:
        line = classify_line(code, self.config)

        opened: Optional[int] = self._tracker.step(code, raw_line)
        if opened is not None and line.kind is BranchKind.CONDITIONAL:
            self._tracker.record(opened)

        weight = 1.0 + 0.5 * self._tracker.depth
        self.conditional_count += line.conditional_count
        self.loop_count += line.loops
        self.switch_count += line.switches
        self.logical_operators += line.logical_operators
        self.cyclomatic += line.decision_points
        self.cognitive += (line.conditionals + line.switches) * weight
        self.cognitive += line.loops * 1.5 * weight

        if not line.is_branch:
            return

        self.total_branches += 1
        if has_hardcoded_date(view):
            self.dates += 1
        self.values += count_hardcoded_values(view)
        if is_pure(view, self.impure_tokens):
            self.pure += 1
        else:
            self.non_pure += 1
        if line.conditional_count and is_future_logic(view):
            self.future += 1
        if is_past_logic(view):
            self.past += 1

    def build(self) -> BranchingProfile:
        return BranchingProfile(
            conditional_count=self.conditional_count,
            loop_count=self.loop_count,
            switch_count=self.switch_count,
            max_nesting=self._tracker.max_depth,
            nesting_distribution=self._tracker.distribution(),
            logical_operators=self.logical_operators,
            cyclomatic_complexity=self.cyclomatic,
            cognitive_complexity=self.cognitive,
            hardcoded_dates_count=self.dates,
            hardcoded_values_count=self.values,
            pure_branches=self.pure,
            non_pure_branches=self.non_pure,
            future_logic_count=self.future,
            past_logic_count=self.past,
            total_branches=self.total_branches,
        )


def analyze_branching(
    content: str,
    language: Union[Language, str, None] = Language.GENERIC,
    extra_impure_tokens: Iterable[str] = (),
    track_block_comments: bool = False,
    indent_nesting: bool = False,
) -> BranchingProfile:
    """Build the branching profile of a whole file in one pass."""
    builder = ProfileBuilder(
        language,
        impure_tokens=DEFAULT_IMPURE_TOKENS + tuple(extra_impure_tokens),
        track_block_comments=track_block_comments,
        indent_nesting=indent_nesting,
    )
    for raw_line in content.splitlines():
        builder.feed(raw_line)
    return builder.build()
