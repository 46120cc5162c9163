"""Complexity and importance scores, both on a 0-10 scale."""

from typing import Union

from ..scanning.languages import Language, structure_weights
from ..scanning.profile import BranchingProfile

MAX_SCORE = 10.0
MAX_BRANCHING_SCORE = 8.0


def structural_bonus(content: str, language: Union[Language, str, None]) -> float:
    """Weighted count of declaration tokens (``impl ``, ``class ``...).

    ``language`` may be a family or a file kind name such as "cpp".
    """
    return sum(content.count(token) * weight for token, weight in structure_weights(language))


def branching_score(profile: BranchingProfile) -> float:
    nesting_penalty = profile.max_nesting ** 1.5 * 0.2
    raw = (
        profile.cyclomatic_complexity * 0.4
        + profile.cognitive_complexity * 0.4
        + nesting_penalty * 0.2
    )
    return min(raw, MAX_BRANCHING_SCORE)


def complexity_score(
    content: str,
    language: Union[Language, str, None],
    profile: BranchingProfile,
) -> float:
    line_count = len(content.splitlines())
    byte_count = len(content.encode("utf-8"))
    score = line_count / 100.0 + byte_count / 10000.0
    score += branching_score(profile)
    score += structural_bonus(content, language)
    return max(0.0, min(score, MAX_SCORE))


def path_bonus(path: str) -> float:
    """Entry points and library roots matter more; so does anything under core."""
    lowered = path.lower()
    bonus = 0.0
    if "main" in lowered or "lib" in lowered:
        bonus += 1.0
    if "core" in lowered:
        bonus += 0.5
    return bonus


def importance_score(size: int, complexity: float, api_surface_len: int, path: str) -> float:
    score = 1.0 + min(size / 10000.0, 2.0) + complexity * 0.3 + api_surface_len * 0.1
    score += path_bonus(path)
    return max(0.0, min(score, MAX_SCORE))
