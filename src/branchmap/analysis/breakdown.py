"""One-line human-readable summary of a branching profile."""

from ..scanning.profile import BranchingProfile

PREFIX = "Enhanced Branching Analysis: "


def _percent(part: int, whole: int) -> float:
    return part / whole * 100.0 if whole else 0.0


def branching_breakdown(profile: BranchingProfile) -> str:
    """Render the profile as ``"Enhanced Branching Analysis: a | b | ..."``.

    Returns an empty string when the file has no branches and no logical
    operators.
    """
    parts: list[str] = []
    total = profile.total_branches

    counts = []
    if profile.conditional_count:
        counts.append(f"{profile.conditional_count}x conditionals")
    if profile.loop_count:
        counts.append(f"{profile.loop_count}x loops")
    if profile.switch_count:
        counts.append(f"{profile.switch_count}x switches")
    if counts:
        parts.append(", ".join(counts))

    if total:
        hardcoded = profile.hardcoded_total
        if hardcoded:
            parts.append(f"Hard-coded: {_percent(hardcoded, total):.0f}% ({hardcoded}/{total})")
        parts.append(
            f"Pure: {_percent(profile.pure_branches, total):.0f}% ({profile.pure_branches}/{total})"
        )

    if profile.future_logic_count:
        parts.append(f"Future: {profile.future_logic_count}x")
    if profile.past_logic_count:
        parts.append(f"Past: {profile.past_logic_count}x")

    deep = [
        f"{profile.nesting_distribution[depth]}x depth-{depth}"
        for depth in sorted(profile.nesting_distribution, reverse=True)
        if depth >= 2
    ]
    if deep:
        parts.append("Nesting: " + ", ".join(deep))

    if profile.logical_operators:
        parts.append(f"{profile.logical_operators}x logical ops")

    if not parts:
        return ""
    return PREFIX + " | ".join(parts)
