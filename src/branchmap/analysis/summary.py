"""Scan-level score statistics."""

from typing import Iterable, Optional

import numpy as np

from ..models import FileReport, ScoreSummary


def summarize_scores(reports: Iterable[FileReport]) -> Optional[ScoreSummary]:
    """Mean, median, 90th percentile and max of both scores.

    Only reports with content analysis take part. Returns None when there
    are none.
    """
    analysed = [r.analysis for r in reports if r.analysis is not None]
    if not analysed:
        return None

    complexity = np.array([a.complexity_score for a in analysed], dtype=float)
    importance = np.array([a.importance_score for a in analysed], dtype=float)

    return ScoreSummary(
        analyzed_files=len(analysed),
        complexity_mean=float(np.mean(complexity)),
        complexity_median=float(np.median(complexity)),
        complexity_p90=float(np.percentile(complexity, 90)),
        complexity_max=float(np.max(complexity)),
        importance_mean=float(np.mean(importance)),
        importance_median=float(np.median(importance)),
        importance_p90=float(np.percentile(importance, 90)),
        importance_max=float(np.max(importance)),
    )


def top_reports(reports: Iterable[FileReport], n: int = 10, key: str = "importance_score") -> list[FileReport]:
    """Analysed reports with the highest ``key`` score, best first."""
    analysed = [r for r in reports if r.analysis is not None]
    if not analysed:
        return []
    scores = np.array([getattr(r.analysis, key) for r in analysed], dtype=float)
    # Stable sort so ties keep walk order
    order = np.argsort(-scores, kind="stable")[:n]
    return [analysed[i] for i in order]
