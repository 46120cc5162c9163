"""Per-file reports and scan-level statistics built on the branch engine."""

from .breakdown import branching_breakdown
from .content import ContentAnalyzer, infer_purpose, summarize
from .scoring import complexity_score, importance_score
from .summary import summarize_scores, top_reports

__all__ = [
    "ContentAnalyzer",
    "branching_breakdown",
    "complexity_score",
    "importance_score",
    "infer_purpose",
    "summarize",
    "summarize_scores",
    "top_reports",
]
