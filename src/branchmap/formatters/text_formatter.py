"""Plain-text formatters: basic, compact, detailed and hierarchical listings."""

import time
from collections import OrderedDict
from pathlib import PurePosixPath
from typing import List, Optional

from ..analysis.breakdown import branching_breakdown
from ..models import FileReport, ScanResult
from .base import BaseFormatter

MAX_LISTED_IMPORTS = 3


def format_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def format_time_ago(modified: float, now: Optional[float] = None) -> str:
    elapsed = max(0.0, (time.time() if now is None else now) - modified)
    if elapsed < 60:
        return "just now"
    if elapsed < 3600:
        return f"{int(elapsed // 60)}m ago"
    if elapsed < 86400:
        return f"{int(elapsed // 3600)}h ago"
    return f"{int(elapsed // 86400)}d ago"


def _kind_label(report: FileReport) -> str:
    return "[DIR]" if report.is_dir else "[FILE]"


def _tag_suffix(report: FileReport) -> str:
    return f" ({', '.join(report.tags)})" if report.tags else ""


class TextFormatter(BaseFormatter):
    """Line-oriented listing; subclasses choose the lines."""

    def render(self, result: ScanResult) -> None:
        text = self.format(result)
        if text:
            print(text)

    def format(self, result: ScanResult) -> str:
        return "\n".join(self.lines(result))

    def lines(self, result: ScanResult) -> List[str]:
        raise NotImplementedError


class BasicFormatter(TextFormatter):
    """``[FILE] path (tags)`` per entry."""

    def lines(self, result: ScanResult) -> List[str]:
        return [f"  {_kind_label(r)} {r.path}{_tag_suffix(r)}" for r in result.files]


class CompactFormatter(TextFormatter):
    """Files only, with size and age."""

    def __init__(self, now: Optional[float] = None):
        self.now = now

    def lines(self, result: ScanResult) -> List[str]:
        return [
            f"  {r.path} ({format_size(r.size)}, {format_time_ago(r.modified, self.now)})"
            for r in result.files
            if not r.is_dir
        ]


class DetailedFormatter(TextFormatter):
    """Every fact known about each file, including the branching breakdown."""

    def __init__(self, now: Optional[float] = None):
        self.now = now

    def lines(self, result: ScanResult) -> List[str]:
        out: List[str] = []
        for report in result.files:
            out.append(f"  {_kind_label(report)} {report.path}")
            if report.is_dir:
                continue
            out.extend("    " + line for line in self._details(report))
        return out

    def _details(self, report: FileReport) -> List[str]:
        first = f"Size: {format_size(report.size)} | Modified: {format_time_ago(report.modified, self.now)}"
        analysis = report.analysis
        if analysis is not None:
            first += f" | Lines: {analysis.line_count}"
        details = [first]
        if report.tags:
            details.append(f"Tags: {', '.join(report.tags)}")
        if analysis is None:
            return details

        details.append(f"Summary: {analysis.summary}")
        if analysis.exports:
            details.append(f"Exports: {', '.join(analysis.exports)}")
        if analysis.imports:
            if len(analysis.imports) <= MAX_LISTED_IMPORTS:
                details.append(f"Imports: {', '.join(analysis.imports)}")
            else:
                details.append(f"Imports: {len(analysis.imports)} dependencies")
        details.append(f"Purpose: {analysis.purpose}")
        details.append(
            f"Complexity: {analysis.complexity_score:.1f}/10 | "
            f"Importance: {analysis.importance_score:.1f}/10"
        )
        if analysis.branching is not None:
            breakdown = branching_breakdown(analysis.branching)
            if breakdown:
                details.append(breakdown)
        return details


class HierarchicalFormatter(TextFormatter):
    """Files grouped under their parent directory."""

    def lines(self, result: ScanResult) -> List[str]:
        groups: "OrderedDict[str, List[FileReport]]" = OrderedDict()
        for report in result.files:
            if report.is_dir:
                continue
            parent = str(PurePosixPath(report.path).parent)
            groups.setdefault(parent, []).append(report)

        out: List[str] = []
        for parent in sorted(groups):
            out.append(f"{parent}/")
            for report in groups[parent]:
                out.append(f"  {report.name}{_tag_suffix(report)}")
        return out
