"""Rich terminal formatter for Branchmap."""

import io

from rich.console import Console
from rich.table import Table

from ..analysis.summary import top_reports
from ..models import ScanResult
from .base import BaseFormatter
from .text_formatter import format_size

console = Console()


def _score_label(score: float) -> str:
    if score >= 7.0:
        return f"[red bold]{score:.1f}[/red bold]"
    elif score >= 4.0:
        return f"[yellow]{score:.1f}[/yellow]"
    else:
        return f"[green]{score:.1f}[/green]"


class RichFormatter(BaseFormatter):
    """Table of analysed files ranked by importance, plus score summary."""

    def __init__(self, limit: int = 25):
        self.limit = limit

    def render(self, result: ScanResult) -> None:
        self._print(result, console)

    def format(self, result: ScanResult) -> str:
        buffer = io.StringIO()
        self._print(result, Console(file=buffer, width=120, force_terminal=False))
        return buffer.getvalue()

    def _print(self, result: ScanResult, out: Console) -> None:
        ranked = top_reports(result.files, n=self.limit)
        if not ranked:
            table = Table(title=f"Files in {result.root_path}")
            table.add_column("Path")
            table.add_column("Size", justify="right")
            table.add_column("Tags")
            for report in result.files:
                if not report.is_dir:
                    table.add_row(report.path, format_size(report.size), ", ".join(report.tags))
            out.print(table)
            return

        table = Table(title=f"Most important files in {result.root_path}")
        table.add_column("Path", style="cyan")
        table.add_column("Language")
        table.add_column("Importance", justify="right")
        table.add_column("Complexity", justify="right")
        table.add_column("Branches", justify="right")
        table.add_column("Pure", justify="right")
        table.add_column("Max depth", justify="right")

        for report in ranked:
            analysis = report.analysis
            profile = analysis.branching
            table.add_row(
                report.path,
                report.language or "-",
                _score_label(analysis.importance_score),
                _score_label(analysis.complexity_score),
                str(profile.total_branches) if profile else "-",
                f"{profile.pure_ratio:.0%}" if profile else "-",
                str(profile.max_nesting) if profile else "-",
            )
        out.print(table)

        summary = result.score_summary
        if summary is not None:
            out.print(
                f"[bold]{summary.analyzed_files}[/bold] files analysed  "
                f"complexity mean {summary.complexity_mean:.2f} / p90 {summary.complexity_p90:.2f}  "
                f"importance mean {summary.importance_mean:.2f} / p90 {summary.importance_p90:.2f}"
            )
