"""Profile command: branching profile of a single file."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from ..analysis.breakdown import branching_breakdown
from ..analysis.content import ContentAnalyzer
from ..exceptions import BranchmapError
from ..file_ops import read_source
from ..logging_config import setup_logging
from ..scanning.languages import detect_language, get_language_config
from . import app
from ._common import console, err_console, resolve_config


@app.command()
def profile(
    file: Path = typer.Argument(..., help="Source file to profile", dir_okay=False),
    language: Optional[str] = typer.Option(
        None,
        "-l",
        "--language",
        help="Language to use instead of detecting it from the extension",
    ),
    json_output: bool = typer.Option(False, "--json", help="Output JSON"),
    track_block_comments: bool = typer.Option(
        False,
        "--track-block-comments",
        help="Carry /* ... */ comments across lines",
    ),
    indent_nesting: bool = typer.Option(
        False,
        "--indent-nesting",
        help="Nest Python files by block indentation instead of braces",
    ),
    config: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Configuration file (TOML)", dir_okay=False
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Show the branching profile, scores and declarations of one file."""
    logger = setup_logging(verbose=verbose)

    try:
        settings = resolve_config(
            config,
            track_block_comments=True if track_block_comments else None,
            indent_nesting=True if indent_nesting else None,
        )
        if language is not None:
            get_language_config(language)
            kind = language.lower()
        else:
            kind = detect_language(file)
        content = read_source(file, max_bytes=settings.max_file_size_bytes)
    except BranchmapError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    analysis = ContentAnalyzer(settings).analyze_content(file.name, content, kind=kind)
    branching = analysis.branching

    if json_output:
        print(
            json.dumps(
                {
                    "path": str(file),
                    "language": kind,
                    "purpose": analysis.purpose,
                    "complexity_score": analysis.complexity_score,
                    "importance_score": analysis.importance_score,
                    "branching": branching.to_dict(),
                },
                indent=2,
            )
        )
        return

    table = Table(title=f"Branching profile: {escape(str(file))} ({kind or 'unknown'})")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    for name, value in branching.to_dict().items():
        if name == "nesting_distribution":
            value = ", ".join(f"{d}:{n}" for d, n in value.items()) or "-"
        elif isinstance(value, float):
            value = f"{value:.1f}"
        table.add_row(name.replace("_", " "), str(value))
    console.print(table)

    console.print(
        f"Complexity: [bold]{analysis.complexity_score:.1f}[/bold]/10  "
        f"Importance: [bold]{analysis.importance_score:.1f}[/bold]/10"
    )
    breakdown = branching_breakdown(branching)
    if breakdown:
        console.print(escape(breakdown))
