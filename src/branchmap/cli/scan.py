"""Scan command: walk a tree and report every entry."""

from pathlib import Path
from typing import List, Optional

import click
import typer
from rich.markup import escape

from ..config import OUTPUT_FORMATS
from ..exceptions import BranchmapError
from ..formatters import format_size, get_formatter
from ..logging_config import setup_logging
from ..scanner import DirectoryScanner
from . import app
from ._common import console, err_console, resolve_config


def _flag(value: bool) -> Optional[bool]:
    """An unset flag must not override config files or the environment."""
    return True if value else None


@app.command()
def scan(
    path: Path = typer.Argument(
        Path("."),
        help="Directory to scan (default: current directory)",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "-f",
        "--format",
        help="Output format",
        click_type=click.Choice(list(OUTPUT_FORMATS), case_sensitive=False),
    ),
    json_output: bool = typer.Option(False, "--json", help="Output JSON (same as --format json)"),
    yaml_output: bool = typer.Option(False, "--yaml", help="Output YAML (same as --format yaml)"),
    enhanced: bool = typer.Option(
        False,
        "-e",
        "--enhanced",
        help="Read files and compute branching profiles and scores",
    ),
    max_depth: Optional[int] = typer.Option(None, "--max-depth", min=0, help="Maximum directory depth"),
    ignore: Optional[List[str]] = typer.Option(
        None,
        "-i",
        "--ignore",
        help="Path substring to ignore (repeatable; replaces the defaults)",
    ),
    include_hidden: bool = typer.Option(
        False, "--include-hidden", help="Include names starting with '.'"
    ),
    follow_symlinks: bool = typer.Option(
        False, "--follow-symlinks", help="Follow symbolic links"
    ),
    workers: Optional[int] = typer.Option(
        None,
        "-w",
        "--workers",
        help="Parallel analysis workers (default: auto-detect)",
        min=1,
        max=32,
    ),
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
    cache: bool = typer.Option(False, "--cache", help="Reuse per-file results between runs"),
    no_cache: bool = typer.Option(False, "--no-cache", help="Disable the per-file cache"),
    profile_timing: bool = typer.Option(
        False, "--profile", help="Print scan timing and throughput"
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        dir_okay=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
):
    """
    Scan a directory and report files, tags and branching profiles.

    [bold cyan]Examples:[/bold cyan]

      branchmap scan

      branchmap scan src --enhanced --format detailed

      branchmap scan . --enhanced --json --ignore .git --ignore dist
    """
    logger = setup_logging(verbose=verbose, quiet=quiet)

    if json_output:
        output_format = "json"
    elif yaml_output:
        output_format = "yaml"

    try:
        settings = resolve_config(
            config,
            output_format=output_format.lower() if output_format else None,
            enhanced_analysis=_flag(enhanced),
            max_depth=max_depth,
            ignore_patterns=list(ignore) if ignore else None,
            include_hidden=_flag(include_hidden),
            follow_symlinks=_flag(follow_symlinks),
            workers=workers,
            track_block_comments=_flag(track_block_comments),
            indent_nesting=_flag(indent_nesting),
            cache_enabled=False if no_cache else _flag(cache),
            verbose=verbose,
            quiet=quiet,
        )

        scanner = DirectoryScanner(settings)
        try:
            result = scanner.scan(path)
        finally:
            scanner.close()

    except BranchmapError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    formatter = get_formatter(settings.output_format)
    machine_readable = settings.output_format in ("json", "yaml")

    if not machine_readable:
        stats = result.stats
        console.print(
            f"[bold]Scanned[/bold] {stats.total_files} files, {stats.total_dirs} directories "
            f"({format_size(stats.total_size)}) in [cyan]{escape(result.root_path)}[/cyan]"
        )

    formatter.render(result)

    if profile_timing:
        stats = result.stats
        err_console.print(
            f"[dim]Scan took {stats.scan_duration_ms:.1f}ms "
            f"({stats.files_per_second:.0f} files/sec)[/dim]"
        )

    if result.errors and not machine_readable:
        err_console.print(f"[yellow]{len(result.errors)} error(s):[/yellow]")
        for error in result.errors:
            err_console.print(f"  {escape(error)}")
