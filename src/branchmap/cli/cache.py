"""Cache management commands."""

from pathlib import Path
from typing import Optional

import typer

from . import app
from ._common import console, resolve_config

CONFIG_OPTION = typer.Option(
    None, "-c", "--config", help="Configuration file (TOML)", dir_okay=False
)


def _open_cache(config: Optional[Path]):
    from ..cache import AnalysisCache

    settings = resolve_config(config)
    cache = AnalysisCache(
        cache_dir=settings.cache_dir,
        ttl_hours=settings.cache_ttl_hours,
        enabled=True,
    )
    return settings, cache


@app.command()
def cache_info(config: Optional[Path] = CONFIG_OPTION):
    """Show cache information and statistics."""
    settings, cache = _open_cache(config)
    try:
        stats = cache.stats()
    finally:
        cache.close()

    console.print("[bold cyan]Branchmap Cache Info[/bold cyan]")
    console.print()
    status = "[green]Enabled[/green]" if settings.cache_enabled else "[red]Disabled[/red] (use --cache to enable)"
    console.print(f"Status: {status}")
    console.print(f"Directory: [blue]{stats.get('directory', settings.cache_dir)}[/blue]")
    console.print(f"Entries: [yellow]{stats.get('size', 0)}[/yellow]")
    console.print(f"Size: [yellow]{stats.get('volume', 0)} bytes[/yellow]")


@app.command()
def cache_clear(config: Optional[Path] = CONFIG_OPTION):
    """Clear the analysis cache."""
    settings = resolve_config(config)
    if not Path(settings.cache_dir).exists():
        console.print("[yellow]No cache to clear[/yellow]")
        raise typer.Exit(0)

    _, cache = _open_cache(config)
    try:
        cache.clear()
    finally:
        cache.close()
    console.print("[green]Cache cleared successfully[/green]")
