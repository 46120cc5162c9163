"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import ScanConfig, load_config

console = Console()
err_console = Console(stderr=True)


def resolve_config(config: Optional[Path] = None, **overrides) -> ScanConfig:
    """Build a ScanConfig from a config file and CLI options.

    Options left at ``None`` do not override file or environment settings.
    """
    return load_config(config_file=config, **overrides)
