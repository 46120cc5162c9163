"""Logging for Branchmap.

Every module logs through ``get_logger(__name__)`` under the ``branchmap``
namespace. The CLI calls ``setup_logging`` once per command; library users
configure logging themselves.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_LOG_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Route log records to stderr through rich, and optionally to a file.

    Per-file read failures are WARNING, so they show by default; skipped
    entries and cache traffic are DEBUG and need ``verbose``.

    Args:
        verbose: DEBUG level, with source paths and locals in tracebacks
        quiet: ERROR level only
        log_file: Also append plain-text records to this file

    Returns:
        The ``branchmap`` logger
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    # stdout carries scan output, including JSON and YAML
    console = Console(stderr=True)

    handlers: list[logging.Handler] = [
        RichHandler(
            console=console,
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            markup=False,
            show_time=True,
            show_path=verbose,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(logging.Formatter(_LOG_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(file_handler)

    # Each command reconfigures; force drops handlers from an earlier call
    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    logger = logging.getLogger("branchmap")
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the ``branchmap`` namespace; ``None`` gives the root one."""
    if name is None:
        return logging.getLogger("branchmap")
    if not name.startswith("branchmap"):
        name = f"branchmap.{name}"
    return logging.getLogger(name)
