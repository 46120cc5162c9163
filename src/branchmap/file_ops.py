"""
Safe file reading for Branchmap.

Reads are strict UTF-8 and size-limited. Every failure surfaces as
FileAccessError so callers can degrade one file without stopping a scan.
"""

from pathlib import Path
from typing import Optional

from .exceptions import FileAccessError


def read_source(
    filepath: Path,
    max_bytes: Optional[int] = None,
    encoding: str = "utf-8",
) -> str:
    """
    Read a whole text file.

    Args:
        filepath: File to read
        max_bytes: Refuse files larger than this (None = no limit)
        encoding: Text encoding; decoding errors are not replaced

    Returns:
        File contents as string

    Raises:
        FileAccessError: If the file is too large, unreadable or not valid text
    """
    try:
        if max_bytes is not None:
            size = filepath.stat().st_size
            if size > max_bytes:
                raise FileAccessError(filepath, f"File too large: {size} bytes (limit {max_bytes})")
        with open(filepath, encoding=encoding) as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise FileAccessError(filepath, f"Encoding error: {e}")
    except OSError as e:
        raise FileAccessError(filepath, f"OS error: {e}")
