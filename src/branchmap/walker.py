"""Directory walk producing FileEntry records."""

import os
from pathlib import Path
from typing import Iterator, List

from .config import DEFAULT_CONFIG, ScanConfig
from .logging_config import get_logger
from .models import FileEntry

logger = get_logger(__name__)


class FileWalker:
    """Walks a tree honouring ignore patterns, hidden names, depth and symlinks.

    Ignore patterns are plain substrings matched against the path relative
    to the root; an ignored directory is not descended into. Symlinks are
    skipped entirely unless ``follow_symlinks`` is set. Problems reading a
    directory or an entry's metadata are collected in ``errors``.
    """

    def __init__(self, config: ScanConfig = DEFAULT_CONFIG):
        self.config = config
        self.errors: List[str] = []

    def _skip(self, name: str, rel_path: str) -> bool:
        if not self.config.include_hidden and name.startswith("."):
            return True
        return any(pattern in rel_path for pattern in self.config.ignore_patterns)

    def _on_error(self, error: OSError) -> None:
        message = f"Failed to read directory {error.filename}: {error.strerror or error}"
        logger.warning(message)
        self.errors.append(message)

    def _entry(self, path: Path, rel_path: str, is_dir: bool) -> FileEntry:
        stat = path.stat() if self.config.follow_symlinks else path.lstat()
        return FileEntry(
            path=path,
            rel_path=rel_path,
            name=path.name,
            size=0 if is_dir else stat.st_size,
            modified=stat.st_mtime,
            is_dir=is_dir,
        )

    def walk(self, root: Path) -> Iterator[FileEntry]:
        """Yield every kept directory and file below ``root`` (not root itself)."""
        max_depth = self.config.max_depth
        follow = self.config.follow_symlinks

        for dirpath, dirnames, filenames in os.walk(root, followlinks=follow, onerror=self._on_error):
            current = Path(dirpath)
            rel_dir = current.relative_to(root)
            depth = len(rel_dir.parts)
            child_depth = depth + 1

            if max_depth is not None and child_depth > max_depth:
                dirnames[:] = []
                continue

            kept_dirs = []
            for name in sorted(dirnames):
                path = current / name
                rel = (rel_dir / name).as_posix()
                if self._skip(name, rel):
                    logger.debug(f"Skipping directory {rel}")
                    continue
                if path.is_symlink() and not follow:
                    logger.debug(f"Skipping symlinked directory {rel}")
                    continue
                try:
                    yield self._entry(path, rel, is_dir=True)
                except OSError as e:
                    message = f"Failed to read metadata for {rel}: {e}"
                    logger.warning(message)
                    self.errors.append(message)
                    continue
                if max_depth is None or child_depth < max_depth:
                    kept_dirs.append(name)
            dirnames[:] = kept_dirs

            for name in sorted(filenames):
                path = current / name
                rel = (rel_dir / name).as_posix()
                if self._skip(name, rel):
                    continue
                if path.is_symlink() and not follow:
                    logger.debug(f"Skipping symlink {rel}")
                    continue
                try:
                    yield self._entry(path, rel, is_dir=False)
                except OSError as e:
                    message = f"Failed to read metadata for {rel}: {e}"
                    logger.warning(message)
                    self.errors.append(message)
