"""
Per-file report cache for Branchmap.

Uses diskcache for SQLite-based persistent caching. Entries are keyed on
the file's path, modification time and size plus a hash of the settings
that affect analysis, so any edit or setting change is a cache miss.
"""

import hashlib
import json
from pathlib import Path
from typing import Any, Optional

from diskcache import Cache

from .logging_config import get_logger
from .models import FileAnalysis, FileEntry

logger = get_logger(__name__)


class AnalysisCache:
    """
    SQLite-based cache of FileAnalysis results.

    Thread-safe: diskcache serialises access, so scan workers share one
    instance.
    """

    def __init__(
        self,
        cache_dir: str = ".branchmap-cache",
        ttl_hours: int = 24,
        enabled: bool = True
    ):
        """
        Initialize cache.

        Args:
            cache_dir: Directory for cache storage
            ttl_hours: Time-to-live in hours
            enabled: Whether caching is enabled
        """
        self.enabled = enabled
        self.ttl_seconds = ttl_hours * 3600

        if self.enabled:
            self.cache = Cache(cache_dir)
            logger.debug(f"Cache initialized at {cache_dir} with TTL={ttl_hours}h")
        else:
            self.cache = None
            logger.debug("Cache disabled")

    @staticmethod
    def file_key(path: Path, modified: float, size: int, config_hash: str) -> str:
        key_data = f"{path}:{modified}:{size}:{config_hash}"
        return hashlib.sha256(key_data.encode()).hexdigest()

    def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None if missing, expired or disabled."""
        if not self.enabled or self.cache is None:
            return None

        try:
            value = self.cache.get(key)
            if value is not None:
                logger.debug(f"Cache hit: {key[:16]}...")
            return value
        except Exception as e:
            logger.warning(f"Cache get failed: {e}")
            return None

    def set(self, key: str, value: Any) -> None:
        if not self.enabled or self.cache is None:
            return

        try:
            self.cache.set(key, value, expire=self.ttl_seconds)
            logger.debug(f"Cache set: {key[:16]}...")
        except Exception as e:
            logger.warning(f"Cache set failed: {e}")

    def get_analysis(self, entry: FileEntry, config_hash: str) -> Optional[FileAnalysis]:
        key = self.file_key(entry.path, entry.modified, entry.size, config_hash)
        value = self.get(key)
        return value if isinstance(value, FileAnalysis) else None

    def set_analysis(self, entry: FileEntry, config_hash: str, analysis: FileAnalysis) -> None:
        self.set(self.file_key(entry.path, entry.modified, entry.size, config_hash), analysis)

    def clear(self) -> None:
        """Clear all cache entries."""
        if not self.enabled or self.cache is None:
            return

        try:
            self.cache.clear()
            logger.info("Cache cleared")
        except Exception as e:
            logger.warning(f"Cache clear failed: {e}")

    def stats(self) -> dict:
        """
        Get cache statistics.

        Returns:
            Dictionary with cache stats
        """
        if not self.enabled or self.cache is None:
            return {"enabled": False}

        try:
            return {
                "enabled": True,
                "size": len(self.cache),
                "directory": self.cache.directory,
                "volume": self.cache.volume()
            }
        except Exception as e:
            logger.warning(f"Cache stats failed: {e}")
            return {"enabled": True, "error": str(e)}

    def close(self) -> None:
        if self.cache is not None:
            self.cache.close()


def compute_config_hash(config: dict) -> str:
    """Short SHA256 of a settings dict; keys are sorted for stability."""
    config_str = json.dumps(config, sort_keys=True)
    return hashlib.sha256(config_str.encode()).hexdigest()[:16]
