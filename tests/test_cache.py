"""Tests for cache.py - the per-file analysis cache."""

from pathlib import Path

import pytest

from branchmap.cache import AnalysisCache, compute_config_hash
from branchmap.models import FileAnalysis, FileEntry
from branchmap.scanning.profile import BranchingProfile


@pytest.fixture
def cache(tmp_path):
    cache = AnalysisCache(cache_dir=str(tmp_path / "cache"), ttl_hours=1)
    yield cache
    cache.close()


def _entry(modified=100.0, size=10):
    return FileEntry(path=Path("/repo/a.rs"), rel_path="a.rs", name="a.rs", size=size, modified=modified)


def _analysis():
    return FileAnalysis(
        line_count=3,
        summary="Rust source code",
        purpose="Source code",
        branching=BranchingProfile(conditional_count=1, total_branches=1, pure_branches=1),
    )


class TestAnalysisCache:
    def test_roundtrip(self, cache):
        cache.set_analysis(_entry(), "h1", _analysis())
        assert cache.get_analysis(_entry(), "h1") == _analysis()

    def test_miss_on_change(self, cache):
        """Any change to mtime, size or settings is a miss."""
        cache.set_analysis(_entry(), "h1", _analysis())
        assert cache.get_analysis(_entry(modified=101.0), "h1") is None
        assert cache.get_analysis(_entry(size=11), "h1") is None
        assert cache.get_analysis(_entry(), "h2") is None

    def test_file_key_stable(self):
        key = AnalysisCache.file_key(Path("/repo/a.rs"), 1.0, 2, "abc")
        assert key == AnalysisCache.file_key(Path("/repo/a.rs"), 1.0, 2, "abc")
        assert len(key) == 64

    def test_non_analysis_values_ignored(self, cache):
        key = AnalysisCache.file_key(Path("/repo/a.rs"), 100.0, 10, "h1")
        cache.set(key, "junk")
        assert cache.get_analysis(_entry(), "h1") is None

    def test_clear_and_stats(self, cache):
        cache.set("k", 1)
        stats = cache.stats()
        assert stats["enabled"] is True
        assert stats["size"] == 1
        cache.clear()
        assert cache.stats()["size"] == 0

    def test_disabled(self, tmp_path):
        cache = AnalysisCache(cache_dir=str(tmp_path / "off"), enabled=False)
        cache.set("k", 1)
        assert cache.get("k") is None
        assert cache.stats() == {"enabled": False}
        assert not (tmp_path / "off").exists()
        cache.close()


class TestConfigHash:
    def test_key_order_irrelevant(self):
        assert compute_config_hash({"a": 1, "b": 2}) == compute_config_hash({"b": 2, "a": 1})

    def test_short_and_distinct(self):
        h = compute_config_hash({"a": 1})
        assert len(h) == 16
        assert h != compute_config_hash({"a": 2})
