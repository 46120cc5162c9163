"""Tests for walker.py."""

import os

import pytest

from branchmap.config import ScanConfig
from branchmap.walker import FileWalker


@pytest.fixture
def tree(tmp_path, write_file):
    write_file(tmp_path, "README.md", "# Demo")
    write_file(tmp_path, "src/main.rs", "fn main() {}")
    write_file(tmp_path, "src/core/engine.rs", "pub fn run() {}")
    write_file(tmp_path, ".hidden/secret.txt", "x")
    write_file(tmp_path, ".env", "KEY=1")
    write_file(tmp_path, "node_modules/pkg/index.js", "module.exports = 1;")
    return tmp_path


def _paths(root, **config):
    return [e.rel_path for e in FileWalker(ScanConfig(**config)).walk(root)]


class TestFileWalker:
    def test_default_walk(self, tree):
        assert _paths(tree) == ["src", "README.md", "src/core", "src/main.rs", "src/core/engine.rs"]

    def test_entries(self, tree):
        entries = {e.rel_path: e for e in FileWalker().walk(tree)}
        assert entries["src"].is_dir
        assert entries["src"].size == 0
        assert entries["README.md"].size == len("# Demo")
        assert entries["src/main.rs"].name == "main.rs"
        assert entries["src/main.rs"].extension == "rs"

    def test_include_hidden(self, tree):
        paths = _paths(tree, include_hidden=True)
        assert ".env" in paths
        assert ".hidden/secret.txt" in paths

    def test_max_depth(self, tree):
        assert _paths(tree, max_depth=1) == ["src", "README.md"]
        assert _paths(tree, max_depth=2) == ["src", "README.md", "src/core", "src/main.rs"]

    def test_max_depth_zero(self, tree):
        assert _paths(tree, max_depth=0) == []

    def test_ignore_patterns(self, tree):
        paths = _paths(tree, ignore_patterns=["core"])
        assert "src/core" not in paths
        assert "src/core/engine.rs" not in paths
        assert "node_modules/pkg/index.js" in paths

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
    def test_symlinks_skipped(self, tree):
        os.symlink(tree / "src", tree / "linked")
        os.symlink(tree / "README.md", tree / "readme-link.md")

        paths = _paths(tree)
        assert "linked" not in paths
        assert "readme-link.md" not in paths

        followed = _paths(tree, follow_symlinks=True)
        assert "linked/main.rs" in followed
        assert "readme-link.md" in followed
