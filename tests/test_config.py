"""Tests for config.py - ScanConfig validation and load_config merging."""

import pytest

from branchmap.config import DEFAULT_IGNORE_PATTERNS, ScanConfig, load_config
from branchmap.exceptions import ConfigurationError, InvalidConfigError


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run from an empty directory so no project config is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestScanConfig:
    def test_defaults(self):
        """Enhanced analysis and the cache are opt-in."""
        config = ScanConfig()
        assert config.ignore_patterns == DEFAULT_IGNORE_PATTERNS
        assert config.enhanced_analysis is False
        assert config.cache_enabled is False
        assert config.output_format == "basic"
        assert config.max_depth is None

    def test_ignore_patterns_not_shared(self):
        """Each config gets its own default list."""
        assert ScanConfig().ignore_patterns is not ScanConfig().ignore_patterns

    @pytest.mark.parametrize(
        "field,value",
        [
            ("max_depth", -1),
            ("workers", 0),
            ("max_file_size_mb", 0),
            ("cache_ttl_hours", -5),
            ("output_format", "xml"),
            ("verbosity", "loud"),
        ],
    )
    def test_validation(self, field, value):
        with pytest.raises(InvalidConfigError) as exc_info:
            ScanConfig(**{field: value})
        assert exc_info.value.key == field

    def test_max_file_size_bytes(self):
        assert ScanConfig(max_file_size_mb=1.0).max_file_size_bytes == 1024 * 1024

    def test_fingerprint_ignores_output_settings(self):
        """Only analysis settings feed the cache fingerprint."""
        a = ScanConfig(extra_impure_tokens=["b", "a"], output_format="json")
        b = ScanConfig(extra_impure_tokens=["a", "b"], output_format="basic")
        assert a.analysis_fingerprint() == b.analysis_fingerprint()
        assert a.analysis_fingerprint() != ScanConfig(track_block_comments=True).analysis_fingerprint()
        assert a.analysis_fingerprint() != ScanConfig(indent_nesting=True).analysis_fingerprint()


class TestLoadConfig:
    def test_no_sources(self, workdir):
        assert load_config() == ScanConfig()

    def test_overrides(self, workdir):
        config = load_config(max_depth=3, enhanced_analysis=True)
        assert config.max_depth == 3
        assert config.enhanced_analysis is True

    def test_none_overrides_ignored(self, workdir, monkeypatch):
        """Unset CLI options never mask file or environment values."""
        monkeypatch.setenv("BRANCHMAP_MAX_DEPTH", "4")
        assert load_config(max_depth=None).max_depth == 4

    def test_verbosity_flags(self, workdir):
        assert load_config(verbose=True).verbosity == "verbose"
        assert load_config(quiet=True).verbosity == "quiet"
        assert load_config(verbose=False, quiet=False).verbosity == "normal"

    def test_environment(self, workdir, monkeypatch):
        monkeypatch.setenv("BRANCHMAP_ENHANCED_ANALYSIS", "yes")
        monkeypatch.setenv("BRANCHMAP_WORKERS", "3")
        monkeypatch.setenv("BRANCHMAP_MAX_FILE_SIZE_MB", "2.5")
        monkeypatch.setenv("BRANCHMAP_OUTPUT_FORMAT", "json")
        monkeypatch.setenv("BRANCHMAP_INDENT_NESTING", "true")
        config = load_config()
        assert config.enhanced_analysis is True
        assert config.workers == 3
        assert config.max_file_size_mb == 2.5
        assert config.output_format == "json"
        assert config.indent_nesting is True

    def test_bad_environment_value(self, workdir, monkeypatch):
        monkeypatch.setenv("BRANCHMAP_INCLUDE_HIDDEN", "maybe")
        with pytest.raises(ConfigurationError, match="BRANCHMAP_INCLUDE_HIDDEN"):
            load_config()

    def test_project_config(self, workdir):
        (workdir / "branchmap.toml").write_text(
            '[branchmap]\nmax_depth = 2\nignore_patterns = ["dist"]\n'
        )
        config = load_config()
        assert config.max_depth == 2
        assert config.ignore_patterns == ["dist"]

    def test_global_config(self, workdir, monkeypatch, tmp_path_factory):
        home = tmp_path_factory.mktemp("user")
        (home / ".branchmap.toml").write_text("include_hidden = true\n")
        monkeypatch.setenv("HOME", str(home))
        assert load_config().include_hidden is True

    def test_priority(self, workdir, monkeypatch):
        """Explicit file beats project file; environment beats both; overrides win."""
        (workdir / "branchmap.toml").write_text("max_depth = 1\nworkers = 1\ncache_ttl_hours = 1\n")
        explicit = workdir / "custom.toml"
        explicit.write_text("max_depth = 2\nworkers = 2\n")
        monkeypatch.setenv("BRANCHMAP_WORKERS", "5")

        config = load_config(config_file=explicit, cache_ttl_hours=9)
        assert config.max_depth == 2
        assert config.workers == 5
        assert config.cache_ttl_hours == 9

    def test_missing_explicit_file(self, workdir):
        with pytest.raises(ConfigurationError, match="Config file not found"):
            load_config(config_file=workdir / "missing.toml")

    def test_malformed_file(self, workdir):
        bad = workdir / "bad.toml"
        bad.write_text("max_depth = = 3\n")
        with pytest.raises(ConfigurationError, match="Invalid config file"):
            load_config(config_file=bad)

    def test_unknown_key(self, workdir):
        bad = workdir / "bad.toml"
        bad.write_text("colour = true\n")
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            load_config(config_file=bad)

    def test_invalid_value_from_file(self, workdir):
        bad = workdir / "bad.toml"
        bad.write_text("max_depth = -3\n")
        with pytest.raises(InvalidConfigError):
            load_config(config_file=bad)
