"""Configuration loading and management for Branchmap.

Configuration sources are merged in priority order:
    1. Defaults (defined in ScanConfig)
    2. Global config (~/.branchmap.toml)
    3. Project config (./branchmap.toml)
    4. Explicit config file
    5. Environment variables (BRANCHMAP_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(verbose=True, max_depth=3)
    >>> config.verbosity
    'verbose'
    >>> config.max_depth
    3
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]
OutputFormat = Literal["basic", "compact", "detailed", "hierarchical", "json", "yaml", "rich"]

OUTPUT_FORMATS = ("basic", "compact", "detailed", "hierarchical", "json", "yaml", "rich")
DEFAULT_IGNORE_PATTERNS = [".git", "node_modules", "target", ".DS_Store"]


@dataclass(frozen=True)
class ScanConfig:
    """Configuration for a scan.

    Attributes:
        Walking:
            ignore_patterns: Path substrings that exclude an entry (and its subtree)
            include_hidden: Include entries whose name starts with "."
            follow_symlinks: Descend into symlinked directories
            max_depth: Maximum directory depth below the root (None = unlimited)

        Analysis:
            enhanced_analysis: Read files and compute branching profiles and scores
            track_block_comments: Carry /* ... */ state across lines
            indent_nesting: Nest Python-like files by block indentation, not braces
            extra_impure_tokens: Additional substrings that mark a branch non-pure
            max_file_size_mb: Larger files are reported without a profile
            workers: Parallel analysis workers (None = auto-detect)

        Caching:
            cache_enabled: Persist per-file reports between runs
            cache_dir: Directory for cache storage
            cache_ttl_hours: Cache time-to-live in hours

        Output:
            output_format: Formatter name
            verbosity: Logging verbosity level
    """

    # Walking
    ignore_patterns: list[str] = field(default_factory=lambda: list(DEFAULT_IGNORE_PATTERNS))
    include_hidden: bool = False
    follow_symlinks: bool = False
    max_depth: Optional[int] = None

    # Analysis
    enhanced_analysis: bool = False
    track_block_comments: bool = False
    indent_nesting: bool = False
    extra_impure_tokens: list[str] = field(default_factory=list)
    max_file_size_mb: float = 10.0
    workers: Optional[int] = None

    # Caching
    cache_enabled: bool = False
    cache_dir: str = ".branchmap-cache"
    cache_ttl_hours: int = 24

    # Output
    output_format: OutputFormat = "basic"
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.max_depth is not None and self.max_depth < 0:
            raise InvalidConfigError("max_depth", self.max_depth, "must be non-negative")
        if self.workers is not None and self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        if self.max_file_size_mb <= 0:
            raise InvalidConfigError("max_file_size_mb", self.max_file_size_mb, "must be positive")
        if self.cache_ttl_hours < 0:
            raise InvalidConfigError("cache_ttl_hours", self.cache_ttl_hours, "must be non-negative")
        if self.output_format not in OUTPUT_FORMATS:
            raise InvalidConfigError(
                "output_format",
                self.output_format,
                f"choose from {', '.join(OUTPUT_FORMATS)}",
            )
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError("verbosity", self.verbosity, "choose from quiet, normal, verbose")

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)

    def analysis_fingerprint(self) -> dict[str, Any]:
        """Settings that change a per-file report; used for cache invalidation."""
        return {
            "track_block_comments": self.track_block_comments,
            "indent_nesting": self.indent_nesting,
            "extra_impure_tokens": sorted(self.extra_impure_tokens),
            "max_file_size_mb": self.max_file_size_mb,
        }


def load_config(config_file: Optional[Path] = None, **overrides) -> ScanConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options never mask file settings.

    Returns:
        Validated ScanConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / ".branchmap.toml"
    if global_config.exists():
        merged.update(_read_config_file(global_config, "global config"))

    project_config = Path.cwd() / "branchmap.toml"
    if project_config.exists():
        merged.update(_read_config_file(project_config, "project config"))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_read_config_file(config_file, "config file"))

    merged.update(_load_env_vars())

    # Convert verbosity boolean flags to string
    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return ScanConfig(**merged)
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration: {e}")


def _read_config_file(path: Path, label: str) -> dict:
    try:
        data = _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid {label} '{path}': {e}")
    # Allow settings either at top level or under a [branchmap] table
    section = data.get("branchmap")
    if isinstance(section, dict):
        return section
    return data


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from BRANCHMAP_* environment variables.

    Supported environment variables (list-valued fields are not supported):
        BRANCHMAP_INCLUDE_HIDDEN: bool (true/false/1/0)
        BRANCHMAP_FOLLOW_SYMLINKS: bool
        BRANCHMAP_MAX_DEPTH: int
        BRANCHMAP_ENHANCED_ANALYSIS: bool
        BRANCHMAP_TRACK_BLOCK_COMMENTS: bool
        BRANCHMAP_INDENT_NESTING: bool
        BRANCHMAP_MAX_FILE_SIZE_MB: float
        BRANCHMAP_WORKERS: int
        BRANCHMAP_CACHE_ENABLED: bool
        BRANCHMAP_CACHE_DIR: str
        BRANCHMAP_CACHE_TTL_HOURS: int
        BRANCHMAP_OUTPUT_FORMAT: basic/compact/detailed/hierarchical/json/yaml/rich
        BRANCHMAP_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any BRANCHMAP_* vars found.
    """
    type_hints = get_type_hints(ScanConfig)

    result: dict[str, Any] = {}

    for field_name in ScanConfig.__dataclass_fields__:
        env_key = f"BRANCHMAP_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise ConfigurationError(f"Invalid {env_key}: {e}")
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Returns:
        Parsed value or None if the type is not settable from the environment

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

    if origin is list or type_hint is list:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If tomllib/tomli not available
    """
    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)


DEFAULT_CONFIG = ScanConfig()
