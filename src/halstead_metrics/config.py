"""Configuration loading and management for Halstead Metrics.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.halstead.toml)
    3. Project config (./halstead.toml)
    4. Explicit config file
    5. Environment variables (HALSTEAD_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(metric="volume", precision=3)
    >>> config.metric
    'volume'
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Mapping, Optional, get_type_hints

from .classifier import DEFAULT_POLICY, ClassificationPolicy
from .exceptions import ConfigurationError, InvalidConfigError
from .math.halstead import METRIC_NAMES

Verbosity = Literal["quiet", "normal", "verbose"]
OutputFormat = Literal["rich", "json", "csv"]

_VERBOSITIES = ("quiet", "normal", "verbose")
_OUTPUT_FORMATS = ("rich", "json", "csv")

GLOBAL_CONFIG_NAME = ".halstead.toml"
PROJECT_CONFIG_NAME = "halstead.toml"
ENV_PREFIX = "HALSTEAD_"


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for analysis and reporting.

    Attributes:
        Reporting:
            metric: Metric used to rank files in batch mode
            precision: Decimal places (None = 2 for reports, 4 for rankings)
            output_format: rich, json or csv

        Token source:
            lexer: Force a Pygments lexer alias instead of detecting by file name
            ppi_dump: Treat inputs as PPI::Dumper listings rather than source
            encoding: Source file encoding
            max_file_size_mb: Larger files are reported as unavailable

        Classification:
            roles: Category -> role overrides on top of the default policy,
                e.g. {"comment": "operator"}

        Execution:
            workers: Thread pool size for batches (None or 1 = sequential)
            git_max_commits: Revisions visited by the history command

        Output control:
            verbosity: Logging verbosity level
            log_file: Also append log records to this file
    """

    metric: str = "effort"
    precision: Optional[int] = None
    output_format: OutputFormat = "rich"

    lexer: Optional[str] = None
    ppi_dump: bool = False
    encoding: str = "utf-8"
    max_file_size_mb: float = 10.0

    roles: dict[str, str] = field(default_factory=dict)

    workers: Optional[int] = None
    git_max_commits: int = 100

    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.metric not in METRIC_NAMES:
            raise InvalidConfigError("metric", self.metric, "unknown Halstead metric")
        if self.precision is not None and not 0 <= self.precision <= 12:
            raise InvalidConfigError("precision", self.precision, "must be between 0 and 12")
        if self.output_format not in _OUTPUT_FORMATS:
            raise InvalidConfigError(
                "output_format", self.output_format, f"choose from {', '.join(_OUTPUT_FORMATS)}"
            )
        if self.max_file_size_mb <= 0:
            raise InvalidConfigError("max_file_size_mb", self.max_file_size_mb, "must be positive")
        if self.workers is not None and self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        if self.git_max_commits < 1:
            raise InvalidConfigError("git_max_commits", self.git_max_commits, "must be at least 1")
        if self.verbosity not in _VERBOSITIES:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"choose from {', '.join(_VERBOSITIES)}"
            )
        if not isinstance(self.roles, Mapping):
            raise InvalidConfigError("roles", self.roles, "must be a table of category = role")
        # Fail early on unknown categories or roles
        self.policy()

    def policy(self) -> ClassificationPolicy:
        """Classification policy with this config's role overrides applied."""
        if not self.roles:
            return DEFAULT_POLICY
        return DEFAULT_POLICY.override(self.roles)

    def report_precision(self) -> int:
        return 2 if self.precision is None else self.precision

    def ranking_precision(self) -> int:
        return 4 if self.precision is None else self.precision


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags); None values
            are ignored so unset CLI options do not mask file settings

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / GLOBAL_CONFIG_NAME
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(
                f"Config file not found: {config_file}", details={"path": str(config_file)}
            )
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

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
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from HALSTEAD_* environment variables.

    Supported environment variables:
        HALSTEAD_METRIC: str
        HALSTEAD_PRECISION: int
        HALSTEAD_OUTPUT_FORMAT: rich/json/csv
        HALSTEAD_LEXER: str
        HALSTEAD_PPI_DUMP: bool (true/false/1/0)
        HALSTEAD_ENCODING: str
        HALSTEAD_MAX_FILE_SIZE_MB: float
        HALSTEAD_WORKERS: int
        HALSTEAD_GIT_MAX_COMMITS: int
        HALSTEAD_VERBOSITY: quiet/normal/verbose
        HALSTEAD_LOG_FILE: str

    Returns:
        Dict of field_name -> parsed_value for any HALSTEAD_* vars found.
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
            if parsed is not None:
                result[field_name] = parsed
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

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

    # Mappings (roles) only come from TOML
    if origin is dict or type_hint is dict:
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
    """Load a TOML config file.

    The ``[roles]`` table is kept as a nested dict; every other key maps
    directly onto an AnalysisConfig field.

    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}", details={"path": str(path)})
