"""Configuration loading and management for js-complexity.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.js-complexity.toml)
    3. Project config (./js-complexity.toml)
    4. Explicit config file
    5. Environment variables (JSCX_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(tolerant=True)
    >>> config.tolerant
    True
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]
OutputFormat = Literal["text", "json", "rich"]

ENV_PREFIX = "JSCX_"
CONFIG_FILE_NAME = "js-complexity.toml"

_OUTPUT_FORMATS = ("text", "json", "rich")
_VERBOSITIES = ("quiet", "normal", "verbose")


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for a single analysis run.

    Attributes:
        tolerant: Analyse trees that contain syntax errors instead of failing
        import_callee: Identifier whose calls count as module imports
        max_file_size_mb: Files larger than this are refused
        output_format: Report renderer ("text", "json" or "rich")
        fail_above: Exit non-zero when a function's cyclomatic complexity
            exceeds this value (None disables the gate)
        verbosity: Logging verbosity level
    """

    tolerant: bool = False
    import_callee: str = "require"
    max_file_size_mb: float = 10.0
    output_format: OutputFormat = "text"
    fail_above: Optional[int] = None
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.import_callee or not self.import_callee.isidentifier():
            raise InvalidConfigError(
                "import_callee", self.import_callee, "must be a plain identifier"
            )
        if self.max_file_size_mb <= 0:
            raise InvalidConfigError(
                "max_file_size_mb", self.max_file_size_mb, "must be positive"
            )
        if self.output_format not in _OUTPUT_FORMATS:
            raise InvalidConfigError(
                "output_format",
                self.output_format,
                f"expected one of {', '.join(_OUTPUT_FORMATS)}",
            )
        if self.fail_above is not None and self.fail_above < 1:
            raise InvalidConfigError("fail_above", self.fail_above, "must be at least 1")
        if self.verbosity not in _VERBOSITIES:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"expected one of {', '.join(_VERBOSITIES)}"
            )

    @property
    def max_file_size_bytes(self) -> int:
        """Get max file size in bytes."""
        return int(self.max_file_size_mb * 1024 * 1024)


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options do not mask file values.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is missing or unreadable
        InvalidConfigError: If a value fails validation
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / f".{CONFIG_FILE_NAME}"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / CONFIG_FILE_NAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from JSCX_* environment variables.

    Supported environment variables:
        JSCX_TOLERANT: bool (true/false/1/0)
        JSCX_IMPORT_CALLEE: str
        JSCX_MAX_FILE_SIZE_MB: float
        JSCX_OUTPUT_FORMAT: text/json/rich
        JSCX_FAIL_ABOVE: int
        JSCX_VERBOSITY: quiet/normal/verbose
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
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the type of the dataclass field."""
    origin = getattr(type_hint, "__origin__", None)

    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

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
        ConfigurationError: If the file cannot be read or parsed
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore[no-redef]

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")
