"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import AnalysisConfig, load_config

console = Console()
err_console = Console(stderr=True)


def resolve_config(
    config: Optional[Path] = None,
    fmt: Optional[str] = None,
    tolerant: Optional[bool] = None,
    fail_above: Optional[int] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> AnalysisConfig:
    """Build configuration from CLI options."""
    return load_config(
        config_file=config,
        output_format=fmt,
        tolerant=tolerant,
        fail_above=fail_above,
        verbose=verbose,
        quiet=quiet,
    )
