"""
CLI utility helpers — consoles, error reporting and settings loading.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, NoReturn

import typer
from rich.console import Console

from rbglue.core.errors import GlueError
from rbglue.core.logging import configure_logging
from rbglue.core.settings import GlueSettings

console = Console()
err_console = Console(stderr=True)


def fail(error: GlueError) -> NoReturn:
    """Print a ``GlueError`` to stderr and exit with status 1."""
    err_console.print(
        f"[bold red]Error[/bold red] ({error.category.value}): {error.message}",
        highlight=False,
        soft_wrap=True,
    )
    raise typer.Exit(code=1)


def load_settings(config: Path | None = None, **overrides: Any) -> GlueSettings:
    """Build settings from an optional YAML file plus CLI overrides."""
    settings = GlueSettings.from_yaml(config) if config is not None else GlueSettings()
    return settings.with_overrides(**overrides)


def setup_logging(settings: GlueSettings, *, verbose: bool = False, json_logs: bool | None = None) -> None:
    """Configure logging from settings; ``--verbose`` forces DEBUG."""
    configure_logging(
        level="DEBUG" if verbose else settings.log_level,
        json_format=json_logs if json_logs is not None else settings.json_logs,
    )
