"""Settings for rbglue.

Configuration is explicit, validated, and environment-driven. Every knob
the generator uses (which interpreter to run, which helper script, which
template) lives here so build scripts can override it with ``RBGLUE_*``
environment variables, a ``.env`` file, or a YAML file.

Features:
    - **GlueSettings:** pydantic-settings model with ``RBGLUE_`` prefix
    - **.env file support:** Automatic loading via pydantic-settings
    - **YAML files:** ``GlueSettings.from_yaml()`` for checked-in config
    - **Overrides:** ``with_overrides()`` applies CLI flags, ignoring ``None``

Examples:
    >>> from rbglue.core.settings import GlueSettings
    >>> settings = GlueSettings(interpreter="/usr/local/bin/ruby")
    >>> settings.source_extension
    '.rb'

Tags:
    settings, configuration, pydantic, environment, rbglue

Doc-Types:
    - API Reference
    - Configuration Guide
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from rbglue.core.errors import ConfigError

PACKAGE_ROOT = Path(__file__).resolve().parent.parent
TEMPLATES_DIR = PACKAGE_ROOT / "templates"
HELPERS_DIR = PACKAGE_ROOT / "helpers"

DEFAULT_TEMPLATE = "rust_glue.rs.j2"
DEFAULT_HELPER = HELPERS_DIR / "get_constants_loaded.rb"


class GlueSettings(BaseSettings):
    """Settings for glue generation and logging.

    Fields
    ──────
    interpreter        : Executable used to run the helper script
    interpreter_flags  : Flags passed before the helper script path
    helper_script      : Script printing ``Name,kind`` lines for a package
    template_dir       : Directory searched for Jinja2 templates
    template_name      : Glue template file inside ``template_dir``
    source_extension   : Suffix stripped from source paths
    timeout_seconds    : Subprocess timeout; ``None`` waits indefinitely
    log_level          : structlog log level
    json_logs          : Force JSON (True) / console (False); None = auto
    """

    model_config = SettingsConfigDict(
        env_prefix="RBGLUE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Discovery ────────────────────────────────────────────────
    interpreter: str = "ruby"
    interpreter_flags: list[str] = Field(
        default_factory=lambda: ["--disable-did_you_mean", "--disable-gems"],
    )
    helper_script: Path = Field(default_factory=lambda: DEFAULT_HELPER)
    timeout_seconds: float | None = Field(default=None, gt=0)

    # ── Rendering ────────────────────────────────────────────────
    template_dir: Path = Field(default_factory=lambda: TEMPLATES_DIR)
    template_name: str = DEFAULT_TEMPLATE
    source_extension: str = ".rb"

    # ── Observability ────────────────────────────────────────────
    log_level: str = "WARNING"
    json_logs: bool | None = None

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> GlueSettings:
        """Load settings from a YAML file.

        Keys missing from the file fall back to environment variables and
        then to defaults.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            GlueSettings instance

        Raises:
            ConfigError: If the file is missing, not a mapping, or invalid
        """
        path = Path(yaml_path)
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(
                f"could not read settings file: {exc}", cause=exc
            ).with_context(path=str(path)) from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("settings file must contain a mapping").with_context(path=str(path))

        try:
            return cls(**data)
        except ValidationError as exc:
            raise ConfigError(f"invalid settings: {exc}", cause=exc).with_context(
                path=str(path)
            ) from exc

    def with_overrides(self, **overrides: Any) -> GlueSettings:
        """Return a copy with every non-``None`` override applied.

        Overrides are validated the same way as constructor arguments.
        """
        values = {key: value for key, value in overrides.items() if value is not None}
        if not values:
            return self
        merged = self.model_dump()
        merged.update(values)
        try:
            return type(self).model_validate(merged)
        except ValidationError as exc:
            raise ConfigError(f"invalid settings: {exc}", cause=exc) from exc

    @property
    def template_path(self) -> Path:
        """Full path of the glue template."""
        return self.template_dir / self.template_name


__all__ = [
    "GlueSettings",
    "TEMPLATES_DIR",
    "HELPERS_DIR",
    "DEFAULT_TEMPLATE",
    "DEFAULT_HELPER",
]
