"""
Settings for the documentation generator.

Environment-driven (``DOCGEN_`` prefix, ``.env`` support) with an optional
YAML file layered underneath: explicit keyword arguments win over
environment variables, which win over defaults. ``from_yaml`` passes file
values as keyword arguments, so a file value beats the environment.

Examples:
    >>> settings = DocGenSettings(strict=True)
    >>> settings.comment_marker
    '///'

Tags:
    settings, configuration, pydantic, docgen
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from dotnet_docgen.errors import ConfigError
from dotnet_docgen.translation import TargetLanguage


class DocGenSettings(BaseSettings):
    """Settings for rendering doc comments.

    Fields
    ──────
    comment_marker   : Prefix of every emitted comment line
    target_language  : Dialect code samples are translated into
    strict           : Override the assembly's strict-mode flag (None = use assembly)
    tablet_path      : Tablet of pre-translated samples (None = pass samples through)
    log_level        : Structlog log level
    json_logs        : Render logs as JSON instead of console lines
    """

    model_config = SettingsConfigDict(
        env_prefix="DOCGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Rendering ────────────────────────────────────────────────
    comment_marker: str = "///"
    target_language: TargetLanguage = TargetLanguage.CSHARP

    # ── Samples ──────────────────────────────────────────────────
    strict: bool | None = None
    tablet_path: Path | None = Field(
        default=None,
        description="YAML or JSON tablet of pre-translated samples",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: str = "WARNING"
    json_logs: bool = False

    @classmethod
    def from_env(cls, **overrides: Any) -> "DocGenSettings":
        """Load settings from the environment and ``.env``.

        Raises:
            ConfigError: A ``DOCGEN_*`` variable or override has an invalid value
        """
        try:
            return cls(**{k: v for k, v in overrides.items() if v is not None})
        except ValidationError as e:
            raise ConfigError(f"Invalid settings: {e}", cause=e) from e

    @classmethod
    def from_yaml(cls, yaml_path: Path | str, **overrides: Any) -> "DocGenSettings":
        """Load settings from a YAML file.

        Args:
            yaml_path: Path to YAML file
            **overrides: Values that take precedence over the file

        Raises:
            ConfigError: File unreadable, not a mapping, or invalid values
        """
        path = Path(yaml_path)
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read settings file {path}: {e}", path=str(path), cause=e) from e

        if not isinstance(data, dict):
            raise ConfigError(f"Settings file {path} must contain a mapping", path=str(path))

        data.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid settings in {path}: {e}", path=str(path), cause=e) from e
