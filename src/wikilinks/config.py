"""Configuration loading and validation for wikilinks."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from wikilinks.core.errors import ConfigError

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class WikilinksConfig(BaseModel):
    """Top-level wikilinks configuration."""

    link_extension: str = Field(default=".md", description="Extension appended to link targets")
    anchor_separator: str = Field(
        default="-", description="Replaces spaces and underscores in section anchors"
    )
    log_level: str = Field(default="WARNING", description="Logging level")

    @field_validator("link_extension")
    @classmethod
    def validate_link_extension(cls, v: str) -> str:
        """Validate the extension is empty or starts with a dot."""
        if v and not v.startswith("."):
            raise ValueError(f"Invalid link extension: {v!r}. Expected e.g. '.md'.")
        return v

    @field_validator("anchor_separator")
    @classmethod
    def validate_anchor_separator(cls, v: str) -> str:
        """Validate the separator is non-empty and free of whitespace."""
        if not v or any(c.isspace() for c in v):
            raise ValueError(f"Invalid anchor separator: {v!r}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and upper-case the logging level name."""
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v!r}. Expected one of {', '.join(_LOG_LEVELS)}.")
        return level


def load_config(
    path: str | None = None,
    overrides: dict[str, Any] | None = None,
) -> WikilinksConfig:
    """Build the configuration from defaults, an optional YAML file and overrides.

    No file is read unless ``path`` is given.

    Args:
        path: Path to a YAML config file.
        overrides: Settings that win over the file, typically the
            ``[preprocessor.wikilinks]`` table of the book.

    Returns:
        Validated WikilinksConfig.

    Raises:
        ConfigError: If the file is missing, unreadable, or the result is invalid.
    """
    data: dict[str, Any] = {}

    if path is not None:
        data.update(_read_yaml(Path(path).expanduser()))
        logger.debug("Loaded config file %s", path)

    if overrides:
        # book.toml tables use kebab-case keys
        data.update({str(k).replace("-", "_"): v for k, v in overrides.items()})
        logger.debug("Applied book preprocessor settings: %s", sorted(overrides))

    try:
        return WikilinksConfig(**data)
    except Exception as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def _read_yaml(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        raw = config_path.read_text()
    except OSError as e:
        raise ConfigError(f"Cannot read config file: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}") from e

    # An empty file is an empty mapping
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("Config file must contain a YAML mapping")
    return data
