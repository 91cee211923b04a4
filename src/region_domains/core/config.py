"""Configuration management.

Loads from an optional TOML file plus environment variables.
Uses pydantic-settings for validation and env var overriding.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings

from .enums import LogFormat, TextColor
from .errors import ConfigError


# ---------------------------------------------------------------------------
# Sub-configs
# ---------------------------------------------------------------------------

class ObservabilityConfig(BaseModel):
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.CONSOLE


class FormattingConfig(BaseModel):
    """Colors used when rendering domains as rich text."""

    player_color: TextColor = TextColor.YELLOW
    group_color: TextColor = TextColor.GOLD
    muted_color: TextColor = TextColor.GRAY  # labels, prefixes, summaries
    detail_color: TextColor = TextColor.WHITE  # uuids inside hover text


# ---------------------------------------------------------------------------
# Top-level settings
# ---------------------------------------------------------------------------

class Settings(BaseSettings):
    """Top-level settings.

    Loaded from TOML config files, overridden by environment variables.
    """

    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
    formatting: FormattingConfig = Field(default_factory=FormattingConfig)
    store_path: str = "data/domains.jsonl"

    model_config = {"env_prefix": "REGION_DOMAINS_", "env_nested_delimiter": "__"}


def load_settings(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Load settings from TOML file + env vars.

    Args:
        config_path: Path to TOML config file (optional).
        overrides: Dict of overrides to apply on top.

    Raises:
        ConfigError: If the file is not valid TOML or a value fails validation.
    """
    data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            import tomli

            try:
                with open(path, "rb") as f:
                    data = tomli.load(f)
            except tomli.TOMLDecodeError as exc:
                raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    if overrides:
        data.update(overrides)

    try:
        return Settings(**data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
