"""Configuration loading and validation."""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field

LOGGER = logging.getLogger(__name__)

GRAMMAR_PATH_ENV = "AVRO_GRAMMAR_PATH"


class GrammarConfig(BaseModel):
    """Grammar source configuration."""

    path: str | None = None


class RuntimeConfig(BaseModel):
    """Runtime configuration."""

    log_level: str = "INFO"


class AppConfig(BaseModel):
    """Top-level configuration."""

    grammar: GrammarConfig = Field(default_factory=GrammarConfig)
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)


def default_config_path() -> Path:
    """Return default user config path."""
    return Path("~/.config/avro-phonetic/config.toml").expanduser()


def _apply_environment(config: AppConfig) -> AppConfig:
    override = os.environ.get(GRAMMAR_PATH_ENV, "").strip()
    if override:
        LOGGER.debug("Using grammar path from %s: %s", GRAMMAR_PATH_ENV, override)
        config.grammar.path = override
    return config


def load_config(path: Path | None = None) -> AppConfig:
    """Load configuration from TOML, falling back to defaults when absent."""
    config_path = path or default_config_path()
    if not config_path.exists():
        LOGGER.debug("No config file at %s; using defaults", config_path)
        return _apply_environment(AppConfig())

    raw = tomllib.loads(config_path.read_text(encoding="utf-8"))
    return _apply_environment(AppConfig.model_validate(raw))
