"""
Configuration for Kece Market.

Settings are resolved with the precedence environment → settings file →
defaults. A ``.env`` file in the working directory is loaded into the
environment first.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from kece import __version__

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT_URL = "https://marketfake.fly.dev/product"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Environment variable -> AppConfig field
ENV_MAP: Dict[str, str] = {
    "KECE_ENDPOINT_URL": "endpoint_url",
    "KECE_REQUEST_TIMEOUT": "request_timeout",
    "KECE_APP_VERSION": "app_version",
    "KECE_SHOW_VERSION": "show_version",
    "LOG_LEVEL": "log_level",
    "KECE_WEB_MODE": "web_mode",
    "KECE_PORT": "port",
    "KECE_LOG_DIR": "log_dir",
}


class ConfigError(ValueError):
    """Raised when the merged configuration does not validate."""


class AppConfig(BaseModel):
    """Application configuration"""
    model_config = ConfigDict(extra='forbid', frozen=True)

    # Network
    endpoint_url: str = Field(default=DEFAULT_ENDPOINT_URL, description="Product endpoint")
    request_timeout: float = Field(default=10.0, ge=0.1, le=120.0, description="Request timeout (seconds)")

    # Screen
    app_version: str = Field(default=__version__, description="Version shown on the screen")
    show_version: bool = Field(default=False, description="Show the version label")

    # Runtime
    log_level: str = Field(default="INFO", description="File log level")
    log_dir: str = Field(default="data/logs", description="Directory for kece.log")
    web_mode: bool = Field(default=False, description="Run as a web app instead of desktop")
    port: int = Field(default=8550, ge=1024, le=65535, description="Web server port")

    @field_validator("endpoint_url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("endpoint_url must be an http(s) URL")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


class ConfigManager:
    """Merges the settings file and the environment into an ``AppConfig``."""

    def __init__(self, settings_path: Optional[Union[str, Path]] = None, load_env_file: bool = True):
        self.settings_path = Path(settings_path) if settings_path else None
        self.load_env_file = load_env_file

    def _load_yaml_file(self, file_path: Optional[Path]) -> Dict[str, Any]:
        """Load a YAML settings file, returning {} when missing or unreadable"""
        if file_path is None or not file_path.exists():
            return {}

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load {file_path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring {file_path}: expected a mapping, got {type(data).__name__}")
            return {}
        return data

    def _get_env_overrides(self) -> Dict[str, Any]:
        """Extract overrides from environment variables"""
        overrides: Dict[str, Any] = {}
        for env_key, config_key in ENV_MAP.items():
            value = os.getenv(env_key)
            if value is not None and value.strip():
                overrides[config_key] = value.strip()
        return overrides

    def get_config(self) -> AppConfig:
        """Get merged configuration with validation"""
        if self.load_env_file:
            load_dotenv(dotenv_path=Path.cwd() / ".env")

        settings_path = self.settings_path
        if settings_path is None and os.getenv("KECE_SETTINGS"):
            settings_path = Path(os.environ["KECE_SETTINGS"])

        merged = self._load_yaml_file(settings_path)
        merged.update(self._get_env_overrides())

        try:
            return AppConfig(**merged)
        except ValidationError as e:
            raise ConfigError(f"Configuration validation failed: {e}") from e


def load_config(settings_path: Optional[Union[str, Path]] = None) -> AppConfig:
    """Load the application configuration.

    Args:
        settings_path: Optional YAML file; defaults to ``KECE_SETTINGS`` if set
    """
    return ConfigManager(settings_path).get_config()
