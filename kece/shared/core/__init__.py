"""
Shared Core Module
==================

State cell and configuration.
"""

from .state_cell import StateCell, Unsubscribe
from .configuration import AppConfig, ConfigError, ConfigManager, load_config

__all__ = [
    # State
    "StateCell",
    "Unsubscribe",
    # Configuration
    "AppConfig",
    "ConfigError",
    "ConfigManager",
    "load_config",
]
