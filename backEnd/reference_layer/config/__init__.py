"""Configuration module for reference layer."""

from .settings import DEFAULT_REFERENCE_CONFIG_PATH, Settings, get_settings

__all__ = [
    "DEFAULT_REFERENCE_CONFIG_PATH",
    "Settings",
    "get_settings",
]
