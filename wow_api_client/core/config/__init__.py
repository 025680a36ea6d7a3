"""
Configuration Management

Centralized configuration for the client.
"""

from .settings import (
    Settings,
    APIConfig,
    VALID_REGIONS,
)
from .loader import ConfigLoader, get_settings

__all__ = [
    "Settings",
    "APIConfig",
    "VALID_REGIONS",
    "ConfigLoader",
    "get_settings",
]
