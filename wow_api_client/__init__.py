"""
WoW API Client

Async client for the World of Warcraft Community API using the Battle.net
OAuth2 client-credentials flow.
"""

__version__ = "1.0.0"

# Public API exports
from .core.config import Settings, APIConfig, ConfigLoader
from .core.exceptions import (
    WoWClientError,
    APIError,
    AuthenticationError,
    ValidationError,
    MissingParameterError,
    InvalidParameterError,
    ConfigurationError,
)
from .core.models import Credential
from .infrastructure.api.auth import TokenManager
from .infrastructure.api.blizzard import WoWClient, BattleNetOAuthService
from .utils.logging_utils import setup_logging

__all__ = [
    "WoWClient",
    "BattleNetOAuthService",
    "TokenManager",
    "Credential",
    "Settings",
    "APIConfig",
    "ConfigLoader",
    "WoWClientError",
    "APIError",
    "AuthenticationError",
    "ValidationError",
    "MissingParameterError",
    "InvalidParameterError",
    "ConfigurationError",
    "setup_logging",
]
