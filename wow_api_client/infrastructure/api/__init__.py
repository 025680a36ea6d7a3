"""
API Infrastructure

Base API client and the Battle.net implementation.
"""

from .base_client import BaseAPIClient
from .auth import TokenManager
from .blizzard import (
    WoWClient,
    BattleNetOAuthService,
)

__all__ = [
    "BaseAPIClient",
    "TokenManager",
    "WoWClient",
    "BattleNetOAuthService",
]
