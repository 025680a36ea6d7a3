"""
Blizzard API Infrastructure

World of Warcraft Community API client, its OAuth service and resource catalog.
"""

from .client import WoWClient, LEADERBOARD_BRACKETS
from .oauth import BattleNetOAuthService
from .resources import RESOURCES, ResourceSpec, ResourceAccessors
from .models import AuctionFile, AuctionMetadata

__all__ = [
    # Client
    "WoWClient",
    "LEADERBOARD_BRACKETS",

    # OAuth
    "BattleNetOAuthService",

    # Resource catalog
    "RESOURCES",
    "ResourceSpec",
    "ResourceAccessors",

    # Models
    "AuctionFile",
    "AuctionMetadata",
]
