"""
Authentication

Credential lifecycle for the Battle.net API.
"""

from .token_manager import TokenManager

__all__ = [
    "TokenManager",
]
