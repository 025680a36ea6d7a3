"""
Core Models

Models shared between the authentication and request layers.
"""

from .token import Credential, TokenResponse

__all__ = [
    "Credential",
    "TokenResponse",
]
