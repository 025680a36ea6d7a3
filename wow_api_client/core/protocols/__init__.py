"""
Core Protocol Definitions

This module defines the interfaces that implementations must follow.
"""

from .api_client_protocol import APIClientProtocol
from .oauth_protocol import OAuthProtocol

__all__ = [
    "APIClientProtocol",
    "OAuthProtocol",
]
