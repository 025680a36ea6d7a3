"""
OAuth Protocol Definition

Protocol for OAuth2 token sources.
"""

from typing import Protocol, runtime_checkable

from ..models import TokenResponse


@runtime_checkable
class OAuthProtocol(Protocol):
    """Protocol for OAuth2 client-credentials token sources."""

    async def request_token(self) -> TokenResponse:
        """
        Request a fresh access token from the identity provider.

        Returns:
            Parsed token response (access_token and expires_in)
        """
        ...
