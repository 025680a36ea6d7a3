"""
Battle.net OAuth2 Service

Requests client-credentials access tokens from the regional Battle.net
identity provider.
"""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from ....core.exceptions import AuthenticationError
from ....core.models import TokenResponse

logger = logging.getLogger(__name__)


class BattleNetOAuthService:
    """Battle.net OAuth2 client-credentials token source."""

    GRANT_TYPE = "client_credentials"

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        region: str = "us",
        oauth_host: str = "battle.net",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize OAuth service.

        Args:
            client_id: Battle.net application ID
            client_secret: Battle.net application secret
            region: Region of the authentication server
            oauth_host: OAuth host, prefixed with the region
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.region = region.lower()
        self.oauth_url = f"https://{self.region}.{oauth_host}/oauth/token"
        self.timeout = timeout
        self._transport = transport

    async def request_token(self) -> TokenResponse:
        """
        Request a new access token.

        Returns:
            Parsed token response

        Raises:
            httpx.HTTPError: On transport failure or a non-2xx response
            ValueError: If the body is not JSON
            AuthenticationError: If the JSON body is not a token response
        """
        logger.info(f"Fetching new OAuth token from {self.oauth_url}")

        async with httpx.AsyncClient(
            transport=self._transport,
            timeout=httpx.Timeout(self.timeout)
        ) as client:
            response = await client.post(
                self.oauth_url,
                data={
                    "grant_type": self.GRANT_TYPE
                },
                auth=(self.client_id, self.client_secret)
            )

            response.raise_for_status()
            token_data = response.json()

        try:
            token = TokenResponse.model_validate(token_data)
        except PydanticValidationError as e:
            raise AuthenticationError(
                "Token response did not contain a usable access_token/expires_in",
                status_code=response.status_code,
                endpoint=self.oauth_url,
                original_exception=e
            ) from e

        logger.info(f"OAuth token obtained, expires in {token.expires_in} seconds")
        return token
