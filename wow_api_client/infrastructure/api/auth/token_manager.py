"""
Token Manager

Owns the single bearer credential of one client identity and decides when
it must be replaced.
"""

import asyncio
import logging
import time
from typing import Callable, Optional

from ....core.models import Credential
from ....core.protocols import OAuthProtocol

logger = logging.getLogger(__name__)


class TokenManager:
    """Keeps a valid access token, refreshing it only when necessary.

    Expiry is measured on a monotonic clock: a credential obtained at
    ``t0`` with lifetime ``ttl`` is refreshed once ``now >= t0 + ttl``.
    Concurrent callers share one in-flight refresh.
    """

    def __init__(
        self,
        token_source: OAuthProtocol,
        clock: Callable[[], float] = time.monotonic
    ):
        """
        Initialize token manager.

        Args:
            token_source: Object able to request a fresh token
            clock: Monotonic clock returning seconds
        """
        self.token_source = token_source
        self.clock = clock

        self._credential: Optional[Credential] = None
        self._refresh_lock = asyncio.Lock()

    @property
    def credential(self) -> Optional[Credential]:
        """Current credential, if one was obtained."""
        return self._credential

    def needs_refresh(self) -> bool:
        """Check whether the next request must acquire a new token."""
        if self._credential is None:
            return True
        return self._credential.is_expired(self.clock())

    async def ensure_valid_credential(self) -> str:
        """
        Return an access token that is valid now.

        Returns:
            Access token string
        """
        if not self.needs_refresh():
            logger.debug("Using cached OAuth token")
            return self._credential.access_token

        async with self._refresh_lock:
            # Another caller may have refreshed while we waited
            if self.needs_refresh():
                await self._refresh()
            return self._credential.access_token

    async def _refresh(self) -> None:
        obtained_at = self.clock()
        token = await self.token_source.request_token()
        self._credential = Credential.from_response(token, obtained_at)

    def invalidate(self) -> None:
        """Drop the current credential so the next request refreshes it."""
        self._credential = None
        logger.debug("OAuth token invalidated")
