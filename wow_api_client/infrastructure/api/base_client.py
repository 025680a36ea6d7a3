"""
Base API Client

Base implementation for API clients with common functionality.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Dict, Any

import httpx

logger = logging.getLogger(__name__)


class BaseAPIClient(ABC):
    """Base API client owning one lazily created ``httpx.AsyncClient``."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize base API client.

        Args:
            base_url: Base URL for API
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self._transport = transport

        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        """Enter async context."""
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context."""
        await self.close()

    async def initialize(self) -> None:
        """Initialize HTTP client."""
        if not self._client:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                headers=self._get_default_headers(),
                transport=self._transport
            )
            logger.info(f"API client initialized for {self.base_url}")

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("API client closed")

    @abstractmethod
    def _get_default_headers(self) -> Dict[str, str]:
        """Get default headers for requests."""
        pass

    async def _execute_request(
        self,
        method: str,
        url: str,
        log_target: Optional[str] = None,
        **kwargs: Any
    ) -> httpx.Response:
        """
        Execute one HTTP request without checking its status.

        Args:
            method: HTTP method
            url: Absolute URL, or a path joined to ``base_url``
            log_target: What to show in logs instead of the URL
            **kwargs: Additional request arguments

        Returns:
            HTTP response
        """
        if not self._client:
            await self.initialize()

        if not url.startswith('http'):
            url = f"{self.base_url}/{url.lstrip('/')}"

        logger.debug(f"{method} {log_target or url}")

        response = await self._client.request(
            method=method,
            url=url,
            **kwargs
        )

        logger.debug(f"{method} {log_target or url} -> {response.status_code}")
        return response
