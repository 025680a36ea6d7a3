"""
Blizzard API Client

Async client for the World of Warcraft Community API with OAuth2
client-credentials authentication.
"""

import logging
import time
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence
from urllib.parse import quote, urlencode

import httpx

from ....core.config import Settings
from ....core.exceptions import ConfigurationError, MissingParameterError
from ....utils.validation import optional_params, require, require_choice
from ..auth import TokenManager
from ..base_client import BaseAPIClient
from .models import AuctionMetadata
from .oauth import BattleNetOAuthService
from .resources import CHARACTER_PATH, GUILD_PATH, ResourceAccessors

logger = logging.getLogger(__name__)


LEADERBOARD_BRACKETS = frozenset({"2v2", "3v3", "5v5", "rbg"})


class WoWClient(ResourceAccessors, BaseAPIClient):
    """World of Warcraft Community API client.

    Every accessor resolves to the parsed JSON body, or to ``None`` when
    the service answers with a ``status`` error body (unknown id, realm,
    character...). Missing arguments raise :class:`MissingParameterError`
    before any request; transport failures raise ``httpx`` errors.

    Usage::

        async with WoWClient("id", "secret", region="eu", locale="it_IT") as wow:
            mounts = await wow.character_mounts("pozzo-delleternita", "Paladrugs")
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        region: str = "us",
        locale: str = "en_US",
        *,
        api_host: str = "api.blizzard.com",
        oauth_host: str = "battle.net",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        clock: Callable[[], float] = time.monotonic
    ):
        """
        Initialize the client.

        Args:
            client_id: Battle.net application ID
            client_secret: Battle.net application secret
            region: API region (us, eu, kr, tw, cn)
            locale: Locale of the returned data
            api_host: Resource API host, prefixed with the region
            oauth_host: OAuth host, prefixed with the region
            timeout: Request timeout in seconds
            transport: Optional httpx transport shared by API and OAuth requests
            clock: Monotonic clock used for token expiry
        """
        if not client_id:
            raise ConfigurationError("client_id must be provided", config_key="client_id")
        if not client_secret:
            raise ConfigurationError("client_secret must be provided", config_key="client_secret")

        self.region = (region or "us").lower()
        self.locale = locale or "en_US"

        super().__init__(
            base_url=f"https://{self.region}.{api_host}",
            timeout=timeout,
            transport=transport
        )

        self.client_id = client_id
        self.oauth_service = BattleNetOAuthService(
            client_id=client_id,
            client_secret=client_secret,
            region=self.region,
            oauth_host=oauth_host,
            timeout=timeout,
            transport=transport
        )
        self.token_manager = TokenManager(self.oauth_service, clock=clock)

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "WoWClient":
        """Create a client from loaded settings."""
        api = settings.api
        return cls(
            api.client_id,
            api.client_secret,
            region=api.region,
            locale=api.locale,
            api_host=api.api_host,
            oauth_host=api.oauth_host,
            timeout=api.timeout,
            **kwargs
        )

    def _get_default_headers(self) -> Dict[str, str]:
        """Get default headers for requests."""
        return {
            "Accept": "application/json"
        }

    # Request building
    def build_resource_url(
        self,
        path: str,
        access_token: str,
        fields: Optional[Sequence[str]] = None,
        params: Optional[Mapping[str, Any]] = None
    ) -> str:
        """
        Build the full URL of a resource request.

        Field selectors are joined with literal commas; every other query
        value is url-encoded.

        Args:
            path: Resource path relative to /wow/
            access_token: Bearer token sent as ``access_token``
            fields: Optional field selectors
            params: Optional extra query parameters

        Returns:
            Absolute request URL
        """
        query = ""
        if fields:
            query += f"fields={','.join(quote(str(field), safe='') for field in fields)}&"
        query += urlencode({
            **(params or {}),
            "locale": self.locale,
            "access_token": access_token
        })
        return f"{self.base_url}/wow/{path.lstrip('/')}?{query}"

    @staticmethod
    def _parse_body(response: httpx.Response) -> Any:
        """Decode a JSON body, preferring the HTTP error when both fail."""
        try:
            return response.json()
        except ValueError:
            response.raise_for_status()
            raise

    # Generic operations
    async def fetch_resource(
        self,
        path: str,
        fields: Optional[Sequence[str]] = None,
        params: Optional[Mapping[str, Any]] = None
    ) -> Optional[Any]:
        """
        Perform one authenticated read against the API.

        Args:
            path: Resource path relative to /wow/, identifiers interpolated
            fields: Optional field selectors
            params: Optional extra query parameters

        Returns:
            Parsed JSON body, or None if the service reported a status error

        Raises:
            MissingParameterError: If path is empty
            httpx.HTTPError: On transport failure or unexpected non-2xx status
            ValueError: If a successful response is not JSON
        """
        if not path or not path.strip("/ "):
            raise MissingParameterError("path", "string", path)

        access_token = await self.token_manager.ensure_valid_credential()
        url = self.build_resource_url(path, access_token, fields=fields, params=params)

        response = await self._execute_request("GET", url, log_target=f"/wow/{path.lstrip('/')}")
        body = self._parse_body(response)

        if isinstance(body, dict) and body.get("status"):
            logger.debug(f"Resource {path} absent: {body.get('reason', body.get('status'))}")
            return None

        response.raise_for_status()
        return body

    async def fetch_sub_resource(
        self,
        entity_path: str,
        field_name: str
    ) -> Optional[Any]:
        """
        Fetch one field selector of a character or guild profile.

        Args:
            entity_path: Profile path, e.g. ``character/{realm}/{name}``
            field_name: Field selector to include and return

        Returns:
            The field's value, or None if the profile is absent
        """
        require(field_name, "field_name", "string")
        profile = await self.fetch_resource(entity_path, [field_name])
        if profile is None:
            return None
        return profile.get(field_name)

    # Profiles
    def _profile_path(self, template: str, realm: str, name: str) -> str:
        require(realm, "realm", "string")
        require(name, "name", "string")
        return template.format(
            realm=quote(str(realm).strip(), safe=''),
            name=quote(str(name).strip(), safe='')
        )

    async def character(
        self,
        realm: str,
        name: str,
        fields: Optional[Sequence[str]] = None
    ) -> Optional[Dict[str, Any]]:
        """Character profile, optionally with extra field selectors."""
        path = self._profile_path(CHARACTER_PATH, realm, name)
        return await self.fetch_resource(path, fields)

    async def guild(
        self,
        realm: str,
        name: str,
        fields: Optional[Sequence[str]] = None
    ) -> Optional[Dict[str, Any]]:
        """Guild profile, optionally with extra field selectors."""
        path = self._profile_path(GUILD_PATH, realm, name)
        return await self.fetch_resource(path, fields)

    # Auction House
    async def auction(self, realm: str) -> Optional[List[Dict[str, Any]]]:
        """
        Auctions currently listed on a realm's auction house.

        The API answers with a short-lived signed URL; the dump behind it
        is downloaded without credentials.

        Args:
            realm: Realm slug

        Returns:
            List of auctions, or None if the realm is unknown
        """
        require(realm, "realm", "string")
        data = await self.fetch_resource(f"auction/data/{quote(str(realm).strip(), safe='')}")
        if data is None:
            return None

        dump = AuctionMetadata.model_validate(data).latest
        logger.info(f"Downloading auction dump for {realm}")

        response = await self._execute_request("GET", dump.url, log_target=f"auction dump for {realm}")
        response.raise_for_status()
        return response.json().get("auctions")

    # Realms
    async def realms(self) -> Optional[Dict[str, str]]:
        """Map of realm names to realm slugs, in the order the API lists them."""
        realm_list = await self.realm_status()
        if realm_list is None:
            return None
        return {realm["name"]: realm["slug"] for realm in realm_list}

    # Catalog lookups
    async def pet_stats(
        self,
        species_id: int,
        level: Optional[int] = None,
        breed_id: Optional[int] = None,
        quality_id: Optional[int] = None
    ) -> Optional[Dict[str, Any]]:
        """Stats of a battle pet species at a given level, breed and quality."""
        require(species_id, "species_id", "number")
        params = optional_params(level=level, breedId=breed_id, qualityId=quality_id)
        return await self.fetch_resource(f"pet/stats/{quote(str(species_id), safe='')}", params=params)

    async def leaderboard(self, bracket: str) -> Optional[Dict[str, Any]]:
        """PvP leaderboard of a bracket (2v2, 3v3, 5v5 or rbg)."""
        bracket = require_choice(bracket, "bracket", LEADERBOARD_BRACKETS)
        return await self.fetch_resource(f"leaderboard/{bracket}")

    async def _catalog_entry(self, path: str, key: str, entry_id: Any) -> Optional[Dict[str, Any]]:
        catalog = await self.fetch_resource(path)
        if catalog is None:
            return None
        for entry in catalog.get(key, []):
            if str(entry.get("id")) == str(entry_id).strip():
                return entry
        return None

    async def race(self, race_id: int) -> Optional[Dict[str, Any]]:
        """One character race, looked up in the race catalog."""
        require(race_id, "race_id", "number")
        return await self._catalog_entry("data/character/races", "races", race_id)

    async def character_class(self, class_id: int) -> Optional[Dict[str, Any]]:
        """One character class, looked up in the class catalog."""
        require(class_id, "class_id", "number")
        return await self._catalog_entry("data/character/classes", "classes", class_id)
