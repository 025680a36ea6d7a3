"""Shared fixtures: a scripted Battle.net backend behind httpx.MockTransport."""

from typing import Any, Dict, List, Tuple

import httpx
import pytest
import pytest_asyncio

from wow_api_client import WoWClient
from wow_api_client.core.config import ConfigLoader


TOKEN_HOST = "us.battle.net"
API_HOST = "us.api.blizzard.com"


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeBattleNet:
    """Answers token, resource and signed-URL requests from canned data."""

    def __init__(self):
        self.tokens: List[Dict[str, Any]] = [{"access_token": "T1", "expires_in": 3600}]
        self.resources: Dict[str, Tuple[int, Any]] = {}
        self.external: Dict[str, Tuple[int, Any]] = {}
        self.requests: List[httpx.Request] = []
        self._issued = 0

    def add_resource(self, path: str, body: Any, status_code: int = 200) -> None:
        self.resources[path] = (status_code, body)

    def add_external(self, url: str, body: Any, status_code: int = 200) -> None:
        self.external[url] = (status_code, body)

    @property
    def token_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.host == TOKEN_HOST]

    @property
    def resource_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.host == API_HOST]

    def _respond(self, status_code: int, body: Any) -> httpx.Response:
        if isinstance(body, (bytes, str)):
            return httpx.Response(status_code, content=body)
        return httpx.Response(status_code, json=body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.url.host == TOKEN_HOST and request.url.path == "/oauth/token":
            token = self.tokens[min(self._issued, len(self.tokens) - 1)]
            self._issued += 1
            return self._respond(200, token)

        if request.url.host == API_HOST and request.url.path.startswith("/wow/"):
            path = request.url.path[len("/wow/"):]
            if path in self.resources:
                return self._respond(*self.resources[path])
            return self._respond(404, {"status": "nok", "reason": "When in doubt, blow it up. (page not found)"})

        url = f"{request.url.scheme}://{request.url.host}{request.url.path}"
        if url in self.external:
            return self._respond(*self.external[url])

        return httpx.Response(404, text="unexpected request")

    def last_query(self) -> Dict[str, str]:
        return dict(self.resource_requests[-1].url.params)


@pytest.fixture
def backend() -> FakeBattleNet:
    return FakeBattleNet()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def transport(backend) -> httpx.MockTransport:
    return httpx.MockTransport(backend.handler)


@pytest_asyncio.fixture
async def client(transport, clock):
    async with WoWClient("app-id", "app-secret", transport=transport, clock=clock) as wow:
        yield wow


@pytest.fixture(autouse=True)
def reset_config_loader():
    ConfigLoader._settings = None
    yield
    ConfigLoader._settings = None

