"""Token lifecycle: acquisition, reuse and expiry."""

import asyncio
import base64

import httpx
import pytest

from wow_api_client import AuthenticationError, BattleNetOAuthService, TokenManager
from wow_api_client.core.models import TokenResponse
from wow_api_client.core.protocols import OAuthProtocol


class CountingTokenSource:
    def __init__(self):
        self.calls = 0

    async def request_token(self) -> TokenResponse:
        self.calls += 1
        # Yield so concurrent callers can pile up behind the refresh
        await asyncio.sleep(0)
        return TokenResponse(access_token=f"T{self.calls}", expires_in=3600)


@pytest.mark.asyncio
async def test_first_request_fetches_token_and_second_reuses_it(client, backend):
    backend.add_resource("item/19019", {"id": 19019})

    await client.item(19019)
    await client.item(19019)

    assert len(backend.token_requests) == 1
    tokens = [r.url.params["access_token"] for r in backend.resource_requests]
    assert tokens == ["T1", "T1"]


@pytest.mark.asyncio
async def test_expired_token_is_replaced(client, backend, clock):
    backend.tokens = [
        {"access_token": "T1", "expires_in": 3600},
        {"access_token": "T2", "expires_in": 3600},
    ]
    backend.add_resource("item/19019", {"id": 19019})

    await client.item(19019)
    clock.advance(3601)
    await client.item(19019)

    assert len(backend.token_requests) == 2
    assert backend.last_query()["access_token"] == "T2"


@pytest.mark.asyncio
async def test_token_expires_exactly_at_its_lifetime(clock):
    source = CountingTokenSource()
    manager = TokenManager(source, clock=clock)

    assert await manager.ensure_valid_credential() == "T1"
    clock.advance(3599)
    assert await manager.ensure_valid_credential() == "T1"
    clock.advance(1)
    assert await manager.ensure_valid_credential() == "T2"
    assert source.calls == 2


@pytest.mark.asyncio
async def test_credential_records_lifetime_and_instant(clock):
    manager = TokenManager(CountingTokenSource(), clock=clock)
    assert manager.credential is None
    assert manager.needs_refresh()

    await manager.ensure_valid_credential()

    credential = manager.credential
    assert credential.access_token == "T1"
    assert credential.expires_in == 3600
    assert credential.obtained_at == clock.now
    assert credential.expires_at == clock.now + 3600
    assert not manager.needs_refresh()


@pytest.mark.asyncio
async def test_invalidate_forces_refresh(clock):
    source = CountingTokenSource()
    manager = TokenManager(source, clock=clock)

    await manager.ensure_valid_credential()
    manager.invalidate()

    assert await manager.ensure_valid_credential() == "T2"


@pytest.mark.asyncio
async def test_concurrent_callers_share_one_refresh(clock):
    source = CountingTokenSource()
    manager = TokenManager(source, clock=clock)

    tokens = await asyncio.gather(*(manager.ensure_valid_credential() for _ in range(5)))

    assert tokens == ["T1"] * 5
    assert source.calls == 1


@pytest.mark.asyncio
async def test_token_request_uses_basic_auth_and_client_credentials_grant(client, backend):
    backend.add_resource("boss/", {"bosses": []})

    await client.boss_list()

    request = backend.token_requests[0]
    assert request.method == "POST"
    assert str(request.url) == "https://us.battle.net/oauth/token"
    expected = base64.b64encode(b"app-id:app-secret").decode()
    assert request.headers["Authorization"] == f"Basic {expected}"
    assert request.content == b"grant_type=client_credentials"


def test_oauth_service_satisfies_protocol():
    service = BattleNetOAuthService("id", "secret", region="EU")
    assert isinstance(service, OAuthProtocol)
    assert service.oauth_url == "https://eu.battle.net/oauth/token"


@pytest.mark.asyncio
async def test_malformed_token_body_raises_authentication_error():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"error": "nope"}))
    service = BattleNetOAuthService("id", "secret", transport=transport)

    with pytest.raises(AuthenticationError) as exc_info:
        await service.request_token()

    assert exc_info.value.endpoint == "https://us.battle.net/oauth/token"
    assert exc_info.value.to_dict()["error"] == "AuthenticationError"


@pytest.mark.asyncio
async def test_token_endpoint_error_status_propagates():
    transport = httpx.MockTransport(lambda request: httpx.Response(401, json={"error": "invalid_client"}))
    service = BattleNetOAuthService("id", "secret", transport=transport)

    with pytest.raises(httpx.HTTPStatusError):
        await service.request_token()


@pytest.mark.asyncio
async def test_unreachable_token_endpoint_propagates_transport_error():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    service = BattleNetOAuthService("id", "secret", transport=httpx.MockTransport(refuse))

    with pytest.raises(httpx.ConnectError):
        await service.request_token()
