import httpx
import pytest
import respx
from httpx import Response

from hotel_offers.exceptions.custom import AuthError, ConfigError
from hotel_offers.services.auth import AccessTokenProvider

TOKEN_URL = "https://test.api.amadeus.com/v1/security/oauth2/token"


class FakeClock:
    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@respx.mock
async def test_acquire_token_success():
    route = respx.post(TOKEN_URL).mock(
        return_value=Response(200, json={"access_token": "tok-1", "expires_in": 1799})
    )

    async with httpx.AsyncClient() as client:
        provider = AccessTokenProvider(client, "id", "secret")
        token = await provider.acquire_token()

    assert token == "tok-1"
    body = route.calls.last.request.content.decode()
    assert "grant_type=client_credentials" in body
    assert "client_id=id" in body
    assert "client_secret=secret" in body


@respx.mock
async def test_token_is_reused_until_expiry():
    route = respx.post(TOKEN_URL).mock(
        side_effect=[
            Response(200, json={"access_token": "tok-1", "expires_in": 120}),
            Response(200, json={"access_token": "tok-2", "expires_in": 120}),
        ]
    )
    clock = FakeClock()

    async with httpx.AsyncClient() as client:
        provider = AccessTokenProvider(client, "id", "secret", clock=clock)
        assert await provider.acquire_token() == "tok-1"
        clock.now = 59
        assert await provider.acquire_token() == "tok-1"
        # expires_in minus the 60s margin
        clock.now = 60
        assert await provider.acquire_token() == "tok-2"

    assert route.call_count == 2


@pytest.mark.parametrize("client_id,secret", [("", "secret"), ("id", "")])
async def test_missing_credentials_fail_fast(client_id, secret):
    with respx.mock(assert_all_called=False) as mock:
        route = mock.post(TOKEN_URL)
        async with httpx.AsyncClient() as client:
            provider = AccessTokenProvider(client, client_id, secret)
            with pytest.raises(ConfigError):
                await provider.acquire_token()
        assert route.call_count == 0


@respx.mock
async def test_rejected_exchange_raises_auth_error():
    respx.post(TOKEN_URL).mock(return_value=Response(401, text="invalid_client"))

    async with httpx.AsyncClient() as client:
        provider = AccessTokenProvider(client, "id", "bad-secret")
        with pytest.raises(AuthError) as exc_info:
            await provider.acquire_token()

    assert exc_info.value.status_code == 401
    assert exc_info.value.body == "invalid_client"
    assert not isinstance(exc_info.value, ConfigError)


@respx.mock
async def test_transport_failure_raises_auth_error():
    respx.post(TOKEN_URL).mock(side_effect=httpx.ConnectError("boom"))

    async with httpx.AsyncClient() as client:
        provider = AccessTokenProvider(client, "id", "secret")
        with pytest.raises(AuthError):
            await provider.acquire_token()


@respx.mock
async def test_malformed_token_response():
    respx.post(TOKEN_URL).mock(return_value=Response(200, json={"unexpected": True}))

    async with httpx.AsyncClient() as client:
        provider = AccessTokenProvider(client, "id", "secret")
        with pytest.raises(AuthError):
            await provider.acquire_token()


@respx.mock
async def test_custom_base_url():
    respx.post("https://api.amadeus.com/v1/security/oauth2/token").mock(
        return_value=Response(200, json={"access_token": "prod-tok"})
    )

    async with httpx.AsyncClient() as client:
        provider = AccessTokenProvider(client, "id", "secret", base_url="https://api.amadeus.com/")
        assert await provider.acquire_token() == "prod-tok"


@respx.mock
async def test_invalidate_forces_new_exchange():
    route = respx.post(TOKEN_URL).mock(
        side_effect=[
            Response(200, json={"access_token": "tok-1"}),
            Response(200, json={"access_token": "tok-2"}),
        ]
    )

    async with httpx.AsyncClient() as client:
        provider = AccessTokenProvider(client, "id", "secret")
        assert await provider.acquire_token() == "tok-1"
        provider.invalidate("tok-1")
        assert await provider.acquire_token() == "tok-2"

    assert route.call_count == 2


@respx.mock
async def test_invalidate_ignores_stale_token():
    route = respx.post(TOKEN_URL).mock(
        return_value=Response(200, json={"access_token": "tok-2"})
    )

    async with httpx.AsyncClient() as client:
        provider = AccessTokenProvider(client, "id", "secret")
        assert await provider.acquire_token() == "tok-2"
        provider.invalidate("tok-1")
        assert await provider.acquire_token() == "tok-2"

    assert route.call_count == 1
