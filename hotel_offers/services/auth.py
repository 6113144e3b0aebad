import asyncio
import logging
import time
from collections.abc import Callable

import httpx
from pydantic import BaseModel, ValidationError

from hotel_offers.exceptions.custom import AuthError, ConfigError
from hotel_offers.schemas.amadeus import TokenResponse

logger = logging.getLogger(__name__)

TOKEN_PATH = "/v1/security/oauth2/token"
EXPIRY_MARGIN_SECONDS = 60


class AccessToken(BaseModel):
    value: str
    expires_at: float


class AccessTokenProvider:
    """Client-credentials token exchange, reusing a token until it expires."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        client_id: str,
        client_secret: str,
        base_url: str = "https://test.api.amadeus.com",
        clock: Callable[[], float] = time.monotonic,
    ):
        self._client = client
        self._client_id = client_id
        self._client_secret = client_secret
        self._token_url = f"{base_url.rstrip('/')}{TOKEN_PATH}"
        self._clock = clock
        self._token: AccessToken | None = None
        self._lock = asyncio.Lock()

    async def acquire_token(self) -> str:
        if not self._client_id or not self._client_secret:
            raise ConfigError("Missing Amadeus credentials")

        async with self._lock:
            if self._token and self._clock() < self._token.expires_at:
                return self._token.value
            self._token = await self._exchange()
            return self._token.value

    def invalidate(self, token: str) -> None:
        """Forget the cached token if it is the one the provider rejected."""
        if self._token and self._token.value == token:
            logger.info("Amadeus token rejected upstream, dropping it")
            self._token = None

    async def _exchange(self) -> AccessToken:
        try:
            resp = await self._client.post(
                self._token_url,
                data={
                    "grant_type": "client_credentials",
                    "client_id": self._client_id,
                    "client_secret": self._client_secret,
                },
                headers={"Content-Type": "application/x-www-form-urlencoded"},
            )
        except httpx.HTTPError as exc:
            raise AuthError(f"Token request failed: {exc}") from exc

        if resp.status_code >= 400:
            raise AuthError(
                "Failed to authenticate with Amadeus",
                status_code=resp.status_code,
                body=resp.text,
            )

        try:
            data = TokenResponse(**resp.json())
        except (ValueError, ValidationError) as exc:
            raise AuthError("Malformed token response", status_code=resp.status_code, body=resp.text) from exc

        logger.info("Amadeus token refreshed (expires_in=%ss)", data.expires_in)
        lifetime = max(data.expires_in - EXPIRY_MARGIN_SECONDS, 0)
        return AccessToken(value=data.access_token, expires_at=self._clock() + lifetime)
