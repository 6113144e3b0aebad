import httpx
import pytest
from httpx import ASGITransport


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("AMADEUS_CLIENT_ID", "test-client-id")
    monkeypatch.setenv("AMADEUS_CLIENT_SECRET", "test-client-secret")
    monkeypatch.setenv("USE_MOCK_HOTELS", "false")
    monkeypatch.setenv("RATE_LIMITING", "enabled")
    monkeypatch.setenv("ENVIRONMENT", "development")


@pytest.fixture
async def client(mock_env):
    from hotel_offers.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
