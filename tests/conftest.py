import httpx
import pytest
from httpx import ASGITransport

BASE_URL = "http://rental.test/v1/api"


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("RENTAL_API_BASE_URL", BASE_URL)
    monkeypatch.setenv("LOG_LEVEL", "WARNING")


@pytest.fixture
async def client(mock_env):
    from staybook.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
