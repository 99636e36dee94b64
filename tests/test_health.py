"""Tests for the health endpoint."""

import pytest
from httpx import ASGITransport, AsyncClient

from src.api.health import HealthResponse, health_check
from src.main import app


@pytest.mark.asyncio
async def test_health_endpoint_returns_ok() -> None:
    """Return ok with the configured tax year."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        response = await client.get("/api/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["tax_year"] == 2025


@pytest.mark.asyncio
async def test_health_check_handler() -> None:
    """Handler returns a HealthResponse directly."""
    response = await health_check()

    assert isinstance(response, HealthResponse)
    assert response.status == "ok"
