"""Tests for health check endpoints."""

import pytest
from httpx import AsyncClient


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    @pytest.mark.asyncio
    async def test_health_returns_200(self, client: AsyncClient) -> None:
        """Test that health endpoint returns 200 OK."""
        response = await client.get("/health")

        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_health_returns_correct_structure(self, client: AsyncClient) -> None:
        """Test that health endpoint returns expected structure."""
        response = await client.get("/health")
        data = response.json()

        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert data["environment"] == "test"
        assert "timestamp" in data

    @pytest.mark.asyncio
    async def test_detailed_health_checks_database(self, client: AsyncClient) -> None:
        response = await client.get("/health/detailed")
        data = response.json()

        assert response.status_code == 200
        assert data["status"] == "healthy"
        assert data["database"] == "healthy"
