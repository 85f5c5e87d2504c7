"""Unit tests for middleware."""

import pytest
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient

from api.middleware.logging import RequestLoggingMiddleware


def _create_app_with_middleware() -> FastAPI:
    """Create a minimal FastAPI app with the request logging middleware."""
    app = FastAPI()
    app.add_middleware(RequestLoggingMiddleware)

    @app.get("/test")
    async def _(request: Request) -> dict[str, str]:
        return {"request_id": request.state.request_id}

    return app


class TestRequestLoggingMiddleware:
    """Tests for RequestLoggingMiddleware."""

    @pytest.mark.asyncio
    async def test_generates_request_id_when_not_provided(self) -> None:
        """Response includes a generated X-Request-ID header."""
        app = _create_app_with_middleware()
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            response = await c.get("/test")

        assert "x-request-id" in response.headers
        assert len(response.headers["x-request-id"]) > 0

    @pytest.mark.asyncio
    async def test_propagates_existing_request_id(self) -> None:
        """Provided X-Request-ID is propagated to response and request state."""
        app = _create_app_with_middleware()
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            response = await c.get("/test", headers={"X-Request-ID": "custom-req-123"})

        assert response.headers["x-request-id"] == "custom-req-123"
        assert response.json()["request_id"] == "custom-req-123"

    @pytest.mark.asyncio
    async def test_generated_ids_differ(self) -> None:
        app = _create_app_with_middleware()
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            r1 = await c.get("/test")
            r2 = await c.get("/test")

        assert r1.headers["x-request-id"] != r2.headers["x-request-id"]
