"""
tests.test_smoke

The app boots, serves probes and tags responses with a request id.
"""

from __future__ import annotations

import httpx
import pytest
from structlog.testing import capture_logs

from staff_skills.api.app import create_app
from staff_skills.settings import Settings


@pytest.mark.asyncio
async def test_health_endpoints(client: httpx.AsyncClient) -> None:
    r = await client.get("/healthz")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"

    r = await client.get("/readyz")
    assert r.status_code == 200
    assert r.json()["status"] == "ready"


@pytest.mark.asyncio
async def test_request_id_is_propagated(client: httpx.AsyncClient) -> None:
    r = await client.get("/healthz", headers={"x-request-id": "abc-123"})
    assert r.headers["x-request-id"] == "abc-123"

    r = await client.get("/healthz")
    assert r.headers["x-request-id"]


@pytest.mark.asyncio
async def test_failed_requests_are_access_logged(settings: Settings) -> None:
    app = create_app(settings=settings)

    @app.get("/explode")
    async def explode() -> None:
        raise RuntimeError("kaboom")

    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        with capture_logs() as logs:
            r = await client.get("/explode", headers={"x-request-id": "req-1"})

    assert r.status_code == 500
    completed = [e for e in logs if e["event"] == "request_completed"]
    assert len(completed) == 1
    assert completed[0]["log_level"] == "error"
    assert completed[0]["status_code"] == 500
    assert completed[0]["error"] == "RuntimeError"
