"""Health check endpoint tests."""

import pytest

from keyshorty import __version__


@pytest.mark.asyncio
async def test_health_check(client):
    response = await client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "keyshorty-api"
    assert data["version"] == __version__


@pytest.mark.asyncio
async def test_readiness_checks_database(client):
    response = await client.get("/api/health/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ready", "checks": {"database": "ok"}}


@pytest.mark.asyncio
async def test_trace_id_is_echoed(client):
    response = await client.get("/api/health", headers={"X-Trace-Id": "trc_abc123"})
    assert response.headers["X-Trace-Id"] == "trc_abc123"

    generated = await client.get("/api/health")
    assert generated.headers["X-Trace-Id"].startswith("trc_")
