import pytest
from httpx import ASGITransport, AsyncClient

from equipment_api.core.config import settings
from equipment_api.main import create_app


@pytest.mark.asyncio
async def test_security_headers_present(app_client):
    res = await app_client.get("/healthz")

    assert res.headers["X-Content-Type-Options"] == "nosniff"
    assert res.headers["X-Frame-Options"] == "DENY"
    assert res.headers["Referrer-Policy"] == "no-referrer"
    assert res.headers["Cache-Control"] == "no-store"


@pytest.mark.asyncio
async def test_cors_allowed_origin(monkeypatch):
    monkeypatch.setattr(settings, "allow_origins", "http://localhost:3000,https://example.com")
    app = create_app()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        r = await ac.get("/healthz", headers={"Origin": "http://localhost:3000"})
        assert r.status_code == 200
        assert r.headers.get("access-control-allow-origin") == "http://localhost:3000"


@pytest.mark.asyncio
async def test_cors_disallowed_origin(monkeypatch):
    monkeypatch.setattr(settings, "allow_origins", "https://example.com")
    app = create_app()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        r = await ac.get("/healthz", headers={"Origin": "http://evil.com"})
        # Not allowed: middleware should not include ACAO header
        assert r.status_code == 200
        assert r.headers.get("access-control-allow-origin") is None


@pytest.mark.asyncio
async def test_rate_limit_get_exceeded(monkeypatch):
    monkeypatch.setattr(settings, "rate_limit_enabled", True)
    app = create_app()
    headers = {"X-Forwarded-For": "203.0.113.7"}
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        for _ in range(120):
            r = await ac.get("/healthz", headers=headers)
            assert r.status_code == 200
        r = await ac.get("/healthz", headers=headers)
        assert r.status_code == 429
        body = r.json()
        assert body["detail"] == "Too Many Requests"
        assert body["limit"]["limit"] == "120/minute"
