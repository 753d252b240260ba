import pytest
import httpx
from homestay.main import app

@pytest.mark.asyncio
async def test_health():
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        r = await ac.get("/v1/health")
        assert r.status_code == 200
        assert r.json()["status"] == "ok"


def test_create_app_instruments_store_engine(monkeypatch):
    from homestay import main
    from homestay.core.db import engine

    calls = []
    monkeypatch.setattr(main.settings, "telemetry_enabled", True)
    monkeypatch.setattr(main, "setup_telemetry", lambda app, eng: calls.append((app, eng)))

    app = main.create_app()

    assert calls == [(app, engine)]
