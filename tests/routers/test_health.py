import httpx
import pytest

from pathecho import __version__, create_app
from pathecho.core.settings import Settings


@pytest.mark.asyncio
async def test_health():
    app = create_app(Settings(environment="test", debug=False))
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {
        "status": "ok",
        "environment": "test",
        "debug": False,
        "version": __version__,
    }
