import json

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

import ecotrack.app as app_module
from ecotrack.app import app
from ecotrack.screen import Screen

CHOC_BAR = "3017620422003"


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _load_screen_copy():
    """Ensure screen copy is loaded for all tests."""
    if not app_module.screen_copy:
        app_module.screen_copy = app_module._load_screen_copy()


@pytest.fixture
def off_requests() -> list[httpx.Request]:
    """Requests seen by the fake Open Food Facts upstream."""
    return []


@pytest.fixture
def off_client(off_requests: list[httpx.Request]):
    """An httpx client whose transport answers like Open Food Facts."""

    def handler(request: httpx.Request) -> httpx.Response:
        off_requests.append(request)
        if request.url.path == f"/api/v0/product/{CHOC_BAR}.json":
            body = {"status": 1, "product": {"product_name": "Choc Bar", "brands": "Acme"}}
        else:
            body = {"status": 0, "status_verbose": "product not found"}
        return httpx.Response(200, content=json.dumps(body).encode())

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        yield client


@pytest.fixture(autouse=True)
def screen(off_client: httpx.Client, monkeypatch: pytest.MonkeyPatch) -> Screen:
    """A fresh screen wired into the app, talking to the fake upstream."""
    fresh = Screen(client=off_client)
    monkeypatch.setattr(app_module, "screen", fresh)
    return fresh


@pytest.fixture
async def client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
