"""API test fixtures — FastAPI app with a mocked upstream and a pinned date.

Invariants:
    - Every test gets a fresh app from create_app()
    - get_rates_client overridden with a RatesClient over httpx.MockTransport
    - get_today overridden to 2024-01-15
    - upstream["handler"] decides the upstream reply; upstream["calls"] records requests

Design Decisions:
    - MockTransport over patching methods: the real RatesClient code path runs end to end
"""

from datetime import date

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from rates_api.api.routes.rates import get_today
from rates_api.config import Settings
from rates_api.infrastructure.rates_client import RatesClient, get_rates_client
from rates_api.main import create_app

UPSTREAM_URL = "https://rates.test/latest"
TODAY = date(2024, 1, 15)


@pytest.fixture
def upstream():
    """Controllable fake of the third-party rates service."""
    state = {
        "calls": [],
        "handler": lambda request: httpx.Response(
            200, json={"rates": {"EUR": 0.85}},
        ),
    }

    def dispatch(request: httpx.Request) -> httpx.Response:
        state["calls"].append(request)
        return state["handler"](request)

    state["transport"] = httpx.MockTransport(dispatch)
    return state


@pytest.fixture
def app():
    return create_app(Settings(rates_api_url=UPSTREAM_URL))


@pytest.fixture
async def client(app, upstream):
    """FastAPI test client with the upstream and the date overridden."""
    rates_client = RatesClient(
        UPSTREAM_URL,
        http_client=httpx.AsyncClient(transport=upstream["transport"]),
    )
    app.dependency_overrides[get_rates_client] = lambda: rates_client
    app.dependency_overrides[get_today] = lambda: TODAY

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    await rates_client.aclose()
