"""RatesClient tests — outbound request shape and failure propagation.

Tests cover:
    - GET to the configured URL with base + symbols
    - access_key added only when configured
    - rates mapping returned verbatim
    - Non-2xx raises httpx.HTTPStatusError (not caught)
    - Body without rates raises KeyError (not caught)
    - get_rates_client reads app.state and fails loudly when uninitialized
"""

from types import SimpleNamespace

import httpx
import pytest

from rates_api.infrastructure.rates_client import RatesClient, get_rates_client

URL = "https://rates.test/latest"


def _client(handler, access_key=None) -> RatesClient:
    return RatesClient(
        URL,
        access_key=access_key,
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


async def test_latest_sends_base_and_symbols():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"rates": {"EUR": 0.85}})

    client = _client(handler)
    rates = await client.latest("USD", "EUR")
    await client.aclose()

    assert rates == {"EUR": 0.85}
    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert str(seen[0].url).startswith(URL)
    assert dict(seen[0].url.params) == {"base": "USD", "symbols": "EUR"}


async def test_access_key_sent_when_configured():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"rates": {}})

    client = _client(handler, access_key="k-123")
    await client.latest("USD", "EUR")
    await client.aclose()

    assert seen[0].url.params["access_key"] == "k-123"


def test_build_params_without_key():
    client = RatesClient(URL)
    assert client.build_params("USD", "EUR") == {"base": "USD", "symbols": "EUR"}


async def test_non_success_status_raises():
    client = _client(lambda request: httpx.Response(503))
    with pytest.raises(httpx.HTTPStatusError):
        await client.latest("USD", "EUR")
    await client.aclose()


async def test_missing_rates_key_raises():
    client = _client(lambda request: httpx.Response(200, json={"base": "USD"}))
    with pytest.raises(KeyError):
        await client.latest("USD", "EUR")
    await client.aclose()


def test_get_rates_client_returns_state_client():
    rates_client = RatesClient(URL)
    request = SimpleNamespace(
        app=SimpleNamespace(state=SimpleNamespace(rates_client=rates_client)),
    )
    assert get_rates_client(request) is rates_client


def test_get_rates_client_uninitialized_raises():
    request = SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace()))
    with pytest.raises(RuntimeError, match="not initialized"):
        get_rates_client(request)
