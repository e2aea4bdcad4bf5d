"""Exchange-Rate Client — thin async wrapper over the third-party rates API.

Invariants:
    - One outbound GET per lookup: base + symbols (+ access_key when configured)
    - Non-2xx responses raise httpx.HTTPStatusError; bodies without "rates" raise KeyError
    - Failures are never caught here: they propagate to the route's error forwarding
    - rates mapping returned verbatim (no coercion, no filtering)

Design Decisions:
    - No retry, no cache, client-library default timeout
    - Client owned by the app lifespan; routes receive it via get_rates_client
"""

import logging
from typing import Any

import httpx
from fastapi import Request

logger = logging.getLogger(__name__)


class RatesClient:
    """Looks up latest exchange rates from the upstream service."""

    def __init__(
        self,
        base_url: str,
        access_key: str | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url
        self.access_key = access_key
        self._http = http_client or httpx.AsyncClient()

    def build_params(self, base: str, symbols: str) -> dict[str, str]:
        params = {"base": base, "symbols": symbols}
        if self.access_key:
            params["access_key"] = self.access_key
        return params

    async def latest(self, base: str, symbols: str) -> dict[str, Any]:
        """Fetch the rates mapping for `base` restricted to `symbols`."""
        logger.debug(
            f"Fetching rates base={base} symbols={symbols}",
            extra={"upstream_url": self.base_url},
        )
        response = await self._http.get(
            self.base_url, params=self.build_params(base, symbols),
        )
        response.raise_for_status()
        return response.json()["rates"]

    async def aclose(self) -> None:
        await self._http.aclose()


def get_rates_client(request: Request) -> RatesClient:
    """FastAPI dependency returning the lifespan-owned client."""
    client = getattr(request.app.state, "rates_client", None)
    if client is None:
        raise RuntimeError("Rates client not initialized")
    return client
