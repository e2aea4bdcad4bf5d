"""Rates Route — GET /api/rates proxies one lookup to the upstream rates service.

Invariants:
    - base and currency presence enforced before the handler runs (base checked first)
    - currency is sent upstream as `symbols`
    - date is the server's current date (YYYY-MM-DD) at request time
    - Upstream failures are not handled here; forward_errors turns them into a 500 error envelope
"""

from datetime import date

from fastapi import APIRouter, Depends

from rates_api.api.forwarding import forward_errors
from rates_api.api.query_params import require_query_params
from rates_api.infrastructure.rates_client import RatesClient, get_rates_client
from rates_api.schemas.envelopes import ErrorEnvelope, RatesEnvelope

router = APIRouter(prefix="/api", tags=["rates"])


def get_today() -> date:
    """FastAPI dependency for the current date (overridable in tests)."""
    return date.today()


@router.api_route(
    "/rates",
    methods=["GET", "HEAD"],
    response_model=RatesEnvelope,
    responses={400: {"model": ErrorEnvelope}, 500: {"model": ErrorEnvelope}},
    dependencies=[Depends(require_query_params("base", "currency"))],
)
@forward_errors
async def read_rates(
    base: str,
    currency: str,
    client: RatesClient = Depends(get_rates_client),
    today: date = Depends(get_today),
):
    """Look up `base` → `currency` rates from the upstream service."""
    rates = await client.latest(base, currency)
    return {
        "status": "success",
        "results": {
            "base": base,
            "date": today.strftime("%Y-%m-%d"),
            "rates": rates,
        },
    }
