"""Profile Route — GET / returns the fixed identity envelope.

Invariants:
    - Always 200 for GET and HEAD, query parameters ignored
    - No IO, deterministic output
"""

from fastapi import APIRouter

from rates_api.core.profile import get_profile
from rates_api.schemas.envelopes import ProfileEnvelope

router = APIRouter(tags=["profile"])


@router.api_route("/", methods=["GET", "HEAD"], response_model=ProfileEnvelope)
def read_profile():
    """Return the profile record in the success envelope."""
    return {"status": "success", "data": get_profile()}
