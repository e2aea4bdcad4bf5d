"""Envelope Schemas — uniform JSON wrappers for success and error responses.

Invariants:
    - Success envelopes carry status="success" plus data (profile) or results (rates)
    - ErrorEnvelope carries exactly status and message
    - RateResults.rates is passed through untouched (Any values, no float coercion)
"""

from typing import Any, Literal

from pydantic import BaseModel


class ProfileData(BaseModel):
    """Fixed identity fields."""
    fullname: str
    profession: str
    greeting: str
    email: str
    phone: str


class ProfileEnvelope(BaseModel):
    status: Literal["success"] = "success"
    data: ProfileData


class RateResults(BaseModel):
    """Rate lookup result — base echoed, date as YYYY-MM-DD."""
    base: str
    date: str
    rates: dict[str, Any]


class RatesEnvelope(BaseModel):
    status: Literal["success"] = "success"
    results: RateResults


class ErrorEnvelope(BaseModel):
    """Error response — status is "fail" (4xx) or "error" (everything else)."""
    status: Literal["fail", "error"]
    message: str
