"""Pydantic Schemas — response envelopes for API endpoints.

Invariants:
    - Every response body is one of the envelopes defined here
"""
