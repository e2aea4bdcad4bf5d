"""Query Parameter Guard — presence check for required query parameters.

Invariants:
    - Names checked in declaration order; only the first missing one is reported
    - Presence only: an empty value (?base=) counts as present
    - Missing parameter → AppError 400 "Invalid query param - property <name> is required"
"""

from collections.abc import Callable

from fastapi import Request

from rates_api.core.errors import missing_query_param


def find_missing(query_names, required: tuple[str, ...]) -> str | None:
    """Return the first required name absent from query_names, if any."""
    for name in required:
        if name not in query_names:
            return name
    return None


def require_query_params(*fields: str) -> Callable[[Request], None]:
    """Build a FastAPI dependency enforcing presence of `fields`."""
    if not fields:
        raise ValueError("require_query_params needs at least one field")

    def guard(request: Request) -> None:
        missing = find_missing(request.query_params, fields)
        if missing is not None:
            raise missing_query_param(missing)

    guard.__name__ = f"require_query_params_{'_'.join(fields)}"
    return guard
