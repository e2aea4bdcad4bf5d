"""Error Forwarding — wraps async route handlers so every failure reaches the error handler.

Invariants:
    - The wrapped handler keeps the original signature (FastAPI dependency injection still applies)
    - AppError and HTTPException pass through unchanged
    - Any other exception is forwarded once as a generic AppError(500)
    - The original exception is chained (__cause__); error_handlers logs its traceback,
      the response never exposes it
"""

import functools
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from starlette.exceptions import HTTPException as StarletteHTTPException

from rates_api.core.errors import AppError, DEFAULT_ERROR_MESSAGE

T = TypeVar("T")


def forward_errors(
    handler: Callable[..., Awaitable[T]],
) -> Callable[..., Awaitable[T]]:
    """Adapt an async route operation to forward its failures."""

    @functools.wraps(handler)
    async def wrapper(*args: Any, **kwargs: Any) -> T:
        try:
            return await handler(*args, **kwargs)
        except (AppError, StarletteHTTPException):
            raise
        except Exception as exc:
            raise AppError(DEFAULT_ERROR_MESSAGE) from exc

    return wrapper
