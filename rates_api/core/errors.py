"""Application Error — the single typed failure value for every request path.

Invariants:
    - Every error has a message (str), status_code (int) and status ("fail" | "error")
    - status is derived from status_code: codes starting with "4" are "fail", all else "error"
    - to_response() produces the wire envelope {status, message} and nothing else

Design Decisions:
    - One concrete exception type instead of a hierarchy: the API only distinguishes
      client faults from server faults
"""

DEFAULT_STATUS_CODE = 500
DEFAULT_STATUS = "error"
DEFAULT_ERROR_MESSAGE = "Something went horribly wrong!"


def classify_status(status_code: int) -> str:
    """Map an HTTP status code to the envelope classification."""
    return "fail" if str(status_code).startswith("4") else "error"


class AppError(Exception):
    """Failure carrying an HTTP status code and its classification."""

    def __init__(self, message: str, status_code: int = DEFAULT_STATUS_CODE):
        super().__init__(message)
        self._message = message
        self._status_code = status_code
        self._status = classify_status(status_code)

    @property
    def message(self) -> str:
        return self._message

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def status(self) -> str:
        return self._status

    def to_response(self) -> dict:
        """Convert to the error envelope."""
        return {"status": self.status, "message": self.message}

    def __repr__(self) -> str:
        return (
            f"AppError(message={self.message!r}, "
            f"status_code={self.status_code})"
        )


def missing_query_param(field: str) -> AppError:
    """Client error for a required query parameter that was not supplied."""
    return AppError(
        f"Invalid query param - property {field} is required", 400,
    )
