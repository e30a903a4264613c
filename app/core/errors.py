"""Base error type shared by every package exposed through the API.

Every error carries a stable ``code``, a human ``message``, an optional
``details`` string and the HTTP status the API layer renders it with.
Nothing here is retried: errors surface to the immediate caller.
"""

from typing import Optional


class ServiceError(Exception):
    code: str = "INTERNAL_ERROR"
    http_status: int = 500

    def __init__(self, message: str, *, details: Optional[str] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        if code is not None:
            self.code = code

    def to_response(self) -> dict:
        error = {"code": self.code, "message": self.message}
        if self.details is not None:
            error["details"] = self.details
        return {"error": error}


class DecodeError(ServiceError):
    """A stored row could not be decoded into its schema."""

    code = "DECODE_FAILURE"
    http_status = 500


class PersistenceError(ServiceError):
    code = "PERSISTENCE_FAILURE"
    http_status = 500
