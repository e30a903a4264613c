from typing import Optional

from app.core.errors import DecodeError, PersistenceError, ServiceError

__all__ = ["DecodeError", "EmptyCollectionError", "NotFoundError", "PersistenceError"]


class NotFoundError(ServiceError):
    """A point lookup by id or slug matched nothing.

    Callers are expected to pass known-valid identifiers, so this is a
    contract violation rather than a normal empty result.
    """

    code = "CATEGORY_NOT_FOUND"
    http_status = 404


class EmptyCollectionError(ServiceError):
    """Listing every category found none at all."""

    code = "8-all-categories"
    http_status = 404

    def __init__(self, message: str = "No categories exist", *, details: Optional[str] = "No records"):
        super().__init__(message, details=details)
