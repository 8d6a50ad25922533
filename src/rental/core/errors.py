"""Project-wide custom exceptions.

Services and security helpers raise these instead of ``HTTPException`` or raw
driver errors (``pymongo.errors.PyMongoError``, ``jose.JWTError``). Each type
carries the HTTP status it maps to; ``rental.api.main`` renders every
``RentalError`` as a ``{"message": ...}`` JSON body with that status.

Add new errors here rather than scattering small ``class XError(Exception):``
definitions across the codebase.
"""
from __future__ import annotations


class RentalError(Exception):
    """Base class for all custom project exceptions."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(RentalError):
    """A required field is missing or a value has the wrong shape."""

    status_code = 400
    default_message = "invalid request"


class InvalidIdError(RentalError):
    """An identifier in the path is not a valid ObjectId."""

    status_code = 400
    default_message = "invalid id"

    def __init__(self, value: str | None = None):
        self.value = value
        super().__init__()


class AuthError(RentalError):
    """Missing, malformed, expired or badly signed bearer token."""

    status_code = 401
    default_message = "Unauthorized access"


class AuthzError(RentalError):
    """The caller is authenticated but lacks the admin role."""

    status_code = 403
    default_message = "forbidden access"


class StoreError(RentalError):
    """Raised when a MongoDB operation fails.

    The message is the route-level description shown to clients; the driver
    error is chained as ``__cause__`` and logged, never returned.
    """


class ConfigurationError(RentalError):
    """Required runtime configuration (e.g. the signing secret) is absent."""


__all__ = [
    "RentalError",
    "ValidationError",
    "InvalidIdError",
    "AuthError",
    "AuthzError",
    "StoreError",
    "ConfigurationError",
]
