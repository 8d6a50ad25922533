"""Bearer token issuing and verification.

Tokens are HS256 JWTs signed with ``ACCESS_TOKEN_SECRET`` and carry only the
caller's email plus ``iat``/``exp``. Nothing is persisted; a token is valid
until it expires.

We use python-jose for signing and verification. Every failure while reading
a token (bad header, bad signature, expiry, missing claim) surfaces as
``AuthError`` so callers only need to handle one type.
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from pydantic import BaseModel

from rental.core.config import Settings
from rental.core.errors import AuthError, ConfigurationError, ValidationError

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


class TokenClaims(BaseModel):
    """Decoded identity of a verified bearer token."""

    email: str
    iat: Optional[int] = None
    exp: Optional[int] = None


def _secret(settings: Settings) -> str:
    secret = settings.access_token_secret
    if secret is None or not secret.get_secret_value():
        raise ConfigurationError("Token signing is not configured")
    return secret.get_secret_value()


def issue_token(email: str | None, settings: Settings, now: datetime | None = None) -> str:
    """Sign a token for ``email`` that expires ``token_ttl_minutes`` after ``now``."""
    if not email:
        raise ValidationError("email required")
    issued_at = now or datetime.now(timezone.utc)
    claims = {
        "email": email,
        "iat": int(issued_at.timestamp()),
        "exp": int((issued_at + timedelta(minutes=settings.token_ttl_minutes)).timestamp()),
    }
    return jwt.encode(claims, _secret(settings), algorithm=settings.token_algorithm)


def verify_token(token: str | None, settings: Settings) -> TokenClaims:
    if not token:
        raise AuthError("No token provided")
    try:
        claims = jwt.decode(token, _secret(settings), algorithms=[settings.token_algorithm])
    except JWTError as exc:
        logger.info("bearer token rejected", extra={"reason": str(exc)})
        raise AuthError() from exc
    email = claims.get("email")
    if not email or not isinstance(email, str):
        raise AuthError()
    return TokenClaims(email=email, iat=claims.get("iat"), exp=claims.get("exp"))


def bearer_token(authorization: str | None) -> str:
    """Extract the raw token from an ``Authorization: Bearer <token>`` header."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise AuthError("No token provided")
    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise AuthError("No token provided")
    return token


__all__ = ["TokenClaims", "issue_token", "verify_token", "bearer_token"]
