"""FastAPI dependencies for bearer token authentication.

``get_current_identity`` validates an incoming ``Authorization: Bearer
<token>`` header with the shared HS256 secret and returns the decoded claims.
``require_admin`` additionally runs the admin gate and rejects non-admins
with 403.

Both raise project errors (``AuthError`` / ``AuthzError``) rather than
``HTTPException``; the application's exception handlers render them.
"""
from __future__ import annotations

from typing import Optional

from fastapi import Depends, Header, Request

from rental.core.config import Settings, get_settings
from rental.core.errors import AuthzError
from rental.core.security import TokenClaims, bearer_token, verify_token
from rental.db.store import Store, get_store
from rental.services.access import is_admin


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with (see ``create_app``)."""
    settings = getattr(request.app.state, "settings", None)
    return settings if settings is not None else get_settings()


async def get_current_identity(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_app_settings),
) -> TokenClaims:
    return verify_token(bearer_token(authorization), settings)


async def require_admin(
    identity: TokenClaims = Depends(get_current_identity),
    store: Store = Depends(get_store),
) -> TokenClaims:
    if not await is_admin(store, identity):
        raise AuthzError()
    return identity


__all__ = ["get_app_settings", "get_current_identity", "require_admin"]
