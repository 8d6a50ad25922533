"""Admin role checks.

``is_admin`` is the single place deciding whether a verified caller holds the
admin role. It fails closed: a missing record, an unknown role or a failing
lookup all count as "not an admin".
"""
from __future__ import annotations

import logging
from typing import Optional

from rental.core.security import TokenClaims
from rental.db.store import Store
from rental.models.user import Role, role_of
from rental.repositories import user as user_repo
from rental.schemas.base import normalize_email

logger = logging.getLogger(__name__)

__all__ = ["is_admin"]


async def is_admin(store: Store, identity: Optional[TokenClaims]) -> bool:
    if identity is None or not identity.email:
        return False
    try:
        requester = await user_repo.get_by_email(store, normalize_email(identity.email))
    except Exception:
        logger.warning("admin lookup failed", extra={"email": identity.email}, exc_info=True)
        return False
    return role_of(requester) is Role.ADMIN
