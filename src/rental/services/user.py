"""User service layer.

Implements the account lifecycle on top of the ``users`` repository:

* self-registration (absent -> user), idempotent on email
* the admin bootstrap endpoint (absent/user -> admin), open while no admin
  exists and admin-only afterwards
* promotion and deletion by id, which routes guard with ``require_admin``

The "is there an admin yet" check and the following write in
``bootstrap_admin`` are two separate round trips. Two unauthenticated calls
racing on an empty system can therefore both create an admin.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from pymongo.errors import DuplicateKeyError

from rental.core.config import Settings
from rental.core.errors import AuthError, AuthzError
from rental.core.security import TokenClaims, bearer_token, verify_token
from rental.db.store import Store, object_id, store_operation
from rental.models.user import Role, new_user_document, role_of
from rental.repositories import user as user_repo
from rental.schemas.base import DeleteResult, InsertResult, UpdateResult
from rental.schemas.base import encode_documents, normalize_email
from rental.schemas.user import AdminStatus, UserCreate
from rental.services.access import is_admin

logger = logging.getLogger(__name__)

__all__ = [
    "register_user",
    "bootstrap_admin",
    "admin_status",
    "list_users",
    "promote_user",
    "delete_user",
]

USER_EXISTS = "user already exists"


async def register_user(store: Store, data: UserCreate) -> InsertResult:
    with store_operation("Internal server error"):
        if await user_repo.get_by_email(store, data.email):
            return InsertResult(acknowledged=False, inserted_id=None, message=USER_EXISTS)
        try:
            result = await user_repo.insert(store, new_user_document(data.profile(), Role.USER))
        except DuplicateKeyError:
            # lost a race against a concurrent registration of the same email
            return InsertResult(acknowledged=False, inserted_id=None, message=USER_EXISTS)
    logger.info("user registered", extra={"email": data.email})
    return InsertResult(acknowledged=result.acknowledged, inserted_id=result.inserted_id, message="user created")


async def _require_admin_caller(store: Store, authorization: Optional[str], settings: Settings) -> None:
    try:
        token = bearer_token(authorization)
    except AuthError as exc:
        raise AuthError("Authentication required") from exc
    try:
        claims = verify_token(token, settings)
    except AuthError as exc:
        raise AuthError("Invalid token") from exc
    if not await is_admin(store, claims):
        raise AuthzError("Admin privileges required")


async def _promote_existing(store: Store, email: str, bootstrap: bool) -> UpdateResult:
    updated = await user_repo.promote_by_email(store, email)
    logger.info("user promoted to admin", extra={"email": email, "bootstrap": bootstrap})
    return UpdateResult(
        acknowledged=updated.acknowledged,
        matched_count=updated.matched_count,
        modified_count=updated.modified_count,
        message="User promoted to admin",
    )


async def bootstrap_admin(
    store: Store,
    data: UserCreate,
    authorization: Optional[str],
    settings: Settings,
) -> InsertResult | UpdateResult:
    """Create ``data.email`` as an admin, or promote it if it already exists.

    While the system has no admin the call needs no credentials. Once an
    admin exists, ``authorization`` must carry a bearer token of an admin.
    """
    with store_operation("Internal server error"):
        existing_admin = await user_repo.find_any_admin(store)
    if existing_admin is not None:
        await _require_admin_caller(store, authorization, settings)

    with store_operation("Internal server error"):
        if await user_repo.get_by_email(store, data.email):
            return await _promote_existing(store, data.email, bootstrap=existing_admin is None)
        try:
            inserted = await user_repo.insert(store, new_user_document(data.profile(), Role.ADMIN))
        except DuplicateKeyError:
            # the email was registered between the lookup and the insert
            return await _promote_existing(store, data.email, bootstrap=existing_admin is None)
    logger.info("admin user created", extra={"email": data.email, "bootstrap": existing_admin is None})
    return InsertResult(
        acknowledged=inserted.acknowledged,
        inserted_id=inserted.inserted_id,
        message="Admin user created successfully",
    )


async def admin_status(store: Store, identity: TokenClaims, email: str) -> AdminStatus:
    """Whether ``email`` is an admin. Callers may always ask about themselves."""
    email = normalize_email(email)
    if normalize_email(identity.email) != email and not await is_admin(store, identity):
        raise AuthzError()
    with store_operation("Error checking admin status"):
        user = await user_repo.get_by_email(store, email)
    return AdminStatus(admin=role_of(user) is Role.ADMIN)


async def list_users(store: Store) -> list[Any]:
    # raw documents: records with legacy roles or extra profile fields pass through
    with store_operation("Error fetching users"):
        documents = await user_repo.list_all(store)
    return encode_documents(documents)


async def promote_user(store: Store, user_id: str) -> UpdateResult:
    oid = object_id(user_id)
    with store_operation("Error promoting user"):
        result = await user_repo.promote_by_id(store, oid)
    logger.info("user promoted to admin", extra={"user_id": user_id, "matched": result.matched_count})
    return UpdateResult(
        acknowledged=result.acknowledged,
        matched_count=result.matched_count,
        modified_count=result.modified_count,
        message="User promoted to admin",
    )


async def delete_user(store: Store, user_id: str) -> DeleteResult:
    oid = object_id(user_id)
    with store_operation("Error deleting user"):
        result = await user_repo.delete_by_id(store, oid)
    logger.info("user deleted", extra={"user_id": user_id, "deleted": result.deleted_count})
    return DeleteResult(acknowledged=result.acknowledged, deleted_count=result.deleted_count, message="user deleted")
