from typing import Any, Optional

from fastapi import APIRouter, Depends, Header

from rental.api import deps
from rental.core.config import Settings
from rental.core.security import TokenClaims
from rental.db.store import Store
from rental.schemas.base import DeleteResult, InsertResult, UpdateResult
from rental.schemas.user import AdminStatus, UserCreate
from rental.services.user import (
    admin_status,
    bootstrap_admin,
    delete_user,
    list_users,
    promote_user,
    register_user,
)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[dict[str, Any]], summary="List users",
            description="All user records in storage order. Admin only.")
async def list_users_route(
    _: TokenClaims = Depends(deps.require_admin),
    store: Store = Depends(deps.get_store),
):
    return await list_users(store)


@router.get("/admin/{email}", response_model=AdminStatus, summary="Check admin status",
            description="Callers may check their own email; checking anyone else requires admin.")
async def admin_status_route(
    email: str,
    identity: TokenClaims = Depends(deps.get_current_identity),
    store: Store = Depends(deps.get_store),
):
    return await admin_status(store, identity, email)


@router.post("", response_model=InsertResult, summary="Register a user",
             description="Create a user with role 'user'. Re-registering an email is a no-op.")
async def register_user_route(payload: UserCreate, store: Store = Depends(deps.get_store)):
    return await register_user(store, payload)


@router.post("/admin",
             summary="Create or promote an admin",
             description="Open while no admin exists; afterwards requires an admin bearer token.")
async def bootstrap_admin_route(
    payload: UserCreate,
    authorization: Optional[str] = Header(None),
    store: Store = Depends(deps.get_store),
    settings: Settings = Depends(deps.get_settings),
):
    return await bootstrap_admin(store, payload, authorization, settings)


@router.patch("/admin/{user_id}", response_model=UpdateResult, summary="Promote a user to admin")
async def promote_user_route(
    user_id: str,
    _: TokenClaims = Depends(deps.require_admin),
    store: Store = Depends(deps.get_store),
):
    return await promote_user(store, user_id)


@router.delete("/{user_id}", response_model=DeleteResult, summary="Delete a user")
async def delete_user_route(
    user_id: str,
    _: TokenClaims = Depends(deps.require_admin),
    store: Store = Depends(deps.get_store),
):
    return await delete_user(store, user_id)
