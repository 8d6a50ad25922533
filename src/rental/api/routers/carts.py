from typing import Any, Optional

from fastapi import APIRouter, Depends, Query

from rental.api import deps
from rental.db.store import Store
from rental.schemas.base import DeleteResult, InsertResult
from rental.schemas.cart import CartItemCreate
from rental.services.cart import add_to_cart, list_cart, remove_from_cart

router = APIRouter(prefix="/carts", tags=["carts"])


@router.get("", response_model=list[dict[str, Any]], summary="List cart items")
async def list_cart_route(
    email: Optional[str] = Query(None, description="Only items owned by this email"),
    store: Store = Depends(deps.get_store),
):
    return await list_cart(store, email)


@router.post("", response_model=InsertResult, summary="Add an item to a cart")
async def add_to_cart_route(payload: CartItemCreate, store: Store = Depends(deps.get_store)):
    return await add_to_cart(store, payload)


@router.delete("/{item_id}", response_model=DeleteResult, summary="Remove a cart item")
async def remove_from_cart_route(item_id: str, store: Store = Depends(deps.get_store)):
    return await remove_from_cart(store, item_id)
