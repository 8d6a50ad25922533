from typing import Any, Optional

from rental.db.store import Store, object_id, store_operation
from rental.repositories import cart as cart_repo
from rental.schemas.base import DeleteResult, InsertResult, encode_documents, normalize_email
from rental.schemas.cart import CartItemCreate

__all__ = ["list_cart", "add_to_cart", "remove_from_cart"]


async def list_cart(store: Store, email: Optional[str] = None) -> list[Any]:
    with store_operation("Error fetching carts"):
        documents = await cart_repo.list_for(store, normalize_email(email) if email else None)
    return encode_documents(documents)

async def add_to_cart(store: Store, item: CartItemCreate) -> InsertResult:
    with store_operation("Error adding to cart"):
        result = await cart_repo.insert(store, item.document())
    return InsertResult(acknowledged=result.acknowledged, inserted_id=result.inserted_id, message="item added")

async def remove_from_cart(store: Store, item_id: str) -> DeleteResult:
    # no owner check: any caller holding an id may remove that cart row
    oid = object_id(item_id)
    with store_operation("Error deleting cart item"):
        result = await cart_repo.delete_by_id(store, oid)
    return DeleteResult(acknowledged=result.acknowledged, deleted_count=result.deleted_count, message="item removed")
