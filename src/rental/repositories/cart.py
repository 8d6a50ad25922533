from typing import Any, Optional

from bson import ObjectId
from pymongo.results import DeleteResult, InsertOneResult

from rental.db.store import Store


async def list_for(store: Store, email: Optional[str] = None) -> list[dict[str, Any]]:
    query = {"email": email} if email else {}
    return await store.carts.find(query).to_list(length=None)

async def insert(store: Store, document: dict[str, Any]) -> InsertOneResult:
    return await store.carts.insert_one(document)

async def delete_by_id(store: Store, id: ObjectId) -> DeleteResult:
    return await store.carts.delete_one({"_id": id})
