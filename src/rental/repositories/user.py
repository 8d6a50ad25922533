from typing import Any, Optional

from bson import ObjectId
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from rental.db.store import Store
from rental.models.user import Role, promotion


async def get_by_email(store: Store, email: str) -> Optional[dict[str, Any]]:
    return await store.users.find_one({"email": email})

async def find_any_admin(store: Store) -> Optional[dict[str, Any]]:
    return await store.users.find_one({"role": Role.ADMIN.value})

async def list_all(store: Store) -> list[dict[str, Any]]:
    return await store.users.find({}).to_list(length=None)

async def insert(store: Store, document: dict[str, Any]) -> InsertOneResult:
    return await store.users.insert_one(document)

async def promote_by_email(store: Store, email: str) -> UpdateResult:
    return await store.users.update_one({"email": email}, promotion())

async def promote_by_id(store: Store, id: ObjectId) -> UpdateResult:
    return await store.users.update_one({"_id": id}, promotion())

async def delete_by_id(store: Store, id: ObjectId) -> DeleteResult:
    return await store.users.delete_one({"_id": id})
