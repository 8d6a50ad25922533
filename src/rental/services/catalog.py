from typing import Any

from rental.db.store import Store, store_operation
from rental.repositories import catalog as catalog_repo
from rental.schemas.base import encode_documents


async def list_menu(store: Store) -> list[Any]:
    with store_operation("Error fetching menu"):
        return encode_documents(await catalog_repo.list_menu(store))

async def list_reviews(store: Store) -> list[Any]:
    with store_operation("Error fetching reviews"):
        return encode_documents(await catalog_repo.list_reviews(store))
