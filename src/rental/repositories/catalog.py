"""Read-only collections served as-is: the menu and customer reviews."""
from typing import Any

from rental.db.store import Store


async def list_menu(store: Store) -> list[dict[str, Any]]:
    return await store.menu.find({}).to_list(length=None)

async def list_reviews(store: Store) -> list[dict[str, Any]]:
    return await store.reviews.find({}).to_list(length=None)
