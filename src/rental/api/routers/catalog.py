from typing import Any

from fastapi import APIRouter, Depends

from rental.api import deps
from rental.db.store import Store
from rental.services.catalog import list_menu, list_reviews

router = APIRouter(tags=["catalog"])


@router.get("/menu", response_model=list[dict[str, Any]], summary="List menu items")
async def list_menu_route(store: Store = Depends(deps.get_store)):
    return await list_menu(store)


@router.get("/reviews", response_model=list[dict[str, Any]], summary="List reviews")
async def list_reviews_route(store: Store = Depends(deps.get_store)):
    return await list_reviews(store)
