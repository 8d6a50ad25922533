"""MongoDB access for the application.

A single ``Store`` is built at startup (see ``rental.api.main``), kept on
``app.state.store`` and handed to routes through ``rental.api.deps.get_store``.
It owns the motor client; nothing else in the codebase opens connections.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator

import certifi
from bson import ObjectId
from bson.errors import InvalidId
from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING
from pymongo.errors import OperationFailure, PyMongoError

from rental.core.config import Settings
from rental.core.errors import InvalidIdError, StoreError

logger = logging.getLogger(__name__)

USERS = "users"
MENU = "menu"
REVIEWS = "reviews"
CARTS = "carts"


class Store:
    def __init__(self, client: Any, database_name: str) -> None:
        self.client = client
        self.db = client[database_name]
        self.database_name = database_name

    @classmethod
    def from_settings(cls, settings: Settings) -> "Store":
        url = settings.mongo_url_resolved
        options: dict[str, Any] = {}
        if url.startswith("mongodb+srv://"):
            options["tlsCAFile"] = certifi.where()
        client = AsyncIOMotorClient(url, **options)
        logger.info("mongo client created", extra={"database": settings.db_name})
        return cls(client, settings.db_name)

    @property
    def users(self):
        return self.db[USERS]

    @property
    def menu(self):
        return self.db[MENU]

    @property
    def reviews(self):
        return self.db[REVIEWS]

    @property
    def carts(self):
        return self.db[CARTS]

    async def ensure_indexes(self) -> bool:
        """Create the unique email index that backs idempotent registration."""
        try:
            await self.users.create_index([("email", ASCENDING)], unique=True, name="uq_users_email")
        except OperationFailure as exc:
            # existing duplicate emails; serve without the index rather than refuse to start
            logger.warning("unique email index not created", extra={"collection": USERS, "reason": str(exc)})
            return False
        logger.info("indexes ensured", extra={"collection": USERS})
        return True

    async def ping(self) -> bool:
        await self.client.admin.command("ping")
        return True

    def close(self) -> None:
        self.client.close()
        logger.info("mongo client closed", extra={"database": self.database_name})


@contextmanager
def store_operation(message: str) -> Iterator[None]:
    """Translate driver failures inside the block into ``StoreError(message)``."""
    try:
        yield
    except PyMongoError as exc:
        logger.error("%s: %s", message, exc, exc_info=True)
        raise StoreError(message) from exc


def get_store(request: Request) -> Store:
    return request.app.state.store


def object_id(value: str) -> ObjectId:
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as exc:
        raise InvalidIdError(value) from exc


__all__ = ["Store", "get_store", "store_operation", "object_id", "USERS", "MENU", "REVIEWS", "CARTS"]
