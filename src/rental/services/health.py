from rental.db.store import Store

async def check_store(store: Store) -> bool:
    """Simple MongoDB connectivity check.
    Sends a ``ping`` command and returns True if the server answers.
    """
    try:
        return await store.ping()
    except Exception:  # pragma: no cover - defensive fallback
        return False
