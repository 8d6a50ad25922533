from fastapi import APIRouter, Depends
from rental.api import deps
from rental.db.store import Store
from rental.services.health import check_store

router = APIRouter(prefix="/health", tags=["health"])

@router.get("/liveness")
async def liveness():
    """Verify whether the API is ready to receive traffic."""
    return {"status": "ok"}

@router.get("/readiness")
async def readiness(store: Store = Depends(deps.get_store)):
    """Verify whether MongoDB answers, i.e. the API can process traffic."""
    if await check_store(store):
        return {"status": "ready"}
    return {"status": "degraded"}
