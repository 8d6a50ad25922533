from fastapi import APIRouter, Depends

from rental.api import deps
from rental.core.config import Settings
from rental.core.security import issue_token
from rental.schemas.token import TokenRequest, TokenResponse

router = APIRouter(tags=["auth"])


@router.post("/jwt", response_model=TokenResponse, summary="Issue a bearer token",
             description="Sign a one hour token for the given email.")
async def issue_token_route(payload: TokenRequest, settings: Settings = Depends(deps.get_settings)):
    return TokenResponse(token=issue_token(payload.email, settings))
