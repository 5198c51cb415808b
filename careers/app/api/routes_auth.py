from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from careers.app.api.deps import get_store
from careers.app.api.errors import internal_errors
from careers.app.schemas.auth import LoginRequest, LoginResponse, UserSummary
from careers.domain.services.auth_service import authenticate
from careers.infrastructure.persistence.in_memory_repo import InMemoryRecordStore

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    body: Optional[LoginRequest] = None,
    store: InMemoryRecordStore = Depends(get_store),
):
    """
    Check a username/password pair against the stored users.

    This only confirms the credentials; no session or token is issued.
    """
    body = body or LoginRequest()
    with internal_errors("Login failed"):
        user = authenticate(store, body.username, body.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid credentials")

    return LoginResponse(
        user=UserSummary(id=user.id, username=user.username, isAdmin=user.admin),
    )
