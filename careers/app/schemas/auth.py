from typing import Optional

from pydantic import BaseModel


class LoginRequest(BaseModel):
    # Missing or null credentials fall through to the normal 401 path.
    username: Optional[str] = None
    password: Optional[str] = None


class UserSummary(BaseModel):
    id: int
    username: str
    isAdmin: bool


class LoginResponse(BaseModel):
    user: UserSummary
