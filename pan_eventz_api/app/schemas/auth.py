"""
Pydantic models for admin authentication.

``LoginRequest`` leaves both fields optional so the login route can
answer a missing credential with its own 400 message instead of the
generic validation error.
"""

from typing import Optional

from pydantic import BaseModel


class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class UserRead(BaseModel):
    id: int
    username: str
    name: Optional[str] = None
    role: str


class LoginResponse(BaseModel):
    token: str
    user: UserRead
