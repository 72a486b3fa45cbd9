"""
app/schemas/auth.py

Purpose: Request/response bodies for /auth routes
"""

from pydantic import BaseModel
from typing import Optional


class CredentialsRequest(BaseModel):
    # Optional so a missing field reaches the service and becomes a ValidationError
    email: Optional[str] = None
    password: Optional[str] = None


class UserOut(BaseModel):
    id: str
    email: str


class RegisterResponse(BaseModel):
    ok: bool = True
    user: UserOut


class LoginResponse(BaseModel):
    token: str
    user: UserOut
