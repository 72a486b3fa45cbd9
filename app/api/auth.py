"""
app/api/auth.py

Purpose: Registration and login

Passwords and tokens go through services/credentials.py; the shipped scheme
is a plaintext placeholder and is not fit for real users.
"""

from fastapi import APIRouter, Body, Depends
from typing import Optional

from app.db.memory import MemoryStore, get_store
from app.schemas.auth import CredentialsRequest, LoginResponse, RegisterResponse
from app.services.user_service import login_user, register_user

router = APIRouter()


@router.post("/register", response_model=RegisterResponse)
async def register(
    payload: Optional[CredentialsRequest] = Body(None),
    store: MemoryStore = Depends(get_store)
):
    payload = payload or CredentialsRequest()
    user = register_user(store, payload.email, payload.password)
    return {"ok": True, "user": user.public()}


@router.post("/login", response_model=LoginResponse)
async def login(
    payload: Optional[CredentialsRequest] = Body(None),
    store: MemoryStore = Depends(get_store)
):
    payload = payload or CredentialsRequest()
    token, user = login_user(store, payload.email, payload.password)
    return {"token": token, "user": user.public()}
