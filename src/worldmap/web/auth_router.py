"""FastAPI router for account registration, login and token management."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from worldmap.auth.middleware import require_user
from worldmap.auth.models import AuthResponse, CurrentUser, LoginRequest, RegisterRequest
from worldmap.core.errors import UserRegistrationError

router = APIRouter()


@router.post("/api/auth/register", response_model=AuthResponse)
async def register(body: RegisterRequest, request: Request) -> AuthResponse:
    provider = request.app.state.auth_provider
    try:
        return await provider.register(body)
    except UserRegistrationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/api/auth/login", response_model=AuthResponse)
async def login(body: LoginRequest, request: Request) -> AuthResponse:
    provider = request.app.state.auth_provider
    result = await provider.authenticate(body)
    if result is None:
        raise HTTPException(status_code=401, detail="Invalid username or password")
    return result


@router.get("/api/auth/me", response_model=CurrentUser)
async def me(request: Request, user_id: str = require_user()) -> CurrentUser:
    user = await request.app.state.auth_provider.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=401, detail="Authentication required")
    return CurrentUser(id=user.id, username=user.username, email=user.email)


@router.post("/api/auth/logout", status_code=204)
async def logout(request: Request, user_id: str = require_user()) -> None:
    """Revoke the bearer token used for this request."""
    await request.app.state.auth_provider.revoke_token(request.state.auth_token)
