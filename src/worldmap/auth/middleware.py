"""Authentication middleware and dependencies."""

from __future__ import annotations

from fastapi import Depends, HTTPException, Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response


class AuthMiddleware(BaseHTTPMiddleware):
    """Middleware that extracts a Bearer token and sets request.state.user_id."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request.state.user_id = None
        request.state.auth_token = None

        auth_header = request.headers.get("Authorization", "")
        if auth_header.startswith("Bearer "):
            token = auth_header[7:]
            provider = getattr(request.app.state, "auth_provider", None)
            if provider is not None:
                validation = await provider.validate_token(token)
                if validation.valid:
                    request.state.user_id = validation.user_id
                    request.state.auth_token = token

        return await call_next(request)


def _current_user_id(request: Request) -> str:
    user_id = getattr(request.state, "user_id", None)
    if not user_id:
        raise HTTPException(
            status_code=401,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id


def require_user():
    """FastAPI dependency returning the authenticated owner id, or 401."""
    return Depends(_current_user_id)
