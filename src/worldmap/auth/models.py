"""Authentication data models."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, Field

from worldmap.core.types import WireModel


class User(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    username: str
    email: str | None = None
    password_hash: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class TokenRecord(BaseModel):
    token: str
    user_id: str
    expires_at: datetime


class RegisterRequest(WireModel):
    username: str = ""
    email: str | None = None
    password: str = ""


class LoginRequest(WireModel):
    username: str
    password: str


class AuthResponse(WireModel):
    token: str
    username: str
    email: str = ""


class CurrentUser(WireModel):
    id: str
    username: str
    email: str | None = None


class TokenValidation(BaseModel):
    valid: bool
    user_id: str | None = None
    expires_at: datetime | None = None
