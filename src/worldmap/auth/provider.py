"""Authentication provider Protocol and username/password implementation."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from worldmap.auth.models import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    TokenRecord,
    TokenValidation,
    User,
)
from worldmap.auth.passwords import hash_password, verify_password
from worldmap.auth.store import TokenStore, UserStore
from worldmap.core.config import AuthConfig
from worldmap.core.errors import UserRegistrationError
from worldmap.repositories import resolve

if TYPE_CHECKING:
    from worldmap.repositories.protocols import AuthTokenRepository, UserRepository

logger = logging.getLogger(__name__)


@runtime_checkable
class AuthProvider(Protocol):
    """Protocol for authentication providers.

    The rest of the app only needs ``validate_token`` to turn a bearer
    token into a stable owner id.
    """

    async def register(self, request: RegisterRequest) -> AuthResponse: ...

    async def authenticate(self, credentials: LoginRequest) -> AuthResponse | None: ...

    async def validate_token(self, token: str) -> TokenValidation: ...

    async def revoke_token(self, token: str) -> bool: ...

    async def get_user(self, user_id: str) -> User | None: ...


class PasswordAuthProvider:
    """Username/password accounts with opaque, expiring bearer tokens.

    Works against either the in-memory stores or the Postgres repositories.
    """

    def __init__(
        self,
        config: AuthConfig | None = None,
        users: UserRepository | None = None,
        tokens: AuthTokenRepository | None = None,
    ) -> None:
        self._config = config or AuthConfig()
        self._users = users if users is not None else UserStore()
        self._tokens = tokens if tokens is not None else TokenStore()
        self._token_expiry = timedelta(days=self._config.token_expiry_days)

    async def register(self, request: RegisterRequest) -> AuthResponse:
        """Create an account and return a token for it.

        Raises:
            UserRegistrationError: On missing fields, a short password, or a
                username/email that is already taken.
        """
        username = request.username.strip()
        if not username or not request.password.strip():
            raise UserRegistrationError("Username and password are required")
        if len(request.password) < self._config.min_password_length:
            raise UserRegistrationError(
                f"Password must be at least {self._config.min_password_length} characters"
            )
        if await resolve(self._users.get_user_by_username(username)) is not None:
            raise UserRegistrationError(f"Username {username!r} is already taken")
        email = request.email.strip() if request.email else None
        if email and self._config.require_unique_email:
            if await resolve(self._users.get_user_by_email(email)) is not None:
                raise UserRegistrationError(f"Email {email!r} is already registered")

        user = User(
            username=username,
            email=email or None,
            password_hash=hash_password(request.password),
        )
        await resolve(self._users.save_user(user))
        logger.info("Registered user %s", user.id)
        return await self._issue(user)

    async def authenticate(self, credentials: LoginRequest) -> AuthResponse | None:
        user = await resolve(self._users.get_user_by_username(credentials.username))
        if user is None or not verify_password(credentials.password, user.password_hash):
            logger.info("Failed login for username %r", credentials.username)
            return None
        return await self._issue(user)

    async def validate_token(self, token: str) -> TokenValidation:
        record = await resolve(self._tokens.get_token(token))
        if record is None:
            return TokenValidation(valid=False)

        if datetime.now(timezone.utc) > record.expires_at:
            await resolve(self._tokens.delete_token(token))
            return TokenValidation(valid=False)

        return TokenValidation(
            valid=True,
            user_id=record.user_id,
            expires_at=record.expires_at,
        )

    async def revoke_token(self, token: str) -> bool:
        return await resolve(self._tokens.delete_token(token))

    async def get_user(self, user_id: str) -> User | None:
        return await resolve(self._users.get_user(user_id))

    async def _issue(self, user: User) -> AuthResponse:
        record = TokenRecord(
            token=str(uuid.uuid4()),
            user_id=user.id,
            expires_at=datetime.now(timezone.utc) + self._token_expiry,
        )
        await resolve(self._tokens.save_token(record))
        return AuthResponse(
            token=record.token,
            username=user.username,
            email=user.email or "",
        )
