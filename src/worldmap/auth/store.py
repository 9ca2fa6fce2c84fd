"""In-memory stores for user accounts and bearer tokens."""

from __future__ import annotations

from worldmap.auth.models import TokenRecord, User


class UserStore:
    """In-memory dict store for users, indexed by id, username and email."""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    def save_user(self, user: User) -> None:
        self._users[user.id] = user

    def get_user(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    def get_user_by_email(self, email: str) -> User | None:
        for user in self._users.values():
            if user.email == email:
                return user
        return None


class TokenStore:
    """In-memory dict store for issued bearer tokens."""

    def __init__(self) -> None:
        self._tokens: dict[str, TokenRecord] = {}

    def save_token(self, record: TokenRecord) -> None:
        self._tokens[record.token] = record

    def get_token(self, token: str) -> TokenRecord | None:
        return self._tokens.get(token)

    def delete_token(self, token: str) -> bool:
        return self._tokens.pop(token, None) is not None
