"""Protocol definitions for all repository interfaces.

Each protocol mirrors the public methods of the corresponding in-memory
store class exactly, enabling both sync (in-memory) and async (Postgres)
implementations to satisfy the same interface.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from worldmap.auth.models import TokenRecord, User
from worldmap.geometry.coordinates import Ring
from worldmap.parcels.models import Parcel


@runtime_checkable
class ParcelRepository(Protocol):
    """Protocol for owner-scoped parcel storage.

    Every read, update and delete filters on ``(parcel_id, owner_id)``.
    """

    def create_parcel(
        self,
        owner_id: str,
        name: str,
        description: str | None,
        ring: Ring,
    ) -> Parcel: ...

    def get_parcel(self, owner_id: str, parcel_id: int) -> Parcel | None: ...

    def list_parcels(self, owner_id: str) -> list[Parcel]: ...

    def update_parcel(
        self,
        owner_id: str,
        parcel_id: int,
        name: str,
        description: str | None,
        ring: Ring,
    ) -> Parcel | None: ...

    def delete_parcel(self, owner_id: str, parcel_id: int) -> bool: ...


@runtime_checkable
class UserRepository(Protocol):
    """Protocol for user account storage."""

    def save_user(self, user: User) -> None: ...

    def get_user(self, user_id: str) -> User | None: ...

    def get_user_by_username(self, username: str) -> User | None: ...

    def get_user_by_email(self, email: str) -> User | None: ...


@runtime_checkable
class AuthTokenRepository(Protocol):
    """Protocol for bearer token storage."""

    def save_token(self, record: TokenRecord) -> None: ...

    def get_token(self, token: str) -> TokenRecord | None: ...

    def delete_token(self, token: str) -> bool: ...
