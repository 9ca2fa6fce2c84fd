"""PostgreSQL user account repository."""

from __future__ import annotations

from datetime import timezone

from sqlalchemy import select

from worldmap.auth.models import User
from worldmap.db.engine import DatabaseManager
from worldmap.db.models import UserRow


class PostgresUserRepository:
    """Postgres-backed user storage."""

    def __init__(self, db: DatabaseManager) -> None:
        self._db = db

    async def save_user(self, user: User) -> None:
        async with self._db.session() as db:
            existing = await db.get(UserRow, user.id)
            if existing:
                existing.username = user.username
                existing.email = user.email
                existing.password_hash = user.password_hash
            else:
                db.add(
                    UserRow(
                        id=user.id,
                        username=user.username,
                        email=user.email,
                        password_hash=user.password_hash,
                        created_at=user.created_at,
                    )
                )
            await db.commit()

    async def get_user(self, user_id: str) -> User | None:
        async with self._db.session() as db:
            row = await db.get(UserRow, user_id)
            return self._row_to_user(row) if row else None

    async def get_user_by_username(self, username: str) -> User | None:
        async with self._db.session() as db:
            result = await db.execute(
                select(UserRow).where(UserRow.username == username)
            )
            row = result.scalar_one_or_none()
            return self._row_to_user(row) if row else None

    async def get_user_by_email(self, email: str) -> User | None:
        async with self._db.session() as db:
            result = await db.execute(select(UserRow).where(UserRow.email == email))
            row = result.scalar_one_or_none()
            return self._row_to_user(row) if row else None

    @staticmethod
    def _row_to_user(row: UserRow) -> User:
        created_at = row.created_at
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return User(
            id=row.id,
            username=row.username,
            email=row.email,
            password_hash=row.password_hash,
            created_at=created_at,
        )
