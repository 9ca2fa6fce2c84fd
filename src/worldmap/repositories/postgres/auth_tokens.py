"""PostgreSQL auth token repository."""

from __future__ import annotations

from datetime import timezone

from worldmap.auth.models import TokenRecord
from worldmap.db.engine import DatabaseManager
from worldmap.db.models import AuthTokenRow


class PostgresAuthTokenRepository:
    """Postgres-backed auth token storage."""

    def __init__(self, db: DatabaseManager) -> None:
        self._db = db

    async def save_token(self, record: TokenRecord) -> None:
        async with self._db.session() as db:
            existing = await db.get(AuthTokenRow, record.token)
            if existing:
                existing.user_id = record.user_id
                existing.expires_at = record.expires_at
            else:
                db.add(
                    AuthTokenRow(
                        token=record.token,
                        user_id=record.user_id,
                        expires_at=record.expires_at,
                    )
                )
            await db.commit()

    async def get_token(self, token: str) -> TokenRecord | None:
        async with self._db.session() as db:
            row = await db.get(AuthTokenRow, token)
            if row is None:
                return None
            expires_at = row.expires_at
            if expires_at.tzinfo is None:
                expires_at = expires_at.replace(tzinfo=timezone.utc)
            return TokenRecord(token=row.token, user_id=row.user_id, expires_at=expires_at)

    async def delete_token(self, token: str) -> bool:
        async with self._db.session() as db:
            row = await db.get(AuthTokenRow, token)
            if row is None:
                return False
            await db.delete(row)
            await db.commit()
            return True
