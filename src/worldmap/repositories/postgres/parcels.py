"""PostgreSQL parcel repository."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import select

from worldmap.db.engine import DatabaseManager
from worldmap.db.models import ParcelRow
from worldmap.geometry.coordinates import Ring, ring_from_geojson, ring_to_geojson
from worldmap.parcels.models import Parcel


class PostgresParcelRepository:
    """Postgres-backed parcel storage.

    Each call runs in its own session and commits once, so every mutation
    is atomic for the single row it touches.
    """

    def __init__(self, db: DatabaseManager) -> None:
        self._db = db

    async def create_parcel(
        self,
        owner_id: str,
        name: str,
        description: str | None,
        ring: Ring,
    ) -> Parcel:
        now = datetime.now(timezone.utc)
        row = ParcelRow(
            owner_id=owner_id,
            name=name,
            description=description,
            geometry=ring_to_geojson(ring),
            created_at=now,
            updated_at=now,
        )
        async with self._db.session() as db:
            db.add(row)
            await db.commit()
            return self._row_to_parcel(row)

    async def get_parcel(self, owner_id: str, parcel_id: int) -> Parcel | None:
        async with self._db.session() as db:
            row = await self._owned(db, owner_id, parcel_id)
            if row is None:
                return None
            return self._row_to_parcel(row)

    async def list_parcels(self, owner_id: str) -> list[Parcel]:
        async with self._db.session() as db:
            result = await db.execute(
                select(ParcelRow).where(ParcelRow.owner_id == owner_id)
            )
            return [self._row_to_parcel(r) for r in result.scalars().all()]

    async def update_parcel(
        self,
        owner_id: str,
        parcel_id: int,
        name: str,
        description: str | None,
        ring: Ring,
    ) -> Parcel | None:
        async with self._db.session() as db:
            row = await self._owned(db, owner_id, parcel_id)
            if row is None:
                return None
            row.name = name
            row.description = description
            row.geometry = ring_to_geojson(ring)
            row.updated_at = datetime.now(timezone.utc)
            await db.commit()
            return self._row_to_parcel(row)

    async def delete_parcel(self, owner_id: str, parcel_id: int) -> bool:
        async with self._db.session() as db:
            row = await self._owned(db, owner_id, parcel_id)
            if row is None:
                return False
            await db.delete(row)
            await db.commit()
            return True

    @staticmethod
    async def _owned(db, owner_id: str, parcel_id: int) -> ParcelRow | None:
        result = await db.execute(
            select(ParcelRow).where(
                ParcelRow.id == parcel_id,
                ParcelRow.owner_id == owner_id,
            )
        )
        return result.scalar_one_or_none()

    @staticmethod
    def _row_to_parcel(row: ParcelRow) -> Parcel:
        return Parcel(
            id=row.id,
            owner_id=row.owner_id,
            name=row.name,
            description=row.description,
            ring=ring_from_geojson(row.geometry),
            created_at=_as_utc(row.created_at),
            updated_at=_as_utc(row.updated_at),
        )


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes even for timezone-aware columns.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
