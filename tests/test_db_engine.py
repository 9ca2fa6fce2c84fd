"""Tests for DatabaseManager with SQLite async."""

from __future__ import annotations

import pytest
from sqlalchemy import inspect, select

from worldmap.db.engine import DatabaseManager


@pytest.fixture
async def db_manager():
    """Create a DatabaseManager with an in-memory SQLite database."""
    manager = DatabaseManager("sqlite+aiosqlite:///:memory:")
    await manager.create_schema()
    yield manager
    await manager.close()


async def test_engine_creation(db_manager):
    assert db_manager.engine is not None


async def test_session_creation(db_manager):
    async with db_manager.session() as session:
        assert session is not None


async def test_create_schema_creates_tables(db_manager):
    async with db_manager.engine.connect() as conn:
        tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
    assert {"users", "auth_tokens", "parcels"} <= set(tables)


async def test_create_schema_is_idempotent(db_manager):
    await db_manager.create_schema()


async def test_insert_and_query_parcel_row(db_manager):
    """Round-trip: insert a parcel row and read its geometry back."""
    from worldmap.db.models import ParcelRow

    geometry = {
        "type": "Polygon",
        "coordinates": [[[29.0, 41.0], [29.1, 41.0], [29.1, 41.1], [29.0, 41.1], [29.0, 41.0]]],
    }
    async with db_manager.session() as session:
        session.add(ParcelRow(owner_id="u1", name="Garden", geometry=geometry))
        await session.commit()

    async with db_manager.session() as session:
        result = await session.execute(select(ParcelRow).where(ParcelRow.owner_id == "u1"))
        found = result.scalar_one()
        assert found.geometry == geometry
        assert found.created_at is not None
