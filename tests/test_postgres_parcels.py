"""Tests for PostgresParcelRepository with SQLite async."""

from __future__ import annotations

import pytest

from worldmap.core.types import Coordinate
from worldmap.db.engine import DatabaseManager
from worldmap.geometry.coordinates import to_closed_ring, to_open_points
from worldmap.repositories.postgres.parcels import PostgresParcelRepository


@pytest.fixture
async def repo():
    db = DatabaseManager("sqlite+aiosqlite:///:memory:")
    await db.create_schema()
    yield PostgresParcelRepository(db)
    await db.close()


@pytest.fixture
def ring(square):
    return to_closed_ring(square)


async def test_create_parcel(repo, ring):
    parcel = await repo.create_parcel("u1", "Garden", "Back garden", ring)
    assert parcel.id >= 1
    assert parcel.owner_id == "u1"
    assert parcel.ring == ring
    assert parcel.created_at.tzinfo is not None


async def test_get_parcel_round_trips_ring_exactly(repo):
    points = [
        Coordinate(lat=41.015137, lon=28.979530),
        Coordinate(lat=41.0151371234567, lon=28.9795309876543),
        Coordinate(lat=41.0162, lon=28.9811),
        Coordinate(lat=41.0149, lon=28.9822),
    ]
    created = await repo.create_parcel("u1", "Precise", None, to_closed_ring(points))
    found = await repo.get_parcel("u1", created.id)
    assert to_open_points(found.ring) == points


async def test_get_parcel_other_owner(repo, ring):
    created = await repo.create_parcel("u1", "Garden", None, ring)
    assert await repo.get_parcel("u2", created.id) is None


async def test_get_parcel_not_found(repo):
    assert await repo.get_parcel("u1", 12345) is None


async def test_list_parcels_scoped(repo, ring):
    await repo.create_parcel("u1", "A", None, ring)
    await repo.create_parcel("u2", "B", None, ring)
    await repo.create_parcel("u1", "C", None, ring)
    names = sorted(p.name for p in await repo.list_parcels("u1"))
    assert names == ["A", "C"]
    assert await repo.list_parcels("u3") == []


async def test_update_parcel(repo, ring, square):
    created = await repo.create_parcel("u1", "A", "old", ring)
    new_ring = to_closed_ring(list(reversed(square)))
    updated = await repo.update_parcel("u1", created.id, "B", None, new_ring)
    assert updated.name == "B"
    assert updated.description is None
    assert updated.ring == new_ring

    found = await repo.get_parcel("u1", created.id)
    assert found.ring == new_ring


async def test_update_parcel_other_owner(repo, ring):
    created = await repo.create_parcel("u1", "A", None, ring)
    assert await repo.update_parcel("u2", created.id, "B", None, ring) is None
    assert (await repo.get_parcel("u1", created.id)).name == "A"


async def test_delete_parcel(repo, ring):
    created = await repo.create_parcel("u1", "A", None, ring)
    assert await repo.delete_parcel("u2", created.id) is False
    assert await repo.delete_parcel("u1", created.id) is True
    assert await repo.get_parcel("u1", created.id) is None
    assert await repo.delete_parcel("u1", created.id) is False
