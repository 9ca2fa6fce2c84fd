"""Tests for the parcel transfer mapper."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from worldmap.core.errors import PolygonValidationError
from worldmap.core.types import Coordinate
from worldmap.geometry.coordinates import to_closed_ring
from worldmap.geometry.validation import PolygonValidator
from worldmap.parcels.mapper import to_response, to_stored_geometry, to_write_response
from worldmap.parcels.models import Parcel, ParcelRequest


def _parcel(ring) -> Parcel:
    ts = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    return Parcel(
        id=7,
        owner_id="owner-1",
        name="Garden",
        description="Back garden",
        ring=ring,
        created_at=ts,
        updated_at=ts,
    )


class TestToStoredGeometry:
    def test_returns_closed_lon_lat_ring(self, square):
        request = ParcelRequest(name="Garden", coordinates=square)
        ring = to_stored_geometry(request, PolygonValidator())
        assert len(ring) == 5
        assert ring[0] == (29.0, 41.0)
        assert ring[0] == ring[-1]

    def test_rejects_short_outline(self, square):
        request = ParcelRequest(name="Garden", coordinates=square[:3])
        with pytest.raises(PolygonValidationError):
            to_stored_geometry(request, PolygonValidator())


class TestToResponse:
    def test_strips_closing_point(self, square):
        response = to_response(_parcel(to_closed_ring(square)))
        assert response.coordinates == square
        assert response.id == 7
        assert response.description == "Back garden"

    def test_serializes_camel_case(self, square):
        body = to_response(_parcel(to_closed_ring(square))).model_dump(by_alias=True, mode="json")
        assert set(body) == {"id", "name", "description", "coordinates", "createdAt", "updatedAt"}
        assert body["coordinates"][0] == {"lat": 41.0, "lon": 29.0}
        assert "ownerId" not in body


class TestToWriteResponse:
    def test_echoes_submitted_closed_outline(self, square):
        submitted = square + [square[0].model_copy()]
        request = ParcelRequest(name="Garden", coordinates=submitted)
        parcel = _parcel(to_closed_ring(submitted))

        response = to_write_response(parcel, request)
        assert len(response.coordinates) == 5
        assert response.coordinates == submitted

    def test_response_points_are_copies(self, square):
        request = ParcelRequest(name="Garden", coordinates=square)
        response = to_write_response(_parcel(to_closed_ring(square)), request)
        response.coordinates[0].lat = 0.0
        assert request.coordinates[0].lat == 41.0

    def test_read_back_of_closed_submission_is_open(self, square):
        submitted = square + [Coordinate(lat=41.0, lon=29.0)]
        response = to_response(_parcel(to_closed_ring(submitted)))
        assert len(response.coordinates) == 4
