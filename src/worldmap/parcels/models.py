"""Parcel domain model and wire request/response bodies."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints

from worldmap.core.types import Coordinate, WireModel
from worldmap.geometry.coordinates import Ring


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Parcel(BaseModel):
    """A stored parcel. ``ring`` is closed and longitude-first."""

    id: int
    owner_id: str
    name: str
    description: str | None = None
    ring: Ring
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)


class ParcelRequest(WireModel):
    """Body of ``POST /api/parcels`` and ``PUT /api/parcels/{id}``."""

    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    description: str | None = None
    coordinates: list[Coordinate]


class ParcelResponse(WireModel):
    id: int
    name: str
    description: str | None = None
    coordinates: list[Coordinate]
    created_at: datetime
    updated_at: datetime
