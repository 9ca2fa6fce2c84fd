"""Conversion between client point lists and stored polygon rings.

Clients speak latitude-first open rings: ``[{lat, lon}, ...]`` with the
closing point left implicit. Storage holds longitude-first closed rings
(GeoJSON order) whose last position repeats the first. Both functions are
pure and return new sequences; callers' lists are never mutated.

Equality is exact on both components. Map-drawn points are echoed back
bit-for-bit, so no tolerance is applied anywhere.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from worldmap.core.types import Coordinate

Position = tuple[float, float]
"""A stored ``(lon, lat)`` pair."""

Ring = tuple[Position, ...]


def to_closed_ring(points: Iterable[Coordinate]) -> Ring:
    """Swap each point to ``(lon, lat)`` and close the ring.

    The first position is appended only when the last one differs from it,
    so an already-closed input is not closed twice.
    """
    ring = [(p.lon, p.lat) for p in points]
    if ring and ring[0] != ring[-1]:
        ring.append(ring[0])
    return tuple(ring)


def to_open_points(ring: Sequence[Sequence[float]]) -> list[Coordinate]:
    """Swap each stored position back to latitude first and drop the closing point.

    Only a final position equal to the first is dropped. A legacy ring that
    was never closed comes back with every stored point.
    """
    points = [Coordinate(lat=pos[1], lon=pos[0]) for pos in ring]
    if len(points) > 1 and _same(points[0], points[-1]):
        points.pop()
    return points


def ring_to_geojson(ring: Sequence[Sequence[float]]) -> dict[str, Any]:
    """Encode a ring as a GeoJSON Polygon with a single exterior ring."""
    return {
        "type": "Polygon",
        "coordinates": [[[float(pos[0]), float(pos[1])] for pos in ring]],
    }


def ring_from_geojson(geometry: dict[str, Any]) -> Ring:
    """Decode the exterior ring of a stored GeoJSON Polygon."""
    if geometry.get("type") != "Polygon":
        raise ValueError(f"Expected a Polygon geometry, got {geometry.get('type')!r}")
    rings = geometry.get("coordinates") or []
    if not rings:
        return ()
    return tuple((float(pos[0]), float(pos[1])) for pos in rings[0])


def _same(a: Coordinate, b: Coordinate) -> bool:
    return a.lat == b.lat and a.lon == b.lon
