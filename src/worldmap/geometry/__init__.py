"""Parcel geometry: ring normalization and polygon validation."""

from worldmap.geometry.coordinates import to_closed_ring, to_open_points
from worldmap.geometry.validation import PolygonValidator, ValidationResult

__all__ = [
    "PolygonValidator",
    "ValidationResult",
    "to_closed_ring",
    "to_open_points",
]
