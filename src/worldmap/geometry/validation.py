"""Structural validation of client-submitted parcel outlines."""

from __future__ import annotations

import logging
import math
from typing import Sequence

from pydantic import BaseModel, Field
from shapely.geometry import Polygon
from shapely.validation import explain_validity

from worldmap.core.config import ValidationConfig
from worldmap.core.errors import PolygonValidationError
from worldmap.core.types import Coordinate
from worldmap.geometry.coordinates import to_closed_ring

logger = logging.getLogger(__name__)

# Stored rings always carry at least this many distinct vertices, whatever
# the configured minimum for the submitted list.
MIN_DISTINCT_VERTICES = 4


class ValidationResult(BaseModel):
    valid: bool
    errors: list[str] = Field(default_factory=list)


class PolygonValidator:
    """Checks an open point list before it is closed and persisted.

    The point-count rule applies to the list exactly as the client sent it.
    Range and simplicity checks follow the configured policy.
    """

    def __init__(self, config: ValidationConfig | None = None) -> None:
        self._config = config or ValidationConfig()

    @property
    def config(self) -> ValidationConfig:
        return self._config

    def validate(self, points: Sequence[Coordinate]) -> ValidationResult:
        min_points = self._config.min_points
        if len(points) < min_points:
            return ValidationResult(
                valid=False,
                errors=[f"At least {min_points} coordinate points are required, got {len(points)}"],
            )

        errors: list[str] = []
        if self._config.check_coordinate_range:
            for index, point in enumerate(points):
                err = _check_point(point)
                if err:
                    errors.append(f"Point {index}: {err}")
        if errors:
            return ValidationResult(valid=False, errors=errors)

        distinct = _distinct_vertices(points)
        if distinct < MIN_DISTINCT_VERTICES:
            errors.append(
                f"At least {MIN_DISTINCT_VERTICES} distinct vertices are required, got {distinct}"
            )
        elif self._config.check_simple_polygon:
            ring = Polygon(to_closed_ring(points))
            if not ring.is_valid:
                errors.append(f"Polygon is not simple: {explain_validity(ring)}")

        return ValidationResult(valid=not errors, errors=errors)

    def ensure_valid(self, points: Sequence[Coordinate]) -> None:
        """Raise ``PolygonValidationError`` unless ``points`` can be stored."""
        result = self.validate(points)
        if not result.valid:
            logger.info("Rejected parcel outline: %s", "; ".join(result.errors))
            raise PolygonValidationError(result.errors)


def _check_point(point: Coordinate) -> str | None:
    if not (math.isfinite(point.lat) and math.isfinite(point.lon)):
        return "coordinates must be finite numbers"
    if not -90.0 <= point.lat <= 90.0:
        return f"latitude {point.lat} is outside [-90, 90]"
    if not -180.0 <= point.lon <= 180.0:
        return f"longitude {point.lon} is outside [-180, 180]"
    return None


def _distinct_vertices(points: Sequence[Coordinate]) -> int:
    # A trailing copy of the first point closes the ring; it is not a vertex.
    ring = to_closed_ring(points)
    return len(set(ring[:-1]))
