"""Tests for the polygon validator."""

from __future__ import annotations

import math

import pytest

from worldmap.core.config import ValidationConfig
from worldmap.core.errors import PolygonValidationError
from worldmap.core.types import Coordinate
from worldmap.geometry.validation import PolygonValidator


def _pts(*pairs: tuple[float, float]) -> list[Coordinate]:
    return [Coordinate(lat=lat, lon=lon) for lat, lon in pairs]


@pytest.fixture
def validator():
    return PolygonValidator()


class TestPointCount:
    def test_four_points_accepted(self, validator, square):
        result = validator.validate(square)
        assert result.valid
        assert result.errors == []

    @pytest.mark.parametrize("count", [0, 1, 2, 3])
    def test_fewer_than_four_rejected(self, validator, square, count):
        result = validator.validate(square[:count])
        assert not result.valid
        assert "At least 4 coordinate points" in result.errors[0]

    def test_count_applies_to_open_list(self, validator):
        # A closed triangle has four points but only three vertices.
        points = _pts((41.0, 29.0), (41.0, 29.1), (41.1, 29.1), (41.0, 29.0))
        result = validator.validate(points)
        assert not result.valid
        assert "distinct vertices" in result.errors[0]

    def test_repeated_vertex_rejected(self, validator):
        points = _pts((41.0, 29.0), (41.0, 29.1), (41.0, 29.1), (41.1, 29.1))
        assert not validator.validate(points).valid

    def test_closed_square_accepted(self, validator):
        points = _pts((41.0, 29.0), (41.0, 29.1), (41.1, 29.1), (41.1, 29.0), (41.0, 29.0))
        assert validator.validate(points).valid

    def test_lower_minimum_still_needs_four_vertices(self, square):
        validator = PolygonValidator(ValidationConfig(min_points=3))
        result = validator.validate(square[:3])
        assert not result.valid
        assert result.errors == ["At least 4 distinct vertices are required, got 3"]
        assert validator.validate(square).valid

    def test_custom_minimum(self, square):
        validator = PolygonValidator(ValidationConfig(min_points=5))
        assert not validator.validate(square).valid


class TestCoordinateRange:
    def test_latitude_out_of_range(self, validator):
        points = _pts((91.0, 29.0), (41.0, 29.1), (41.1, 29.1), (41.1, 29.0))
        result = validator.validate(points)
        assert not result.valid
        assert result.errors == ["Point 0: latitude 91.0 is outside [-90, 90]"]

    def test_longitude_out_of_range(self, validator):
        points = _pts((41.0, 29.0), (41.0, 181.0), (41.1, 29.1), (41.1, 29.0))
        result = validator.validate(points)
        assert not result.valid
        assert "Point 1: longitude" in result.errors[0]

    def test_nan_rejected(self, validator):
        points = _pts((math.nan, 29.0), (41.0, 29.1), (41.1, 29.1), (41.1, 29.0))
        result = validator.validate(points)
        assert not result.valid
        assert "finite" in result.errors[0]

    def test_boundary_values_accepted(self, validator):
        points = _pts((-90.0, -180.0), (-90.0, 180.0), (90.0, 180.0), (90.0, -180.0))
        assert validator.validate(points).valid

    def test_range_check_can_be_disabled(self):
        validator = PolygonValidator(ValidationConfig(check_coordinate_range=False))
        points = _pts((91.0, 29.0), (91.0, 29.1), (91.1, 29.1), (91.1, 29.0))
        assert validator.validate(points).valid


class TestSimplePolygon:
    def test_bowtie_rejected(self, validator):
        points = _pts((0.0, 0.0), (0.0, 1.0), (1.0, 0.0), (1.0, 1.0))
        result = validator.validate(points)
        assert not result.valid
        assert "not simple" in result.errors[0]

    def test_bowtie_allowed_when_check_disabled(self):
        validator = PolygonValidator(ValidationConfig(check_simple_polygon=False))
        points = _pts((0.0, 0.0), (0.0, 1.0), (1.0, 0.0), (1.0, 1.0))
        assert validator.validate(points).valid

    def test_concave_polygon_accepted(self, validator):
        points = _pts((0.0, 0.0), (0.0, 2.0), (1.0, 1.0), (2.0, 2.0), (2.0, 0.0))
        assert validator.validate(points).valid


class TestEnsureValid:
    def test_raises_with_errors(self, validator, square):
        with pytest.raises(PolygonValidationError) as exc_info:
            validator.ensure_valid(square[:3])
        assert exc_info.value.errors
        assert isinstance(exc_info.value, ValueError)

    def test_passes_silently(self, validator, square):
        validator.ensure_valid(square)
