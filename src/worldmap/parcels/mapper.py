"""Shapes stored parcels into wire responses and requests into stored rings."""

from __future__ import annotations

from worldmap.geometry.coordinates import Ring, to_closed_ring, to_open_points
from worldmap.geometry.validation import PolygonValidator
from worldmap.parcels.models import Parcel, ParcelRequest, ParcelResponse


def to_response(parcel: Parcel) -> ParcelResponse:
    """Build the response for a parcel read back from storage."""
    return ParcelResponse(
        id=parcel.id,
        name=parcel.name,
        description=parcel.description,
        coordinates=to_open_points(parcel.ring),
        created_at=parcel.created_at,
        updated_at=parcel.updated_at,
    )


def to_write_response(parcel: Parcel, request: ParcelRequest) -> ParcelResponse:
    """Build the response for a parcel just created or updated.

    Echoes the submitted points so the response carries exactly as many
    points as the client sent.
    """
    return ParcelResponse(
        id=parcel.id,
        name=parcel.name,
        description=parcel.description,
        coordinates=[p.model_copy() for p in request.coordinates],
        created_at=parcel.created_at,
        updated_at=parcel.updated_at,
    )


def to_stored_geometry(request: ParcelRequest, validator: PolygonValidator) -> Ring:
    """Validate the request outline and return the closed ring to persist.

    Raises:
        PolygonValidationError: If the outline is rejected.
    """
    validator.ensure_valid(request.coordinates)
    return to_closed_ring(request.coordinates)
