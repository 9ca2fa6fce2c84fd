"""Owner-scoped parcel operations.

Every write validates and closes the submitted outline before touching the
store; every result leaves through the transfer mapper.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from worldmap.core.errors import ParcelNotFoundError
from worldmap.geometry.validation import PolygonValidator
from worldmap.parcels.mapper import to_response, to_stored_geometry, to_write_response
from worldmap.parcels.models import ParcelRequest, ParcelResponse
from worldmap.repositories import resolve

if TYPE_CHECKING:
    from worldmap.repositories.protocols import ParcelRepository

logger = logging.getLogger(__name__)


class ParcelService:
    """Create, read, update and delete parcels on behalf of one owner at a time."""

    def __init__(
        self,
        store: ParcelRepository,
        validator: PolygonValidator | None = None,
    ) -> None:
        self._store = store
        self._validator = validator or PolygonValidator()

    async def create(self, owner_id: str, request: ParcelRequest) -> ParcelResponse:
        ring = to_stored_geometry(request, self._validator)
        parcel = await resolve(
            self._store.create_parcel(owner_id, request.name, request.description, ring)
        )
        logger.info("Created parcel %s for owner %s", parcel.id, owner_id)
        return to_write_response(parcel, request)

    async def get(self, owner_id: str, parcel_id: int) -> ParcelResponse:
        parcel = await resolve(self._store.get_parcel(owner_id, parcel_id))
        if parcel is None:
            raise ParcelNotFoundError(parcel_id)
        return to_response(parcel)

    async def list(self, owner_id: str) -> list[ParcelResponse]:
        parcels = await resolve(self._store.list_parcels(owner_id))
        return [to_response(p) for p in parcels]

    async def update(
        self, owner_id: str, parcel_id: int, request: ParcelRequest
    ) -> ParcelResponse:
        # A foreign or missing id is reported before the body is looked at.
        if await resolve(self._store.get_parcel(owner_id, parcel_id)) is None:
            raise ParcelNotFoundError(parcel_id)
        ring = to_stored_geometry(request, self._validator)
        parcel = await resolve(
            self._store.update_parcel(
                owner_id, parcel_id, request.name, request.description, ring
            )
        )
        if parcel is None:
            raise ParcelNotFoundError(parcel_id)
        logger.info("Updated parcel %s for owner %s", parcel_id, owner_id)
        return to_write_response(parcel, request)

    async def delete(self, owner_id: str, parcel_id: int) -> None:
        deleted = await resolve(self._store.delete_parcel(owner_id, parcel_id))
        if not deleted:
            raise ParcelNotFoundError(parcel_id)
        logger.info("Deleted parcel %s for owner %s", parcel_id, owner_id)
