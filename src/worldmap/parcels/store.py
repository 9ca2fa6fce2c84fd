"""In-memory parcel store."""

from __future__ import annotations

import itertools
from datetime import datetime, timezone

from worldmap.geometry.coordinates import Ring
from worldmap.parcels.models import Parcel


class ParcelStore:
    """In-memory dict store for parcels, keyed by id and scoped by owner.

    Suitable for single-instance deployment and tests. Every lookup filters
    on ``owner_id`` so another owner's parcel reads as missing.
    """

    def __init__(self) -> None:
        self._parcels: dict[int, Parcel] = {}
        self._ids = itertools.count(1)

    def create_parcel(
        self,
        owner_id: str,
        name: str,
        description: str | None,
        ring: Ring,
    ) -> Parcel:
        now = datetime.now(timezone.utc)
        parcel = Parcel(
            id=next(self._ids),
            owner_id=owner_id,
            name=name,
            description=description,
            ring=tuple(ring),
            created_at=now,
            updated_at=now,
        )
        self._parcels[parcel.id] = parcel
        return parcel.model_copy()

    def get_parcel(self, owner_id: str, parcel_id: int) -> Parcel | None:
        parcel = self._owned(owner_id, parcel_id)
        return parcel.model_copy() if parcel else None

    def list_parcels(self, owner_id: str) -> list[Parcel]:
        return [
            p.model_copy() for p in self._parcels.values()
            if p.owner_id == owner_id
        ]

    def update_parcel(
        self,
        owner_id: str,
        parcel_id: int,
        name: str,
        description: str | None,
        ring: Ring,
    ) -> Parcel | None:
        existing = self._owned(owner_id, parcel_id)
        if existing is None:
            return None
        updated = existing.model_copy(
            update={
                "name": name,
                "description": description,
                "ring": tuple(ring),
                "updated_at": datetime.now(timezone.utc),
            }
        )
        self._parcels[parcel_id] = updated
        return updated.model_copy()

    def delete_parcel(self, owner_id: str, parcel_id: int) -> bool:
        if self._owned(owner_id, parcel_id) is None:
            return False
        del self._parcels[parcel_id]
        return True

    @property
    def parcel_count(self) -> int:
        return len(self._parcels)

    def _owned(self, owner_id: str, parcel_id: int) -> Parcel | None:
        parcel = self._parcels.get(parcel_id)
        if parcel is None or parcel.owner_id != owner_id:
            return None
        return parcel
