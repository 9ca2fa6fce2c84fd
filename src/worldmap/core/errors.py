"""Domain exceptions shared across WorldMap modules.

Routers translate these into HTTP responses; nothing below the web layer
knows about status codes.
"""

from __future__ import annotations


class PolygonValidationError(ValueError):
    """Submitted coordinates cannot form a storable parcel polygon."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class ParcelNotFoundError(KeyError):
    """No parcel with this id is visible to the requesting owner.

    Raised identically for missing ids and ids owned by someone else.
    """

    def __init__(self, parcel_id: int) -> None:
        self.parcel_id = parcel_id
        super().__init__(parcel_id)

    def __str__(self) -> str:
        return f"Parcel {self.parcel_id} not found"


class UserRegistrationError(ValueError):
    """Registration request rejected (duplicate user, weak password, ...)."""


class GeocodeUpstreamError(RuntimeError):
    """The geocoding service failed or answered with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class GeocodeTimeoutError(GeocodeUpstreamError):
    """The geocoding service did not answer within the configured timeout."""
