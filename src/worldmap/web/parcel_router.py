"""FastAPI router for owner-scoped parcel CRUD."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request, Response

from worldmap.auth.middleware import require_user
from worldmap.core.errors import ParcelNotFoundError, PolygonValidationError
from worldmap.parcels.models import ParcelRequest, ParcelResponse
from worldmap.parcels.service import ParcelService

router = APIRouter()


def _get_parcel_service(request: Request) -> ParcelService:
    service = getattr(request.app.state, "parcel_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Parcel service not available")
    return service


@router.get("/api/parcels", response_model=list[ParcelResponse])
async def list_parcels(request: Request, user_id: str = require_user()) -> list[ParcelResponse]:
    """List every parcel owned by the caller."""
    return await _get_parcel_service(request).list(user_id)


@router.post("/api/parcels", response_model=ParcelResponse, status_code=201)
async def create_parcel(
    body: ParcelRequest,
    request: Request,
    response: Response,
    user_id: str = require_user(),
) -> ParcelResponse:
    service = _get_parcel_service(request)
    try:
        created = await service.create(user_id, body)
    except PolygonValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    response.headers["Location"] = f"/api/parcels/{created.id}"
    return created


@router.get("/api/parcels/{parcel_id}", response_model=ParcelResponse)
async def get_parcel(
    parcel_id: int, request: Request, user_id: str = require_user()
) -> ParcelResponse:
    try:
        return await _get_parcel_service(request).get(user_id, parcel_id)
    except ParcelNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/api/parcels/{parcel_id}", response_model=ParcelResponse)
async def update_parcel(
    parcel_id: int,
    body: ParcelRequest,
    request: Request,
    user_id: str = require_user(),
) -> ParcelResponse:
    service = _get_parcel_service(request)
    try:
        return await service.update(user_id, parcel_id, body)
    except PolygonValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ParcelNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/api/parcels/{parcel_id}", status_code=204)
async def delete_parcel(
    parcel_id: int, request: Request, user_id: str = require_user()
) -> Response:
    try:
        await _get_parcel_service(request).delete(user_id, parcel_id)
    except ParcelNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
