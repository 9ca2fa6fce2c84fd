"""FastAPI router proxying address search to the geocoding service."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request

from worldmap.core.errors import GeocodeTimeoutError, GeocodeUpstreamError

router = APIRouter()


@router.get("/api/geocode")
async def geocode(request: Request, q: str) -> Any:
    """Return upstream address candidates for ``q`` unchanged."""
    geocoder = getattr(request.app.state, "geocoder", None)
    if geocoder is None:
        raise HTTPException(status_code=503, detail="Geocoder not available")
    try:
        return await geocoder.search(q)
    except GeocodeTimeoutError as e:
        raise HTTPException(status_code=504, detail=str(e))
    except GeocodeUpstreamError as e:
        raise HTTPException(status_code=502, detail=str(e))
