"""FastAPI application for WorldMap parcels.

Provides REST API endpoints for account management, owner-scoped parcel
CRUD, the geocoding proxy, and health checks.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from worldmap.auth.middleware import AuthMiddleware
from worldmap.auth.provider import PasswordAuthProvider
from worldmap.core.config import Settings
from worldmap.core.types import HealthStatus
from worldmap.db.engine import DatabaseManager
from worldmap.geocode.client import NominatimClient
from worldmap.geometry.validation import PolygonValidator
from worldmap.parcels.service import ParcelService
from worldmap.parcels.store import ParcelStore
from worldmap.web.auth_router import router as auth_router
from worldmap.web.geocode_router import router as geocode_router
from worldmap.web.parcel_router import router as parcel_router

logger = logging.getLogger(__name__)

_VERSION = "0.1.0"


def create_app(
    settings: Settings | None = None,
    geocoder: NominatimClient | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Uses the factory pattern so tests can create isolated app instances
    with mock dependencies.

    Args:
        settings: Application settings. Defaults to Settings().
        geocoder: Optional pre-built geocoding client. The caller owns it and
            closes it; only a client built here is closed on shutdown.

    Returns:
        A configured FastAPI instance.
    """
    if settings is None:
        settings = Settings()

    logging.getLogger("worldmap").setLevel(settings.log_level.upper())

    owns_geocoder = geocoder is None
    if geocoder is None:
        geocoder = NominatimClient(settings.geocode)

    # Stores: Postgres when a database URL is configured, in-memory otherwise
    db_manager: DatabaseManager | None = None
    if settings.db.database_url:
        from worldmap.repositories.postgres.auth_tokens import PostgresAuthTokenRepository
        from worldmap.repositories.postgres.parcels import PostgresParcelRepository
        from worldmap.repositories.postgres.users import PostgresUserRepository

        db_manager = DatabaseManager(
            settings.db.database_url,
            echo=settings.db.echo,
            pool_size=settings.db.pool_size,
        )
        parcel_store = PostgresParcelRepository(db_manager)
        auth_provider = PasswordAuthProvider(
            config=settings.auth,
            users=PostgresUserRepository(db_manager),
            tokens=PostgresAuthTokenRepository(db_manager),
        )
    else:
        parcel_store = ParcelStore()
        auth_provider = PasswordAuthProvider(config=settings.auth)

    parcel_service = ParcelService(
        store=parcel_store,
        validator=PolygonValidator(settings.validation),
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if db_manager is not None and settings.db.create_schema:
            await db_manager.create_schema()
        yield
        if owns_geocoder:
            await geocoder.close()
        if db_manager is not None:
            await db_manager.close()

    app = FastAPI(
        title="WorldMap Parcels",
        description="Draw, store and search land parcels on a map",
        version=_VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(AuthMiddleware)

    # Store on app state for access in route handlers
    app.state.settings = settings
    app.state.db_manager = db_manager
    app.state.parcel_store = parcel_store
    app.state.parcel_service = parcel_service
    app.state.auth_provider = auth_provider
    app.state.geocoder = geocoder

    @app.exception_handler(RequestValidationError)
    async def bad_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})

    app.include_router(auth_router)
    app.include_router(parcel_router)
    app.include_router(geocode_router)

    @app.get("/api/health", response_model=HealthStatus)
    async def health_check() -> HealthStatus:
        """Health check endpoint."""
        return HealthStatus(
            service="worldmap-parcels",
            healthy=True,
            details={
                "version": _VERSION,
                "store": "postgres" if db_manager is not None else "memory",
            },
        )

    logger.info(
        "WorldMap app created (store=%s)",
        "postgres" if db_manager is not None else "memory",
    )
    return app

