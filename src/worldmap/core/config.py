"""Application configuration loaded from environment and config files."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class DatabaseConfig(BaseSettings):
    """Durable store configuration.

    Without a ``database_url`` the app falls back to in-memory stores.
    """

    model_config = {"env_prefix": "WORLDMAP_DB_"}

    database_url: str | None = None
    echo: bool = False
    pool_size: int = 5
    create_schema: bool = True


class AuthConfig(BaseSettings):
    """Authentication configuration."""

    model_config = {"env_prefix": "WORLDMAP_AUTH_"}

    token_expiry_days: int = 30
    min_password_length: int = 4
    require_unique_email: bool = True


class GeocodeConfig(BaseSettings):
    """Nominatim geocoding proxy configuration."""

    model_config = {"env_prefix": "WORLDMAP_GEOCODE_"}

    base_url: str = "https://nominatim.openstreetmap.org"
    timeout_seconds: float = 20.0
    user_agent: str = "WorldMapLeaflet/1.0"
    contact_email: str = "admin@example.com"
    country_codes: str = "tr"
    language: str = "tr"
    limit: int = 8


class ValidationConfig(BaseSettings):
    """Polygon validation policy."""

    model_config = {"env_prefix": "WORLDMAP_VALIDATION_"}

    min_points: int = 4
    check_coordinate_range: bool = True
    check_simple_polygon: bool = True


class CORSConfig(BaseSettings):
    """CORS configuration for the map front-end."""

    model_config = {"env_prefix": "WORLDMAP_CORS_"}

    allow_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5008", "https://localhost:7182"]
    )


class Settings(BaseSettings):
    """Root application settings."""

    model_config = {"env_prefix": "WORLDMAP_"}

    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    db: DatabaseConfig = Field(default_factory=DatabaseConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)
    geocode: GeocodeConfig = Field(default_factory=GeocodeConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    cors: CORSConfig = Field(default_factory=CORSConfig)
