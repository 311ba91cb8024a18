"""Configuration management for the landmark map."""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from .models.landmark import Position


class AppConfig(BaseModel):
    """Application-level configuration."""

    # Map bootstrap
    default_latitude: float = Field(
        default=43.2615047,
        ge=-90,
        le=90,
        description="Map center used when geolocation is unavailable",
    )
    default_longitude: float = Field(
        default=-79.9195802,
        ge=-180,
        le=180,
        description="Map center used when geolocation is unavailable",
    )
    default_zoom: int = Field(default=14, ge=0, le=22, description="Initial map zoom level")

    # Presentation
    coordinate_precision: int = Field(
        default=5,
        ge=0,
        le=10,
        description="Decimal digits shown for coordinates in the landmark list",
    )
    location_precision: int = Field(
        default=6,
        ge=0,
        le=10,
        description="Decimal digits written to the form by 'use my location'",
    )
    popup_image_width: int = Field(default=200, gt=0, description="Max popup image width in px")

    # Form
    require_image: bool = Field(default=True, description="Reject submissions without an image")
    max_image_bytes: int = Field(
        default=10 * 1024 * 1024,
        gt=0,
        description="Largest accepted image upload",
    )

    # Geolocation
    geolocation_url: Optional[str] = Field(
        default=None,
        description="IP geolocation endpoint returning latitude/longitude JSON",
    )
    geolocation_timeout: float = Field(default=5.0, gt=0, description="Geolocation timeout (s)")

    # Server
    host: str = Field(default="127.0.0.1", description="Bind address for the API server")
    port: int = Field(default=8000, gt=0, lt=65536, description="Port for the API server")
    static_dir: Optional[Path] = Field(
        default=None,
        description="Directory with the browser client, served at /",
    )

    @property
    def default_center(self) -> Position:
        """Return the fallback map center."""
        return Position(lat=self.default_latitude, lng=self.default_longitude)

    @classmethod
    def load(cls) -> "AppConfig":
        """Load configuration from environment and defaults."""
        env = os.environ
        values: dict = {}

        if "LANDMAP_DEFAULT_LATITUDE" in env:
            values["default_latitude"] = env["LANDMAP_DEFAULT_LATITUDE"]
        if "LANDMAP_DEFAULT_LONGITUDE" in env:
            values["default_longitude"] = env["LANDMAP_DEFAULT_LONGITUDE"]
        if "LANDMAP_DEFAULT_ZOOM" in env:
            values["default_zoom"] = env["LANDMAP_DEFAULT_ZOOM"]
        if "LANDMAP_REQUIRE_IMAGE" in env:
            values["require_image"] = env["LANDMAP_REQUIRE_IMAGE"].lower() in ("1", "true", "yes")
        if "LANDMAP_MAX_IMAGE_BYTES" in env:
            values["max_image_bytes"] = env["LANDMAP_MAX_IMAGE_BYTES"]
        if "LANDMAP_GEOLOCATION_URL" in env:
            values["geolocation_url"] = env["LANDMAP_GEOLOCATION_URL"] or None
        if "LANDMAP_HOST" in env:
            values["host"] = env["LANDMAP_HOST"]
        if "LANDMAP_PORT" in env:
            values["port"] = env["LANDMAP_PORT"]
        if "LANDMAP_STATIC_DIR" in env:
            values["static_dir"] = Path(env["LANDMAP_STATIC_DIR"])

        return cls(**values)


# Global config instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get or create global configuration."""
    global _config
    if _config is None:
        _config = AppConfig.load()
    return _config
