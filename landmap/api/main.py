"""Landmap API - FastAPI application."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .. import __version__
from ..config import AppConfig, get_config
from ..context import AppContext
from ..services.view_projector import StateProjector
from .routers import landmarks, map_view
from .websocket import ConnectionManager
from .websocket import router as websocket_router

logger = logging.getLogger(__name__)


def create_app(
    config: Optional[AppConfig] = None,
    context: Optional[AppContext] = None,
) -> FastAPI:
    """Build the API around one application context.

    Args:
        config: Configuration (defaults to the environment configuration)
        context: Pre-built context (defaults to AppContext.create(config))

    Returns:
        FastAPI application
    """
    if context is None:
        context = AppContext.create(config or get_config())
    config = context.config

    connections = ConnectionManager()
    if isinstance(context.projector, StateProjector):
        context.projector.subscribe(connections.publish)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        # Startup
        center = await context.initialize()
        logger.info("Map centered at %.6f, %.6f", center.lat, center.lng)

        yield

        # Shutdown
        await context.close()

    app = FastAPI(
        title="Landmap API",
        description="API for the interactive landmark map",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.context = context
    app.state.connections = connections

    # CORS middleware - allow all origins in development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(landmarks.router, prefix="/api/landmarks", tags=["landmarks"])
    app.include_router(map_view.router, prefix="/api", tags=["map"])
    app.include_router(websocket_router, prefix="/api", tags=["websocket"])

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    @app.get("/api/config")
    async def get_api_config():
        """Get API configuration."""
        return {
            "default_center": {"lat": config.default_latitude, "lng": config.default_longitude},
            "default_zoom": config.default_zoom,
            "coordinate_precision": config.coordinate_precision,
            "location_precision": config.location_precision,
            "popup_image_width": config.popup_image_width,
            "require_image": config.require_image,
            "max_image_bytes": config.max_image_bytes,
            "has_geolocation": bool(config.geolocation_url),
        }

    mount_static_files(app, config)
    return app


def mount_static_files(app: FastAPI, config: AppConfig):
    """Serve the browser client if a static directory is configured."""
    if config.static_dir is None:
        return

    if not config.static_dir.exists():
        logger.warning("Static directory %s does not exist; not serving a client", config.static_dir)
        return

    app.mount(
        "/",
        StaticFiles(directory=str(config.static_dir), html=True),
        name="client",
    )
