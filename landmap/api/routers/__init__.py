"""API routers for Landmap."""

from . import landmarks, map_view

__all__ = ["landmarks", "map_view"]
