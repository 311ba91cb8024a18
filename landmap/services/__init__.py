"""Landmark map services."""

from .geolocation import FixedGeolocation, GeolocationError, GeolocationSource, HttpGeolocation
from .image_loader import ImageLoader, ImageLoadError
from .interaction_router import InteractionRouter, ListTarget, SubmissionResult
from .landmark_store import LandmarkStore
from .map_provider import MapProvider
from .map_surface import MapSurface, Marker
from .selection import SelectionController
from .supersession import RequestSequencer
from .view_projector import StateProjector, ViewProjector

__all__ = [
    "FixedGeolocation",
    "GeolocationError",
    "GeolocationSource",
    "HttpGeolocation",
    "ImageLoader",
    "ImageLoadError",
    "InteractionRouter",
    "ListTarget",
    "SubmissionResult",
    "LandmarkStore",
    "MapProvider",
    "MapSurface",
    "Marker",
    "SelectionController",
    "RequestSequencer",
    "StateProjector",
    "ViewProjector",
]
