"""Shared test fixtures."""

import pytest
from PIL import Image

from landmap.config import AppConfig
from landmap.context import AppContext
from landmap.models.form import ImageUpload, LandmarkForm
from landmap.models.landmark import Position
from landmap.services.geolocation import FixedGeolocation
from landmap.services.landmark_store import LandmarkStore
from landmap.services.map_surface import MapSurface
from landmap.services.selection import SelectionController
from landmap.services.view_projector import StateProjector
from landmap.utils.image_utils import image_to_bytes


@pytest.fixture
def mcmaster():
    """Default map center near McMaster University."""
    return Position(lat=43.2615047, lng=-79.9195802)


@pytest.fixture
def museum_position():
    return Position(lat=43.26, lng=-79.92)


@pytest.fixture
def surface(mcmaster):
    """Empty map surface."""
    return MapSurface(center=mcmaster, zoom=14)


@pytest.fixture
def store(surface):
    return LandmarkStore(surface)


@pytest.fixture
def projector(surface):
    return StateProjector(surface)


@pytest.fixture
def selection(store, projector):
    return SelectionController(store, projector)


@pytest.fixture
def config():
    """Config with geolocation disabled."""
    return AppConfig()


@pytest.fixture
def context(config):
    """Context whose geolocation is always denied."""
    return AppContext.create(config, geolocation=FixedGeolocation())


@pytest.fixture
def located_context(config):
    """Context that reports a fixed position near Toronto."""
    return AppContext.create(
        config,
        geolocation=FixedGeolocation(Position(lat=43.653226, lng=-79.383184)),
    )


@pytest.fixture
def png_bytes():
    """Small PNG file contents."""
    return image_to_bytes(Image.new("RGBA", (16, 16), (255, 0, 0, 255)), "PNG")


@pytest.fixture
def png_upload(png_bytes):
    return ImageUpload(data=png_bytes, filename="museum.png", content_type="image/png")


@pytest.fixture
def museum_form(png_upload):
    """Valid form submission for the museum landmark."""
    return LandmarkForm(
        title="Museum",
        description="A place with art",
        latitude="43.26",
        longitude="-79.92",
        image=png_upload,
    )
