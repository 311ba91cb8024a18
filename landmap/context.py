"""Application context wiring the landmark core together."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from .config import AppConfig
from .models.form import FormState
from .models.landmark import Position
from .services.geolocation import GeolocationError, GeolocationSource, create_geolocation
from .services.image_loader import ImageLoader
from .services.interaction_router import InteractionRouter
from .services.landmark_store import LandmarkStore
from .services.map_provider import MapProvider
from .services.map_surface import MapSurface
from .services.selection import SelectionController
from .services.supersession import RequestSequencer
from .services.view_projector import StateProjector, ViewProjector

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Everything one map session needs, passed around explicitly."""

    config: AppConfig
    map: MapProvider
    store: LandmarkStore
    projector: ViewProjector
    selection: SelectionController
    geolocation: GeolocationSource
    image_loader: ImageLoader
    form: FormState = field(default_factory=FormState)
    requests: RequestSequencer = field(default_factory=RequestSequencer)
    router: InteractionRouter = field(init=False)

    def __post_init__(self):
        self.router = InteractionRouter(self)

    @classmethod
    def create(
        cls,
        config: AppConfig,
        map_provider: Optional[MapProvider] = None,
        projector: Optional[ViewProjector] = None,
        geolocation: Optional[GeolocationSource] = None,
    ) -> "AppContext":
        """
        Build a context with default collaborators where none are given.

        Args:
            config: Application configuration
            map_provider: Map implementation (defaults to a MapSurface)
            projector: View projector (defaults to a StateProjector)
            geolocation: Position source (defaults from config)

        Returns:
            A ready, not yet initialized context
        """
        if map_provider is None:
            map_provider = MapSurface(center=config.default_center, zoom=config.default_zoom)
        if projector is None:
            projector = StateProjector(
                map_provider,
                coordinate_precision=config.coordinate_precision,
                popup_image_width=config.popup_image_width,
            )
        if geolocation is None:
            geolocation = create_geolocation(config.geolocation_url, config.geolocation_timeout)

        store = LandmarkStore(map_provider)
        return cls(
            config=config,
            map=map_provider,
            store=store,
            projector=projector,
            selection=SelectionController(store, projector),
            geolocation=geolocation,
            image_loader=ImageLoader(max_bytes=config.max_image_bytes),
        )

    async def initialize(self) -> Position:
        """
        Center the map on the user, falling back to the configured default.

        Returns:
            The center that was applied
        """
        token = self.requests.begin("map.center")
        center = self.config.default_center

        try:
            position = await self.geolocation.current_position()
        except GeolocationError as e:
            logger.warning("Geolocation failed or denied: %s", e)
        else:
            if self.requests.is_current("map.center", token):
                center = position

        self.map.set_center(center)
        self.projector.render_list(self.store.list())
        return center

    async def close(self) -> None:
        """Release external resources."""
        await self.geolocation.aclose()
