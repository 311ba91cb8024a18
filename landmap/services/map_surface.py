"""In-process map surface mirrored by browser clients."""

import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from ..models.landmark import Position
from .map_provider import MapProvider

logger = logging.getLogger(__name__)


@dataclass
class Marker:
    """A marker on the map surface."""

    marker_id: str
    position: Position
    title: str
    attached: bool = False

    # Internal
    _listeners: list[Callable[[], None]] = field(default_factory=list, repr=False)


@dataclass
class Popup:
    """The single shared popup."""

    content: Any
    anchor: Marker


class MapSurface(MapProvider):
    """Map state kept on the server.

    Tracks every marker created through it, the view center and zoom, and the
    open popup. Clients render from :meth:`snapshot` and report marker clicks
    back through :meth:`click`.
    """

    def __init__(self, center: Position, zoom: int = 14):
        self.center = center
        self.zoom = zoom
        self.popup: Optional[Popup] = None
        self._markers: dict[str, Marker] = {}

    def generate_marker_id(self) -> str:
        """Generate a unique marker ID."""
        return str(uuid.uuid4())[:8]

    def create_marker(self, position: Position, title: str) -> Marker:
        marker_id = self.generate_marker_id()
        while marker_id in self._markers:
            marker_id = self.generate_marker_id()

        marker = Marker(marker_id=marker_id, position=position, title=title)
        self._markers[marker_id] = marker
        return marker

    def attach(self, handle: Marker) -> None:
        handle.attached = True

    def detach(self, handle: Marker) -> None:
        handle.attached = False

    def remove_marker(self, handle: Marker) -> None:
        self.detach(handle)
        if self.popup is not None and self.popup.anchor is handle:
            self.popup = None
        handle._listeners.clear()
        self._markers.pop(handle.marker_id, None)

    def on_click(self, handle: Marker, callback: Callable[[], None]) -> None:
        handle._listeners.append(callback)

    def pan_to(self, position: Position) -> None:
        self.center = position

    def set_center(self, position: Position) -> None:
        self.center = position

    def open_popup(self, content: Any, anchor: Marker) -> None:
        self.popup = Popup(content=content, anchor=anchor)

    def close_popup(self) -> None:
        self.popup = None

    def get_marker(self, marker_id: str) -> Optional[Marker]:
        """Get marker by ID."""
        return self._markers.get(marker_id)

    @property
    def markers(self) -> list[Marker]:
        return list(self._markers.values())

    @property
    def attached_markers(self) -> list[Marker]:
        return [m for m in self._markers.values() if m.attached]

    def click(self, marker_id: str) -> bool:
        """Dispatch a click on a marker.

        Returns:
            True if the marker exists and is on the map, False otherwise
        """
        marker = self._markers.get(marker_id)
        if marker is None or not marker.attached:
            logger.debug("Ignoring click on unavailable marker %s", marker_id)
            return False

        for listener in list(marker._listeners):
            listener()
        return True

    def snapshot(self) -> dict:
        """Serializable map state for clients."""
        popup = None
        if self.popup is not None:
            content = self.popup.content
            if hasattr(content, "model_dump"):
                content = content.model_dump()
            popup = {"marker_id": self.popup.anchor.marker_id, "content": content}

        return {
            "center": {"lat": self.center.lat, "lng": self.center.lng},
            "zoom": self.zoom,
            "markers": [
                {
                    "marker_id": m.marker_id,
                    "lat": m.position.lat,
                    "lng": m.position.lng,
                    "title": m.title,
                }
                for m in self.attached_markers
            ],
            "popup": popup,
        }
