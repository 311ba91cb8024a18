"""Projection of store state onto the sidebar list and the map popup."""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Iterable, Optional

from ..models.landmark import Landmark
from ..models.view import ListEntry, PopupContent, ViewState
from .map_provider import MapProvider

logger = logging.getLogger(__name__)

ViewListener = Callable[[dict], None]


class ViewProjector(ABC):
    """Presentation capability the core renders through."""

    @abstractmethod
    def render_list(self, records: Iterable[Landmark]) -> None:
        """Rebuild the whole sidebar list from records, in order."""

    @abstractmethod
    def show_popup(self, landmark: Landmark) -> None:
        """Show the popup for landmark, replacing any previous one."""

    @abstractmethod
    def apply_highlight(self, landmark_id: Optional[str]) -> None:
        """Mark exactly the entry for landmark_id as active."""

    @abstractmethod
    def close_popup(self) -> None:
        """Close the popup if one is shown."""


class StateProjector(ViewProjector):
    """Projector that keeps the views as data and publishes every change.

    The list is rebuilt from scratch on each render; landmark counts are
    small and a full rebuild keeps the entries trivially consistent with the
    store. Listeners receive ``{"type": "list" | "popup" | "highlight",
    "data": ...}`` messages.
    """

    def __init__(
        self,
        map_provider: MapProvider,
        coordinate_precision: int = 5,
        popup_image_width: int = 200,
    ):
        self.map = map_provider
        self.coordinate_precision = coordinate_precision
        self.popup_image_width = popup_image_width

        self.entries: list[ListEntry] = []
        self.popup: Optional[PopupContent] = None
        self.active_id: Optional[str] = None
        self.scrolled_to: Optional[str] = None
        self._listeners: list[ViewListener] = []

    def subscribe(self, listener: ViewListener) -> None:
        """Register a callback for view change messages."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: ViewListener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def _publish(self, message_type: str, data) -> None:
        for listener in list(self._listeners):
            try:
                listener({"type": message_type, "data": data})
            except Exception:
                logger.exception("View listener failed on %s message", message_type)

    def build_entry(self, landmark: Landmark) -> ListEntry:
        """Build the sidebar entry for one landmark."""
        return ListEntry(
            id=landmark.id,
            title=landmark.title,
            description=landmark.description,
            coordinates=landmark.position.format(self.coordinate_precision),
            visible=landmark.visible,
            active=landmark.id == self.active_id,
        )

    def build_popup(self, landmark: Landmark) -> PopupContent:
        """Build popup content for one landmark."""
        content = PopupContent(
            landmark_id=landmark.id,
            title=landmark.title,
            description=landmark.description,
        )
        if landmark.image:
            content.image = landmark.image
            content.image_alt = landmark.title
            content.image_max_width = self.popup_image_width
        return content

    def render_list(self, records: Iterable[Landmark]) -> None:
        self.entries = [self.build_entry(landmark) for landmark in records]

        if self.active_id is not None and not any(e.active for e in self.entries):
            self.active_id = None
            self.scrolled_to = None

        self._publish("list", [entry.model_dump() for entry in self.entries])

    def show_popup(self, landmark: Landmark) -> None:
        self.popup = self.build_popup(landmark)
        self.map.open_popup(self.popup, anchor=landmark.marker)
        self._publish("popup", self.popup.model_dump())

    def close_popup(self) -> None:
        if self.popup is None:
            return
        self.popup = None
        self.map.close_popup()
        self._publish("popup", None)

    def apply_highlight(self, landmark_id: Optional[str]) -> None:
        matched = False
        for entry in self.entries:
            entry.active = landmark_id is not None and entry.id == landmark_id
            matched = matched or entry.active

        self.active_id = landmark_id if matched else None
        self.scrolled_to = self.active_id
        self._publish("highlight", {"id": self.active_id})

    @property
    def active_entries(self) -> list[ListEntry]:
        return [entry for entry in self.entries if entry.active]

    def state(self) -> ViewState:
        """Snapshot of all projections."""
        return ViewState(
            entries=[entry.model_copy() for entry in self.entries],
            popup=self.popup,
            active_id=self.active_id,
            scrolled_to=self.scrolled_to,
        )
