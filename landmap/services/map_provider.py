"""Map provider interface used by the landmark core."""

from abc import ABC, abstractmethod
from typing import Any, Callable

from ..models.landmark import Position


class MapProvider(ABC):
    """Side-effecting map operations the core depends on.

    Marker handles are opaque to callers: they are created here, stored on
    the owning landmark and passed back unchanged.
    """

    @abstractmethod
    def create_marker(self, position: Position, title: str) -> Any:
        """Create a marker at position (not yet attached) and return its handle."""

    @abstractmethod
    def attach(self, handle: Any) -> None:
        """Show the marker on the map."""

    @abstractmethod
    def detach(self, handle: Any) -> None:
        """Remove the marker from the map."""

    def remove_marker(self, handle: Any) -> None:
        """Destroy a marker whose landmark is gone. Detaching is the minimum."""
        self.detach(handle)

    @abstractmethod
    def on_click(self, handle: Any, callback: Callable[[], None]) -> None:
        """Register a click listener for the marker."""

    @abstractmethod
    def pan_to(self, position: Position) -> None:
        """Smoothly move the map view to position."""

    @abstractmethod
    def set_center(self, position: Position) -> None:
        """Jump the map view to position."""

    @abstractmethod
    def open_popup(self, content: Any, anchor: Any) -> None:
        """Open the shared popup with content, anchored to a marker handle."""

    @abstractmethod
    def close_popup(self) -> None:
        """Close the shared popup if open."""
