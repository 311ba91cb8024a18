"""Canonical in-memory landmark store."""

import itertools
import logging
from typing import Any, Optional

from ..models.landmark import Landmark, LandmarkCreate
from .map_provider import MapProvider

logger = logging.getLogger(__name__)


class LandmarkStore:
    """Sole owner of the ordered landmark collection and the id sequence.

    Ids come from a counter that only moves forward, so an id is never
    handed out twice even after its landmark is deleted. Every landmark owns
    one marker, attached to the map exactly while the landmark is visible.
    """

    def __init__(self, map_provider: MapProvider):
        """
        Initialize the store.

        Args:
            map_provider: Map used to create, attach and detach markers
        """
        self.map = map_provider
        self._landmarks: dict[str, Landmark] = {}
        self._ids = itertools.count(1)

    def create(
        self,
        title: str,
        description: str,
        position: Any,
        image: Optional[str] = None,
    ) -> Landmark:
        """
        Create a landmark and put its marker on the map.

        Args:
            title: Non-blank title
            description: Non-blank description
            position: Position, (lat, lng) pair or {"lat", "lng"} mapping
            image: Optional image data URL

        Returns:
            The stored landmark

        Raises:
            pydantic.ValidationError: If the request is invalid. Nothing is
                stored and no id is consumed.
        """
        request = LandmarkCreate(
            title=title,
            description=description,
            position=position,
            image=image,
        )

        landmark_id = str(next(self._ids))
        marker = self.map.create_marker(request.position, request.title)
        self.map.attach(marker)

        landmark = Landmark(
            id=landmark_id,
            title=request.title,
            description=request.description,
            position=request.position,
            image=request.image,
            visible=True,
            marker=marker,
        )
        self._landmarks[landmark_id] = landmark

        logger.debug("Created landmark %s (%s)", landmark_id, landmark.title)
        return landmark

    def delete(self, landmark_id: str) -> bool:
        """
        Remove a landmark and its marker.

        Returns:
            True if a landmark was removed, False for unknown ids
        """
        landmark = self._landmarks.pop(landmark_id, None)
        if landmark is None:
            logger.debug("Delete ignored for unknown landmark %s", landmark_id)
            return False

        if landmark.marker is not None:
            self.map.remove_marker(landmark.marker)

        logger.debug("Deleted landmark %s", landmark_id)
        return True

    def set_visible(self, landmark_id: str, visible: bool) -> None:
        """Show or hide a landmark's marker. Unknown ids are ignored."""
        landmark = self._landmarks.get(landmark_id)
        if landmark is None:
            logger.debug("Visibility change ignored for unknown landmark %s", landmark_id)
            return

        if visible:
            self.map.attach(landmark.marker)
        else:
            self.map.detach(landmark.marker)

        if landmark.visible != visible:
            # Replacing the value keeps the dict position, so order is preserved
            self._landmarks[landmark_id] = landmark.model_copy(update={"visible": visible})

    def list(self) -> list[Landmark]:
        """Return all landmarks in insertion order."""
        return list(self._landmarks.values())

    def get(self, landmark_id: str) -> Optional[Landmark]:
        """Get a landmark by id."""
        return self._landmarks.get(landmark_id)

    def __len__(self) -> int:
        return len(self._landmarks)

    def __contains__(self, landmark_id: object) -> bool:
        return landmark_id in self._landmarks
