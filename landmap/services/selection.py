"""Single active landmark selection."""

import logging
from typing import Optional

from ..models.landmark import Landmark
from .landmark_store import LandmarkStore
from .view_projector import ViewProjector

logger = logging.getLogger(__name__)


class SelectionController:
    """Tracks the one landmark that is highlighted and showing its popup."""

    def __init__(self, store: LandmarkStore, projector: ViewProjector):
        self.store = store
        self.projector = projector
        self._selected_id: Optional[str] = None

    @property
    def selected_id(self) -> Optional[str]:
        return self._selected_id

    @property
    def selected(self) -> Optional[Landmark]:
        """The selected landmark, or None."""
        if self._selected_id is None:
            return None
        return self.store.get(self._selected_id)

    def select(self, landmark_id: str) -> None:
        """Select a landmark; unknown ids leave the selection untouched."""
        landmark = self.store.get(landmark_id)
        if landmark is None:
            logger.debug("Select ignored for unknown landmark %s", landmark_id)
            return

        self._selected_id = landmark_id
        self.projector.show_popup(landmark)
        self.projector.apply_highlight(landmark_id)

    def clear(self) -> None:
        """Drop the selection, its popup and its highlight."""
        self._selected_id = None
        self.projector.close_popup()
        self.projector.apply_highlight(None)

    def forget(self, landmark_id: str) -> bool:
        """Clear the selection if it refers to landmark_id.

        Returns:
            True if the selection was cleared
        """
        if self._selected_id != landmark_id:
            return False
        self.clear()
        return True
