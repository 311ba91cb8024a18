"""Routes UI and map events to store and selection operations."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

from pydantic import ValidationError

from ..models.form import LandmarkForm
from ..models.landmark import Landmark, Position
from . import form_validation
from .geolocation import GeolocationError
from .image_loader import ImageLoadError

if TYPE_CHECKING:
    from ..context import AppContext

logger = logging.getLogger(__name__)


class ListTarget(str, Enum):
    """Part of a list entry that received a click."""

    ENTRY = "entry"
    TOGGLE = "toggle"
    DELETE = "delete"


@dataclass
class SubmissionResult:
    """Outcome of a landmark form submission."""

    landmark: Optional[Landmark] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.landmark is not None


class InteractionRouter:
    """Binds external events to the store, selection and projector.

    Holds no state of its own; everything lives on the application context.
    """

    def __init__(self, context: "AppContext"):
        self.context = context

    def marker_clicked(self, landmark_id: str) -> None:
        """A landmark's marker was clicked on the map."""
        self.context.selection.select(landmark_id)

    def list_item_clicked(self, landmark_id: str, target: ListTarget = ListTarget.ENTRY) -> None:
        """A list entry was clicked; clicks on its own controls are not selections."""
        if target != ListTarget.ENTRY:
            return

        landmark = self.context.store.get(landmark_id)
        if landmark is None:
            return

        self.context.map.pan_to(landmark.position)
        self.context.selection.select(landmark_id)

    def visibility_toggled(self, landmark_id: str, visible: bool) -> None:
        """The 'Show on map' toggle of an entry changed."""
        store = self.context.store
        if landmark_id not in store:
            return

        store.set_visible(landmark_id, visible)
        self.context.projector.render_list(store.list())

    def delete_clicked(self, landmark_id: str) -> bool:
        """The delete control of an entry was clicked.

        Returns:
            True if a landmark was removed
        """
        deleted = self.context.store.delete(landmark_id)
        if deleted:
            self.context.selection.forget(landmark_id)
        self.context.projector.render_list(self.context.store.list())
        return deleted

    def bind_marker(self, landmark: Landmark) -> None:
        """Route clicks on the landmark's marker to selection."""
        landmark_id = landmark.id
        self.context.map.on_click(landmark.marker, lambda: self.marker_clicked(landmark_id))

    async def submit_form(self, form: LandmarkForm) -> SubmissionResult:
        """
        Handle a landmark form submission.

        The image is read before anything is created, so a failed read or an
        invalid field leaves the store untouched.

        Args:
            form: Raw submission

        Returns:
            SubmissionResult with the new landmark or a user-facing error
        """
        ctx = self.context
        ctx.form.error = ""

        error = form_validation.validate_form(form, require_image=ctx.config.require_image)
        if error:
            ctx.form.error = error
            return SubmissionResult(error=error)

        try:
            image = await ctx.image_loader.load(form.image)
        except ImageLoadError as e:
            logger.error("Image read failed: %s", e)
            ctx.form.error = form_validation.IMAGE_UNREADABLE
            return SubmissionResult(error=form_validation.IMAGE_UNREADABLE)

        try:
            landmark = ctx.store.create(
                title=form.title,
                description=form.description,
                position=(
                    form_validation.parse_coordinate(form.latitude),
                    form_validation.parse_coordinate(form.longitude),
                ),
                image=image,
            )
        except ValidationError as e:
            logger.warning("Rejected landmark submission: %s", e)
            ctx.form.error = form_validation.COORDINATES_INVALID
            return SubmissionResult(error=form_validation.COORDINATES_INVALID)

        self.bind_marker(landmark)
        ctx.projector.render_list(ctx.store.list())
        ctx.form.reset()

        logger.info("Added landmark %s: %s", landmark.id, landmark.title)
        return SubmissionResult(landmark=landmark)

    async def use_current_location(self) -> Optional[Position]:
        """
        Fill the form coordinates from the current position.

        Only the newest request may write the fields; an older lookup that
        finishes late is discarded.

        Returns:
            The applied position, or None if it failed or was superseded
        """
        ctx = self.context
        token = ctx.requests.begin("form.location")

        try:
            position = await ctx.geolocation.current_position()
        except GeolocationError as e:
            if ctx.requests.is_current("form.location", token):
                logger.warning("Unable to retrieve location: %s", e)
                ctx.form.error = form_validation.LOCATION_UNAVAILABLE
            return None

        if not ctx.requests.is_current("form.location", token):
            logger.debug("Discarding superseded location result")
            return None

        precision = ctx.config.location_precision
        ctx.form.latitude = f"{position.lat:.{precision}f}"
        ctx.form.longitude = f"{position.lng:.{precision}f}"
        return position
