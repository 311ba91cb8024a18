"""API request/response models."""

from typing import Optional

from pydantic import BaseModel, Field

from ..models.landmark import Landmark, Position
from ..models.view import ListEntry, PopupContent, ViewState
from ..services.interaction_router import ListTarget


# =============================================================================
# Landmark Schemas
# =============================================================================


class LandmarkDetail(BaseModel):
    """Landmark as returned by the API."""

    id: str
    title: str
    description: str
    position: Position
    visible: bool
    has_image: bool
    image_url: Optional[str] = None
    marker_id: Optional[str] = None

    @classmethod
    def from_landmark(cls, landmark: Landmark) -> "LandmarkDetail":
        """Create from a Landmark model."""
        return cls(
            id=landmark.id,
            title=landmark.title,
            description=landmark.description,
            position=landmark.position,
            visible=landmark.visible,
            has_image=landmark.has_image,
            image_url=f"/api/landmarks/{landmark.id}/image" if landmark.has_image else None,
            marker_id=getattr(landmark.marker, "marker_id", None),
        )


class VisibilityUpdate(BaseModel):
    """Request to show or hide a landmark's marker."""

    visible: bool


class ListClick(BaseModel):
    """A click inside a sidebar list entry."""

    target: ListTarget = ListTarget.ENTRY


class DeleteResponse(BaseModel):
    """Result of a delete request."""

    deleted: bool
    id: str


class SuccessResponse(BaseModel):
    """Generic success response."""

    success: bool = True
    message: str = ""


# =============================================================================
# Map / View Schemas
# =============================================================================


class MarkerState(BaseModel):
    """A marker currently on the map."""

    marker_id: str
    lat: float
    lng: float
    title: str


class MapPopup(BaseModel):
    """The open map popup."""

    marker_id: str
    content: Optional[PopupContent] = None


class MapState(BaseModel):
    """Map view as clients should draw it."""

    center: Position
    zoom: int
    markers: list[MarkerState] = Field(default_factory=list)
    popup: Optional[MapPopup] = None


class FormFields(BaseModel):
    """Current server-side form field values."""

    latitude: str = ""
    longitude: str = ""
    error: str = ""


__all__ = [
    "DeleteResponse",
    "FormFields",
    "LandmarkDetail",
    "ListClick",
    "ListEntry",
    "MapPopup",
    "MapState",
    "MarkerState",
    "SuccessResponse",
    "ViewState",
    "VisibilityUpdate",
]
