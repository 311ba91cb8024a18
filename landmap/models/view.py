"""View models for the sidebar list and the map popup."""

from typing import Optional

from pydantic import BaseModel, Field


class ListEntry(BaseModel):
    """One sidebar row mirroring a landmark."""

    id: str
    title: str
    description: str
    coordinates: str = Field(..., description="Formatted 'Lat: .., Lng: ..' line")
    visible: bool = Field(..., description="State of the 'Show on map' toggle")
    active: bool = False


class PopupContent(BaseModel):
    """Content block shown in the map popup for a landmark."""

    landmark_id: str
    title: str
    description: str
    image: Optional[str] = None
    image_alt: Optional[str] = None
    image_max_width: Optional[int] = None


class ViewState(BaseModel):
    """Complete projection state handed to clients on connect."""

    entries: list[ListEntry] = Field(default_factory=list)
    popup: Optional[PopupContent] = None
    active_id: Optional[str] = None
    scrolled_to: Optional[str] = None
