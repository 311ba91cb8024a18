"""Landmark form submissions and form field state."""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel


@dataclass
class ImageUpload:
    """A user-selected image file, as received from the form."""

    data: bytes
    filename: Optional[str] = None
    content_type: Optional[str] = None


@dataclass
class LandmarkForm:
    """Raw landmark form submission; coordinates arrive as text."""

    title: str = ""
    description: str = ""
    latitude: str = ""
    longitude: str = ""
    image: Optional[ImageUpload] = None


class FormState(BaseModel):
    """Server-side mirror of the editable form fields."""

    latitude: str = ""
    longitude: str = ""
    error: str = ""

    def reset(self) -> None:
        """Clear all fields and the error line."""
        self.latitude = ""
        self.longitude = ""
        self.error = ""
