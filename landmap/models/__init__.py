"""Data models for the landmark map."""

from .form import FormState, ImageUpload, LandmarkForm
from .landmark import Landmark, LandmarkCreate, Position
from .view import ListEntry, PopupContent, ViewState

__all__ = [
    "Landmark",
    "LandmarkCreate",
    "Position",
    "FormState",
    "ImageUpload",
    "LandmarkForm",
    "ListEntry",
    "PopupContent",
    "ViewState",
]
