"""Checks for the landmark form before anything is created."""

import math
from typing import Optional

from ..models.form import LandmarkForm

TITLE_REQUIRED = "Please enter a landmark title."
DESCRIPTION_REQUIRED = "Please enter a short description (1-3 sentences)."
IMAGE_REQUIRED = "Please choose an image for this landmark."
COORDINATES_INVALID = "Please provide valid coordinates or use your current location."
IMAGE_UNREADABLE = "There was a problem reading the image. Please try again."
LOCATION_UNAVAILABLE = "Unable to retrieve your location."


def parse_coordinate(text: str) -> float:
    """Parse a coordinate field; unparseable input becomes NaN."""
    try:
        return float(text.strip())
    except (AttributeError, ValueError):
        return math.nan


def validate_form(form: LandmarkForm, require_image: bool = True) -> Optional[str]:
    """
    Check a submission in field order.

    Args:
        form: Raw form submission
        require_image: Whether an image file must be chosen

    Returns:
        The message for the first failing field, or None if valid
    """
    if not form.title.strip():
        return TITLE_REQUIRED
    if not form.description.strip():
        return DESCRIPTION_REQUIRED
    if require_image and form.image is None:
        return IMAGE_REQUIRED

    lat = parse_coordinate(form.latitude)
    lng = parse_coordinate(form.longitude)
    if not (math.isfinite(lat) and math.isfinite(lng)):
        return COORDINATES_INVALID
    if not (-90 <= lat <= 90 and -180 <= lng <= 180):
        return COORDINATES_INVALID

    return None
