"""Landmark model for user-placed map records."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Position(BaseModel):
    """A latitude/longitude pair."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90, allow_inf_nan=False, description="Latitude")
    lng: float = Field(..., ge=-180, le=180, allow_inf_nan=False, description="Longitude")

    @classmethod
    def coerce(cls, value: Any) -> "Position":
        """Build a Position from a Position, (lat, lng) pair or mapping."""
        if isinstance(value, Position):
            return value
        if isinstance(value, dict):
            return cls.model_validate(value)
        lat, lng = value
        return cls(lat=lat, lng=lng)

    def format(self, precision: int = 5) -> str:
        """Format as the list entry coordinate line."""
        return f"Lat: {self.lat:.{precision}f}, Lng: {self.lng:.{precision}f}"


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


class LandmarkCreate(BaseModel):
    """Validated request to create a landmark."""

    title: str = Field(..., min_length=1, description="Landmark title")
    description: str = Field(..., min_length=1, description="Short description")
    position: Position
    image: Optional[str] = Field(default=None, description="Image as a data URL")

    @field_validator("title", "description")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        return _require_text(value)

    @field_validator("position", mode="before")
    @classmethod
    def _coerce_position(cls, value: Any) -> Any:
        if isinstance(value, (tuple, list)):
            return Position.coerce(value)
        return value


class Landmark(BaseModel):
    """A landmark placed on the map.

    Records are immutable; the store swaps in an updated copy when the
    visibility changes. The marker handle travels with every copy and is
    never serialized.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    id: str
    title: str
    description: str
    position: Position
    image: Optional[str] = None
    visible: bool = True
    marker: Any = Field(default=None, exclude=True, repr=False)

    @property
    def coordinates(self) -> tuple[float, float]:
        """Return (latitude, longitude) tuple."""
        return (self.position.lat, self.position.lng)

    @property
    def latitude(self) -> float:
        return self.position.lat

    @property
    def longitude(self) -> float:
        return self.position.lng

    @property
    def has_image(self) -> bool:
        return self.image is not None
