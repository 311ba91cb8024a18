"""Sources for the user's current position."""

import logging
from abc import ABC, abstractmethod
from typing import Optional

import httpx
from pydantic import ValidationError

from ..models.landmark import Position

logger = logging.getLogger(__name__)


class GeolocationError(PermissionError):
    """Position is unavailable: denied, unsupported or failed."""


class GeolocationSource(ABC):
    """Asynchronous provider of the current position."""

    @abstractmethod
    async def current_position(self) -> Position:
        """Return the current position or raise GeolocationError."""

    async def aclose(self) -> None:
        """Release any resources held by the source."""


class FixedGeolocation(GeolocationSource):
    """Reports a fixed position, or always fails when none is given."""

    def __init__(self, position: Optional[Position] = None):
        self.position = position

    async def current_position(self) -> Position:
        if self.position is None:
            raise GeolocationError("Geolocation is not available")
        return self.position


class HttpGeolocation(GeolocationSource):
    """Looks up the position from an IP geolocation endpoint.

    The endpoint must answer with a JSON object carrying ``latitude`` and
    ``longitude`` (``lat``/``lon`` are accepted too).
    """

    def __init__(
        self,
        url: str,
        timeout: float = 5.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize geolocation client.

        Args:
            url: Lookup endpoint
            timeout: Request timeout in seconds
            client: Optional pre-configured HTTP client
        """
        self.url = url
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def current_position(self) -> Position:
        try:
            response = await self._client.get(self.url)
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise GeolocationError(f"Geolocation lookup failed: {e}") from e

        if not isinstance(payload, dict):
            raise GeolocationError("Geolocation response is not an object")

        lat = payload.get("latitude", payload.get("lat"))
        lng = payload.get("longitude", payload.get("lon", payload.get("lng")))
        if lat is None or lng is None:
            raise GeolocationError("Geolocation response has no coordinates")

        try:
            return Position(lat=lat, lng=lng)
        except ValidationError as e:
            raise GeolocationError(f"Geolocation returned invalid coordinates: {e}") from e

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


def create_geolocation(url: Optional[str], timeout: float = 5.0) -> GeolocationSource:
    """Pick the geolocation source for a configured endpoint."""
    if url:
        logger.info("Using IP geolocation from %s", url)
        return HttpGeolocation(url, timeout=timeout)
    return FixedGeolocation()
