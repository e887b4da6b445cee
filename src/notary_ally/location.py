"""Current-location lookup: a position fix, then the county it falls in.

Position fixes come from a ``GeolocationProvider``. Failures never raise out
of ``LocationFinder.find``; they come back as a ``LocationInfo`` with zeroed
coordinates and an ``error`` message.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from loguru import logger

from .core.exceptions import GeolocationError, NotaryAllyError
from .records.models import LocationInfo
from .services.lookup import LookupService


@runtime_checkable
class GeolocationProvider(Protocol):
    def get_current_position(self, high_accuracy: bool = True) -> tuple[float, float]:
        """Return (latitude, longitude). Raises GeolocationError on failure."""
        ...


class FixedGeolocationProvider:
    """A provider that always reports the configured coordinates."""

    def __init__(self, latitude: float | None, longitude: float | None):
        self.latitude = latitude
        self.longitude = longitude

    def get_current_position(self, high_accuracy: bool = True) -> tuple[float, float]:
        if self.latitude is None or self.longitude is None:
            raise GeolocationError("Location information is unavailable.")
        if not (-90 <= self.latitude <= 90 and -180 <= self.longitude <= 180):
            raise GeolocationError(f"Invalid coordinates: {self.latitude}, {self.longitude}")
        return self.latitude, self.longitude


def _failed(message: str) -> LocationInfo:
    return LocationInfo(latitude=0, longitude=0, county="", error=message)


class LocationFinder:
    def __init__(self, geolocation: GeolocationProvider, lookup: LookupService):
        self.geolocation = geolocation
        self.lookup = lookup

    def _position(self) -> tuple[float, float] | LocationInfo:
        try:
            return self.geolocation.get_current_position(high_accuracy=True)
        except GeolocationError as e:
            logger.warning(f"Geolocation failed: {e}")
            return _failed(f"Geolocation Error: {e}")
        except Exception as e:
            logger.exception(f"Geolocation provider raised {type(e).__name__}")
            return _failed(f"Geolocation Error: {e}")

    def find(self) -> LocationInfo:
        position = self._position()
        if isinstance(position, LocationInfo):
            return position
        latitude, longitude = position
        try:
            county = self.lookup.resolve_county(latitude, longitude)
        except NotaryAllyError as e:
            return _failed(f"API Error: {e}")
        return LocationInfo(latitude=latitude, longitude=longitude, county=county)

    async def afind(self) -> LocationInfo:
        position = self._position()
        if isinstance(position, LocationInfo):
            return position
        latitude, longitude = position
        try:
            county = await self.lookup.aresolve_county(latitude, longitude)
        except NotaryAllyError as e:
            return _failed(f"API Error: {e}")
        return LocationInfo(latitude=latitude, longitude=longitude, county=county)
