"""GeoPoint - A single track point of a hiking route.

A GeoPoint is a WGS84 coordinate with optional elevation and timestamp,
exactly as read from the recorded or drawn route. The splitter never alters
GeoPoints; it only decides where the cuts between segments fall.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from route_splitter.errors import InvalidInputError


@dataclass(frozen=True)
class GeoPoint:
    """A point on a route with WGS84 coordinates.

    Attributes:
        lon: Longitude in decimal degrees (WGS84)
        lat: Latitude in decimal degrees (WGS84)
        elevation: Elevation in meters above sea level, if known
        timestamp: Time the point was recorded, if known

    Example:
        point = GeoPoint(lon=35.2137, lat=31.7683, elevation=754.0)
    """

    lon: float
    lat: float
    elevation: Optional[float] = None
    timestamp: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Validate data after initialization."""
        try:
            has_nan_coordinate = math.isnan(self.lon) or math.isnan(self.lat)
            has_nan_elevation = self.elevation is not None and math.isnan(self.elevation)
        except TypeError as e:
            raise InvalidInputError(f"GeoPoint values must be numbers, got ({self.lon!r}, {self.lat!r})") from e
        if has_nan_coordinate:
            raise InvalidInputError(f"GeoPoint cannot have NaN coordinates ({self.lon}, {self.lat})")
        if has_nan_elevation:
            raise InvalidInputError(f"GeoPoint cannot have NaN elevation at ({self.lon}, {self.lat})")

    @property
    def lon_lat(self) -> tuple[float, float]:
        """Return (lon, lat) tuple - x/y order used by projections."""
        return (self.lon, self.lat)

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the route wire keys (lat, lng, alt, timestamp)."""
        data: dict[str, Any] = {"lat": self.lat, "lng": self.lon}
        if self.elevation is not None:
            data["alt"] = self.elevation
        if self.timestamp is not None:
            data["timestamp"] = self.timestamp.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GeoPoint":
        """Create GeoPoint from dictionary."""
        if not isinstance(data, dict):
            raise InvalidInputError(f"Point must be an object with lat/lng keys, got {data!r}")
        alt = data.get("alt")
        timestamp = data.get("timestamp")
        try:
            return cls(
                lon=float(data["lng"]),
                lat=float(data["lat"]),
                elevation=float(alt) if alt is not None else None,
                timestamp=datetime.fromisoformat(timestamp) if timestamp else None,
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidInputError(f"Malformed point {data!r}") from e

    def __repr__(self) -> str:
        elev = f", elev={self.elevation:.1f}m" if self.elevation is not None else ""
        return f"GeoPoint(lon={self.lon:.5f}, lat={self.lat:.5f}{elev})"
