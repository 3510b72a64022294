"""Projection between WGS84 and a planar grid in meters.

Douglas-Peucker needs Euclidean distances in a locally consistent linear
unit, and degrees of longitude and latitude are not isotropic. The
Projector wraps a pair of pyproj Transformers built once per instance, so
a single Projector can be shared by any number of concurrent splits.
"""

import logging
from math import floor
from typing import Optional, Sequence

import numpy as np
import pyproj
from pyproj.exceptions import CRSError, ProjError

from route_splitter.constants import ProjectionConfig
from route_splitter.errors import ProjectionError
from route_splitter.model.geo_point import GeoPoint

logger = logging.getLogger(__name__)


def _get_utm_zone(lon: float, lat: float) -> str:
    """Get UTM zone EPSG code for given coordinates."""
    zone_number = min(floor((lon + 180) / 6) + 1, 60)
    if lat >= 0:
        return f"EPSG:326{zone_number:02d}"
    return f"EPSG:327{zone_number:02d}"


class Projector:
    """Converts GeoPoints to planar (x, y) coordinates and back.

    Args:
        planar_crs: Target projected CRS with a linear unit (default: Israeli TM grid)
        geographic_crs: Source CRS of the GeoPoints (default: WGS84)

    Example:
        projector = Projector()
        coords = projector.to_planar(points)  # (n, 2) array in meters
    """

    def __init__(
        self,
        planar_crs: str = ProjectionConfig.PLANAR_CRS,
        geographic_crs: str = ProjectionConfig.GEOGRAPHIC_CRS,
    ) -> None:
        try:
            self._geographic = pyproj.CRS(geographic_crs)
            self._planar = pyproj.CRS(planar_crs)
        except CRSError as e:
            raise ProjectionError(f"Unknown coordinate reference system: {e}") from e

        self._to_planar = pyproj.Transformer.from_crs(self._geographic, self._planar, always_xy=True)
        self._to_geographic = pyproj.Transformer.from_crs(self._planar, self._geographic, always_xy=True)

        area = self._planar.area_of_use
        self._bounds = area.bounds if area is not None else None
        logger.debug(f"Projector {geographic_crs} -> {planar_crs}, area of use {self._bounds}")

    @classmethod
    def for_utm_zone(cls, lon: float, lat: float) -> "Projector":
        """Build a projector on the UTM zone containing (lon, lat)."""
        return cls(planar_crs=_get_utm_zone(lon=lon, lat=lat))

    @property
    def planar_crs(self) -> pyproj.CRS:
        return self._planar

    @property
    def bounds(self) -> Optional[tuple[float, float, float, float]]:
        """Area of use of the planar CRS as (west, south, east, north) degrees."""
        return self._bounds

    def to_planar(self, points: Sequence[GeoPoint]) -> np.ndarray:
        """Project points to planar coordinates.

        Args:
            points: GeoPoints in geographic coordinates

        Returns:
            Array of shape (n, 2) holding x, y in the planar CRS unit, one row
            per input point, same order.

        Raises:
            ProjectionError: If a point lies outside the planar CRS area of use
                or PROJ cannot transform it.
        """
        if not points:
            return np.empty((0, 2))

        lons = np.array([p.lon for p in points], dtype=float)
        lats = np.array([p.lat for p in points], dtype=float)
        self._check_domain(lons=lons, lats=lats)

        try:
            xs, ys = self._to_planar.transform(lons, lats, errcheck=True)
        except ProjError as e:
            raise ProjectionError(f"Failed to project {len(points)} points to {self._planar.name}: {e}") from e

        coordinates = np.column_stack([xs, ys])
        if not np.all(np.isfinite(coordinates)):
            raise ProjectionError(f"Projection to {self._planar.name} produced non-finite coordinates")
        return coordinates

    def to_geographic(self, coordinates: np.ndarray) -> np.ndarray:
        """Inverse of to_planar: (n, 2) planar array to (n, 2) array of (lon, lat)."""
        coordinates = np.asarray(coordinates, dtype=float).reshape(-1, 2)
        if len(coordinates) == 0:
            return np.empty((0, 2))
        try:
            lons, lats = self._to_geographic.transform(coordinates[:, 0], coordinates[:, 1], errcheck=True)
        except ProjError as e:
            raise ProjectionError(f"Failed to unproject coordinates from {self._planar.name}: {e}") from e
        return np.column_stack([lons, lats])

    def _check_domain(self, lons: np.ndarray, lats: np.ndarray) -> None:
        if not (np.all(np.isfinite(lons)) and np.all(np.isfinite(lats))):
            raise ProjectionError("Cannot project non-finite coordinates")
        if self._bounds is None:
            return

        west, south, east, north = self._bounds
        if west <= east:
            inside_lon = (lons >= west) & (lons <= east)
        else:
            # Area of use crosses the antimeridian
            inside_lon = (lons >= west) | (lons <= east)
        inside = inside_lon & (lats >= south) & (lats <= north)
        if not np.all(inside):
            first_bad = int(np.argmin(inside))
            raise ProjectionError(
                f"Point ({lons[first_bad]}, {lats[first_bad]}) is outside the area of use "
                f"of {self._planar.name} {self._bounds}"
            )
