"""Data model classes for split routes.

- GeoPoint: Geometry atom (lon, lat, elevation, timestamp)
- RouteSegment: Run of points between breakpoints (ANCHOR or SIMPLIFIED)
- Route: Named collection of segments
"""

from route_splitter.model.geo_point import GeoPoint
from route_splitter.model.route import Route
from route_splitter.model.route_segment import RouteSegment, SegmentKind

__all__ = [
    "GeoPoint",
    "RouteSegment",
    "SegmentKind",
    "Route",
]
