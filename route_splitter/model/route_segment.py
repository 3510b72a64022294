"""RouteSegment - A contiguous run of points between two breakpoints.

Segments come in two kinds:
- ANCHOR: the synthetic zero-length segment that carries the route-start
  marker (two copies of the first route point)
- SIMPLIFIED: a run of original points ending at a simplification breakpoint

Consecutive segments overlap by exactly one point at their boundary.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence

from route_splitter.errors import InvalidInputError
from route_splitter.model.geo_point import GeoPoint


class SegmentKind(Enum):
    """Distinguishes the start-marker segment from regular segments."""

    ANCHOR = "anchor"
    SIMPLIFIED = "simplified"


@dataclass(frozen=True)
class RouteSegment:
    """An ordered, non-empty run of route points.

    Attributes:
        points: Original GeoPoints belonging to this segment
        route_point: Location of the marker/label shown for this segment
        kind: ANCHOR for the synthetic start segment, SIMPLIFIED otherwise
    """

    points: tuple[GeoPoint, ...]
    route_point: GeoPoint
    kind: SegmentKind = SegmentKind.SIMPLIFIED

    def __post_init__(self) -> None:
        if not self.points:
            raise InvalidInputError("RouteSegment must contain at least one point")
        if self.kind is SegmentKind.ANCHOR:
            if len(self.points) != 2 or self.points[0] != self.points[1]:
                raise InvalidInputError("Anchor segment must hold exactly two copies of one point")

    @classmethod
    def anchor(cls, point: GeoPoint) -> "RouteSegment":
        """Build the zero-length start segment anchored at ``point``."""
        return cls(points=(point, point), route_point=point, kind=SegmentKind.ANCHOR)

    @classmethod
    def simplified(cls, points: Sequence[GeoPoint]) -> "RouteSegment":
        """Build a regular segment whose route point is its last point."""
        points = tuple(points)
        if not points:
            raise InvalidInputError("RouteSegment must contain at least one point")
        return cls(points=points, route_point=points[-1], kind=SegmentKind.SIMPLIFIED)

    @property
    def is_anchor(self) -> bool:
        return self.kind is SegmentKind.ANCHOR

    @property
    def start(self) -> GeoPoint:
        return self.points[0]

    @property
    def end(self) -> GeoPoint:
        return self.points[-1]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "routePoint": self.route_point.to_dict(),
            "latlngs": [p.to_dict() for p in self.points],
            "kind": self.kind.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RouteSegment":
        """Create RouteSegment from dictionary.

        ``routePoint`` defaults to the last point and ``kind`` to SIMPLIFIED,
        so segments from other producers load as regular segments.
        """
        if not isinstance(data, dict):
            raise InvalidInputError(f"Segment must be an object with latlngs, got {data!r}")
        latlngs = data.get("latlngs")
        if not isinstance(latlngs, list):
            raise InvalidInputError(f"Segment latlngs must be a list, got {latlngs!r}")
        try:
            points = tuple(GeoPoint.from_dict(p) for p in latlngs)
            kind = SegmentKind(data.get("kind", SegmentKind.SIMPLIFIED.value))
        except (TypeError, ValueError) as e:
            raise InvalidInputError(f"Malformed segment: {e}") from e
        if not points:
            raise InvalidInputError("RouteSegment must contain at least one point")
        route_point_data = data.get("routePoint")
        route_point = GeoPoint.from_dict(route_point_data) if route_point_data else points[-1]
        return cls(points=points, route_point=route_point, kind=kind)

    def __repr__(self) -> str:
        return f"RouteSegment({self.kind.value}, {len(self.points)} points, route_point={self.route_point!r})"
