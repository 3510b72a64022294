"""Route - A named, ordered collection of segments.

A Route is built fresh by every split and handed over to the caller;
nothing in this package mutates or keeps it afterwards.
"""

from dataclasses import dataclass
from typing import Any, Sequence

from route_splitter.errors import InvalidInputError
from route_splitter.model.geo_point import GeoPoint
from route_splitter.model.route_segment import RouteSegment


@dataclass(frozen=True)
class Route:
    """A hiking route.

    Attributes:
        name: Display name
        segments: Ordered segments; consecutive segments share one boundary point

    Example:
        route = Route.from_points(name="Nahal Amud", points=track)
        print(len(route.all_points()))
    """

    name: str
    segments: tuple[RouteSegment, ...]

    @classmethod
    def from_points(cls, name: str, points: Sequence[GeoPoint]) -> "Route":
        """Wrap a raw track as a single-segment route."""
        return cls(name=name, segments=(RouteSegment.simplified(points),))

    def all_points(self) -> list[GeoPoint]:
        """All segment points concatenated in order, boundary duplicates included."""
        return [point for segment in self.segments for point in segment.points]

    def track_points(self) -> list[GeoPoint]:
        """Reconstruct the underlying track.

        Anchor segments are skipped and the point shared by consecutive
        segments is kept once.
        """
        points: list[GeoPoint] = []
        for segment in self.segments:
            if segment.is_anchor:
                continue
            points.extend(segment.points[1:] if points else segment.points)
        return points

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "segments": [s.to_dict() for s in self.segments],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Route":
        """Create Route from dictionary."""
        if not isinstance(data, dict):
            raise InvalidInputError(f"Route must be an object with segments, got {data!r}")
        segments_data = data.get("segments")
        if not isinstance(segments_data, list):
            raise InvalidInputError(f"Route segments must be a list, got {segments_data!r}")
        segments = tuple(RouteSegment.from_dict(s) for s in segments_data)
        return cls(name=data.get("name", ""), segments=segments)

    def __repr__(self) -> str:
        return f"Route({self.name!r}, {len(self.segments)} segments)"
