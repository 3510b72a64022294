"""RouteSplitter - Cut a dense hiking track into a few marker segments.

Algorithm:
1. Flatten every input segment into one point list and project it to the
   planar grid.
2. Bound the number of simplified vertices by route length and the
   configured segment ceiling (never fewer than 3).
3. Run Douglas-Peucker, doubling the tolerance until the kept vertex count
   fits the bound.
4. Cut the original points at the kept indices. A synthetic anchor segment
   at the first point carries the route-start marker.

Output segments hold the original GeoPoints; planar coordinates never leave
this module.
"""

import logging
from dataclasses import dataclass
from math import floor
from typing import Optional

import numpy as np
from shapely.geometry import LineString

from route_splitter.constants import SplitterConfig
from route_splitter.core.projector import Projector
from route_splitter.core.simplifier import douglas_peucker_indices
from route_splitter.errors import InternalInvariantError, InvalidInputError
from route_splitter.model.geo_point import GeoPoint
from route_splitter.model.route import Route
from route_splitter.model.route_segment import RouteSegment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SplitConfig:
    """Parameters of a single split.

    Attributes:
        minimal_segment_length: Target minimum segment length (planar unit, meters)
        max_segments_number: Ceiling on simplified vertices, start and end included
        initial_simplification_tolerance: First Douglas-Peucker tolerance (planar unit)
    """

    minimal_segment_length: float = SplitterConfig.MINIMAL_SEGMENT_LENGTH_M
    max_segments_number: int = SplitterConfig.MAX_SEGMENTS_NUMBER
    initial_simplification_tolerance: float = SplitterConfig.INITIAL_SIMPLIFICATION_TOLERANCE_M

    def __post_init__(self) -> None:
        if not self.minimal_segment_length > 0:
            raise InvalidInputError(f"minimal_segment_length must be positive, got {self.minimal_segment_length}")
        if self.max_segments_number < 1:
            raise InvalidInputError(f"max_segments_number must be at least 1, got {self.max_segments_number}")
        if not self.initial_simplification_tolerance > 0:
            raise InvalidInputError(
                f"initial_simplification_tolerance must be positive, got {self.initial_simplification_tolerance}"
            )


class RouteSplitter:
    """Splits routes into simplified segments.

    The projector is injected once and shared by all calls; split() itself
    keeps no state between calls.

    Example:
        splitter = RouteSplitter(projector=Projector())
        result = splitter.split(route=route, config=SplitConfig(max_segments_number=20))
    """

    def __init__(self, projector: Projector) -> None:
        self.projector = projector

    @staticmethod
    def maximum_points(length: float, config: SplitConfig) -> int:
        """Upper bound on simplified vertices for a route of the given planar length."""
        by_length = floor(length / config.minimal_segment_length)
        return max(3, min(by_length, config.max_segments_number))

    def split(self, route: Route, config: Optional[SplitConfig] = None) -> Route:
        """Split a route into an anchor segment plus simplified segments.

        Args:
            route: Input route; all segments are flattened in order
            config: Split parameters (defaults from SplitterConfig)

        Returns:
            New Route with the same name. Its first segment is the anchor at
            the first point; each following segment ends at a kept vertex.

        Raises:
            InvalidInputError: If the route has fewer than 2 points.
            ProjectionError: If the points cannot be projected.
            InternalInvariantError: If simplification fails to converge.
        """
        config = config or SplitConfig()
        all_route_points = route.all_points()
        if len(all_route_points) < 2:
            raise InvalidInputError(f"Route '{route.name}' needs at least 2 points, got {len(all_route_points)}")

        coordinates = self.projector.to_planar(all_route_points)
        length = LineString(coordinates).length
        maximum_points = self.maximum_points(length=length, config=config)

        kept, tolerance = self._simplify(coordinates=coordinates, maximum_points=maximum_points, config=config)
        segments = self._build_segments(points=all_route_points, kept=kept)

        logger.info(
            f"Split '{route.name}': {len(all_route_points)} points, {length:.0f}m "
            f"-> {len(segments)} segments (max vertices {maximum_points}, tolerance {tolerance:g})"
        )
        return Route(name=route.name, segments=tuple(segments))

    def _simplify(self, coordinates: np.ndarray, maximum_points: int, config: SplitConfig) -> tuple[list[int], float]:
        """Double the tolerance until the kept vertex count fits maximum_points.

        Returns:
            Tuple (kept indices, tolerance that produced them).
        """
        tolerance = config.initial_simplification_tolerance
        for _ in range(SplitterConfig.MAX_TOLERANCE_DOUBLINGS):
            kept = douglas_peucker_indices(coordinates=coordinates, tolerance=tolerance)
            logger.debug(f"Tolerance {tolerance:g}: {len(kept)} vertices kept (max {maximum_points})")
            if len(kept) <= maximum_points:
                return kept, tolerance
            tolerance *= 2

        raise InternalInvariantError(
            f"Simplification did not reach {maximum_points} vertices after "
            f"{SplitterConfig.MAX_TOLERANCE_DOUBLINGS} tolerance doublings (last tolerance {tolerance:g})"
        )

    @staticmethod
    def _build_segments(points: list[GeoPoint], kept: list[int]) -> list[RouteSegment]:
        """Cut the original points at the kept indices."""
        if len(kept) < 2 or kept[0] != 0 or kept[-1] != len(points) - 1:
            raise InternalInvariantError(f"Kept vertices {kept} do not span the route of {len(points)} points")

        segments = [RouteSegment.anchor(points[0])]
        previous = kept[0]
        for index in kept[1:]:
            if index <= previous:
                raise InternalInvariantError(f"Kept vertex {index} does not follow vertex {previous}")
            segments.append(RouteSegment.simplified(points[previous : index + 1]))
            previous = index
        return segments
