"""Shared pytest fixtures for route_splitter tests.

Provides MockProjector and reusable routes for all route_splitter tests.

COORDINATE SYSTEM:
    Most tests use MockProjector, which maps degrees to meters with a single
    linear factor (x = lon * M, y = lat * M). Planar geometry is then exact
    and known in advance, so the tests exercise the splitting algorithm
    without depending on PROJ. Tests of the real Projector use points around
    Jerusalem, inside the Israeli TM grid.
"""

from datetime import datetime, timedelta, timezone
from typing import Sequence

import numpy as np
import pytest

from route_splitter.core.projector import Projector
from route_splitter.core.route_splitter import RouteSplitter, SplitConfig
from route_splitter.model.geo_point import GeoPoint
from route_splitter.model.route import Route

# MockProjector scale: tracks of a few kilometers stay well within valid lon/lat ranges
METERS_PER_DEGREE = 10_000.0

START_TIME = datetime(2024, 3, 1, 6, 30, tzinfo=timezone.utc)


# =============================================================================
# MOCK PROJECTOR
# =============================================================================


class MockProjector:
    """Projector stand-in with a linear degree-to-meter mapping.

    x = lon * meters_per_degree, y = lat * meters_per_degree
    """

    def __init__(self, meters_per_degree: float = METERS_PER_DEGREE) -> None:
        self.meters_per_degree = meters_per_degree
        self.calls = 0

    def to_planar(self, points: Sequence[GeoPoint]) -> np.ndarray:
        self.calls += 1
        if not points:
            return np.empty((0, 2))
        return np.array([[p.lon, p.lat] for p in points], dtype=float) * self.meters_per_degree

    def to_geographic(self, coordinates: np.ndarray) -> np.ndarray:
        return np.asarray(coordinates, dtype=float).reshape(-1, 2) / self.meters_per_degree


def make_point(x_m: float, y_m: float, index: int = 0, elevation: float = 300.0) -> GeoPoint:
    """GeoPoint at planar (x_m, y_m) meters under MockProjector, with elevation and timestamp."""
    return GeoPoint(
        lon=x_m / METERS_PER_DEGREE,
        lat=y_m / METERS_PER_DEGREE,
        elevation=elevation + index * 0.5,
        timestamp=START_TIME + timedelta(seconds=10 * index),
    )


def make_points(xy: Sequence[tuple[float, float]]) -> list[GeoPoint]:
    """GeoPoints from planar (x, y) meter tuples under MockProjector."""
    return [make_point(x_m=x, y_m=y, index=i) for i, (x, y) in enumerate(xy)]


def square_spiral_xy(leg_step_m: float = 100.0, legs: int = 8, spacing_m: float = 10.0):
    """Square spiral: legs E, N, W, S, ... with lengths step, step, 2*step, 2*step, ...

    Returns:
        Tuple (xy list, corner indices). Corner indices include start and end.
    """
    directions = [(1, 0), (0, 1), (-1, 0), (0, -1)]
    xy = [(0.0, 0.0)]
    corners = [0]
    x, y = 0.0, 0.0
    for leg in range(legs):
        dx, dy = directions[leg % 4]
        length = leg_step_m * (leg // 2 + 1)
        steps = int(round(length / spacing_m))
        for _ in range(steps):
            x += dx * spacing_m
            y += dy * spacing_m
            xy.append((x, y))
        corners.append(len(xy) - 1)
    return xy, corners


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def mock_projector() -> MockProjector:
    return MockProjector()


@pytest.fixture
def splitter(mock_projector: MockProjector) -> RouteSplitter:
    """RouteSplitter on the linear mock projection."""
    return RouteSplitter(projector=mock_projector)


@pytest.fixture(scope="session")
def itm_projector() -> Projector:
    """Real WGS84 -> Israeli TM projector (built once, shared)."""
    return Projector()


@pytest.fixture
def straight_line_route() -> Route:
    """100 equally spaced points on a 1000m straight line heading east."""
    xy = [(i * 1000.0 / 99, 0.0) for i in range(100)]
    return Route.from_points(name="Straight", points=make_points(xy))


@pytest.fixture
def square_spiral_route() -> tuple[Route, list[int]]:
    """Square spiral of 8 legs (2000m total), points every 10m, with its corner indices."""
    xy, corners = square_spiral_xy()
    return Route.from_points(name="Spiral", points=make_points(xy)), corners


@pytest.fixture
def jerusalem_points() -> list[GeoPoint]:
    """Short walk through Jerusalem (inside the Israeli TM area of use)."""
    return [
        GeoPoint(lon=35.2137, lat=31.7683, elevation=754.0),
        GeoPoint(lon=35.2150, lat=31.7700, elevation=760.0),
        GeoPoint(lon=35.2180, lat=31.7710, elevation=770.0),
        GeoPoint(lon=35.2200, lat=31.7690, elevation=745.0),
        GeoPoint(lon=35.2230, lat=31.7680, elevation=730.0),
    ]


@pytest.fixture
def default_config() -> SplitConfig:
    return SplitConfig(minimal_segment_length=100.0, max_segments_number=20, initial_simplification_tolerance=0.5)
