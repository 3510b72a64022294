"""Core algorithms for route splitting.

- Projector: WGS84 <-> planar grid transforms (pyproj)
- douglas_peucker_indices: Index-returning polyline simplification
- RouteSplitter: Adaptive-tolerance split of a route into segments
"""

from route_splitter.core.projector import Projector
from route_splitter.core.route_splitter import RouteSplitter, SplitConfig
from route_splitter.core.simplifier import douglas_peucker_indices

__all__ = [
    # Projection
    "Projector",
    # Simplification
    "douglas_peucker_indices",
    # Splitting
    "RouteSplitter",
    "SplitConfig",
]
