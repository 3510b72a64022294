"""Configuration constants for Route Splitter.

All configurable parameters are centralized here for easy tuning.

Classes:
    ProjectionConfig: Coordinate reference systems used for planar distances
    SplitterConfig: Segment length, segment count and tolerance defaults
"""


class ProjectionConfig:
    """Coordinate reference systems."""

    # Input coordinates: longitude/latitude on WGS84
    GEOGRAPHIC_CRS = "EPSG:4326"

    # Israeli Transverse Mercator grid, meters
    PLANAR_CRS = "EPSG:2039"


class SplitterConfig:
    """Route splitting defaults (distances in meters of the planar CRS)."""

    # Shorter routes get fewer splits so no segment drops below this length
    MINIMAL_SEGMENT_LENGTH_M = 500.0

    # Upper bound on simplified vertices (start and end included)
    MAX_SEGMENTS_NUMBER = 40

    # Douglas-Peucker tolerance for the first simplification attempt
    INITIAL_SIMPLIFICATION_TOLERANCE_M = 50.0

    # Doubling 50m 64 times far exceeds any distance on Earth
    MAX_TOLERANCE_DOUBLINGS = 64
