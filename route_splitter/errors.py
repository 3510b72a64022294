"""Error taxonomy for route splitting.

Every error is terminal for a single split call: nothing is retried and no
partial route is returned.
"""


class RouteSplitterError(Exception):
    """Base class for all route splitter errors."""


class InvalidInputError(RouteSplitterError, ValueError):
    """Input route or configuration violates a precondition (e.g. fewer than 2 points)."""


class ProjectionError(RouteSplitterError):
    """Coordinates could not be transformed to the planar grid."""


class InternalInvariantError(RouteSplitterError, RuntimeError):
    """The algorithm reached a state that indicates a logic defect."""
