"""Ramer-Douglas-Peucker simplification over planar coordinates.

Returns the indices of the kept vertices rather than the vertices
themselves, so callers can map the result back onto the original points
even when consecutive points share the same coordinates (a paused GPS
track).

The recursion always splits at the farthest vertex regardless of the
tolerance, so the vertices kept at a larger tolerance are a subset of those
kept at a smaller one.
"""

import numpy as np


def _segment_distances(points: np.ndarray, start: np.ndarray, end: np.ndarray) -> np.ndarray:
    """Euclidean distance from each point to the segment start-end."""
    direction = end - start
    length_sq = float(direction @ direction)
    if length_sq == 0.0:
        return np.linalg.norm(points - start, axis=1)

    t = np.clip(((points - start) @ direction) / length_sq, 0.0, 1.0)
    closest = start + t[:, np.newaxis] * direction
    return np.linalg.norm(points - closest, axis=1)


def douglas_peucker_indices(coordinates: np.ndarray, tolerance: float) -> list[int]:
    """Simplify a polyline and return the sorted indices of the kept vertices.

    A vertex is kept when its distance to the current chord is strictly
    greater than ``tolerance``. The first and last vertices are always kept.

    Args:
        coordinates: Array of shape (n, 2) with planar x, y
        tolerance: Maximum allowed deviation, in the coordinate unit

    Returns:
        Increasing list of indices into ``coordinates``.
    """
    coordinates = np.asarray(coordinates, dtype=float)
    n = len(coordinates)
    if n < 3:
        return list(range(n))

    keep = np.zeros(n, dtype=bool)
    keep[0] = keep[-1] = True

    stack = [(0, n - 1)]
    while stack:
        first, last = stack.pop()
        if last - first < 2:
            continue
        distances = _segment_distances(coordinates[first + 1 : last], coordinates[first], coordinates[last])
        farthest = int(np.argmax(distances))
        if distances[farthest] > tolerance:
            split = first + 1 + farthest
            keep[split] = True
            stack.append((first, split))
            stack.append((split, last))

    return np.flatnonzero(keep).tolist()
