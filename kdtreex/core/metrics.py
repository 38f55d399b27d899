from __future__ import annotations

from typing import Any

import numpy as np

ArrayLike = Any


def distance(a: ArrayLike, b: ArrayLike) -> float:
    """Squared Euclidean distance between two points.

    The square root is never taken: every comparison in the package only
    needs the ordering, which squared distances preserve.
    """

    lhs = np.asarray(a, dtype=np.float64)
    rhs = np.asarray(b, dtype=np.float64)
    if lhs.shape != rhs.shape:
        raise ValueError("Pointwise metric operands must have identical shapes.")
    diff = lhs - rhs
    return float(np.sum(diff * diff))


def squared_distances(points: ArrayLike, query: ArrayLike) -> np.ndarray:
    """Squared Euclidean distance from every row of ``points`` to ``query``."""

    points_arr = np.asarray(points, dtype=np.float64)
    query_arr = np.asarray(query, dtype=np.float64)
    if points_arr.ndim != 2:
        raise ValueError("Expected a 2-D array of points.")
    if points_arr.shape[0] == 0:
        return np.zeros((0,), dtype=np.float64)
    if query_arr.shape != (points_arr.shape[1],):
        raise ValueError("Query dimensionality does not match the points.")
    diff = points_arr - query_arr[None, :]
    return np.sum(diff * diff, axis=1)


def hyperplane_distance(query: ArrayLike, pivot: ArrayLike, axis: int) -> float:
    """Squared distance from ``query`` to the splitting plane through ``pivot``."""

    delta = float(query[axis]) - float(pivot[axis])
    return delta * delta


__all__ = [
    "distance",
    "hyperplane_distance",
    "squared_distances",
]
