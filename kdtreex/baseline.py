from __future__ import annotations

from typing import Any, Tuple

import numpy as np

from kdtreex.core.metrics import squared_distances
from kdtreex.core.points import ensure_points, ensure_query


def bruteforce_knn(
    points: Any,
    query: Any,
    k: int,
    *,
    return_distances: bool = False,
) -> Tuple[np.ndarray, np.ndarray] | np.ndarray:
    """Compute k-NN via dense squared distances.

    Indices are ordered by ascending distance; ties keep input order.
    """

    if k < 0:
        raise ValueError("k must be non-negative.")
    points_arr = ensure_points(points)
    if points_arr.shape[0] == 0:
        indices = np.empty(0, dtype=np.int64)
        dists = np.empty(0, dtype=np.float64)
    else:
        query_arr = ensure_query(query, points_arr.shape[1])
        all_dists = squared_distances(points_arr, query_arr)
        indices = np.argsort(all_dists, kind="stable")[:k].astype(np.int64)
        dists = all_dists[indices]
    if return_distances:
        return indices, dists
    return indices
