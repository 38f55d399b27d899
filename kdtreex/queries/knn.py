from __future__ import annotations

from typing import Any, List, Optional, Tuple

import numpy as np

from kdtreex.core.metrics import distance, hyperplane_distance
from kdtreex.core.points import ensure_query
from kdtreex.core.tree import KDNode, KDTree
from kdtreex.diagnostics import log_operation
from kdtreex.logging import get_logger


LOGGER = get_logger("queries.knn")


def sides(
    query: Any,
    pivot: Any,
    axis: int,
    left: Optional[KDNode],
    right: Optional[KDNode],
) -> Tuple[Optional[KDNode], Optional[KDNode]]:
    """Return ``(near, far)``; a query on the splitting plane goes left."""

    if query[axis] <= pivot[axis]:
        return left, right
    return right, left


class _CandidateSet:
    """Bounded set of the ``limit`` closest points registered so far."""

    __slots__ = ("_query", "_limit", "_indices", "_points", "_distances")

    def __init__(self, query: np.ndarray, limit: int) -> None:
        self._query = query
        self._limit = limit
        self._indices: List[int] = []
        self._points: List[np.ndarray] = []
        self._distances: List[float] = []

    def is_full(self) -> bool:
        return len(self._indices) >= self._limit

    def worst(self) -> float:
        return max(self._distances)

    def register(self, index: int, point: np.ndarray) -> None:
        # Coordinate-identical points count once.
        for held in self._points:
            if np.array_equal(held, point):
                return

        dist = distance(point, self._query)
        if not self.is_full():
            self._indices.append(index)
            self._points.append(point)
            self._distances.append(dist)
            return

        # max() keeps the earliest slot among equally distant candidates.
        slot = max(range(len(self._distances)), key=self._distances.__getitem__)
        if self._distances[slot] > dist:
            self._indices[slot] = index
            self._points[slot] = point
            self._distances[slot] = dist

    def should_visit(self, plane_distance: float) -> bool:
        """Whether a subtree behind a plane this far away may still improve the set."""

        if not self.is_full():
            return True
        return self.worst() > plane_distance

    def ranked(self) -> Tuple[np.ndarray, np.ndarray]:
        order = np.argsort(np.asarray(self._distances, dtype=np.float64), kind="stable")
        indices = np.asarray(self._indices, dtype=np.int64)[order]
        distances = np.asarray(self._distances, dtype=np.float64)[order]
        return indices, distances


def _search(node: Optional[KDNode], query: np.ndarray, candidates: _CandidateSet) -> None:
    if node is None:
        return
    near, far = sides(query, node.point, node.axis, node.left, node.right)
    _search(near, query, candidates)
    candidates.register(node.index, node.point)
    if candidates.should_visit(hyperplane_distance(query, node.point, node.axis)):
        _search(far, query, candidates)


def _knn_impl(op_log: Any, tree: KDTree, query: Any, k: int) -> Tuple[np.ndarray, np.ndarray]:
    empty = (np.empty(0, dtype=np.int64), np.empty(0, dtype=np.float64))
    if tree.is_empty():
        if op_log is not None:
            op_log.add_metadata(k=k, dimension=tree.dimension, returned=0)
        return empty
    k = int(k)
    if k < 0:
        raise ValueError("k must be non-negative.")
    query_arr = ensure_query(query, tree.dimension)

    if k == 0:
        indices, distances = empty
    else:
        candidates = _CandidateSet(query_arr, k)
        _search(tree.root, query_arr, candidates)
        indices, distances = candidates.ranked()

    if op_log is not None:
        op_log.add_metadata(
            k=k,
            dimension=tree.dimension,
            returned=int(indices.shape[0]),
        )
    return indices, distances


def knn(
    tree: KDTree,
    query: Any,
    *,
    k: int,
    return_distances: bool = False,
) -> Tuple[np.ndarray, np.ndarray] | np.ndarray:
    """Indices (into the built points) of the ``k`` nearest neighbours of ``query``.

    Results are ordered by ascending squared distance. Fewer than ``k``
    indices come back when the tree holds fewer distinct points.
    """

    with log_operation(LOGGER, "knn_query") as op_log:
        indices, distances = _knn_impl(op_log, tree, query, k)
    if return_distances:
        return indices, distances
    return indices


def nearest(
    tree: KDTree,
    query: Any,
    n: int = 1,
    *,
    return_distances: bool = False,
) -> Tuple[np.ndarray, np.ndarray] | np.ndarray:
    """Return up to ``n`` points of ``tree`` closest to ``query``.

    The result is a ``(m, dimension)`` array with ``m <= n`` rows, nearest
    first. An empty tree yields an empty array for any ``query`` and ``n``.
    With ``return_distances`` the squared distances are returned alongside.
    """

    indices, distances = knn(tree, query, k=n, return_distances=True)
    points = tree.points[indices]
    if return_distances:
        return points, distances
    return points


def nearest_neighbor(tree: KDTree, query: Any) -> np.ndarray | None:
    """Single closest point, or ``None`` for an empty tree."""

    points = nearest(tree, query, 1)
    if points.shape[0] == 0:
        return None
    return points[0]
