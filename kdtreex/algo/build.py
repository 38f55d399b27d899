from __future__ import annotations

from typing import Any, Optional

import numpy as np

from kdtreex import config as cx_config
from kdtreex.core.points import ensure_points
from kdtreex.core.tree import KDNode, KDTree
from kdtreex.diagnostics import log_operation
from kdtreex.logging import get_logger

LOGGER = get_logger("algo.build")


def axis_order(values: np.ndarray) -> np.ndarray:
    """Stable ascending permutation of a 1-D coordinate column."""

    return np.argsort(values, kind="stable")


def sort_by_axis(points: Any, axis: int) -> np.ndarray:
    """Return a copy of ``points`` sorted ascending on coordinate ``axis``.

    The sort is stable, so points with equal coordinates keep their relative
    order. The input is never modified.
    """

    arr = ensure_points(points)
    if arr.shape[0] == 0:
        return arr
    axis = int(axis)
    if axis < 0 or axis >= arr.shape[1]:
        raise ValueError(f"Axis {axis} is out of range for {arr.shape[1]}-dimensional points.")
    return arr[axis_order(arr[:, axis])]


def _build_node(
    points: np.ndarray,
    indices: np.ndarray,
    depth: int,
    dimension: int,
) -> Optional[KDNode]:
    count = int(indices.shape[0])
    if count == 0:
        return None
    axis = depth % dimension
    ordered = indices[axis_order(points[indices, axis])]
    median = count // 2
    pivot = int(ordered[median])
    return KDNode(
        point=points[pivot],
        index=pivot,
        axis=axis,
        left=_build_node(points, ordered[:median], depth + 1, dimension),
        right=_build_node(points, ordered[median + 1 :], depth + 1, dimension),
    )


def build(points: Any) -> KDTree:
    """Build a balanced k-d tree over ``points``.

    The split axis cycles with depth (``depth % dimension``). At every node
    the current subset is stably sorted on that axis and its median
    (``count // 2``) becomes the pivot; the lower half forms the left
    subtree and the points after the median form the right subtree, so each
    input point is stored in exactly one node.

    Parameters
    ----------
    points:
        Sequence of equal-length points, or a ``(count, dimension)`` array.
        An empty sequence yields an empty tree.
    """

    config = cx_config.runtime_config()
    with log_operation(LOGGER, "kdtree_build") as op_log:
        arr = ensure_points(points, dtype=config.dtype)
        arr.setflags(write=False)
        dimension = int(arr.shape[1])
        if arr.shape[0] == 0:
            tree = KDTree(points=arr, dimension=dimension, root=None)
        else:
            indices = np.arange(arr.shape[0], dtype=np.int64)
            root = _build_node(arr, indices, 0, dimension)
            tree = KDTree(points=arr, dimension=dimension, root=root)

        if op_log is not None:
            op_log.add_metadata(
                points=tree.num_points,
                dimension=dimension,
                height=tree.height,
            )
        return tree
