"""Kdtreex: static k-d tree for exact nearest-neighbour queries.

Quick Start
-----------
>>> from kdtreex import build, nearest
>>>
>>> tree = build([[2, 3], [5, 4], [4, 7], [7, 2], [8, 1], [9, 6]])
>>> nearest(tree, [1, 1]).tolist()
[[2.0, 3.0]]
>>> sorted(nearest(tree, [1, 1], 2).tolist())
[[2.0, 3.0], [5.0, 4.0]]

Index-based queries
-------------------
>>> from kdtreex import KDIndex
>>>
>>> index = KDIndex().fit([[0.0, 0.0], [1.0, 1.0], [2.0, 2.0]])
>>> index.knn([0.9, 1.2], k=2).tolist()
[1, 2]

Functions
---------
build : Build a balanced k-d tree from a sequence of points.
nearest : The ``n`` points closest to a query (exact search).
knn : Same search, returning indices into the built points.
distance : Squared Euclidean distance between two points.
sort_by_axis : Stable, non-mutating sort of points on one coordinate.
"""

from importlib.metadata import version as _pkg_version

try:
    __version__ = _pkg_version("kdtreex")
except Exception:  # pragma: no cover - best effort during local development
    __version__ = "0.0.1"

# Primary user-facing API
from .algo import build, sort_by_axis
from .api import KDIndex
from .queries import knn, nearest, nearest_neighbor, sides

# Internal/advanced APIs
from .baseline import bruteforce_knn
from .core import KDNode, KDTree, distance, squared_distances

__all__ = [
    # Primary API
    "__version__",
    "build",
    "nearest",
    "knn",
    "distance",
    "sort_by_axis",
    "KDIndex",
    # Internal
    "KDNode",
    "KDTree",
    "bruteforce_knn",
    "nearest_neighbor",
    "sides",
    "squared_distances",
]
