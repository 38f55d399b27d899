#!/usr/bin/env python
"""Quick-start guide for kdtreex library usage.

Run with: python -m kdtreex

This module intentionally avoids importing kdtreex internals to provide
a fast, clean startup for displaying help text.
"""

from __future__ import annotations

QUICKSTART = """\
================================================================================
                                 KDTREEX
           Static k-d tree for exact nearest-neighbour queries
================================================================================

INSTALLATION
------------
    pip install kdtreex

BASIC USAGE
-----------
    from kdtreex import build, nearest

    # Build once from equal-length points
    tree = build([[2, 3], [5, 4], [4, 7], [7, 2], [8, 1], [9, 6]])

    # The n closest points, nearest first
    closest = nearest(tree, [1, 1], 2)

    # With squared distances
    closest, sq_dists = nearest(tree, [1, 1], 2, return_distances=True)

INDEX-BASED QUERIES
-------------------
    from kdtreex import KDIndex

    index = KDIndex().fit(points)
    rows = index.knn([0.5, 0.5], k=3)       # row numbers into `points`
    row = index.nearest([0.5, 0.5])

CONFIGURATION (environment)
---------------------------
    KDTREEX_PRECISION=float32|float64     dtype of stored points
    KDTREEX_ENABLE_DIAGNOSTICS=0|1        CPU/RSS figures in operation logs
    KDTREEX_LOG_LEVEL=INFO                level of the `kdtreex` logger

API REFERENCE
-------------
    import kdtreex
    help(kdtreex.build)
    help(kdtreex.nearest)
    help(kdtreex.KDIndex)

================================================================================
"""


def main() -> None:
    """Print quick-start guide."""
    print(QUICKSTART)


if __name__ == "__main__":
    main()
