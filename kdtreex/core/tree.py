from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

import numpy as np


@dataclass(frozen=True, eq=False)
class KDNode:
    """One partition of the space.

    Every point stored under ``left`` has ``coord[axis] <= point[axis]`` and
    every point under ``right`` has ``coord[axis] >= point[axis]``. The pivot
    itself lives only in this node.
    """

    point: np.ndarray
    index: int
    axis: int
    left: Optional["KDNode"] = None
    right: Optional["KDNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


@dataclass(frozen=True, eq=False)
class KDTree:
    """Immutable k-d tree over a read-only ``(num_points, dimension)`` array.

    Trees are never modified after :func:`kdtreex.build`; any number of
    threads may query the same tree without synchronisation as long as
    callers leave ``points`` alone.
    """

    points: np.ndarray
    dimension: int
    root: Optional[KDNode] = None

    @property
    def num_points(self) -> int:
        return int(self.points.shape[0])

    def is_empty(self) -> bool:
        return self.root is None

    def iter_nodes(self) -> Iterator[Tuple[KDNode, int]]:
        """Yield ``(node, depth)`` pairs in depth-first pre-order."""

        if self.root is None:
            return
        stack = [(self.root, 0)]
        while stack:
            node, depth = stack.pop()
            yield node, depth
            if node.right is not None:
                stack.append((node.right, depth + 1))
            if node.left is not None:
                stack.append((node.left, depth + 1))

    @property
    def height(self) -> int:
        """Number of levels; 0 for an empty tree."""

        return max((depth + 1 for _, depth in self.iter_nodes()), default=0)

    def __len__(self) -> int:
        return self.num_points
