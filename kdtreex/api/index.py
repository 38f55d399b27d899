from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from kdtreex.algo.build import build
from kdtreex.core.tree import KDTree
from kdtreex.queries.knn import knn as knn_query
from kdtreex.queries.knn import nearest as nearest_points


@dataclass(frozen=True)
class KDIndex:
    """Thin façade around build + query helpers."""

    tree: KDTree | None = None

    def fit(self, points: Any) -> "KDIndex":
        return KDIndex(build(points))

    def knn(
        self,
        query: Any,
        *,
        k: int,
        return_distances: bool = False,
    ) -> Any:
        return knn_query(
            self._require_tree(),
            query,
            k=k,
            return_distances=return_distances,
        )

    def nearest(self, query: Any, *, return_distances: bool = False) -> Any:
        indices, distances = self.knn(query, k=1, return_distances=True)
        if indices.shape[0] == 0:
            raise ValueError("Cannot query an empty index.")
        if return_distances:
            return int(indices[0]), float(distances[0])
        return int(indices[0])

    def points(self, query: Any, n: int = 1) -> np.ndarray:
        return nearest_points(self._require_tree(), query, n)

    def __len__(self) -> int:
        return 0 if self.tree is None else self.tree.num_points

    def _require_tree(self) -> KDTree:
        if self.tree is None:
            raise ValueError("KDIndex requires an existing tree; call fit() first.")
        return self.tree
