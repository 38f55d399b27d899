"""Core data structures and metric helpers for the k-d tree."""

from .metrics import distance, hyperplane_distance, squared_distances
from .points import ensure_points, ensure_query
from .tree import KDNode, KDTree

__all__ = [
    "KDNode",
    "KDTree",
    "distance",
    "ensure_points",
    "ensure_query",
    "hyperplane_distance",
    "squared_distances",
]
