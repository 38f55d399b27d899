from .knn import knn, nearest, nearest_neighbor, sides

__all__ = [
    "knn",
    "nearest",
    "nearest_neighbor",
    "sides",
]
