from __future__ import annotations

from typing import Any

import numpy as np


def ensure_points(value: Any, *, dtype: Any = np.float64) -> np.ndarray:
    """Coerce ``value`` into a finite ``(count, dimension)`` array.

    An empty input becomes a ``(0, 0)`` array. Ragged input, zero-length
    points and non-finite coordinates raise ``ValueError``.
    """

    if isinstance(value, np.ndarray):
        raw = value
    else:
        raw = list(value)
        if not raw:
            return np.zeros((0, 0), dtype=dtype)
    try:
        arr = np.array(raw, dtype=dtype)
    except (TypeError, ValueError) as exc:
        raise ValueError(
            "Points must be equal-length sequences of real numbers."
        ) from exc
    if arr.size == 0 and arr.ndim <= 1:
        return np.zeros((0, 0), dtype=dtype)
    if arr.ndim != 2:
        raise ValueError(f"Expected a 2-D array of points, got shape {arr.shape}.")
    if arr.shape[0] == 0:
        return np.zeros((0, arr.shape[1]), dtype=dtype)
    if arr.shape[1] == 0:
        raise ValueError("Points must have at least one coordinate.")
    if not np.all(np.isfinite(arr)):
        raise ValueError("Points must have finite coordinates.")
    return arr


def ensure_query(value: Any, dimension: int) -> np.ndarray:
    """Coerce a single query point into a finite float64 vector of ``dimension``."""

    try:
        query = np.asarray(value, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise ValueError("Query must be a sequence of real numbers.") from exc
    if query.ndim == 2 and query.shape[0] == 1:
        query = query[0]
    if query.shape != (dimension,):
        raise ValueError(
            f"Query has shape {query.shape}; expected a point of dimension {dimension}."
        )
    if not np.all(np.isfinite(query)):
        raise ValueError("Query must have finite coordinates.")
    return query
