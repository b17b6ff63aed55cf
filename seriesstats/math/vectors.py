"""Euclidean norm and cosine distance between numeric vectors."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from seriesstats.math.arithmetic import safe_divide


def magnitude(vector: np.ndarray | Sequence[float]) -> float:
    """Euclidean norm of ``vector``."""

    values = np.asarray(vector, dtype=float)
    return float(np.sqrt(np.sum(np.square(values))))


def cosine_distance(
    a: np.ndarray | Sequence[float], b: np.ndarray | Sequence[float]
) -> float | None:
    """``1 - cos(a, b)``; ``None`` if either vector has zero magnitude."""

    a_arr = np.asarray(a, dtype=float)
    b_arr = np.asarray(b, dtype=float)
    product = float(np.dot(a_arr, b_arr))
    similarity = safe_divide(product, magnitude(a_arr), magnitude(b_arr))
    if similarity is None:
        return None
    return 1.0 - similarity


__all__ = ["cosine_distance", "magnitude"]
