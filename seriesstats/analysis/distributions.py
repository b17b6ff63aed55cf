"""Comparisons between empirical frequency distributions."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Mapping, Sequence

import numpy as np
import pandas as pd

from seriesstats.math.vectors import cosine_distance
from seriesstats.settings import get_settings

Distribution = np.ndarray | Sequence[float]

_LOGGER = logging.getLogger(__name__)


def chi_squared_distance(p: Distribution, q: Distribution) -> float:
    """Chi-squared distance between distributions ``p`` and ``q`` of equal length.

    An index where one side is zero contributes the other side's value.
    """

    p_arr = np.asarray(p, dtype=float)
    q_arr = np.asarray(q, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        terms = np.where(
            p_arr == 0,
            q_arr,
            np.where(q_arr == 0, p_arr, np.square(p_arr - q_arr) / (p_arr + q_arr)),
        )
    return float(np.sum(terms)) / 2


def ks_statistic(p: Distribution, q: Distribution) -> float:
    """Largest absolute gap between the cumulative sums of ``p`` and ``q``."""

    gaps = np.abs(np.cumsum(np.asarray(p, dtype=float)) - np.cumsum(np.asarray(q, dtype=float)))
    if gaps.size == 0:
        return 0.0
    return float(np.max(gaps))


def ks_test(
    m: int,
    p: Distribution,
    n: int,
    q: Distribution,
    significance_level: float | None = None,
) -> bool | None:
    """Two-sample Kolmogorov-Smirnov test.

    ``m`` and ``n`` are the sample sizes behind ``p`` and ``q``. Returns
    ``True`` when the samples differ significantly, ``None`` when either
    sample size is zero.
    """

    if m * n == 0:
        return None
    if significance_level is None:
        significance_level = get_settings().significance_level
    d = ks_statistic(p, q)
    c = math.sqrt(-0.5 * math.log(significance_level / 2))
    return d > c * math.sqrt((m + n) / (m * n))


_METRICS: dict[str, Callable[[Distribution, Distribution], float | None]] = {
    "chi_squared": chi_squared_distance,
    "cosine": cosine_distance,
}


def pairwise_distances(
    distributions: Mapping[str, Distribution],
    metric: str = "chi_squared",
) -> pd.DataFrame:
    """Symmetric frame of distances between every pair of labelled distributions.

    Pairs without a defined distance are ``NaN``; the diagonal is ``0.0``.
    """

    try:
        distance = _METRICS[metric]
    except KeyError as exc:
        raise ValueError(f"Unsupported metric: {metric}") from exc

    labels = list(distributions)
    frame = pd.DataFrame(0.0, index=labels, columns=labels, dtype=float)
    for i, label_a in enumerate(labels):
        for j in range(i + 1, len(labels)):
            label_b = labels[j]
            value = distance(distributions[label_a], distributions[label_b])
            if value is None:
                _LOGGER.debug("No %s distance between %s and %s", metric, label_a, label_b)
                value = float("nan")
            frame.iat[i, j] = value
            frame.iat[j, i] = value
    return frame


__all__ = [
    "Distribution",
    "chi_squared_distance",
    "ks_statistic",
    "ks_test",
    "pairwise_distances",
]
