"""Shape and trend descriptors for numeric time series."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view
from scipy.stats import linregress

from seriesstats.math.arithmetic import safe_divide
from seriesstats.models import AutocorrelationResult, LinearModel

Point = tuple[float, float]

_LOGGER = logging.getLogger(__name__)


def _as_points(series: np.ndarray | Sequence[Point]) -> np.ndarray:
    return np.asarray(series, dtype=float).reshape(-1, 2)


def saddles(series: np.ndarray | Sequence[Point]) -> int:
    """Count direction reversals in a series of ``(x, y)`` points.

    Fewer than two points have no runs at all and yield -1.
    """

    diffs = np.diff(_as_points(series)[:, 1])
    rising = diffs > 0
    runs = int(np.count_nonzero(rising[1:] != rising[:-1])) + (1 if diffs.size else 0)
    return runs - 1


def _lagged_correlation(values: np.ndarray, lag: int) -> float | None:
    if lag < 0:
        raise ValueError("lag must be non-negative")
    if values.size - lag < 2:
        return None
    head = values[: values.size - lag]
    tail = values[lag:]
    head_zero = head - np.mean(head)
    tail_zero = tail - np.mean(tail)
    denom = float(np.sqrt(np.sum(head_zero**2) * np.sum(tail_zero**2)))
    if denom == 0:
        return None
    value = float(np.dot(head_zero, tail_zero) / denom)
    return max(min(value, 1.0), -1.0)


def _best_lag(values: np.ndarray) -> AutocorrelationResult:
    best = AutocorrelationResult(lag=0, autocorrelation=0.0)
    for lag in range(1, values.size // 2):
        r = _lagged_correlation(values, lag)
        if r is None:
            _LOGGER.debug("Skipping lag %d: autocorrelation undefined", lag)
            continue
        if (abs(r), -lag) > (abs(best.autocorrelation), -best.lag):
            best = AutocorrelationResult(lag=lag, autocorrelation=r)
    return best


def autocorrelation(
    series: np.ndarray | Sequence[float], lag: int | None = None
) -> AutocorrelationResult | float | None:
    """Pearson correlation between ``series`` and itself shifted by ``lag``.

    With ``lag`` given, returns the correlation at that lag, or ``None`` when
    fewer than two pairs overlap or either side is constant.

    Without ``lag``, searches lags ``1 .. len(series) // 2 - 1`` and returns the
    one with the largest absolute correlation, preferring the smallest lag on
    ties. ``AutocorrelationResult(lag=0, autocorrelation=0.0)`` means no lag
    could be evaluated.
    """

    values = np.asarray(series, dtype=float)
    if lag is None:
        return _best_lag(values)
    return _lagged_correlation(values, lag)


def linear_regression(points: np.ndarray | Sequence[Point]) -> LinearModel | None:
    """Ordinary least-squares fit over ``(x, y)`` points."""

    data = _as_points(points)
    if data.shape[0] < 2:
        return None
    x = data[:, 0]
    if np.all(x == x[0]):
        return None
    fit = linregress(x, data[:, 1])
    return LinearModel(offset=float(fit.intercept), slope=float(fit.slope))


def _coefficient_of_variation(window: np.ndarray) -> float | None:
    variance = float(np.var(window, ddof=1)) if window.size > 1 else 0.0
    return safe_divide(variance, float(np.mean(window)))


def variation_trend(series: np.ndarray | Sequence[float], period: int) -> float | None:
    """Slope of the coefficient of variation over a sliding window of width ``period``.

    Samples are assumed to be evenly (unit) spaced. Windows with a zero mean
    are left out of the fit.
    """

    if period < 1:
        raise ValueError("period must be positive")
    values = np.asarray(series, dtype=float)
    if values.size < period:
        return None

    points: list[Point] = []
    for index, window in enumerate(sliding_window_view(values, period)):
        coefficient = _coefficient_of_variation(window)
        if coefficient is not None:
            points.append((float(index), coefficient))
    model = linear_regression(points)
    if model is None:
        return None
    return model.slope


__all__ = [
    "Point",
    "autocorrelation",
    "linear_regression",
    "saddles",
    "variation_trend",
]
