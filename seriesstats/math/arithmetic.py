"""Guarded division, relative growth and tolerance comparisons."""

from __future__ import annotations

from seriesstats.settings import get_settings


def safe_divide(x: float, *denominators: float) -> float | None:
    """Divide ``x`` by each denominator in turn, or return ``1 / x`` if none are given.

    Returns ``None`` instead of raising when any denominator (or ``x`` in the
    reciprocal case) is zero.
    """

    if not denominators:
        if x == 0:
            return None
        return 1 / x
    if any(denominator == 0 for denominator in denominators):
        return None
    result = x
    for denominator in denominators:
        result = result / denominator
    return result


def growth(x2: float | None, x1: float | None) -> float | None:
    """Relative change of ``x2`` from the baseline ``x1``.

    Negative baselines are measured with the same magnitude rule as positive
    ones, so ``growth(-4, -2) == growth(4, 2) == 1.0``.
    """

    if x1 is None or x2 is None or x1 == 0:
        return None
    x2 = float(x2)
    x1 = float(x1)
    if x1 < 0 and x2 < 0:
        return growth(-x2, -x1)
    if x1 < 0:
        # x2 == 0 lands on a zero baseline here and stays absent
        inverse = growth(x1, x2)
        return None if inverse is None else -inverse
    return (x2 - x1) / x1


def roughly_equal(x: float, y: float, precision: float | None = None) -> bool:
    """Return ``True`` if ``y`` lies within ``precision`` (relative) of ``x``."""

    if precision is None:
        precision = get_settings().precision
    return (1 - precision) * x <= y <= (1 + precision) * x


__all__ = ["growth", "roughly_equal", "safe_divide"]
