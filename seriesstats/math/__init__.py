"""Pure numeric helpers for series and vectors."""

from .arithmetic import growth, roughly_equal, safe_divide
from .series import autocorrelation, linear_regression, saddles, variation_trend
from .vectors import cosine_distance, magnitude

__all__ = [
    "autocorrelation",
    "cosine_distance",
    "growth",
    "linear_regression",
    "magnitude",
    "roughly_equal",
    "saddles",
    "safe_divide",
    "variation_trend",
]
