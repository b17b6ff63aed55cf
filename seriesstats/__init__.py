"""Statistical and numeric primitives for profiling series and distributions."""

from .analysis import (
    chi_squared_distance,
    head_tails_breaks,
    ks_statistic,
    ks_test,
    pairwise_distances,
)
from .math import (
    autocorrelation,
    cosine_distance,
    growth,
    linear_regression,
    magnitude,
    roughly_equal,
    saddles,
    safe_divide,
    variation_trend,
)
from .models import AutocorrelationResult, LinearModel
from .settings import Settings, get_settings, load_settings

__version__ = "0.1.0"

__all__ = [
    "AutocorrelationResult",
    "LinearModel",
    "Settings",
    "autocorrelation",
    "chi_squared_distance",
    "cosine_distance",
    "get_settings",
    "growth",
    "head_tails_breaks",
    "ks_statistic",
    "ks_test",
    "linear_regression",
    "load_settings",
    "magnitude",
    "pairwise_distances",
    "roughly_equal",
    "saddles",
    "safe_divide",
    "variation_trend",
]
