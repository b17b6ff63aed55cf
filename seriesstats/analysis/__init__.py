"""Analytical helpers for comparing and partitioning collections."""

from .clustering import head_tails_breaks
from .distributions import chi_squared_distance, ks_statistic, ks_test, pairwise_distances

__all__ = [
    "chi_squared_distance",
    "head_tails_breaks",
    "ks_statistic",
    "ks_test",
    "pairwise_distances",
]
