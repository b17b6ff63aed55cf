"""Result records returned by the numeric helpers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LinearModel:
    """Ordinary least-squares fit ``y = offset + slope * x``."""

    offset: float
    slope: float

    def predict(self, x: float) -> float:
        """Evaluate the fitted line at ``x``."""

        return self.offset + self.slope * x


@dataclass(frozen=True, slots=True)
class AutocorrelationResult:
    """Lag paired with the autocorrelation measured at that lag."""

    lag: int
    autocorrelation: float


__all__ = ["AutocorrelationResult", "LinearModel"]
