from __future__ import annotations

import numpy as np
import pytest

from seriesstats.math.series import autocorrelation, linear_regression, saddles, variation_trend
from seriesstats.models import AutocorrelationResult


def test_saddles_counts_direction_changes() -> None:
    assert saddles([(0, 0), (1, 1), (2, 0), (3, 1)]) == 2


def test_saddles_monotonic_and_flat() -> None:
    assert saddles([(0, 0), (1, 1), (2, 3)]) == 0
    assert saddles([(0, 3), (1, 2), (2, 1)]) == 0
    assert saddles([(0, 1), (1, 1), (2, 1)]) == 0


def test_saddles_zero_difference_joins_falling_run() -> None:
    assert saddles([(0, 0), (1, 1), (2, 1), (3, 0)]) == 1


def test_saddles_without_differences() -> None:
    assert saddles(np.array([[0.0, 1.0]])) == -1
    assert saddles([(0, 1)]) == -1
    assert saddles([]) == -1


def test_autocorrelation_at_lag() -> None:
    series = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
    assert autocorrelation(series, 1) == pytest.approx(1.0)
    assert autocorrelation([1.0, 2.0, 3.0], 2) is None
    assert autocorrelation([1.0, 1.0, 1.0, 1.0], 1) is None


def test_autocorrelation_finds_period() -> None:
    series = [1.0, 2.0, 3.0] * 4

    result = autocorrelation(series)

    assert isinstance(result, AutocorrelationResult)
    assert result.lag == 3
    assert result.autocorrelation == pytest.approx(1.0)


def test_autocorrelation_prefers_smallest_lag_on_ties() -> None:
    # lags 1, 2 and 3 all correlate perfectly (negatively at odd lags)
    result = autocorrelation([1.0, -1.0] * 4)

    assert result.lag == 1
    assert result.autocorrelation == pytest.approx(-1.0)


def test_autocorrelation_short_or_constant_series() -> None:
    assert autocorrelation([1.0, 2.0, 3.0]) == AutocorrelationResult(lag=0, autocorrelation=0.0)
    assert autocorrelation([5.0] * 6) == AutocorrelationResult(lag=0, autocorrelation=0.0)


def test_linear_regression() -> None:
    identity = linear_regression([(0, 0), (1, 1), (2, 2)])
    assert identity is not None
    assert identity.offset == pytest.approx(0.0, abs=1e-12)
    assert identity.slope == pytest.approx(1.0)

    model = linear_regression(np.array([[0.0, 1.0], [1.0, 3.0], [2.0, 5.0]]))
    assert model is not None
    assert model.offset == pytest.approx(1.0)
    assert model.slope == pytest.approx(2.0)
    assert model.predict(3.0) == pytest.approx(7.0)


def test_linear_regression_degenerate() -> None:
    assert linear_regression([]) is None
    assert linear_regression([(1, 2)]) is None
    assert linear_regression([(1, 0), (1, 2)]) is None


def test_variation_trend() -> None:
    assert variation_trend([1.0, 1.0, 1.0, 1.0], 2) == pytest.approx(0.0, abs=1e-12)
    # coefficients 0, 0, 2/3 over windows 0..2
    assert variation_trend([2.0, 2.0, 2.0, 4.0], 2) == pytest.approx(1 / 3)


def test_variation_trend_skips_zero_mean_windows() -> None:
    # windows 1 and 2 average zero; windows 0 and 3 keep their index (0, 0) and (3, 2/3)
    assert variation_trend([2.0, 2.0, -2.0, 2.0, 4.0], 2) == pytest.approx(2 / 9)


def test_variation_trend_guards() -> None:
    assert variation_trend([1.0, 2.0], 3) is None
    assert variation_trend([1.0, -1.0, 1.0, -1.0], 2) is None
    with pytest.raises(ValueError):
        variation_trend([1.0, 2.0], 0)
