"""
Seasonality Detection

Autocorrelation test for a repeating cycle in a monthly series, plus the
per-phase multiplicative factors used to seed Holt-Winters seasonal state.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

import numpy as np

from .exceptions import ForecastConfigError
from .observations import SeriesInput, series_values

logger = logging.getLogger(__name__)

DEFAULT_SEASONAL_PERIOD = 12

# Autocorrelation above this counts as a real seasonal cycle
DETECTION_THRESHOLD = 0.5


@dataclass
class SeasonalityResult:
    """Result of seasonality detection"""
    factors: List[float] = field(default_factory=list)
    strength: float = 0.0  # autocorrelation at lag = period, in [-1, 1]

    @property
    def detected(self) -> bool:
        return self.strength > DETECTION_THRESHOLD

    @property
    def period(self) -> int:
        return len(self.factors)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "factors": self.factors,
            "strength": self.strength,
            "detected": self.detected
        }


def _check_period(period: int) -> None:
    if period <= 0:
        raise ForecastConfigError(f"Seasonal period must be positive, got {period}")


def neutral_seasonality(period: int = DEFAULT_SEASONAL_PERIOD) -> SeasonalityResult:
    """All-ones factors and zero strength: no seasonality asserted"""
    return SeasonalityResult(factors=[1.0] * period, strength=0.0)


def autocorrelation(values: Sequence[float], lag: int) -> float:
    """
    Mean-centred autocorrelation coefficient at the given lag.

    Returns 0 for a constant series or when the lag leaves no pairs.
    """
    x = np.asarray(values, dtype=float)
    if lag <= 0 or len(x) <= lag:
        return 0.0

    centred = x - np.mean(x)
    denominator = np.sum(centred ** 2)
    if denominator == 0:
        return 0.0

    numerator = np.sum(centred[:-lag] * centred[lag:])
    return float(numerator / denominator)


def detect_seasonality(
    series: SeriesInput,
    period: int = DEFAULT_SEASONAL_PERIOD
) -> SeasonalityResult:
    """
    Test a series for a cycle of the given period.

    Needs at least two full cycles; shorter series return the neutral
    result. Factors are the average value at each phase of the cycle
    divided by the overall average.

    Args:
        series: Observations in chronological order, or plain values
        period: Cycle length in periods (12 for monthly data)

    Returns:
        SeasonalityResult with per-phase factors and strength

    Raises:
        ForecastConfigError: if period is not positive
    """
    _check_period(period)
    values = series_values(series)
    n = len(values)

    if n < period * 2:
        logger.debug(f"Seasonality check skipped: {n} points < 2 x period {period}")
        return neutral_seasonality(period)

    x = np.array(values, dtype=float)
    overall_mean = np.mean(x)

    factors = [1.0] * period
    if overall_mean != 0:
        phases = np.arange(n) % period
        for phase in range(period):
            factors[phase] = float(np.mean(x[phases == phase]) / overall_mean)

    strength = autocorrelation(x, period)
    logger.debug(f"Seasonality strength at lag {period}: {strength:.3f}")

    return SeasonalityResult(factors=factors, strength=strength)


def initial_seasonal_factors(values: Sequence[float], period: int) -> List[float]:
    """
    Seed factors for Holt-Winters: each first-cycle value over the
    first-cycle mean.

    Falls back to ones when there is no full first cycle or its mean is not
    positive.
    """
    _check_period(period)
    if len(values) < period:
        return [1.0] * period

    first_cycle = np.asarray(values[:period], dtype=float)
    avg_first = float(np.mean(first_cycle))
    if avg_first <= 0:
        return [1.0] * period

    return [float(v / avg_first) for v in first_cycle]
