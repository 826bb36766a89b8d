"""
Trend Analyzer for Financial Metric Forecasting

Ordinary least-squares linear trend over a chronologically ordered series.
The regressor is the zero-based position in the series rather than the raw
timestamp, so slopes are expressed "per period" regardless of sampling.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

import numpy as np

from .observations import SeriesInput, series_values

# Slopes within +/- this percentage of the level count as flat
STABLE_THRESHOLD_PCT = 1.0


class TrendDirection(Enum):
    """Direction of a fitted trend"""
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


@dataclass
class TrendResult:
    """Result of trend estimation"""
    slope: float
    intercept: float
    growth_rate: float  # slope as % of the mean level
    r_squared: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "slope": self.slope,
            "intercept": self.intercept,
            "growth_rate": self.growth_rate,
            "r_squared": self.r_squared
        }


def calculate_trend(series: SeriesInput) -> TrendResult:
    """
    Fit value ~ slope * t + intercept by ordinary least squares.

    Args:
        series: Observations (already in chronological order) or plain values

    Returns:
        TrendResult; degenerate input yields a defined neutral result
    """
    values = series_values(series)
    n = len(values)

    if n == 0:
        return TrendResult(slope=0.0, intercept=0.0, growth_rate=0.0)
    if n == 1:
        return TrendResult(slope=0.0, intercept=values[0], growth_rate=0.0)

    x = np.arange(n, dtype=float)
    y = np.array(values, dtype=float)

    x_mean = np.mean(x)
    y_mean = np.mean(y)

    numerator = np.sum((x - x_mean) * (y - y_mean))
    denominator = np.sum((x - x_mean) ** 2)

    slope = numerator / denominator
    intercept = y_mean - slope * x_mean

    y_pred = slope * x + intercept
    ss_res = np.sum((y - y_pred) ** 2)
    ss_tot = np.sum((y - y_mean) ** 2)
    r_squared = 1 - (ss_res / ss_tot) if ss_tot > 0 else 0.0

    growth_rate = (slope / y_mean) * 100 if y_mean != 0 else 0.0

    return TrendResult(
        slope=float(slope),
        intercept=float(intercept),
        growth_rate=float(growth_rate),
        r_squared=float(r_squared)
    )


def classify_trend(
    slope: float,
    level: float,
    threshold_pct: float = STABLE_THRESHOLD_PCT
) -> TrendDirection:
    """
    Classify a per-period change relative to its level.

    The slope is expressed as a percentage of the level; anything inside
    +/- threshold_pct is stable. A non-positive level carries no meaningful
    ratio and is treated as stable.
    """
    trend_percent = (slope / level) * 100 if level > 0 else 0.0

    if trend_percent > threshold_pct:
        return TrendDirection.UP
    elif trend_percent < -threshold_pct:
        return TrendDirection.DOWN
    return TrendDirection.STABLE
