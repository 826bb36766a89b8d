"""
Burn Rate Predictor

Extrapolates an expense series with the linear trend and classifies whether
spending is accelerating.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

from .exceptions import ForecastConfigError
from .observations import SeriesInput, series_values
from .trend_analyzer import TrendDirection, calculate_trend, classify_trend

logger = logging.getLogger(__name__)


class BurnTrend(Enum):
    """Direction of spending"""
    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


_BURN_TRENDS = {
    TrendDirection.UP: BurnTrend.INCREASING,
    TrendDirection.DOWN: BurnTrend.DECREASING,
    TrendDirection.STABLE: BurnTrend.STABLE
}


@dataclass
class BurnPrediction:
    """Projected monthly burn"""
    predictions: List[float] = field(default_factory=list)
    average_burn: float = 0.0
    trend: BurnTrend = BurnTrend.STABLE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "predictions": [round(p, 2) for p in self.predictions],
            "average_burn": round(self.average_burn, 2),
            "trend": self.trend.value
        }


def predict_burn_rate(expense_series: SeriesInput, months: int = 12) -> BurnPrediction:
    """
    Project future monthly burn from historical expenses.

    Args:
        expense_series: Monthly expenses in chronological order
        months: Number of future months to project

    Returns:
        BurnPrediction with projections floored at zero

    Raises:
        ForecastConfigError: if months is negative
    """
    if months < 0:
        raise ForecastConfigError(f"months must not be negative, got {months}")

    values = series_values(expense_series)
    n = len(values)
    trend = calculate_trend(values)

    average_burn = sum(values) / n if n else 0.0

    # Continue the fitted line past the last observed index (n - 1)
    predictions = [
        max(0.0, trend.intercept + trend.slope * (n - 1 + h))
        for h in range(1, months + 1)
    ]

    direction = _BURN_TRENDS[classify_trend(trend.slope, average_burn)]
    logger.debug(
        f"Burn slope {trend.slope:.2f}/month on average {average_burn:.2f}: {direction.value}"
    )

    return BurnPrediction(
        predictions=predictions,
        average_burn=average_burn,
        trend=direction
    )
