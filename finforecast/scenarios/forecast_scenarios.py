"""
Forecast Scenarios

Best, base and worst case views of a metric forecast, produced by scaling
the projected values of a fitted forecast.
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Optional, Sequence

from ..forecasting.holt_winters import (
    ForecastOptions,
    ForecastResult,
    forecast
)
from ..forecasting.observations import Observation

logger = logging.getLogger(__name__)


class ForecastScenario(Enum):
    """Forecast scenario types"""
    BEST_CASE = "best_case"
    BASE_CASE = "base_case"
    WORST_CASE = "worst_case"


@dataclass(frozen=True)
class ScenarioAssumptions:
    """Multipliers applied to a baseline forecast"""
    name: str
    revenue_multiplier: float
    burn_multiplier: float
    description: str = ""


SCENARIOS: Dict[ForecastScenario, ScenarioAssumptions] = {
    ForecastScenario.BEST_CASE: ScenarioAssumptions(
        name="Best Case",
        revenue_multiplier=1.3,
        burn_multiplier=0.9,
        description="Revenue 30% above forecast, costs 10% below"
    ),
    ForecastScenario.BASE_CASE: ScenarioAssumptions(
        name="Base Case",
        revenue_multiplier=1.0,
        burn_multiplier=1.0,
        description="Expected trajectory based on current trends"
    ),
    ForecastScenario.WORST_CASE: ScenarioAssumptions(
        name="Worst Case",
        revenue_multiplier=0.7,
        burn_multiplier=1.2,
        description="Revenue 30% below forecast, costs 20% above"
    ),
}


def apply_scenario(
    result: ForecastResult,
    scenario: ForecastScenario,
    is_expense: bool = False
) -> ForecastResult:
    """
    Scale the projected points of a forecast by a scenario multiplier.

    Revenue-like metrics use the revenue multiplier and expense metrics the
    burn multiplier. The historical continuity point is left untouched.
    """
    assumptions = SCENARIOS[scenario]
    multiplier = assumptions.burn_multiplier if is_expense else assumptions.revenue_multiplier

    forecasts = [
        point if point.is_historical else replace(
            point,
            projected=point.projected * multiplier,
            upper_bound=point.upper_bound * multiplier,
            lower_bound=point.lower_bound * multiplier
        )
        for point in result.forecasts
    ]
    return replace(result, forecasts=forecasts)


def multi_scenario_forecast(
    observations: Sequence[Observation],
    options: Optional[ForecastOptions] = None,
    is_expense: bool = False
) -> Dict[str, ForecastResult]:
    """
    Fit once and return the forecast under every scenario.

    Returns:
        Dict mapping scenario names to ForecastResults
    """
    baseline = forecast(observations, options)
    results = {}

    for scenario in ForecastScenario:
        results[scenario.value] = apply_scenario(baseline, scenario, is_expense)

    logger.debug(f"Built {len(results)} scenario forecasts from one fit")
    return results
