"""
Scenarios Module for Financial Metric Forecasting

Runway and forecast scenario analysis.
"""

from .runway import (
    UNBOUNDED_RUNWAY_MONTHS,
    RunwayScenario,
    RunwayScenarios,
    calculate_runway,
    calculate_runway_scenarios
)
from .forecast_scenarios import (
    SCENARIOS,
    ForecastScenario,
    ScenarioAssumptions,
    apply_scenario,
    multi_scenario_forecast
)

__all__ = [
    # Runway
    'UNBOUNDED_RUNWAY_MONTHS',
    'RunwayScenario',
    'RunwayScenarios',
    'calculate_runway',
    'calculate_runway_scenarios',
    # Forecast scenarios
    'SCENARIOS',
    'ForecastScenario',
    'ScenarioAssumptions',
    'apply_scenario',
    'multi_scenario_forecast',
]
