"""
Financial Metric Forecasting

Forecasting and scenario engine for recurring financial metrics (MRR,
monthly expenses, cash burn) built on sparse, noisy monthly series.
"""

__version__ = "0.1.0"

from .forecasting import (
    Observation,
    ForecastOptions,
    ForecastResult,
    ForecastError,
    ForecastConfigError,
    forecast,
    calculate_trend,
    detect_seasonality,
    detect_anomalies,
    predict_burn_rate
)
from .scenarios import (
    UNBOUNDED_RUNWAY_MONTHS,
    RunwayScenarios,
    calculate_runway_scenarios
)

__all__ = [
    'Observation',
    'ForecastOptions',
    'ForecastResult',
    'ForecastError',
    'ForecastConfigError',
    'forecast',
    'calculate_trend',
    'detect_seasonality',
    'detect_anomalies',
    'predict_burn_rate',
    'UNBOUNDED_RUNWAY_MONTHS',
    'RunwayScenarios',
    'calculate_runway_scenarios',
]
