"""
Forecasting Module for Financial Metric Forecasting

Trend, seasonality, Holt-Winters forecasting, anomaly and burn-rate analysis
over a single monthly series.
"""

from .exceptions import (
    ForecastError,
    ForecastConfigError,
    InvalidObservationError
)
from .observations import (
    Observation,
    make_monthly_series,
    sort_observations,
    validate_observations
)
from .trend_analyzer import (
    TrendDirection,
    TrendResult,
    calculate_trend,
    classify_trend
)
from .seasonality import (
    SeasonalityResult,
    autocorrelation,
    detect_seasonality,
    initial_seasonal_factors
)
from .metrics import (
    mean_absolute_error,
    mean_absolute_percentage_error,
    root_mean_squared_error
)
from .holt_winters import (
    ExponentialSmoothingForecaster,
    FitMetrics,
    ForecastOptions,
    ForecastPoint,
    ForecastResult,
    ModelParams,
    forecast,
    holt_winters,
    z_score
)
from .anomaly_detector import (
    Anomaly,
    detect_anomalies
)
from .burn_rate import (
    BurnPrediction,
    BurnTrend,
    predict_burn_rate
)

__all__ = [
    # Errors
    'ForecastError',
    'ForecastConfigError',
    'InvalidObservationError',
    # Observations
    'Observation',
    'make_monthly_series',
    'sort_observations',
    'validate_observations',
    # Trend
    'TrendDirection',
    'TrendResult',
    'calculate_trend',
    'classify_trend',
    # Seasonality
    'SeasonalityResult',
    'autocorrelation',
    'detect_seasonality',
    'initial_seasonal_factors',
    # Metrics
    'mean_absolute_error',
    'mean_absolute_percentage_error',
    'root_mean_squared_error',
    # Holt-Winters
    'ExponentialSmoothingForecaster',
    'FitMetrics',
    'ForecastOptions',
    'ForecastPoint',
    'ForecastResult',
    'ModelParams',
    'forecast',
    'holt_winters',
    'z_score',
    # Anomalies
    'Anomaly',
    'detect_anomalies',
    # Burn rate
    'BurnPrediction',
    'BurnTrend',
    'predict_burn_rate',
]
