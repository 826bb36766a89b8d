"""
Forecasting Exceptions

Only malformed configuration and explicitly validated input raise; the
numerical routines themselves degrade to neutral results instead.
"""


class ForecastError(Exception):
    """Base class for forecasting engine errors"""


class ForecastConfigError(ForecastError, ValueError):
    """Raised for malformed forecast configuration (horizon, period, months)"""


class InvalidObservationError(ForecastError, ValueError):
    """Raised when an observation carries a non-finite value"""
