"""
Pytest Configuration and Shared Fixtures

Provides monthly series builders shared across the test suite.
"""

from datetime import date
from typing import List, Sequence

import pytest

from finforecast.forecasting import Observation, make_monthly_series


@pytest.fixture
def make_series():
    """Build month-start observations from a list of values."""
    def _make(values: Sequence[float], start: date = date(2024, 1, 1)) -> List[Observation]:
        return make_monthly_series(values, start)
    return _make


@pytest.fixture
def linear_growth_series(make_series) -> List[Observation]:
    """Twelve months of steady MRR growth."""
    return make_series([
        50000, 55000, 60000, 65000, 70000, 75000,
        80000, 85000, 90000, 95000, 100000, 105000,
    ])


@pytest.fixture
def noisy_growth_series(make_series) -> List[Observation]:
    """Upward-trending series with month-to-month noise."""
    return make_series([10000, 12000, 11000, 13000, 12500, 14000, 13800, 15000, 14600, 16000])


@pytest.fixture
def q4_boost_values() -> List[float]:
    """Two years of monthly values with a fixed boost in months 9-11."""
    ripple = [0, 120, 340, 80, 410, 260, 30, 190, 470, 150, 360, 20]
    values = []
    for _year in range(2):
        for month in range(12):
            boost = 5000 if month >= 9 else 0
            values.append(10000 + boost + ripple[month])
    return values
