"""
Fit Quality Metrics

Error measures comparing a fitted series against the actuals.
"""

from typing import Sequence

import numpy as np


def mean_absolute_percentage_error(
    actual: Sequence[float],
    predicted: Sequence[float]
) -> float:
    """MAPE in percent over the points where the actual is non-zero"""
    a = np.asarray(actual, dtype=float)
    p = np.asarray(predicted, dtype=float)
    if len(a) == 0 or len(a) != len(p):
        return 0.0

    mask = a != 0
    if not mask.any():
        return 0.0
    return float(np.mean(np.abs((a[mask] - p[mask]) / a[mask])) * 100)


def mean_absolute_error(actual: Sequence[float], predicted: Sequence[float]) -> float:
    a = np.asarray(actual, dtype=float)
    p = np.asarray(predicted, dtype=float)
    if len(a) == 0 or len(a) != len(p):
        return 0.0
    return float(np.mean(np.abs(a - p)))


def root_mean_squared_error(actual: Sequence[float], predicted: Sequence[float]) -> float:
    a = np.asarray(actual, dtype=float)
    p = np.asarray(predicted, dtype=float)
    if len(a) == 0 or len(a) != len(p):
        return 0.0
    return float(np.sqrt(np.mean((a - p) ** 2)))
