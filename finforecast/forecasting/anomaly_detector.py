"""
Anomaly Detector

Z-score flagging of observations that sit unusually far from the series
mean, e.g. a one-off expense spike or a missed revenue month.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union

import numpy as np

from .observations import SeriesInput, series_timestamps, series_values

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD_STD_DEVS = 2.0

# Standard deviations below this are treated as a flat series
MIN_STD_DEV = 1e-9


@dataclass
class Anomaly:
    """A flagged observation"""
    timestamp: Optional[Union[date, datetime]]
    value: float
    deviation: float  # distance from the mean in standard deviations
    index: int = 0
    is_high: bool = True

    @property
    def direction(self) -> str:
        return "high" if self.is_high else "low"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
            "value": self.value,
            "deviation": round(self.deviation, 2),
            "type": self.direction
        }


def detect_anomalies(
    series: SeriesInput,
    threshold_std_devs: float = DEFAULT_THRESHOLD_STD_DEVS
) -> List[Anomaly]:
    """
    Flag points more than threshold_std_devs population standard deviations
    from the mean.

    Args:
        series: Observations or plain values
        threshold_std_devs: Z-score threshold

    Returns:
        Flagged points in series order; empty for flat or empty series
    """
    values = series_values(series)
    if not values:
        return []

    timestamps = series_timestamps(series)
    y = np.array(values, dtype=float)
    mean_val = np.mean(y)
    std_val = np.std(y)

    if std_val < MIN_STD_DEV:
        return []

    anomalies = []
    for i, (value, timestamp) in enumerate(zip(values, timestamps)):
        z = (value - mean_val) / std_val

        if abs(z) > threshold_std_devs:
            anomalies.append(Anomaly(
                timestamp=timestamp,
                value=value,
                deviation=float(abs(z)),
                index=i,
                is_high=bool(z > 0)
            ))

    if anomalies:
        logger.info(
            f"Flagged {len(anomalies)} of {len(values)} points beyond {threshold_std_devs} std devs"
        )
    return anomalies
