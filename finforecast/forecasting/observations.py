"""
Observations

The single input shape consumed by every forecasting component: an ordered
collection of (timestamp, value) pairs for one tracked metric.
"""

import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from dateutil.relativedelta import relativedelta

from .exceptions import InvalidObservationError


@dataclass(frozen=True)
class Observation:
    """One historical measurement of the tracked metric"""
    timestamp: Union[date, datetime]
    value: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "value": self.value
        }


SeriesInput = Sequence[Union[Observation, float, int]]


def sort_observations(observations: Iterable[Observation]) -> List[Observation]:
    """Return a chronologically sorted copy; the caller's list is untouched"""
    return sorted(observations, key=lambda o: _sort_key(o.timestamp))


def _sort_key(timestamp: Union[date, datetime]) -> datetime:
    # date and datetime do not compare with each other
    if isinstance(timestamp, datetime):
        return timestamp
    return datetime(timestamp.year, timestamp.month, timestamp.day)


def series_values(series: SeriesInput) -> List[float]:
    """
    Extract the numeric values of a series.

    Accepts either Observation records (kept in the given order) or plain
    numbers, so the statistical helpers can be used on raw value lists.
    """
    return [float(item.value) if isinstance(item, Observation) else float(item)
            for item in series]


def series_timestamps(series: SeriesInput) -> List[Optional[Union[date, datetime]]]:
    """Timestamps of a series, None for plain numeric entries"""
    return [item.timestamp if isinstance(item, Observation) else None
            for item in series]


def validate_observations(observations: Iterable[Observation]) -> List[Observation]:
    """
    Reject non-finite values before handing a series to the engine.

    The engine assumes clean finite input; hosting code calls this at the
    boundary where observations are loaded.

    Raises:
        InvalidObservationError: if any value is NaN or infinite
    """
    checked = []
    for index, observation in enumerate(observations):
        if not math.isfinite(observation.value):
            raise InvalidObservationError(
                f"Observation {index} ({observation.timestamp}) has non-finite value {observation.value!r}"
            )
        checked.append(observation)
    return checked


def make_monthly_series(
    values: Sequence[float],
    start: Optional[date] = None
) -> List[Observation]:
    """Build month-start observations from a list of values"""
    start = start or date(2024, 1, 1)
    return [
        Observation(timestamp=start + relativedelta(months=i), value=float(v))
        for i, v in enumerate(values)
    ]
