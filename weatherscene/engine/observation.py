"""
engine/observation.py

The weather observation record consumed by the scene. Values arrive from a
forecast API as loosely typed JSON, so every field is normalised here: anything
that is not a finite number becomes None. Nothing downstream has to guard
against NaN.
"""

import math
import numbers
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import numpy as np


def finite_or_none(value: Any) -> Optional[float]:
    """Return value as a float if it is a finite real number, else None."""
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        return None
    value = float(value)
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def code_or_none(value: Any) -> Optional[int]:
    """Return an integral weather code, else None (45.0 counts as 45)."""
    if isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_)):
        return int(value)
    number = finite_or_none(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


@dataclass(frozen=True)
class WeatherObservation:
    weather_code: Optional[int] = None
    precipitation: Optional[float] = None
    visibility: Optional[float] = None
    wind_speed_10m: Optional[float] = None
    wind_direction_10m: Optional[float] = None

    def __post_init__(self):
        object.__setattr__(self, "weather_code", code_or_none(self.weather_code))
        for name in ("precipitation", "visibility", "wind_speed_10m", "wind_direction_10m"):
            object.__setattr__(self, name, finite_or_none(getattr(self, name)))

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "WeatherObservation":
        """Build an observation from a mapping such as an Open-Meteo ``current`` block.

        Unknown keys (temperature, cloud cover, ...) are ignored. A full
        forecast document is accepted too; its ``current`` block is used.
        """
        if not data:
            return cls()
        if isinstance(data.get("current"), Mapping):
            data = data["current"]
        return cls(
            weather_code=data.get("weather_code"),
            precipitation=data.get("precipitation"),
            visibility=data.get("visibility"),
            wind_speed_10m=data.get("wind_speed_10m"),
            wind_direction_10m=data.get("wind_direction_10m"),
        )


# End of engine/observation.py
