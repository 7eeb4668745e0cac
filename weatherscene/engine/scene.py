"""
engine/scene.py

Turns a weather observation into the parameters that drive the scene: which
visual mode to run, how dense it is, and which way the wind pushes particles.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from weatherscene.engine import config
from weatherscene.engine.observation import WeatherObservation
from weatherscene.engine.weather_codes import FOG_CODES, RAIN_CODES, SNOW_CODES, STORM_CODES

logger = logging.getLogger(__name__)

Vector = Tuple[float, float]


class Mode(str, Enum):
    CLEAR = "clear"
    FOG = "fog"
    RAIN = "rain"
    SNOW = "snow"
    STORM = "storm"


@dataclass(frozen=True)
class SceneParameters:
    """Immutable inputs of one render loop.

    Attributes:
        mode: visual category
        intensity: particle density scalar in [0.15, 1]
        wind: drift vector in px/s
    """

    mode: Mode = Mode.CLEAR
    intensity: float = config.INTENSITY_FLOOR
    wind: Vector = (0.0, 0.0)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def choose_mode(weather_code: Optional[int], precipitation: Optional[float],
                visibility: Optional[float]) -> Mode:
    """Pick the visual mode. The first matching rule wins."""
    if weather_code in FOG_CODES:
        return Mode.FOG
    if weather_code in SNOW_CODES:
        return Mode.SNOW
    if weather_code in RAIN_CODES:
        return Mode.RAIN
    if weather_code in STORM_CODES:
        return Mode.STORM

    # No recognised code: fall back on the raw measurements
    if visibility is not None and visibility < config.FOG_VISIBILITY_M:
        return Mode.FOG
    if precipitation is not None and precipitation > config.RAIN_PRECIP_MM:
        return Mode.RAIN
    return Mode.CLEAR


def intensity_for(precipitation: Optional[float]) -> float:
    """Map precipitation (mm) to [0.15, 1]; missing counts as dry."""
    amount = precipitation if precipitation is not None else 0.0
    return _clamp(amount / config.PRECIP_FULL_MM, config.INTENSITY_FLOOR, config.INTENSITY_CEIL)


def wind_vector(direction_deg: Optional[float], speed: float) -> Vector:
    """Drift vector for a meteorological wind direction.

    direction_deg is where the wind blows FROM; particles drift the opposite
    way, so the bearing is flipped by 180 degrees. speed is already in px/s.
    """
    if not isinstance(direction_deg, (int, float)) or not math.isfinite(direction_deg):
        return 0.0, 0.0
    bearing = math.radians(direction_deg + 180.0)
    return math.sin(bearing) * speed, math.cos(bearing) * speed


def resolve_scene(observation: Optional[WeatherObservation],
                  wind_px_per_kmh: float = config.WIND_PX_PER_KMH) -> SceneParameters:
    """Derive SceneParameters from an observation (None gives the clear default)."""
    if observation is None:
        observation = WeatherObservation()

    mode = choose_mode(observation.weather_code, observation.precipitation, observation.visibility)
    intensity = intensity_for(observation.precipitation)
    speed = (observation.wind_speed_10m or 0.0) * wind_px_per_kmh
    wind = wind_vector(observation.wind_direction_10m, speed)

    params = SceneParameters(mode=mode, intensity=intensity, wind=wind)
    logger.debug("Resolved scene %s intensity=%.2f wind=(%.1f, %.1f)", mode.value, intensity, *wind)
    return params


# End of engine/scene.py
