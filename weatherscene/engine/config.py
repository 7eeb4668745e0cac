"""
engine/config.py

Constants for the weather scene simulation plus a small runtime config that
can be read from the environment. Physics constants live here so the pool,
the integrator and the loop agree on them.
"""

import logging
import math
import os
from dataclasses import dataclass, fields
from typing import Optional

logger = logging.getLogger(__name__)

# --- Simulation constants --------------------------------------------------
DT_CAP = 0.033  # seconds; absorbs stalls and tab-resume jumps
MIN_PIXEL_RATIO = 1.0
MAX_PIXEL_RATIO = 2.0

INTENSITY_FLOOR = 0.15
INTENSITY_CEIL = 1.0
PRECIP_FULL_MM = 3.0  # precipitation that maps to full intensity

FOG_VISIBILITY_M = 1200.0
RAIN_PRECIP_MM = 0.1

# Pool sizing
SNOW_COUNT = 220
RAIN_COUNT = 260
STORM_COUNT = 320
FOG_COUNT = 80
CLEAR_COUNT = 60

RAIN_BASE_SPEED = 160.0
SNOW_BASE_SPEED = 60.0
AMBIENT_BASE_SPEED = 30.0

SEED_RANGE = 1000.0

# Drift
SNOW_TURBULENCE = 14.0
AMBIENT_TURBULENCE = 2.0
TURBULENCE_RATE = 1.2

# Boundaries (CSS px beyond the visible area)
RESPAWN_MARGIN_Y = 20.0
WRAP_MARGIN_X = 40.0

# km/h -> m/s, then 18 px per m/s
WIND_PX_PER_KMH = 18.0 / 3.6


@dataclass
class SceneConfig:
    width: int = 960
    height: int = 540
    fps: int = 60
    pixel_ratio: float = 1.0
    seed: Optional[int] = None
    wind_px_per_kmh: float = WIND_PX_PER_KMH
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ=None) -> "SceneConfig":
        """Build a config from WEATHERSCENE_* variables.

        Unparsable values are logged and the default is kept.
        """
        environ = os.environ if environ is None else environ
        config = cls()
        for f in fields(cls):
            raw = environ.get(f"WEATHERSCENE_{f.name.upper()}")
            if raw is None or raw == "":
                continue
            try:
                setattr(config, f.name, parse_setting(f.name, raw))
            except ValueError:
                logger.warning("Ignoring WEATHERSCENE_%s=%r: not a valid value", f.name.upper(), raw)
        return config


def parse_setting(name: str, raw: str):
    """Parse one setting from its text form; raises ValueError when it is unusable."""
    if name == "seed":
        return int(raw)
    if name in ("width", "height", "fps"):
        value = int(raw)
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")
        return value
    if name in ("pixel_ratio", "wind_px_per_kmh"):
        value = float(raw)
        if not math.isfinite(value) or value <= 0:
            raise ValueError(f"{name} must be a positive number, got {raw!r}")
        return value
    level = raw.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"unknown log level {raw!r}")
    return level


# End of engine/config.py
