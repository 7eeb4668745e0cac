"""
engine/weather_codes.py

WMO weather interpretation codes as reported by Open-Meteo.
"""

from typing import Optional

from weatherscene.engine.observation import WeatherObservation

WMO_DESCRIPTIONS = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Rime fog",
    51: "Light drizzle",
    53: "Drizzle",
    55: "Dense drizzle",
    56: "Freezing drizzle",
    57: "Dense freezing drizzle",
    61: "Slight rain",
    63: "Rain",
    65: "Heavy rain",
    66: "Freezing rain",
    67: "Heavy freezing rain",
    71: "Slight snow",
    73: "Snow",
    75: "Heavy snow",
    77: "Snow grains",
    80: "Slight rain showers",
    81: "Rain showers",
    82: "Violent rain showers",
    85: "Snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with hail",
    99: "Thunderstorm with heavy hail",
}

FOG_CODES = frozenset({45, 48})
SNOW_CODES = frozenset({71, 73, 75, 77, 85, 86})
RAIN_CODES = frozenset({51, 53, 55, 56, 57, 61, 63, 65, 66, 67, 80, 81, 82})
STORM_CODES = frozenset({95, 96, 99})

FOG_LIKELY_VISIBILITY_M = 1000.0


def describe_weather_code(code: Optional[int]) -> str:
    """Human readable text for a WMO code; empty string when unknown."""
    return WMO_DESCRIPTIONS.get(code, "")


def is_fog_code(code: Optional[int]) -> bool:
    return code in FOG_CODES


def fog_likely(observation: Optional[WeatherObservation]) -> bool:
    if observation is None:
        return False
    visibility = observation.visibility
    return is_fog_code(observation.weather_code) or (
        visibility is not None and visibility < FOG_LIKELY_VISIBILITY_M
    )


# End of engine/weather_codes.py
