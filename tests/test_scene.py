import math

import pytest

from weatherscene.engine.observation import WeatherObservation
from weatherscene.engine.scene import Mode, SceneParameters, choose_mode, intensity_for, resolve_scene, wind_vector


@pytest.mark.parametrize("code", [45, 48])
@pytest.mark.parametrize("visibility,precipitation", [(None, None), (20000, 0.0), (300, 5.0)])
def test_fog_codes_win_over_measurements(code, visibility, precipitation):
    assert choose_mode(code, precipitation, visibility) is Mode.FOG


@pytest.mark.parametrize("code", [71, 73, 75, 77, 85, 86])
def test_snow_codes(code):
    assert choose_mode(code, 2.0, 500) is Mode.SNOW


@pytest.mark.parametrize("code", [51, 53, 55, 56, 57, 61, 63, 65, 66, 67, 80, 81, 82])
def test_rain_codes(code):
    assert choose_mode(code, None, None) is Mode.RAIN


@pytest.mark.parametrize("code", [95, 96, 99])
def test_storm_codes(code):
    assert choose_mode(code, 0.0, 10000) is Mode.STORM


def test_low_visibility_without_code_is_fog():
    assert choose_mode(None, None, 500) is Mode.FOG


def test_visibility_threshold_is_exclusive():
    assert choose_mode(None, None, 1200) is Mode.CLEAR


def test_precipitation_without_code_is_rain():
    assert choose_mode(None, 0.5, None) is Mode.RAIN


def test_trace_precipitation_stays_clear():
    assert choose_mode(None, 0.1, None) is Mode.CLEAR


def test_unknown_code_falls_through_to_measurements():
    assert choose_mode(3, 0.0, 800) is Mode.FOG


def test_clear_sky_at_intensity_floor():
    params = resolve_scene(WeatherObservation(weather_code=0, precipitation=0))
    assert params.mode is Mode.CLEAR
    assert params.intensity == 0.15


@pytest.mark.parametrize("precipitation,expected", [(6, 1.0), (3, 1.0), (0, 0.15), (None, 0.15), (1.5, 0.5), (-2, 0.15)])
def test_intensity_clamped(precipitation, expected):
    assert intensity_for(precipitation) == pytest.approx(expected)


def test_wind_from_north_drifts_with_negative_y():
    x, y = wind_vector(0, 10)
    assert x == pytest.approx(0.0, abs=1e-9)
    assert y == pytest.approx(-10.0)


def test_wind_from_west_drifts_east():
    x, y = wind_vector(270, 10)
    assert x == pytest.approx(10.0)
    assert y == pytest.approx(0.0, abs=1e-9)


@pytest.mark.parametrize("direction", [None, float("nan"), float("inf"), "north"])
def test_bad_direction_gives_no_wind(direction):
    assert wind_vector(direction, 25) == (0.0, 0.0)


def test_wind_speed_scaled_from_kmh():
    params = resolve_scene(WeatherObservation(wind_speed_10m=36, wind_direction_10m=270))
    assert params.wind[0] == pytest.approx(36 * 5.0)


def test_missing_wind_speed_gives_no_wind():
    params = resolve_scene(WeatherObservation(wind_direction_10m=90))
    assert params.wind == pytest.approx((0.0, 0.0))


def test_none_observation_resolves_to_default():
    assert resolve_scene(None) == SceneParameters()


def test_garbage_fields_degrade_to_clear():
    obs = WeatherObservation.from_mapping({
        "weather_code": "rain", "precipitation": float("nan"), "visibility": None,
        "wind_speed_10m": "fast", "wind_direction_10m": float("nan"),
    })
    params = resolve_scene(obs)
    assert params.mode is Mode.CLEAR
    assert params.intensity == 0.15
    assert params.wind == (0.0, 0.0)
    assert not any(math.isnan(v) for v in params.wind)
