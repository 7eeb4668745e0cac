"""
main.py

Demo window for the weather scene. Shows the scene for an observation given on
the command line (or read from a JSON file) and lets you flip between presets.

Keys: 1-5 select clear / fog / rain / snow / storm presets, ESC quits.

Run: python -m weatherscene.main --code 63 --precipitation 2.4 --wind-speed 18 --wind-direction 250
"""

import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import List, Optional

import pygame

from weatherscene.engine.config import SceneConfig, parse_setting
from weatherscene.engine.controller import WeatherScene
from weatherscene.engine.observation import WeatherObservation
from weatherscene.engine.weather_codes import describe_weather_code, fog_likely
from weatherscene.host import FrameScheduler, ResizeChannel, WindowMetrics, canvas_factory

logger = logging.getLogger("weatherscene")

BG_COLOR = (8, 14, 24)

PRESETS = {
    pygame.K_1: WeatherObservation(weather_code=0, precipitation=0.0, visibility=24000,
                                   wind_speed_10m=8, wind_direction_10m=270),
    pygame.K_2: WeatherObservation(weather_code=45, precipitation=0.0, visibility=400,
                                   wind_speed_10m=4, wind_direction_10m=180),
    pygame.K_3: WeatherObservation(weather_code=63, precipitation=1.8, visibility=9000,
                                   wind_speed_10m=22, wind_direction_10m=250),
    pygame.K_4: WeatherObservation(weather_code=73, precipitation=1.2, visibility=3000,
                                   wind_speed_10m=12, wind_direction_10m=300),
    pygame.K_5: WeatherObservation(weather_code=95, precipitation=4.5, visibility=6000,
                                   wind_speed_10m=35, wind_direction_10m=220),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Animated weather scene")
    parser.add_argument("--observation", help="JSON file with an observation or an Open-Meteo forecast")
    parser.add_argument("--code", type=int, dest="weather_code", help="WMO weather code")
    parser.add_argument("--precipitation", type=float, help="precipitation in mm")
    parser.add_argument("--visibility", type=float, help="visibility in metres")
    parser.add_argument("--wind-speed", type=float, dest="wind_speed_10m", help="wind speed in km/h")
    parser.add_argument("--wind-direction", type=float, dest="wind_direction_10m",
                        help="direction the wind blows from, in degrees")
    parser.add_argument("--width", type=int)
    parser.add_argument("--height", type=int)
    parser.add_argument("--fps", type=int)
    parser.add_argument("--pixel-ratio", type=float, dest="pixel_ratio")
    parser.add_argument("--seed", type=int)
    parser.add_argument("--log-level", dest="log_level")
    return parser


def load_config(args: argparse.Namespace) -> SceneConfig:
    config = SceneConfig.from_env()
    for name in ("width", "height", "fps", "pixel_ratio", "seed", "log_level"):
        value = getattr(args, name)
        if value is not None:
            setattr(config, name, parse_setting(name, str(value)))
    return config


def load_observation(args: argparse.Namespace) -> WeatherObservation:
    observation = WeatherObservation()
    if args.observation:
        with open(args.observation, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{args.observation} does not hold a JSON object")
        observation = WeatherObservation.from_mapping(data)
    overrides = {}
    for name in ("weather_code", "precipitation", "visibility", "wind_speed_10m", "wind_direction_10m"):
        value = getattr(args, name)
        if value is not None:
            overrides[name] = value
    return replace(observation, **overrides)


def caption_for(scene: WeatherScene, observation: WeatherObservation) -> str:
    mode = scene.params.mode.value.title() if scene.params else "Off"
    text = describe_weather_code(observation.weather_code)
    caption = f"Weather Scene - {mode}"
    if text:
        caption += f" ({text})"
    if fog_likely(observation):
        caption += " - fog likely"
    return caption


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = load_config(args)
    except ValueError as exc:
        parser.error(str(exc))
    logging.basicConfig(
        level=config.log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        observation = load_observation(args)
    except (OSError, ValueError) as exc:
        logger.error("Could not read observation: %s", exc)
        return 2

    pygame.init()
    window = pygame.display.set_mode((config.width, config.height), pygame.RESIZABLE)
    clock = pygame.time.Clock()

    scheduler = FrameScheduler()
    resize_channel = ResizeChannel()
    scene = WeatherScene(canvas_factory, scheduler, resize_channel, WindowMetrics(config.pixel_ratio), config)
    scene.update(observation)
    pygame.display.set_caption(caption_for(scene, observation))
    logger.info("Showing %s", scene.params.mode.value)

    try:
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key in PRESETS:
                        observation = PRESETS[event.key]
                        if scene.update(observation):
                            pygame.display.set_caption(caption_for(scene, observation))
                            logger.info("Switched to %s", scene.params.mode.value)
                elif event.type == pygame.VIDEORESIZE:
                    window = pygame.display.get_surface()
                    resize_channel.dispatch(event.size)

            scheduler.run_pending()

            window.fill(BG_COLOR)
            if scene.canvas is not None:
                scene.canvas.present(window)
            pygame.display.flip()
            clock.tick(config.fps)
    finally:
        scene.stop()
        pygame.quit()

    return 0


if __name__ == "__main__":
    sys.exit(main())


# End of main.py
