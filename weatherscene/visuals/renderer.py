"""
visuals/renderer.py

Draws one ParticleSnapshot onto a drawable surface: vignette, particles in the
style of the current mode, then the mode overlays.
"""

from typing import Optional

from weatherscene.engine.scene import Mode
from weatherscene.engine.simulation import ParticleSnapshot, ParticleState
from weatherscene.visuals.sky import Sky

RAIN_COLOR = (200, 230, 255, 0.25)
STORM_COLOR = (160, 190, 255, 0.35)
STREAK_SLANT = 0.02  # fraction of horizontal drift used to tilt streaks


class Renderer:
    """Paints snapshots onto a surface.

    Usage:
        r = Renderer(canvas)
        r.draw(simulation.advance(dt))
    """

    def __init__(self, surface):
        self.surface = surface
        self._sky: Optional[Sky] = None

    def sky_for(self, mode: Mode) -> Sky:
        if self._sky is None or self._sky.mode is not mode:
            self._sky = Sky(mode)
        return self._sky

    def draw(self, snapshot: ParticleSnapshot) -> None:
        surface = self.surface
        sky = self.sky_for(snapshot.mode)
        w, h = snapshot.width, snapshot.height

        surface.clear()
        sky.draw_background(surface, w, h)

        mode = snapshot.mode
        for p in snapshot.particles:
            if mode is Mode.RAIN or mode is Mode.STORM:
                self._draw_streak(p, STORM_COLOR if mode is Mode.STORM else RAIN_COLOR)
            elif mode is Mode.SNOW:
                self._draw_flake(p)
            else:
                self._draw_dust(p, mode is Mode.FOG)

        sky.draw_overlays(surface, w, h, snapshot.t)

    def _draw_streak(self, p: ParticleState, color) -> None:
        length = 14 + p.z * 22
        self.surface.stroke_line(p.x, p.y, p.x + p.drift_x * STREAK_SLANT, p.y + length,
                                 1 + p.z * 0.8, color)

    def _draw_flake(self, p: ParticleState) -> None:
        self.surface.fill_circle(p.x, p.y, 0.8 + p.z * 2.2, (255, 255, 255, 0.22 + p.z * 0.35))

    def _draw_dust(self, p: ParticleState, foggy: bool) -> None:
        # Floating dust; fog tints it pale blue
        radius = 0.6 + p.z * 1.4
        if foggy:
            color = (230, 245, 255, 0.06 + p.z * 0.10)
        else:
            color = (255, 255, 255, 0.05 + p.z * 0.10)
        self.surface.fill_circle(p.x, p.y, radius, color)


# End of visuals/renderer.py
