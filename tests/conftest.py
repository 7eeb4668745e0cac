"""Shared fakes for the host services and the drawing surface."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest  # noqa: E402

from weatherscene.host import FrameScheduler, ResizeChannel  # noqa: E402


class RecordingCanvas:
    """Drawable surface that records calls instead of painting."""

    def __init__(self):
        self.calls = []
        self.backing_size = (0, 0)
        self.scale = 1.0

    def resize(self, width, height):
        self.backing_size = (width, height)
        self.calls.append(("resize", width, height))

    def set_scale(self, scale):
        self.scale = scale
        self.calls.append(("set_scale", scale))

    def clear(self):
        self.calls.append(("clear",))

    def fill_radial_gradient(self, cx, cy, r0, r1, color):
        self.calls.append(("gradient", cx, cy, r0, r1, color))

    def fill_rect(self, x, y, w, h, color):
        self.calls.append(("rect", x, y, w, h, color))

    def stroke_line(self, x0, y0, x1, y1, width, color):
        self.calls.append(("line", x0, y0, x1, y1, width, color))

    def fill_circle(self, x, y, radius, color):
        self.calls.append(("circle", x, y, radius, color))

    def drawing_calls(self):
        return [c for c in self.calls if c[0] not in ("resize", "set_scale")]

    def named(self, name):
        return [c for c in self.calls if c[0] == name]


class Display:
    """Mutable display metrics."""

    def __init__(self, width=400, height=300, ratio=1.0):
        self.width = width
        self.height = height
        self.ratio = ratio

    def __call__(self):
        return self.width, self.height, self.ratio


class ManualClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture
def scheduler():
    return FrameScheduler()


@pytest.fixture
def resize_channel():
    return ResizeChannel()


@pytest.fixture
def display():
    return Display()


@pytest.fixture
def clock():
    return ManualClock()
