import pygame
import pytest

from weatherscene.host import FrameScheduler, ResizeChannel, WindowMetrics, canvas_factory
from weatherscene.visuals.surface import PygameCanvas, SurfaceUnavailable, to_pygame_color


@pytest.fixture
def pg():
    pygame.init()
    yield pygame
    pygame.quit()


def test_color_conversion():
    assert to_pygame_color((10, 20, 30, 0.5)) == (10, 20, 30, 128)
    assert to_pygame_color((10, 20, 30, 2.0)) == (10, 20, 30, 255)


def test_resize_sets_backing_size(pg):
    canvas = PygameCanvas()
    canvas.resize(300, 150)
    assert canvas.backing_size == (300, 150)
    canvas.resize(0, 0)
    assert canvas.backing_size == (1, 1)


def test_circle_is_scaled_and_blended(pg):
    canvas = PygameCanvas((40, 40))
    canvas.set_scale(2.0)
    canvas.fill_circle(10, 10, 2, (255, 255, 255, 0.5))
    assert canvas.surface.get_at((20, 20)).a > 0
    assert canvas.surface.get_at((0, 0)).a == 0


def test_rect_is_clipped_to_surface(pg):
    canvas = PygameCanvas((20, 20))
    canvas.fill_rect(-5, 10, 100, 100, (255, 0, 0, 1.0))
    assert tuple(canvas.surface.get_at((0, 19))) == (255, 0, 0, 255)
    assert canvas.surface.get_at((0, 5)).a == 0


def test_line_is_drawn(pg):
    canvas = PygameCanvas((50, 50))
    canvas.stroke_line(10, 5, 10, 30, 1, (200, 230, 255, 1.0))
    assert canvas.surface.get_at((10, 20)).a == 255


def test_radial_gradient_fades_outwards(pg):
    canvas = PygameCanvas((200, 100))
    canvas.fill_radial_gradient(100, 15, 50, 200, (110, 231, 255, 1.0))
    centre = canvas.surface.get_at((100, 15)).a
    edge = canvas.surface.get_at((199, 99)).a
    assert centre == 255
    assert centre > edge


def test_clear_resets_alpha(pg):
    canvas = PygameCanvas((10, 10))
    canvas.fill_rect(0, 0, 10, 10, (255, 255, 255, 1.0))
    canvas.clear()
    assert canvas.surface.get_at((5, 5)).a == 0


def test_frame_scheduler_defers_nested_requests():
    scheduler = FrameScheduler()
    seen = []

    def tick(now):
        seen.append(now)
        scheduler.request_frame(tick)

    handle = scheduler.request_frame(tick)
    assert scheduler.run_pending(1.0) == 1
    assert seen == [1.0]
    assert len(scheduler) == 1
    scheduler.cancel_frame(handle)  # already ran; no effect
    assert len(scheduler) == 1


def test_resize_channel_add_remove():
    channel = ResizeChannel()
    seen = []
    channel.add_listener(seen.append)
    channel.add_listener(seen.append)
    channel.dispatch((10, 10))
    channel.remove_listener(seen.append)
    channel.dispatch((20, 20))
    assert seen == [(10, 10)]


def test_canvas_factory_needs_a_window(pg):
    with pytest.raises(SurfaceUnavailable):
        canvas_factory()
    pygame.display.set_mode((64, 48))
    assert isinstance(canvas_factory(), PygameCanvas)
    assert WindowMetrics(1.5)() == (64, 48, 1.5)


def test_circle_left_of_origin_is_placed_by_floor(pg):
    near_edge = PygameCanvas((20, 10))
    inside = PygameCanvas((20, 10))
    near_edge.fill_circle(-0.5, 5, 3, (255, 255, 255, 1.0))
    inside.fill_circle(9.5, 5, 3, (255, 255, 255, 1.0))
    for x in range(6):
        for y in range(10):
            assert near_edge.surface.get_at((x, y)).a == inside.surface.get_at((x + 10, y)).a


def test_run_pending_defaults_to_wall_clock():
    scheduler = FrameScheduler()
    seen = []
    scheduler.request_frame(seen.append)
    scheduler.run_pending()
    assert len(seen) == 1 and seen[0] > 0
