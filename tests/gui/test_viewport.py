"""
Unit tests for the letterboxed arena viewport
"""

import pytest

from neon_pong.gui.viewport import ArenaViewport


@pytest.fixture
def viewport() -> ArenaViewport:
    # Narrow window: arena scaled by half, bars above and below
    return ArenaViewport(600, 720, 1200, 720)


def test_matching_window_is_identity():
    viewport = ArenaViewport(1200, 720, 1200, 720)
    assert viewport.scale == 1.0
    assert (viewport.offset_x, viewport.offset_y) == (0, 0)
    assert viewport.to_screen(34, 300) == (34, 300)


def test_letterbox_scale_and_offsets(viewport):
    assert viewport.scale == 0.5
    assert viewport.offset_x == 0
    assert viewport.offset_y == 180


def test_pillarbox_for_wide_window():
    viewport = ArenaViewport(2000, 720, 1200, 720)
    assert viewport.scale == 1.0
    assert viewport.offset_x == 400
    assert viewport.to_screen(0, 0) == (400, 0)


def test_to_screen(viewport):
    assert viewport.to_screen(600, 360) == (300, 360)
    assert viewport.to_screen_length(120) == 60


def test_screen_length_never_vanishes(viewport):
    assert viewport.to_screen_length(0.5) == 1


@pytest.mark.parametrize(
    "screen_y,arena_y",
    [(180, 0), (540, 720), (360, 360), (0, 0), (719, 720)],
)
def test_to_arena_y(viewport, screen_y, arena_y):
    assert viewport.to_arena_y(screen_y) == pytest.approx(arena_y)


def test_pointer_zone(viewport):
    assert viewport.in_pointer_zone(0, 1 / 3)
    assert viewport.in_pointer_zone(200, 1 / 3)
    assert not viewport.in_pointer_zone(201, 1 / 3)


def test_resize(viewport):
    viewport.resize(1200, 720)
    assert viewport.scale == 1.0

    viewport.resize(0, 0)
    assert (viewport.window_width, viewport.window_height) == (1, 1)
