import math

import pytest

from fdfview.mapfile import parse_map
from fdfview.render import (
    FLAT_COLOR,
    RAISED_COLOR,
    S_HEIGHT,
    S_WIDTH,
    Canvas,
    Projection,
    Scene,
    deg_to_rad,
    height_factor,
    isometric,
)


def lit(canvas):
    return [
        (x, y)
        for y in range(canvas.height)
        for x in range(canvas.width)
        if canvas.pixel(x, y)
    ]


def test_deg_to_rad():
    assert deg_to_rad(180) == pytest.approx(math.pi)
    assert deg_to_rad(0) == 0


def test_isometric_diagonal_has_zero_x():
    x, _ = isometric(3, 3, 0)
    assert x == pytest.approx(0)


def test_isometric_height_lifts_point():
    _, flat_y = isometric(2, 5, 0)
    _, high_y = isometric(2, 5, 4)
    assert flat_y - high_y == pytest.approx(4)


def test_isometric_value():
    assert isometric(1, 1, 0)[1] == pytest.approx(1.0)


@pytest.mark.parametrize(
    "height_range, expected",
    [(0, 0.1), (10, 0.1), (11, 1.0), (25, 1.0), (26, 0.3), (-1, None)],
)
def test_height_factor(height_range, expected):
    assert height_factor(height_range) == expected


def test_canvas_put_and_read():
    canvas = Canvas(4, 3)
    canvas.put_pixel(1.7, 2.2, 0x123456)
    assert canvas.pixel(1, 2) == 0x123456


def test_canvas_ignores_outside():
    canvas = Canvas(4, 3)
    canvas.put_pixel(4, 0, 0xFF)
    canvas.put_pixel(0, -2, 0xFF)
    assert set(canvas.pixels) == {0}


def test_canvas_pixel_outside_raises():
    with pytest.raises(IndexError):
        Canvas(2, 2).pixel(2, 0)


def test_canvas_clear():
    canvas = Canvas(3, 2)
    canvas.clear(FLAT_COLOR)
    assert canvas.pixels == (FLAT_COLOR,) * 6


def test_default_scene():
    scene = Scene(parse_map(["0\n"]))
    assert scene.projection is Projection.PARALLEL
    assert (scene.canvas.width, scene.canvas.height) == (S_WIDTH, S_HEIGHT)


def test_draw_without_painting_tracks_bounds():
    scene = Scene(parse_map(["0 0\n", "0 0\n"]))
    scene.draw(False)
    assert set(scene.canvas.pixels) == {0}
    assert scene.min_x == 0
    assert scene.max_x == 1
    assert scene.max_y == 1


def test_recenter_places_bounds_in_middle():
    scene = Scene(parse_map(["0\n"]))
    scene.min_x, scene.max_x = 10.0, 50.0
    scene.min_y, scene.max_y = -20.0, 40.0
    scene.recenter()
    assert scene.offset_x + (10.0 + 50.0) / 2 == S_WIDTH // 2
    assert scene.offset_y + (-20.0 + 40.0) / 2 == S_HEIGHT // 2


def test_rescale():
    scene = Scene(parse_map(["0\n"]))
    scene.min_x, scene.max_x = 0.0, 128.0
    scene.min_y, scene.max_y = 0.0, 10.0
    scene.rescale()
    assert scene.zoom == pytest.approx(9.0)


def test_reset_bounds():
    scene = Scene(parse_map(["0 0\n"]))
    scene.offset_x = 5.0
    scene.draw(False)
    fresh = Scene(parse_map(["0 0\n"]))
    scene.reset_bounds()
    assert (scene.offset_x, scene.min_x, scene.max_x) == (
        fresh.offset_x,
        fresh.min_x,
        fresh.max_x,
    )


def test_auto_factor():
    scene = Scene(parse_map(["0 5\n"]))
    scene.auto_factor()
    assert scene.factor == 0.1


def test_render_flat_map_is_white_and_centred():
    scene = Scene(parse_map(["0 0 0 0 0\n"] * 5))
    scene.render()
    assert set(scene.canvas.pixels) == {0, FLAT_COLOR}
    points = lit(scene.canvas)
    xs = [x for x, _ in points]
    ys = [y for _, y in points]
    assert (min(xs) + max(xs)) / 2 == pytest.approx(S_WIDTH // 2, abs=2)
    assert (min(ys) + max(ys)) / 2 == pytest.approx(S_HEIGHT // 2, abs=2)


def test_render_raised_points_are_red():
    scene = Scene(parse_map(["0 0 0\n", "0 9 0\n", "0 0 0\n"]))
    scene.render()
    assert RAISED_COLOR in scene.canvas.pixels
    assert FLAT_COLOR in scene.canvas.pixels


def test_render_single_row_draws_one_line():
    scene = Scene(parse_map(["0 0\n"]))
    scene.render()
    points = lit(scene.canvas)
    assert points
    assert len({y for _, y in points}) == 1


def test_isometric_render_draws():
    scene = Scene(parse_map(["0 1\n", "2 3\n"]), projection=Projection.ISOMETRIC)
    scene.render()
    assert RAISED_COLOR in scene.canvas.pixels