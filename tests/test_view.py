import pytest

from stitchpaint.geometry import Vec2, Vec2i
from stitchpaint.view import MIN_SCALE, Viewport


def test_zoom_in_then_out_restores_scale():
    vp = Viewport(100, 100, scale=20.0)
    bigger = vp.zoom(1)
    assert bigger > 20.0
    assert vp.zoom(-1) == pytest.approx(20.0)


def test_zoom_out_clamps_to_minimum():
    vp = Viewport(100, 100, scale=1.05)
    assert vp.zoom(-1) == MIN_SCALE == 1
    assert vp.zoom(-1) == MIN_SCALE


def test_pan_moves_drawing_with_drag():
    vp = Viewport(200, 200, scale=20.0)
    point = vp.to_base(Vec2i(10, 10))
    vp.pan(20, 0)
    assert vp.to_screen(point) == Vec2i(30, 10)
    vp.pan(0, 40)
    assert vp.to_screen(point) == Vec2i(30, 50)


def test_pan_back_restores_camera():
    vp = Viewport(200, 200, scale=16.0, camera_pos=Vec2(1.5, -2.0))
    vp.pan(37, -11)
    vp.pan(-37, 11)
    assert vp.camera_pos.x == pytest.approx(1.5)
    assert vp.camera_pos.y == pytest.approx(-2.0)


def test_resize():
    vp = Viewport(100, 100)
    vp.resize(640, 480)
    assert (vp.width, vp.height) == (640, 480)


def test_to_base_to_screen_round_trip():
    vp = Viewport(100, 100, scale=4.0, camera_pos=Vec2(2.0, 3.0))
    for p in [Vec2i(0, 0), Vec2i(12, 40), Vec2i(-8, 4)]:
        assert vp.to_screen(vp.to_base(p)) == p


def test_grid_lines_cover_window():
    vp = Viewport(100, 60, scale=20.0)
    lines = list(vp.grid_lines())
    vertical = [seg for seg in lines if seg[0][0] == seg[1][0] and seg[0][1] == 0 and seg[1][1] == 60]
    horizontal = [seg for seg in lines if seg[0][1] == seg[1][1] and seg[0][0] == 0 and seg[1][0] == 100]
    assert len(vertical) + len(horizontal) == len(lines)
    xs = [seg[0][0] for seg in vertical]
    ys = [seg[0][1] for seg in horizontal]
    assert xs[0] == 0 and ys[0] == 0
    assert all(b - a == 20 for a, b in zip(xs, xs[1:]))
    assert all(b - a == 20 for a, b in zip(ys, ys[1:]))
    assert max(xs) <= 100 and max(xs) + 20 > 100
    assert max(ys) <= 60 and max(ys) + 20 > 60


def test_grid_lines_shift_with_camera_fraction():
    vp = Viewport(100, 60, scale=20.0, camera_pos=Vec2(0.5, 0.0))
    first = next(vp.grid_lines())
    assert first[0][0] == -10