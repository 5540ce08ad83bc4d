import numpy as np
import pytest

from starscan.image import (
    COLOR_RED,
    MAX_POINT,
    VIEW_HEIGHT,
    VIEW_WIDTH,
    WHITE,
    GrayImage,
    ImageView,
    Rect,
)


def test_rect_size():
    r = Rect(100, 100, 200, 200)
    assert r.width == 100
    assert r.height == 100


def test_offset_moves_without_resizing():
    r = Rect(0, 0, 10, 20).offset(5, 7)
    assert (r.left, r.top) == (5, 7)
    assert (r.width, r.height) == (10, 20)


def test_inflate_point():
    assert Rect.from_point(5, 5).inflate(1, 1) == Rect(4, 4, 6, 6)


def test_inflate_round_trip():
    r = Rect(3, 4, 9, 12)
    assert r.inflate(2, 3).inflate(-2, -3) == r


def test_gray_image_fill():
    img = GrayImage(8, 4)
    assert img.pixels.shape == (4, 8)
    assert (img.width, img.height) == (8, 4)
    img.fill(42)
    assert (img.pixels == 42).all()


@pytest.mark.parametrize("value", [-1, 256])
def test_fill_rejects_out_of_range(value):
    img = GrayImage(2, 2)
    with pytest.raises(ValueError):
        img.fill(value)


@pytest.mark.parametrize("size", [(0, 5), (5, 0), (-1, 3)])
def test_image_rejects_bad_size(size):
    with pytest.raises(ValueError):
        GrayImage(*size)


def test_region_is_a_writable_view():
    img = GrayImage(10, 10)
    img.region(Rect(2, 3, 5, 7))[...] = 9
    assert int(img.pixels.sum()) == 9 * 3 * 4
    assert img.pixels[3, 2] == 9
    assert img.pixels[7, 5] == 0


@pytest.mark.parametrize(
    "rect", [Rect(-1, 0, 5, 5), Rect(0, 0, 11, 5), Rect(0, 0, 5, 11), Rect(5, 0, 4, 5)]
)
def test_region_out_of_bounds(rect):
    with pytest.raises(ValueError):
        GrayImage(10, 10).region(rect)


def test_reset_restores_white():
    view = ImageView(width=16, height=8)
    assert (view.image.pixels == WHITE).all()
    view.image.fill(0)
    view.reset()
    assert (view.image.pixels == WHITE).all()
    assert view.image.pixels.shape == (8, 16)


def test_add_point_is_capped():
    view = ImageView(width=4, height=4)
    assert all(view.add_point(k, 0) for k in range(MAX_POINT))
    assert view.add_point(1, 1) is False
    assert len(view.points) == MAX_POINT
    view.clear_points()
    assert view.points == []


def test_render_is_clipped_to_viewport():
    view = ImageView(width=1000, height=300)
    canvas = view.render()
    assert canvas.shape == (min(300, VIEW_HEIGHT), VIEW_WIDTH, 3)
    assert (canvas == WHITE).all()


def test_render_marks_points():
    view = ImageView(width=20, height=20)
    view.add_point(10, 10)
    canvas = view.render()
    assert tuple(canvas[10, 10]) == COLOR_RED
    assert tuple(canvas[11, 9]) == COLOR_RED
    assert tuple(canvas[0, 0]) == (WHITE, WHITE, WHITE)
    assert tuple(canvas[10, 13]) == (WHITE, WHITE, WHITE)
    assert (view.image.pixels == WHITE).all()


def test_render_point_at_corner():
    view = ImageView(width=20, height=20)
    view.add_point(0, 0)
    canvas = view.render()
    assert tuple(canvas[0, 0]) == COLOR_RED


class _Recorder:
    def __init__(self):
        self.calls = []

    def call_func(self, n):
        self.calls.append(n)


def test_notify_parent_counts_up():
    parent = _Recorder()
    view = ImageView(parent, width=2, height=2)
    first = view.notify_parent()
    second = view.notify_parent()
    assert parent.calls == [first, second]
    assert second == first + 1
    assert first >= MAX_POINT


def test_notify_without_parent():
    with pytest.raises(RuntimeError):
        ImageView(width=2, height=2).notify_parent()


def test_render_does_not_share_memory():
    view = ImageView(width=5, height=5)
    canvas = view.render()
    canvas[...] = 0
    assert not np.shares_memory(canvas, view.image.pixels)
    assert (view.image.pixels == WHITE).all()