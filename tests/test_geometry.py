"""Tests for figure geometry."""

import math

import pytest

from models import FigureKind, Tile
from mosaic.geometry import (
    Primitive,
    build_figure,
    rhombus_strip,
    square_strip,
    star_fan,
    tile_center,
    triangle_corners,
)


def distance(a, b):
    return math.hypot(a[0] - b[0], a[1] - b[1])


def test_tile_center_uses_width_for_both_axes():
    assert tile_center(Tile(10, 20, 6, 6)) == (13.0, 23.0)
    assert tile_center(Tile(0, 0, 4, 9)) == (2.0, 2.0)


def test_circle_is_single_primitive():
    figure = build_figure(FigureKind.CIRCLE, Tile(0, 0, 10, 10), 0.5, 8.0)
    assert figure.primitive is Primitive.CIRCLE
    assert figure.center == (5.0, 5.0)
    assert figure.size == 4.0
    assert figure.points == ()


def test_square_strip_is_closed_ring():
    points = square_strip((0.0, 0.0), 2.0)
    assert len(points) == 5
    assert points[0] == points[4]
    assert all(distance(p, (0.0, 0.0)) == pytest.approx(2.0) for p in points)
    # First corner at -45 degrees: right and up
    assert points[0][0] > 0 and points[0][1] < 0


def test_triangle_points_up():
    a, b, c = triangle_corners((5.0, 5.0), 3.0)
    assert a == pytest.approx((5.0, 2.0))
    assert b[1] == pytest.approx(c[1])
    assert b[1] > 5.0


def test_rhombus_corners_on_axes():
    points = rhombus_strip((0.0, 0.0), 4.0)
    expected = [(4, 0), (0, -4), (-4, 0), (0, 4), (4, 0)]
    for point, want in zip(points, expected):
        assert point == pytest.approx(want, abs=1e-9)


def test_star_fan_layout():
    center = (10.0, 10.0)
    fan = star_fan(center, 6.0)

    assert len(fan) == 21
    assert fan[0] == center

    # Each arm: inner, outer, outer (repeated), inner
    for arm in range(5):
        inner_a, outer_a, outer_b, inner_b = fan[1 + arm * 4 : 5 + arm * 4]
        assert distance(inner_a, center) == pytest.approx(3.0)
        assert distance(outer_a, center) == pytest.approx(6.0)
        assert outer_a == outer_b
        assert distance(inner_b, center) == pytest.approx(3.0)

    # First outer tip points straight up
    assert fan[2] == pytest.approx((10.0, 4.0))


def test_star_is_a_fan():
    figure = build_figure(FigureKind.STAR, Tile(0, 0, 5, 5), 1.0, 2.0)
    assert figure.primitive is Primitive.TRIANGLE_FAN
    assert len(figure.points) == 21


@pytest.mark.parametrize(
    "kind, primitive, count",
    [
        (FigureKind.SQUARE, Primitive.TRIANGLE_STRIP, 5),
        (FigureKind.TRIANGLE, Primitive.TRIANGLE, 3),
        (FigureKind.RHOMBUS, Primitive.TRIANGLE_STRIP, 5),
    ],
)
def test_polygon_figures(kind, primitive, count):
    figure = build_figure(kind, Tile(0, 0, 9, 9), 0.5, 4.0)
    assert figure.primitive is primitive
    assert len(figure.points) == count
    assert figure.size == 2.0


def test_multiplier_scales_size():
    full = build_figure(FigureKind.RHOMBUS, Tile(0, 0, 9, 9), 1.0, 4.0)
    half = build_figure(FigureKind.RHOMBUS, Tile(0, 0, 9, 9), 0.5, 4.0)
    assert distance(full.points[0], full.center) == pytest.approx(4.0)
    assert distance(half.points[0], half.center) == pytest.approx(2.0)
