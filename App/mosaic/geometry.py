"""Figure geometry generation.

AIDEV-NOTE: Every surface consumes the same Figure record, so raster and
vector output share their vertices exactly. Angles follow screen
coordinates: 0 degrees points right and negative angles turn towards the
top of the image.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from models import FigureKind, Tile

Point = Tuple[float, float]

STAR_POINTS = 5
STAR_INNER_RATIO = 0.5
STAR_STEP_DEGREES = -36.0

SQUARE_ANGLES = (-45.0, -135.0, -225.0, -315.0, -45.0)
TRIANGLE_ANGLES = (-90.0, -210.0, -330.0)
RHOMBUS_ANGLES = (0.0, -90.0, -180.0, -270.0, 0.0)


class Primitive(Enum):
    """Drawing surface operation a figure is emitted through."""

    CIRCLE = "circle"
    TRIANGLE = "triangle"
    TRIANGLE_FAN = "triangle_fan"
    TRIANGLE_STRIP = "triangle_strip"


@dataclass(frozen=True)
class Figure:
    """Geometry of one figure, ready to hand to a drawing surface.

    Circles carry ``center`` and use ``size`` as their radius; every other
    primitive carries ``points`` in emission order.
    """

    kind: FigureKind
    primitive: Primitive
    center: Point
    size: float
    points: Tuple[Point, ...] = ()


def tile_center(area: Tile) -> Point:
    """Center of a square area.

    AIDEV-NOTE: Uses the width for both axes; tiles are always square.
    """
    half = area.width / 2.0
    return (area.x + half, area.y + half)


def polar_point(center: Point, distance: float, degrees: float) -> Point:
    rad = math.radians(degrees)
    return (
        center[0] + distance * math.cos(rad),
        center[1] + distance * math.sin(rad),
    )


def _ring(center: Point, distance: float, angles) -> List[Point]:
    return [polar_point(center, distance, angle) for angle in angles]


def square_strip(center: Point, size: float) -> List[Point]:
    """Closed 5-point strip for a square standing on its side."""
    return _ring(center, size, SQUARE_ANGLES)


def triangle_corners(center: Point, size: float) -> List[Point]:
    """Corners of an upward-pointing triangle."""
    return _ring(center, size, TRIANGLE_ANGLES)


def rhombus_strip(center: Point, size: float) -> List[Point]:
    """Closed 5-point strip for a rhombus with corners on the axes."""
    return _ring(center, size, RHOMBUS_ANGLES)


def star_fan(center: Point, size: float) -> List[Point]:
    """21-point fan for a five-pointed star, hub first.

    Each of the five arms contributes an (inner, outer) pair followed by an
    (outer, inner) pair, so outer tips appear twice in a row.

    Args:
        center: Star center, used as the fan hub
        size: Outer radius; the inner radius is half of it

    Returns:
        Fan vertices starting with the hub
    """
    outer = size
    inner = outer * STAR_INNER_RATIO
    step = math.radians(STAR_STEP_DEGREES)
    angle = math.radians(-90.0) - step

    cx, cy = center
    fan = [center]
    for _ in range(STAR_POINTS):
        fan.append((cx + inner * math.cos(angle), cy + inner * math.sin(angle)))
        angle += step
        fan.append((cx + outer * math.cos(angle), cy + outer * math.sin(angle)))

        fan.append((cx + outer * math.cos(angle), cy + outer * math.sin(angle)))
        angle += step
        fan.append((cx + inner * math.cos(angle), cy + inner * math.sin(angle)))

    return fan


def build_figure(
    kind: FigureKind, area: Tile, multiplier: float, radius: float
) -> Figure:
    """Build the geometry of a figure inside a square area.

    Args:
        kind: Figure to build
        area: Square bounding area (its center is the figure center)
        multiplier: Size multiplier, the luminance weight or 1.0
        radius: Base radius in pixels

    Returns:
        Figure record for a drawing surface
    """
    center = tile_center(area)
    size = radius * multiplier

    if kind is FigureKind.CIRCLE:
        return Figure(kind, Primitive.CIRCLE, center, size)
    if kind is FigureKind.SQUARE:
        points = square_strip(center, size)
        primitive = Primitive.TRIANGLE_STRIP
    elif kind is FigureKind.TRIANGLE:
        points = triangle_corners(center, size)
        primitive = Primitive.TRIANGLE
    elif kind is FigureKind.STAR:
        points = star_fan(center, size)
        primitive = Primitive.TRIANGLE_FAN
    elif kind is FigureKind.RHOMBUS:
        points = rhombus_strip(center, size)
        primitive = Primitive.TRIANGLE_STRIP
    else:
        raise ValueError(f"Unknown figure kind: {kind}")

    return Figure(kind, primitive, center, size, tuple(points))
