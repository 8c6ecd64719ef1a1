"""Drawing surfaces: the targets a mosaic is rendered onto.

AIDEV-NOTE: The renderer only talks to DrawingSurface. RasterSurface paints
straight into a QPainter for the live view; VectorSurface records SVG
elements into a VectorDocument for export.
"""

from abc import ABC, abstractmethod
from itertools import chain
from typing import Sequence

import svg
from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QBrush, QColor, QPainter, QPolygonF

from models import Color

from .document import VectorDocument
from .geometry import Figure, Point, Primitive


class DrawingSurface(ABC):
    """Four filled primitives every backend must provide."""

    @abstractmethod
    def draw_circle(self, center: Point, radius: float, color: Color):
        """Draw a filled circle."""

    @abstractmethod
    def draw_triangle(self, a: Point, b: Point, c: Point, color: Color):
        """Draw one filled triangle, vertices in the given order."""

    @abstractmethod
    def draw_triangle_fan(self, points: Sequence[Point], color: Color):
        """Draw a fan around ``points[0]``. Ignored for fewer than 3 points."""

    @abstractmethod
    def draw_triangle_strip(self, points: Sequence[Point], color: Color):
        """Draw overlapping triangles over consecutive point triples.

        Ignored for fewer than 3 points.
        """

    def draw_figure(self, figure: Figure, color: Color):
        """Emit a figure through the matching primitive."""
        if figure.primitive is Primitive.CIRCLE:
            self.draw_circle(figure.center, figure.size, color)
        elif figure.primitive is Primitive.TRIANGLE:
            a, b, c = figure.points
            self.draw_triangle(a, b, c, color)
        elif figure.primitive is Primitive.TRIANGLE_FAN:
            self.draw_triangle_fan(figure.points, color)
        elif figure.primitive is Primitive.TRIANGLE_STRIP:
            self.draw_triangle_strip(figure.points, color)


class RasterSurface(DrawingSurface):
    """Immediate drawing into an active QPainter."""

    def __init__(self, painter: QPainter):
        self.painter = painter
        self.painter.setPen(Qt.PenStyle.NoPen)

    def _fill(self, color: Color):
        self.painter.setBrush(QBrush(QColor(color.r, color.g, color.b, color.a)))

    def _polygon(self, points: Sequence[Point]):
        self.painter.drawPolygon(QPolygonF([QPointF(x, y) for x, y in points]))

    def draw_circle(self, center: Point, radius: float, color: Color):
        self._fill(color)
        self.painter.drawEllipse(QPointF(*center), radius, radius)

    def draw_triangle(self, a: Point, b: Point, c: Point, color: Color):
        self._fill(color)
        self._polygon((a, b, c))

    def draw_triangle_fan(self, points: Sequence[Point], color: Color):
        if len(points) < 3:
            return
        self._fill(color)
        hub = points[0]
        for i in range(1, len(points) - 1):
            self._polygon((hub, points[i], points[i + 1]))

    def draw_triangle_strip(self, points: Sequence[Point], color: Color):
        if len(points) < 3:
            return
        self._fill(color)
        for i in range(len(points) - 2):
            self._polygon(points[i : i + 3])


class VectorSurface(DrawingSurface):
    """Records one SVG element per primitive into a VectorDocument."""

    def __init__(self, document: VectorDocument):
        self.document = document

    @staticmethod
    def _flatten(points: Sequence[Point]) -> "list[float]":
        return list(chain.from_iterable(points))

    def draw_circle(self, center: Point, radius: float, color: Color):
        cx, cy = center
        self.document.append(svg.Circle(cx=cx, cy=cy, r=radius, fill=color.hex))

    def draw_triangle(self, a: Point, b: Point, c: Point, color: Color):
        self.document.append(
            svg.Polygon(points=self._flatten((a, b, c)), fill=color.hex)  # type: ignore[arg-type]
        )

    def draw_triangle_fan(self, points: Sequence[Point], color: Color):
        if len(points) < 3:
            return
        # AIDEV-NOTE: The hub is left out; the rim alone outlines the fan
        # for the star-shaped fans the geometry module produces.
        self.document.append(
            svg.Polygon(points=self._flatten(points[1:]), fill=color.hex)  # type: ignore[arg-type]
        )

    def draw_triangle_strip(self, points: Sequence[Point], color: Color):
        if len(points) < 3:
            return
        self.document.append(
            svg.Polygon(points=self._flatten(points), fill=color.hex)  # type: ignore[arg-type]
        )
