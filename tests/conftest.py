"""Shared test fixtures."""

from __future__ import annotations

import os
import re
import xml.etree.ElementTree as ET

import pytest
from PIL import Image

# Raster tests paint into QImage; no display needed
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from models import Color  # noqa: E402
from mosaic.sampler import ImageSource  # noqa: E402
from mosaic.surfaces import DrawingSurface  # noqa: E402

SVG_NS = "{http://www.w3.org/2000/svg}"

BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)


class RecordingSurface(DrawingSurface):
    """Surface that records every primitive call."""

    def __init__(self):
        self.calls = []

    def draw_circle(self, center, radius, color):
        self.calls.append(("circle", (center,), radius, color))

    def draw_triangle(self, a, b, c, color):
        self.calls.append(("triangle", (a, b, c), None, color))

    def draw_triangle_fan(self, points, color):
        if len(points) >= 3:
            self.calls.append(("fan", tuple(points), None, color))

    def draw_triangle_strip(self, points, color):
        if len(points) >= 3:
            self.calls.append(("strip", tuple(points), None, color))


def solid_source(width: int, height: int, color=BLACK) -> ImageSource:
    return ImageSource(Image.new("RGBA", (width, height), color))


def parse_points(value: str) -> "list[float]":
    return [float(v) for v in re.split(r"[\s,]+", value.strip()) if v]


def svg_shapes(markup: str) -> "list[ET.Element]":
    """Shape elements (circles and polygons) of an SVG document."""
    root = ET.fromstring(markup)
    return [el for el in root.iter() if el.tag in (SVG_NS + "circle", SVG_NS + "polygon")]


@pytest.fixture
def recording_surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def black_source() -> ImageSource:
    return solid_source(10, 10, BLACK)


@pytest.fixture
def white_source() -> ImageSource:
    return solid_source(10, 10, WHITE)


@pytest.fixture
def gradient_source() -> ImageSource:
    """Horizontal gray ramp with a colored band, for non-trivial mosaics."""
    image = Image.new("RGBA", (40, 30), WHITE)
    for x in range(40):
        level = int(255 * x / 39)
        for y in range(30):
            if 10 <= y < 15:
                image.putpixel((x, y), (level, 40, 255 - level, 255))
            else:
                image.putpixel((x, y), (level, level, level, 255))
    return ImageSource(image)


@pytest.fixture(scope="session")
def qapp():
    from PyQt6.QtWidgets import QApplication

    # Widgets need a QApplication; raster-only tests work with it too
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def black() -> Color:
    return Color(*BLACK)
