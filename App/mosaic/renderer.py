"""Mosaic rendering: tiles in, figures out.

AIDEV-NOTE: The renderer is a pure function of the image and the control
state. It never knows which surface it draws on, which keeps the live view
and the exported SVG identical.
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from models import Color, ControlState, Tile

from .geometry import Figure, build_figure
from .sampler import ImageSource, TileSample, sample_row
from .surfaces import DrawingSurface


@dataclass(frozen=True)
class PlacedFigure:
    """A figure computed for one tile, with the color it is drawn in."""

    tile: Tile
    sample: TileSample
    color: Color
    multiplier: float
    figure: Figure


def row_start(y: int, step: int, shift: bool) -> int:
    """First X of a row; odd rows are offset by half a step when shifting."""
    if not shift or y % 2 == 0:
        return 0
    return step // 2


def grayscale_color(lum: float) -> Color:
    """Neutral gray for a luminance weight (1.0 is black)."""
    return Color.gray(int(255 * (1.0 - lum)))


class MosaicRenderer:
    """Renders an image as a grid of figures onto a drawing surface."""

    def __init__(self, source: ImageSource, state: ControlState):
        self.source = source
        self.state = state.normalized()

    def samples(self) -> List[Tuple[Tile, TileSample]]:
        """Every tile with its sample, in row-major order.

        AIDEV-NOTE: Cached on the source per (step, shift), so repaints that
        only move the camera or change the figure do not resample.
        """
        step, shift = self.state.step, self.state.shift
        source = self.source

        def build():
            return [
                pair
                for y in range(0, source.height, step)
                for pair in sample_row(source, y, step, row_start(y, step, shift))
            ]

        return source.cached(("tiles", step, shift), build)

    def tiles(self) -> Iterator[Tile]:
        """Tiles in row-major order, with shifted odd rows when enabled."""
        for tile, _ in self.samples():
            yield tile

    def place(self, tile: Tile, sample: TileSample) -> "PlacedFigure | None":
        """Compute the figure for one sampled tile, or None if nothing is drawn.

        Args:
            tile: Sampled tile
            sample: Its average color and luminance weight

        Returns:
            PlacedFigure, or None for white tiles and zero-sized figures
        """
        if sample.luminance == 0:
            return None

        state = self.state
        color = grayscale_color(sample.luminance) if state.grayscale else sample.color
        multiplier = sample.luminance if state.size_by_luminance else 1.0
        if multiplier == 0 or state.radius == 0:
            return None

        figure = build_figure(state.figure, tile, multiplier, state.radius)
        return PlacedFigure(tile, sample, color, multiplier, figure)

    def figures(self) -> Iterator[PlacedFigure]:
        """Every figure of the mosaic, in drawing order."""
        for tile, sample in self.samples():
            placed = self.place(tile, sample)
            if placed is not None:
                yield placed

    def render(self, surface: DrawingSurface) -> int:
        """Draw the mosaic onto a surface.

        Returns:
            Number of figures drawn
        """
        count = 0
        for placed in self.figures():
            surface.draw_figure(placed.figure, placed.color)
            count += 1
        return count
