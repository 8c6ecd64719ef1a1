"""Tile sampling: average color and luminance weight.

AIDEV-NOTE: The luminance formula is a darkness proxy (channels are inverted
before weighting), not a real relative luminance. Exported mosaics depend on
it, so keep it as is.
"""

import math
from typing import Callable, Dict, Hashable, List, NamedTuple, Optional, Tuple

import numpy as np
from PIL import Image

from models import Color, Tile, clamp

# Tile layouts (step, shift) kept per image; pointer tracking revisits a few
MAX_CACHED_LAYOUTS = 8


class ImageSource:
    """Read-only RGBA pixel access over a loaded image."""

    def __init__(self, image: Image.Image):
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        self.image = image
        self.width, self.height = image.size

        # AIDEV-NOTE: Stored as uint8; every sum widens to uint64 itself
        self.pixels = np.asarray(image, dtype=np.uint8)
        self.pixels.setflags(write=False)
        self._cache: Dict[Hashable, object] = {}

    def pixel_at(self, x: int, y: int) -> Color:
        """Get the color at an in-bounds pixel."""
        r, g, b, a = (int(c) for c in self.pixels[y, x])
        return Color(r, g, b, a)

    def cached(self, key: Hashable, build: Callable[[], object]):
        """Return the value stored under ``key``, building it on first use.

        The pixels never change, so anything derived from them can be reused.
        The oldest entry is dropped once MAX_CACHED_LAYOUTS are held.
        """
        if key not in self._cache:
            if len(self._cache) >= MAX_CACHED_LAYOUTS:
                del self._cache[next(iter(self._cache))]
            self._cache[key] = build()
        return self._cache[key]


class TileSample(NamedTuple):
    """Average color of a tile and its luminance weight."""

    color: Color
    luminance: float


def average_color(source: ImageSource, tile: Tile) -> Optional[Color]:
    """Average RGB color of a tile, alpha fixed at 255.

    The tile is clamped to the image, but the sums are divided by the
    nominal tile area. Tiles hanging over the right or bottom edge therefore
    come out darker than their pixels, matching the exported mosaics of
    earlier versions.

    Args:
        source: Image to sample
        tile: Sampling rectangle, may extend past the image

    Returns:
        Average color, or None when the tile does not overlap the image
    """
    x0 = max(0, tile.x)
    y0 = max(0, tile.y)
    x1 = min(tile.x + tile.width, source.width)
    y1 = min(tile.y + tile.height, source.height)

    count = tile.width * tile.height
    if x1 <= x0 or y1 <= y0 or count <= 0:
        return None

    region = source.pixels[y0:y1, x0:x1, :3]
    r, g, b = (int(total) // count for total in region.sum(axis=(0, 1), dtype=np.uint64))
    return Color(r, g, b, 255)


def luminance(color: Color) -> float:
    """Luminance weight (0-1) of a color; 0 only for pure white."""
    rf = 255.0 - color.r
    gf = 255.0 - color.g
    bf = 255.0 - color.b
    weight = math.sqrt(rf * rf * 0.299 + gf * gf * 0.587 + bf * bf * 0.114) / 255.0
    return clamp(weight, 0.0, 1.0)


def sample_tile(source: ImageSource, tile: Tile) -> Optional[TileSample]:
    """Sample a tile's average color and luminance weight."""
    color = average_color(source, tile)
    if color is None:
        return None
    return TileSample(color, luminance(color))


def sample_row(source: ImageSource, y: int, step: int, x_start: int) -> List[Tuple[Tile, TileSample]]:
    """Sample every square tile of one row in a single pass.

    Gives the same samples as calling sample_tile on each
    ``Tile(x, y, step, step)`` for ``x`` in ``range(x_start, width, step)``,
    but sums the row band once and splits it per tile with ``reduceat``.

    Args:
        source: Image to sample
        y: Top edge of the row
        step: Tile side length
        x_start: X of the first tile

    Returns:
        (tile, sample) pairs from left to right
    """
    if step <= 0 or not 0 <= y < source.height or not 0 <= x_start < source.width:
        return []

    band = source.pixels[y : y + step, :, :3].sum(axis=0, dtype=np.uint64)
    starts = np.arange(x_start, source.width, step)
    averages = np.add.reduceat(band, starts, axis=0) // np.uint64(step * step)

    row = []
    for x, (r, g, b) in zip(starts.tolist(), averages.tolist()):
        color = Color(int(r), int(g), int(b), 255)
        row.append((Tile(x, y, step, step), TileSample(color, luminance(color))))
    return row
