"""Mosaic rendering core for image-to-figures conversion.

AIDEV-NOTE: This package turns an image into a grid of figures. Organized
into modular components:
- sampler: Tile average color and luminance weight
- geometry: Figure vertex generation
- surfaces: Drawing surface interface with raster and SVG backends
- renderer: Tile iteration and figure placement
- document: SVG document and collision-safe writer
- processor: Image loading and export orchestration
"""

from .document import ExportError, VectorDocument, VectorDocumentWriter
from .processor import MosaicProcessor
from .renderer import MosaicRenderer
from .sampler import ImageSource
from .surfaces import DrawingSurface, RasterSurface, VectorSurface

__all__ = [
    "DrawingSurface",
    "ExportError",
    "ImageSource",
    "MosaicProcessor",
    "MosaicRenderer",
    "RasterSurface",
    "VectorDocument",
    "VectorDocumentWriter",
    "VectorSurface",
]
