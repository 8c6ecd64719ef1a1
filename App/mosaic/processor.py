"""Mosaic processor orchestrating image loading and SVG export.

AIDEV-NOTE: This is the only place that touches the filesystem for images
and exports. The UI calls it; the core modules stay I/O free.
"""

from pathlib import Path
from typing import Optional, Tuple

from PIL import Image

from models import ControlState, MosaicConfig

from .document import VectorDocument, VectorDocumentWriter
from .renderer import MosaicRenderer
from .sampler import ImageSource
from .surfaces import VectorSurface


class MosaicProcessor:
    """Loads images and exports their mosaics as SVG."""

    def __init__(self, config: MosaicConfig | None = None):
        self.config = config or MosaicConfig()
        self.writer = VectorDocumentWriter(self.config.max_name_attempts)

    def load_image(self, file_path: str | Path) -> ImageSource:
        """Load and validate an image file.

        Args:
            file_path: Path to image file (PNG, JPG, etc.)

        Returns:
            ImageSource over the image in RGBA mode

        Raises:
            ValueError: If file cannot be loaded or is invalid
        """
        try:
            with Image.open(file_path) as image:
                # AIDEV-NOTE: Always convert to RGBA for consistent sampling
                image.load()
                return ImageSource(image.convert("RGBA"))
        except Exception as e:
            raise ValueError(f"Failed to load image: {e}") from e

    def default_export_path(self, image_path: str | Path) -> Path:
        """Export path for an image: ``<export_dir>/<basename>.svg``."""
        return Path(self.config.export_dir).expanduser() / f"{Path(image_path).stem}.svg"

    def build_document(self, source: ImageSource, state: ControlState) -> VectorDocument:
        """Render a mosaic into a new vector document.

        Args:
            source: Image to render
            state: Controls to render with

        Returns:
            Finalized VectorDocument
        """
        state = state.normalized()
        document = VectorDocument(source.width, source.height, margin=state.radius)
        MosaicRenderer(source, state).render(VectorSurface(document))
        return document

    def export(
        self,
        source: ImageSource,
        state: ControlState,
        image_path: str | Path,
        target: str | Path | None = None,
    ) -> Tuple[Optional[Path], Optional[str]]:
        """Render and write the mosaic of an image as SVG.

        Args:
            source: Image to render
            state: Controls to render with
            image_path: Path the image was loaded from (names the export)
            target: Explicit output path, defaults to default_export_path()

        Returns:
            Tuple of (written path or None, error_message or None)
        """
        print("Rendering mosaic for export...")
        document = self.build_document(source, state)
        print(f"Rendered {len(document)} figures.")

        path = Path(target) if target is not None else self.default_export_path(image_path)
        written, error = self.writer.save(document, path)
        if error:
            print(f"Export failed: {error}")
        else:
            print(f"Exported mosaic to {written}")
        return written, error
