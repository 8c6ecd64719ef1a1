"""SVG document model and writer for exported mosaics."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

import svg


class ExportError(OSError):
    """Raised when a vector document cannot be written."""


@dataclass
class VectorDocument:
    """Append-only SVG document for one render pass.

    AIDEV-NOTE: The canvas grows by ``margin`` on every side so that figures
    centred on edge tiles are not clipped. The margin is the figure radius.
    """

    image_width: int
    image_height: int
    margin: float = 0.0
    elements: "List[svg.Element]" = field(default_factory=list)

    @property
    def width(self) -> float:
        return self.image_width + 2 * self.margin

    @property
    def height(self) -> float:
        return self.image_height + 2 * self.margin

    def append(self, element: svg.Element):
        self.elements.append(element)

    def __len__(self) -> int:
        return len(self.elements)

    def to_svg(self) -> svg.SVG:
        return svg.SVG(
            width=self.width,
            height=self.height,
            viewBox=svg.ViewBoxSpec(
                -self.margin, -self.margin, self.width, self.height
            ),
            elements=list(self.elements),
        )

    def as_str(self) -> str:
        """Serialize the document to SVG markup."""
        return self.to_svg().as_str()


class VectorDocumentWriter:
    """Writes vector documents without overwriting existing files."""

    def __init__(self, max_attempts: int = 100):
        """Initialize writer.

        Args:
            max_attempts: Number of numbered variants to try when the
                requested path already exists
        """
        self.max_attempts = max_attempts

    def resolve_path(self, path: Path) -> Path:
        """Find a free file name for ``path``.

        Tries ``path`` itself, then ``<stem>_1<suffix>``, ``<stem>_2<suffix>``
        and so on up to ``max_attempts``.

        Raises:
            ExportError: If every candidate already exists
        """
        path = Path(path)
        if not path.exists():
            return path

        for attempt in range(1, self.max_attempts + 1):
            candidate = path.with_name(f"{path.stem}_{attempt}{path.suffix}")
            if not candidate.exists():
                return candidate

        raise ExportError(
            f"No free file name for {path} after {self.max_attempts} attempts"
        )

    def write(self, document: VectorDocument, path: Path) -> Path:
        """Write a document to the first free path.

        Args:
            document: Finalized document
            path: Requested output path

        Returns:
            Path actually written

        Raises:
            ExportError: If no free name exists or the file cannot be written
        """
        target = self.resolve_path(path)
        content = document.as_str()

        try:
            # "x" mode: never clobber a file created since resolve_path
            with open(target, "x", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise ExportError(f"Could not write {target}: {e}") from e

        return target

    def save(
        self, document: VectorDocument, path: Path
    ) -> Tuple[Optional[Path], Optional[str]]:
        """Write a document, reporting failure instead of raising.

        Returns:
            Tuple of (written path or None, error_message or None)
        """
        try:
            return self.write(document, path), None
        except ExportError as e:
            return None, str(e)
