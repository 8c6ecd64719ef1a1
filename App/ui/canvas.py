"""Live mosaic canvas with pan, zoom and drag-and-drop."""

from typing import List, Optional

from PyQt6.QtCore import QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QPainter
from PyQt6.QtWidgets import QWidget

from models import MAX_ZOOM, MIN_ZOOM, PAN_SPEED, ZOOM_PER_NOTCH, ControlState, clamp
from mosaic.renderer import MosaicRenderer
from mosaic.sampler import ImageSource
from mosaic.surfaces import RasterSurface
from ui.styles import COLORS, FONTS

PAN_KEYS = {
    Qt.Key.Key_A.value: (-1, 0),
    Qt.Key.Key_Left.value: (-1, 0),
    Qt.Key.Key_D.value: (1, 0),
    Qt.Key.Key_Right.value: (1, 0),
    Qt.Key.Key_W.value: (0, -1),
    Qt.Key.Key_Up.value: (0, -1),
    Qt.Key.Key_S.value: (0, 1),
    Qt.Key.Key_Down.value: (0, 1),
}


class MosaicCanvas(QWidget):
    """Renders the current image as a mosaic on every repaint."""

    # Step/radius derived from the pointer position
    pointer_state_changed = pyqtSignal(object)  # ControlState
    files_dropped = pyqtSignal(list)  # List[str]

    def __init__(self, state: ControlState, parent: QWidget | None = None):
        super().__init__(parent)
        self.state = state.normalized()
        self.source: Optional[ImageSource] = None
        self.track_pointer = True

        # AIDEV-NOTE: Camera in image pixels; the target is shown at the view center
        self.zoom = 1.0
        self.target = QPointF(0.0, 0.0)

        self.setMouseTracking(True)
        self.setAcceptDrops(True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

    def set_image(self, source: ImageSource):
        """Show a new image, resetting the camera onto its center."""
        self.source = source
        self.zoom = 1.0
        self.target = QPointF(source.width / 2.0, source.height / 2.0)
        self.update()

    def set_state(self, state: ControlState):
        self.state = state.normalized()
        self.update()

    # --- Input ---

    def mouseMoveEvent(self, event):
        """Derive step and radius from the pointer when tracking is on."""
        if not self.track_pointer:
            return
        pos = event.position()
        state = ControlState.from_pointer(pos.x(), pos.y(), self.width(), self.height(), self.state)
        if state != self.state:
            self.state = state
            self.pointer_state_changed.emit(state)
            self.update()

    def wheelEvent(self, event):
        notches = event.angleDelta().y() / 120.0
        self.zoom = clamp(self.zoom + notches * ZOOM_PER_NOTCH, MIN_ZOOM, MAX_ZOOM)
        self.update()

    def keyPressEvent(self, event):
        direction = PAN_KEYS.get(event.key())
        if direction is None:
            super().keyPressEvent(event)
            return
        dx, dy = direction
        self.target = QPointF(
            self.target.x() + dx * PAN_SPEED, self.target.y() + dy * PAN_SPEED
        )
        self.update()

    def dragEnterEvent(self, event):
        if event.mimeData().hasUrls():
            event.acceptProposedAction()

    def dropEvent(self, event):
        paths: List[str] = [url.toLocalFile() for url in event.mimeData().urls() if url.isLocalFile()]
        if paths:
            self.files_dropped.emit(paths)
            event.acceptProposedAction()

    # --- Painting ---

    def paintEvent(self, event):
        """Render the mosaic through the raster surface."""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.rect(), COLORS.CANVAS_BACKGROUND)

        if self.source is None:
            painter.setPen(COLORS.HINT_TEXT)
            painter.setFont(FONTS.HINT)
            painter.drawText(
                self.rect(),
                Qt.AlignmentFlag.AlignCenter,
                "Drop an image here or use File > Open",
            )
            painter.end()
            return

        painter.translate(self.width() / 2.0, self.height() / 2.0)
        painter.scale(self.zoom, self.zoom)
        painter.translate(-self.target.x(), -self.target.y())

        MosaicRenderer(self.source, self.state).render(RasterSurface(painter))
        painter.end()
