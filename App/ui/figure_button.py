"""Toolbar button that previews and cycles the figure kind."""

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QPainter, QPen
from PyQt6.QtWidgets import QAbstractButton, QWidget

from models import FigureKind, Tile
from mosaic.geometry import build_figure
from mosaic.surfaces import RasterSurface
from ui.styles import COLORS, SIZES

PREVIEW_MULTIPLIER = 0.5


class FigureButton(QAbstractButton):
    """Square button drawing the current figure; clicking selects the next one."""

    figure_changed = pyqtSignal(object)  # FigureKind

    def __init__(self, figure: FigureKind = FigureKind.CIRCLE, parent: QWidget | None = None):
        super().__init__(parent)
        self._figure = figure
        self.setFixedSize(SIZES.FIGURE_BUTTON_SIZE, SIZES.FIGURE_BUTTON_SIZE)
        self.setToolTip("Change figure")
        self.clicked.connect(self._cycle)

    @property
    def figure(self) -> FigureKind:
        return self._figure

    def set_figure(self, figure: FigureKind):
        """Show a figure without emitting figure_changed."""
        self._figure = figure
        self.update()

    def _cycle(self):
        self._figure = self._figure.next()
        self.update()
        self.figure_changed.emit(self._figure)

    def paintEvent(self, event):
        """Draw the frame and the figure preview."""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        hovered = self.underMouse()
        rect = self.rect().adjusted(0, 0, -1, -1)
        painter.setPen(QPen(COLORS.BUTTON_BORDER_HOVER if hovered else COLORS.BUTTON_BORDER, 1))
        painter.setBrush(COLORS.BUTTON_FILL_HOVER if hovered else COLORS.BUTTON_FILL)
        painter.drawRect(rect)

        # AIDEV-NOTE: Same geometry and raster path as the mosaic itself
        side = min(self.width(), self.height())
        size = side - SIZES.FIGURE_BUTTON_PADDING
        figure = build_figure(self._figure, Tile(0, 0, side, side), PREVIEW_MULTIPLIER, size)
        RasterSurface(painter).draw_figure(figure, COLORS.FIGURE_PREVIEW[self._figure])

        painter.end()
