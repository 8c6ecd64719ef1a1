"""UI components for the Dots mosaic renderer.

This package contains the PyQt6 shell around the mosaic core: the live
canvas, the figure button, the controls panel and the main window.
"""

from ui.canvas import MosaicCanvas
from ui.figure_button import FigureButton
from ui.main_window import MosaicWindow

__all__ = [
    "MosaicWindow",
    "MosaicCanvas",
    "FigureButton",
]
