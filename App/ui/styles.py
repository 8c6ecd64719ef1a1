"""Centralized styling constants for the Dots UI.

This module consolidates colors, fonts, and sizes used throughout the application
to ensure consistency and easier maintenance.
"""

from PyQt6.QtGui import QColor, QFont

from models import Color, FigureKind


class ThemeColors:
    """Application theme colors for the canvas and UI elements."""

    # Canvas background behind the mosaic
    CANVAS_BACKGROUND = QColor(255, 255, 255)

    # Figure button frame
    BUTTON_FILL = QColor(255, 255, 255)
    BUTTON_FILL_HOVER = QColor(200, 200, 200)
    BUTTON_BORDER = QColor(0, 0, 0)
    BUTTON_BORDER_HOVER = QColor(130, 130, 130)

    # Figure button preview colors, one per figure kind
    FIGURE_PREVIEW = {
        FigureKind.CIRCLE: Color(230, 41, 55),  # red
        FigureKind.SQUARE: Color(0, 82, 172),  # dark blue
        FigureKind.TRIANGLE: Color(0, 117, 44),  # dark green
        FigureKind.STAR: Color(255, 161, 0),  # orange
        FigureKind.RHOMBUS: Color(135, 60, 190),  # violet
    }

    # Hint text on an empty canvas
    HINT_TEXT = QColor(120, 120, 120)


class Fonts:
    """Standard application fonts."""

    HINT = QFont("Arial", 14)


class Sizes:
    """Standard widget sizes and constraints."""

    # Main window
    WINDOW_MIN_SIZE = (1024, 768)

    # Figure button
    FIGURE_BUTTON_SIZE = 40
    FIGURE_BUTTON_PADDING = 10.0

    # Controls dock
    CONTROLS_MIN_WIDTH = 220


# Convenience aliases
COLORS = ThemeColors
FONTS = Fonts
SIZES = Sizes
