"""Data models and constants for the Dots mosaic renderer."""

from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import NamedTuple

# AIDEV-NOTE: Pointer-driven control ranges - the UI spin boxes use these too
MAX_STEP = 50
MIN_RADIUS = 1.0
MAX_RADIUS = 25.0

MIN_ZOOM = 0.1
MAX_ZOOM = 3.0
ZOOM_PER_NOTCH = 0.05
PAN_SPEED = 2.0  # image pixels per key press

# Configuration file path
CONFIG_FILE = Path.home() / ".dots_config.json"

# Default export location
EXPORT_DIR = Path.home() / "Desktop"


class FigureKind(Enum):
    """Figures a tile can be rendered as.

    AIDEV-NOTE: Declaration order is the cycling order of the figure button.
    """

    CIRCLE = "circle"
    SQUARE = "square"
    TRIANGLE = "triangle"
    STAR = "star"
    RHOMBUS = "rhombus"

    def next(self) -> "FigureKind":
        """Return the following figure kind, wrapping to CIRCLE."""
        kinds = list(FigureKind)
        return kinds[(kinds.index(self) + 1) % len(kinds)]


class Color(NamedTuple):
    """RGBA color with unsigned 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    @property
    def hex(self) -> str:
        """Lowercase ``#rrggbb`` form (alpha dropped)."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    @classmethod
    def gray(cls, level: int) -> "Color":
        return cls(level, level, level)


class Tile(NamedTuple):
    """Axis-aligned sampling rectangle in image pixels."""

    x: int
    y: int
    width: int
    height: int


def normalize_step(step: int) -> int:
    """Force a step to be odd so that shifted rows stay symmetric."""
    step = max(1, int(step))
    return step + 1 if step % 2 == 0 else step


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass
class ControlState:
    """Snapshot of the user controls consumed by the mosaic renderer.

    AIDEV-NOTE: Renderers only ever read this. The UI layer produces a new
    normalized snapshot whenever a control changes.
    """

    figure: FigureKind = FigureKind.CIRCLE
    step: int = 11
    radius: float = 5.0
    shift: bool = True
    grayscale: bool = False
    size_by_luminance: bool = True

    def normalized(self) -> "ControlState":
        """Return a copy with step forced odd and radius clamped to >= 0."""
        return replace(
            self,
            step=normalize_step(self.step),
            radius=max(0.0, float(self.radius)),
        )

    @classmethod
    def from_pointer(
        cls,
        x: float,
        y: float,
        view_width: float,
        view_height: float,
        base: "ControlState | None" = None,
    ) -> "ControlState":
        """Derive step and radius from the pointer position over the view.

        The vertical position picks the step (1-50) and the horizontal
        position scales the radius up to half the step (1-25). Other fields
        are copied from ``base``.

        Args:
            x: Pointer X in view coordinates
            y: Pointer Y in view coordinates
            view_width: View width in pixels
            view_height: View height in pixels
            base: State whose figure and toggles are kept

        Returns:
            New normalized ControlState
        """
        base = base or cls()
        coef_x = x / view_width if view_width > 0 else 0.0
        coef_y = y / view_height if view_height > 0 else 0.0

        step = int(clamp(MAX_STEP * coef_y, 1, MAX_STEP))
        # Radius uses the raw step, before it is made odd
        radius = clamp((step / 2.0) * coef_x, MIN_RADIUS, MAX_RADIUS)

        return replace(base, step=normalize_step(step), radius=radius)


@dataclass
class MosaicConfig:
    """Persisted user preferences."""

    # Last used controls
    figure: str = FigureKind.CIRCLE.value
    step: int = 11
    radius: float = 5.0
    shift: bool = True
    grayscale: bool = False
    size_by_luminance: bool = True

    # Step and radius follow the pointer over the canvas
    track_pointer: bool = True

    # Export settings
    export_dir: str = str(EXPORT_DIR)
    max_name_attempts: int = 100

    def control_state(self) -> ControlState:
        """Build a normalized ControlState from the stored values."""
        try:
            figure = FigureKind(self.figure)
        except ValueError:
            figure = FigureKind.CIRCLE

        return ControlState(
            figure=figure,
            step=self.step,
            radius=self.radius,
            shift=self.shift,
            grayscale=self.grayscale,
            size_by_luminance=self.size_by_luminance,
        ).normalized()

    def store_control_state(self, state: ControlState):
        """Copy a ControlState into the persisted fields."""
        self.figure = state.figure.value
        self.step = state.step
        self.radius = state.radius
        self.shift = state.shift
        self.grayscale = state.grayscale
        self.size_by_luminance = state.size_by_luminance
