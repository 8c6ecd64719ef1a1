"""UI components package for modular control widgets."""

from ui.components.mosaic_controls import MosaicControlsWidget

__all__ = [
    "MosaicControlsWidget",
]
