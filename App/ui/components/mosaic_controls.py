"""Mosaic rendering controls component."""

from dataclasses import replace

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QVBoxLayout, QWidget

from models import MAX_RADIUS, MAX_STEP, ControlState
from ui.widgets import WidgetFactory


class MosaicControlsWidget(QWidget):
    """Controls for the mosaic parameters.

    This component provides UI controls for adjusting the mosaic:
    - Step (tile size, always odd)
    - Radius (base figure radius)
    - Shift, grayscale and size-by-luminance toggles
    - Pointer tracking (step and radius follow the mouse over the canvas)
    """

    # Emitted with the new normalized ControlState
    state_changed = pyqtSignal(object)
    track_pointer_changed = pyqtSignal(bool)

    def __init__(self, state: ControlState, track_pointer: bool = True, parent=None):
        """Initialize mosaic controls.

        Args:
            state: Initial control state
            track_pointer: Initial pointer tracking flag
            parent: Parent widget
        """
        super().__init__(parent)
        self.state = state.normalized()
        self._setup_ui(track_pointer)
        self._connect_signals()

    def _setup_ui(self, track_pointer: bool):
        """Create and layout UI controls."""
        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)

        self.step_spin = WidgetFactory.create_int_spinbox(
            range_min=1,
            range_max=MAX_STEP + 1,
            value=self.state.step,
            suffix=" px",
            step=2,
            tooltip="Tile size; even values are rounded up to odd",
        )
        layout.addLayout(WidgetFactory.create_labeled_row("Step:", self.step_spin))

        self.radius_spin = WidgetFactory.create_double_spinbox(
            range_min=0.0,
            range_max=MAX_RADIUS,
            value=self.state.radius,
            suffix=" px",
            step=0.5,
            tooltip="Figure radius for the darkest tiles",
        )
        layout.addLayout(WidgetFactory.create_labeled_row("Radius:", self.radius_spin))

        self.shift_check = WidgetFactory.create_checkbox(
            "Shift odd rows", self.state.shift, "Offset every other row by half a step"
        )
        layout.addWidget(self.shift_check)

        self.grayscale_check = WidgetFactory.create_checkbox(
            "Grayscale", self.state.grayscale, "Color figures by luminance only"
        )
        layout.addWidget(self.grayscale_check)

        self.size_check = WidgetFactory.create_checkbox(
            "Size by luminance",
            self.state.size_by_luminance,
            "Scale figures by tile darkness instead of using the full radius",
        )
        layout.addWidget(self.size_check)

        self.track_check = WidgetFactory.create_checkbox(
            "Follow pointer",
            track_pointer,
            "Vertical pointer position sets the step, horizontal sets the radius",
        )
        layout.addWidget(self.track_check)

        layout.addStretch()
        self.setLayout(layout)

    def _connect_signals(self):
        """Connect widget signals to state updates."""
        self.step_spin.valueChanged.connect(lambda v: self._update_state(step=v))
        self.radius_spin.valueChanged.connect(lambda v: self._update_state(radius=v))
        self.shift_check.toggled.connect(lambda v: self._update_state(shift=v))
        self.grayscale_check.toggled.connect(lambda v: self._update_state(grayscale=v))
        self.size_check.toggled.connect(lambda v: self._update_state(size_by_luminance=v))
        self.track_check.toggled.connect(self.track_pointer_changed.emit)

    def _update_state(self, **changes):
        """Apply a change, normalize, and emit the new state."""
        self.state = replace(self.state, **changes).normalized()
        if self.step_spin.value() != self.state.step:
            _set_quietly(self.step_spin.setValue, self.step_spin, self.state.step)
        self.state_changed.emit(self.state)

    def set_state(self, state: ControlState):
        """Show a state produced elsewhere without emitting state_changed."""
        self.state = state.normalized()
        _set_quietly(self.step_spin.setValue, self.step_spin, self.state.step)
        _set_quietly(self.radius_spin.setValue, self.radius_spin, self.state.radius)
        _set_quietly(self.shift_check.setChecked, self.shift_check, self.state.shift)
        _set_quietly(self.grayscale_check.setChecked, self.grayscale_check, self.state.grayscale)
        _set_quietly(self.size_check.setChecked, self.size_check, self.state.size_by_luminance)

    @property
    def track_pointer(self) -> bool:
        return self.track_check.isChecked()


def _set_quietly(setter, widget: QWidget, value):
    """Call a widget setter with the widget's signals blocked."""
    widget.blockSignals(True)
    try:
        setter(value)
    finally:
        widget.blockSignals(False)
