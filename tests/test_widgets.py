"""Offscreen tests for the control widgets."""

from models import ControlState, FigureKind
from ui.components import MosaicControlsWidget
from ui.figure_button import FigureButton
from ui.styles import COLORS


def test_even_step_is_snapped_to_odd(qapp):
    controls = MosaicControlsWidget(ControlState(step=5, radius=3.0))
    received = []
    controls.state_changed.connect(received.append)

    controls.step_spin.setValue(8)

    assert [state.step for state in received] == [9]
    assert controls.step_spin.value() == 9
    assert controls.state.step == 9
    assert controls.state.radius == 3.0


def test_toggle_emits_normalized_state(qapp):
    controls = MosaicControlsWidget(ControlState(step=5, grayscale=False))
    received = []
    controls.state_changed.connect(received.append)

    controls.grayscale_check.setChecked(True)

    assert len(received) == 1
    assert received[0].grayscale
    assert received[0].step == 5


def test_set_state_updates_widgets_silently(qapp):
    controls = MosaicControlsWidget(ControlState())
    received = []
    controls.state_changed.connect(received.append)

    controls.set_state(ControlState(step=4, radius=2.5, shift=False))

    assert received == []
    assert controls.step_spin.value() == 5
    assert controls.radius_spin.value() == 2.5
    assert not controls.shift_check.isChecked()


def test_figure_button_cycles_on_click(qapp):
    button = FigureButton(FigureKind.STAR)
    received = []
    button.figure_changed.connect(received.append)

    button.click()
    button.click()

    assert received == [FigureKind.RHOMBUS, FigureKind.CIRCLE]
    assert button.figure is FigureKind.CIRCLE


def test_figure_button_set_figure_is_silent(qapp):
    button = FigureButton()
    received = []
    button.figure_changed.connect(received.append)

    button.set_figure(FigureKind.TRIANGLE)

    assert received == []
    assert button.figure is FigureKind.TRIANGLE


def test_figure_button_paints_preview(qapp):
    button = FigureButton(FigureKind.CIRCLE)
    image = button.grab().toImage()

    center = image.pixelColor(button.width() // 2, button.height() // 2)
    assert center.getRgb()[:3] == tuple(COLORS.FIGURE_PREVIEW[FigureKind.CIRCLE][:3])
