"""Main application window for the mosaic renderer."""

from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QDockWidget,
    QFileDialog,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QToolBar,
)

from config_manager import ConfigManager
from models import ControlState, FigureKind
from mosaic import ImageSource, MosaicProcessor
from ui.canvas import MosaicCanvas
from ui.components import MosaicControlsWidget
from ui.figure_button import FigureButton
from ui.styles import SIZES

IMAGE_FILTER = "Images (*.png *.jpg *.jpeg *.bmp *.gif *.tga *.tif *.tiff *.webp)"


class MosaicWindow(QMainWindow):
    """Main application window: live mosaic, controls and export."""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Dots")
        self.setMinimumSize(*SIZES.WINDOW_MIN_SIZE)

        # Application state
        self.config_manager = ConfigManager()
        self.config = self.config_manager.load()
        self.processor = MosaicProcessor(self.config)
        self.state: ControlState = self.config.control_state()
        self.source: Optional[ImageSource] = None
        self.image_path: Optional[Path] = None

        self._setup_ui()
        self._connect_signals()

    def _setup_ui(self):
        """Initialize the user interface."""
        self.canvas = MosaicCanvas(self.state)
        self.canvas.track_pointer = self.config.track_pointer
        self.setCentralWidget(self.canvas)

        self._create_actions()
        self._create_menu_bar()
        self._create_toolbar()
        self._create_controls_dock()

        self.statusBar().showMessage("Drop an image to start")

    def _create_actions(self):
        """Create actions shared by the menu and toolbar."""
        self.open_action = QAction("&Open...", self)
        self.open_action.setShortcut(QKeySequence.StandardKey.Open)
        self.open_action.triggered.connect(self._open_image_dialog)

        self.export_action = QAction("&Export SVG", self)
        self.export_action.setShortcut(QKeySequence("Ctrl+E"))
        self.export_action.setToolTip("Save the mosaic as SVG")
        self.export_action.triggered.connect(self._export_svg)

        self.quit_action = QAction("&Quit", self)
        self.quit_action.setShortcut(QKeySequence.StandardKey.Quit)
        self.quit_action.triggered.connect(self.close)

    def _create_menu_bar(self):
        """Create the File menu."""
        menubar = self.menuBar()
        if menubar is None:
            return

        file_menu = menubar.addMenu("&File")
        file_menu.addAction(self.open_action)
        file_menu.addAction(self.export_action)
        file_menu.addSeparator()
        file_menu.addAction(self.quit_action)

    def _create_toolbar(self):
        """Create the main toolbar with the figure button and export."""
        toolbar = QToolBar("Main Toolbar")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        self.figure_button = FigureButton(self.state.figure)
        toolbar.addWidget(self.figure_button)

        toolbar.addSeparator()

        self.export_btn = QPushButton("Export SVG")
        self.export_btn.clicked.connect(self.export_action.trigger)
        toolbar.addWidget(self.export_btn)

    def _create_controls_dock(self):
        """Create the dockable controls panel."""
        self.controls = MosaicControlsWidget(self.state, self.config.track_pointer)
        self.controls.setMinimumWidth(SIZES.CONTROLS_MIN_WIDTH)

        dock = QDockWidget("Controls", self)
        dock.setWidget(self.controls)
        dock.setAllowedAreas(
            Qt.DockWidgetArea.LeftDockWidgetArea | Qt.DockWidgetArea.RightDockWidgetArea
        )
        self.addDockWidget(Qt.DockWidgetArea.RightDockWidgetArea, dock)
        self.controls_dock = dock

    def _connect_signals(self):
        """Connect all UI signals to handlers."""
        self.figure_button.figure_changed.connect(self._on_figure_changed)
        self.controls.state_changed.connect(self._on_controls_changed)
        self.controls.track_pointer_changed.connect(self._on_track_pointer_changed)
        self.canvas.pointer_state_changed.connect(self._on_pointer_state_changed)
        self.canvas.files_dropped.connect(self._load_first_image)

    # --- State updates ---

    def _set_state(self, state: ControlState):
        self.state = state.normalized()
        self.canvas.set_state(self.state)
        self._show_state()

    def _on_figure_changed(self, figure: FigureKind):
        self._set_state(replace(self.state, figure=figure))
        self.controls.set_state(self.state)

    def _on_controls_changed(self, state: ControlState):
        # Figure kind is owned by the figure button
        self._set_state(replace(state, figure=self.state.figure))

    def _on_pointer_state_changed(self, state: ControlState):
        self.state = state
        self.controls.set_state(state)
        self._show_state()

    def _on_track_pointer_changed(self, enabled: bool):
        self.canvas.track_pointer = enabled
        self.config.track_pointer = enabled

    def _show_state(self):
        self.statusBar().showMessage(
            f"{self.state.figure.value}  step {self.state.step}  radius {self.state.radius:.1f}"
        )

    # --- Image loading ---

    def _open_image_dialog(self):
        file_path, _ = QFileDialog.getOpenFileName(self, "Open Image", "", IMAGE_FILTER)
        if file_path:
            self._load_first_image([file_path])

    def _load_first_image(self, paths: List[str]):
        """Load the first path that decodes as an image."""
        errors = []
        for path in paths:
            try:
                source = self.processor.load_image(path)
            except ValueError as e:
                errors.append(f"{Path(path).name}: {e}")
                continue

            self.source = source
            self.image_path = Path(path)
            self.canvas.set_image(source)
            self.statusBar().showMessage(
                f"Loaded {self.image_path.name} ({source.width}x{source.height})"
            )
            return

        if errors:
            QMessageBox.warning(self, "Open Image", "\n".join(errors))

    # --- Export ---

    def _export_svg(self):
        """Export the current mosaic to the export directory."""
        if self.source is None or self.image_path is None:
            self.statusBar().showMessage("Nothing to export: load an image first")
            return

        written, error = self.processor.export(self.source, self.state, self.image_path)
        if error:
            self.statusBar().showMessage("Export failed")
            QMessageBox.critical(self, "Export SVG", error)
            return

        self.statusBar().showMessage(f"Exported {written}")

    def closeEvent(self, event):
        """Persist the current controls before closing."""
        self.config.store_control_state(self.state)
        success, error = self.config_manager.save(self.config)
        if not success:
            print(f"Warning: Could not save config file: {error}")
        super().closeEvent(event)
