"""Dots - Main entry point."""

import sys

from PyQt6.QtWidgets import QApplication

from ui.main_window import MosaicWindow


def main():
    """Launch the Dots mosaic application."""
    app = QApplication(sys.argv)

    app.setApplicationDisplayName("Dots")
    app.setApplicationName("Dots")

    window = MosaicWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
