"""Main GUI application entry point."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from lexilookup.config import ConfigManager
from lexilookup.gui.main_window import EditorWindow
from lexilookup.services import UpstreamVersionChecker


def main():
    """Launch the lexilookup editor."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    app = QApplication(sys.argv)
    app.setApplicationName("lexilookup")

    config = ConfigManager.load_config()
    window = EditorWindow(config)

    result = UpstreamVersionChecker(config, window.fetcher).maybe_check()
    if result is not None and result[0]:
        window.statusBar().showMessage(f"Grammalecte {result[1]} est disponible : {result[2]}")

    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
