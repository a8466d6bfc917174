"""Application entry point and setup for the BrainRecall memory game."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from brainrecall.core.config import load_config
from brainrecall.core.game import GameController
from brainrecall.core.scores import HighScoreStore
from brainrecall.ui.main_window import MainWindow
from brainrecall.ui.qt_scheduler import QtScheduler


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Initialize the application, wire the game together, and start the main window."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("BrainRecall")
    app.setApplicationDisplayName("BrainRecall")

    config = load_config()
    score_store = HighScoreStore(capacity=config.high_score_capacity)

    window = MainWindow(score_store=score_store, config=config)
    controller = GameController(
        display=window,
        scores=score_store,
        scheduler=QtScheduler(window),
        config=config,
    )
    window.bind_controller(controller)
    logging.info("Loaded config with %d buttons", config.buttons)
    window.show()

    sys.exit(app.exec())
