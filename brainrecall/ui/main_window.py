from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from brainrecall.core.config import GameConfig
from brainrecall.core.game import GameController
from brainrecall.core.scores import HighScoreStore
from brainrecall.ui.colors import GameColors, status_color
from brainrecall.ui.game_pads import PadBoard
from brainrecall.ui.name_overlay import NameEntryOverlay

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Single game screen: level and status header, the pad board, start button
    and the high-score table.

    The window is the controller's display surface. It forwards pad clicks
    and the start button to the controller bound with :meth:`bind_controller`.
    """

    def __init__(self, score_store: HighScoreStore, config: Optional[GameConfig] = None) -> None:
        super().__init__()
        self._score_store = score_store
        self._config = config or GameConfig()
        self._controller: Optional[GameController] = None
        self._pending_name_confirm: Optional[Callable[[str], None]] = None

        self._level_label: Optional[QLabel] = None
        self._status_label: Optional[QLabel] = None
        self._start_button: Optional[QPushButton] = None
        self._board: Optional[PadBoard] = None
        self._scores_label: Optional[QLabel] = None
        self._best_label: Optional[QLabel] = None

        self.setWindowTitle("BrainRecall")
        self.setMinimumSize(420, 640)
        self._build_ui()
        self._refresh_scores()

        self._name_overlay = NameEntryOverlay(self.centralWidget())
        self._name_overlay.closed.connect(self._on_name_overlay_closed)

    def bind_controller(self, controller: GameController) -> None:
        self._controller = controller

    # ------------------------------------------------------------------
    # Display surface used by the controller
    # ------------------------------------------------------------------

    def highlight(self, index: int) -> None:
        self._board.set_lit(index, True)

    def unhighlight(self, index: int) -> None:
        self._board.set_lit(index, False)

    def set_buttons_interactive(self, interactive: bool) -> None:
        self._board.set_interactive(interactive)

    def set_start_enabled(self, enabled: bool) -> None:
        self._start_button.setEnabled(enabled)

    def show_level(self, level: int) -> None:
        self._level_label.setText(f"Level {level}")

    def show_status(self, message: str, color_category: str) -> None:
        self._status_label.setText(message)
        self._status_label.setStyleSheet(
            f"color: {status_color(color_category)}; font-size: 22px; font-weight: 800;"
        )

    def request_player_name(self, default: str, score: int, on_confirm: Callable[[str], None]) -> None:
        self._pending_name_confirm = on_confirm
        self._name_overlay.prompt(default, score)

    # ------------------------------------------------------------------
    # UI
    # ------------------------------------------------------------------

    def _build_ui(self) -> None:
        central = QWidget()
        central.setObjectName("gameRoot")
        central.setStyleSheet(
            f"""
            QWidget#gameRoot {{
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 {GameColors.BG_TOP}, stop:1 {GameColors.BG_BOTTOM});
            }}
            """
        )
        root = QVBoxLayout(central)
        root.setContentsMargins(24, 24, 24, 24)
        root.setSpacing(18)

        header = QHBoxLayout()
        self._level_label = QLabel("Level 1")
        self._level_label.setStyleSheet(
            f"color: {GameColors.TEXT_PRIMARY}; font-size: 20px; font-weight: 700;"
        )
        header.addWidget(self._level_label, 0)
        header.addStretch(1)
        self._best_label = QLabel()
        self._best_label.setStyleSheet(f"color: {GameColors.TEXT_MUTED}; font-size: 14px;")
        header.addWidget(self._best_label, 0)
        root.addLayout(header)

        self._status_label = QLabel("Press Start")
        self._status_label.setAlignment(Qt.AlignCenter)
        root.addWidget(self._status_label, 0)
        self.show_status("Press Start", "over")

        self._board = PadBoard(self._config.buttons)
        self._board.padClicked.connect(self._on_pad_clicked)
        root.addWidget(self._board, 1)

        self._start_button = QPushButton("Start")
        self._start_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self._start_button.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self._start_button.setStyleSheet(
            f"""
            QPushButton {{
                background: qlineargradient(x1:0, y1:0, x2:1, y2:1,
                    stop:0 {GameColors.PRIMARY_LIGHT}, stop:1 {GameColors.PRIMARY});
                color: white;
                padding: 12px 16px;
                border: none;
                border-radius: 14px;
                font-weight: 700;
                font-size: 16px;
            }}
            QPushButton:disabled {{ background: #37474f; color: #78909c; }}
            """
        )
        self._start_button.clicked.connect(self._on_start_clicked)
        root.addWidget(self._start_button, 0)

        scores_card = QFrame()
        scores_card.setObjectName("scoresCard")
        scores_card.setStyleSheet(
            """
            QFrame#scoresCard {
                background: rgba(255, 255, 255, 0.06);
                border: 1px solid rgba(255, 255, 255, 0.12);
                border-radius: 14px;
            }
            """
        )
        scores_layout = QVBoxLayout(scores_card)
        scores_layout.setContentsMargins(16, 12, 16, 12)
        scores_layout.setSpacing(6)
        title = QLabel("High Scores")
        title.setStyleSheet(f"color: {GameColors.TEXT_PRIMARY}; font-size: 15px; font-weight: 700;")
        scores_layout.addWidget(title)
        self._scores_label = QLabel()
        self._scores_label.setStyleSheet(f"color: {GameColors.TEXT_MUTED}; font-size: 13px;")
        self._scores_label.setTextFormat(Qt.TextFormat.PlainText)
        scores_layout.addWidget(self._scores_label)
        root.addWidget(scores_card, 0)

        self.setCentralWidget(central)

    def _refresh_scores(self) -> None:
        entries = self._score_store.top_scores()
        if entries:
            lines = [f"{rank}. {entry.name}: {entry.score}" for rank, entry in enumerate(entries, start=1)]
            self._scores_label.setText("\n".join(lines))
        else:
            self._scores_label.setText("No scores yet")
        self._best_label.setText(f"Best: {self._score_store.best_score()}")

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def _on_start_clicked(self) -> None:
        if self._controller is not None:
            self._controller.start()

    def _on_pad_clicked(self, index: int) -> None:
        if self._controller is not None:
            self._controller.on_button_pressed(index)

    def _on_name_overlay_closed(self, accepted: bool) -> None:
        on_confirm = self._pending_name_confirm
        self._pending_name_confirm = None
        if accepted and on_confirm is not None:
            on_confirm(self._name_overlay.name())
            self._refresh_scores()
        else:
            logger.debug("High score name entry skipped")

    def closeEvent(self, event: QCloseEvent) -> None:
        """Abandon any game in progress so pending playback stops firing."""
        if self._controller is not None:
            self._controller.shutdown()
        super().closeEvent(event)
