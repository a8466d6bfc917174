"""In-window overlay asking for the player's name after a top score."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import Qt, QEvent, Signal
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from brainrecall.ui.colors import GameColors

_PRIMARY = GameColors.PRIMARY
_PRIMARY_LIGHT = GameColors.PRIMARY_LIGHT

MAX_NAME_LENGTH = 24


def _themed_card_container(radius: int = 20, object_name: str = "overlayContainer") -> QFrame:
    container = QFrame()
    container.setObjectName(object_name)
    container.setMinimumWidth(360)
    container.setMaximumWidth(440)
    container.setStyleSheet(
        f"""
        QFrame#{object_name} {{
            background: #ffffff;
            border: 1px solid rgba(0, 131, 143, 0.12);
            border-radius: {radius}px;
        }}
        """
    )
    shadow = QGraphicsDropShadowEffect(container)
    shadow.setBlurRadius(20)
    shadow.setOffset(0, 6)
    shadow.setColor(QColor(0, 80, 100, 25))
    container.setGraphicsEffect(shadow)
    return container


def _overlay_background(parent: QWidget, on_click: Callable[[], None]) -> QWidget:
    overlay_bg = QWidget(parent)
    overlay_bg.setStyleSheet("background: rgba(0, 0, 0, 0.45);")
    overlay_bg.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
    overlay_bg.setMinimumSize(1, 1)
    overlay_bg.mousePressEvent = lambda e: on_click()
    return overlay_bg


def _secondary_button_style() -> str:
    return """
        QPushButton {
            background: #fafafa;
            color: #1a3a3a;
            padding: 10px 16px;
            border: 1px solid #e0e0e0;
            border-radius: 12px;
            font-weight: 600;
            font-size: 13px;
        }
        QPushButton:hover {
            border-color: #00838f;
            color: #00838f;
        }
    """


def _primary_button_style() -> str:
    return f"""
        QPushButton {{
            background: qlineargradient(x1:0, y1:0, x2:1, y2:1,
                stop:0 {_PRIMARY_LIGHT}, stop:1 {_PRIMARY});
            color: white;
            padding: 10px 16px;
            border: none;
            border-radius: 12px;
            font-weight: 600;
            font-size: 13px;
        }}
        QPushButton:hover {{ background: {_PRIMARY}; }}
    """


class NameEntryOverlay(QWidget):
    """Asks for a name to store with a new high score.

    Emits ``closed(True)`` when the player saves, ``closed(False)`` when the
    overlay is dismissed.
    """

    closed = Signal(bool)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        main_layout = QGridLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)
        main_layout.setRowStretch(0, 1)
        main_layout.setColumnStretch(0, 1)

        overlay_bg = _overlay_background(self, lambda: self._finish(False))
        main_layout.addWidget(overlay_bg, 0, 0)

        container = _themed_card_container(object_name="nameEntryContainer")
        content = QVBoxLayout(container)
        content.setContentsMargins(28, 24, 28, 24)
        content.setSpacing(18)

        title = QLabel("GAME OVER! Top Score")
        title.setStyleSheet(f"color: {_PRIMARY}; font-size: 18px; font-weight: 800;")
        content.addWidget(title, 0)

        self._message = QLabel()
        self._message.setStyleSheet("color: #1a3a3a; font-size: 14px; font-weight: 500;")
        self._message.setWordWrap(True)
        content.addWidget(self._message, 0)

        self._name_edit = QLineEdit()
        self._name_edit.setMaxLength(MAX_NAME_LENGTH)
        self._name_edit.setPlaceholderText("Enter your name")
        self._name_edit.setStyleSheet(
            """
            QLineEdit {
                padding: 8px 12px;
                border: 1px solid #b0bec5;
                border-radius: 10px;
                font-size: 14px;
                color: #1a3a3a;
            }
            QLineEdit:focus { border-color: #00838f; }
            """
        )
        self._name_edit.returnPressed.connect(lambda: self._finish(True))
        content.addWidget(self._name_edit, 0)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(10)

        cancel_btn = QPushButton("Skip")
        cancel_btn.setStyleSheet(_secondary_button_style())
        cancel_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        cancel_btn.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        cancel_btn.clicked.connect(lambda: self._finish(False))
        btn_row.addWidget(cancel_btn, 1)

        save_btn = QPushButton("Save Score")
        save_btn.setStyleSheet(_primary_button_style())
        save_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        save_btn.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        save_btn.clicked.connect(lambda: self._finish(True))
        btn_row.addWidget(save_btn, 1)

        content.addLayout(btn_row)
        main_layout.addWidget(container, 0, 0, 1, 1, Qt.AlignCenter)
        self.hide()

    def name(self) -> str:
        return self._name_edit.text()

    def prompt(self, default_name: str, score: int) -> None:
        self._message.setText(f"You cleared {score} level{'s' if score != 1 else ''}. Enter your name:")
        self._name_edit.setText(default_name)
        self._name_edit.selectAll()
        self._update_geometry()
        self.raise_()
        self.show()
        self._name_edit.setFocus()

    def _finish(self, accepted: bool) -> None:
        self.hide()
        self.closed.emit(accepted)

    def _update_geometry(self) -> None:
        parent = self.parentWidget()
        if parent is not None:
            self.setGeometry(parent.rect())

    def eventFilter(self, obj: QWidget, event: QEvent) -> bool:
        if obj is self.parentWidget() and event.type() == QEvent.Type.Resize:
            self._update_geometry()
        return super().eventFilter(obj, event)

    def showEvent(self, event) -> None:
        super().showEvent(event)
        self._update_geometry()
        parent = self.parentWidget()
        if parent is not None:
            parent.installEventFilter(self)

    def hideEvent(self, event) -> None:
        parent = self.parentWidget()
        if parent is not None:
            parent.removeEventFilter(self)
        super().hideEvent(event)
