"""Coloured game pads and the 2x2 board that holds them."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QGridLayout, QPushButton, QSizePolicy, QWidget

from brainrecall.ui.colors import lit_color, pad_color


class GamePad(QPushButton):
    """One game button. Lit while simulated-pressed or held by the player."""

    def __init__(self, index: int, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._index = index
        self._lit = False
        self._interactive = False
        self.setMinimumSize(120, 120)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.pressed.connect(lambda: self._set_lit_from_player(True))
        self.released.connect(lambda: self._set_lit_from_player(False))
        self._apply_style()

    @property
    def index(self) -> int:
        return self._index

    @property
    def is_lit(self) -> bool:
        return self._lit

    def set_lit(self, lit: bool) -> None:
        if lit == self._lit:
            return
        self._lit = lit
        self._apply_style()

    def set_interactive(self, interactive: bool) -> None:
        self._interactive = interactive
        self.setCursor(
            Qt.CursorShape.PointingHandCursor if interactive else Qt.CursorShape.ArrowCursor
        )

    def _set_lit_from_player(self, lit: bool) -> None:
        if self._interactive:
            self.set_lit(lit)

    def _apply_style(self) -> None:
        fill = lit_color(self._index) if self._lit else pad_color(self._index)
        border = "#ffffff" if self._lit else "rgba(255, 255, 255, 0.15)"
        self.setStyleSheet(
            f"""
            QPushButton {{
                background: {fill};
                border: 3px solid {border};
                border-radius: 24px;
            }}
            """
        )


class PadBoard(QWidget):
    """2x2 grid of pads; forwards player presses as ``padClicked(index)``."""

    padClicked = Signal(int)

    def __init__(self, count: int = 4, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        layout = QGridLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(16)
        self._pads: list[GamePad] = []
        columns = 2
        for i in range(count):
            pad = GamePad(i, self)
            pad.clicked.connect(lambda _checked=False, i=i: self._on_pad_clicked(i))
            layout.addWidget(pad, i // columns, i % columns)
            self._pads.append(pad)
        self._interactive = False

    @property
    def pads(self) -> list[GamePad]:
        return list(self._pads)

    def set_lit(self, index: int, lit: bool) -> None:
        if 0 <= index < len(self._pads):
            self._pads[index].set_lit(lit)

    def set_interactive(self, interactive: bool) -> None:
        self._interactive = interactive
        for pad in self._pads:
            pad.set_interactive(interactive)
            if not interactive:
                pad.set_lit(False)

    def _on_pad_clicked(self, index: int) -> None:
        if self._interactive:
            self.padClicked.emit(index)
