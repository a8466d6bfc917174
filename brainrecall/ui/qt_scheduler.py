"""QTimer-backed scheduler for sequence playback."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer


class QtScheduler:
    """Runs callbacks on the Qt event loop after a delay.

    Each call gets its own single-shot ``QTimer`` so it can be stopped
    independently.
    """

    def __init__(self, parent: Optional[QObject] = None) -> None:
        self._parent = parent
        self._timers: set[QTimer] = set()

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> QTimer:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        timer.setInterval(max(0, int(delay_ms)))

        def _fire() -> None:
            self._discard(timer)
            callback()

        timer.timeout.connect(_fire)
        self._timers.add(timer)
        timer.start()
        return timer

    def cancel(self, handle: QTimer) -> None:
        handle.stop()
        self._discard(handle)

    def cancel_all(self) -> None:
        for timer in list(self._timers):
            self.cancel(timer)

    def _discard(self, timer: QTimer) -> None:
        if timer in self._timers:
            self._timers.discard(timer)
            timer.deleteLater()
