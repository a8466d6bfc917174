"""Shared fakes for the core tests: a manual clock, a recording display and an in-memory score board."""

from __future__ import annotations

import itertools
from typing import Callable, List, Optional, Tuple

import pytest


class ManualScheduler:
    """Scheduler whose clock only moves when the test advances it."""

    def __init__(self) -> None:
        self.now = 0
        self._counter = itertools.count()
        self._pending: dict[int, Tuple[int, int, Callable[[], None]]] = {}

    @property
    def pending(self) -> int:
        return len(self._pending)

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> int:
        handle = next(self._counter)
        self._pending[handle] = (self.now + delay_ms, handle, callback)
        return handle

    def cancel(self, handle: int) -> None:
        self._pending.pop(handle, None)

    def advance(self, ms: int) -> None:
        target = self.now + ms
        while True:
            due = [item for item in self._pending.values() if item[0] <= target]
            if not due:
                break
            when, handle, callback = min(due)
            del self._pending[handle]
            self.now = when
            callback()
        self.now = target

    def run_all(self) -> None:
        while self._pending:
            when, handle, callback = min(self._pending.values())
            del self._pending[handle]
            self.now = when
            callback()


class RecordingDisplay:
    def __init__(self) -> None:
        self.events: List[tuple] = []
        self.interactive = False
        self.start_enabled = True
        self.level: Optional[int] = None
        self.status: Optional[Tuple[str, str]] = None
        self.name_requests: List[Tuple[str, int, Callable[[str], None]]] = []

    def highlight(self, index: int) -> None:
        self.events.append(("highlight", index))

    def unhighlight(self, index: int) -> None:
        self.events.append(("unhighlight", index))

    def set_buttons_interactive(self, interactive: bool) -> None:
        self.interactive = interactive

    def set_start_enabled(self, enabled: bool) -> None:
        self.start_enabled = enabled

    def show_level(self, level: int) -> None:
        self.level = level

    def show_status(self, message: str, color_category: str) -> None:
        self.status = (message, color_category)

    def request_player_name(self, default: str, score: int, on_confirm: Callable[[str], None]) -> None:
        self.name_requests.append((default, score, on_confirm))


class FakeScoreBoard:
    def __init__(self, threshold: int = 1, last_player: str = "") -> None:
        self.threshold = threshold
        self.last_player = last_player
        self.saved: List[Tuple[str, int]] = []
        self.queried: List[int] = []

    def is_high_score(self, score: int) -> bool:
        self.queried.append(score)
        return score >= self.threshold

    def save_score(self, name: str, score: int) -> None:
        self.saved.append((name, score))
        self.last_player = name

    def last_player_name(self) -> str:
        return self.last_player


@pytest.fixture()
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture()
def display() -> RecordingDisplay:
    return RecordingDisplay()


@pytest.fixture()
def scores() -> FakeScoreBoard:
    return FakeScoreBoard()
