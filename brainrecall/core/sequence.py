"""Random sequence generation and timed playback.

Playback never blocks: each wait is handed to a :class:`Scheduler`, which
calls back on the caller's event loop once the delay has elapsed. In the app
the scheduler is backed by single-shot ``QTimer`` objects, so the display
repaints between steps and every event arrives on the GUI thread in order.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Protocol

from brainrecall.core.config import GameConfig

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = GameConfig()

HIGHLIGHT = "highlight"
UNHIGHLIGHT = "unhighlight"


def click_delay(level: int) -> int:
    """Milliseconds to wait before each simulated press at ``level``."""
    return _DEFAULT_CONFIG.click_delay(level)


def press_duration(level: int) -> int:
    """Milliseconds a simulated press stays highlighted at ``level``."""
    return _DEFAULT_CONFIG.press_duration(level)


def generate_sequence(length: int, buttons: int = 4, rng: Optional[random.Random] = None) -> List[int]:
    """Return ``length`` independent uniform draws from ``range(buttons)``."""
    if length < 0:
        raise ValueError(f"Sequence length must be non-negative, got {length}")
    if buttons <= 0:
        raise ValueError(f"Button count must be positive, got {buttons}")
    rng = rng or random.Random()
    return [rng.randrange(buttons) for _ in range(length)]


class Scheduler(Protocol):
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> Any:
        """Run ``callback`` once after ``delay_ms``; return a handle for :meth:`cancel`."""
        ...

    def cancel(self, handle: Any) -> None:
        ...


@dataclass(frozen=True)
class PlaybackStep:
    """One timed display event: wait ``delay_ms``, then apply ``action`` to ``index``."""

    delay_ms: int
    action: str
    index: int


def plan_playback(sequence: List[int], config: GameConfig = _DEFAULT_CONFIG) -> List[PlaybackStep]:
    """Expand a sequence into its highlight/unhighlight steps (lead-in excluded).

    Pacing depends on the length of the whole sequence, not on the position
    of each entry.
    """
    level = len(sequence)
    gap = config.click_delay(level)
    hold = config.press_duration(level)
    steps: List[PlaybackStep] = []
    for index in sequence:
        steps.append(PlaybackStep(delay_ms=gap, action=HIGHLIGHT, index=index))
        steps.append(PlaybackStep(delay_ms=hold, action=UNHIGHLIGHT, index=index))
    return steps


class PlaybackTask:
    """A single cancellable run through a planned playback.

    Emits ``on_highlight``/``on_unhighlight`` for each step in order, then
    ``on_finished`` once. After :meth:`cancel` nothing more is emitted.
    """

    def __init__(
        self,
        steps: List[PlaybackStep],
        scheduler: Scheduler,
        lead_in_ms: int,
        on_highlight: Callable[[int], None],
        on_unhighlight: Callable[[int], None],
        on_finished: Callable[[], None],
    ) -> None:
        self._steps = list(steps)
        self._scheduler = scheduler
        self._lead_in_ms = lead_in_ms
        self._on_highlight = on_highlight
        self._on_unhighlight = on_unhighlight
        self._on_finished = on_finished
        self._position = 0
        self._handle: Any = None
        self._started = False
        self._cancelled = False
        self._finished = False

    @property
    def is_running(self) -> bool:
        return self._started and not (self._cancelled or self._finished)

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    @property
    def is_finished(self) -> bool:
        return self._finished

    def start(self) -> None:
        if self._started:
            raise RuntimeError("PlaybackTask can only be started once")
        self._started = True
        self._handle = self._scheduler.call_later(self._lead_in_ms, self._schedule_next)

    def cancel(self) -> None:
        if not self.is_running:
            return
        self._cancelled = True
        if self._handle is not None:
            self._scheduler.cancel(self._handle)
            self._handle = None
        logger.debug("Playback cancelled at step %d of %d", self._position, len(self._steps))

    def _schedule_next(self) -> None:
        self._handle = None
        if self._cancelled:
            return
        if self._position >= len(self._steps):
            self._finished = True
            self._on_finished()
            return
        step = self._steps[self._position]
        self._handle = self._scheduler.call_later(step.delay_ms, self._run_step)

    def _run_step(self) -> None:
        self._handle = None
        if self._cancelled:
            return
        step = self._steps[self._position]
        self._position += 1
        if step.action == HIGHLIGHT:
            self._on_highlight(step.index)
        else:
            self._on_unhighlight(step.index)
        self._schedule_next()


class SequencePlayer:
    """Generates a fresh random sequence and plays it back through a scheduler.

    At most one :class:`PlaybackTask` is active: :meth:`play` cancels any
    unfinished one before starting.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        on_highlight: Callable[[int], None],
        on_unhighlight: Callable[[int], None],
        on_finished: Callable[[], None],
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._scheduler = scheduler
        self._on_highlight = on_highlight
        self._on_unhighlight = on_unhighlight
        self._on_finished = on_finished
        self._config = config or GameConfig()
        self._rng = rng or random.Random()
        self._task: Optional[PlaybackTask] = None

    @property
    def is_playing(self) -> bool:
        return self._task is not None and self._task.is_running

    def play(self, length: int) -> List[int]:
        """Start playing a new sequence of ``length`` entries and return it."""
        if length < 1:
            raise ValueError(f"Playback length must be at least 1, got {length}")
        self.cancel()
        sequence = generate_sequence(length, self._config.buttons, self._rng)
        self._task = PlaybackTask(
            plan_playback(sequence, self._config),
            self._scheduler,
            self._config.lead_in_ms,
            on_highlight=self._on_highlight,
            on_unhighlight=self._on_unhighlight,
            on_finished=self._on_finished,
        )
        logger.debug("Playing sequence of length %d", length)
        self._task.start()
        return sequence

    def cancel(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None
