"""Turn-taking state machine for the memory game."""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Callable, List, Optional, Protocol

from brainrecall.core.config import GameConfig
from brainrecall.core.scores import ScoreBoard
from brainrecall.core.sequence import Scheduler, SequencePlayer

logger = logging.getLogger(__name__)

STATUS_GET_READY = "Get Ready!"
STATUS_PLAYER_TURN = "Your Turn"
STATUS_GAME_OVER = "Game Over"


class GameState(Enum):
    GAME_OVER = "game_over"
    COMPUTER_TURN = "computer_turn"
    PLAYER_TURN = "player_turn"


class GameDisplay(Protocol):
    """Screen surface the controller drives.

    ``color_category`` is one of ``"ready"``, ``"player"`` or ``"over"``; the
    view decides what colour each means.
    """

    def highlight(self, index: int) -> None: ...

    def unhighlight(self, index: int) -> None: ...

    def set_buttons_interactive(self, interactive: bool) -> None: ...

    def set_start_enabled(self, enabled: bool) -> None: ...

    def show_level(self, level: int) -> None: ...

    def show_status(self, message: str, color_category: str) -> None: ...

    def request_player_name(self, default: str, score: int, on_confirm: Callable[[str], None]) -> None:
        """Ask for a name to go with ``score``; call ``on_confirm`` only if the player accepts."""
        ...


class GameController:
    """Owns the game state, the target sequence and the player's progress.

    Each computer turn plays a fresh random sequence one entry longer than
    the last. The player then repeats it; a full match starts the next
    turn, any wrong button ends the game. The score is the number of
    levels cleared before the mistake.
    """

    def __init__(
        self,
        display: GameDisplay,
        scores: ScoreBoard,
        scheduler: Scheduler,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._display = display
        self._scores = scores
        self._config = config or GameConfig()
        self._player = SequencePlayer(
            scheduler,
            on_highlight=display.highlight,
            on_unhighlight=display.unhighlight,
            on_finished=self.on_sequence_ready,
            config=self._config,
            rng=rng,
        )
        self._state = GameState.GAME_OVER
        self._sequence: List[int] = []
        self._cursor = 0
        self._last_score: Optional[int] = None

        self._display.set_buttons_interactive(False)
        self._display.set_start_enabled(True)

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def level(self) -> int:
        return len(self._sequence)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def sequence(self) -> List[int]:
        return list(self._sequence)

    @property
    def last_score(self) -> Optional[int]:
        """Score of the most recently finished game, or None before the first one."""
        return self._last_score

    def start(self) -> None:
        if self._state is not GameState.GAME_OVER:
            logger.debug("Ignoring start while %s", self._state.value)
            return
        logger.info("Starting new game")
        self._display.set_start_enabled(False)
        self._sequence = []
        self._cursor = 0
        self._do_computer_turn()

    def on_button_pressed(self, index: int) -> None:
        """Check a player press against the next expected entry."""
        if self._state is not GameState.PLAYER_TURN:
            logger.debug("Ignoring button %r while %s", index, self._state.value)
            return
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < self._config.buttons:
            logger.warning("Ignoring out-of-range button index %r", index)
            return

        if self._sequence[self._cursor] == index:
            self._cursor += 1
            if self._cursor == len(self._sequence):
                self._do_computer_turn()
        else:
            self._do_game_over()

    def on_sequence_ready(self) -> None:
        """Playback has finished; hand the turn to the player."""
        if self._state is not GameState.COMPUTER_TURN:
            logger.debug("Ignoring sequence completion while %s", self._state.value)
            return
        self._cursor = 0
        self._set_state(GameState.PLAYER_TURN)
        self._display.set_buttons_interactive(True)
        self._display.show_status(STATUS_PLAYER_TURN, "player")

    def shutdown(self) -> None:
        """Abandon any game in progress; pending playback emits nothing further."""
        self._player.cancel()
        self._sequence = []
        self._cursor = 0
        self._set_state(GameState.GAME_OVER)

    def _set_state(self, new_state: GameState) -> None:
        if new_state is not self._state:
            logger.debug("State %s -> %s", self._state.value, new_state.value)
        self._state = new_state

    def _do_computer_turn(self) -> None:
        self._set_state(GameState.COMPUTER_TURN)
        self._display.set_buttons_interactive(False)

        clicks = len(self._sequence) + 1
        self._sequence = []
        self._cursor = 0

        self._display.show_level(clicks)
        self._display.show_status(STATUS_GET_READY, "ready")

        self._sequence = self._player.play(clicks)

    def _do_game_over(self) -> None:
        score = len(self._sequence) - 1
        self._display.show_status(STATUS_GAME_OVER, "over")
        self._display.set_buttons_interactive(False)
        self._set_state(GameState.GAME_OVER)

        self._last_score = score
        logger.info("Game over with score %d", score)
        self._sequence = []
        self._cursor = 0
        self._display.set_start_enabled(True)

        self._save_high_score(score)

    def _save_high_score(self, score: int) -> None:
        if not self._scores.is_high_score(score):
            return

        def on_confirm(name: str) -> None:
            self._scores.save_score(name, score)

        self._display.request_player_name(self._scores.last_player_name(), score, on_confirm)
