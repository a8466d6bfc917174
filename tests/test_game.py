"""Tests for brainrecall.core.game – the turn-taking state machine."""

from __future__ import annotations

import random
from typing import List

import pytest

from brainrecall.core.game import (
    STATUS_GAME_OVER,
    STATUS_GET_READY,
    STATUS_PLAYER_TURN,
    GameController,
    GameState,
)


class ScriptedRandom:
    """Stands in for ``random.Random``; ``randrange`` replays a fixed list of draws."""

    def __init__(self, draws: List[int]) -> None:
        self._draws = list(draws)

    def randrange(self, stop: int) -> int:
        value = self._draws.pop(0)
        assert 0 <= value < stop
        return value


@pytest.fixture()
def make_controller(display, scores, scheduler):
    def _make(draws: List[int] | None = None) -> GameController:
        rng = ScriptedRandom(draws) if draws is not None else random.Random(11)
        return GameController(display, scores, scheduler, rng=rng)

    return _make


def _play_back(controller: GameController, scheduler) -> None:
    """Let the computer finish its turn."""
    scheduler.run_all()
    assert controller.state is GameState.PLAYER_TURN


def _repeat(controller: GameController) -> None:
    for index in controller.sequence:
        controller.on_button_pressed(index)


# ---------------------------------------------------------------------------
# Initial state
# ---------------------------------------------------------------------------

class TestInitialState:
    def test_starts_idle(self, make_controller, display):
        c = make_controller()
        assert c.state is GameState.GAME_OVER
        assert c.level == 0
        assert c.cursor == 0
        assert c.last_score is None
        assert display.interactive is False
        assert display.start_enabled is True

    def test_press_before_start_ignored(self, make_controller, scores):
        c = make_controller()
        c.on_button_pressed(0)
        assert c.state is GameState.GAME_OVER
        assert scores.queried == []

    def test_stale_sequence_ready_ignored(self, make_controller, display):
        c = make_controller()
        c.on_sequence_ready()
        assert c.state is GameState.GAME_OVER
        assert display.interactive is False


# ---------------------------------------------------------------------------
# start()
# ---------------------------------------------------------------------------

class TestStart:
    def test_enters_computer_turn_at_level_one(self, make_controller, display):
        c = make_controller()
        c.start()
        assert c.state is GameState.COMPUTER_TURN
        assert c.level == 1
        assert c.cursor == 0
        assert display.level == 1
        assert display.status == (STATUS_GET_READY, "ready")
        assert display.interactive is False
        assert display.start_enabled is False

    def test_start_while_playing_ignored(self, make_controller, scheduler):
        c = make_controller()
        c.start()
        _play_back(c, scheduler)
        c.start()
        assert c.state is GameState.PLAYER_TURN
        assert c.level == 1

    def test_restart_after_game_over_begins_at_level_one(self, make_controller, scheduler):
        c = make_controller([2, 0, 1, 0])
        c.start()
        _play_back(c, scheduler)
        c.on_button_pressed(2)
        _play_back(c, scheduler)
        c.on_button_pressed(3)
        assert c.state is GameState.GAME_OVER
        c.start()
        assert c.level == 1
        assert c.cursor == 0


# ---------------------------------------------------------------------------
# on_sequence_ready()
# ---------------------------------------------------------------------------

class TestSequenceReady:
    def test_playback_hands_turn_to_player(self, make_controller, display, scheduler):
        c = make_controller([2])
        c.start()
        scheduler.run_all()
        assert c.state is GameState.PLAYER_TURN
        assert c.cursor == 0
        assert display.interactive is True
        assert display.status == (STATUS_PLAYER_TURN, "player")
        assert display.events == [("highlight", 2), ("unhighlight", 2)]

    def test_player_turn_waits_for_playback(self, make_controller, scheduler):
        c = make_controller([2])
        c.start()
        scheduler.advance(2100)
        assert c.state is GameState.COMPUTER_TURN
        scheduler.advance(500)
        assert c.state is GameState.PLAYER_TURN


# ---------------------------------------------------------------------------
# on_button_pressed()
# ---------------------------------------------------------------------------

class TestButtonPressed:
    def test_level_one_scenario(self, make_controller, scheduler, display):
        c = make_controller([2, 1, 1])
        c.start()
        _play_back(c, scheduler)
        c.on_button_pressed(2)
        assert c.state is GameState.COMPUTER_TURN
        assert c.level == 2
        assert c.cursor == 0
        assert display.level == 2
        assert display.interactive is False

    def test_partial_progress_advances_cursor(self, make_controller, scheduler):
        c = make_controller([0, 1, 2])
        c.start()
        _play_back(c, scheduler)
        _repeat(c)
        _play_back(c, scheduler)
        assert c.sequence == [1, 2]
        c.on_button_pressed(1)
        assert c.state is GameState.PLAYER_TURN
        assert c.cursor == 1

    def test_mismatch_at_level_three_scores_two(self, make_controller, scheduler, scores, display):
        c = make_controller([0, 3, 1, 1, 3, 0])
        c.start()
        _play_back(c, scheduler)
        _repeat(c)
        _play_back(c, scheduler)
        _repeat(c)
        _play_back(c, scheduler)
        assert c.sequence == [1, 3, 0]

        c.on_button_pressed(1)
        c.on_button_pressed(3)
        c.on_button_pressed(2)

        assert c.state is GameState.GAME_OVER
        assert c.last_score == 2
        assert scores.queried == [2]
        assert display.status == (STATUS_GAME_OVER, "over")
        assert display.interactive is False
        assert display.start_enabled is True

    def test_mismatch_on_first_press_of_level(self, make_controller, scheduler):
        c = make_controller([0, 1, 2])
        c.start()
        _play_back(c, scheduler)
        _repeat(c)
        _play_back(c, scheduler)
        c.on_button_pressed(3)
        assert c.state is GameState.GAME_OVER
        assert c.last_score == 1

    def test_failing_level_one_scores_zero(self, make_controller, scheduler, scores, display):
        c = make_controller([2])
        c.start()
        _play_back(c, scheduler)
        c.on_button_pressed(0)
        assert c.last_score == 0
        assert display.name_requests == []
        assert scores.saved == []

    def test_game_over_clears_sequence(self, make_controller, scheduler):
        c = make_controller([2])
        c.start()
        _play_back(c, scheduler)
        c.on_button_pressed(0)
        assert c.sequence == []
        assert c.cursor == 0

    def test_levels_never_skipped(self, make_controller, scheduler):
        c = make_controller()
        c.start()
        for expected in range(1, 12):
            assert c.level == expected
            _play_back(c, scheduler)
            _repeat(c)
        assert c.level == 12

    def test_presses_during_computer_turn_ignored(self, make_controller, scheduler, scores):
        c = make_controller([2, 1, 1])
        c.start()
        for index in range(4):
            c.on_button_pressed(index)
        assert c.state is GameState.COMPUTER_TURN
        assert c.level == 1
        assert scores.queried == []

    def test_presses_after_game_over_ignored(self, make_controller, scheduler, scores):
        c = make_controller([2])
        c.start()
        _play_back(c, scheduler)
        c.on_button_pressed(0)
        c.on_button_pressed(2)
        assert c.state is GameState.GAME_OVER
        assert scores.queried == [0]

    @pytest.mark.parametrize("index", [-1, 4, 99, None, "2", 1.0, True])
    def test_out_of_range_index_ignored(self, make_controller, scheduler, index):
        c = make_controller([2])
        c.start()
        _play_back(c, scheduler)
        c.on_button_pressed(index)
        assert c.state is GameState.PLAYER_TURN
        assert c.cursor == 0


# ---------------------------------------------------------------------------
# High scores
# ---------------------------------------------------------------------------

class TestHighScore:
    def _lose_at_level_two(self, c: GameController, scheduler) -> None:
        c.start()
        _play_back(c, scheduler)
        _repeat(c)
        _play_back(c, scheduler)
        c.on_button_pressed(3)

    def test_qualifying_score_prompts_with_last_name(self, make_controller, scheduler, scores, display):
        scores.last_player = "Ada"
        c = make_controller([0, 1, 1])
        self._lose_at_level_two(c, scheduler)
        assert len(display.name_requests) == 1
        default, score, _ = display.name_requests[0]
        assert default == "Ada"
        assert score == 1
        assert scores.saved == []

    def test_confirmed_name_is_saved(self, make_controller, scheduler, scores, display):
        c = make_controller([0, 1, 1])
        self._lose_at_level_two(c, scheduler)
        _, _, on_confirm = display.name_requests[0]
        on_confirm("Grace")
        assert scores.saved == [("Grace", 1)]

    def test_non_qualifying_score_not_prompted(self, make_controller, scheduler, scores, display):
        scores.threshold = 5
        c = make_controller([0, 1, 1])
        self._lose_at_level_two(c, scheduler)
        assert scores.queried == [1]
        assert display.name_requests == []


# ---------------------------------------------------------------------------
# shutdown()
# ---------------------------------------------------------------------------

class TestShutdown:
    def test_cancels_playback_without_partial_credit(self, make_controller, scheduler, display):
        c = make_controller([1, 2])
        c.start()
        scheduler.advance(2100)
        c.shutdown()
        scheduler.run_all()
        assert display.events == [("highlight", 1)]
        assert c.state is GameState.GAME_OVER
        assert c.sequence == []
        assert display.status == (STATUS_GET_READY, "ready")

    def test_shutdown_mid_player_turn_records_nothing(self, make_controller, scheduler, scores):
        c = make_controller([1])
        c.start()
        _play_back(c, scheduler)
        c.shutdown()
        c.on_button_pressed(1)
        assert c.state is GameState.GAME_OVER
        assert scores.queried == []
