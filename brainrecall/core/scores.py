from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import List, Optional, Protocol, Tuple

from brainrecall.core.config import data_dir

logger = logging.getLogger(__name__)

DEFAULT_PLAYER_NAME = "Player"


@dataclass
class ScoreEntry:
    name: str
    score: int


class ScoreBoard(Protocol):
    """What the game controller needs from high-score storage."""

    def is_high_score(self, score: int) -> bool: ...

    def save_score(self, name: str, score: int) -> None: ...

    def last_player_name(self) -> str: ...


class HighScoreStore:
    """Best scores table, persisted to ``<data dir>/scores.json``.

    The table is kept sorted best-first and never grows past ``capacity``.
    """

    def __init__(self, file_path: Optional[Path] = None, capacity: int = 10) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._file_path = file_path or data_dir() / "scores.json"
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._capacity = capacity
        self._scores, self._last_player = self._load()

    @property
    def capacity(self) -> int:
        return self._capacity

    def is_high_score(self, score: int) -> bool:
        """True if ``score`` would earn a place in the table."""
        if score <= 0:
            return False
        if len(self._scores) < self._capacity:
            return True
        return score > self._scores[-1].score

    def save_score(self, name: str, score: int) -> None:
        name = name.strip() or DEFAULT_PLAYER_NAME
        entry = ScoreEntry(name=name, score=int(score))
        # insert after existing entries with an equal score
        position = len(self._scores)
        for i, existing in enumerate(self._scores):
            if entry.score > existing.score:
                position = i
                break
        self._scores.insert(position, entry)
        del self._scores[self._capacity:]
        self._last_player = name
        logger.info("Saved score %d for %s", entry.score, name)
        self._save()

    def last_player_name(self) -> str:
        return self._last_player

    def top_scores(self) -> List[ScoreEntry]:
        return [ScoreEntry(e.name, e.score) for e in self._scores]

    def best_score(self) -> int:
        return self._scores[0].score if self._scores else 0

    def reset(self) -> None:
        """Clear the table but keep the last player's name for the prompt."""
        self._scores = []
        self._save()

    def _load(self) -> Tuple[List[ScoreEntry], str]:
        scores: List[ScoreEntry] = []
        if not self._file_path.exists():
            return scores, ""
        try:
            payload = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not load scores from %s: %s", self._file_path, e)
            return scores, ""
        if not isinstance(payload, dict):
            logger.warning("Ignoring malformed scores file %s", self._file_path)
            return scores, ""

        raw_scores = payload.get("scores", [])
        if isinstance(raw_scores, list):
            for value in raw_scores:
                if not isinstance(value, dict):
                    continue
                try:
                    scores.append(ScoreEntry(name=str(value.get("name", DEFAULT_PLAYER_NAME)),
                                             score=int(value.get("score", 0))))
                except (TypeError, ValueError):
                    continue
        scores.sort(key=lambda e: e.score, reverse=True)
        last_player = payload.get("last_player", "")
        return scores[: self._capacity], last_player if isinstance(last_player, str) else ""

    def _save(self) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            "scores": [asdict(e) for e in self._scores],
            "last_player": self._last_player,
        }
        try:
            self._file_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save scores to %s: %s", self._file_path, e)
