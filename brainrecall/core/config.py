from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "data" / "game.yaml"


@dataclass(frozen=True)
class GameConfig:
    """Tuning values for a game. Defaults match the shipped ``game.yaml``."""

    buttons: int = 4
    lead_in_ms: int = 1500
    click_delay_slow_ms: int = 600
    click_delay_fast_ms: int = 400
    click_delay_fast_after_level: int = 4
    press_long_ms: int = 500
    press_short_ms: int = 300
    press_short_after_level: int = 7
    high_score_capacity: int = 10

    def click_delay(self, level: int) -> int:
        """Pause before each simulated press; shorter once past the threshold level."""
        if level <= self.click_delay_fast_after_level:
            return self.click_delay_slow_ms
        return self.click_delay_fast_ms

    def press_duration(self, level: int) -> int:
        """How long a simulated press stays highlighted."""
        if level <= self.press_short_after_level:
            return self.press_long_ms
        return self.press_short_ms


def data_dir() -> Path:
    """Directory holding persisted scores (``~/.brainrecall`` unless overridden)."""
    override = os.environ.get("BRAINRECALL_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".brainrecall"


def load_config(path: Optional[Path] = None) -> GameConfig:
    """Load ``GameConfig`` from YAML; missing keys keep their defaults."""
    if path is None:
        override = os.environ.get("BRAINRECALL_CONFIG")
        path = Path(override).expanduser() if override else DEFAULT_CONFIG_PATH
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        return GameConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"{path.name}: expected a YAML mapping")

    def _section(key: str) -> Dict[str, Any]:
        value = raw.get(key, {})
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise ValueError(f"{path.name}: '{key}' must be a mapping")
        return value

    def _positive_int(section: Dict[str, Any], key: str, default: int, label: str) -> int:
        value = section.get(key, default)
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValueError(f"{path.name}: '{label}' must be a positive integer, got {value!r}")
        return value

    defaults = GameConfig()
    click = _section("click_delay")
    press = _section("press_duration")
    scores = _section("high_scores")
    return GameConfig(
        buttons=_positive_int(raw, "buttons", defaults.buttons, "buttons"),
        lead_in_ms=_positive_int(raw, "lead_in_ms", defaults.lead_in_ms, "lead_in_ms"),
        click_delay_slow_ms=_positive_int(
            click, "slow_ms", defaults.click_delay_slow_ms, "click_delay.slow_ms"
        ),
        click_delay_fast_ms=_positive_int(
            click, "fast_ms", defaults.click_delay_fast_ms, "click_delay.fast_ms"
        ),
        click_delay_fast_after_level=_positive_int(
            click, "fast_after_level", defaults.click_delay_fast_after_level, "click_delay.fast_after_level"
        ),
        press_long_ms=_positive_int(press, "long_ms", defaults.press_long_ms, "press_duration.long_ms"),
        press_short_ms=_positive_int(press, "short_ms", defaults.press_short_ms, "press_duration.short_ms"),
        press_short_after_level=_positive_int(
            press, "short_after_level", defaults.press_short_after_level, "press_duration.short_after_level"
        ),
        high_score_capacity=_positive_int(
            scores, "capacity", defaults.high_score_capacity, "high_scores.capacity"
        ),
    )
