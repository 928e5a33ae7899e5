"""
Configuration and difficulty registry.
"""

from __future__ import annotations

import multiprocessing as mp
from dataclasses import dataclass
from typing import Dict, Optional

from reversi_engine.core.types import Difficulty


# ---------------------------------------------------------------------------
# Difficulty Registry
# ---------------------------------------------------------------------------

# Easy: one-ply score = captures + this bonus for a corner
GREEDY_CORNER_BONUS = 500


@dataclass(frozen=True)
class SearchSettings:
    """How one difficulty tier searches."""

    greedy: bool = False
    depth: int = 0
    advanced: bool = False
    endgame_depth: Optional[int] = None
    endgame_empties: int = 0

    def depth_for(self, empties: int) -> int:
        """Search depth for a position with `empties` empty cells."""
        if self.endgame_depth is not None and empties <= self.endgame_empties:
            return self.endgame_depth
        return self.depth


DIFFICULTIES: Dict[Difficulty, SearchSettings] = {
    Difficulty.EASY: SearchSettings(greedy=True),
    Difficulty.MEDIUM: SearchSettings(depth=3, advanced=False),
    Difficulty.HARD: SearchSettings(
        depth=4, advanced=True, endgame_depth=6, endgame_empties=10
    ),
}


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_WORKER_COUNT = max(1, mp.cpu_count() - 1)

HUMAN = "human"
CONTROLLERS = (HUMAN,) + tuple(d.value for d in Difficulty)


def _check_controller(name: str) -> str:
    name = name.strip().lower()
    if name not in CONTROLLERS:
        raise ValueError(
            f"Unknown controller: {name!r}. Available: {', '.join(CONTROLLERS)}"
        )
    return name


class Config:
    """Runtime configuration for the command-line front-end."""

    def __init__(
        self,
        first: str = HUMAN,
        second: str = Difficulty.MEDIUM.value,
        games: int = 1,
        num_workers: int = DEFAULT_WORKER_COUNT,
        log_level: str = "WARNING",
    ):
        self.first = _check_controller(first)
        self.second = _check_controller(second)
        self.games = max(1, games)
        self.num_workers = num_workers
        self.log_level = log_level.upper()

    @property
    def self_play(self) -> bool:
        """True when no side is controlled by a human."""
        return HUMAN not in (self.first, self.second)


# Default configuration
DEFAULT_CONFIG = Config()
