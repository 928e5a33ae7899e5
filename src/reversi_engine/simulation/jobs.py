"""
Job data structures for background search.

Defines the inputs (SearchJob, MatchJob) and outputs (SearchOutcome,
MatchResult) exchanged with worker processes. Jobs are self-contained and
picklable: each carries its own copy of the position.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from reversi_engine.core.types import Difficulty, Position, Side
from reversi_engine.games.game_state import GameState


@dataclass(frozen=True)
class SearchJob:
    """
    One move search for a worker process.

    Contains everything needed to run the search without shared state;
    `state` must be a copy owned by the job.
    """
    state: GameState
    side: Side
    difficulty: Difficulty

    @classmethod
    def snapshot(cls, state: GameState, side: Side, difficulty: Difficulty) -> "SearchJob":
        """Build a job from a private copy of `state`."""
        return cls(state.copy(), Side(side), Difficulty.parse(difficulty))


@dataclass(frozen=True)
class SearchOutcome:
    """
    The single message a finished search delivers.

    `move` is None when the side had no legal move.
    """
    move: Optional[Position]
    side: Side
    difficulty: Difficulty
    value: int = 0
    nodes: int = 0


@dataclass(frozen=True)
class MatchJob:
    """An engine-vs-engine game: `first` plays Side.FIRST."""
    first: Difficulty
    second: Difficulty
    max_plies: Optional[int] = None


@dataclass
class MatchResult:
    """Final position summary of a finished (or ply-capped) game."""
    first: Difficulty
    second: Difficulty
    first_count: int
    second_count: int
    winner: Side  # Side.NONE for a draw or an unfinished game
    plies: int
    finished: bool
    moves: List[Tuple[Side, Position]] = field(default_factory=list)
