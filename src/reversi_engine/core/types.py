"""
Core types, constants, and data structures.

This module contains the fundamental types used throughout the engine:
- Side: cell occupancy and player identity in one tri-state enum
- Position: (row, col) board coordinate
- Difficulty: computer opponent tier
- Outcome: caller-level result of a game for one side
- Board geometry constants
"""

from __future__ import annotations

from enum import Enum, IntEnum, auto
from typing import NamedTuple, Tuple


# ─── Board geometry ───────────────────────────────────────────────────────────

BOARD_SIZE = 8
LAST = BOARD_SIZE - 1

# Compass directions (dr, dc), walked in this order by capture resolution
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


class Side(IntEnum):
    """
    Owner of a cell, or the player to act.

    Integer values double as the int8 board encoding:
        0 = empty
        1 = first player's disc
        2 = second player's disc
    """

    NONE = 0
    FIRST = 1
    SECOND = 2

    @property
    def opponent(self) -> "Side":
        if self is Side.NONE:
            return Side.NONE
        return Side(3 - self.value)  # Toggle 1↔2


class Position(NamedTuple):
    """Board coordinate. Both components lie in [0, BOARD_SIZE)."""

    row: int
    col: int

    def __str__(self) -> str:
        return f"{self.row},{self.col}"


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, name: "str | Difficulty") -> "Difficulty":
        """Resolve a case-insensitive tier name (or pass a Difficulty through)."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError as e:
            available = ", ".join(d.value for d in cls)
            raise ValueError(
                f"Unknown difficulty: {name!r}. Available: {available}"
            ) from e


class Outcome(Enum):
    WIN = auto()
    TIE = auto()
    LOSS = auto()
    NEUTRAL = auto()


CORNERS: Tuple[Position, ...] = (
    Position(0, 0), Position(0, LAST), Position(LAST, 0), Position(LAST, LAST),
)

# Diagonal neighbours of the corners
X_SQUARES: Tuple[Position, ...] = (
    Position(1, 1), Position(1, LAST - 1),
    Position(LAST - 1, 1), Position(LAST - 1, LAST - 1),
)

# Edge neighbours of the corners
C_SQUARES: Tuple[Position, ...] = (
    Position(0, 1), Position(1, 0),
    Position(0, LAST - 1), Position(1, LAST),
    Position(LAST - 1, 0), Position(LAST, 1),
    Position(LAST - 1, LAST), Position(LAST, LAST - 1),
)
