"""
Games module - board representation, move generation and the turn state machine.
"""

from reversi_engine.games.game_state import GameState
from reversi_engine.games.game_base import GameBase
from reversi_engine.games.game_rules import (
    captures_for_move,
    is_legal_move,
    legal_moves,
    count,
    count_empty,
    in_bounds,
)
from reversi_engine.games.reversi import Reversi, IllegalMoveError, GameOverError

__all__ = [
    "GameState",
    "GameBase",
    "Reversi",
    "IllegalMoveError",
    "GameOverError",
    "captures_for_move",
    "is_legal_move",
    "legal_moves",
    "count",
    "count_empty",
    "in_bounds",
]
