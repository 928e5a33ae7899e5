"""
GameState - per-turn game state container.

Optimized for fast copying: every simulated ply in the search works on its
own copy, so the board is a single contiguous int8 array.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from reversi_engine.core.types import Side, Position


class GameState:
    """
    Lightweight game state container.

    Uses int8 board for fast copy:
        0 = empty
        1 = first player's disc
        2 = second player's disc
    """
    __slots__ = ('board', 'side_to_move', 'game_over', 'last_move')

    def __init__(
        self,
        board: np.ndarray,
        side_to_move: Side = Side.FIRST,
        game_over: bool = False,
        last_move: Optional[Position] = None,
    ):
        self.board = board
        self.side_to_move = Side(side_to_move)
        self.game_over = game_over
        self.last_move = last_move

    def copy(self) -> "GameState":
        """Fast copy - board.copy() is optimized for contiguous int arrays."""
        return GameState(
            self.board.copy(), self.side_to_move, self.game_over, self.last_move
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (
            self.side_to_move == other.side_to_move
            and self.game_over == other.game_over
            and self.last_move == other.last_move
            and np.array_equal(self.board, other.board)
        )

    def __repr__(self) -> str:
        return (
            f"GameState(side_to_move={self.side_to_move.name}, "
            f"game_over={self.game_over}, last_move={self.last_move})"
        )
