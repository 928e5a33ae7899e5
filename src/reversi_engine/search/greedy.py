"""
Greedy one-ply selection (Easy tier).
"""

from __future__ import annotations

from typing import Optional

from reversi_engine.core.types import Position, Side
from reversi_engine.games import game_rules as rules
from reversi_engine.games.game_state import GameState
from reversi_engine.utils.config import GREEDY_CORNER_BONUS


def greedy_score(state: GameState, move: Position, side: Side) -> int:
    """Immediate captures, plus a flat bonus for taking a corner."""
    captured = len(rules.captures_for_move(state.board, move, side))
    return captured + (GREEDY_CORNER_BONUS if rules.is_corner(move) else 0)


def choose_greedy(state: GameState, side: Side) -> Optional[Position]:
    """Highest greedy_score; the first maximal move in generation order wins."""
    best_move: Optional[Position] = None
    best_score = 0

    for move in rules.legal_moves(state.board, side):
        score = greedy_score(state, move, side)
        if best_move is None or score > best_score:
            best_move = move
            best_score = score

    return best_move
