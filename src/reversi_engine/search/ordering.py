"""
Move ordering for alpha-beta search.

Good move ordering is critical for alpha-beta pruning efficiency: the
likely-best moves are searched first so later siblings are cut off.
Ordering never changes the value a full search returns, only its cost.

Ordering priority (high to low):
1. Corners
2. Edge cells, then interior cells, each boosted by capture count
3. C-squares (edge cells next to a corner)
4. X-squares (diagonal neighbours of a corner)
"""

from __future__ import annotations

from typing import List, Sequence

from reversi_engine.core.types import Position, Side
from reversi_engine.games import game_rules as rules
from reversi_engine.games.game_state import GameState

CORNER_ORDER_SCORE = 10_000
X_SQUARE_ORDER_SCORE = -3_000
C_SQUARE_ORDER_SCORE = -800
EDGE_ORDER_BONUS = 600
CAPTURE_ORDER_WEIGHT = 10
# Advanced ordering: per corner the move hands the opponent
CORNER_GIFT_PENALTY = 200


def move_order_score(state: GameState, move: Position, side: Side, advanced: bool) -> int:
    """Cheap estimate of how good `move` is for `side`."""
    if rules.is_corner(move):
        return CORNER_ORDER_SCORE
    if rules.is_x_square(move):
        return X_SQUARE_ORDER_SCORE
    if rules.is_c_square(move):
        return C_SQUARE_ORDER_SCORE

    score = EDGE_ORDER_BONUS if rules.is_edge(move) else 0
    score += CAPTURE_ORDER_WEIGHT * len(rules.captures_for_move(state.board, move, side))

    if advanced:
        after = rules.board_after_move(state.board, move, side)
        score -= CORNER_GIFT_PENALTY * rules.corner_moves(after, side.opponent)

    return score


def order_moves(
    state: GameState,
    moves: Sequence[Position],
    side: Side,
    advanced: bool,
) -> List[Position]:
    """
    Sort `moves` best-first by move_order_score.

    The sort is stable: equal scores keep move-generation order.
    """
    return sorted(
        moves,
        key=lambda m: move_order_score(state, m, side, advanced),
        reverse=True,
    )
