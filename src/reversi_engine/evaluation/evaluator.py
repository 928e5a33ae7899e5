"""
Static position evaluation.

Scores are integers, higher is better for the perspective side. Finished
games score ±(TERMINAL_SCORE + disc difference), which dominates every
heuristic score.
"""

from __future__ import annotations

from typing import Dict

import numpy as np

from reversi_engine.core.types import Side
from reversi_engine.evaluation import features
from reversi_engine.evaluation.weights import TERMINAL_SCORE, EvalWeights, weights_for
from reversi_engine.games import game_rules as rules
from reversi_engine.games.game_state import GameState


def terminal_score(board: np.ndarray, me: Side) -> int:
    """Final-position score: sign of the disc difference, offset past any heuristic."""
    diff = features.material(board, me)
    if diff > 0:
        return TERMINAL_SCORE + diff
    if diff < 0:
        return -TERMINAL_SCORE + diff
    return 0


def feature_values(board: np.ndarray, me: Side, advanced: bool) -> Dict[str, int]:
    """
    Raw (unweighted) feature values, keyed by EvalWeights field name.

    Advanced-only terms are 0 when `advanced` is False.
    """
    opp = me.opponent
    my_moves = rules.legal_move_mask(board, me)
    opp_moves = rules.legal_move_mask(board, opp)

    return {
        "mobility": features.mobility(my_moves, opp_moves),
        "corners": features.corners(board, me),
        "material": features.material(board, me),
        "positional": features.positional(board, me),
        "frontier": features.frontier(board, me),
        "stability": features.stable_edges(board, me) if advanced else 0,
        "opp_corner_moves": features.corner_moves_in(opp_moves),
        "opp_edge_moves": features.edge_moves_in(opp_moves) if advanced else 0,
        "delayed_corner_threat": (
            features.delayed_corner_threat(board, me, opp_moves) if advanced else 0
        ),
    }


def weighted_sum(values: Dict[str, int], weights: EvalWeights) -> int:
    return sum(getattr(weights, name) * value for name, value in values.items())


def evaluate(state: GameState, me: Side, advanced: bool = False) -> int:
    """
    Score `state` from `me`'s point of view.

    Args:
        state: Position to score (not modified).
        me: Perspective side.
        advanced: Use the Hard profile (adds edge stability, opponent edge
            moves and the delayed-corner threat) instead of the Medium one.
    """
    if state.game_over:
        return terminal_score(state.board, me)
    return weighted_sum(feature_values(state.board, me, advanced), weights_for(advanced))
