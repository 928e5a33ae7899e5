"""
Search module - move selection for the computer opponent.

Provides the main entry point:
- choose_move(): pick a move for a side at a difficulty tier

Tiers:
- Easy:   greedy one-ply (captures + corner bonus)
- Medium: negamax/alpha-beta, depth 3, basic evaluation
- Hard:   negamax/alpha-beta, advanced evaluation, depth 4 (6 in the endgame)

choose_move is synchronous, deterministic and never mutates its input; run
it off the interactive thread via simulation.SearchRunner when it may take a
while.
"""

from __future__ import annotations

import logging
from typing import Optional

from reversi_engine.core.types import Difficulty, Position, Side
from reversi_engine.games import game_rules as rules
from reversi_engine.games.game_state import GameState
from reversi_engine.search.greedy import choose_greedy
from reversi_engine.search.negamax import NegamaxSearch, SearchResult, SearchStats
from reversi_engine.utils.config import DIFFICULTIES

logger = logging.getLogger(__name__)


def search_move(state: GameState, side: Side, difficulty: Difficulty) -> SearchResult:
    """
    Run the tier's search and return the full result (move, value, stats).

    Easy reports a value of 0 and no node statistics.
    """
    difficulty = Difficulty.parse(difficulty)
    settings = DIFFICULTIES[difficulty]

    if settings.greedy:
        move = choose_greedy(state, side)
        return SearchResult(move, 0, 1, SearchStats(nodes=1 if move else 0))

    depth = settings.depth_for(rules.count_empty(state.board))
    result = NegamaxSearch(side, advanced=settings.advanced).search(state, depth)
    logger.debug(
        "%s search for %s: depth=%d move=%s value=%d nodes=%d cutoffs=%d",
        difficulty.value, side.name, depth, result.best_move, result.score,
        result.stats.nodes, result.stats.cutoffs,
    )
    return result


def choose_move(state: GameState, side: Side, difficulty: Difficulty) -> Optional[Position]:
    """
    Select a move for `side` at the given difficulty.

    Args:
        state: Current position (not modified).
        side: Side to pick a move for.
        difficulty: Easy / Medium / Hard.

    Returns:
        The chosen move, or None if `side` has no legal move (the caller
        then passes the turn via ensure_turn_is_playable_or_game_over).
    """
    if state.game_over or not rules.has_legal_move(state.board, side):
        return None
    return search_move(state, side, difficulty).best_move


__all__ = [
    "choose_move",
    "search_move",
    "NegamaxSearch",
    "SearchResult",
    "SearchStats",
]
