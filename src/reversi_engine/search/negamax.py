"""
Negamax search with alpha-beta pruning (Medium and Hard tiers).

Leaves and finished games are always scored by the evaluator from the root
side's (`me`) point of view, whichever side is to move there. Every child
value is negated with the window negated and swapped, including the child
reached through a forced pass:

    def negamax(state, depth, alpha, beta):
        if game over or depth == 0:
            return evaluate(state, me)
        if no legal move:
            return -negamax(state after the pass, depth - 1, -beta, -alpha)
        best = -infinity
        for move in ordered_moves:
            child = copy of state with move applied
            best = max(best, -negamax(child, depth - 1, -beta, -alpha))
            alpha = max(alpha, best)
            if alpha >= beta:
                break                                        # beta cutoff
        return best

Every simulated ply works on its own GameState copy; the caller's state is
never touched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from reversi_engine.core.types import Position, Side
from reversi_engine.evaluation.evaluator import evaluate
from reversi_engine.games import game_rules as rules
from reversi_engine.games.game_state import GameState
from reversi_engine.games.reversi import IllegalMoveError, ensure_playable, play
from reversi_engine.search.ordering import order_moves

logger = logging.getLogger(__name__)

SCORE_INF = 10**9


@dataclass
class SearchStats:
    """Counters for one search."""
    nodes: int = 0
    cutoffs: int = 0


@dataclass
class SearchResult:
    """Result of a root search."""
    best_move: Optional[Position]
    score: int
    depth: int
    stats: SearchStats
    scored_moves: List[Tuple[Position, int]] = field(default_factory=list)


class NegamaxSearch:
    """
    Depth-bounded negamax from the point of view of `me`.

    Args:
        me: Side the search picks a move for.
        advanced: Use the Hard evaluation profile and corner-aware ordering.
        pruning: If False, search the full tree without alpha-beta cutoffs
                 (same traversal order, same result, more nodes).
    """

    def __init__(self, me: Side, advanced: bool = False, pruning: bool = True):
        if me == Side.NONE:
            raise ValueError("Search side must be FIRST or SECOND")
        self.me = me
        self.advanced = advanced
        self.pruning = pruning
        self.stats = SearchStats()

    # ------------------------------------------------------------------
    # Root
    # ------------------------------------------------------------------

    def search(self, state: GameState, depth: int) -> SearchResult:
        """
        Pick the best move for `me` from `state`.

        The root is searched as if `me` were to move. The first move with a
        strictly greater value wins, so ties keep the earlier ordered move.
        """
        self.stats = SearchStats()
        root = state.copy()
        root.side_to_move = self.me

        candidates = rules.legal_moves(root.board, self.me)
        if root.game_over or not candidates:
            return SearchResult(None, self._leaf_value(root), depth, self.stats)

        self.stats.nodes += 1
        best_move: Optional[Position] = None
        best_value = -SCORE_INF
        alpha, beta = -SCORE_INF, SCORE_INF
        scored: List[Tuple[Position, int]] = []

        for move in order_moves(root, candidates, self.me, self.advanced):
            child = root.copy()
            try:
                play(child, move)
            except IllegalMoveError:
                logger.debug("Skipping candidate %s rejected by the state machine", move)
                continue

            value = -self._negamax(child, depth - 1, -beta, -alpha)
            scored.append((move, value))

            if value > best_value:
                best_value = value
                best_move = move
            if self.pruning and value > alpha:
                alpha = value

        return SearchResult(best_move, best_value, depth, self.stats, scored)

    # ------------------------------------------------------------------
    # Interior
    # ------------------------------------------------------------------

    def _leaf_value(self, state: GameState) -> int:
        """Evaluator score for `me`, whichever side is to move."""
        return evaluate(state, self.me, self.advanced)

    def _negamax(self, state: GameState, depth: int, alpha: int, beta: int) -> int:
        self.stats.nodes += 1

        if state.game_over or depth <= 0:
            return self._leaf_value(state)

        side = state.side_to_move
        moves = rules.legal_moves(state.board, side)

        if not moves:
            # Forced pass (or the game turns out to be over)
            child = state.copy()
            ensure_playable(child)
            return -self._negamax(child, depth - 1, -beta, -alpha)

        best = -SCORE_INF
        for move in order_moves(state, moves, side, self.advanced):
            child = state.copy()
            try:
                play(child, move)
            except IllegalMoveError:
                logger.debug("Skipping candidate %s rejected by the state machine", move)
                continue

            value = -self._negamax(child, depth - 1, -beta, -alpha)
            if value > best:
                best = value

            if self.pruning:
                if best > alpha:
                    alpha = best
                if alpha >= beta:
                    self.stats.cutoffs += 1
                    break

        return best
