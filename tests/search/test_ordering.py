"""
Tests for reversi_engine.search.ordering
"""

import pytest

from reversi_engine.core.types import Position, Side
from reversi_engine.games import game_rules as rules
from reversi_engine.search.ordering import (
    CAPTURE_ORDER_WEIGHT,
    CORNER_GIFT_PENALTY,
    CORNER_ORDER_SCORE,
    C_SQUARE_ORDER_SCORE,
    EDGE_ORDER_BONUS,
    X_SQUARE_ORDER_SCORE,
    move_order_score,
    order_moves,
)


class TestMoveOrderScore:
    """move_order_score tests."""

    @pytest.mark.parametrize("move,expected", [
        ((0, 0), CORNER_ORDER_SCORE),
        ((7, 7), CORNER_ORDER_SCORE),
        ((1, 1), X_SQUARE_ORDER_SCORE),
        ((0, 1), C_SQUARE_ORDER_SCORE),
    ])
    def test_special_squares(self, start_state, move, expected):
        assert move_order_score(start_state, Position(*move), Side.FIRST, False) == expected

    def test_edge_bonus(self, start_state):
        assert move_order_score(start_state, Position(0, 3), Side.FIRST, False) == EDGE_ORDER_BONUS

    def test_captures(self, start_state):
        """One capture in the opening."""
        score = move_order_score(start_state, Position(2, 3), Side.FIRST, False)
        assert score == CAPTURE_ORDER_WEIGHT

    def test_advanced_penalizes_corner_gift(self, make_state):
        """Completing X X O next to an empty corner hands SECOND that corner."""
        state = make_state([
            ". X . O . . . .",
            ". . O . . . . .",
            ". . X . . . . .",
            ". . . . . . . .",
            ". . . . . . . .",
            ". . . . . . . .",
            ". . . . . . . .",
            ". . . . . . . .",
        ])
        move = Position(0, 2)
        basic = move_order_score(state, move, Side.FIRST, False)
        advanced = move_order_score(state, move, Side.FIRST, True)

        assert basic == EDGE_ORDER_BONUS + CAPTURE_ORDER_WEIGHT
        assert advanced == basic - CORNER_GIFT_PENALTY

    def test_advanced_no_gift_unchanged(self, start_state):
        move = Position(2, 3)
        assert move_order_score(start_state, move, Side.FIRST, True) == \
            move_order_score(start_state, move, Side.FIRST, False)


class TestOrderMoves:
    """order_moves tests."""

    def test_priority(self, start_state):
        moves = [Position(*m) for m in [(2, 3), (1, 1), (0, 0), (0, 1), (0, 3)]]
        ordered = order_moves(start_state, moves, Side.FIRST, False)
        assert ordered == [(0, 0), (0, 3), (2, 3), (0, 1), (1, 1)]

    def test_stable_for_ties(self, start_state):
        """Equal scores keep the input order."""
        moves = [Position(5, 4), Position(2, 3), Position(4, 5), Position(3, 2)]
        assert order_moves(start_state, moves, Side.FIRST, False) == moves

    def test_same_moves_returned(self, midgame_state):
        side = midgame_state.side_to_move
        moves = rules.legal_moves(midgame_state.board, side)
        ordered = order_moves(midgame_state, moves, side, True)
        assert sorted(ordered) == sorted(moves)
