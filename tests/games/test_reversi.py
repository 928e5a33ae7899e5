"""
Tests for reversi_engine.games.reversi

Tests the turn state machine (play / advance_turn / ensure_playable) and
the Reversi game object.
"""

import pytest

from reversi_engine.core.types import Outcome, Position, Side
from reversi_engine.games import game_rules as rules
from reversi_engine.games.game_state import GameState
from reversi_engine.games.reversi import (
    GameOverError,
    IllegalMoveError,
    Reversi,
    ensure_playable,
    outcome_for,
    play,
)


class TestPlay:
    """play() tests."""

    def test_opening_move(self, start_state):
        """2,3 places one disc and flips 3,3."""
        changed = play(start_state, Position(2, 3))

        assert changed == [(2, 3), (3, 3)]
        assert rules.count(start_state.board, Side.FIRST) == 4
        assert rules.count(start_state.board, Side.SECOND) == 1
        assert start_state.side_to_move == Side.SECOND
        assert start_state.last_move == (2, 3)
        assert not start_state.game_over

    def test_placed_cell_first(self, make_state):
        """changed_cells starts with the placed cell."""
        state = make_state([
            "X O O O O O O .",
            ". . . . . . . .",
            ". . . . . . . .",
            ". . . . . . . .",
            ". . . . . . . .",
            ". . . . . . . .",
            ". . . . . . . O",
            ". . . . . . . X",
        ])
        changed = play(state, (0, 7))
        assert changed[0] == (0, 7)
        assert set(changed[1:]) == {(0, c) for c in range(1, 7)}

    def test_accepts_plain_tuple(self, start_state):
        assert play(start_state, (3, 2))[0] == Position(3, 2)

    def test_disc_accounting(self, midgame_state):
        """Mover gains 1 + captures, opponent loses the captures."""
        state = midgame_state
        mover = state.side_to_move
        move = rules.legal_moves(state.board, mover)[0]
        captured = len(rules.captures_for_move(state.board, move, mover))
        mine = rules.count(state.board, mover)
        theirs = rules.count(state.board, mover.opponent)

        play(state, move)

        assert captured >= 1
        assert rules.count(state.board, mover) == mine + 1 + captured
        assert rules.count(state.board, mover.opponent) == theirs - captured


class TestIllegalMoves:
    """Rejected moves leave the state untouched."""

    @pytest.mark.parametrize("move", [
        (3, 3),    # occupied
        (0, 0),    # captures nothing
        (2, 4),    # adjacent but not closing a run
        (8, 8),    # off board
        (-1, 3),   # off board
    ])
    def test_rejected_atomically(self, start_state, move):
        before = start_state.copy()
        with pytest.raises(IllegalMoveError) as info:
            play(start_state, move)
        assert start_state == before
        assert info.value.side == Side.FIRST

    def test_malformed(self, start_state):
        before = start_state.copy()
        with pytest.raises(IllegalMoveError):
            play(start_state, ("a", "b"))
        assert start_state == before

    def test_is_value_error(self, start_state):
        """Callers catching ValueError see illegal moves too."""
        with pytest.raises(ValueError):
            play(start_state, (0, 0))

    def test_game_over(self, full_tie_state):
        full_tie_state.game_over = True
        before = full_tie_state.copy()
        with pytest.raises(GameOverError):
            play(full_tie_state, (0, 0))
        assert full_tie_state == before

    def test_game_over_is_illegal_move(self):
        assert issubclass(GameOverError, IllegalMoveError)


class TestTurnPolicy:
    """advance_turn / ensure_playable tests."""

    def test_forced_pass_keeps_mover(self, pass_state):
        """SECOND cannot reply, so FIRST moves again."""
        play(pass_state, (0, 2))
        assert pass_state.side_to_move == Side.FIRST
        assert not pass_state.game_over

    def test_game_ends_when_nobody_can_move(self, pass_state):
        play(pass_state, (0, 2))
        play(pass_state, (5, 2))
        assert pass_state.game_over
        assert rules.count(pass_state.board, Side.SECOND) == 0

    def test_filling_last_cell_ends_game(self, make_state):
        state = make_state([
            ". O X X X X X X",
            "X X X X X X X X",
            "X X X X X X X X",
            "X X X X X X X X",
            "O O O O O O O O",
            "O O O O O O O O",
            "O O O O O O O O",
            "O O O O O O O O",
        ])
        play(state, (0, 0))
        assert state.game_over
        assert rules.count_empty(state.board) == 0

    def test_ensure_playable_switches_side(self, pass_state):
        """SECOND to move with no move hands the turn to FIRST."""
        pass_state.side_to_move = Side.SECOND
        ensure_playable(pass_state)
        assert pass_state.side_to_move == Side.FIRST
        assert not pass_state.game_over

    def test_ensure_playable_idempotent(self, pass_state):
        pass_state.side_to_move = Side.SECOND
        ensure_playable(pass_state)
        once = pass_state.copy()
        ensure_playable(pass_state)
        assert pass_state == once

    def test_ensure_playable_noop_when_playable(self, start_state):
        before = start_state.copy()
        ensure_playable(start_state)
        assert start_state == before

    def test_ensure_playable_ends_full_board(self, full_tie_state):
        ensure_playable(full_tie_state)
        assert full_tie_state.game_over


class TestOutcome:
    """outcome_for tests."""

    def test_neutral_while_running(self, start_state):
        assert outcome_for(start_state.board, Side.FIRST, False) == Outcome.NEUTRAL

    def test_full_board_tie(self, full_tie_state):
        """Equal counts on a full board are a draw for both sides."""
        assert rules.count(full_tie_state.board, Side.FIRST) == 32
        assert outcome_for(full_tie_state.board, Side.FIRST, True) == Outcome.TIE
        assert outcome_for(full_tie_state.board, Side.SECOND, True) == Outcome.TIE

    def test_win_and_loss(self, pass_state):
        play(pass_state, (0, 2))
        play(pass_state, (5, 2))
        assert outcome_for(pass_state.board, Side.FIRST, True) == Outcome.WIN
        assert outcome_for(pass_state.board, Side.SECOND, True) == Outcome.LOSS


class TestReversiGame:
    """Reversi game object tests."""

    def test_new_game(self, start_game):
        assert start_game.current_player() == Side.FIRST
        assert start_game.valid_moves() == [(2, 3), (3, 2), (4, 5), (5, 4)]
        assert not start_game.is_over()
        assert start_game.get_result(Side.FIRST) == Outcome.NEUTRAL

    def test_apply_move(self, start_game):
        changed = start_game.apply_move((2, 3))
        assert changed == [(2, 3), (3, 3)]
        assert start_game.current_player() == Side.SECOND
        assert start_game.count(Side.FIRST) == 4

    def test_apply_illegal_keeps_state(self, start_game):
        before = start_game.get_state().copy()
        with pytest.raises(IllegalMoveError):
            start_game.apply_move((0, 0))
        assert start_game.get_state() == before

    def test_no_moves_after_game_over(self, full_tie_state):
        game = Reversi(full_tie_state)
        game.pass_turn()
        assert game.is_over()
        assert game.valid_moves() == []
        assert game.get_result(Side.FIRST) == Outcome.TIE

    def test_clone_shares_state(self, start_game):
        clone = start_game.clone()
        clone.apply_move((2, 3))
        assert start_game.current_player() == Side.SECOND

    def test_deep_clone_independent(self, start_game):
        clone = start_game.deep_clone()
        clone.apply_move((2, 3))
        assert start_game.current_player() == Side.FIRST
        assert start_game.count(Side.FIRST) == 2

    def test_reset(self, start_game):
        start_game.apply_move((2, 3))
        start_game.reset()
        assert start_game.get_state() == GameState(rules.initial_board())

    def test_set_state(self, start_game, midgame_state):
        start_game.set_state(midgame_state)
        assert start_game.get_state() is midgame_state

    def test_state_string(self, start_game):
        text = start_game.state_string()
        assert "X 2 : 2 O" in text
        assert "To move: FIRST" in text
        assert text.count("*") == 4

    def test_state_string_game_over(self, full_tie_state):
        game = Reversi(full_tie_state)
        game.pass_turn()
        assert "Game over" in game.state_string()

    def test_identity(self, start_game):
        assert start_game.game_id() == "reversi"
        assert start_game.num_players() == 2
        assert start_game.get_cell_strings()[Side.FIRST] == "X"

    def test_state_string_uses_cell_strings(self):
        """Board and score line are drawn with the game's cell symbols."""

        class Glyphs(Reversi):
            def get_cell_strings(self):
                return {0: "_", 1: "B", 2: "W"}

        text = Glyphs().state_string()
        assert "│ B │ W │" in text
        assert "B 2 : 2 W" in text
        assert " X " not in text
