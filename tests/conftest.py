"""
Shared test fixtures for reversi_engine tests.

Design principles:
- Boards are built from readable 8-line pictures
- Clean imports at module level
- Minimal, focused fixtures
"""

from typing import Callable, Sequence

import numpy as np
import pytest

from reversi_engine.core.types import Difficulty, Side
from reversi_engine.games import game_rules as rules
from reversi_engine.games.game_state import GameState
from reversi_engine.games.reversi import Reversi, new_state, play
from reversi_engine.search import choose_move

_CELLS = {".": Side.NONE, "X": Side.FIRST, "O": Side.SECOND}


def board_from_rows(rows: Sequence[str]) -> np.ndarray:
    """Build an int8 board from 8 strings of '.', 'X' and 'O' (spaces ignored)."""
    cleaned = [row.replace(" ", "") for row in rows]
    assert len(cleaned) == 8 and all(len(row) == 8 for row in cleaned)
    return np.array(
        [[_CELLS[ch] for ch in row] for row in cleaned], dtype=np.int8
    )


# =============================================================================
# Board Builders
# =============================================================================

@pytest.fixture
def make_board() -> Callable[[Sequence[str]], np.ndarray]:
    return board_from_rows


@pytest.fixture
def make_state() -> Callable[..., GameState]:
    """Factory: make_state(rows, side=Side.FIRST, game_over=False)."""
    def _make(rows: Sequence[str], side: Side = Side.FIRST, game_over: bool = False) -> GameState:
        return GameState(board_from_rows(rows), side_to_move=side, game_over=game_over)
    return _make


# =============================================================================
# Positions
# =============================================================================

@pytest.fixture
def start_state() -> GameState:
    """The standard opening, FIRST to move."""
    return new_state()


@pytest.fixture
def start_game() -> Reversi:
    return Reversi()


@pytest.fixture
def midgame_state() -> GameState:
    """Three plies in: X 2,3 / O 2,4 / X 2,5, SECOND to move."""
    state = new_state()
    for move in [(2, 3), (2, 4), (2, 5)]:
        play(state, move)
    return state


@pytest.fixture
def pass_state(make_state) -> GameState:
    """
    FIRST to move with two captures available; SECOND has no move at all.

    After either FIRST move SECOND must pass.
    """
    return make_state([
        "X O . . . . . .",
        ". . . . . . . .",
        ". . . . . . . .",
        ". . . . . . . .",
        ". . . . . . . .",
        "X O . . . . . .",
        ". . . . . . . .",
        ". . . . . . . .",
    ])


@pytest.fixture
def full_tie_state(make_state) -> GameState:
    """A full board, 32 discs each, game not yet flagged as over."""
    return make_state([
        "X X X X X X X X",
        "X X X X X X X X",
        "X X X X X X X X",
        "X X X X X X X X",
        "O O O O O O O O",
        "O O O O O O O O",
        "O O O O O O O O",
        "O O O O O O O O",
    ])


@pytest.fixture(scope="session")
def endgame_state() -> GameState:
    """
    Easy-vs-Easy game stopped with at most six empty cells left.

    Greedy play is deterministic, so this is always the same position.
    """
    state = new_state()
    while not state.game_over and rules.count_empty(state.board) > 6:
        move = choose_move(state, state.side_to_move, Difficulty.EASY)
        play(state, move)
    assert not state.game_over
    return state
