"""
Evaluation features.

Each function compares `me` against `me.opponent` and returns
"my measure minus the opponent's measure", except the opponent-threat terms
which count only the opponent's options.
"""

from __future__ import annotations

from typing import Iterable, Tuple

import numpy as np

from reversi_engine.core.types import BOARD_SIZE, CORNERS, DIRECTIONS, LAST, Side
from reversi_engine.evaluation.weights import IMMEDIATE_CORNER_THREAT, POSITIONAL_WEIGHTS
from reversi_engine.games import game_rules as rules

# Edge rays walked from each corner: (corner, cells from the corner outward)
_EDGE_RUNS: Tuple[Tuple[Tuple[int, int], Tuple[Tuple[int, int], ...]], ...] = (
    ((0, 0), tuple((0, c) for c in range(BOARD_SIZE))),
    ((0, LAST), tuple((0, c) for c in reversed(range(BOARD_SIZE)))),
    ((LAST, 0), tuple((LAST, c) for c in range(BOARD_SIZE))),
    ((LAST, LAST), tuple((LAST, c) for c in reversed(range(BOARD_SIZE)))),
    ((0, 0), tuple((r, 0) for r in range(BOARD_SIZE))),
    ((LAST, 0), tuple((r, 0) for r in reversed(range(BOARD_SIZE)))),
    ((0, LAST), tuple((r, LAST) for r in range(BOARD_SIZE))),
    ((LAST, LAST), tuple((r, LAST) for r in reversed(range(BOARD_SIZE)))),
)

_EDGE_MASK = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=bool)
_EDGE_MASK[0, :] = _EDGE_MASK[LAST, :] = _EDGE_MASK[:, 0] = _EDGE_MASK[:, LAST] = True
_EDGE_MASK.setflags(write=False)

_CORNER_INDEX = tuple(zip(*CORNERS))


def material(board: np.ndarray, me: Side) -> int:
    return rules.count(board, me) - rules.count(board, me.opponent)


def mobility(my_moves: np.ndarray, opp_moves: np.ndarray) -> int:
    """Legal-move count difference, from precomputed legal-move masks."""
    return int(np.count_nonzero(my_moves)) - int(np.count_nonzero(opp_moves))


def corners(board: np.ndarray, me: Side) -> int:
    held = board[_CORNER_INDEX]
    return int(np.count_nonzero(held == int(me))) - int(np.count_nonzero(held == int(me.opponent)))


def positional(board: np.ndarray, me: Side) -> int:
    mine = int(POSITIONAL_WEIGHTS[board == int(me)].sum())
    theirs = int(POSITIONAL_WEIGHTS[board == int(me.opponent)].sum())
    return mine - theirs


def frontier(board: np.ndarray, me: Side) -> int:
    """Discs touching (8-directionally) at least one empty cell."""
    empty = board == int(Side.NONE)
    near_empty = np.zeros_like(empty)
    for dr, dc in DIRECTIONS:
        near_empty |= rules.shift_mask(empty, dr, dc)
    mine = np.count_nonzero(near_empty & (board == int(me)))
    theirs = np.count_nonzero(near_empty & (board == int(me.opponent)))
    return int(mine) - int(theirs)


def _run_from_corner(board: np.ndarray, corner: Tuple[int, int],
                     cells: Iterable[Tuple[int, int]]) -> Tuple[int, int]:
    """(occupant of the corner, length of its same-side run along the edge)."""
    occupant = int(board[corner])
    if occupant == Side.NONE:
        return occupant, 0
    run = 0
    for r, c in cells:
        if board[r, c] != occupant:
            break
        run += 1
    return occupant, run


def stable_edges(board: np.ndarray, me: Side) -> int:
    """
    Corner-anchored edge runs: + run length for corners held by `me`,
    - run length for corners held by the opponent, nothing for empty corners.
    """
    score = 0
    for corner, cells in _EDGE_RUNS:
        occupant, run = _run_from_corner(board, corner, cells)
        if occupant == me:
            score += run
        elif occupant != Side.NONE:
            score -= run
    return score


def corner_moves_in(moves: np.ndarray) -> int:
    """Corners present in a legal-move mask."""
    return int(np.count_nonzero(moves[_CORNER_INDEX]))


def edge_moves_in(moves: np.ndarray) -> int:
    """Edge cells (corners included) present in a legal-move mask."""
    return int(np.count_nonzero(moves & _EDGE_MASK))


def delayed_corner_threat(board: np.ndarray, me: Side, opp_moves: np.ndarray) -> int:
    """
    How many opponent replies leave the opponent with a corner move.

    Each opponent move is simulated on a private copy, then the opponent's
    corner options are counted from that position. An opponent who can
    already take a corner scores a flat IMMEDIATE_CORNER_THREAT.
    """
    opp = me.opponent
    if corner_moves_in(opp_moves) > 0:
        return IMMEDIATE_CORNER_THREAT

    threats = 0
    for r, c in np.argwhere(opp_moves):
        after = rules.board_after_move(board, (int(r), int(c)), opp)
        if rules.corner_moves(after, opp) > 0:
            threats += 1
    return threats
