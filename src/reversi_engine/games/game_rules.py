"""
High-performance NumPy utilities for the Reversi board.

Designed for fast search rollouts: legal-move generation is vectorized over
the whole board, capture resolution walks only the eight rays of one cell.
All functions are pure; none of them mutates the board passed in.
"""

from __future__ import annotations

from typing import List

import numpy as np

from reversi_engine.core.types import (
    BOARD_SIZE,
    C_SQUARES,
    CORNERS,
    DIRECTIONS,
    LAST,
    Position,
    Side,
    X_SQUARES,
)

_CORNER_SET = frozenset(CORNERS)
_X_SET = frozenset(X_SQUARES)
_C_SET = frozenset(C_SQUARES)


def initial_board() -> np.ndarray:
    """Create the canonical four-disc starting position."""
    board = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
    mid = BOARD_SIZE // 2
    board[mid - 1, mid - 1] = Side.SECOND
    board[mid, mid] = Side.SECOND
    board[mid - 1, mid] = Side.FIRST
    board[mid, mid - 1] = Side.FIRST
    return board


def in_bounds(r: int, c: int) -> bool:
    """Return True if (r, c) is inside the board."""
    return 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE


# ---------------------------------------------------------------------------
# Capture resolution
# ---------------------------------------------------------------------------

def captures_for_move(board: np.ndarray, position: Position, side: Side) -> List[Position]:
    """
    Opponent discs flipped if `side` places a disc at `position`.

    Walks each of the eight rays: a contiguous run of opponent discs closed
    by a disc of `side` is captured; a run closed by an empty cell or the
    board edge captures nothing. Returns [] for an occupied or off-board
    cell, and for Side.NONE.
    """
    r, c = int(position[0]), int(position[1])
    if side == Side.NONE or not in_bounds(r, c) or board[r, c] != Side.NONE:
        return []

    own = int(side)
    opp = int(side.opponent)
    captured: List[Position] = []

    for dr, dc in DIRECTIONS:
        nr, nc = r + dr, c + dc
        line: List[Position] = []
        while 0 <= nr < BOARD_SIZE and 0 <= nc < BOARD_SIZE:
            cell = board[nr, nc]
            if cell == opp:
                line.append(Position(nr, nc))
                nr += dr
                nc += dc
            elif cell == own:
                captured.extend(line)
                break
            else:
                break

    return captured


def is_legal_move(board: np.ndarray, position: Position, side: Side) -> bool:
    return len(captures_for_move(board, position, side)) > 0


def board_after_move(board: np.ndarray, position: Position, side: Side) -> np.ndarray:
    """
    Copy of `board` with `side` played at `position` and its captures flipped.

    The move is not validated beyond capture resolution: an illegal
    placement returns an unchanged copy.
    """
    result = board.copy()
    captured = captures_for_move(board, position, side)
    if captured:
        result[position[0], position[1]] = side
        for r, c in captured:
            result[r, c] = side
    return result


# ---------------------------------------------------------------------------
# Move generation (vectorized)
# ---------------------------------------------------------------------------

def shift_mask(mask: np.ndarray, dr: int, dc: int) -> np.ndarray:
    """Return out with out[r, c] = mask[r + dr, c + dc]; off-board reads are False."""
    out = np.zeros_like(mask)
    rows, cols = mask.shape
    out[max(0, -dr):rows - max(0, dr), max(0, -dc):cols - max(0, dc)] = \
        mask[max(0, dr):rows - max(0, -dr), max(0, dc):cols - max(0, -dc)]
    return out


def legal_move_mask(board: np.ndarray, side: Side) -> np.ndarray:
    """
    Boolean (8, 8) mask of the cells where `side` may legally play.

    For every direction, slide `side`'s discs across adjacent runs of
    opponent discs; an empty cell reached right after such a run is a
    legal placement (its ray back towards the anchor captures the run).
    """
    if side == Side.NONE:
        return np.zeros(board.shape, dtype=bool)

    own = board == int(side)
    opp = board == int(side.opponent)
    empty = board == int(Side.NONE)
    moves = np.zeros(board.shape, dtype=bool)

    for dr, dc in DIRECTIONS:
        run = shift_mask(own, -dr, -dc) & opp
        while run.any():
            step = shift_mask(run, -dr, -dc)
            moves |= step & empty
            run = step & opp

    return moves


def legal_moves(board: np.ndarray, side: Side) -> List[Position]:
    """All legal placements for `side`, in row-major order."""
    return [Position(int(r), int(c)) for r, c in np.argwhere(legal_move_mask(board, side))]


def has_legal_move(board: np.ndarray, side: Side) -> bool:
    """Same sweep as legal_move_mask, returning at the first legal cell found."""
    if side == Side.NONE:
        return False

    own = board == int(side)
    opp = board == int(side.opponent)
    empty = board == int(Side.NONE)

    for dr, dc in DIRECTIONS:
        run = shift_mask(own, -dr, -dc) & opp
        while run.any():
            step = shift_mask(run, -dr, -dc)
            if (step & empty).any():
                return True
            run = step & opp

    return False


def corner_moves(board: np.ndarray, side: Side) -> int:
    """Number of corners `side` could legally take right now."""
    return sum(1 for p in CORNERS if is_legal_move(board, p, side))


# ---------------------------------------------------------------------------
# Counting
# ---------------------------------------------------------------------------

def count(board: np.ndarray, side: Side) -> int:
    """Number of cells equal to `side` (Side.NONE counts empty cells)."""
    return int(np.count_nonzero(board == int(side)))


def count_empty(board: np.ndarray) -> int:
    return count(board, Side.NONE)


# ---------------------------------------------------------------------------
# Cell classification
# ---------------------------------------------------------------------------

def is_corner(position: Position) -> bool:
    return Position(*position) in _CORNER_SET


def is_edge(position: Position) -> bool:
    r, c = position
    return r == 0 or r == LAST or c == 0 or c == LAST


def is_x_square(position: Position) -> bool:
    return Position(*position) in _X_SET


def is_c_square(position: Position) -> bool:
    return Position(*position) in _C_SET
