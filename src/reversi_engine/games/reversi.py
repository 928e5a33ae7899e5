"""
Reversi (Othello rules) on the standard 8x8 board.

Board encoding (int8):
    0 = empty
    1 = first player's disc
    2 = second player's disc

Turn policy after every successful move:
    1. the mover's opponent moves next if it has a legal move;
    2. otherwise the mover moves again (forced pass);
    3. otherwise neither side can move and the game is over.
"""

from __future__ import annotations

from typing import List, Optional

from reversi_engine.core.types import BOARD_SIZE, Outcome, Position, Side
from reversi_engine.games import game_rules as rules
from reversi_engine.games.game_base import GameBase
from reversi_engine.games.game_state import GameState

CELL_STRINGS = {0: ".", 1: "X", 2: "O"}


class IllegalMoveError(ValueError):
    """A move was rejected; the state it was applied to is unchanged."""

    def __init__(self, message: str, position: Optional[Position] = None,
                 side: Side = Side.NONE):
        super().__init__(message)
        self.position = position
        self.side = side


class GameOverError(IllegalMoveError):
    """A move was applied to a finished game."""


# ---------------------------------------------------------------------------
# State machine (operates on a GameState in place)
# ---------------------------------------------------------------------------

def new_state() -> GameState:
    return GameState(rules.initial_board(), side_to_move=Side.FIRST)


def play(state: GameState, position: Position) -> List[Position]:
    """
    Place a disc for the side to move and resolve captures.

    Validation happens before any write, so a rejected move leaves `state`
    untouched.

    Returns:
        The placed cell followed by every captured cell.

    Raises:
        GameOverError: if the game is already over.
        IllegalMoveError: if the placement is off-board, occupied, or
            captures nothing.
    """
    if state.game_over:
        raise GameOverError("Cannot apply move: the game is already over.",
                            position, state.side_to_move)

    side = state.side_to_move
    try:
        position = Position(int(position[0]), int(position[1]))
    except (TypeError, ValueError, IndexError) as e:
        raise IllegalMoveError(f"Malformed move {position!r}", None, side) from e

    captured = rules.captures_for_move(state.board, position, side)
    if not captured:
        raise IllegalMoveError(
            f"Illegal move {position} for {side.name}", position, side
        )

    board = state.board
    board[position.row, position.col] = side
    for cell in captured:
        board[cell.row, cell.col] = side

    state.last_move = position
    advance_turn(state)
    return [position] + captured


def advance_turn(state: GameState) -> None:
    """Hand the turn over after a move (or end the game)."""
    mover = state.side_to_move
    if rules.has_legal_move(state.board, mover.opponent):
        state.side_to_move = mover.opponent
    elif not rules.has_legal_move(state.board, mover):
        state.game_over = True


def ensure_playable(state: GameState) -> None:
    """
    Re-establish "side to move can move, or the game is over" without a move.

    Idempotent: a no-op when the invariant already holds.
    """
    if state.game_over:
        return
    side = state.side_to_move
    if rules.has_legal_move(state.board, side):
        return
    if rules.has_legal_move(state.board, side.opponent):
        state.side_to_move = side.opponent
    else:
        state.game_over = True


def outcome_for(board, side: Side, game_over: bool) -> Outcome:
    """Caller-level result: more discs wins, equal counts is a tie."""
    if not game_over:
        return Outcome.NEUTRAL
    mine = rules.count(board, side)
    theirs = rules.count(board, side.opponent)
    if mine > theirs:
        return Outcome.WIN
    if mine < theirs:
        return Outcome.LOSS
    return Outcome.TIE


# ---------------------------------------------------------------------------
# Game object
# ---------------------------------------------------------------------------

class Reversi(GameBase):
    """Reversi game object wrapping a single mutable GameState."""

    __slots__ = ('state',)

    SIZE = BOARD_SIZE

    def __init__(self, state: Optional[GameState] = None):
        self.state = state if state is not None else new_state()

    def game_id(self) -> str:
        return "reversi"

    def get_cell_strings(self) -> dict[int, str]:
        return CELL_STRINGS

    def num_players(self) -> int:
        return 2

    def reset(self) -> None:
        self.state = new_state()

    def clone(self) -> "Reversi":
        g = Reversi.__new__(Reversi)
        g.state = self.state
        return g

    def deep_clone(self) -> "Reversi":
        g = Reversi.__new__(Reversi)
        g.state = self.state.copy()
        return g

    def get_state(self) -> GameState:
        return self.state

    def set_state(self, game_state: GameState) -> None:
        self.state = game_state

    def current_player(self) -> Side:
        return self.state.side_to_move

    def valid_moves(self) -> List[Position]:
        if self.state.game_over:
            return []
        return rules.legal_moves(self.state.board, self.state.side_to_move)

    def apply_move(self, move: Position) -> List[Position]:
        changed = play(self.state, move)
        assert self.state.game_over or self.valid_moves(), \
            "side to move has no legal move in a live game"
        return changed

    def pass_turn(self) -> None:
        """Skip an unplayable turn, or end the game if nobody can move."""
        ensure_playable(self.state)

    def count(self, side: Side) -> int:
        return rules.count(self.state.board, side)

    def is_over(self) -> bool:
        return self.state.game_over

    def get_result(self, side: Side) -> Outcome:
        return outcome_for(self.state.board, side, self.state.game_over)

    def state_string(self) -> str:
        """Pretty-print the board with coordinates and the score line."""
        board = self.state.board
        symbols = self.get_cell_strings()
        legal = set(self.valid_moves())
        header = "    " + "   ".join(str(c) for c in range(self.SIZE))
        lines = [header, "  ╭" + "───┬" * (self.SIZE - 1) + "───╮"]

        for r in range(self.SIZE):
            cells = []
            for c in range(self.SIZE):
                value = int(board[r, c])
                if value == 0 and (r, c) in legal:
                    cells.append("*")
                else:
                    cells.append(symbols[value])
            lines.append(f"{r} │ " + " │ ".join(cells) + " │")
            if r < self.SIZE - 1:
                lines.append("  ├" + "───┼" * (self.SIZE - 1) + "───┤")

        lines.append("  ╰" + "───┴" * (self.SIZE - 1) + "───╯")
        first = self.count(Side.FIRST)
        second = self.count(Side.SECOND)
        status = "Game over" if self.state.game_over else f"To move: {self.state.side_to_move.name}"
        lines.append(f"\n{symbols[Side.FIRST]} {first} : {second} {symbols[Side.SECOND]}   {status}")

        return "\n".join(lines)
