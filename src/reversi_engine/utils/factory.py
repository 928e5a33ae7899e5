"""
Factory functions for creating games, controllers and moves from text.
"""

from typing import Dict, Optional

from reversi_engine.core.types import BOARD_SIZE, Difficulty, Position, Side
from reversi_engine.games.game_state import GameState
from reversi_engine.games.reversi import Reversi
from reversi_engine.utils.config import HUMAN, Config


def create_game(initial_state: Optional[GameState] = None) -> Reversi:
    """
    Create a game instance.

    Args:
        initial_state: Position to start from (copied). Defaults to the
            standard opening.

    Returns:
        Configured game instance
    """
    game = Reversi()
    if initial_state is not None:
        game.set_state(initial_state.copy())
    return game


def parse_controller(name: str) -> Optional[Difficulty]:
    """
    Parse a controller name.

    Returns None for a human, otherwise the engine difficulty.
    """
    if name.strip().lower() == HUMAN:
        return None
    try:
        return Difficulty.parse(name)
    except ValueError as e:
        raise ValueError(
            f"Unknown controller: {name!r}. Expected '{HUMAN}' or a difficulty."
        ) from e


def create_controllers(config: Config) -> Dict[Side, Optional[Difficulty]]:
    """Map each side to its engine difficulty (None = human)."""
    return {
        Side.FIRST: parse_controller(config.first),
        Side.SECOND: parse_controller(config.second),
    }


def parse_position(text: str) -> Position:
    """
    Parse a "row,col" string into a Position.

    Only the format and range are checked here; legality is up to the game.
    """
    try:
        row, col = (int(part.strip()) for part in text.split(","))
    except ValueError as e:
        raise ValueError(
            f"Invalid move format: {text!r}. Expected 'row,col' (e.g., 2,3)."
        ) from e

    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise ValueError(
            f"Move {row},{col} is off the board. Rows and columns run 0-{BOARD_SIZE - 1}."
        )
    return Position(row, col)
