"""
GameBase - abstract base class for turn-based board games.
"""

from abc import ABC, abstractmethod
from typing import List

from reversi_engine.core.types import Outcome, Position, Side
from reversi_engine.games.game_state import GameState


class GameBase(ABC):
    """
    Abstract base class for turn-based board games.

    IMPORTANT ARCHITECTURE NOTE:
    -----------------------------
    - A game object owns exactly one GameState and mutates it in place.
    - Search never works on a shared game object: it takes deep_clone()
      snapshots (or GameState.copy()) for every simulated ply.
    """

    @abstractmethod
    def game_id(self) -> str:
        """Return a stable identifier (e.g. 'reversi')."""
        pass

    @abstractmethod
    def num_players(self) -> int:
        """Return number of players in the game."""
        pass

    @abstractmethod
    def clone(self) -> "GameBase":
        """Shallow copy (shares the state object)."""
        pass

    @abstractmethod
    def deep_clone(self) -> "GameBase":
        """
        Deep copy of game + state.
        Used for simulation: the copy never aliases the original board.
        """
        pass

    @abstractmethod
    def get_state(self) -> GameState:
        """Return the current game state."""
        pass

    @abstractmethod
    def set_state(self, game_state: GameState) -> None:
        """Replace the current game state."""
        pass

    @abstractmethod
    def current_player(self) -> Side:
        """Return the side to act."""
        pass

    @abstractmethod
    def valid_moves(self) -> List[Position]:
        """Return all legal moves for the side to act."""
        pass

    @abstractmethod
    def apply_move(self, move: Position) -> List[Position]:
        """
        Apply a move to the game. Mutates internal state.

        Returns:
            The cells whose contents changed.
        """
        pass

    @abstractmethod
    def is_over(self) -> bool:
        """Return True if the game has ended."""
        pass

    @abstractmethod
    def get_result(self, side: Side) -> Outcome:
        """
        Return the outcome for the given side:
            WIN / TIE / NEUTRAL / LOSS
        """
        pass

    @abstractmethod
    def get_cell_strings(self) -> dict[int, str]:
        """
        Return a dictionary of [int -> str] where each cell value maps to its display string
            (e.g. {0: ".", 1: "X", 2: "O"})
        """
        pass

    @abstractmethod
    def state_string(self) -> str:
        """Pretty string representation of the state."""
        pass
