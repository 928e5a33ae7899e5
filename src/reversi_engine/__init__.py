"""
Reversi Engine - Othello rules, position evaluation and game-tree search.

This package provides the game core and a tiered computer opponent for an
8x8 Reversi game: legal-move generation, capture resolution, the turn/pass
state machine, a feature-based evaluator and negamax/alpha-beta search.

Quick Start:
    from reversi_engine import new_game, apply_move, choose_move, Difficulty

    state = new_game()
    state, changed = apply_move(state, (2, 3))
    move = choose_move(state, state.side_to_move, Difficulty.MEDIUM)

Modules:
    core       - Fundamental types (Side, Position, Difficulty) and constants
    games      - Board rules and the Reversi state machine
    evaluation - Heuristic position scoring
    search     - Greedy and negamax/alpha-beta move selection
    simulation - Background search execution and engine-vs-engine matches
"""

from reversi_engine.api import (
    new_game,
    legal_moves,
    apply_move,
    ensure_turn_is_playable_or_game_over,
    count,
    choose_move,
    outcome,
    winner,
    play_interactive,
    SearchRunner,
    DEFAULT_WORKER_COUNT,
)

from reversi_engine.core import Side, Position, Difficulty, Outcome
from reversi_engine.games import GameState, Reversi, IllegalMoveError, GameOverError
from reversi_engine.evaluation import evaluate

__version__ = "1.0.0"

__all__ = [
    # Main API
    "new_game",
    "legal_moves",
    "apply_move",
    "ensure_turn_is_playable_or_game_over",
    "count",
    "choose_move",
    "outcome",
    "winner",
    "evaluate",
    "play_interactive",
    "SearchRunner",
    "DEFAULT_WORKER_COUNT",
    # Types
    "Side",
    "Position",
    "Difficulty",
    "Outcome",
    "GameState",
    "Reversi",
    "IllegalMoveError",
    "GameOverError",
]
