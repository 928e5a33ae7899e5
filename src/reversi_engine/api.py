"""
Public API for Reversi play and move search.

Usage:
    from reversi_engine import new_game, apply_move, choose_move, Difficulty

    state = new_game()
    state, changed = apply_move(state, (2, 3))
    reply = choose_move(state, state.side_to_move, Difficulty.HARD)

Every function here treats its GameState argument as a value: results are
returned as fresh states and the argument is never modified.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from reversi_engine.core.types import Difficulty, Outcome, Position, Side
from reversi_engine.games import game_rules as rules
from reversi_engine.games import reversi
from reversi_engine.games.game_state import GameState
from reversi_engine.games.reversi import Reversi
from reversi_engine.search import choose_move
from reversi_engine.simulation import SearchRunner, DEFAULT_WORKER_COUNT
from reversi_engine.utils.config import Config, DEFAULT_CONFIG
from reversi_engine.utils.factory import create_controllers, create_game, parse_position

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Value-oriented game API
# ---------------------------------------------------------------------------

def new_game() -> GameState:
    """The canonical opening position, FIRST to move."""
    return reversi.new_state()


def legal_moves(state: GameState) -> List[Position]:
    """Legal moves for the side to move (empty once the game is over)."""
    if state.game_over:
        return []
    return rules.legal_moves(state.board, state.side_to_move)


def apply_move(state: GameState, position: Position) -> Tuple[GameState, List[Position]]:
    """
    Play `position` for the side to move.

    Returns:
        (new_state, changed_cells) where changed_cells is the placed cell
        followed by every captured cell.

    Raises:
        IllegalMoveError / GameOverError: the move was rejected; `state`
            is unchanged either way.
    """
    new_state = state.copy()
    changed = reversi.play(new_state, position)
    return new_state, changed


def ensure_turn_is_playable_or_game_over(state: GameState) -> GameState:
    """Pass an unplayable turn, or end the game when neither side can move."""
    new_state = state.copy()
    reversi.ensure_playable(new_state)
    return new_state


def count(state: GameState, side: Side) -> int:
    return rules.count(state.board, side)


def outcome(state: GameState, side: Side) -> Outcome:
    """Result of the game for `side` (NEUTRAL while it is still running)."""
    return reversi.outcome_for(state.board, side, state.game_over)


def winner(state: GameState) -> Optional[Side]:
    """
    The side with more discs once the game is over.

    Returns None while the game is running and Side.NONE for a draw.
    """
    if not state.game_over:
        return None
    first = count(state, Side.FIRST)
    second = count(state, Side.SECOND)
    if first == second:
        return Side.NONE
    return Side.FIRST if first > second else Side.SECOND


# ---------------------------------------------------------------------------
# Interactive play
# ---------------------------------------------------------------------------

def _ai_turn(game: Reversi, runner: SearchRunner, difficulty: Difficulty) -> Optional[Position]:
    """Engine selects and applies a move. Returns None if it has no move."""
    result = runner.search(game.get_state(), game.current_player(), difficulty)
    if result.move is None:
        return None

    game.apply_move(result.move)
    return result.move


def _human_turn(game: Reversi) -> Optional[Position]:
    """Prompt human for move, apply it, return move."""
    valid = game.valid_moves()
    if not valid:
        return None

    print(f"\nYour turn ({game.current_player().name})")
    print(f"Format: row,col (e.g., {valid[0]})")

    while True:
        raw = input("Move: ").strip()
        try:
            move = parse_position(raw)
            game.apply_move(move)
            return move
        except reversi.IllegalMoveError as e:
            print(f"Illegal move: {e}")
        except ValueError as e:
            print(f"Invalid input: {e}")


def _result_line(game: Reversi) -> str:
    first = game.count(Side.FIRST)
    second = game.count(Side.SECOND)
    side = winner(game.get_state())
    if side is Side.NONE:
        verdict = "Draw"
    else:
        verdict = f"{side.name} wins"
    return f"{verdict} ({first} : {second})"


def play_interactive(
    config: Config = DEFAULT_CONFIG,
    game: Optional[Reversi] = None,
) -> Reversi:
    """
    Run a text game loop on stdin/stdout.

    Each side is controlled by a human or an engine tier, as set in
    `config`. Engine searches run through a SearchRunner so the loop only
    ever receives a finished SearchOutcome.

    Returns:
        The game object in its final (or interrupted) position.
    """
    game = game if game is not None else create_game()
    controllers = create_controllers(config)
    runner = SearchRunner(config.num_workers, log_level=logging.getLogger("reversi_engine").level)

    print(
        f"Starting {game.game_id()}: {Side.FIRST.name} = {config.first}, "
        f"{Side.SECOND.name} = {config.second}"
    )
    print(game.state_string())

    try:
        with runner:
            while not game.is_over():
                side = game.current_player()
                difficulty = controllers[side]
                if difficulty is None:
                    move = _human_turn(game)
                else:
                    move = _ai_turn(game, runner, difficulty)

                if move is None:
                    print(f"\n{side.name} has no legal move and passes.")
                    game.pass_turn()
                    continue

                who = "You" if difficulty is None else f"AI ({difficulty.value})"
                print(f"\n{who} played {side.name}: {move}")
                print(game.state_string())

            print("\n" + "=" * 40)
            print("GAME OVER")
            print("=" * 40)
            print(_result_line(game))

    except (KeyboardInterrupt, EOFError):
        print("\nInterrupted - shutting down...")
        runner.shutdown(force=True)
    except Exception:
        logger.exception("Fatal error in game loop")
        raise

    return game


__all__ = [
    "new_game",
    "legal_moves",
    "apply_move",
    "ensure_turn_is_playable_or_game_over",
    "count",
    "choose_move",
    "outcome",
    "winner",
    "play_interactive",
    "SearchRunner",
    "DEFAULT_WORKER_COUNT",
]
