"""
Engine-vs-engine matches.

Drives a full game through the same loop an interactive front-end uses:
ask the side to move for a move, pass when it has none, apply otherwise.
"""

from __future__ import annotations

import logging
from typing import Optional

from reversi_engine.core.types import Difficulty, Side
from reversi_engine.games.reversi import Reversi
from reversi_engine.search import choose_move
from reversi_engine.simulation.jobs import MatchResult

logger = logging.getLogger(__name__)


def play_match(
    first: Difficulty,
    second: Difficulty,
    max_plies: Optional[int] = None,
    game: Optional[Reversi] = None,
) -> MatchResult:
    """
    Play `first` (Side.FIRST) against `second` (Side.SECOND).

    Args:
        first: Difficulty controlling Side.FIRST.
        second: Difficulty controlling Side.SECOND.
        max_plies: Stop after this many moves (None = play to the end).
        game: Starting position (default: a new game). Not modified.
    """
    first = Difficulty.parse(first)
    second = Difficulty.parse(second)
    game = game.deep_clone() if game is not None else Reversi()
    tiers = {Side.FIRST: first, Side.SECOND: second}
    result = MatchResult(first, second, 0, 0, Side.NONE, 0, False)

    while not game.is_over():
        if max_plies is not None and result.plies >= max_plies:
            break

        side = game.current_player()
        move = choose_move(game.get_state(), side, tiers[side])
        if move is None:
            logger.debug("%s has no legal move, passing", side.name)
            game.pass_turn()
            continue

        game.apply_move(move)
        result.moves.append((side, move))
        result.plies += 1
        logger.debug("ply %d: %s (%s) played %s", result.plies, side.name,
                     tiers[side].value, move)

    result.first_count = game.count(Side.FIRST)
    result.second_count = game.count(Side.SECOND)
    result.finished = game.is_over()
    if result.finished and result.first_count != result.second_count:
        result.winner = Side.FIRST if result.first_count > result.second_count else Side.SECOND

    logger.info(
        "%s vs %s: %d-%d after %d plies%s",
        first.value, second.value, result.first_count, result.second_count,
        result.plies, "" if result.finished else " (unfinished)",
    )
    return result
