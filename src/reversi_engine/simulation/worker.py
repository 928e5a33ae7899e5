"""
Worker process logic for background search.

Workers receive SearchJob / MatchJob objects and return exactly one
SearchOutcome / MatchResult per job. Nothing is shared between jobs.
"""

from __future__ import annotations

import logging
from typing import Optional

from reversi_engine.games import game_rules as rules
from reversi_engine.search import search_move
from reversi_engine.simulation.jobs import MatchJob, MatchResult, SearchJob, SearchOutcome
from reversi_engine.simulation.match import play_match


def worker_init(log_level: Optional[int] = None) -> None:
    """Per-process setup: mirror the parent's log level."""
    if log_level is not None:
        logging.getLogger("reversi_engine").setLevel(log_level)


def run_search(job: SearchJob) -> SearchOutcome:
    """Execute a single move search on the job's own state copy."""
    state = job.state
    if state.game_over or not rules.has_legal_move(state.board, job.side):
        return SearchOutcome(None, job.side, job.difficulty)

    result = search_move(state, job.side, job.difficulty)
    return SearchOutcome(
        move=result.best_move,
        side=job.side,
        difficulty=job.difficulty,
        value=result.score,
        nodes=result.stats.nodes,
    )


def run_match(job: MatchJob) -> MatchResult:
    """Play a single engine-vs-engine game."""
    return play_match(job.first, job.second, max_plies=job.max_plies)
