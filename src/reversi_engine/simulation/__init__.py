"""
Simulation module - background search execution and engine matches.

Provides the infrastructure for running searches off the interactive
thread and for playing engine-vs-engine games in parallel.
"""

from reversi_engine.simulation.jobs import SearchJob, SearchOutcome, MatchJob, MatchResult
from reversi_engine.simulation.match import play_match
from reversi_engine.simulation.runner import SearchRunner, DEFAULT_WORKER_COUNT

__all__ = [
    "SearchJob",
    "SearchOutcome",
    "MatchJob",
    "MatchResult",
    "SearchRunner",
    "DEFAULT_WORKER_COUNT",
    "play_match",
]
