"""
Background search runner.

Searches run in worker processes; the caller hands over a snapshot of the
position and receives exactly one SearchOutcome back, either through a
callback or by waiting on the returned AsyncResult. No state is shared
with a running search and there is no cancellation: a submitted search
always runs to completion.
"""

from __future__ import annotations

import atexit
import logging
import multiprocessing as mp
import signal
from multiprocessing.pool import AsyncResult, Pool
from typing import Callable, List, Optional, Sequence

from reversi_engine.core.types import Difficulty, Side
from reversi_engine.games.game_state import GameState
from reversi_engine.simulation.jobs import MatchJob, MatchResult, SearchJob, SearchOutcome
from reversi_engine.simulation.worker import run_match, run_search, worker_init
from reversi_engine.utils.config import DEFAULT_WORKER_COUNT

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Process cleanup
# ---------------------------------------------------------------------------

_active_runners: List["SearchRunner"] = []


def _shutdown_all():
    for runner in _active_runners[:]:
        runner.shutdown(force=True)


def _worker_init_wrapper(log_level: Optional[int]):
    """Workers ignore SIGINT; the main process handles Ctrl+C."""
    signal.signal(signal.SIGINT, signal.SIG_IGN)
    worker_init(log_level)


if mp.current_process().name == 'MainProcess':
    atexit.register(_shutdown_all)


# ---------------------------------------------------------------------------
# Runner
# ---------------------------------------------------------------------------

class SearchRunner:
    """
    Runs move searches and engine matches on a pool of worker processes.

    The pool is created lazily on first use (or on entering the context
    manager) and torn down by shutdown().
    """

    def __init__(self, num_workers: int = DEFAULT_WORKER_COUNT, log_level: Optional[int] = None):
        self.num_workers = num_workers
        self.log_level = log_level
        self._pool: Optional[Pool] = None
        self._closed = False

        _active_runners.append(self)

    def __enter__(self):
        self._ensure_pool()
        return self

    def __exit__(self, exc_type, *_):
        self.shutdown(force=exc_type is not None)

    def _ensure_pool(self) -> Pool:
        if self._closed:
            raise RuntimeError("SearchRunner has been shut down")
        if self._pool is None:
            logger.info("Starting search pool with %d workers", self.num_workers)
            self._pool = Pool(
                processes=self.num_workers,
                initializer=_worker_init_wrapper,
                initargs=(self.log_level,),
            )
        return self._pool

    def shutdown(self, force: bool = False) -> None:
        self._closed = True
        if self in _active_runners:
            _active_runners.remove(self)

        if self._pool is None:
            return

        pool, self._pool = self._pool, None
        pool.terminate() if force else pool.close()
        pool.join()
        logger.info("Search pool stopped")

    # ------------------------------------------------------------------
    # Single searches
    # ------------------------------------------------------------------

    def submit(
        self,
        state: GameState,
        side: Side,
        difficulty: Difficulty,
        callback: Optional[Callable[[SearchOutcome], None]] = None,
    ) -> AsyncResult:
        """
        Start a search in the background.

        The position is copied before submission, so the caller may keep
        mutating its own state. `callback` (if given) is invoked exactly
        once, on the runner's result thread, with the SearchOutcome.
        """
        pool = self._ensure_pool()
        job = SearchJob.snapshot(state, side, difficulty)
        return pool.apply_async(
            run_search, (job,),
            callback=callback,
            error_callback=self._log_failure,
        )

    def search(self, state: GameState, side: Side, difficulty: Difficulty,
               timeout: Optional[float] = None) -> SearchOutcome:
        """Blocking variant of submit()."""
        return self.submit(state, side, difficulty).get(timeout)

    # ------------------------------------------------------------------
    # Batches
    # ------------------------------------------------------------------

    def run_batch(self, jobs: Sequence[SearchJob]) -> List[SearchOutcome]:
        """Run independent searches in parallel; results keep job order."""
        if not jobs:
            return []
        try:
            return self._ensure_pool().map(run_search, list(jobs))
        except KeyboardInterrupt:
            logger.info("Interrupted, abandoning search batch")
            raise

    def play_matches(
        self,
        first: Difficulty,
        second: Difficulty,
        games: int,
        max_plies: Optional[int] = None,
    ) -> List[MatchResult]:
        """Play `games` engine-vs-engine games in parallel."""
        if games <= 0:
            return []
        job = MatchJob(Difficulty.parse(first), Difficulty.parse(second), max_plies)
        try:
            return self._ensure_pool().map(run_match, [job] * games)
        except KeyboardInterrupt:
            logger.info("Interrupted, abandoning matches")
            raise

    @staticmethod
    def _log_failure(error: BaseException) -> None:
        logger.error("Background search failed: %r", error)
