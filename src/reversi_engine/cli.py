"""
Command-line interface for Reversi play and engine matches.
"""

import argparse
import logging
from collections import Counter
from typing import List, Optional

from reversi_engine.api import play_interactive
from reversi_engine.core.types import Difficulty, Side
from reversi_engine.simulation import SearchRunner
from reversi_engine.utils.config import CONTROLLERS, HUMAN, Config


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play Reversi against the engine, or pit engine tiers against each other"
    )
    parser.add_argument(
        "--first", "-f",
        choices=CONTROLLERS,
        default=HUMAN,
        help="Controller for the first player, X (default: human)",
    )
    parser.add_argument(
        "--second", "-s",
        choices=CONTROLLERS,
        default=Difficulty.MEDIUM.value,
        help="Controller for the second player, O (default: medium)",
    )
    parser.add_argument(
        "--games", "-n",
        type=int,
        default=1,
        help="Engine-vs-engine games to play in parallel (default: 1)",
    )
    parser.add_argument(
        "--workers", "-w",
        type=int,
        default=None,
        help="Number of worker processes (default: CPU count - 1)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    return parser.parse_args(argv)


def run_matches(config: Config) -> Counter:
    """Play config.games engine-vs-engine games and print a tally."""
    runner = SearchRunner(config.num_workers, log_level=logging.getLogger("reversi_engine").level)
    with runner:
        results = runner.play_matches(config.first, config.second, config.games)

    tally = Counter(result.winner for result in results)
    print(f"{config.first} (X) vs {config.second} (O), {len(results)} games")
    print(f"  X wins: {tally[Side.FIRST]}")
    print(f"  O wins: {tally[Side.SECOND]}")
    print(f"  draws:  {tally[Side.NONE]}")
    return tally


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Build configuration
    config_kwargs = {
        "first": args.first,
        "second": args.second,
        "games": args.games,
        "log_level": args.log_level,
    }
    if args.workers:
        config_kwargs["num_workers"] = args.workers

    config = Config(**config_kwargs)

    # Run
    if config.self_play and config.games > 1:
        run_matches(config)
    else:
        play_interactive(config)


if __name__ == "__main__":
    main()
