"""
Evaluation module - heuristic scoring of positions for the search.
"""

from reversi_engine.evaluation.evaluator import evaluate, terminal_score, feature_values
from reversi_engine.evaluation.weights import (
    EvalWeights,
    MEDIUM_WEIGHTS,
    HARD_WEIGHTS,
    POSITIONAL_WEIGHTS,
    TERMINAL_SCORE,
)

__all__ = [
    "evaluate",
    "terminal_score",
    "feature_values",
    "EvalWeights",
    "MEDIUM_WEIGHTS",
    "HARD_WEIGHTS",
    "POSITIONAL_WEIGHTS",
    "TERMINAL_SCORE",
]
