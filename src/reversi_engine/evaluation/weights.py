"""
Evaluation weight profiles.

Two profiles exist: MEDIUM (basic terms only) and HARD (larger magnitudes
plus edge stability, opponent edge moves and the delayed-corner threat).
Every feature is "perspective minus opponent", so a positive weight rewards
the perspective side and a negative weight penalizes it.
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np


# ╔═════════════════════════════════════════════════════════════════════════════╗
# ║                         TERMINAL SCORING                                    ║
# ║                                                                             ║
# ║  A finished game scores ±(TERMINAL_SCORE + disc difference), 0 for a draw.  ║
# ║  No heuristic score reaches this range.                                     ║
# ╚═════════════════════════════════════════════════════════════════════════════╝

TERMINAL_SCORE = 50_000

# Reported by the delayed-corner term when the opponent can already take a corner
IMMEDIATE_CORNER_THREAT = 3


class EvalWeights(NamedTuple):
    """Linear weights of the evaluation terms."""

    mobility: int
    corners: int
    material: int
    positional: int
    frontier: int
    stability: int = 0
    opp_corner_moves: int = 0
    opp_edge_moves: int = 0
    delayed_corner_threat: int = 0


MEDIUM_WEIGHTS = EvalWeights(
    mobility=8,
    corners=500,
    material=2,
    positional=3,
    frontier=-3,
    opp_corner_moves=-250,
)

HARD_WEIGHTS = EvalWeights(
    mobility=10,
    corners=900,
    material=2,
    positional=6,
    frontier=-6,
    stability=30,
    opp_corner_moves=-600,
    opp_edge_moves=-60,
    delayed_corner_threat=-120,
)


def weights_for(advanced: bool) -> EvalWeights:
    return HARD_WEIGHTS if advanced else MEDIUM_WEIGHTS


# Classic Othello square weights: corners great, X/C squares dangerous
POSITIONAL_WEIGHTS = np.array([
    [120, -20,  20,   5,   5,  20, -20, 120],
    [-20, -40,  -5,  -5,  -5,  -5, -40, -20],
    [ 20,  -5,  15,   3,   3,  15,  -5,  20],
    [  5,  -5,   3,   3,   3,   3,  -5,   5],
    [  5,  -5,   3,   3,   3,   3,  -5,   5],
    [ 20,  -5,  15,   3,   3,  15,  -5,  20],
    [-20, -40,  -5,  -5,  -5,  -5, -40, -20],
    [120, -20,  20,   5,   5,  20, -20, 120],
], dtype=np.int32)
POSITIONAL_WEIGHTS.setflags(write=False)
