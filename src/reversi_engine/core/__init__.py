"""
Core module - fundamental types and board geometry constants.

This module provides the building blocks used throughout the engine.
"""

from reversi_engine.core.types import (
    Side,
    Position,
    Difficulty,
    Outcome,
    BOARD_SIZE,
    DIRECTIONS,
    CORNERS,
    X_SQUARES,
    C_SQUARES,
)

__all__ = [
    # Types
    "Side",
    "Position",
    "Difficulty",
    "Outcome",
    # Constants
    "BOARD_SIZE",
    "DIRECTIONS",
    "CORNERS",
    "X_SQUARES",
    "C_SQUARES",
]
