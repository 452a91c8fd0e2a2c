"""
Core module - fundamental types and errors.

This module provides the building blocks used throughout the engine.
"""

from tictactoe_engine.core.types import (
    BOARD_SIZE,
    CENTER_CELL,
    PLAYER_IDS,
    Cell,
    CellState,
    Difficulty,
    EngineSettings,
    GameMode,
    Player,
    PlayerRole,
    TurnOutcome,
)
from tictactoe_engine.core.errors import (
    EngineError,
    NoCurrentPlayerError,
    NotComputerTurnError,
)

__all__ = [
    # Constants
    "BOARD_SIZE",
    "CENTER_CELL",
    "PLAYER_IDS",
    # Types
    "Cell",
    "CellState",
    "Difficulty",
    "EngineSettings",
    "GameMode",
    "Player",
    "PlayerRole",
    "TurnOutcome",
    # Errors
    "EngineError",
    "NoCurrentPlayerError",
    "NotComputerTurnError",
]
