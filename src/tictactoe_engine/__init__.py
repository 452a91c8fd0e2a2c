"""
Tic-tac-toe engine - turn-based 3x3 play with a computer opponent.

This package owns the board, turn order, win/draw detection, and
computer move selection. Rendering and navigation belong to the caller.

Quick Start:
    from tictactoe_engine import GameEngine, EngineSettings, GameMode, Difficulty

    engine = GameEngine(EngineSettings(mode=GameMode.SINGLE_PLAYER,
                                       difficulty=Difficulty.HARD))
    outcome = engine.apply_move(4)
    if not outcome.game_over:
        outcome = engine.apply_computer_move()

Modules:
    core      - Types (Cell, Player, TurnOutcome, settings enums) and errors
    games     - Board storage and win/draw rules
    selection - Easy / Medium / Hard computer strategies
    engine    - GameEngine, the per-game state machine
    utils     - Config and factory helpers
"""

from tictactoe_engine.api import play_game
from tictactoe_engine.core import (
    Cell,
    CellState,
    Difficulty,
    EngineError,
    EngineSettings,
    GameMode,
    NoCurrentPlayerError,
    NotComputerTurnError,
    Player,
    PlayerRole,
    TurnOutcome,
)
from tictactoe_engine.engine import GameEngine
from tictactoe_engine.utils.config import Config
from tictactoe_engine.utils.factory import create_engine

__version__ = "1.0.0"

__all__ = [
    # Main API
    "GameEngine",
    "play_game",
    "create_engine",
    "Config",
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
