"""
Selection module - computer move strategies.

Provides the main entry point:
- select_cell(): dispatch to the strategy for a difficulty
"""

from __future__ import annotations

import random
from typing import Callable, Dict, Optional

from tictactoe_engine.core.types import Difficulty
from tictactoe_engine.games.board import Board
from tictactoe_engine.selection.strategies import easy_move, medium_move, hard_move

Strategy = Callable[[Board, int, random.Random], Optional[int]]

STRATEGIES: Dict[Difficulty, Strategy] = {
    Difficulty.EASY: easy_move,
    Difficulty.MEDIUM: medium_move,
    Difficulty.HARD: hard_move,
}

DEFAULT_STRATEGY: Strategy = medium_move


def select_cell(
    board: Board,
    player_id: int,
    difficulty: Difficulty,
    rng: random.Random,
) -> Optional[int]:
    """
    Pick a cell for the computer player.

    Args:
        board: Current board (not mutated)
        player_id: The computer's player id
        difficulty: Selects the strategy; unknown values use medium
        rng: Random source for tie-breaks

    Returns:
        An empty cell index, or None if the board is full
    """
    strategy = STRATEGIES.get(difficulty, DEFAULT_STRATEGY)
    return strategy(board, player_id, rng)


__all__ = [
    "STRATEGIES",
    "DEFAULT_STRATEGY",
    "select_cell",
    "easy_move",
    "medium_move",
    "hard_move",
]
