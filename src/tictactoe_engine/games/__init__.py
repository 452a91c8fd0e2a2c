"""
Games module - board storage and rules.
"""

from tictactoe_engine.games.board import Board, CELL_STRINGS
from tictactoe_engine.games.game_rules import (
    WIN_LINES,
    game_is_draw,
    game_is_won,
    line_counts,
    opponent_of,
    winning_line,
)

__all__ = [
    "Board",
    "CELL_STRINGS",
    "WIN_LINES",
    "game_is_draw",
    "game_is_won",
    "line_counts",
    "opponent_of",
    "winning_line",
]
