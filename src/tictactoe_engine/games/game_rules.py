"""
Rule helpers for the 3x3 board.

Win detection is vectorized over a single pre-computed line table; nothing
here mutates the board.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from tictactoe_engine.core.types import PLAYER_IDS
from tictactoe_engine.games.board import Board

# Pre-computed winning lines (indices into the flat board)
WIN_LINES = np.array([
    [0, 3, 6], [1, 4, 7], [2, 5, 8],  # cols
    [0, 1, 2], [3, 4, 5], [6, 7, 8],  # rows
    [0, 4, 8], [2, 4, 6],             # diagonals
], dtype=np.int8)
WIN_LINES.setflags(write=False)


def opponent_of(player_id: int) -> int:
    """The other player in the two-player roster."""
    if player_id not in PLAYER_IDS:
        raise ValueError(f"Unknown player id: {player_id}")
    return 3 - player_id  # Toggle 1↔2


def line_counts(board: Board, player_id: int) -> np.ndarray:
    """
    Count the player's cells on every winning line.

    Returns:
        Array of shape (8,), aligned with WIN_LINES.
    """
    return np.count_nonzero(board.marks[WIN_LINES] == player_id, axis=1)


def line_empties(board: Board) -> np.ndarray:
    """Boolean mask of shape (8, 3): which line cells are still empty."""
    return board.marks[WIN_LINES] == 0


def game_is_won(board: Board, player_id: int) -> bool:
    """True iff some winning line is fully owned by the player."""
    return bool(np.any(line_counts(board, player_id) == 3))


def game_is_draw(board: Board) -> bool:
    """
    True iff no cell is empty.

    Callers check game_is_won first; a full board with a completed line is
    a win, not a draw.
    """
    return board.is_full()


def winning_line(board: Board, player_id: int) -> Optional[Tuple[int, int, int]]:
    """The first line fully owned by the player, or None."""
    for line, count in zip(WIN_LINES, line_counts(board, player_id)):
        if count == 3:
            return tuple(int(i) for i in line)
    return None
