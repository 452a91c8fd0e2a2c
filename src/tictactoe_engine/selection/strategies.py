"""
Computer move strategies.

Each strategy takes the board, the computer's player id and a random
source, and returns an empty cell index (or None on a full board). None of
them mutate the board.

    easy   - first empty cell
    medium - block the opponent, random among tied lines
    hard   - complete own line, else centre, else medium
"""

from __future__ import annotations

import random
from typing import List, Optional

import numpy as np

from tictactoe_engine.core.types import CENTER_CELL
from tictactoe_engine.games.board import Board
from tictactoe_engine.games.game_rules import (
    WIN_LINES,
    line_counts,
    line_empties,
    opponent_of,
)


def easy_move(board: Board, player_id: int, rng: random.Random) -> Optional[int]:
    """Lowest-index empty cell. Deterministic."""
    empty = board.empty_cells()
    return empty[0] if empty else None


def _open_lines(board: Board, counts: np.ndarray, minimum: int, exact: bool = False) -> List[int]:
    """Indices of lines meeting the count threshold that still have an empty cell."""
    hits = counts == minimum if exact else counts >= minimum
    return [int(i) for i in np.flatnonzero(hits & line_empties(board).any(axis=1))]


def medium_move(board: Board, player_id: int, rng: random.Random) -> Optional[int]:
    """
    One-ply blocking against the opponent.

    1. A line with 2 opponent cells: random among them, first empty cell
       in line order.
    2. A line with any opponent cell: random among them, random empty cell
       on that line.
    3. Otherwise the easy move.
    """
    counts = line_counts(board, opponent_of(player_id))

    threats = _open_lines(board, counts, 2)
    if threats:
        line = WIN_LINES[rng.choice(threats)]
        for cell in line:
            if board.is_empty(cell):
                return int(cell)

    contested = _open_lines(board, counts, 1)
    if contested:
        line = WIN_LINES[rng.choice(contested)]
        free = [int(cell) for cell in line if board.is_empty(cell)]
        return rng.choice(free)

    return easy_move(board, player_id, rng)


def hard_move(board: Board, player_id: int, rng: random.Random) -> Optional[int]:
    """
    One-ply win seeking.

    1. The first line (in table order) holding 2 own cells and an empty
       third: take the empty cell.
    2. The centre, if empty.
    3. Otherwise the medium move, which blocks when it can.
    """
    counts = line_counts(board, player_id)

    for index in _open_lines(board, counts, 2, exact=True):
        for cell in WIN_LINES[index]:
            if board.is_empty(cell):
                return int(cell)

    if board.is_empty(CENTER_CELL):
        return CENTER_CELL

    return medium_move(board, player_id, rng)
