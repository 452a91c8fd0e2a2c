"""
Board - 9-cell tic-tac-toe board.

Uses a flat int8 array indexed in row-major order:

    0 1 2
    3 4 5
    6 7 8

Each value is a CellState; an owned cell's value is also its owner's id.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from tictactoe_engine.core.types import BOARD_SIZE, Cell, CellState

# Cell strings: each cell value maps to its display string
CELL_STRINGS = {0: " ", 1: "X", 2: "O"}


class Board:
    """Mutable board storage. Owned cells never revert to empty."""

    __slots__ = ('marks',)

    def __init__(self, marks: Optional[np.ndarray] = None):
        if marks is None:
            marks = np.zeros(BOARD_SIZE, dtype=np.int8)
        self.marks = marks

    @classmethod
    def from_marks(cls, marks: Sequence[int]) -> "Board":
        """
        Build a board from 9 cell values (0 = empty, 1/2 = owner id).

        Accepts a flat sequence or a 3x3 nested one.
        """
        arr = np.asarray(marks).ravel()
        if arr.shape != (BOARD_SIZE,):
            raise ValueError(f"Board needs {BOARD_SIZE} cells, got {arr.size}")
        if not np.issubdtype(arr.dtype, np.integer) or np.any(
            (arr < CellState.EMPTY) | (arr > CellState.PLAYER2)
        ):
            raise ValueError(f"Invalid cell values: {arr.tolist()}")
        return cls(arr.astype(np.int8))

    def __getitem__(self, index: int) -> CellState:
        return CellState(int(self.marks[index]))

    @staticmethod
    def in_range(index: int) -> bool:
        return 0 <= index < BOARD_SIZE

    def is_empty(self, index: int) -> bool:
        return self.marks[index] == CellState.EMPTY

    def owner(self, index: int) -> Optional[int]:
        """Owning player id, or None for an empty cell."""
        value = int(self.marks[index])
        return value if value != CellState.EMPTY else None

    def place(self, index: int, mark: CellState) -> None:
        """Set an empty cell to an owned state. Mutates the board."""
        if mark == CellState.EMPTY:
            raise ValueError("Cannot clear a cell")
        if not self.is_empty(index):
            raise ValueError(f"Cell {index} is occupied")
        self.marks[index] = mark

    def empty_cells(self) -> List[int]:
        """Empty cell indices in ascending order."""
        return [int(i) for i in np.flatnonzero(self.marks == CellState.EMPTY)]

    def is_full(self) -> bool:
        return not np.any(self.marks == CellState.EMPTY)

    def cells(self) -> Tuple[Cell, ...]:
        """Snapshot of every cell; safe to hand to callers."""
        return tuple(
            Cell(index=i, state=self[i], owner=self.owner(i))
            for i in range(BOARD_SIZE)
        )

    def state_string(self, cell_strings: Optional[Dict[int, str]] = None) -> str:
        """Pretty string representation of the board."""
        strings = cell_strings or CELL_STRINGS
        grid = self.marks.reshape(3, 3)
        lines = ["╭───┬───┬───╮"]
        for i in range(3):
            row = "│ " + " │ ".join(strings[int(grid[i, j])] for j in range(3)) + " │"
            lines.append(row)
            if i < 2:
                lines.append("├───┼───┼───┤")
        lines.append("╰───┴───┴───╯")
        return "\n".join(lines)
