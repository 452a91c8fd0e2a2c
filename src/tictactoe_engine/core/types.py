"""
Core types, enums, and value records.

This module contains the fundamental types shared by the engine:
- CellState / Cell: board cell encoding and read-only cell snapshots
- Player / PlayerRole: the two player records
- TurnOutcome: the result of one move attempt
- GameMode / Difficulty / EngineSettings: construction-time configuration
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, NamedTuple, Optional


# Board dimensions are fixed
BOARD_SIZE = 9
CENTER_CELL = 4
PLAYER_IDS = (1, 2)


class CellState(IntEnum):
    """
    Cell encoding, stored directly in the int8 board:
        0 = empty
        1 = owned by player 1
        2 = owned by player 2
    """
    EMPTY = 0
    PLAYER1 = 1
    PLAYER2 = 2

    @classmethod
    def for_player(cls, player_id: int) -> "CellState":
        """Owned state for the given player id."""
        return cls(player_id)


class PlayerRole(Enum):
    HUMAN = "human"
    COMPUTER = "computer"


class GameMode(Enum):
    SINGLE_PLAYER = "single-player"
    TWO_PLAYER = "two-player"


class Difficulty(Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True)
class Cell:
    """Read-only snapshot of one board position."""
    index: int
    state: CellState
    owner: Optional[int] = None  # Owning player id, None while empty

    @property
    def is_empty(self) -> bool:
        return self.state == CellState.EMPTY


@dataclass
class Player:
    player_id: int
    role: PlayerRole = PlayerRole.HUMAN
    is_current_turn: bool = False
    turns_taken: int = 0
    avatar: Any = None  # Opaque to the engine

    @property
    def is_computer(self) -> bool:
        """Returns whether the computer supplies this player's moves."""
        return self.role == PlayerRole.COMPUTER

    @property
    def mark(self) -> CellState:
        """Returns the cell state this player's moves produce."""
        return CellState.for_player(self.player_id)


class TurnOutcome(NamedTuple):
    """Result of one move attempt."""

    accepted: bool
    game_over: bool = False
    has_winner: bool = False
    winner: Optional[Player] = None

    @classmethod
    def rejected(cls) -> "TurnOutcome":
        return cls(accepted=False)

    @classmethod
    def continued(cls) -> "TurnOutcome":
        return cls(accepted=True)

    @classmethod
    def won(cls, winner: Player) -> "TurnOutcome":
        return cls(accepted=True, game_over=True, has_winner=True, winner=winner)

    @classmethod
    def draw(cls) -> "TurnOutcome":
        return cls(accepted=True, game_over=True)


@dataclass(frozen=True)
class EngineSettings:
    """
    Construction input supplied by the presentation layer.

    `difficulty` is only consulted when `mode` is single-player.
    """
    mode: GameMode = GameMode.TWO_PLAYER
    player1_avatar: Any = None
    player2_avatar: Any = None
    difficulty: Difficulty = Difficulty.MEDIUM
