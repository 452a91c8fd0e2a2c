"""
GameEngine - board state, turn order, and terminal detection for one game.

The engine is driven purely by method calls from a presentation layer:

    engine = GameEngine(EngineSettings(mode=GameMode.SINGLE_PLAYER))
    outcome = engine.apply_move(4)
    if not outcome.game_over and engine.get_current_player().is_computer:
        outcome = engine.apply_computer_move()

Start a new game by constructing a new engine.
"""

from __future__ import annotations

import dataclasses
import logging
import operator
import random
from typing import Any, List, Optional, Tuple

from tictactoe_engine.core.errors import NoCurrentPlayerError, NotComputerTurnError
from tictactoe_engine.core.types import (
    Cell,
    Difficulty,
    EngineSettings,
    GameMode,
    Player,
    PlayerRole,
    TurnOutcome,
)
from tictactoe_engine.games.board import CELL_STRINGS, Board
from tictactoe_engine.games.game_rules import game_is_draw, game_is_won, winning_line
from tictactoe_engine.selection import select_cell

logger = logging.getLogger(__name__)


class GameEngine:
    """Single-game engine. Not thread-safe; callers serialize access."""

    def __init__(
        self,
        settings: Optional[EngineSettings] = None,
        rng: Optional[random.Random] = None,
    ):
        settings = settings or EngineSettings()

        self._board = Board()
        self._players = [
            Player(player_id=1, is_current_turn=True, avatar=settings.player1_avatar),
            Player(player_id=2, is_current_turn=False, avatar=settings.player2_avatar),
        ]
        if settings.mode == GameMode.SINGLE_PLAYER:
            self._players[1].role = PlayerRole.COMPUTER

        self._mode = settings.mode
        self._difficulty = settings.difficulty
        self._rng = rng if rng is not None else random.Random()
        self._outcome: Optional[TurnOutcome] = None

    # ------------------------------------------------------------------
    # Read-only snapshots
    # ------------------------------------------------------------------

    @property
    def mode(self) -> GameMode:
        return self._mode

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @property
    def board(self) -> Tuple[Cell, ...]:
        return self._board.cells()

    @property
    def players(self) -> Tuple[Player, ...]:
        return tuple(dataclasses.replace(p) for p in self._players)

    @property
    def is_over(self) -> bool:
        return self._outcome is not None

    @property
    def winner(self) -> Optional[Player]:
        """Winning player snapshot, or None while playing or after a draw."""
        return self._outcome.winner if self._outcome else None

    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        """Cells of the line that won the game, or None."""
        winner = self.winner
        if winner is None:
            return None
        return winning_line(self._board, winner.player_id)

    def valid_moves(self) -> List[int]:
        """Cell indices the current player may choose."""
        return [] if self.is_over else self._board.empty_cells()

    def get_current_player(self) -> Player:
        """Snapshot of the player holding the turn."""
        return dataclasses.replace(self._current_player())

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def apply_move(self, cell_index: Any) -> TurnOutcome:
        """
        Place the current player's mark in a cell.

        Out-of-range, non-integer or occupied cells, and moves after the
        game has finished, are rejected with accepted=False and no state
        change.
        """
        return self._do_turn(self._current_player(), cell_index)

    def apply_computer_move(self) -> TurnOutcome:
        """
        Choose a cell for the computer player by difficulty and apply it.

        Raises:
            NotComputerTurnError: if the current player is not a computer
        """
        player = self._current_player()
        if not player.is_computer:
            raise NotComputerTurnError(
                f"Cannot apply a computer move for human player {player.player_id}"
            )

        cell = select_cell(self._board, player.player_id, self._difficulty, self._rng)
        logger.debug(
            "Computer (player %d, %s) chose cell %s",
            player.player_id, self._difficulty, cell,
        )
        return self._do_turn(player, cell)

    def _do_turn(self, player: Player, cell_index: Any) -> TurnOutcome:
        if self.is_over:
            logger.debug("Rejected move %r: game is over", cell_index)
            return TurnOutcome.rejected()

        try:
            if isinstance(cell_index, bool):
                raise TypeError("bool is not a cell index")
            cell = operator.index(cell_index)
        except TypeError:
            logger.debug("Rejected move %r: not an integer", cell_index)
            return TurnOutcome.rejected()

        if not Board.in_range(cell):
            logger.debug("Rejected move %d: out of range", cell)
            return TurnOutcome.rejected()

        if not self._board.is_empty(cell):
            logger.debug("Rejected move %d: cell is occupied", cell)
            return TurnOutcome.rejected()

        self._board.place(cell, player.mark)
        player.turns_taken += 1
        logger.debug("Player %d took cell %d", player.player_id, cell)

        # Win is checked before draw: a full board with a line is a win
        if game_is_won(self._board, player.player_id):
            self._outcome = TurnOutcome.won(dataclasses.replace(player))
            logger.info("Game over: player %d wins", player.player_id)
            return self._outcome

        if game_is_draw(self._board):
            self._outcome = TurnOutcome.draw()
            logger.info("Game over: draw")
            return self._outcome

        self._swap_turns(player)
        return TurnOutcome.continued()

    def _swap_turns(self, player: Player) -> None:
        player.is_current_turn = False
        # Wraps from the last player back to the first
        next_index = player.player_id % len(self._players)
        self._players[next_index].is_current_turn = True

    def _current_player(self) -> Player:
        for player in self._players:
            if player.is_current_turn:
                return player
        raise NoCurrentPlayerError("Cannot find the player whose turn it is")

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def cell_strings(self) -> dict[int, str]:
        """Display string per cell value, using avatars where they are set."""
        strings = dict(CELL_STRINGS)
        for player in self._players:
            if player.avatar is not None:
                strings[player.player_id] = str(player.avatar)
        return strings

    def state_string(self) -> str:
        return self._board.state_string(self.cell_strings())
