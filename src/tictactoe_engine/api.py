"""
Console front end for playing one game.

Usage:
    from tictactoe_engine import play_game, create_engine, Config

    engine = create_engine(Config(mode="single-player", difficulty="hard"))
    outcome = play_game(engine)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tictactoe_engine.core.types import TurnOutcome

if TYPE_CHECKING:
    from tictactoe_engine.core.types import Player
    from tictactoe_engine.engine.engine import GameEngine

logger = logging.getLogger(__name__)


def _label(player: "Player") -> str:
    if player.avatar is None:
        return f"Player {player.player_id}"
    return f"Player {player.player_id} ({player.avatar})"


def _computer_turn(engine: "GameEngine") -> TurnOutcome:
    """Computer selects and applies a move."""
    player = engine.get_current_player()
    before = {cell.index for cell in engine.board if cell.is_empty}
    outcome = engine.apply_computer_move()
    after = {cell.index for cell in engine.board if cell.is_empty}
    for cell in before - after:
        print(f"\nComputer ({_label(player)}) played: {cell}")
    return outcome


def _human_turn(engine: "GameEngine") -> TurnOutcome:
    """Prompt the human for a cell until the engine accepts one."""
    player = engine.get_current_player()
    print(f"\nYour turn, {_label(player)}")
    print(f"Choose a cell 0-8 (free: {','.join(map(str, engine.valid_moves()))})")

    while True:
        raw = input("Move: ").strip()
        try:
            cell = int(raw)
        except ValueError:
            print(f"Invalid input: {raw!r} is not a number")
            continue

        outcome = engine.apply_move(cell)
        if outcome.accepted:
            return outcome
        print(f"Illegal move: cell {cell} is not available")


def play_game(engine: "GameEngine") -> TurnOutcome:
    """
    Drive one game to completion on the console.

    Parameters
    ----------
    engine : GameEngine
        A fresh engine; humans are prompted with input(), computer players
        move on their own.

    Returns
    -------
    TurnOutcome
        The terminal outcome (win or draw).
    """
    print(
        f"Starting {engine.mode.value} game"
        + (f" (difficulty: {engine.difficulty.value})" if any(p.is_computer for p in engine.players) else "")
    )
    print(engine.state_string())

    outcome = TurnOutcome.continued()
    try:
        while not outcome.game_over:
            if engine.get_current_player().is_computer:
                outcome = _computer_turn(engine)
                if not outcome.accepted:
                    break
            else:
                outcome = _human_turn(engine)
            print(engine.state_string())

        print("\n" + "=" * 40)
        print("GAME OVER")
        print("=" * 40)
        if outcome.has_winner:
            print(f"{_label(outcome.winner)} wins!")
            line = engine.winning_line()
            if line is not None:
                print(f"Winning line: {'-'.join(map(str, line))}")
        else:
            print("It's a draw!")

    except (KeyboardInterrupt, EOFError):
        print("\nInterrupted - game abandoned")
        raise
    except Exception:
        logger.exception("Fatal error in game loop")
        raise

    return outcome


__all__ = ["play_game"]
