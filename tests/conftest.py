"""
Shared test fixtures for tictactoe_engine tests.

Design principles:
- Seeded random sources so tie-breaks are reproducible
- Synthetic boards built from plain 0/1/2 lists
- Minimal, focused fixtures
"""

import random
from typing import Callable, List

import pytest

from tictactoe_engine.core.types import Difficulty, EngineSettings, GameMode
from tictactoe_engine.engine.engine import GameEngine
from tictactoe_engine.games.board import Board


# =============================================================================
# Random Fixtures
# =============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def seeds() -> List[int]:
    """Seeds for repeated-trial tests."""
    return list(range(100))


# =============================================================================
# Board Fixtures
# =============================================================================

@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def draw_board() -> Board:
    """Full board with no completed line:
        X O X
        X X O
        O X O
    """
    return Board.from_marks([1, 2, 1, 1, 1, 2, 2, 1, 2])


# =============================================================================
# Engine Fixtures
# =============================================================================

@pytest.fixture
def two_player_engine() -> GameEngine:
    """Human vs human engine."""
    return GameEngine(EngineSettings(
        mode=GameMode.TWO_PLAYER,
        player1_avatar="cat",
        player2_avatar="dog",
    ))


@pytest.fixture
def make_single_player_engine() -> Callable[[Difficulty], GameEngine]:
    """Factory for human vs computer engines at a given difficulty."""
    def _make(difficulty: Difficulty, seed: int = 0) -> GameEngine:
        settings = EngineSettings(mode=GameMode.SINGLE_PLAYER, difficulty=difficulty)
        return GameEngine(settings, rng=random.Random(seed))
    return _make


@pytest.fixture
def play() -> Callable:
    """Apply a sequence of moves, asserting each is accepted; returns the last outcome."""
    def _play(engine: GameEngine, cells: List[int]):
        outcome = None
        for cell in cells:
            outcome = engine.apply_move(cell)
            assert outcome.accepted, f"move {cell} was rejected"
        return outcome
    return _play
