"""
Factory functions for creating engines and random sources.
"""

import random
from typing import Optional

from tictactoe_engine.engine.engine import GameEngine
from tictactoe_engine.utils.config import Config, DEFAULT_CONFIG


def create_rng(seed: Optional[int] = None) -> random.Random:
    """
    Create the tie-break random source.

    Args:
        seed: Fixed seed for reproducible games; None for OS entropy

    Returns:
        A dedicated random.Random instance
    """
    return random.Random(seed)


def create_engine(config: Optional[Config] = None) -> GameEngine:
    """
    Create a fresh engine for one game.

    Args:
        config: Game configuration (default: DEFAULT_CONFIG)

    Returns:
        Configured GameEngine instance
    """
    config = config or DEFAULT_CONFIG
    if not isinstance(config, Config):
        raise ValueError(f"Expected a Config, got {type(config).__name__}")

    return GameEngine(config.to_settings(), rng=create_rng(config.seed))
