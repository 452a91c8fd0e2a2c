"""
Engine module - the single stateful component.
"""

from tictactoe_engine.engine.engine import GameEngine

__all__ = ["GameEngine"]
