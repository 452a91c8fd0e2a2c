"""
Invariant-violation errors.

These signal caller or state-machine misuse. Rejected moves are never
raised; they come back as TurnOutcome(accepted=False).
"""


class EngineError(RuntimeError):
    """Base class for fatal engine errors."""


class NoCurrentPlayerError(EngineError):
    """No player holds the turn."""


class NotComputerTurnError(EngineError):
    """The computer-move path was invoked for a human player."""
