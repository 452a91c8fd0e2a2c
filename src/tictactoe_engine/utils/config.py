"""
Configuration and option registries.
"""

from typing import Any, Optional

from tictactoe_engine.core.types import Difficulty, EngineSettings, GameMode


# ---------------------------------------------------------------------------
# Registries
# ---------------------------------------------------------------------------

MODES = {mode.value: mode for mode in GameMode}

DIFFICULTIES = {difficulty.value: difficulty for difficulty in Difficulty}

DEFAULT_AVATARS = ("X", "O")


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

def _lookup(registry: dict, name: str, kind: str) -> Any:
    """Resolve a registry key, raising ValueError with the valid choices."""
    if name not in registry:
        available = ", ".join(registry.keys())
        raise ValueError(f"Unknown {kind}: {name}. Available: {available}")
    return registry[name]


class Config:
    """Game configuration with sensible defaults."""

    def __init__(
        self,
        mode: str = "single-player",
        difficulty: str = "medium",
        player1_avatar: Any = DEFAULT_AVATARS[0],
        player2_avatar: Any = DEFAULT_AVATARS[1],
        seed: Optional[int] = None,
    ):
        self.mode = _lookup(MODES, mode, "mode")
        self.difficulty = _lookup(DIFFICULTIES, difficulty, "difficulty")
        self.player1_avatar = player1_avatar
        self.player2_avatar = player2_avatar
        self.seed = seed

    def to_settings(self) -> EngineSettings:
        return EngineSettings(
            mode=self.mode,
            player1_avatar=self.player1_avatar,
            player2_avatar=self.player2_avatar,
            difficulty=self.difficulty,
        )


# Default configuration
DEFAULT_CONFIG = Config()
