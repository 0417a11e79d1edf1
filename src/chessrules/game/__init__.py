"""Game layer: a headless controller around the rules engine."""

from chessrules.game.controller import (
    COMPUTER_COLOR,
    GameController,
    GameEvents,
    GameMode,
    status_text,
)

__all__ = [
    "COMPUTER_COLOR",
    "GameController",
    "GameEvents",
    "GameMode",
    "status_text",
]
