"""Mancala sowing engine: board geometry, turn resolution and scoring."""

from .board import (
    INITIAL_STONES,
    LENGTH,
    STORE_ONE,
    STORE_TWO,
    GameMode,
    Player,
    display_order,
    initial_counts,
    is_store,
    opposite,
    owner,
    pit_range,
    store_of,
)
from .sowing import sow
from .core import (
    CaptureRecord,
    GameOverResult,
    Outcome,
    TurnResult,
    check_game_over,
    decide,
    legal_pits,
    resolve_turn,
)
from .game import Game, GamePhase, TurnReport, legal_actions, new_game, step

__all__ = [
    "INITIAL_STONES",
    "LENGTH",
    "STORE_ONE",
    "STORE_TWO",
    "GameMode",
    "Player",
    "display_order",
    "initial_counts",
    "is_store",
    "opposite",
    "owner",
    "pit_range",
    "store_of",
    "sow",
    "CaptureRecord",
    "GameOverResult",
    "Outcome",
    "TurnResult",
    "check_game_over",
    "decide",
    "legal_pits",
    "resolve_turn",
    "Game",
    "GamePhase",
    "TurnReport",
    "legal_actions",
    "new_game",
    "step",
]
