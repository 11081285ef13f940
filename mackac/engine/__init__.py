"""
Mačkáč Game Engine.

Pure Python game logic with zero UI dependencies.
Handles dice, throw ranking, claims, challenges and health.
"""

from mackac.engine.base import (
    Decision,
    GameConfig,
    Outcome,
    Phase,
    Resolution,
    Seat,
)
from mackac.engine.catalog import CATALOG_SIZE, THROW_CATALOG, rank_index
from mackac.engine.dice import (
    Die,
    RandomSource,
    ScriptedRandomSource,
    SeededRandomSource,
    SystemRandomSource,
)
from mackac.engine.errors import (
    InvalidDeclaration,
    InvalidPhase,
    MackacError,
    MalformedDecision,
    RandomSourceFailure,
)
from mackac.engine.participant import Participant
from mackac.engine.players import ComputerController, Controller, Reporter, play_game
from mackac.engine.round_engine import RoundEngine
from mackac.engine.throws import Comparison, Throw, compare_throws, ranks_below

__all__ = [
    # Data Classes
    "Die",
    "Throw",
    "Participant",
    "Resolution",
    "GameConfig",
    # Enums
    "Comparison",
    "Decision",
    "Outcome",
    "Phase",
    "Seat",
    # Ranking
    "CATALOG_SIZE",
    "THROW_CATALOG",
    "compare_throws",
    "rank_index",
    "ranks_below",
    # Randomness
    "RandomSource",
    "ScriptedRandomSource",
    "SeededRandomSource",
    "SystemRandomSource",
    # Errors
    "MackacError",
    "InvalidDeclaration",
    "InvalidPhase",
    "MalformedDecision",
    "RandomSourceFailure",
    # Engine
    "RoundEngine",
    "Controller",
    "Reporter",
    "ComputerController",
    "play_game",
]
