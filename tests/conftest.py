"""
Mačkáč - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

from typing import Callable

import pytest

from mackac.engine.base import GameConfig
from mackac.engine.dice import ScriptedRandomSource
from mackac.engine.round_engine import RoundEngine


# =============================================================================
# THROW TEST DATA
# =============================================================================

@pytest.fixture
def ranked_codes() -> list[str]:
    """Every throw, lowest first, as announcement codes."""
    return [
        # Plain pairs
        "31", "32", "41", "42", "43", "51", "52", "53", "54",
        "61", "62", "63", "64", "65",
        # Doubles
        "11", "22", "33", "44", "55", "66",
        # Mačkáč
        "21",
    ]


# =============================================================================
# ENGINE FIXTURES
# =============================================================================

# Faces consumed by RoundEngine.start(): two dice for each participant
OPENING_ROLLS = (1, 1, 1, 1)


@pytest.fixture
def config() -> GameConfig:
    """Two players, four lives, Alice claims first."""
    return GameConfig(player_names=("Alice", "Bob"))


@pytest.fixture
def make_engine(config: GameConfig) -> Callable[..., RoundEngine]:
    """
    Build a started engine whose random draws follow a script.

    The opening rolls are prepended automatically, so the script only
    lists the draws made after start().
    """
    def _make(*draws: int, game_config: GameConfig | None = None) -> RoundEngine:
        source = ScriptedRandomSource(OPENING_ROLLS + draws)
        engine = RoundEngine(game_config or config, source)
        engine.start()
        return engine

    return _make
