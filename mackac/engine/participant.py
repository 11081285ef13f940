"""
Mačkáč - Participant

A participant is a name, a health counter and the throw under their cup.
"""

import logging

from mackac.engine.base import DEFAULT_STARTING_HEALTH
from mackac.engine.dice import RandomSource
from mackac.engine.throws import Throw


logger = logging.getLogger(__name__)


class Participant:
    """One of the two players at the table."""

    def __init__(self, name: str, health: int = DEFAULT_STARTING_HEALTH) -> None:
        if health < 0:
            raise ValueError(f"Health cannot be negative, got {health}.")
        self.name = name
        self._health = health
        self._throw = Throw()

    @property
    def health(self) -> int:
        return self._health

    @property
    def is_defeated(self) -> bool:
        return self._health == 0

    @property
    def current_throw(self) -> Throw:
        """A copy of the current throw; only roll() changes the real one."""
        return self._throw.snapshot()

    def roll(self, source: RandomSource) -> Throw:
        """Re-roll both dice and return the new throw."""
        self._throw.reroll(source)
        logger.debug("%s rolled %s", self.name, self._throw)
        return self.current_throw

    def take_hit(self) -> bool:
        """
        Lose one life.

        Returns:
            True if health went down, False if already defeated
        """
        if self._health == 0:
            logger.warning("%s is already defeated, hit ignored", self.name)
            return False
        self._health -= 1
        logger.info("%s loses a life (%d left)", self.name, self._health)
        return True

    def __repr__(self) -> str:
        return f"Participant({self.name!r}, health={self._health})"
