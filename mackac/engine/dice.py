"""
Mačkáč - Dice and Random Sources

A die only knows how to ask a random source for a face. The source is
injected so games can run on OS entropy, on a seeded generator, or on a
scripted list of draws in tests and replays.
"""

import logging
import random
from typing import Iterable, Protocol

from mackac.engine.errors import RandomSourceFailure


logger = logging.getLogger(__name__)

DIE_MIN = 1
DIE_MAX = 6


class RandomSource(Protocol):
    """Anything that can draw a uniform integer from a closed range."""

    def randint(self, low: int, high: int) -> int:
        ...


class SystemRandomSource:
    """Draws from the operating system's entropy pool."""

    def __init__(self) -> None:
        self._rng = random.SystemRandom()

    def randint(self, low: int, high: int) -> int:
        try:
            return self._rng.randint(low, high)
        except (OSError, NotImplementedError) as exc:
            raise RandomSourceFailure(f"System entropy unavailable: {exc}") from exc


class SeededRandomSource:
    """Reproducible pseudo-random draws from a fixed seed."""

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def randint(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)


class ScriptedRandomSource:
    """
    Replays a fixed sequence of draws.

    Each draw must fall inside the requested range. Running out of values,
    or a value outside the range, is reported as a RandomSourceFailure.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self._position = 0

    @property
    def remaining(self) -> int:
        """Number of draws not yet consumed."""
        return len(self._values) - self._position

    def randint(self, low: int, high: int) -> int:
        if self._position >= len(self._values):
            raise RandomSourceFailure("Scripted random source is exhausted.")
        value = self._values[self._position]
        if not (low <= value <= high):
            raise RandomSourceFailure(
                f"Scripted draw {value} is outside [{low}, {high}]."
            )
        self._position += 1
        return value


class Die:
    """
    A single six-sided die.

    Holds None until rolled. The face is only ever changed by roll().
    """

    __slots__ = ("_face",)

    def __init__(self, face: int | None = None) -> None:
        if face is not None and not (DIE_MIN <= face <= DIE_MAX):
            raise ValueError(
                f"Invalid die value {face}. Must be between {DIE_MIN} and {DIE_MAX}."
            )
        self._face = face

    @property
    def face(self) -> int | None:
        return self._face

    @property
    def is_rolled(self) -> bool:
        return self._face is not None

    def roll(self, source: RandomSource) -> int:
        """Overwrite the face with a uniform draw from the source."""
        face = source.randint(DIE_MIN, DIE_MAX)
        if not (DIE_MIN <= face <= DIE_MAX):
            raise RandomSourceFailure(
                f"Random source returned {face}, expected {DIE_MIN}-{DIE_MAX}."
            )
        self._face = face
        logger.debug("Die rolled %d", face)
        return face

    def __repr__(self) -> str:
        return f"Die({self._face!r})"
