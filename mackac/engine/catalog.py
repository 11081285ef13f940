"""
Mačkáč - Throw Catalog

All 21 distinct throws in ascending rank, built once at import time. The
engine uses a throw's position here to weight the suspicion draw.
"""

from itertools import combinations_with_replacement

from mackac.engine.dice import DIE_MAX, DIE_MIN
from mackac.engine.throws import Throw, rank_key


def _build_catalog() -> tuple[tuple[int, int], ...]:
    """Every unordered face pair, high face first, sorted by rank."""
    faces = range(DIE_MIN, DIE_MAX + 1)
    pairs = [(high, low) for low, high in combinations_with_replacement(faces, 2)]
    return tuple(sorted(pairs, key=lambda pair: rank_key(Throw.of(*pair))))


THROW_CATALOG: tuple[tuple[int, int], ...] = _build_catalog()
CATALOG_SIZE = len(THROW_CATALOG)


def catalog_throws() -> list[Throw]:
    """Fresh Throw objects for every catalog entry, lowest first."""
    return [Throw.of(*pair) for pair in THROW_CATALOG]


def rank_index(throw: Throw) -> int:
    """
    Position of a throw in the catalog.

    Equal to the number of distinct throws ranking strictly below it.

    Raises:
        ValueError: If the throw has not been rolled
    """
    return THROW_CATALOG.index(throw.faces)


def throw_at(index: int) -> Throw:
    """The throw at a catalog position."""
    if not (0 <= index < CATALOG_SIZE):
        raise ValueError(f"Catalog index must be 0-{CATALOG_SIZE - 1}, got {index}.")
    return Throw.of(*THROW_CATALOG[index])


def lowest_throw() -> Throw:
    """The weakest throw (3-1)."""
    return throw_at(0)


def highest_throw() -> Throw:
    """Mačkáč."""
    return throw_at(CATALOG_SIZE - 1)
