"""
Mačkáč - Throws and Ranking

A throw is an unordered pair of dice. Ranking rules, lowest to highest:
    - Plain pairs by value, high face first: 31 < 32 < 41 < ... < 65
    - Doubles by face: 11 < 22 < ... < 66
    - Mačkáč (2 and 1): beats everything

Equality is "neither throw outranks the other", so 3-1 and 1-3 are the same
throw. The ranking rule is a plain function and can be swapped out when
comparing explicitly.
"""

from enum import Enum
from typing import Callable

from mackac.engine.dice import Die, RandomSource


MACKAC_VALUE = 21
MACKAC_FACES = frozenset({1, 2})


class Comparison(Enum):
    """Result of comparing two throws."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


class Throw:
    """
    Two dice rolled together.

    Attributes:
        a: Copy of the first die
        b: Copy of the second die
    """

    __slots__ = ("_a", "_b")

    def __init__(self, a: Die | None = None, b: Die | None = None) -> None:
        self._a = Die(a.face) if a is not None else Die()
        self._b = Die(b.face) if b is not None else Die()

    @classmethod
    def of(cls, first: int, second: int) -> "Throw":
        """Build a rolled throw from two face values."""
        return cls(Die(first), Die(second))

    @property
    def a(self) -> Die:
        """Copy of the first die; the throw only changes through reroll()."""
        return Die(self._a.face)

    @property
    def b(self) -> Die:
        """Copy of the second die."""
        return Die(self._b.face)

    @property
    def is_rolled(self) -> bool:
        return self._a.is_rolled and self._b.is_rolled

    @property
    def faces(self) -> tuple[int, int]:
        """Both faces, high first."""
        if not self.is_rolled:
            raise ValueError("Throw has not been rolled.")
        return (max(self._a.face, self._b.face), min(self._a.face, self._b.face))

    @property
    def is_double(self) -> bool:
        high, low = self.faces
        return high == low

    @property
    def double_value(self) -> int | None:
        """The shared face of a double, None otherwise."""
        high, low = self.faces
        return high if high == low else None

    @property
    def pair_value(self) -> int | None:
        """10 * high + low for non-doubles, None for doubles."""
        high, low = self.faces
        if high == low:
            return None
        return high * 10 + low

    @property
    def is_special(self) -> bool:
        """True for the Mačkáč throw (2 and 1)."""
        return frozenset(self.faces) == MACKAC_FACES

    @property
    def value(self) -> int:
        """Face value for doubles, pair value otherwise (21 for Mačkáč)."""
        if self.is_double:
            return self.double_value
        return self.pair_value

    @property
    def code(self) -> str:
        """Two-digit announcement code, high face first."""
        high, low = self.faces
        return f"{high}{low}"

    def reroll(self, source: RandomSource) -> "Throw":
        """
        Re-roll both dice together.

        Both new faces are drawn before either die is replaced, so a failing
        source leaves the previous throw untouched.
        """
        first, second = Die(), Die()
        first.roll(source)
        second.roll(source)
        self._a, self._b = first, second
        return self

    def snapshot(self) -> "Throw":
        """An independent copy with the same faces."""
        return Throw(Die(self._a.face), Die(self._b.face))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Throw):
            return NotImplemented
        return ranks_below(self, other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Throw):
            return NotImplemented
        return ranks_below(other, self)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Throw):
            return NotImplemented
        return not ranks_below(other, self)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Throw):
            return NotImplemented
        return not ranks_below(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Throw):
            return NotImplemented
        return compare_throws(self, other) is Comparison.EQUAL

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Throw):
            return NotImplemented
        return compare_throws(self, other) is not Comparison.EQUAL

    # Rerolling changes identity, so throws are not hashable.
    __hash__ = None

    def __repr__(self) -> str:
        return f"Throw({self._a.face!r}, {self._b.face!r})"

    def __str__(self) -> str:
        if not self.is_rolled:
            return "[?,?]"
        faces = f"[{self._a.face},{self._b.face}]"
        if self.is_special:
            return f"{faces} = MAČKÁČ"
        if self.is_double:
            return f"{faces} = double {self.double_value}"
        return f"{faces} = {self.pair_value}"


RankingRule = Callable[[Throw, Throw], bool]


def rank_key(throw: Throw) -> tuple[int, int]:
    """
    Sort key implementing the ranking.

    The first element is the class (0 plain, 1 double, 2 Mačkáč), the
    second orders throws within their class.
    """
    if throw.is_special:
        return (2, 0)
    if throw.is_double:
        return (1, throw.double_value)
    return (0, throw.pair_value)


def ranks_below(first: Throw, second: Throw) -> bool:
    """Default ranking rule: True if first ranks strictly below second."""
    return rank_key(first) < rank_key(second)


def compare_throws(
    first: Throw,
    second: Throw,
    rule: RankingRule = ranks_below
) -> Comparison:
    """
    Compare two throws with a ranking rule.

    Args:
        first: Left-hand throw
        second: Right-hand throw
        rule: Strict "ranks below" predicate

    Returns:
        LESS, EQUAL or GREATER from the point of view of the first throw
    """
    if rule(first, second):
        return Comparison.LESS
    if rule(second, first):
        return Comparison.GREATER
    return Comparison.EQUAL
