"""
Mačkáč - Throw Tests

Classification, the ranking rule, and the exhaustive total-order check.
"""

from itertools import product

import pytest

from mackac.engine.catalog import catalog_throws
from mackac.engine.dice import Die, ScriptedRandomSource
from mackac.engine.errors import RandomSourceFailure
from mackac.engine.throws import (
    MACKAC_VALUE,
    Comparison,
    Throw,
    compare_throws,
    rank_key,
    ranks_below,
)


FACES = range(1, 7)


class TestClassification:
    """Tests for the derived values of a throw."""

    @pytest.mark.parametrize("face", FACES)
    def test_same_faces_are_double(self, face):
        throw = Throw.of(face, face)
        assert throw.is_double is True
        assert throw.double_value == face
        assert throw.pair_value is None

    @pytest.mark.parametrize("first,second", [
        (x, y) for x, y in product(FACES, FACES) if x != y
    ])
    def test_different_faces_are_not_double(self, first, second):
        throw = Throw.of(first, second)
        assert throw.is_double is False
        assert throw.double_value is None

    def test_pair_value_puts_high_face_first(self):
        assert Throw.of(3, 6).pair_value == 63
        assert Throw.of(6, 3).pair_value == 63

    def test_special_throw(self):
        assert Throw.of(2, 1).is_special is True
        assert Throw.of(1, 2).is_special is True
        assert Throw.of(1, 2).value == MACKAC_VALUE

    @pytest.mark.parametrize("first,second", [(1, 1), (2, 2), (3, 1), (6, 5)])
    def test_other_throws_not_special(self, first, second):
        assert Throw.of(first, second).is_special is False

    def test_value_of_double_is_face(self):
        assert Throw.of(4, 4).value == 4

    def test_code(self):
        assert Throw.of(3, 6).code == "63"
        assert Throw.of(1, 2).code == "21"
        assert Throw.of(5, 5).code == "55"

    def test_unrolled_throw_has_no_value(self):
        with pytest.raises(ValueError, match="not been rolled"):
            Throw().value

    def test_str(self):
        assert str(Throw.of(3, 6)) == "[3,6] = 63"
        assert str(Throw.of(4, 4)) == "[4,4] = double 4"
        assert str(Throw.of(2, 1)) == "[2,1] = MAČKÁČ"
        assert str(Throw()) == "[?,?]"


class TestReroll:
    """Tests for Throw.reroll() and snapshot()."""

    def test_reroll_replaces_both_faces(self):
        throw = Throw.of(1, 1)
        throw.reroll(ScriptedRandomSource([6, 5]))
        assert throw.faces == (6, 5)

    def test_failed_reroll_keeps_previous_faces(self):
        throw = Throw.of(4, 2)
        with pytest.raises(RandomSourceFailure):
            throw.reroll(ScriptedRandomSource([6]))
        assert (throw.a.face, throw.b.face) == (4, 2)

    def test_snapshot_is_independent(self):
        throw = Throw.of(3, 2)
        copy = throw.snapshot()
        throw.reroll(ScriptedRandomSource([6, 6]))
        assert copy.faces == (3, 2)

    def test_built_from_dice(self):
        throw = Throw(Die(5), Die(2))
        assert throw.code == "52"

    def test_single_die_cannot_be_rolled_alone(self):
        throw = Throw.of(3, 1)
        throw.a.roll(ScriptedRandomSource([6]))
        throw.b.roll(ScriptedRandomSource([5]))
        assert throw.faces == (3, 1)

    def test_constructor_copies_dice(self):
        die = Die(4)
        throw = Throw(die, Die(4))
        die.roll(ScriptedRandomSource([1]))
        assert throw.code == "44"


class TestScenarios:
    """Worked examples of the ranking."""

    def test_plain_pairs_by_value(self):
        assert Throw.of(3, 1) < Throw.of(6, 5)

    def test_double_beats_any_plain_pair(self):
        assert Throw.of(1, 1) > Throw.of(6, 5)

    def test_mackac_beats_highest_double(self):
        assert Throw.of(2, 1) > Throw.of(6, 6)
        assert Throw.of(6, 6) < Throw.of(2, 1)

    def test_doubles_by_face(self):
        assert Throw.of(1, 1) < Throw.of(2, 2) < Throw.of(6, 6)

    def test_two_mackac_are_equal(self):
        assert Throw.of(2, 1) == Throw.of(1, 2)
        assert compare_throws(Throw.of(2, 1), Throw.of(1, 2)) is Comparison.EQUAL

    def test_dice_order_does_not_matter(self):
        assert Throw.of(6, 3) == Throw.of(3, 6)
        assert not Throw.of(6, 3) != Throw.of(3, 6)

    def test_compare_throws(self):
        assert compare_throws(Throw.of(3, 1), Throw.of(3, 2)) is Comparison.LESS
        assert compare_throws(Throw.of(4, 1), Throw.of(3, 2)) is Comparison.GREATER

    def test_le_and_ge(self):
        assert Throw.of(5, 4) <= Throw.of(4, 5)
        assert Throw.of(5, 4) >= Throw.of(4, 5)
        assert not Throw.of(5, 4) >= Throw.of(6, 1)

    def test_not_equal_to_other_types(self):
        assert Throw.of(3, 1) != "31"

    def test_throws_are_unhashable(self):
        with pytest.raises(TypeError):
            hash(Throw.of(3, 1))

    def test_custom_rule(self):
        """A different rule can be plugged into compare_throws."""
        def by_sum(first, second):
            return sum(first.faces) < sum(second.faces)

        assert compare_throws(Throw.of(2, 1), Throw.of(6, 6), rule=by_sum) is Comparison.LESS
        assert compare_throws(Throw.of(4, 1), Throw.of(3, 2), rule=by_sum) is Comparison.EQUAL


class TestTotalOrder:
    """Exhaustive checks over the whole catalog."""

    def test_irreflexive(self):
        for throw in catalog_throws():
            assert not ranks_below(throw, throw)

    def test_antisymmetric(self):
        throws = catalog_throws()
        for first, second in product(throws, throws):
            assert not (ranks_below(first, second) and ranks_below(second, first))

    def test_total(self):
        """Distinct catalog entries are always strictly ordered."""
        throws = catalog_throws()
        for i, first in enumerate(throws):
            for j, second in enumerate(throws):
                if i != j:
                    assert ranks_below(first, second) or ranks_below(second, first)

    def test_transitive(self):
        throws = catalog_throws()
        for a, b, c in product(throws, repeat=3):
            if ranks_below(a, b) and ranks_below(b, c):
                assert ranks_below(a, c)

    def test_special_wins_from_either_side(self):
        special = Throw.of(2, 1)
        for other in catalog_throws()[:-1]:
            assert ranks_below(other, special)
            assert not ranks_below(special, other)

    def test_symmetry_of_dice_order(self):
        for a, b, c, d in product(FACES, repeat=4):
            assert compare_throws(Throw.of(a, b), Throw.of(c, d)) is compare_throws(
                Throw.of(b, a), Throw.of(c, d)
            )

    def test_rank_key_classes(self):
        assert rank_key(Throw.of(6, 5))[0] == 0
        assert rank_key(Throw.of(1, 1))[0] == 1
        assert rank_key(Throw.of(1, 2))[0] == 2
