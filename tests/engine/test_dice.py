"""
Mačkáč - Dice and Random Source Tests
"""

import pytest

from mackac.engine.dice import (
    Die,
    ScriptedRandomSource,
    SeededRandomSource,
    SystemRandomSource,
)
from mackac.engine.errors import RandomSourceFailure


class TestDie:
    """Tests for Die."""

    def test_starts_unrolled(self):
        die = Die()
        assert die.face is None
        assert die.is_rolled is False

    def test_roll_sets_face(self):
        die = Die()
        assert die.roll(ScriptedRandomSource([4])) == 4
        assert die.face == 4
        assert die.is_rolled is True

    @pytest.mark.parametrize("face", [0, 7, -1])
    def test_invalid_face_raises(self, face):
        with pytest.raises(ValueError, match=f"Invalid die value {face}"):
            Die(face)

    def test_value_range(self):
        """Roll 200 times; every value should be 1-6."""
        source = SystemRandomSource()
        die = Die()
        for _ in range(200):
            assert 1 <= die.roll(source) <= 6

    def test_out_of_range_source_is_failure(self):
        class BrokenSource:
            def randint(self, low, high):
                return 9

        with pytest.raises(RandomSourceFailure):
            Die().roll(BrokenSource())


class TestRandomSources:
    """Tests for the injectable random sources."""

    def test_seeded_source_is_reproducible(self):
        a, b = SeededRandomSource(42), SeededRandomSource(42)
        assert [a.randint(1, 6) for _ in range(20)] == [b.randint(1, 6) for _ in range(20)]

    def test_system_source_randomness(self):
        source = SystemRandomSource()
        values = {source.randint(1, 6) for _ in range(100)}
        assert len(values) > 1

    def test_scripted_source_replays(self):
        source = ScriptedRandomSource([3, 5])
        assert source.randint(1, 6) == 3
        assert source.remaining == 1
        assert source.randint(1, 6) == 5
        assert source.remaining == 0

    def test_scripted_source_exhausted(self):
        with pytest.raises(RandomSourceFailure, match="exhausted"):
            ScriptedRandomSource([]).randint(1, 6)

    def test_scripted_source_out_of_range(self):
        source = ScriptedRandomSource([22])
        with pytest.raises(RandomSourceFailure, match="outside"):
            source.randint(0, 21)
        assert source.remaining == 1

    def test_system_source_failure_is_wrapped(self, monkeypatch):
        source = SystemRandomSource()

        def broken(low, high):
            raise NotImplementedError("no entropy")

        monkeypatch.setattr(source._rng, "randint", broken)
        with pytest.raises(RandomSourceFailure, match="entropy"):
            source.randint(1, 6)
