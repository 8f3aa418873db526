"""
Yahtzee - Dice Tests

Tests for Die and DiceSet rolling, freezing and snapshots.
"""

import random

import pytest
from yahtzee.engine.base import DieSnapshot
from yahtzee.engine.dice import DiceSet, Die
from yahtzee.engine.errors import IndexOutOfRangeError


class TestDie:
    """Tests for a single Die."""

    def test_starts_unrolled_and_unfrozen(self):
        die = Die()
        assert die.value == 0
        assert die.frozen is False

    def test_roll_uses_source(self, scripted_rng):
        die = Die()
        assert die.roll(scripted_rng(4)) == 4
        assert die.value == 4

    def test_frozen_roll_is_noop(self, scripted_rng):
        rng = scripted_rng(6)
        die = Die(value=2, frozen=True)
        assert die.roll(rng) == 2
        assert rng.calls == 0

    def test_toggle_freeze_keeps_value(self):
        die = Die(value=3)
        assert die.toggle_freeze() is True
        assert die.value == 3
        assert die.toggle_freeze() is False
        assert die.value == 3

    def test_freeze_before_roll(self, scripted_rng):
        """Frozen-but-unrolled is valid; the die stays blank."""
        die = Die()
        die.toggle_freeze()
        die.roll(scripted_rng(5))
        assert die.value == 0

    def test_reset(self):
        die = Die(value=5, frozen=True)
        die.reset()
        assert die == Die()

    def test_value_range_with_real_random(self):
        rng = random.Random(1234)
        die = Die()
        for _ in range(200):
            assert 1 <= die.roll(rng) <= 6


class TestDiceSet:
    """Tests for DiceSet."""

    def test_five_dice(self):
        assert len(DiceSet()) == 5

    def test_initial_snapshot(self):
        assert DiceSet().snapshot() == (DieSnapshot(value=0, frozen=False),) * 5

    def test_roll_all_in_order(self, scripted_rng):
        dice = DiceSet(scripted_rng(1, 2, 3, 4, 5))
        assert dice.roll_all() == (1, 2, 3, 4, 5)
        assert dice.values() == (1, 2, 3, 4, 5)

    def test_frozen_dice_skipped(self, scripted_rng):
        rng = scripted_rng(1, 2, 3, 4, 5, 6, 6, 6)
        dice = DiceSet(rng)
        dice.roll_all()
        dice.toggle_freeze(0)
        dice.toggle_freeze(3)

        assert dice.roll_all() == (1, 6, 6, 4, 6)
        assert rng.calls == 8

    def test_snapshot_reports_frozen(self, scripted_rng):
        dice = DiceSet(scripted_rng(2, 2, 2, 2, 2))
        dice.roll_all()
        dice.toggle_freeze(4)
        snap = dice.snapshot()
        assert snap[4] == DieSnapshot(value=2, frozen=True)
        assert all(not d.frozen for d in snap[:4])

    def test_snapshot_does_not_mutate(self, scripted_rng):
        dice = DiceSet(scripted_rng(3, 1, 4, 1, 5))
        dice.roll_all()
        first = dice.snapshot()
        assert dice.snapshot() == first

    def test_snapshot_is_immutable(self):
        snap = DiceSet().snapshot()
        with pytest.raises(AttributeError):
            snap[0].value = 6

    @pytest.mark.parametrize("index", [-1, 5, 99])
    def test_toggle_out_of_range(self, index):
        dice = DiceSet()
        with pytest.raises(IndexOutOfRangeError, match="Die index"):
            dice.toggle_freeze(index)
        assert dice.snapshot() == DiceSet().snapshot()

    def test_reset_clears_values_and_flags(self, scripted_rng):
        dice = DiceSet(scripted_rng(6, 5, 4, 3, 2))
        dice.roll_all()
        dice.toggle_freeze(1)
        dice.reset()
        assert dice.snapshot() == DiceSet().snapshot()

    def test_default_source_values_in_range(self):
        dice = DiceSet()
        for _ in range(50):
            assert all(1 <= v <= 6 for v in dice.roll_all())
