"""
Yahtzee - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

from typing import Callable, Iterable

import pytest

from yahtzee.engine.base import GameConfig
from yahtzee.engine.dice import DiceSet
from yahtzee.engine.scorecard import Scorecard
from yahtzee.engine.turn import TurnController


class ScriptedRandom:
    """Random source that hands out a fixed sequence of faces."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self.calls = 0

    def randint(self, a: int, b: int) -> int:
        if not self._values:
            raise AssertionError("ScriptedRandom ran out of values")
        value = self._values.pop(0)
        assert a <= value <= b
        self.calls += 1
        return value

    def extend(self, values: Iterable[int]) -> None:
        self._values.extend(values)


@pytest.fixture
def scripted_rng() -> Callable[..., ScriptedRandom]:
    """Factory for a ScriptedRandom seeded with the given faces."""
    def _make(*values: int) -> ScriptedRandom:
        return ScriptedRandom(values)
    return _make


@pytest.fixture
def controller_factory() -> Callable[..., tuple[TurnController, Scorecard, ScriptedRandom]]:
    """Build a TurnController over a fresh scorecard and scripted dice."""
    def _make(*values: int, rolls_per_turn: int = 3):
        rng = ScriptedRandom(values)
        scorecard = Scorecard()
        controller = TurnController(
            scorecard=scorecard,
            dice=DiceSet(rng),
            config=GameConfig(rolls_per_turn=rolls_per_turn),
        )
        return controller, scorecard, rng
    return _make


# =============================================================================
# SCORING TEST DATA
# =============================================================================

@pytest.fixture
def canonical_scoring_rolls() -> dict[str, tuple[tuple[int, ...], int, int]]:
    """
    Rolls with the points a canonical category pays.

    Returns:
        Dict mapping name to (dice_values, category_index, expected_points)
    """
    return {
        "fours": ((4, 4, 2, 4, 6), 3, 12),
        "aces_none": ((2, 3, 4, 5, 6), 0, 0),
        "sixes_all": ((6, 6, 6, 6, 6), 5, 30),
        "three_of_a_kind": ((2, 2, 2, 5, 6), 6, 17),
        "three_of_a_kind_miss": ((1, 2, 3, 4, 5), 6, 0),
        "four_of_a_kind": ((3, 3, 3, 3, 1), 7, 13),
        "yahtzee_pays_sum": ((4, 4, 4, 4, 4), 8, 20),
        "small_straight": ((1, 2, 3, 6, 6), 9, 30),
        "large_straight": ((6, 3, 5, 4, 1), 10, 40),
        "full_house_low_run": ((1, 2, 3, 4, 5), 11, 50),
        "full_house_high_run": ((2, 3, 4, 5, 6), 11, 50),
        "full_house_three_two": ((3, 3, 3, 5, 5), 11, 0),
        "chance": ((1, 1, 2, 6, 6), 12, 16),
    }
