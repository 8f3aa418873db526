"""
Yahtzee - Scoring Categories

Each scorecard category pairs a display name with one of four rule kinds.
The kinds are plain frozen dataclasses and ``evaluate`` is the only place
that knows how to turn a kind and a set of dice into points.

Scoring Rules:
    - NumberMatch(face): face × number of dice showing face
    - NOfAKind(threshold): sum of all dice if some face appears at least
      threshold times, else 0 (threshold 0 always pays)
    - Straight(length): length × 10 if the distinct faces contain a run of
      length consecutive values, else 0
    - Chance: sum of all dice, unconditionally

Dice showing 0 were frozen before their first roll and contribute no face.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Sequence, Union

from yahtzee.engine.base import CategorySnapshot, DIE_FACES, NUM_DICE
from yahtzee.engine.errors import AlreadyFilledError
from yahtzee.engine.validators import validate_dice_values, validate_score

STRAIGHT_POINTS_PER_DIE = 10


@dataclass(frozen=True)
class NumberMatch:
    """Pays the total of the dice showing ``face``."""
    face: int

    def __post_init__(self) -> None:
        if not 1 <= self.face <= DIE_FACES:
            raise ValueError(f"Face must be between 1 and {DIE_FACES}, got {self.face}.")


@dataclass(frozen=True)
class NOfAKind:
    """Pays the sum of all dice when some face appears ``threshold`` times."""
    threshold: int

    def __post_init__(self) -> None:
        if not 0 <= self.threshold <= NUM_DICE:
            raise ValueError(f"Threshold must be between 0 and {NUM_DICE}, got {self.threshold}.")


@dataclass(frozen=True)
class Straight:
    """Pays ``length * 10`` for a run of ``length`` consecutive faces."""
    length: int

    def __post_init__(self) -> None:
        if not 3 <= self.length <= NUM_DICE:
            raise ValueError(f"Straight length must be between 3 and {NUM_DICE}, got {self.length}.")


@dataclass(frozen=True)
class Chance:
    """Pays the sum of all dice."""


CategoryKind = Union[NumberMatch, NOfAKind, Straight, Chance]


def straight_windows(length: int) -> tuple[frozenset[int], ...]:
    """All runs of ``length`` consecutive faces, lowest first (e.g. 1-2-3-4, 2-3-4-5, 3-4-5-6)."""
    return tuple(
        frozenset(range(start, start + length))
        for start in range(1, DIE_FACES - length + 2)
    )


def _score_number_match(face: int, values: tuple[int, ...]) -> int:
    return face * values.count(face)


def _score_n_of_a_kind(threshold: int, values: tuple[int, ...]) -> int:
    counts = Counter(v for v in values if v != 0)
    max_count = max(counts.values(), default=0)
    if max_count >= threshold:
        return sum(values)
    return 0


def _score_straight(length: int, values: tuple[int, ...]) -> int:
    # With five dice a length-5 window can only be a subset when it is the
    # whole distinct set, so {1..5} and {2..6} are the only five-runs.
    present = set(values)
    if any(window <= present for window in straight_windows(length)):
        return length * STRAIGHT_POINTS_PER_DIE
    return 0


def evaluate(kind: CategoryKind, dice: Sequence[int]) -> int:
    """
    Calculate the points a category kind pays for a set of dice.

    Pure: nothing is committed.

    Args:
        kind: The category rule
        dice: Five dice values (0 allowed for a never-rolled die)

    Returns:
        Points the dice are worth under this rule

    Raises:
        ValueError: If the dice are malformed or the kind is unknown
    """
    values = validate_dice_values(dice, allow_unrolled=True)

    if isinstance(kind, NumberMatch):
        return _score_number_match(kind.face, values)
    if isinstance(kind, NOfAKind):
        return _score_n_of_a_kind(kind.threshold, values)
    if isinstance(kind, Straight):
        return _score_straight(kind.length, values)
    if isinstance(kind, Chance):
        return _score_n_of_a_kind(0, values)

    raise ValueError(f"Unknown category kind: {kind!r}")


@dataclass
class ScoreCategory:
    """
    One slot on the scorecard.

    Attributes:
        name: Display label, unique on the scorecard
        kind: Scoring rule for this slot
        filled: Set once, when points are committed
        points: Committed points, fixed after commit
    """
    name: str
    kind: CategoryKind
    filled: bool = False
    points: int = 0

    def evaluate(self, dice: Sequence[int]) -> int:
        """Points this category would pay for ``dice``.

        Raises:
            AlreadyFilledError: If the category has been committed
        """
        if self.filled:
            raise AlreadyFilledError(self.name)
        return evaluate(self.kind, dice)

    def commit(self, points: int) -> None:
        """Record the final points for this category. Allowed once.

        Raises:
            AlreadyFilledError: If the category has been committed
            ValueError: If points is not a non-negative integer
        """
        if self.filled:
            raise AlreadyFilledError(self.name)
        self.points = validate_score(points)
        self.filled = True

    def snapshot(self) -> CategorySnapshot:
        return CategorySnapshot(name=self.name, filled=self.filled, points=self.points)
