"""
Yahtzee - Scorecard

Thirteen categories in a fixed canonical order. The scorecard owns its
categories outright; callers address them by index and only ever see
snapshots.
"""

import logging
from typing import Sequence

from yahtzee.engine.base import CategorySnapshot
from yahtzee.engine.categories import (
    CategoryKind,
    Chance,
    NOfAKind,
    NumberMatch,
    ScoreCategory,
    Straight,
)
from yahtzee.engine.validators import validate_index

logger = logging.getLogger(__name__)


# Full House scores as a five-run; YAHTZEE pays the dice sum, not a flat 50.
CANONICAL_CATEGORIES: tuple[tuple[str, CategoryKind], ...] = (
    ("Aces", NumberMatch(1)),
    ("Twos", NumberMatch(2)),
    ("Threes", NumberMatch(3)),
    ("Fours", NumberMatch(4)),
    ("Fives", NumberMatch(5)),
    ("Sixes", NumberMatch(6)),
    ("3 of a Kind", NOfAKind(3)),
    ("4 of a Kind", NOfAKind(4)),
    ("YAHTZEE", NOfAKind(5)),
    ("Small Straight", Straight(3)),
    ("Large Straight", Straight(4)),
    ("Full House", Straight(5)),
    ("Chance", Chance()),
)


class Scorecard:
    """Ordered, fixed collection of the thirteen scoring categories."""

    def __init__(self) -> None:
        self._categories = tuple(
            ScoreCategory(name=name, kind=kind) for name, kind in CANONICAL_CATEGORIES
        )

    def __len__(self) -> int:
        return len(self._categories)

    def category_at(self, index: int) -> CategorySnapshot:
        """Snapshot of the category at ``index``.

        Raises:
            IndexOutOfRangeError: If index is not in [0, 13)
        """
        validate_index(index, len(self._categories), "category")
        return self._categories[index].snapshot()

    def kind_at(self, index: int) -> CategoryKind:
        validate_index(index, len(self._categories), "category")
        return self._categories[index].kind

    def apply_score(self, index: int, dice: Sequence[int]) -> int:
        """
        Evaluate and commit a category in one step.

        Args:
            index: Category index in canonical order
            dice: The five dice values to score

        Returns:
            Points awarded

        Raises:
            IndexOutOfRangeError: If index is not in [0, 13)
            AlreadyFilledError: If the category was already committed
        """
        validate_index(index, len(self._categories), "category")
        category = self._categories[index]
        points = category.evaluate(dice)
        category.commit(points)
        logger.info("Scored %d in %s", points, category.name)
        return points

    def preview(self, dice: Sequence[int]) -> dict[int, int]:
        """Points each open category would pay for ``dice``, keyed by index."""
        return {
            index: category.evaluate(dice)
            for index, category in enumerate(self._categories)
            if not category.filled
        }

    def total_score(self) -> int:
        """Sum of committed points. Unfilled categories contribute 0."""
        return sum(c.points for c in self._categories if c.filled)

    def has_open_category(self) -> bool:
        """True while any category is unfilled."""
        return any(not c.filled for c in self._categories)

    def open_indices(self) -> tuple[int, ...]:
        return tuple(i for i, c in enumerate(self._categories) if not c.filled)

    def categories(self) -> tuple[CategorySnapshot, ...]:
        """Read-only ``(name, filled, points)`` view, in canonical order."""
        return tuple(c.snapshot() for c in self._categories)
