"""
Yahtzee - Dice

A single Die carries a face value and a frozen flag; a DiceSet owns the five
dice used for the whole game. Randomness comes from an injectable source so
tests can script the outcome of every roll.
"""

import random
from dataclasses import dataclass
from typing import Protocol

from yahtzee.engine.base import DIE_FACES, NUM_DICE, DieSnapshot
from yahtzee.engine.validators import validate_index


class RandomSource(Protocol):
    """Anything with ``randint``; ``random.Random`` satisfies it."""

    def randint(self, a: int, b: int) -> int: ...


@dataclass
class Die:
    """
    A single six-sided die.

    Attributes:
        value: Face value 1-6, or 0 while unrolled
        frozen: Frozen dice are skipped by rolls
    """
    value: int = 0
    frozen: bool = False

    def roll(self, rng: RandomSource) -> int:
        """Draw a new face unless frozen. Returns the resulting value."""
        if not self.frozen:
            self.value = rng.randint(1, DIE_FACES)
        return self.value

    def toggle_freeze(self) -> bool:
        """Flip the frozen flag. The value is untouched."""
        self.frozen = not self.frozen
        return self.frozen

    def reset(self) -> None:
        """Return to the unrolled, unfrozen state."""
        self.value = 0
        self.frozen = False

    def snapshot(self) -> DieSnapshot:
        return DieSnapshot(value=self.value, frozen=self.frozen)


class DiceSet:
    """
    Fixed-size ordered collection of five dice.

    Order only matters for addressing a die by index; scoring looks at the
    values as a multiset.
    """

    def __init__(self, rng: RandomSource | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._dice = tuple(Die() for _ in range(NUM_DICE))

    def __len__(self) -> int:
        return len(self._dice)

    def roll_all(self) -> tuple[int, ...]:
        """Roll every unfrozen die independently.

        Returns:
            The face values after the roll, in die order
        """
        return tuple(die.roll(self._rng) for die in self._dice)

    def toggle_freeze(self, index: int) -> bool:
        """Flip the frozen flag on one die.

        Raises:
            IndexOutOfRangeError: If index is not in [0, 5)
        """
        validate_index(index, len(self._dice), "die")
        return self._dice[index].toggle_freeze()

    def reset(self) -> None:
        """Clear every value and frozen flag for the next turn."""
        for die in self._dice:
            die.reset()

    def values(self) -> tuple[int, ...]:
        return tuple(die.value for die in self._dice)

    def snapshot(self) -> tuple[DieSnapshot, ...]:
        """Read-only ``(value, frozen)`` view of every die, in order."""
        return tuple(die.snapshot() for die in self._dice)
