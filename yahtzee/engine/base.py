"""
Yahtzee - Game Engine Base Classes

This module defines the foundational constants, enums and snapshot
dataclasses used throughout the game engine. Snapshots are immutable
(frozen dataclasses) so the presentation layer can never mutate live state.
"""

from dataclasses import dataclass
from enum import Enum, auto

NUM_DICE = 5
DIE_FACES = 6
NUM_CATEGORIES = 13
DEFAULT_ROLLS_PER_TURN = 3
MAX_ROLLS_PER_TURN = 10


class TurnPhase(Enum):
    """Where the current turn stands, keyed by rolls remaining."""
    FRESH = auto()      # No roll yet this turn
    ACTIVE = auto()     # Rolled at least once, rolls remain
    EXHAUSTED = auto()  # No rolls remain; scoring is the only way forward


@dataclass(frozen=True)
class DieSnapshot:
    """
    Read-only view of a single die.

    Attributes:
        value: Face value 1-6, or 0 if not rolled this turn
        frozen: Whether the die is excluded from rerolls
    """
    value: int
    frozen: bool

    @property
    def is_rolled(self) -> bool:
        return self.value != 0


@dataclass(frozen=True)
class CategorySnapshot:
    """
    Read-only view of a scorecard category.

    Attributes:
        name: Display label, unique on the scorecard
        filled: Whether points have been committed
        points: Committed points (0 while unfilled)
    """
    name: str
    filled: bool
    points: int


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for a game session, supplied once at construction.

    Attributes:
        rolls_per_turn: Roll budget at the start of every turn
        seed: Optional seed for the default random source
    """
    rolls_per_turn: int = DEFAULT_ROLLS_PER_TURN
    seed: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration."""
        if isinstance(self.rolls_per_turn, bool) or not isinstance(self.rolls_per_turn, int):
            raise ValueError(
                f"Rolls per turn must be an integer, got {type(self.rolls_per_turn).__name__}."
            )
        if not 1 <= self.rolls_per_turn <= MAX_ROLLS_PER_TURN:
            raise ValueError(
                f"Rolls per turn must be between 1 and {MAX_ROLLS_PER_TURN}, "
                f"got {self.rolls_per_turn}."
            )
