"""
Yahtzee - Input Validation Utilities

Provides validation functions for game engine inputs. Validators either
return normalized data or raise a descriptive exception: ValueError for
malformed data, IndexOutOfRangeError for out-of-bounds indices.
"""

from typing import Sequence

from yahtzee.engine.base import DIE_FACES, NUM_DICE
from yahtzee.engine.errors import IndexOutOfRangeError


def validate_dice_values(
    values: Sequence[int],
    count: int = NUM_DICE,
    allow_unrolled: bool = False,
) -> tuple[int, ...]:
    """
    Validate and normalize a full set of dice.

    Args:
        values: Sequence of dice values to validate
        count: Exact number of dice required
        allow_unrolled: Accept 0 for a die that has never been rolled

    Returns:
        Validated values as a tuple

    Raises:
        ValueError: If the count is wrong or any value is not a valid face
    """
    values_tuple = tuple(values)
    min_value = 0 if allow_unrolled else 1

    if len(values_tuple) != count:
        raise ValueError(f"Exactly {count} dice required, got {len(values_tuple)}.")

    for i, value in enumerate(values_tuple):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Die value at index {i} must be an integer, got {type(value).__name__}.")
        if not (min_value <= value <= DIE_FACES):
            raise ValueError(
                f"Die value at index {i} is {value}, must be between {min_value} and {DIE_FACES}."
            )

    return values_tuple


def validate_index(index: int, size: int, what: str) -> int:
    """
    Validate a die or category index.

    Args:
        index: Index to validate
        size: Number of addressable entries
        what: Label used in the error message ("die", "category")

    Returns:
        Validated index

    Raises:
        IndexOutOfRangeError: If index is not an int in [0, size)
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise IndexOutOfRangeError(what, index, size)

    if not (0 <= index < size):
        raise IndexOutOfRangeError(what, index, size)

    return index


def validate_score(score: int) -> int:
    """
    Validate a points value about to be committed.

    Raises:
        ValueError: If score is not a non-negative integer
    """
    if isinstance(score, bool) or not isinstance(score, int):
        raise ValueError(f"Score must be an integer, got {type(score).__name__}.")

    if score < 0:
        raise ValueError(f"Score cannot be negative, got {score}.")

    return score
