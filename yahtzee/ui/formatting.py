"""Plain-text rendering of dice and the scorecard."""

from __future__ import annotations

from typing import Sequence

from yahtzee.engine.base import CategorySnapshot, DieSnapshot

SCORECARD_COLUMNS = 5


def format_die(die: DieSnapshot) -> str:
    """``[ 4 ]`` for a free die, ``< 4 >`` for a frozen one; blank face if unrolled."""
    left, right = ("<", ">") if die.frozen else ("[", "]")
    face = str(die.value) if die.is_rolled else " "
    return f"{left} {face} {right}"


def format_dice(dice: Sequence[DieSnapshot]) -> str:
    return " ".join(format_die(die) for die in dice)


def format_category(category: CategorySnapshot) -> str:
    points = str(category.points) if category.filled else ""
    return f"{category.name}: {points:<3}"


def format_scorecard(
    categories: Sequence[CategorySnapshot],
    columns: int = SCORECARD_COLUMNS,
) -> str:
    """Lay the categories out in rows of at most ``columns`` cells."""
    if columns < 1:
        raise ValueError(f"Columns must be positive, got {columns}.")

    rows = []
    for start in range(0, len(categories), columns):
        cells = categories[start:start + columns]
        rows.append(" ".join(format_category(c) for c in cells).rstrip())
    return "\n".join(rows)
