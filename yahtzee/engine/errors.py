"""
Yahtzee - Game Engine Errors

Every error the engine raises is locally recoverable. A command that raises
one of these leaves the dice, the roll counter and the scorecard unchanged.
"""


class YahtzeeError(Exception):
    """Base class for rejected game commands."""


class AlreadyFilledError(YahtzeeError):
    """The targeted category has already been committed."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Category '{name}' has already been scored.")
        self.name = name


class IndexOutOfRangeError(YahtzeeError, IndexError):
    """A die or category index is outside its valid bounds."""

    def __init__(self, what: str, index: int, size: int) -> None:
        super().__init__(
            f"{what.capitalize()} index {index} is out of range. "
            f"Must be between 0 and {size - 1}."
        )
        self.what = what
        self.index = index
        self.size = size


class InvalidRollError(YahtzeeError):
    """A roll was requested with no rolls remaining this turn."""

    def __init__(self) -> None:
        super().__init__("No rolls remaining this turn. Pick a category to score.")


class DiceNotRolledError(YahtzeeError):
    """A category was picked before the dice were rolled this turn."""

    def __init__(self) -> None:
        super().__init__("Roll the dice before scoring a category.")


class GameOverError(YahtzeeError):
    """The session has ended; only quit is accepted."""

    def __init__(self) -> None:
        super().__init__("The game is over.")
