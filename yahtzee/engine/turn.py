"""
Yahtzee - Turn Controller

State machine sequencing rolls, freezes and category commitment.

Turn Rules:
    - A turn starts Fresh with the full roll budget and blank dice
    - Roll is rejected once the budget is spent
    - Freeze/unfreeze is accepted any time during a turn
    - Score needs at least one roll this turn; it commits the category,
      then clears every die and restores the roll budget
    - Quit is accepted from any state and ends the session
    - Once every category is filled only Quit is accepted

Every command is validated before anything is mutated, so a rejected command
leaves the dice, the roll counter and the scorecard exactly as they were.
"""

import logging
from dataclasses import dataclass
from typing import Union

from yahtzee.engine.base import DieSnapshot, GameConfig, TurnPhase
from yahtzee.engine.dice import DiceSet
from yahtzee.engine.errors import (
    DiceNotRolledError,
    GameOverError,
    InvalidRollError,
    YahtzeeError,
)
from yahtzee.engine.scorecard import Scorecard
from yahtzee.engine.validators import validate_index

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Roll:
    """Roll every unfrozen die."""


@dataclass(frozen=True)
class ToggleFreeze:
    """Freeze or unfreeze one die."""
    die_index: int


@dataclass(frozen=True)
class Score:
    """Commit the current dice to a category."""
    category_index: int


@dataclass(frozen=True)
class Quit:
    """End the session."""


Command = Union[Roll, ToggleFreeze, Score, Quit]


@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of a command issued through ``TurnController.execute``.

    Attributes:
        command: The command that was processed
        error: The rejection reason, or None on success
        points: Points committed (Score commands only)
        dice: Dice values after a successful Roll
        frozen: Frozen flag after a successful ToggleFreeze
    """
    command: Command
    error: YahtzeeError | None = None
    points: int | None = None
    dice: tuple[int, ...] | None = None
    frozen: bool | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __str__(self) -> str:
        if self.error is not None:
            return f"Rejected: {self.error}"
        if self.points is not None:
            return f"Scored {self.points} points"
        return "OK"


class TurnController:
    """
    Drives the turn state machine over one DiceSet and one Scorecard.

    The controller owns the dice and the roll counter. It commits scores
    through the scorecard it is given.
    """

    def __init__(
        self,
        scorecard: Scorecard,
        dice: DiceSet | None = None,
        config: GameConfig | None = None,
    ) -> None:
        self._config = config if config is not None else GameConfig()
        self._scorecard = scorecard
        self._dice = dice if dice is not None else DiceSet()
        self._rolls_remaining = self._config.rolls_per_turn
        self._turn_number = 1
        self._quit = False

    # -- Read-only state -------------------------------------------------

    @property
    def rolls_remaining(self) -> int:
        return self._rolls_remaining

    @property
    def rolls_per_turn(self) -> int:
        return self._config.rolls_per_turn

    @property
    def turn_number(self) -> int:
        return self._turn_number

    @property
    def phase(self) -> TurnPhase:
        if self._rolls_remaining == self._config.rolls_per_turn:
            return TurnPhase.FRESH
        if self._rolls_remaining == 0:
            return TurnPhase.EXHAUSTED
        return TurnPhase.ACTIVE

    @property
    def quit_requested(self) -> bool:
        return self._quit

    @property
    def is_over(self) -> bool:
        """True after quit or once every category is filled."""
        return self._quit or not self._scorecard.has_open_category()

    def dice(self) -> tuple[DieSnapshot, ...]:
        return self._dice.snapshot()

    def preview(self) -> dict[int, int]:
        """Points each open category would pay for the current dice.

        Empty before the first roll of a turn.
        """
        if self.phase is TurnPhase.FRESH:
            return {}
        return self._scorecard.preview(self._dice.values())

    # -- Commands ---------------------------------------------------------

    def roll(self) -> tuple[int, ...]:
        """Roll every unfrozen die and spend one roll.

        Raises:
            GameOverError: If the session has ended
            InvalidRollError: If no rolls remain this turn
        """
        self._ensure_in_progress()
        if self._rolls_remaining == 0:
            raise InvalidRollError()

        values = self._dice.roll_all()
        self._rolls_remaining -= 1
        logger.info(
            "Turn %d: rolled %s (%d rolls remaining)",
            self._turn_number, values, self._rolls_remaining,
        )
        return values

    def toggle_freeze(self, die_index: int) -> bool:
        """Freeze or unfreeze one die. Returns the new frozen flag.

        Raises:
            GameOverError: If the session has ended
            IndexOutOfRangeError: If die_index is not in [0, 5)
        """
        self._ensure_in_progress()
        frozen = self._dice.toggle_freeze(die_index)
        logger.debug("Die %d %s", die_index, "frozen" if frozen else "unfrozen")
        return frozen

    def score(self, category_index: int) -> int:
        """
        Commit the current dice to a category and start the next turn.

        Args:
            category_index: Category index in canonical order

        Returns:
            Points awarded

        Raises:
            GameOverError: If the session has ended
            IndexOutOfRangeError: If category_index is not in [0, 13)
            AlreadyFilledError: If the category was already committed
            DiceNotRolledError: If the dice have not been rolled this turn
        """
        self._ensure_in_progress()
        validate_index(category_index, len(self._scorecard), "category")
        if self.phase is TurnPhase.FRESH:
            raise DiceNotRolledError()

        points = self._scorecard.apply_score(category_index, self._dice.values())
        self._end_turn()
        if not self._scorecard.has_open_category():
            logger.info("Game over: final score %d", self._scorecard.total_score())
        return points

    def quit(self) -> None:
        """End the session. Nothing else is mutated."""
        if not self._quit:
            logger.info("Quit on turn %d with %d points", self._turn_number, self._scorecard.total_score())
        self._quit = True

    def execute(self, command: Command) -> CommandResult:
        """
        Run one command, reporting rejections as a result instead of raising.

        Args:
            command: Roll, ToggleFreeze, Score or Quit

        Returns:
            CommandResult carrying the error kind on rejection
        """
        try:
            if isinstance(command, Roll):
                return CommandResult(command=command, dice=self.roll())
            if isinstance(command, ToggleFreeze):
                return CommandResult(command=command, frozen=self.toggle_freeze(command.die_index))
            if isinstance(command, Score):
                return CommandResult(command=command, points=self.score(command.category_index))
            if isinstance(command, Quit):
                self.quit()
                return CommandResult(command=command)
        except YahtzeeError as exc:
            logger.info("Rejected %s: %s", command, exc)
            return CommandResult(command=command, error=exc)

        raise ValueError(f"Unknown command: {command!r}")

    # -- Internals --------------------------------------------------------

    def _ensure_in_progress(self) -> None:
        if self.is_over:
            raise GameOverError()

    def _end_turn(self) -> None:
        self._dice.reset()
        self._rolls_remaining = self._config.rolls_per_turn
        if self._scorecard.has_open_category():
            self._turn_number += 1
