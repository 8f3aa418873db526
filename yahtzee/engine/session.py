"""
Yahtzee - Game Session

Top-level owner of one Scorecard and one TurnController for the lifetime of
a game. This is the surface the presentation layer talks to.
"""

import logging
import random

from yahtzee.engine.base import CategorySnapshot, DieSnapshot, GameConfig, TurnPhase
from yahtzee.engine.dice import DiceSet, RandomSource
from yahtzee.engine.scorecard import Scorecard
from yahtzee.engine.turn import Command, CommandResult, TurnController

logger = logging.getLogger(__name__)


class GameSession:
    """A single local player's game, from the first roll to the last category."""

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        if rng is None:
            rng = random.Random(self.config.seed)
        self._scorecard = Scorecard()
        self._controller = TurnController(
            scorecard=self._scorecard,
            dice=DiceSet(rng),
            config=self.config,
        )
        logger.info("New game: %d rolls per turn", self.config.rolls_per_turn)

    @classmethod
    def from_settings(cls, settings, rng: RandomSource | None = None) -> "GameSession":
        """Build a session from application settings."""
        return cls(config=settings.game_config(), rng=rng)

    def execute(self, command: Command) -> CommandResult:
        return self._controller.execute(command)

    @property
    def dice(self) -> tuple[DieSnapshot, ...]:
        return self._controller.dice()

    @property
    def categories(self) -> tuple[CategorySnapshot, ...]:
        return self._scorecard.categories()

    @property
    def total_score(self) -> int:
        return self._scorecard.total_score()

    @property
    def rolls_remaining(self) -> int:
        return self._controller.rolls_remaining

    @property
    def phase(self) -> TurnPhase:
        return self._controller.phase

    @property
    def turn_number(self) -> int:
        return self._controller.turn_number

    @property
    def preview(self) -> dict[int, int]:
        return self._controller.preview()

    @property
    def is_over(self) -> bool:
        return self._controller.is_over

    @property
    def quit_requested(self) -> bool:
        return self._controller.quit_requested

    @property
    def is_complete(self) -> bool:
        """True when every category has been filled."""
        return not self._scorecard.has_open_category()
