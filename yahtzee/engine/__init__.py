"""
Yahtzee Game Engine.

Pure Python game logic with zero UI dependencies.
Handles dice rolling, freezing, category scoring and the turn state machine.
"""

from yahtzee.engine.base import (
    CategorySnapshot,
    DieSnapshot,
    GameConfig,
    TurnPhase,
)
from yahtzee.engine.categories import (
    CategoryKind,
    Chance,
    NOfAKind,
    NumberMatch,
    ScoreCategory,
    Straight,
    evaluate,
)
from yahtzee.engine.dice import DiceSet, Die
from yahtzee.engine.errors import (
    AlreadyFilledError,
    DiceNotRolledError,
    GameOverError,
    IndexOutOfRangeError,
    InvalidRollError,
    YahtzeeError,
)
from yahtzee.engine.scorecard import Scorecard
from yahtzee.engine.session import GameSession
from yahtzee.engine.turn import (
    CommandResult,
    Quit,
    Roll,
    Score,
    ToggleFreeze,
    TurnController,
)

__all__ = [
    # Data Classes
    "CategorySnapshot",
    "DieSnapshot",
    "GameConfig",
    "CommandResult",
    # Enums
    "TurnPhase",
    # Category kinds
    "CategoryKind",
    "NumberMatch",
    "NOfAKind",
    "Straight",
    "Chance",
    "evaluate",
    # Game objects
    "Die",
    "DiceSet",
    "ScoreCategory",
    "Scorecard",
    "TurnController",
    "GameSession",
    # Commands
    "Roll",
    "ToggleFreeze",
    "Score",
    "Quit",
    # Errors
    "YahtzeeError",
    "AlreadyFilledError",
    "IndexOutOfRangeError",
    "InvalidRollError",
    "DiceNotRolledError",
    "GameOverError",
]
