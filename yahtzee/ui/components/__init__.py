"""UI components for Yahtzee."""

from yahtzee.ui.components.dice_tray import render_dice_tray
from yahtzee.ui.components.scorecard import render_scorecard
from yahtzee.ui.components.turn_controls import render_turn_controls

__all__ = [
    "render_dice_tray",
    "render_scorecard",
    "render_turn_controls",
]
