"""Page renderers for Yahtzee."""

from yahtzee.ui.views.game import render_game_page
from yahtzee.ui.views.results import render_results_page

__all__ = ["render_game_page", "render_results_page"]
