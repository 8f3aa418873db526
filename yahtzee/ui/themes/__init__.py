"""Visual theme for Yahtzee."""

from yahtzee.ui.themes.animations import (
    load_css,
    render_game_over_banner,
    render_score_popup,
)

__all__ = [
    "load_css",
    "render_game_over_banner",
    "render_score_popup",
]
