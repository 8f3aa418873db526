"""Yahtzee — Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st

from yahtzee.config import configure_logging, get_settings


_RULES = """\
**Goal:** Fill all 13 categories for the highest total!

**Each turn:**
- Up to **{rolls}** rolls of the five dice
- **Freeze** dice to keep them out of the next roll
- Pick one open category to score — this ends the turn
- A category can be scored only once

**Scoring:**
| Category | Points |
|---|---|
| Aces - Sixes | Total of matching dice |
| 3 / 4 of a Kind | Sum of all dice |
| YAHTZEE (5 of a kind) | Sum of all dice |
| Small Straight (3 in a row) | 30 |
| Large Straight (4 in a row) | 40 |
| Full House (5 in a row) | 50 |
| Chance | Sum of all dice |
"""


def _render_sidebar_rules(rolls_per_turn: int) -> None:
    with st.sidebar:
        st.markdown("### Rules")
        st.markdown(_RULES.format(rolls=rolls_per_turn))


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Yahtzee",
        page_icon="🎲",
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    settings = get_settings()
    configure_logging(settings)

    from yahtzee.ui.themes import load_css
    load_css()

    if "page" not in st.session_state:
        st.session_state["page"] = "game"

    # Page routing (lazy imports to avoid circular deps)
    page = st.session_state["page"]

    if page == "game":
        from yahtzee.ui.views.game import render_game_page
        render_game_page()
    elif page == "results":
        from yahtzee.ui.views.results import render_results_page
        render_results_page()
    else:
        st.session_state["page"] = "game"
        st.rerun()

    _render_sidebar_rules(settings.rolls_per_turn)


if __name__ == "__main__":
    main()
