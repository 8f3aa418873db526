"""Results page — final score and the filled scorecard."""

from __future__ import annotations

import streamlit as st

from yahtzee.config import get_settings
from yahtzee.ui.formatting import format_scorecard
from yahtzee.ui.themes.animations import render_game_over_banner
from yahtzee.ui.views.game import get_session


def render_results_page() -> None:
    """Render the end-of-game summary."""
    session = get_session()
    ss = st.session_state
    ss.pop("last_result", None)

    if session.is_complete:
        if get_settings().enable_animations:
            render_game_over_banner(session.total_score)
        else:
            st.markdown(f"## Final score: {session.total_score}")
    else:
        filled = sum(1 for c in session.categories if c.filled)
        st.markdown(
            f"## Game ended early\n"
            f"{filled} of {len(session.categories)} categories filled, "
            f"{session.total_score} points."
        )

    st.code(format_scorecard(session.categories), language=None)

    if st.button("New Game", key="btn_new_game", type="primary"):
        del ss["session"]
        ss["page"] = "game"
        st.rerun()
