"""CSS injection and HTML animation helpers."""

from pathlib import Path

import streamlit as st


def load_css() -> None:
    """Inject the table-felt CSS theme into the Streamlit app."""
    css_path = Path(__file__).parent / "felt.css"
    css_text = css_path.read_text(encoding="utf-8")
    st.markdown(f"<style>{css_text}</style>", unsafe_allow_html=True)


def render_score_popup(points: int, category: str) -> None:
    """Render an animated popup for a committed category."""
    st.markdown(
        f'<div class="score-popup">+{points} <span>{category}</span></div>',
        unsafe_allow_html=True,
    )


def render_game_over_banner(total_score: int) -> None:
    """Render the end-of-game banner with glow animation."""
    st.markdown(
        '<div class="game-over-banner">'
        "<h1>Scorecard Complete!</h1>"
        f"<p>Final score: {total_score}</p>"
        "</div>",
        unsafe_allow_html=True,
    )
