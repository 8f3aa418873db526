"""Scorecard component — the thirteen categories with score buttons."""

from __future__ import annotations

import streamlit as st

from yahtzee.engine.base import CategorySnapshot


def render_scorecard(
    categories: tuple[CategorySnapshot, ...],
    preview: dict[int, int],
    total_score: int,
    turn_number: int,
    can_score: bool,
) -> int | None:
    """Render the scorecard panel.

    Args:
        categories: Category snapshots in canonical order.
        preview: Points each open category would pay for the current dice.
        total_score: Sum of committed points.
        turn_number: Current turn (used in button keys).
        can_score: Whether the dice have been rolled this turn.

    Returns:
        Index of the category the player picked, or ``None``.
    """
    st.markdown(
        f'<div class="scorecard-title">Scorecard &mdash; {total_score} points</div>',
        unsafe_allow_html=True,
    )

    picked: int | None = None
    for index, category in enumerate(categories):
        name_col, action_col = st.columns([3, 2])
        with name_col:
            st.markdown(category.name)
        with action_col:
            if category.filled:
                st.markdown(f"**{category.points}**")
                continue

            label = f"Score {preview[index]}" if index in preview else "Score"
            if st.button(
                label,
                key=f"btn_score_{index}_t{turn_number}",
                use_container_width=True,
                disabled=not can_score,
            ):
                picked = index

    return picked
