"""Turn control buttons — Roll and Quit."""

from __future__ import annotations

import streamlit as st


def render_turn_controls(
    turn_number: int,
    rolls_remaining: int,
    rolls_per_turn: int,
) -> str | None:
    """Render the roll and quit buttons.

    Returns:
        ``"roll"``, ``"quit"``, or ``None`` if no action taken.
    """
    cols = st.columns(2)

    with cols[0]:
        if rolls_remaining == rolls_per_turn:
            roll_label = "Roll Dice"
        elif rolls_remaining > 0:
            roll_label = f"Roll Again ({rolls_remaining} left)"
        else:
            roll_label = "No Rolls Left"

        if st.button(
            roll_label,
            key=f"btn_roll_t{turn_number}_r{rolls_remaining}",
            use_container_width=True,
            disabled=rolls_remaining == 0,
            type="primary",
        ):
            return "roll"

    with cols[1]:
        if st.button("Quit", key="btn_quit", use_container_width=True):
            return "quit"

    if rolls_remaining == 0:
        st.caption("Pick a category on the scorecard to end your turn.")

    return None
