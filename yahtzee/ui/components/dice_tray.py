"""Dice tray component — renders dice with freeze/unfreeze controls."""

from __future__ import annotations

import streamlit as st

from yahtzee.engine.base import DieSnapshot


def render_dice_tray(
    dice: tuple[DieSnapshot, ...],
    turn_number: int,
    rolls_remaining: int,
    disabled: bool = False,
) -> set[int]:
    """Render dice with one freeze toggle per die.

    Args:
        dice: Current dice snapshot.
        turn_number: Current turn (used in button keys).
        rolls_remaining: Rolls left this turn (used in button keys).
        disabled: Force-disable all buttons.

    Returns:
        Set of die indices whose freeze toggle was pressed.
    """
    if not any(die.is_rolled for die in dice):
        st.markdown(
            '<div class="dice-tray">'
            '<span style="color:var(--text-secondary);font-style:italic;">'
            "Roll the dice to begin your turn."
            "</span></div>",
            unsafe_allow_html=True,
        )

    html_parts = ['<div class="dice-tray">']
    for die in dice:
        classes = ["die"]
        if die.frozen:
            classes.append("frozen")
        if not die.is_rolled:
            classes.append("blank")
        face = die.value if die.is_rolled else "&nbsp;"
        html_parts.append(f'<div class="{" ".join(classes)}">{face}</div>')
    html_parts.append("</div>")
    st.markdown("".join(html_parts), unsafe_allow_html=True)

    toggled: set[int] = set()
    if disabled:
        return toggled

    cols = st.columns(len(dice))
    for i, col in enumerate(cols):
        with col:
            key = f"freeze_{i}_t{turn_number}_r{rolls_remaining}"
            if dice[i].frozen:
                if st.button("Frozen", key=key, use_container_width=True, type="primary"):
                    toggled.add(i)
            elif st.button("Freeze", key=key, use_container_width=True):
                toggled.add(i)

    return toggled
