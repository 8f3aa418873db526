"""Game page — the play area with dice, controls, and scorecard."""

from __future__ import annotations

import streamlit as st

from yahtzee.config import get_settings
from yahtzee.engine import (
    CommandResult,
    GameSession,
    Quit,
    Roll,
    Score,
    ToggleFreeze,
    TurnPhase,
)
from yahtzee.ui.components.dice_tray import render_dice_tray
from yahtzee.ui.components.scorecard import render_scorecard
from yahtzee.ui.components.turn_controls import render_turn_controls
from yahtzee.ui.themes.animations import render_score_popup


def get_session() -> GameSession:
    """The live game for this browser session, created on first use."""
    ss = st.session_state
    if "session" not in ss:
        ss["session"] = GameSession.from_settings(get_settings())
    return ss["session"]


def _show_last_result(session: GameSession) -> None:
    result: CommandResult | None = st.session_state.pop("last_result", None)
    if result is None:
        return
    if not result.ok:
        st.warning(str(result.error))
    elif isinstance(result.command, Score) and get_settings().enable_animations:
        name = session.categories[result.command.category_index].name
        render_score_popup(result.points, name)


def _apply(session: GameSession, command) -> None:
    """Run a command, stash its result for the next render, and rerun."""
    result = session.execute(command)
    st.session_state["last_result"] = result
    if session.is_over:
        st.session_state["page"] = "results"
    st.rerun()


def render_game_page() -> None:
    """Render the main game page."""
    session = get_session()

    if session.is_over:
        st.session_state["page"] = "results"
        st.rerun()
        return

    st.markdown(f"### Turn {session.turn_number} of {len(session.categories)}")
    _show_last_result(session)

    left, right = st.columns([3, 2])

    with left:
        toggled = render_dice_tray(
            session.dice,
            turn_number=session.turn_number,
            rolls_remaining=session.rolls_remaining,
        )
        for index in sorted(toggled):
            _apply(session, ToggleFreeze(index))

        action = render_turn_controls(
            turn_number=session.turn_number,
            rolls_remaining=session.rolls_remaining,
            rolls_per_turn=session.config.rolls_per_turn,
        )
        if action == "roll":
            _apply(session, Roll())
        elif action == "quit":
            _apply(session, Quit())

    with right:
        picked = render_scorecard(
            session.categories,
            preview=session.preview,
            total_score=session.total_score,
            turn_number=session.turn_number,
            can_score=session.phase is not TurnPhase.FRESH,
        )
        if picked is not None:
            _apply(session, Score(picked))
