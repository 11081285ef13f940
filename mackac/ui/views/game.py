"""Game page — dice, claims, decisions and the scoreboard."""

from __future__ import annotations

import logging

import streamlit as st

from mackac.engine.base import Decision, Phase, Seat
from mackac.engine.errors import RandomSourceFailure
from mackac.engine.players import ComputerController
from mackac.engine.round_engine import RoundEngine
from mackac.ui.components.dice_tray import render_dice_tray
from mackac.ui.components.scoreboard import render_scoreboard
from mackac.ui.components.turn_controls import (
    render_claim_controls,
    render_decision_controls,
    render_roll_button,
)
from mackac.ui.themes.animations import render_resolution_banner


logger = logging.getLogger(__name__)

HUMAN_SEAT = Seat.A


def render_game_page() -> None:
    """Render the main game page."""
    ss = st.session_state
    engine: RoundEngine | None = ss.get("engine")
    computer: ComputerController | None = ss.get("computer")

    if engine is None or computer is None:
        ss["page"] = "home"
        st.rerun()
        return

    if engine.is_over:
        ss["page"] = "results"
        st.rerun()
        return

    me = engine.participant(HUMAN_SEAT)
    turn_key = len(engine.events)

    # --- Layout: game area (3) | scoreboard (1) ---
    game_col, score_col = st.columns([3, 1])

    with score_col:
        render_scoreboard(
            participants=engine.participants,
            active_name=engine.active.name,
            starting_health=engine.config.starting_health,
            threshold=engine.threshold,
            my_name=me.name,
        )

    with game_col:
        try:
            _render_phase(engine, computer, turn_key)
        except RandomSourceFailure:
            logger.exception("Random source failed mid-game")
            st.error("The dice are broken. The game cannot continue.")


def _render_phase(engine: RoundEngine, computer: ComputerController, turn_key: int) -> None:
    phase = engine.phase
    my_turn = engine.active_seat is HUMAN_SEAT

    if phase is Phase.RESOLVED:
        _render_resolution(engine, turn_key)
        return

    if phase.is_claim_phase and not my_turn:
        # Computer claims without waiting for input
        actual = engine.roll()
        engine.announce(computer.choose_claim(actual, engine.threshold))
        st.rerun()
        return

    if phase.is_claim_phase:
        st.subheader("Your Claim")
        if not engine.has_rolled:
            render_dice_tray(None)
            if render_roll_button(turn_key):
                engine.roll()
                st.rerun()
            return

        render_dice_tray(engine.pending_claim, caption="Only you can see this.")
        action = render_claim_controls(turn_key, engine.threshold)
        if action is not None:
            _, declared = action
            claim = engine.announce(declared)
            engine.decide(computer.choose_decision(claim, engine.threshold))
            st.rerun()
        return

    if phase is Phase.AWAITING_CHALLENGE_DECISION:
        st.subheader(f"{engine.active.name} claims {engine.pending_claim}")
        render_dice_tray(engine.pending_claim, hidden=True)
        decision = render_decision_controls(turn_key)
        if decision is not None:
            engine.decide(decision)
            st.rerun()


def _render_resolution(engine: RoundEngine, turn_key: int) -> None:
    resolution = engine.last_resolution
    st.subheader(f"{resolution.claimant} claimed {resolution.claim}")
    render_resolution_banner(resolution)
    if resolution.outcome.deals_damage or resolution.decision is Decision.CHALLENGE:
        render_dice_tray(resolution.actual, caption="What was under the cup.")

    if st.button("Continue", key=f"btn_continue_{turn_key}", use_container_width=True, type="primary"):
        engine.advance()
        st.rerun()
