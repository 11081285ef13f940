"""Results page — victory screen and final lives."""

from __future__ import annotations

import streamlit as st

from mackac.engine.round_engine import RoundEngine
from mackac.ui.themes.animations import render_victory_animation
from mackac.ui.views.home import start_new_game


def render_results_page() -> None:
    """Render the results / victory page."""
    ss = st.session_state
    engine: RoundEngine | None = ss.get("engine")

    if engine is None or engine.winner is None:
        ss["page"] = "home"
        st.rerun()
        return

    render_victory_animation(engine.winner.name)

    st.subheader("Final Lives")
    for participant in engine.participants:
        style = "font-weight:700;" if participant is engine.winner else ""
        st.markdown(
            f'<div class="player-row" style="{style}">'
            f'<span class="name">{participant.name}</span>'
            f'<span class="score">{"&#9829;" * participant.health}</span>'
            f"</div>",
            unsafe_allow_html=True,
        )

    st.caption(f"{engine.claims_made} claims made.")
    st.divider()

    col1, col2 = st.columns(2)

    with col1:
        if st.button("Play Again", type="primary", use_container_width=True):
            first, second = engine.config.player_names
            start_new_game(first, second, engine.config.starting_health)
            st.rerun()

    with col2:
        if st.button("Return Home", use_container_width=True):
            _return_home()


def _return_home():
    """Clean up session and go home."""
    ss = st.session_state
    for key in ("engine", "computer"):
        ss.pop(key, None)
    ss["page"] = "home"
    st.rerun()
