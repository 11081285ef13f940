"""Scoreboard component — lives, turn indicator and threshold."""

from __future__ import annotations

import streamlit as st

from mackac.engine.participant import Participant
from mackac.engine.throws import Throw


def render_scoreboard(
    participants: tuple[Participant, Participant],
    active_name: str,
    starting_health: int,
    threshold: Throw,
    my_name: str,
) -> None:
    """Render the scoreboard panel.

    Args:
        participants: Both participants, seat A first.
        active_name: Name of the participant making the current claim.
        starting_health: Lives each participant started with.
        threshold: The throw the next claim has to meet.
        my_name: The local player's name.
    """
    html = ['<div class="scoreboard">']
    html.append(f'<div class="scoreboard-title">To beat: {threshold}</div>')

    for participant in participants:
        is_active = participant.name == active_name
        is_me = participant.name == my_name

        row_classes = ["player-row"]
        if is_active:
            row_classes.append("active")
        if is_me:
            row_classes.append("is-me")

        name_display = participant.name
        if is_me:
            name_display += " (You)"

        indicator = "&#127922; " if is_active else ""
        lost = starting_health - participant.health
        hearts = "&#9829;" * participant.health + "&#9825;" * lost

        html.append(
            f'<div class="{" ".join(row_classes)}">'
            f'<span class="name">{indicator}{name_display}</span>'
            f'<span class="score">{hearts}</span>'
            f"</div>"
        )

    html.append("</div>")
    st.markdown("".join(html), unsafe_allow_html=True)
