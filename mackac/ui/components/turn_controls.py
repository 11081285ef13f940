"""Turn control buttons — Roll, Announce, Declare, Trust, Challenge."""

from __future__ import annotations

import streamlit as st

from mackac.engine.base import Decision
from mackac.engine.catalog import catalog_throws
from mackac.engine.throws import Throw
from mackac.engine.validators import parse_declaration


def render_roll_button(turn_key: int) -> bool:
    """Render the roll button. Returns True when pressed."""
    return st.button(
        "Roll Dice",
        key=f"btn_roll_{turn_key}",
        use_container_width=True,
        type="primary",
    )


def render_claim_controls(turn_key: int, threshold: Throw) -> tuple[str, Throw | None] | None:
    """Render the announce/declare controls after rolling.

    Args:
        turn_key: Unique number for this turn (used in widget keys).
        threshold: Preselects the cheapest declaration that meets it.

    Returns:
        ``("truth", None)``, ``("declare", throw)``, or ``None`` if no action taken.
    """
    labels = {t.code: str(t) for t in catalog_throws()}
    options = list(labels)
    default = options.index(threshold.code)

    cols = st.columns(2)

    with cols[0]:
        if st.button(
            "Announce the Truth",
            key=f"btn_truth_{turn_key}",
            use_container_width=True,
            type="primary",
        ):
            return ("truth", None)

    with cols[1]:
        declared = st.selectbox(
            "Or declare",
            options=options,
            index=default,
            format_func=labels.get,
            key=f"sel_declare_{turn_key}",
            label_visibility="collapsed",
        )
        if st.button(
            "Declare",
            key=f"btn_declare_{turn_key}",
            use_container_width=True,
        ):
            return ("declare", parse_declaration(declared))

    return None


def render_decision_controls(turn_key: int) -> Decision | None:
    """Render Trust / Challenge buttons.

    Returns:
        The chosen decision, or ``None`` if no action taken.
    """
    cols = st.columns(2)

    with cols[0]:
        if st.button(
            "Trust",
            key=f"btn_trust_{turn_key}",
            use_container_width=True,
            type="primary",
        ):
            return Decision.TRUST

    with cols[1]:
        if st.button(
            "Challenge!",
            key=f"btn_challenge_{turn_key}",
            use_container_width=True,
        ):
            return Decision.CHALLENGE

    return None
