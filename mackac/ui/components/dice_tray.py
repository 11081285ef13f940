"""Dice tray component — renders a throw under or out of the cup."""

from __future__ import annotations

import streamlit as st

from mackac.engine.throws import Throw


def throw_html(throw: Throw | None, hidden: bool = False) -> str:
    """Build the HTML for a two-dice row.

    Args:
        throw: The throw to show, or None for an empty tray.
        hidden: Show the cup instead of the faces.

    Returns:
        HTML markup for ``st.markdown(..., unsafe_allow_html=True)``.
    """
    if throw is None or not throw.is_rolled:
        return (
            '<div class="dice-tray">'
            '<span style="color:var(--text-secondary);font-style:italic;">'
            "Roll the dice to begin your turn."
            "</span></div>"
        )

    classes = ["die"]
    if hidden:
        classes.append("hidden")
    elif throw.is_special:
        classes.append("special")
    elif throw.is_double:
        classes.append("double")

    html_parts = ['<div class="dice-tray">']
    for face in (throw.a.face, throw.b.face):
        label = "?" if hidden else str(face)
        html_parts.append(f'<div class="{" ".join(classes)}">{label}</div>')
    html_parts.append("</div>")
    return "".join(html_parts)


def render_dice_tray(throw: Throw | None, hidden: bool = False, caption: str | None = None) -> None:
    """Render a throw, optionally with a caption underneath."""
    st.markdown(throw_html(throw, hidden), unsafe_allow_html=True)
    if caption:
        st.caption(caption)
