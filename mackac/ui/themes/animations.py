"""CSS injection and HTML animation helpers for the tavern theme."""

from pathlib import Path

import streamlit as st

from mackac.engine.base import Outcome, Resolution
from mackac.engine.events import describe_outcome


_OUTCOME_CLASSES: dict[Outcome, str] = {
    Outcome.TRUSTED: "trusted",
    Outcome.TRUTH_UPHELD: "truth-upheld",
    Outcome.LIE_CAUGHT: "lie-caught",
    Outcome.OUT_OF_ORDER: "lie-caught",
    Outcome.SUSPICION_CAUGHT_LIE: "lie-caught",
    Outcome.SUSPICION_WRONGED: "truth-upheld",
}


def load_css() -> None:
    """Inject the tavern CSS theme into the Streamlit app."""
    css_path = Path(__file__).parent / "tavern.css"
    css_text = css_path.read_text(encoding="utf-8")
    st.markdown(f"<style>{css_text}</style>", unsafe_allow_html=True)


def render_resolution_banner(resolution: Resolution) -> None:
    """Render the outcome of a claim, with the loser underneath."""
    css_class = _OUTCOME_CLASSES[resolution.outcome]
    loser = f"<p>{resolution.damaged} loses a life.</p>" if resolution.damaged else ""
    st.markdown(
        f'<div class="resolution-banner {css_class}">'
        f"<h3>{describe_outcome(resolution.outcome)}</h3>"
        f"{loser}"
        "</div>",
        unsafe_allow_html=True,
    )


def render_victory_animation(name: str) -> None:
    """Render the victory overlay with glow animation."""
    st.markdown(
        '<div class="victory-overlay">'
        '<span class="crown">&#9813;</span>'
        f"<h1>{name} Wins!</h1>"
        "<p>The last one standing takes the table.</p>"
        "</div>",
        unsafe_allow_html=True,
    )
