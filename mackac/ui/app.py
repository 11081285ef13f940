"""Mačkáč — Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st

from mackac.config.settings import configure_logging, get_settings


def _render_sidebar_rules() -> None:
    """Show the rules in the sidebar during a game."""
    from mackac.ui.views.home import RULES

    with st.sidebar:
        st.divider()
        st.markdown("### Mačkáč Rules")
        st.markdown(RULES)


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Mačkáč",
        page_icon="🎲",
        layout="wide",
        initial_sidebar_state="collapsed",
    )
    configure_logging(get_settings())

    from mackac.ui.themes import load_css
    load_css()

    # Session state defaults
    if "page" not in st.session_state:
        st.session_state["page"] = "home"

    # Page routing (lazy imports to avoid circular deps)
    page = st.session_state["page"]

    if page == "home":
        from mackac.ui.views.home import render_home_page
        render_home_page()
    elif page == "game":
        from mackac.ui.views.game import render_game_page
        render_game_page()
        _render_sidebar_rules()
    elif page == "results":
        from mackac.ui.views.results import render_results_page
        render_results_page()
    else:
        st.session_state["page"] = "home"
        st.rerun()


if __name__ == "__main__":
    main()
