"""Home page — title, rules, and starting a game against the computer."""

from __future__ import annotations

import logging

import streamlit as st

from mackac.config.settings import get_settings
from mackac.engine.base import GameConfig
from mackac.engine.errors import RandomSourceFailure
from mackac.engine.players import ComputerController
from mackac.engine.round_engine import RoundEngine


logger = logging.getLogger(__name__)

RULES = """
**Roll two dice under the cup and lie if you must.**

- **Ranking** (low to high): 31, 32, 41 ... 65, then doubles 11 ... 66,
  then **Mačkáč** (2 and 1) beats everything
- Announce the truth, or **declare** any throw you like
- Your opponent **trusts** or **challenges**
- Challenged lie: the liar loses a life. Challenged truth: the challenger does
- A trusted claim below the current threshold always costs the claimant
- Even a trusted claim may raise **suspicion**: the higher the claim,
  the likelier it is checked anyway
- Each player starts with 4 lives; the last one standing wins
"""


def start_new_game(player_name: str, opponent_name: str, starting_health: int) -> None:
    """Create an engine in session state and open the first claim."""
    settings = get_settings()
    ss = st.session_state

    config = GameConfig(
        player_names=(player_name, opponent_name),
        starting_health=starting_health,
    )
    source = settings.random_source()
    engine = RoundEngine(config, source)
    engine.start()

    ss["engine"] = engine
    ss["computer"] = ComputerController(source, settings.computer_bluff_percent)
    ss["page"] = "game"
    logger.info("New game: %s vs %s", player_name, opponent_name)


def render_home_page() -> None:
    """Render the home / landing page."""
    settings = get_settings()

    st.title("Mačkáč")
    st.caption("A two-dice bluffing game")

    with st.form("new_game_form"):
        player_name = st.text_input(
            "Your Name",
            value=settings.player_name,
            max_chars=30,
        )
        opponent_name = st.text_input(
            "Opponent",
            value=settings.opponent_name,
            max_chars=30,
        )
        starting_health = st.number_input(
            "Lives",
            min_value=1,
            max_value=10,
            value=settings.starting_health,
        )
        submitted = st.form_submit_button("Start Game", type="primary")

    if submitted:
        try:
            start_new_game(player_name.strip(), opponent_name.strip(), int(starting_health))
        except ValueError as exc:
            st.error(str(exc))
            return
        except RandomSourceFailure:
            logger.exception("Random source failed while starting a game")
            st.error("The dice are broken. Please try again later.")
            return
        st.rerun()

    st.divider()

    with st.expander("Mačkáč — Rules"):
        st.markdown(RULES)
