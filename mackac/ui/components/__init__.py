"""UI components for Mačkáč."""

from mackac.ui.components.dice_tray import render_dice_tray
from mackac.ui.components.scoreboard import render_scoreboard
from mackac.ui.components.turn_controls import (
    render_claim_controls,
    render_decision_controls,
    render_roll_button,
)

__all__ = [
    "render_dice_tray",
    "render_scoreboard",
    "render_claim_controls",
    "render_decision_controls",
    "render_roll_button",
]
