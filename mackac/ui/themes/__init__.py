"""Tavern theme for Mačkáč."""

from mackac.ui.themes.animations import (
    load_css,
    render_resolution_banner,
    render_victory_animation,
)

__all__ = [
    "load_css",
    "render_resolution_banner",
    "render_victory_animation",
]
