"""Page renderers for Mačkáč."""

from mackac.ui.views.home import render_home_page
from mackac.ui.views.game import render_game_page
from mackac.ui.views.results import render_results_page

__all__ = ["render_home_page", "render_game_page", "render_results_page"]
