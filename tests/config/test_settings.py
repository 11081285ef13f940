"""
Mačkáč - Settings Tests
"""

import pytest
from pydantic import ValidationError

from mackac.config.settings import Settings, get_settings
from mackac.engine.dice import SeededRandomSource, SystemRandomSource


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the host environment and cached settings out of the tests."""
    for name in (
        "MACKAC_PLAYER_NAME",
        "MACKAC_OPPONENT_NAME",
        "MACKAC_OPPONENT",
        "MACKAC_STARTING_HEALTH",
        "MACKAC_SEED",
        "MACKAC_COMPUTER_BLUFF_PERCENT",
        "MACKAC_DEBUG",
        "MACKAC_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.player_name == "Player"
        assert settings.opponent == "computer"
        assert settings.starting_health == 4
        assert settings.seed is None
        assert settings.log_level == "INFO"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("MACKAC_STARTING_HEALTH", "6")
        monkeypatch.setenv("MACKAC_OPPONENT", "human")
        settings = Settings(_env_file=None)
        assert settings.starting_health == 6
        assert settings.opponent == "human"

    def test_invalid_bluff_percent(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, computer_bluff_percent=150)

    def test_invalid_health(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, starting_health=0)

    def test_invalid_opponent(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, opponent="robot")

    def test_game_config(self):
        settings = Settings(_env_file=None, player_name="Eva", opponent_name="Max", starting_health=3)
        config = settings.game_config()
        assert config.player_names == ("Eva", "Max")
        assert config.starting_health == 3

    def test_seeded_source(self):
        source = Settings(_env_file=None, seed=11).random_source()
        assert isinstance(source, SeededRandomSource)
        assert source.seed == 11

    def test_system_source_by_default(self):
        assert isinstance(Settings(_env_file=None).random_source(), SystemRandomSource)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
