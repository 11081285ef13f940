"""
Mačkáč - Application Settings

Loads configuration from environment variables (prefix ``MACKAC_``) or a
``.env`` file using Pydantic Settings.
"""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mackac.engine.base import DEFAULT_STARTING_HEALTH, GameConfig
from mackac.engine.dice import RandomSource, SeededRandomSource, SystemRandomSource


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Table
    player_name: str = "Player"
    opponent_name: str = "Computer"
    opponent: Literal["computer", "human"] = "computer"
    starting_health: int = Field(default=DEFAULT_STARTING_HEALTH, ge=1)

    # Randomness
    seed: int | None = None
    computer_bluff_percent: int = Field(default=25, ge=0, le=100)

    # Application
    debug: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="MACKAC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def game_config(self) -> GameConfig:
        """Build the engine configuration for a new game."""
        return GameConfig(
            player_names=(self.player_name, self.opponent_name),
            starting_health=self.starting_health,
        )

    def random_source(self) -> RandomSource:
        """Seeded source when a seed is configured, OS entropy otherwise."""
        if self.seed is not None:
            return SeededRandomSource(self.seed)
        return SystemRandomSource()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(settings: Settings) -> None:
    """Set up root logging from the settings."""
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
