"""Configuration management for the rogue engine.

This module provides centralized configuration using pydantic-settings,
supporting environment variables, .env files, and runtime overrides.

Example:
    >>> from rogue_engine.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.game.floor_width
    9

Environment Variables:
    ROGUE_ENGINE_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    ROGUE_ENGINE_JSON_LOGS: Emit JSON log lines instead of console output
    ROGUE_ENGINE_GAME_FLOOR_WIDTH: Width of a new floor in tiles
    ROGUE_ENGINE_GAME_FLOOR_HEIGHT: Height of a new floor in tiles
    ROGUE_ENGINE_GAME_RNG_SEED: Seed for the game's random source
    ROGUE_ENGINE_GAME_TEST_LEVEL: Canned level to populate new floors with
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rogue_engine.core.exceptions import ConfigurationError


class GameSettings(BaseSettings):
    """Configuration for new games and floors.

    Attributes:
        floor_width: Width of a newly entered floor, walls included.
        floor_height: Height of a newly entered floor, walls included.
        player_start_x: Column the player is placed on.
        player_start_y: Row the player is placed on.
        rng_seed: Seed for the random source, or None for an unseeded one.
        test_level: Index of the canned level to populate, or None for an empty floor.
    """

    model_config = SettingsConfigDict(
        env_prefix="ROGUE_ENGINE_GAME_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    floor_width: int = Field(
        default=9,
        ge=3,
        le=200,
        description="Floor width in tiles",
    )
    floor_height: int = Field(
        default=9,
        ge=3,
        le=200,
        description="Floor height in tiles",
    )
    player_start_x: int = Field(default=1, ge=1, description="Player start column")
    player_start_y: int = Field(default=1, ge=1, description="Player start row")
    rng_seed: int | None = Field(default=None, description="Random source seed")
    test_level: int | None = Field(
        default=None,
        ge=1,
        description="Canned level to populate new floors with",
    )

    @model_validator(mode="after")
    def validate_player_start(self) -> "GameSettings":
        """Ensure the player starts on an interior tile.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If the start position lies on or past the border wall.
        """
        if self.player_start_x >= self.floor_width - 1:
            raise ConfigurationError(
                f"player_start_x ({self.player_start_x}) must be inside the floor "
                f"interior (width {self.floor_width})",
                config_key="player_start_x",
            )
        if self.player_start_y >= self.floor_height - 1:
            raise ConfigurationError(
                f"player_start_y ({self.player_start_y}) must be inside the floor "
                f"interior (height {self.floor_height})",
                config_key="player_start_y",
            )
        return self


class Settings(BaseSettings):
    """Main application settings.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        log_level: Application logging level.
        json_logs: Render logs as JSON.
        game: Game and floor settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="ROGUE_ENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(default="Rogue Engine", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(default=False, description="Render logs as JSON")

    game: GameSettings = Field(default_factory=GameSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "GameSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
