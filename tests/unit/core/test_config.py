"""Tests for configuration management."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from rogue_engine.core.config import (
    GameSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from rogue_engine.core.exceptions import ConfigurationError


class TestGameSettings:
    """Tests for GameSettings configuration."""

    def test_default_values(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default game settings."""
        monkeypatch.chdir(tmp_path)

        settings = GameSettings()

        assert settings.floor_width == 9
        assert settings.floor_height == 9
        assert settings.player_start_x == 1
        assert settings.player_start_y == 1
        assert settings.rng_seed is None
        assert settings.test_level is None

    def test_env_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test game settings read their own env prefix."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("ROGUE_ENGINE_GAME_FLOOR_HEIGHT", "15")
        monkeypatch.setenv("ROGUE_ENGINE_GAME_TEST_LEVEL", "2")

        settings = GameSettings()

        assert settings.floor_height == 15
        assert settings.test_level == 2

    def test_player_start_must_be_interior(self) -> None:
        """Test that the player cannot start on the border wall."""
        with pytest.raises(ConfigurationError) as exc_info:
            GameSettings(floor_width=9, player_start_x=8)

        assert "player_start_x" in str(exc_info.value)

    def test_player_start_y_must_be_interior(self) -> None:
        """Test the row check mirrors the column check."""
        with pytest.raises(ConfigurationError) as exc_info:
            GameSettings(floor_height=5, player_start_y=4)

        assert exc_info.value.details["config_key"] == "player_start_y"

    def test_floor_too_small(self) -> None:
        """Test the minimum floor size constraint."""
        with pytest.raises(ValidationError):
            GameSettings(floor_width=2)

    def test_test_level_must_be_positive(self) -> None:
        """Test that test level indices start at 1."""
        with pytest.raises(ValidationError):
            GameSettings(test_level=0)


class TestSettings:
    """Tests for main Settings configuration."""

    def test_default_settings(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test default settings initialization."""
        monkeypatch.chdir(tmp_path)

        settings = Settings()

        assert settings.app_name == "Rogue Engine"
        assert settings.app_version == "0.1.0"
        assert settings.log_level == "INFO"
        assert settings.json_logs is False
        assert settings.game.floor_width == 9

    def test_env_vars(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        mock_env_vars: dict[str, str],
    ) -> None:
        """Test settings pick up environment variables."""
        monkeypatch.chdir(tmp_path)

        settings = Settings()

        assert settings.log_level == "DEBUG"
        assert settings.json_logs is True
        assert settings.game.floor_width == 12
        assert settings.game.rng_seed == 1234

    def test_invalid_log_level(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test invalid log level is rejected."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("ROGUE_ENGINE_LOG_LEVEL", "LOUD")

        with pytest.raises(ValidationError):
            Settings()


class TestGetSettings:
    """Tests for the cached settings accessor."""

    def test_cached(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test get_settings returns the same instance until cleared."""
        monkeypatch.chdir(tmp_path)

        first = get_settings()
        second = get_settings()

        assert first is second

    def test_clear_cache_reloads(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test clearing the cache picks up new environment values."""
        monkeypatch.chdir(tmp_path)
        first = get_settings()

        monkeypatch.setenv("ROGUE_ENGINE_GAME_FLOOR_WIDTH", "20")
        clear_settings_cache()
        second = get_settings()

        assert first is not second
        assert second.game.floor_width == 20

    def test_invalid_configuration(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test broken configuration surfaces as ConfigurationError."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("ROGUE_ENGINE_LOG_LEVEL", "LOUD")

        with pytest.raises(ConfigurationError):
            get_settings()

    def test_invalid_game_configuration(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Test a bad start position is reported as ConfigurationError."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("ROGUE_ENGINE_GAME_PLAYER_START_X", "50")

        with pytest.raises(ConfigurationError):
            get_settings()
