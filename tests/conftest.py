"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the Rogue Engine test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from rogue_engine.core.config import GameSettings
from rogue_engine.engine.dice import DiceRoller
from rogue_engine.engine.floor import Floor
from rogue_engine.engine.game import Game
from rogue_engine.models.enums import Direction


if TYPE_CHECKING:
    from collections.abc import Generator


class ScriptedDice(DiceRoller):
    """DiceRoller whose outcomes are set by the test.

    Attributes:
        miss: Result of every ``one_in`` draw.
        wander: Result of every ``chance`` draw.
        directions: Queue of wander directions; UP once exhausted.
    """

    def __init__(
        self,
        *,
        miss: bool = False,
        wander: bool = False,
        directions: list[Direction] | None = None,
    ) -> None:
        super().__init__(seed=0)
        self.miss = miss
        self.wander = wander
        self.directions = list(directions or [])

    def one_in(self, n: int) -> bool:
        return self.miss

    def chance(self, probability: float) -> bool:
        return self.wander

    def choose_direction(self) -> Direction:
        if self.directions:
            return self.directions.pop(0)
        return Direction.UP


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from rogue_engine.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def mock_env_vars(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set up mock environment variables for testing.

    Returns:
        Dictionary of environment variables that were set.
    """
    env_vars = {
        "ROGUE_ENGINE_LOG_LEVEL": "DEBUG",
        "ROGUE_ENGINE_JSON_LOGS": "true",
        "ROGUE_ENGINE_GAME_FLOOR_WIDTH": "12",
        "ROGUE_ENGINE_GAME_RNG_SEED": "1234",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def dice() -> ScriptedDice:
    """Provide dice that never miss and never wander.

    Returns:
        A ScriptedDice tests may reconfigure.
    """
    return ScriptedDice()


@pytest.fixture
def narration() -> list[str]:
    """Provide a list collecting floor narration."""
    return []


@pytest.fixture
def floor(dice: ScriptedDice, narration: list[str]) -> Floor:
    """Provide a 9x9 floor with the player at (1, 1).

    Returns:
        A Floor narrating into the ``narration`` fixture.
    """
    floor = Floor(9, 9, dice=dice, narrator=narration.append)
    floor.create_player(1, 1)
    return floor


@pytest.fixture
def game(dice: ScriptedDice) -> Game:
    """Provide a game on an empty 9x9 floor with the player at (1, 1).

    Returns:
        A Game whose current floor has been entered.
    """
    game = Game(GameSettings(), dice=dice)
    game.enter_new_floor()
    return game
