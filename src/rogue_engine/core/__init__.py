"""Core module providing configuration, logging, constants, and exceptions.

Exports:
    Exceptions:
        RogueEngineError: Base exception for all application errors.
        ConfigurationError: Configuration-related errors.
        GameEngineError: Precondition violations in the simulation.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
"""

from __future__ import annotations

from rogue_engine.core.config import (
    GameSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from rogue_engine.core.exceptions import (
    ConfigurationError,
    ContentError,
    EntityNotFoundError,
    GameEngineError,
    InvalidCommandError,
    InvalidGameStateError,
    RogueEngineError,
)
from rogue_engine.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "RogueEngineError",
    "ConfigurationError",
    "ContentError",
    "GameEngineError",
    "InvalidGameStateError",
    "InvalidCommandError",
    "EntityNotFoundError",
    # Configuration
    "Settings",
    "GameSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
