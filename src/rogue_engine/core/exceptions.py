"""Custom exception hierarchy for the rogue engine.

All exceptions inherit from RogueEngineError, enabling unified error handling
at the presentation boundary while preserving domain-specific context.

Recoverable outcomes of play (a blocked step, an empty wand, a zap that hits
nothing) are never exceptions; they are return values and narration. The
exceptions below signal caller bugs or broken configuration.

Example:
    >>> from rogue_engine.core.exceptions import InvalidGameStateError
    >>> raise InvalidGameStateError("Item is not held by the player", current_state="loose")
"""

from __future__ import annotations

from typing import Any


class RogueEngineError(Exception):
    """Base exception for all rogue engine errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = dict(details or {})
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Configuration & Content Exceptions
# =============================================================================


class ConfigurationError(RogueEngineError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = dict(details or {})
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class ContentError(RogueEngineError):
    """Raised when the content catalog is asked for something it lacks.

    This covers unknown template keys and malformed harvest yields.
    """

    def __init__(
        self,
        message: str,
        *,
        template_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = dict(details or {})
        if template_key:
            combined_details["template_key"] = template_key
        super().__init__(message, details=combined_details)


# =============================================================================
# Game Engine Exceptions
# =============================================================================


class GameEngineError(RogueEngineError):
    """Base exception for all game engine errors.

    Raised when a caller breaks a precondition of the floor simulation.
    """


class InvalidGameStateError(GameEngineError):
    """Raised when an operation is attempted from a state that forbids it.

    Typical causes are acting on an item the player does not hold, picking
    up an item that is already carried, or issuing commands after the
    player has died.
    """

    def __init__(
        self,
        message: str,
        *,
        current_state: str | None = None,
        expected_states: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize invalid game state error with state context.

        Args:
            message: Human-readable error description.
            current_state: The current invalid state identifier.
            expected_states: List of valid states that were expected.
            details: Optional dictionary containing additional error context.
        """
        combined_details = dict(details or {})
        if current_state:
            combined_details["current_state"] = current_state
        if expected_states:
            combined_details["expected_states"] = expected_states
        super().__init__(message, details=combined_details)


class InvalidCommandError(GameEngineError):
    """Raised when a command is malformed.

    This includes parameterized commands issued without a target and
    directions that are not a single cardinal step.
    """

    def __init__(
        self,
        message: str,
        *,
        command: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = dict(details or {})
        if command:
            combined_details["command"] = command
        super().__init__(message, details=combined_details)


class EntityNotFoundError(GameEngineError):
    """Raised when an actor or item id is not present on the floor."""

    def __init__(
        self,
        message: str,
        *,
        entity_id: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        combined_details = dict(details or {})
        if entity_id is not None:
            combined_details["entity_id"] = entity_id
        super().__init__(message, details=combined_details)


__all__ = [
    # Base exception
    "RogueEngineError",
    # Configuration & content exceptions
    "ConfigurationError",
    "ContentError",
    # Game engine exceptions
    "GameEngineError",
    "InvalidGameStateError",
    "InvalidCommandError",
    "EntityNotFoundError",
]
