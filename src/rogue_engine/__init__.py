"""Rogue Engine - turn-based floor simulation for a small roguelike.

A grid of cells holding actors and items advances one turn per player
command: the player acts, conditions count down, every other actor runs its
AI, and hazard cells tick.

Example:
    >>> from rogue_engine import Command, Game, get_actor_template
    >>>
    >>> game = Game()
    >>> floor = game.enter_new_floor()
    >>> heron = floor.create_actor(get_actor_template("HERON"), 2, 1)
    >>> game.execute_command(Command.FIGHT_RIGHT)
    >>> game.get_messages()
    ['Rogue punches heron.', 'Heron pecks Rogue.']

Modules:
    core: Configuration, logging, rule constants, and exceptions.
    models: Enums, templates, and runtime entities.
    content: The actor and item template catalog.
    engine: Floor, game, dice, narration, and test levels.
"""

from __future__ import annotations

# Core
from rogue_engine.core.config import Settings, get_settings
from rogue_engine.core.exceptions import RogueEngineError
from rogue_engine.core.logging import configure_logging, get_logger

# Content
from rogue_engine.content import (
    ACTOR_TEMPLATES,
    ITEM_TEMPLATES,
    get_actor_template,
    get_item_template,
)

# Engine
from rogue_engine.engine import Command, DiceRoller, Floor, Game

# Models
from rogue_engine.models import (
    Actor,
    ActorBehavior,
    Beatitude,
    Cell,
    CellType,
    Condition,
    Direction,
    Item,
    Phase,
)


__version__ = "0.1.0"

__all__ = [
    # Core
    "Settings",
    "get_settings",
    "RogueEngineError",
    "configure_logging",
    "get_logger",
    # Content
    "ACTOR_TEMPLATES",
    "ITEM_TEMPLATES",
    "get_actor_template",
    "get_item_template",
    # Engine
    "Command",
    "DiceRoller",
    "Floor",
    "Game",
    # Models
    "Actor",
    "ActorBehavior",
    "Beatitude",
    "Cell",
    "CellType",
    "Condition",
    "Direction",
    "Item",
    "Phase",
]
