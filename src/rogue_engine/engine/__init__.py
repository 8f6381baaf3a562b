"""Simulation engine for the rogue engine.

Submodules:
    dice: Injectable random source
    messages: Narration formatter
    floor: Grid, entities, and every rule that mutates them
    game: Command dispatch and turn sequencing
    levels: Canned test levels

Example:
    >>> from rogue_engine.engine import Command, Game
    >>> game = Game()
    >>> floor = game.enter_new_floor()
    >>> game.execute_command(Command.PASS)
    >>> game.get_messages()
    []
"""

from __future__ import annotations

from rogue_engine.engine.dice import DiceRoller
from rogue_engine.engine.floor import Floor, Narrator, taxicab_distance
from rogue_engine.engine.game import (
    ACTIVATE_COMMANDS,
    FIGHT_COMMANDS,
    WALK_COMMANDS,
    Command,
    Game,
)
from rogue_engine.engine.levels import TEST_LEVELS, populate_test_level


__all__ = [
    # Dice
    "DiceRoller",
    # Floor
    "Floor",
    "Narrator",
    "taxicab_distance",
    # Game
    "Command",
    "Game",
    "WALK_COMMANDS",
    "FIGHT_COMMANDS",
    "ACTIVATE_COMMANDS",
    # Levels
    "TEST_LEVELS",
    "populate_test_level",
]
