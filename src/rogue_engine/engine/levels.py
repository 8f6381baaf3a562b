"""Canned test levels for populating a fresh floor.

Each level expects a floor of at least 9x9 tiles with the player already
placed at (1, 1).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from rogue_engine.content import get_actor_template, get_item_template
from rogue_engine.core.exceptions import ConfigurationError
from rogue_engine.core.logging import get_logger
from rogue_engine.models.enums import Beatitude, CellType


if TYPE_CHECKING:
    from rogue_engine.engine.floor import Floor

logger = get_logger(__name__)

MIN_LEVEL_SIZE = 9


def _populate_level_1(floor: Floor) -> None:
    """Walls, a flower hazard, and a patrolling heron."""
    floor.set_cell(3, 4, CellType.DEFAULT_WALL)
    floor.set_cell(3, 5, CellType.DEFAULT_WALL)
    floor.set_cell(1, 4, CellType.FLOWER_HAZARD)
    floor.create_actor(get_actor_template("HERON"), 5, 2)
    floor.create_item(get_item_template("ORDINARY_STONE"), 1, 2)
    floor.create_item(get_item_template("HEALING_HERB"), 2, 2)


def _populate_level_2(floor: Floor) -> None:
    """A pond with swimmers and waders around it."""
    for x in range(4, 8):
        for y in range(4, 8):
            floor.set_cell(x, y, CellType.SHALLOW_WATER)
    for x in range(5, 7):
        for y in range(5, 7):
            floor.set_cell(x, y, CellType.DEEP_WATER)
    floor.create_actor(get_actor_template("MERMAID"), 6, 6)
    floor.create_actor(get_actor_template("STARLIGHT_FAIRY"), 2, 6)
    floor.create_actor(get_actor_template("HERON"), 7, 1)
    floor.create_item(get_item_template("SWIMMING_RING"), 2, 2)


def _populate_level_3(floor: Floor) -> None:
    """Equipment, a wand, harvesting knives, and shrubs to harvest."""
    floor.create_item(get_item_template("ORDINARY_SWORD"), 2, 1)
    floor.create_item(get_item_template("POWERFUL_SWORD"), 3, 1)
    floor.create_item(get_item_template("ORDINARY_CHAINMAIL"), 4, 1)
    floor.create_item(get_item_template("FENCING_RING"), 5, 1, Beatitude.CURSED)
    floor.create_item(get_item_template("ICE_WAND"), 1, 2)
    floor.create_item(get_item_template("STEEL_KNIFE"), 2, 2)
    floor.create_item(get_item_template("SILVER_KNIFE"), 3, 2)
    floor.create_item(get_item_template("HEALING_HERB"), 4, 2, Beatitude.BLESSED)
    floor.create_item(get_item_template("HEALING_HERB"), 5, 2, Beatitude.CURSED)
    floor.create_actor(get_actor_template("BERRY_SHRUB"), 4, 5)
    floor.create_actor(get_actor_template("BERRY_SHRUB"), 6, 5)
    floor.create_actor(get_actor_template("HERON"), 7, 3)


TEST_LEVELS: dict[int, Callable[[Floor], None]] = {
    1: _populate_level_1,
    2: _populate_level_2,
    3: _populate_level_3,
}


def populate_test_level(floor: Floor, index: int) -> None:
    """Populate a floor with one of the canned test levels.

    Args:
        floor: Floor to populate.
        index: Level number, starting at 1.

    Raises:
        ConfigurationError: If there is no level with that index or the floor is too small.
    """
    populate = TEST_LEVELS.get(index)
    if populate is None:
        raise ConfigurationError(
            f"No test level with index {index}",
            config_key="test_level",
            details={"available": sorted(TEST_LEVELS)},
        )
    if floor.width < MIN_LEVEL_SIZE or floor.height < MIN_LEVEL_SIZE:
        raise ConfigurationError(
            f"Test levels need a floor of at least {MIN_LEVEL_SIZE}x{MIN_LEVEL_SIZE}",
            config_key="floor_size",
            details={"width": floor.width, "height": floor.height},
        )
    populate(floor)
    logger.info("Test level populated", level=index)


__all__ = [
    "TEST_LEVELS",
    "populate_test_level",
]
