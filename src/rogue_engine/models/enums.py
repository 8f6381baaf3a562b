"""Enumeration types for the rogue engine.

These closed variant sets drive every dispatch in the simulation: movement
legality switches on CellType, the AI resolver on ActorBehavior, and item
use on ItemEffect.
"""

from __future__ import annotations

from enum import StrEnum


class CellType(StrEnum):
    """Terrain of a single floor tile.

    OUT_OF_BOUNDS is never stored in a floor; it is what a query outside the
    grid returns.
    """

    OUT_OF_BOUNDS = "out_of_bounds"
    EMPTY = "empty"
    FLOOR = "floor"
    DEFAULT_WALL = "default_wall"
    FLOWER_HAZARD = "flower_hazard"
    SHALLOW_WATER = "shallow_water"
    DEEP_WATER = "deep_water"

    @property
    def blocks_movement(self) -> bool:
        """Whether no actor can ever enter a tile of this type.

        Returns:
            True for walls and the out-of-bounds sentinel.
        """
        return self in (CellType.DEFAULT_WALL, CellType.OUT_OF_BOUNDS)


class Phase(StrEnum):
    """Hazard cycle phase, used to preview and trigger periodic damage."""

    IDLE = "idle"
    READY = "ready"
    ACTIVE = "active"


class ActorBehavior(StrEnum):
    """How an actor decides what to do on its turn."""

    PLAYER_INPUT = "player_input"
    """Driven by commands; never run by the AI resolver."""

    PASSIVE = "passive"
    """Never moves and never initiates an attack."""

    PATROL_VERTICALLY = "patrol_vertically"
    """Walks up and down, reversing when blocked."""

    INFLICT_DAZZLE = "inflict_dazzle"
    """Dazzles the player from range, otherwise wanders."""

    APPROACH_WHEN_NEAR = "approach_when_near"
    """Closes in on a nearby player, otherwise wanders."""


class Condition(StrEnum):
    """Timed status effects."""

    DAZZLE = "dazzle"
    SLOW = "slow"


class Beatitude(StrEnum):
    """Quality modifier of an item instance, independent of its template."""

    CURSED = "cursed"
    NEUTRAL = "neutral"
    BLESSED = "blessed"


class ItemEffect(StrEnum):
    """Effects an item can have when consumed or activated."""

    BASIC_HARVEST = "basic_harvest"
    MAGIC_HARVEST = "magic_harvest"
    HEAL = "heal"
    HEAL_FOOD = "heal_food"
    ICE_DAMAGE = "ice_damage"


class ItemActivateTargeting(StrEnum):
    """How an activatable item picks its target."""

    DIRECTION = "direction"


class ItemActivateRange(StrEnum):
    """How far an activation travels."""

    ADJACENT = "adjacent"
    INFINITE = "infinite"


class EquippedSpecialEffect(StrEnum):
    """Passive effects granted while an item is equipped."""

    SWIMMING = "swimming"


class Direction(StrEnum):
    """The four cardinal unit steps."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        """Get the (dx, dy) step for this direction.

        Returns:
            Tuple of tile offsets; y grows downward.
        """
        return _DIRECTION_DELTAS[self]

    @classmethod
    def from_delta(cls, dx: int, dy: int) -> Direction | None:
        """Look up the direction for a step.

        Args:
            dx: Column offset.
            dy: Row offset.

        Returns:
            The matching Direction, or None if the step is not a cardinal unit step.
        """
        for direction, delta in _DIRECTION_DELTAS.items():
            if delta == (dx, dy):
                return direction
        return None


_DIRECTION_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


__all__ = [
    "CellType",
    "Phase",
    "ActorBehavior",
    "Condition",
    "Beatitude",
    "ItemEffect",
    "ItemActivateTargeting",
    "ItemActivateRange",
    "EquippedSpecialEffect",
    "Direction",
]
