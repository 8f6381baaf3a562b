"""Runtime entity instances: cells, actors, and items.

Entities are mutable and compare by identity. An actor and the items it
carries reference each other, so they are plain dataclasses rather than
validated models, and the back-references are left out of their reprs.
All mutation goes through the owning Floor.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from rogue_engine.core.constants import UNLIMITED_CHARGES
from rogue_engine.models.enums import (
    ActorBehavior,
    Beatitude,
    CellType,
    Condition,
    EquippedSpecialEffect,
    Phase,
)
from rogue_engine.models.templates import ActorTemplate, ItemTemplate


@dataclass
class Cell:
    """A single floor tile.

    Attributes:
        type: Terrain of the tile.
        turn_counter: End-of-turn passes since a hazard was placed here.
        phase: Current hazard phase, None for non-hazard tiles.
    """

    type: CellType = CellType.EMPTY
    turn_counter: int = 0
    phase: Phase | None = None


# =============================================================================
# Behavior State
# =============================================================================


@dataclass
class PatrolState:
    """Scratch state of a vertically patrolling actor.

    Attributes:
        direction: +1 walking down, -1 walking up.
    """

    direction: int = 1


@dataclass
class DazzleState:
    """Scratch state of a dazzling actor.

    Attributes:
        cooldown: Turns left before the actor may dazzle again.
    """

    cooldown: int = 0


BehaviorState: TypeAlias = PatrolState | DazzleState | None


# =============================================================================
# Actors and Items
# =============================================================================


@dataclass(eq=False)
class Actor:
    """A mobile entity on the floor.

    Attributes:
        id: Unique id within the floor, shared space with items.
        template: Shared template this actor was created from.
        tile_x: Column.
        tile_y: Row.
        current_hp: Current hit points, never above max_hp.
        max_hp: Maximum hit points.
        attack_power: Damage per attack, template base plus equipment.
        defense: Template base defense plus equipment.
        luck: Luck score, lowered by cursed items.
        conditions: Active conditions mapped to turns remaining.
        skip_next_turn: Whether the actor loses its next turn.
        inventory: Carried items; None for actors that cannot carry.
        behavior_state: Per-behavior scratch state, created lazily.
        is_dead: Whether the actor has been removed from the floor.
    """

    id: int
    template: ActorTemplate
    tile_x: int = 0
    tile_y: int = 0
    current_hp: int = 0
    max_hp: int = 0
    attack_power: int = 0
    defense: int = 0
    luck: int = 0
    conditions: dict[Condition, int] = field(default_factory=dict)
    skip_next_turn: bool = False
    inventory: list[Item] | None = field(default=None, repr=False)
    behavior_state: BehaviorState = None
    is_dead: bool = False

    @classmethod
    def from_template(
        cls,
        actor_id: int,
        template: ActorTemplate,
        tile_x: int,
        tile_y: int,
    ) -> Actor:
        """Create a fresh actor at full health from a template.

        Args:
            actor_id: Id to assign.
            template: Template to instantiate.
            tile_x: Starting column.
            tile_y: Starting row.

        Returns:
            The new Actor. Player-controlled actors get an empty inventory.
        """
        return cls(
            id=actor_id,
            template=template,
            tile_x=tile_x,
            tile_y=tile_y,
            current_hp=template.max_hp,
            max_hp=template.max_hp,
            attack_power=template.starting_attack_power,
            defense=template.starting_defense,
            inventory=[] if template.behavior == ActorBehavior.PLAYER_INPUT else None,
        )

    @property
    def name(self) -> str:
        return self.template.display_name

    @property
    def position(self) -> tuple[int, int]:
        return (self.tile_x, self.tile_y)

    @property
    def is_player(self) -> bool:
        return self.template.behavior == ActorBehavior.PLAYER_INPUT

    def has_condition(self, condition: Condition) -> bool:
        return condition in self.conditions

    def equipped_items(self) -> list[Item]:
        """Get the items this actor currently has equipped.

        Returns:
            Equipped items in inventory order.
        """
        if not self.inventory:
            return []
        return [item for item in self.inventory if item.equipped]

    def equipped_in_slot(self, slot: str) -> Item | None:
        for item in self.equipped_items():
            if item.template.equipment_slot == slot:
                return item
        return None

    def has_equipped_effect(self, effect: EquippedSpecialEffect) -> bool:
        return any(
            item.template.equipped_special_effect == effect
            for item in self.equipped_items()
        )


@dataclass(eq=False)
class Item:
    """An item instance, either loose on the floor or held by an actor.

    Attributes:
        id: Unique id within the floor, shared space with actors.
        template: Shared template this item was created from.
        beatitude: Cursed, neutral, or blessed.
        tile_x: Column; follows the holder while carried.
        tile_y: Row; follows the holder while carried.
        is_destroyed: Whether the item has been consumed or otherwise removed.
        held_actor: Actor carrying the item, None while loose.
        equipped: Whether the holder has the item equipped.
        remaining_charges: Activations left; -1 for unlimited, 0 if not activatable.
    """

    id: int
    template: ItemTemplate
    beatitude: Beatitude = Beatitude.NEUTRAL
    tile_x: int = 0
    tile_y: int = 0
    is_destroyed: bool = False
    held_actor: Actor | None = field(default=None, repr=False)
    equipped: bool = False
    remaining_charges: int = 0

    @classmethod
    def from_template(
        cls,
        item_id: int,
        template: ItemTemplate,
        tile_x: int,
        tile_y: int,
        beatitude: Beatitude = Beatitude.NEUTRAL,
    ) -> Item:
        """Create a loose item from a template.

        Charges are only meaningful for activatable items.
        """
        charges = template.activate_charges if template.activate_effect is not None else 0
        return cls(
            id=item_id,
            template=template,
            beatitude=beatitude,
            tile_x=tile_x,
            tile_y=tile_y,
            remaining_charges=charges,
        )

    @property
    def display_name(self) -> str:
        """Get the narrated name, prefixed with a non-neutral beatitude.

        Returns:
            Name such as ``"blessed healing herb"``.
        """
        if self.beatitude == Beatitude.NEUTRAL:
            return self.template.display_name
        return f"{self.beatitude.value} {self.template.display_name}"

    @property
    def position(self) -> tuple[int, int]:
        return (self.tile_x, self.tile_y)

    @property
    def is_loose(self) -> bool:
        return self.held_actor is None and not self.is_destroyed

    @property
    def has_unlimited_charges(self) -> bool:
        return self.remaining_charges == UNLIMITED_CHARGES


__all__ = [
    "Cell",
    "PatrolState",
    "DazzleState",
    "BehaviorState",
    "Actor",
    "Item",
]
