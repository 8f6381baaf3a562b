"""Entity model for the rogue engine.

Exports:
    Enums: CellType, Phase, ActorBehavior, Condition, Beatitude, ItemEffect,
        ItemActivateTargeting, ItemActivateRange, EquippedSpecialEffect, Direction
    Templates: ActorTemplate, ItemTemplate, HarvestYield
    Entities: Cell, Actor, Item, PatrolState, DazzleState
"""

from __future__ import annotations

from rogue_engine.models.entities import (
    Actor,
    BehaviorState,
    Cell,
    DazzleState,
    Item,
    PatrolState,
)
from rogue_engine.models.enums import (
    ActorBehavior,
    Beatitude,
    CellType,
    Condition,
    Direction,
    EquippedSpecialEffect,
    ItemActivateRange,
    ItemActivateTargeting,
    ItemEffect,
    Phase,
)
from rogue_engine.models.templates import ActorTemplate, HarvestYield, ItemTemplate


__all__ = [
    # Enums
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
    # Templates
    "ActorTemplate",
    "ItemTemplate",
    "HarvestYield",
    # Entities
    "Cell",
    "Actor",
    "Item",
    "PatrolState",
    "DazzleState",
    "BehaviorState",
]
