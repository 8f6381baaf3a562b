"""Pydantic V2 schemas for actor and item templates.

Templates are the immutable, shared definitions of a kind of actor or item.
Many runtime instances reference the same template object; the simulation
never mutates one.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from rogue_engine.core.constants import UNLIMITED_CHARGES
from rogue_engine.core.exceptions import ContentError
from rogue_engine.models.enums import (
    ActorBehavior,
    EquippedSpecialEffect,
    ItemActivateRange,
    ItemActivateTargeting,
    ItemEffect,
)


class HarvestYield(BaseModel):
    """What harvesting an actor produces.

    Attributes:
        item_key: Catalog key of the item template produced.
        count: Number of items produced.

    Example:
        >>> HarvestYield.parse("DARKBERRY-3")
        HarvestYield(item_key='DARKBERRY', count=3)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    item_key: str = Field(min_length=1, description="Item template key")
    count: Annotated[int, Field(ge=1, description="Items produced")] = 1

    @classmethod
    def parse(cls, notation: str) -> HarvestYield:
        """Parse the catalog's ``KEY-COUNT`` notation.

        A bare ``KEY`` yields a single item.

        Args:
            notation: Yield notation such as ``"DARKBERRY-3"``.

        Returns:
            The parsed HarvestYield.

        Raises:
            ContentError: If the count is not a positive integer.
        """
        key, sep, count_text = notation.rpartition("-")
        if not sep:
            return cls(item_key=notation)
        if not count_text.isdigit() or int(count_text) < 1 or not key:
            raise ContentError(
                f"Malformed harvest yield: {notation!r}",
                template_key=notation,
            )
        return cls(item_key=key, count=int(count_text))


class ActorTemplate(BaseModel):
    """Immutable definition of a kind of actor.

    Attributes:
        display_name: Name used in narration.
        attack_verb: Verb used when attacking without a weapon.
        behavior: AI behavior variant.
        max_hp: Starting and maximum hit points.
        starting_attack_power: Base damage dealt per attack.
        starting_defense: Base defense.
        swims: Whether the actor can enter deep water and wade unhindered.
        basic_harvest_item: Yield when harvested with a basic tool.
        magic_harvest_item: Yield when harvested with a magic tool.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    display_name: str = Field(min_length=1, description="Display name")
    attack_verb: str | None = Field(default=None, description="Innate attack verb")
    behavior: ActorBehavior = Field(description="AI behavior")
    max_hp: Annotated[int, Field(ge=1, description="Maximum HP")]
    starting_attack_power: int = Field(default=0, description="Base attack power")
    starting_defense: int = Field(default=0, description="Base defense")
    swims: bool = Field(default=False, description="Inherent swimming")
    basic_harvest_item: HarvestYield | None = None
    magic_harvest_item: HarvestYield | None = None


class ItemTemplate(BaseModel):
    """Immutable definition of a kind of item.

    Attributes:
        display_name: Name used in narration.
        equipment_slot: Slot the item occupies when equipped, if equippable.
        weapon_attack_verb: Verb used when attacking with this item wielded.
        equipped_attack_power: Attack modifier while equipped.
        equipped_defense: Defense modifier while equipped.
        equipped_special_effect: Passive effect while equipped.
        consume_effect: Effect when consumed.
        activate_effect: Effect when activated.
        activate_targeting: How activation picks a target.
        activate_range: How far activation reaches.
        activate_charges: Activations available, -1 for unlimited.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    display_name: str = Field(min_length=1, description="Display name")
    equipment_slot: str | None = None
    weapon_attack_verb: str | None = None
    equipped_attack_power: int = 0
    equipped_defense: int = 0
    equipped_special_effect: EquippedSpecialEffect | None = None
    consume_effect: ItemEffect | None = None
    activate_effect: ItemEffect | None = None
    activate_targeting: ItemActivateTargeting | None = None
    activate_range: ItemActivateRange = ItemActivateRange.INFINITE
    activate_charges: Annotated[int, Field(ge=UNLIMITED_CHARGES)] = UNLIMITED_CHARGES

    @property
    def is_equippable(self) -> bool:
        return self.equipment_slot is not None


__all__ = [
    "HarvestYield",
    "ActorTemplate",
    "ItemTemplate",
]
