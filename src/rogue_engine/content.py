"""Content catalog: the actor and item templates of the game.

Templates are keyed by a stable symbolic name. The tables are read-only
configuration built once at import; instances hold references to the
template objects rather than copies of their fields.
"""

from __future__ import annotations

from types import MappingProxyType

from rogue_engine.core.exceptions import ContentError
from rogue_engine.models.enums import (
    ActorBehavior,
    EquippedSpecialEffect,
    ItemActivateRange,
    ItemActivateTargeting,
    ItemEffect,
)
from rogue_engine.models.templates import ActorTemplate, HarvestYield, ItemTemplate


# =============================================================================
# Actors
# =============================================================================

ACTOR_TEMPLATES = MappingProxyType({
    "PLAYER": ActorTemplate(
        display_name="Rogue",
        attack_verb="punches",
        behavior=ActorBehavior.PLAYER_INPUT,
        max_hp=12,
        starting_attack_power=1,
    ),
    "HERON": ActorTemplate(
        display_name="heron",
        attack_verb="pecks",
        behavior=ActorBehavior.PATROL_VERTICALLY,
        max_hp=4,
        starting_attack_power=1,
    ),
    "STARLIGHT_FAIRY": ActorTemplate(
        display_name="starlight fairy",
        attack_verb="scratches",
        behavior=ActorBehavior.INFLICT_DAZZLE,
        max_hp=5,
        starting_attack_power=1,
    ),
    "MERMAID": ActorTemplate(
        display_name="mermaid",
        attack_verb="slaps",
        behavior=ActorBehavior.APPROACH_WHEN_NEAR,
        max_hp=6,
        starting_attack_power=2,
        swims=True,
    ),
    "BERRY_SHRUB": ActorTemplate(
        display_name="darkberry shrub",
        behavior=ActorBehavior.PASSIVE,
        max_hp=6,
        starting_defense=1,
        basic_harvest_item=HarvestYield.parse("DARKBERRY-3"),
        magic_harvest_item=HarvestYield.parse("DARKBERRY-5"),
    ),
})


# =============================================================================
# Items
# =============================================================================

ITEM_TEMPLATES = MappingProxyType({
    "ORDINARY_STONE": ItemTemplate(display_name="ordinary stone"),
    "ORDINARY_SWORD": ItemTemplate(
        display_name="steel sword",
        equipment_slot="weapon",
        weapon_attack_verb="slashes",
        equipped_attack_power=2,
    ),
    "POWERFUL_SWORD": ItemTemplate(
        display_name="starmetal sword",
        equipment_slot="weapon",
        weapon_attack_verb="slashes",
        equipped_attack_power=4,
    ),
    "ORDINARY_CHAINMAIL": ItemTemplate(
        display_name="steel chainmail",
        equipment_slot="body",
        equipped_defense=2,
    ),
    "HEALING_HERB": ItemTemplate(
        display_name="healing herb",
        consume_effect=ItemEffect.HEAL,
    ),
    "DARKBERRY": ItemTemplate(
        display_name="darkberry",
        consume_effect=ItemEffect.HEAL_FOOD,
    ),
    "SWIMMING_RING": ItemTemplate(
        display_name="ring of swimming",
        equipment_slot="ring",
        equipped_special_effect=EquippedSpecialEffect.SWIMMING,
    ),
    "FENCING_RING": ItemTemplate(
        display_name="ring of fencing",
        equipment_slot="ring",
        equipped_attack_power=1,
    ),
    "ICE_WAND": ItemTemplate(
        display_name="wand of freezing",
        activate_effect=ItemEffect.ICE_DAMAGE,
        activate_targeting=ItemActivateTargeting.DIRECTION,
        activate_charges=5,
    ),
    "STEEL_KNIFE": ItemTemplate(
        display_name="steel knife",
        equipment_slot="weapon",
        weapon_attack_verb="stabs",
        equipped_attack_power=1,
        activate_effect=ItemEffect.BASIC_HARVEST,
        activate_targeting=ItemActivateTargeting.DIRECTION,
        activate_range=ItemActivateRange.ADJACENT,
    ),
    "SILVER_KNIFE": ItemTemplate(
        display_name="silver knife",
        equipment_slot="weapon",
        weapon_attack_verb="stabs",
        equipped_attack_power=1,
        activate_effect=ItemEffect.MAGIC_HARVEST,
        activate_targeting=ItemActivateTargeting.DIRECTION,
        activate_range=ItemActivateRange.ADJACENT,
    ),
})


# =============================================================================
# Lookup Functions
# =============================================================================


def get_actor_template(key: str) -> ActorTemplate:
    """Look up an actor template by its catalog key.

    Args:
        key: Symbolic name such as ``"HERON"``.

    Returns:
        The shared ActorTemplate.

    Raises:
        ContentError: If no actor template has that key.
    """
    template = ACTOR_TEMPLATES.get(key)
    if template is None:
        raise ContentError(f"Unknown actor template: {key}", template_key=key)
    return template


def get_item_template(key: str) -> ItemTemplate:
    """Look up an item template by its catalog key.

    Args:
        key: Symbolic name such as ``"ICE_WAND"``.

    Returns:
        The shared ItemTemplate.

    Raises:
        ContentError: If no item template has that key.
    """
    template = ITEM_TEMPLATES.get(key)
    if template is None:
        raise ContentError(f"Unknown item template: {key}", template_key=key)
    return template


__all__ = [
    "ACTOR_TEMPLATES",
    "ITEM_TEMPLATES",
    "get_actor_template",
    "get_item_template",
]
