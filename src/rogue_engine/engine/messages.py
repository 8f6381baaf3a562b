"""Narration formatter.

Pure functions turning primitive event data into narration lines. Only the
occurrence and order of these lines is part of the simulation's contract;
the wording is free to change.
"""

from __future__ import annotations

from rogue_engine.core.constants import WEAPON_SLOT


def capitalize(text: str) -> str:
    """Uppercase the first character, leaving the rest untouched.

    Example:
        >>> capitalize("heron")
        'Heron'
        >>> capitalize("")
        ''
    """
    return text[:1].upper() + text[1:]


# =============================================================================
# Combat
# =============================================================================


def fight(attacker_name: str, attack_verb: str, defender_name: str) -> str:
    return f"{capitalize(attacker_name)} {attack_verb} {defender_name}."


def fight_dazzled_miss(attacker_name: str, defender_name: str) -> str:
    return f"{capitalize(attacker_name)}, dazzled, swings wide of {defender_name}."


def death(actor_name: str) -> str:
    return f"{capitalize(actor_name)} dies!"


# =============================================================================
# Items
# =============================================================================


def get_item(actor_name: str, item_name: str) -> str:
    return f"{capitalize(actor_name)} picks up the {item_name}."


def drop_item(actor_name: str, item_name: str) -> str:
    return f"{capitalize(actor_name)} drops the {item_name}."


def equip_item(actor_name: str, item_name: str, slot: str | None) -> str:
    verb = "wields" if slot == WEAPON_SLOT else "puts on"
    return f"{capitalize(actor_name)} {verb} the {item_name}."


def unequip_item(actor_name: str, item_name: str, slot: str | None) -> str:
    verb = "puts away" if slot == WEAPON_SLOT else "takes off"
    return f"{capitalize(actor_name)} {verb} the {item_name}."


def consume_item(actor_name: str, item_name: str) -> str:
    return f"{capitalize(actor_name)} consumes the {item_name}."


def activate_item(actor_name: str, item_name: str) -> str:
    return f"{capitalize(actor_name)} uses the {item_name}."


def nothing_happens() -> str:
    return "Nothing happens."


# =============================================================================
# Item Effects
# =============================================================================


def effect_healed(actor_name: str) -> str:
    return f"{capitalize(actor_name)} feels better."


def effect_max_hp_up(actor_name: str) -> str:
    return f"{capitalize(actor_name)} feels healthier than ever."


def effect_cursed_harm(actor_name: str) -> str:
    return f"{capitalize(actor_name)} feels sick."


def effect_ice_damage(actor_name: str) -> str:
    return f"{capitalize(actor_name)} is blasted with ice."


def pluralize(noun: str, count: int) -> str:
    """Pluralize a simple English noun.

    Example:
        >>> pluralize("darkberry", 3)
        'darkberries'
    """
    if count == 1:
        return noun
    if noun.endswith("y") and noun[-2:-1] not in ("a", "e", "i", "o", "u"):
        return f"{noun[:-1]}ies"
    return f"{noun}s"


def effect_harvest(actor_name: str, item_name: str, count: int) -> str:
    return f"{capitalize(actor_name)} is harvested for {count} {pluralize(item_name, count)}."


# =============================================================================
# Conditions & Terrain
# =============================================================================


def dazzle(attacker_name: str, defender_name: str) -> str:
    return f"{capitalize(attacker_name)} sparkles and dazzles {defender_name}."


def dazzle_expired(actor_name: str) -> str:
    return f"{capitalize(actor_name)} is no longer dazzled."


def slow_expired(actor_name: str) -> str:
    return f"{capitalize(actor_name)} is no longer slowed."


def flower_hit(hit_actor_name: str) -> str:
    return f"The flower stings {hit_actor_name}."


def slowed_by_water(actor_name: str) -> str:
    return f"{capitalize(actor_name)} is slowed wading in the water."


__all__ = [
    "capitalize",
    "fight",
    "fight_dazzled_miss",
    "death",
    "get_item",
    "drop_item",
    "equip_item",
    "unequip_item",
    "consume_item",
    "activate_item",
    "nothing_happens",
    "effect_healed",
    "effect_max_hp_up",
    "effect_cursed_harm",
    "effect_ice_damage",
    "pluralize",
    "effect_harvest",
    "dazzle",
    "dazzle_expired",
    "slow_expired",
    "flower_hit",
    "slowed_by_water",
]
