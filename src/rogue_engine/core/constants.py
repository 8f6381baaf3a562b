"""Rule constants for the floor simulation.

These values are part of the game's balance rather than its configuration,
so they live here instead of in the settings.
"""

from __future__ import annotations

# =============================================================================
# Hazards
# =============================================================================

FLOWER_HAZARD_CYCLE_LENGTH = 5
"""Turns in one idle/ready/active cycle of a flower hazard cell."""

FLOWER_HAZARD_DAMAGE = 1
"""Damage dealt to each actor standing on an active flower hazard."""

# =============================================================================
# Item Effects
# =============================================================================

FULL_HEAL_AMOUNT = 1000
"""Healing from a healing herb; large enough to always top up to max HP."""

BLESSED_MAX_HP_BONUS = 2
"""Max HP gained from a blessed healing effect."""

CURSED_HEAL_DAMAGE = 2
"""Damage a cursed healing item inflicts on whoever consumes it."""

FOOD_HEAL_AMOUNT = 1
"""Healing from eating ordinary food such as a darkberry."""

ICE_DAMAGE = 3
"""Damage dealt by an ice effect."""

UNLIMITED_CHARGES = -1
"""Charge count meaning an activatable item never runs out."""

# =============================================================================
# Luck
# =============================================================================

CURSED_ITEM_LUCK_PENALTY = 1
"""Luck lost by consuming a cursed item."""

CURSED_EQUIPMENT_LUCK_PENALTY = 1
"""Luck lost while a cursed item is equipped."""

# =============================================================================
# Actor Behavior
# =============================================================================

DAZZLE_DURATION = 4
"""Turns the dazzle condition lasts once inflicted."""

DAZZLE_COOLDOWN = 6
"""Turns a dazzling actor waits before it can dazzle again."""

DAZZLE_RANGE = 2
"""Exact taxicab distance from which dazzle can be inflicted."""

DAZZLE_MISS_ONE_IN = 4
"""A dazzled attacker misses one attack in this many."""

APPROACH_RADIUS = 4
"""Distance within which approaching actors close in on the player."""

FAIRY_WANDER_CHANCE = 0.5
"""Chance per turn that a dazzling actor takes a random step."""

MERMAID_WANDER_CHANCE = 0.25
"""Chance per turn that an approaching actor wanders when the player is far."""

WEAPON_SLOT = "weapon"
"""Equipment slot whose item supplies the wielder's attack verb."""


__all__ = [
    # Hazards
    "FLOWER_HAZARD_CYCLE_LENGTH",
    "FLOWER_HAZARD_DAMAGE",
    # Item effects
    "FULL_HEAL_AMOUNT",
    "BLESSED_MAX_HP_BONUS",
    "CURSED_HEAL_DAMAGE",
    "FOOD_HEAL_AMOUNT",
    "ICE_DAMAGE",
    "UNLIMITED_CHARGES",
    # Luck
    "CURSED_ITEM_LUCK_PENALTY",
    "CURSED_EQUIPMENT_LUCK_PENALTY",
    # Actor behavior
    "DAZZLE_DURATION",
    "DAZZLE_COOLDOWN",
    "DAZZLE_RANGE",
    "DAZZLE_MISS_ONE_IN",
    "APPROACH_RADIUS",
    "FAIRY_WANDER_CHANCE",
    "MERMAID_WANDER_CHANCE",
    "WEAPON_SLOT",
]
