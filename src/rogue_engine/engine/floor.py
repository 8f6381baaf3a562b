"""Floor simulation: the grid, its actors and items, and every rule that mutates them.

The Floor owns all state of a level. Movement, combat, item use, hazard
cycling, and the non-player AI are operations on it; nothing outside the
Floor writes entity fields directly. Each narratable event is handed to the
narrator callable supplied by the Floor's owner, in the order it happens.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from rogue_engine.content import get_actor_template, get_item_template
from rogue_engine.core.constants import (
    APPROACH_RADIUS,
    BLESSED_MAX_HP_BONUS,
    CURSED_EQUIPMENT_LUCK_PENALTY,
    CURSED_HEAL_DAMAGE,
    CURSED_ITEM_LUCK_PENALTY,
    DAZZLE_COOLDOWN,
    DAZZLE_DURATION,
    DAZZLE_MISS_ONE_IN,
    DAZZLE_RANGE,
    FAIRY_WANDER_CHANCE,
    FLOWER_HAZARD_CYCLE_LENGTH,
    FLOWER_HAZARD_DAMAGE,
    FOOD_HEAL_AMOUNT,
    FULL_HEAL_AMOUNT,
    ICE_DAMAGE,
    MERMAID_WANDER_CHANCE,
    WEAPON_SLOT,
)
from rogue_engine.core.exceptions import (
    ConfigurationError,
    EntityNotFoundError,
    GameEngineError,
    InvalidCommandError,
    InvalidGameStateError,
)
from rogue_engine.core.logging import get_logger
from rogue_engine.engine import messages
from rogue_engine.engine.dice import DiceRoller
from rogue_engine.models.entities import Actor, Cell, DazzleState, Item, PatrolState
from rogue_engine.models.enums import (
    ActorBehavior,
    Beatitude,
    CellType,
    Condition,
    Direction,
    EquippedSpecialEffect,
    ItemActivateRange,
    ItemEffect,
    Phase,
)
from rogue_engine.models.templates import ActorTemplate, HarvestYield, ItemTemplate


logger = get_logger(__name__)

Narrator = Callable[[str], None]


def taxicab_distance(x1: int, y1: int, x2: int, y2: int) -> int:
    """Manhattan distance between two tiles.

    Example:
        >>> taxicab_distance(0, 0, 3, 3)
        6
    """
    return abs(x1 - x2) + abs(y1 - y2)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _require_cardinal(dx: int, dy: int) -> None:
    if Direction.from_delta(dx, dy) is None:
        raise InvalidCommandError(
            f"Not a cardinal unit step: ({dx}, {dy})",
            details={"dx": dx, "dy": dy},
        )


class Floor:
    """A single level: a grid of cells plus the actors and items on it.

    Attributes:
        width: Width in tiles.
        height: Height in tiles.
        cells: Column-major grid, ``cells[x][y]``.
        actors: Live actors in creation order; the AI runs in this order.
        items: Items not yet destroyed, loose or held.
        next_id: Next id to hand out; actors and items share the id space.
        player: The player-controlled actor, once created.

    Example:
        >>> floor = Floor(9, 9)
        >>> player = floor.create_player(1, 1)
        >>> floor.actor_walk(player, 1, 0)
        True
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        dice: DiceRoller | None = None,
        narrator: Narrator | None = None,
    ) -> None:
        """Create a floor with wall borders and a bare interior.

        Args:
            width: Width in tiles.
            height: Height in tiles.
            dice: Random source for combat and AI decisions.
            narrator: Receives each narration line as it happens.

        Raises:
            ConfigurationError: If either dimension is not positive.
        """
        if width < 1 or height < 1:
            raise ConfigurationError(
                f"Floor dimensions must be positive, got {width}x{height}",
                config_key="floor_size",
            )
        self.width = width
        self.height = height
        self.cells: list[list[Cell]] = []
        for x in range(width):
            column = []
            for y in range(height):
                on_border = x == 0 or y == 0 or x == width - 1 or y == height - 1
                column.append(Cell(type=CellType.DEFAULT_WALL if on_border else CellType.FLOOR))
            self.cells.append(column)
        self.actors: list[Actor] = []
        self.items: list[Item] = []
        self.next_id = 0
        self.player: Actor | None = None
        self._dice = dice or DiceRoller()
        self._narrator = narrator
        logger.debug("Floor created", width=width, height=height)

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def dice(self) -> DiceRoller:
        return self._dice

    def _narrate(self, line: str) -> None:
        logger.debug("Narration", line=line)
        if self._narrator is not None:
            self._narrator(line)

    def _allocate_id(self) -> int:
        entity_id = self.next_id
        self.next_id += 1
        return entity_id

    # =========================================================================
    # Creation
    # =========================================================================

    def create_actor(self, template: ActorTemplate, x: int, y: int) -> Actor:
        """Place a new actor on the floor.

        Args:
            template: Template to instantiate.
            x: Column.
            y: Row.

        Returns:
            The new Actor.

        Raises:
            InvalidGameStateError: If a second player-controlled actor is created.
        """
        if template.behavior == ActorBehavior.PLAYER_INPUT and self.player is not None:
            raise InvalidGameStateError(
                "Floor already has a player",
                current_state="player_present",
            )
        actor = Actor.from_template(self._allocate_id(), template, x, y)
        self.actors.append(actor)
        if actor.is_player:
            self.player = actor
        logger.info("Actor created", actor_id=actor.id, name=actor.name, x=x, y=y)
        return actor

    def create_player(self, x: int, y: int) -> Actor:
        return self.create_actor(get_actor_template("PLAYER"), x, y)

    def create_item(
        self,
        template: ItemTemplate,
        x: int,
        y: int,
        beatitude: Beatitude = Beatitude.NEUTRAL,
    ) -> Item:
        """Place a new loose item on the floor.

        Args:
            template: Template to instantiate.
            x: Column.
            y: Row.
            beatitude: Cursed, neutral, or blessed.

        Returns:
            The new Item.
        """
        item = Item.from_template(self._allocate_id(), template, x, y, beatitude)
        self.items.append(item)
        logger.info(
            "Item created",
            item_id=item.id,
            name=item.display_name,
            x=x,
            y=y,
        )
        return item

    # =========================================================================
    # Spatial Queries
    # =========================================================================

    def is_out_of_bounds(self, x: int, y: int) -> bool:
        return x < 0 or y < 0 or x >= self.width or y >= self.height

    def get_cell_type(self, x: int, y: int) -> CellType:
        """Get the terrain at a tile.

        Returns:
            The cell's type, or OUT_OF_BOUNDS for tiles outside the grid.
        """
        if self.is_out_of_bounds(x, y):
            return CellType.OUT_OF_BOUNDS
        return self.cells[x][y].type

    def get_cell(self, x: int, y: int) -> Cell | None:
        if self.is_out_of_bounds(x, y):
            return None
        return self.cells[x][y]

    def set_cell(self, x: int, y: int, cell_type: CellType) -> None:
        """Change the terrain at a tile; out-of-bounds tiles are ignored.

        Placing a flower hazard starts its cycle from zero.

        Raises:
            InvalidGameStateError: If asked to store the OUT_OF_BOUNDS sentinel.
        """
        if cell_type == CellType.OUT_OF_BOUNDS:
            raise InvalidGameStateError(
                "OUT_OF_BOUNDS cannot be stored in a cell",
                current_state=cell_type.value,
            )
        if self.is_out_of_bounds(x, y):
            return
        cell = self.cells[x][y]
        cell.type = cell_type
        cell.turn_counter = 0
        cell.phase = Phase.IDLE if cell_type == CellType.FLOWER_HAZARD else None

    def iter_cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Iterate over every tile in column-major order."""
        for x, column in enumerate(self.cells):
            for y, cell in enumerate(column):
                yield x, y, cell

    def find_actors_at(self, x: int, y: int) -> list[Actor]:
        return [actor for actor in self.actors if actor.tile_x == x and actor.tile_y == y]

    def find_loose_items_at(self, x: int, y: int) -> list[Item]:
        return [
            item
            for item in self.items
            if item.held_actor is None and item.tile_x == x and item.tile_y == y
        ]

    def get_actor(self, actor_id: int) -> Actor:
        """Look up a live actor by id.

        Raises:
            EntityNotFoundError: If no live actor has that id.
        """
        for actor in self.actors:
            if actor.id == actor_id:
                return actor
        raise EntityNotFoundError(f"No live actor with id {actor_id}", entity_id=actor_id)

    def get_item(self, item_id: int) -> Item:
        """Look up an undestroyed item by id.

        Raises:
            EntityNotFoundError: If no undestroyed item has that id.
        """
        for item in self.items:
            if item.id == item_id:
                return item
        raise EntityNotFoundError(f"No item with id {item_id}", entity_id=item_id)

    def distance_to_player(self, actor: Actor) -> int:
        """Taxicab distance from an actor to the player.

        Raises:
            InvalidGameStateError: If the floor has no player.
        """
        if self.player is None:
            raise InvalidGameStateError("Floor has no player", current_state="no_player")
        return taxicab_distance(actor.tile_x, actor.tile_y, self.player.tile_x, self.player.tile_y)

    # =========================================================================
    # Movement
    # =========================================================================

    def actor_can_swim(self, actor: Actor) -> bool:
        return actor.template.swims or actor.has_equipped_effect(EquippedSpecialEffect.SWIMMING)

    def teleport_actor(self, actor: Actor, x: int, y: int) -> None:
        """Move an actor and everything it carries to a tile, unconditionally."""
        actor.tile_x = x
        actor.tile_y = y
        for item in actor.inventory or []:
            item.tile_x = x
            item.tile_y = y

    def actor_walk(self, actor: Actor, dx: int, dy: int) -> bool:
        """Step an actor one tile in a cardinal direction.

        Walls, the floor edge, occupied tiles, and deep water for
        non-swimmers block the step. Wading into shallow water without
        swimming costs the actor its next turn.

        Args:
            actor: Actor to move.
            dx: Column step.
            dy: Row step.

        Returns:
            True if the actor moved.

        Raises:
            InvalidCommandError: If the step is not a cardinal unit step.
        """
        _require_cardinal(dx, dy)
        next_x = actor.tile_x + dx
        next_y = actor.tile_y + dy
        next_cell_type = self.get_cell_type(next_x, next_y)
        if next_cell_type.blocks_movement:
            return False
        can_swim = self.actor_can_swim(actor)
        if next_cell_type == CellType.DEEP_WATER and not can_swim:
            return False
        if self.find_actors_at(next_x, next_y):
            return False

        self.teleport_actor(actor, next_x, next_y)

        if next_cell_type == CellType.SHALLOW_WATER and not can_swim:
            actor.skip_next_turn = True
            self._narrate(messages.slowed_by_water(actor.name))
        return True

    # =========================================================================
    # Combat
    # =========================================================================

    def get_attack_verb(self, actor: Actor) -> str:
        weapon = actor.equipped_in_slot(WEAPON_SLOT)
        if weapon is not None and weapon.template.weapon_attack_verb:
            return weapon.template.weapon_attack_verb
        return actor.template.attack_verb or "hits"

    def actor_fight(self, attacker: Actor, dx: int, dy: int) -> None:
        """Attack every actor on the adjacent tile in a direction.

        A dazzled attacker misses each defender one time in four. A hit
        deals the attacker's current attack power.

        Raises:
            InvalidCommandError: If the step is not a cardinal unit step.
        """
        _require_cardinal(dx, dy)
        target_x = attacker.tile_x + dx
        target_y = attacker.tile_y + dy
        for defender in self.find_actors_at(target_x, target_y):
            if attacker.has_condition(Condition.DAZZLE) and self._dice.one_in(DAZZLE_MISS_ONE_IN):
                self._narrate(messages.fight_dazzled_miss(attacker.name, defender.name))
                continue
            self._narrate(
                messages.fight(attacker.name, self.get_attack_verb(attacker), defender.name)
            )
            self._change_actor_hp(defender, -attacker.attack_power)

    def _change_actor_hp(self, actor: Actor, delta: int) -> None:
        if actor.is_dead:
            return
        actor.current_hp = min(actor.current_hp + delta, actor.max_hp)
        if actor.current_hp <= 0:
            self._remove_actor(actor)
            self._narrate(messages.death(actor.name))

    def _remove_actor(self, actor: Actor) -> None:
        actor.is_dead = True
        if actor in self.actors:
            self.actors.remove(actor)
        logger.info("Actor removed", actor_id=actor.id, name=actor.name)

    # =========================================================================
    # Conditions
    # =========================================================================

    def apply_condition(self, actor: Actor, condition: Condition, turns: int) -> None:
        """Give an actor a condition for a number of turns, replacing any remaining time."""
        actor.conditions[condition] = turns

    def _tick_conditions(self, actor: Actor) -> None:
        for condition in list(actor.conditions):
            if condition == Condition.SLOW:
                actor.skip_next_turn = True
            remaining = actor.conditions[condition] - 1
            if remaining > 0:
                actor.conditions[condition] = remaining
                continue
            del actor.conditions[condition]
            if condition == Condition.DAZZLE:
                self._narrate(messages.dazzle_expired(actor.name))
            elif condition == Condition.SLOW:
                self._narrate(messages.slow_expired(actor.name))
            else:
                raise GameEngineError(f"Unhandled condition: {condition}")

    # =========================================================================
    # Items
    # =========================================================================

    def _require_held_by_player(self, item: Item) -> Actor:
        player = self.player
        if player is None or item.held_actor is not player or item.is_destroyed:
            raise InvalidGameStateError(
                f"Item {item.id} is not held by the player",
                current_state="loose" if item.held_actor is None else "held_elsewhere",
                expected_states=["held_by_player"],
            )
        return player

    def player_get_item(self, item: Item) -> None:
        """Move a loose item on the player's tile into the player's inventory.

        Raises:
            InvalidGameStateError: If the item is carried, destroyed, or elsewhere.
        """
        player = self.player
        if player is None or not item.is_loose or item.position != player.position:
            raise InvalidGameStateError(
                f"Item {item.id} is not loose on the player's tile",
                expected_states=["loose_on_player_tile"],
            )
        assert player.inventory is not None
        player.inventory.append(item)
        item.held_actor = player
        self._narrate(messages.get_item(player.name, item.display_name))

    def player_drop_item(self, item: Item) -> None:
        """Put a carried item down on the player's tile, unequipping it first."""
        player = self._require_held_by_player(item)
        if item.equipped:
            self._unequip_item(player, item)
        item.held_actor = None
        assert player.inventory is not None
        player.inventory.remove(item)
        self._narrate(messages.drop_item(player.name, item.display_name))

    def player_toggle_equipment(self, item: Item) -> None:
        """Equip or unequip a carried item.

        Equipping first takes off whatever already occupies the same slot.

        Raises:
            InvalidGameStateError: If the item is not carried or not equippable.
        """
        player = self._require_held_by_player(item)
        if not item.template.is_equippable:
            raise InvalidGameStateError(
                f"Item {item.id} cannot be equipped",
                current_state="not_equippable",
            )
        slot = item.template.equipment_slot
        if item.equipped:
            self._unequip_item(player, item)
            return
        current = player.equipped_in_slot(slot)
        if current is not None:
            self._unequip_item(player, current)
        self._equip_item(player, item)

    def _equip_item(self, actor: Actor, item: Item) -> None:
        item.equipped = True
        actor.attack_power += item.template.equipped_attack_power
        actor.defense += item.template.equipped_defense
        if item.beatitude == Beatitude.CURSED:
            actor.luck -= CURSED_EQUIPMENT_LUCK_PENALTY
        self._narrate(
            messages.equip_item(actor.name, item.display_name, item.template.equipment_slot)
        )

    def _unequip_item(self, actor: Actor, item: Item) -> None:
        item.equipped = False
        actor.attack_power -= item.template.equipped_attack_power
        actor.defense -= item.template.equipped_defense
        if item.beatitude == Beatitude.CURSED:
            actor.luck += CURSED_EQUIPMENT_LUCK_PENALTY
        self._narrate(
            messages.unequip_item(actor.name, item.display_name, item.template.equipment_slot)
        )

    def player_consume_item(self, item: Item) -> None:
        """Consume a carried item, applying its effect to the player and destroying it.

        Raises:
            InvalidGameStateError: If the item is not carried or not consumable.
        """
        player = self._require_held_by_player(item)
        effect = item.template.consume_effect
        if effect is None:
            raise InvalidGameStateError(
                f"Item {item.id} cannot be consumed",
                current_state="not_consumable",
            )
        if item.equipped:
            self._unequip_item(player, item)
        self._narrate(messages.consume_item(player.name, item.display_name))
        if item.beatitude == Beatitude.CURSED:
            player.luck -= CURSED_ITEM_LUCK_PENALTY
        self._destroy_item(item)
        self._run_item_effect(item, effect, player)

    def player_activate_item(self, item: Item, dx: int, dy: int) -> None:
        """Activate a carried item toward a direction.

        The activation travels tile by tile from the player until it reaches
        an actor, a wall, the floor edge, or the end of the item's range.
        An empty item, or one whose activation reaches no actor, narrates
        that nothing happens.

        Raises:
            InvalidGameStateError: If the item is not carried or not activatable.
            InvalidCommandError: If the direction is not a cardinal unit step.
        """
        player = self._require_held_by_player(item)
        effect = item.template.activate_effect
        if effect is None:
            raise InvalidGameStateError(
                f"Item {item.id} cannot be activated",
                current_state="not_activatable",
            )
        _require_cardinal(dx, dy)

        if item.remaining_charges == 0:
            self._narrate(messages.nothing_happens())
            return

        self._narrate(messages.activate_item(player.name, item.display_name))
        max_steps = 1 if item.template.activate_range == ItemActivateRange.ADJACENT else None
        x, y = player.position
        steps = 0
        hit = False
        while True:
            x += dx
            y += dy
            steps += 1
            if self.get_cell_type(x, y).blocks_movement:
                break
            targets = self.find_actors_at(x, y)
            if targets:
                self._run_item_effect(item, effect, targets[0])
                hit = True
                break
            if max_steps is not None and steps >= max_steps:
                break
        if not hit:
            self._narrate(messages.nothing_happens())

        if not item.has_unlimited_charges:
            item.remaining_charges -= 1

    def _destroy_item(self, item: Item) -> None:
        holder = item.held_actor
        if holder is not None and holder.inventory is not None and item in holder.inventory:
            holder.inventory.remove(item)
        item.held_actor = None
        item.equipped = False
        item.is_destroyed = True
        if item in self.items:
            self.items.remove(item)
        logger.info("Item destroyed", item_id=item.id, name=item.display_name)

    def _run_item_effect(self, source_item: Item, effect: ItemEffect, target: Actor) -> None:
        if effect == ItemEffect.HEAL:
            if source_item.beatitude == Beatitude.CURSED:
                self._narrate(messages.effect_cursed_harm(target.name))
                self._change_actor_hp(target, -CURSED_HEAL_DAMAGE)
                return
            if source_item.beatitude == Beatitude.BLESSED:
                target.max_hp += BLESSED_MAX_HP_BONUS
                self._narrate(messages.effect_max_hp_up(target.name))
            self._change_actor_hp(target, FULL_HEAL_AMOUNT)
            self._narrate(messages.effect_healed(target.name))
        elif effect == ItemEffect.HEAL_FOOD:
            if source_item.beatitude == Beatitude.CURSED:
                self._narrate(messages.effect_cursed_harm(target.name))
                self._change_actor_hp(target, -FOOD_HEAL_AMOUNT)
                return
            self._change_actor_hp(target, FOOD_HEAL_AMOUNT)
            self._narrate(messages.effect_healed(target.name))
        elif effect == ItemEffect.ICE_DAMAGE:
            self._narrate(messages.effect_ice_damage(target.name))
            self._change_actor_hp(target, -ICE_DAMAGE)
        elif effect == ItemEffect.BASIC_HARVEST:
            self._harvest(target, target.template.basic_harvest_item)
        elif effect == ItemEffect.MAGIC_HARVEST:
            self._harvest(target, target.template.magic_harvest_item)
        else:
            raise GameEngineError(f"Unhandled item effect: {effect}")

    def _harvest(self, target: Actor, harvest_yield: HarvestYield | None) -> None:
        if harvest_yield is None:
            self._narrate(messages.nothing_happens())
            return
        template = get_item_template(harvest_yield.item_key)
        for _ in range(harvest_yield.count):
            self.create_item(template, target.tile_x, target.tile_y)
        self._narrate(
            messages.effect_harvest(target.name, template.display_name, harvest_yield.count)
        )
        self._remove_actor(target)

    # =========================================================================
    # Hazards
    # =========================================================================

    def _update_cell(self, x: int, y: int) -> None:
        cell = self.cells[x][y]
        if cell.type != CellType.FLOWER_HAZARD:
            return
        cell.turn_counter += 1
        mod = cell.turn_counter % FLOWER_HAZARD_CYCLE_LENGTH
        if mod == FLOWER_HAZARD_CYCLE_LENGTH - 1:
            cell.phase = Phase.ACTIVE
            for actor in self.find_actors_at(x, y):
                self._narrate(messages.flower_hit(actor.name))
                self._change_actor_hp(actor, -FLOWER_HAZARD_DAMAGE)
        elif mod == FLOWER_HAZARD_CYCLE_LENGTH - 2:
            cell.phase = Phase.READY
        else:
            cell.phase = Phase.IDLE

    # =========================================================================
    # Turn Resolution
    # =========================================================================

    def do_end_of_turn(self) -> None:
        """Resolve everything that happens after the player acts.

        Player conditions count down, then each live non-player actor takes
        its turn in creation order, then every hazard cell advances.
        """
        if self.player is not None and not self.player.is_dead:
            self._tick_conditions(self.player)
        for actor in list(self.actors):
            if actor.is_dead or actor.is_player:
                continue
            self._do_actors_turn(actor)
        for x in range(self.width):
            for y in range(self.height):
                self._update_cell(x, y)

    def _do_actors_turn(self, actor: Actor) -> None:
        if actor.skip_next_turn:
            actor.skip_next_turn = False
            return
        player = self.player
        if player is None or player.is_dead:
            return

        behavior = actor.template.behavior
        if behavior == ActorBehavior.PASSIVE:
            return

        offset_x = player.tile_x - actor.tile_x
        offset_y = player.tile_y - actor.tile_y
        distance = self.distance_to_player(actor)
        if distance == 1:
            self.actor_fight(actor, offset_x, offset_y)
            return

        if behavior == ActorBehavior.PATROL_VERTICALLY:
            if not isinstance(actor.behavior_state, PatrolState):
                actor.behavior_state = PatrolState()
            state = actor.behavior_state
            if not self.actor_walk(actor, 0, state.direction):
                state.direction = -state.direction
        elif behavior == ActorBehavior.INFLICT_DAZZLE:
            if not isinstance(actor.behavior_state, DazzleState):
                actor.behavior_state = DazzleState()
            state = actor.behavior_state
            state.cooldown -= 1
            aligned = offset_x == 0 or offset_y == 0
            if distance == DAZZLE_RANGE and aligned and state.cooldown <= 0:
                self.apply_condition(player, Condition.DAZZLE, DAZZLE_DURATION)
                state.cooldown = DAZZLE_COOLDOWN
                self._narrate(messages.dazzle(actor.name, player.name))
            else:
                self._wander(actor, FAIRY_WANDER_CHANCE)
        elif behavior == ActorBehavior.APPROACH_WHEN_NEAR:
            if distance <= APPROACH_RADIUS:
                if distance == 0:
                    return
                if abs(offset_x) > abs(offset_y):
                    self.actor_walk(actor, _sign(offset_x), 0)
                else:
                    self.actor_walk(actor, 0, _sign(offset_y))
            else:
                self._wander(actor, MERMAID_WANDER_CHANCE)
        elif behavior == ActorBehavior.PLAYER_INPUT:
            raise GameEngineError("The AI cannot run a player-controlled actor")
        else:
            raise GameEngineError(f"Unhandled actor behavior: {behavior}")

    def _wander(self, actor: Actor, chance: float) -> None:
        if not self._dice.chance(chance):
            return
        dx, dy = self._dice.choose_direction().delta
        self.actor_walk(actor, dx, dy)


__all__ = [
    "Floor",
    "Narrator",
    "taxicab_distance",
]
