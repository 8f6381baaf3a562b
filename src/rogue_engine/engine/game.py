"""Game: turn counter and command dispatcher.

A Game sequences one player command followed by floor-wide turn resolution,
and buffers the narration produced while doing so. ``execute_command`` is
the only mutation entry point a presentation layer needs.

Example:
    >>> game = Game()
    >>> floor = game.enter_new_floor()
    >>> game.execute_command(Command.WALK_RIGHT)
    >>> floor.player.position
    (2, 1)
    >>> game.turn
    1
"""

from __future__ import annotations

from enum import StrEnum

from rogue_engine.core.config import GameSettings, get_settings
from rogue_engine.core.exceptions import InvalidCommandError, InvalidGameStateError
from rogue_engine.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)
from rogue_engine.engine.dice import DiceRoller
from rogue_engine.engine.floor import Floor
from rogue_engine.engine.levels import populate_test_level
from rogue_engine.models.entities import Actor, Item
from rogue_engine.models.enums import Direction


logger = get_logger(__name__)


class Command(StrEnum):
    """Player commands.

    Item commands take the item as their target parameter.
    """

    PASS = "pass"
    WALK_UP = "walk_up"
    WALK_DOWN = "walk_down"
    WALK_LEFT = "walk_left"
    WALK_RIGHT = "walk_right"
    FIGHT_UP = "fight_up"
    FIGHT_DOWN = "fight_down"
    FIGHT_LEFT = "fight_left"
    FIGHT_RIGHT = "fight_right"
    GET_ITEM = "get_item"
    DROP_ITEM = "drop_item"
    TOGGLE_EQUIPMENT = "toggle_equipment"
    CONSUME_ITEM = "consume_item"
    ACTIVATE_UP = "activate_up"
    ACTIVATE_DOWN = "activate_down"
    ACTIVATE_LEFT = "activate_left"
    ACTIVATE_RIGHT = "activate_right"

    @property
    def takes_item(self) -> bool:
        return self in _ITEM_COMMANDS or self in ACTIVATE_COMMANDS.values()


WALK_COMMANDS: dict[Direction, Command] = {
    Direction.UP: Command.WALK_UP,
    Direction.DOWN: Command.WALK_DOWN,
    Direction.LEFT: Command.WALK_LEFT,
    Direction.RIGHT: Command.WALK_RIGHT,
}

FIGHT_COMMANDS: dict[Direction, Command] = {
    Direction.UP: Command.FIGHT_UP,
    Direction.DOWN: Command.FIGHT_DOWN,
    Direction.LEFT: Command.FIGHT_LEFT,
    Direction.RIGHT: Command.FIGHT_RIGHT,
}

ACTIVATE_COMMANDS: dict[Direction, Command] = {
    Direction.UP: Command.ACTIVATE_UP,
    Direction.DOWN: Command.ACTIVATE_DOWN,
    Direction.LEFT: Command.ACTIVATE_LEFT,
    Direction.RIGHT: Command.ACTIVATE_RIGHT,
}

_ITEM_COMMANDS = frozenset({
    Command.GET_ITEM,
    Command.DROP_ITEM,
    Command.TOGGLE_EQUIPMENT,
    Command.CONSUME_ITEM,
})

_DIRECTION_OF = {
    command: direction
    for table in (WALK_COMMANDS, FIGHT_COMMANDS, ACTIVATE_COMMANDS)
    for direction, command in table.items()
}


class Game:
    """Turn counter and command dispatcher owning the current floor.

    Attributes:
        turn: Number of completed turn cycles.
        current_floor: The floor being played, once entered.
        settings: Game settings used for new floors.
    """

    def __init__(
        self,
        settings: GameSettings | None = None,
        *,
        dice: DiceRoller | None = None,
    ) -> None:
        """Initialize a game with no floor entered yet.

        Without explicit settings the application settings are loaded and
        logging is configured from them.

        Args:
            settings: Game settings; defaults to the application settings.
            dice: Random source; defaults to one seeded from the settings.
        """
        if settings is None:
            app_settings = get_settings()
            configure_logging(
                level=app_settings.log_level,
                json_format=app_settings.json_logs,
            )
            logger.info(
                "Game created",
                app_name=app_settings.app_name,
                app_version=app_settings.app_version,
            )
            settings = app_settings.game
        self.settings = settings
        self.turn = 0
        self.current_floor: Floor | None = None
        self._messages: list[str] = []
        self._dice = dice or DiceRoller(seed=self.settings.rng_seed)

    def enter_new_floor(self) -> Floor:
        """Replace the current floor with a fresh one holding the player.

        Returns:
            The new floor.
        """
        floor = Floor(
            self.settings.floor_width,
            self.settings.floor_height,
            dice=self._dice,
            narrator=self._messages.append,
        )
        floor.create_player(self.settings.player_start_x, self.settings.player_start_y)
        if self.settings.test_level is not None:
            populate_test_level(floor, self.settings.test_level)
        self.current_floor = floor
        logger.info(
            "Entered new floor",
            width=floor.width,
            height=floor.height,
            test_level=self.settings.test_level,
        )
        return floor

    @property
    def is_over(self) -> bool:
        floor = self.current_floor
        return floor is not None and floor.player is not None and floor.player.is_dead

    def get_messages(self) -> list[str]:
        """Get the narration produced by the most recent command.

        Returns:
            Narration lines in the order they happened.
        """
        return list(self._messages)

    def _require_player(self) -> tuple[Floor, Actor]:
        floor = self.current_floor
        if floor is None or floor.player is None:
            raise InvalidGameStateError(
                "No floor with a player has been entered",
                current_state="no_floor",
                expected_states=["playing"],
            )
        if floor.player.is_dead:
            raise InvalidGameStateError(
                "The player is dead",
                current_state="game_over",
                expected_states=["playing"],
            )
        return floor, floor.player

    def execute_command(self, command: Command, target: Item | None = None) -> None:
        """Perform one player command and resolve the rest of the turn.

        Args:
            command: The command to perform.
            target: The item acted on, for item commands.

        Raises:
            InvalidCommandError: If an item command lacks its target.
            InvalidGameStateError: If no game is in progress or a precondition fails.
        """
        floor, player = self._require_player()
        if command.takes_item and target is None:
            raise InvalidCommandError(
                f"Command {command} requires an item",
                command=command.value,
            )
        self._messages.clear()
        bind_context(command=command.value, turn=self.turn)
        try:
            logger.debug("Executing command")
            self._dispatch(floor, player, command, target)
            self._end_player_turn(floor)
        finally:
            clear_context()

    def _dispatch(
        self,
        floor: Floor,
        player: Actor,
        command: Command,
        target: Item | None,
    ) -> None:
        if command == Command.PASS:
            pass
        elif command in WALK_COMMANDS.values():
            floor.actor_walk(player, *_DIRECTION_OF[command].delta)
        elif command in FIGHT_COMMANDS.values():
            floor.actor_fight(player, *_DIRECTION_OF[command].delta)
        elif command == Command.GET_ITEM:
            floor.player_get_item(target)
        elif command == Command.DROP_ITEM:
            floor.player_drop_item(target)
        elif command == Command.TOGGLE_EQUIPMENT:
            floor.player_toggle_equipment(target)
        elif command == Command.CONSUME_ITEM:
            floor.player_consume_item(target)
        elif command in ACTIVATE_COMMANDS.values():
            floor.player_activate_item(target, *_DIRECTION_OF[command].delta)
        else:
            raise InvalidCommandError(f"Unhandled command: {command}", command=str(command))

    def _end_player_turn(self, floor: Floor, *, extra_turn: bool = False) -> None:
        """Advance the turn counter and resolve the rest of the turn.

        A player left with ``skip_next_turn`` set gets exactly one extra
        cycle; the flag is cleared after that cycle even if a slow tick set
        it again.
        """
        self.turn += 1
        bind_context(turn=self.turn)
        floor.do_end_of_turn()
        logger.debug("Turn ended", extra_turn=extra_turn)

        player = floor.player
        if player is None or player.is_dead:
            return
        if extra_turn:
            player.skip_next_turn = False
            return
        if player.skip_next_turn:
            player.skip_next_turn = False
            self._end_player_turn(floor, extra_turn=True)

    def execute_walk_or_fight(self, direction: Direction) -> None:
        """Walk in a direction, or attack whoever stands there."""
        floor, player = self._require_player()
        dx, dy = direction.delta
        if floor.find_actors_at(player.tile_x + dx, player.tile_y + dy):
            self.execute_command(FIGHT_COMMANDS[direction])
        else:
            self.execute_command(WALK_COMMANDS[direction])

    def execute_get_first_item(self) -> None:
        """Pick up the first loose item on the player's tile, if there is one."""
        floor, player = self._require_player()
        items = floor.find_loose_items_at(player.tile_x, player.tile_y)
        if items:
            self.execute_command(Command.GET_ITEM, items[0])


__all__ = [
    "Command",
    "Game",
    "WALK_COMMANDS",
    "FIGHT_COMMANDS",
    "ACTIVATE_COMMANDS",
]
