"""Integration tests for complete play scenarios.

Each test drives a Game through execute_command only, the way a
presentation layer would, and checks the resulting floor and narration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rogue_engine.content import get_actor_template
from rogue_engine.core.config import GameSettings
from rogue_engine.engine.game import Command, Game
from rogue_engine.models.enums import CellType, Condition, Phase


if TYPE_CHECKING:
    from conftest import ScriptedDice


class TestHazardScenario:
    """Standing on a flower hazard."""

    def test_flower_stings_on_fourth_pass(self, game: Game) -> None:
        """Three quiet passes, one sting, then quiet again."""
        floor = game.current_floor
        floor.set_cell(1, 1, CellType.FLOWER_HAZARD)
        player = floor.player

        for _ in range(3):
            game.execute_command(Command.PASS)
            assert player.current_hp == 12
            assert game.get_messages() == []
        assert floor.get_cell(1, 1).phase == Phase.READY

        game.execute_command(Command.PASS)
        assert player.current_hp == 11
        assert len(game.get_messages()) == 1

        game.execute_command(Command.PASS)
        assert player.current_hp == 11
        assert game.get_messages() == []


class TestMeleeScenario:
    """Fighting a heron to the death."""

    def test_heron_dies_after_four_blows(self, game: Game) -> None:
        """The heron trades blows until it falls."""
        floor = game.current_floor
        heron = floor.create_actor(get_actor_template("HERON"), 2, 1)

        for _ in range(3):
            game.execute_command(Command.FIGHT_RIGHT)
        assert heron.current_hp == 1
        assert floor.player.current_hp == 9

        game.execute_command(Command.FIGHT_RIGHT)

        assert heron.is_dead
        assert floor.find_actors_at(2, 1) == []
        assert floor.player.current_hp == 9
        assert game.get_messages() == ["Rogue punches heron.", "Heron dies!"]

        game.execute_command(Command.WALK_RIGHT)
        assert floor.player.position == (2, 1)


class TestDazzleScenario:
    """Being dazzled by a starlight fairy."""

    def test_dazzle_lasts_four_turns(self, game: Game, dice: ScriptedDice) -> None:
        """Dazzle lands on the first pass and wears off on the fifth."""
        floor = game.current_floor
        floor.create_actor(get_actor_template("STARLIGHT_FAIRY"), 1, 3)
        player = floor.player

        game.execute_command(Command.PASS)
        assert player.has_condition(Condition.DAZZLE)
        assert len(game.get_messages()) == 1

        for _ in range(3):
            game.execute_command(Command.PASS)
            assert player.has_condition(Condition.DAZZLE)
            assert game.get_messages() == []

        game.execute_command(Command.PASS)
        assert not player.has_condition(Condition.DAZZLE)
        assert game.get_messages() == ["Rogue is no longer dazzled."]

    def test_dazzled_player_misses(self, game: Game, dice: ScriptedDice) -> None:
        """A dazzled player's blow can go wide."""
        floor = game.current_floor
        heron = floor.create_actor(get_actor_template("HERON"), 2, 1)
        floor.apply_condition(floor.player, Condition.DAZZLE, 4)
        dice.miss = True

        game.execute_command(Command.FIGHT_RIGHT)

        assert heron.current_hp == 4
        messages = game.get_messages()
        assert len(messages) == 2
        assert messages[1] == "Heron pecks Rogue."


class TestPondScenario:
    """Wading into the pond on test level 2."""

    def test_wading_costs_a_turn(self, dice: ScriptedDice) -> None:
        """Entering shallow water without swimming loses the next turn."""
        game = Game(GameSettings(test_level=2), dice=dice)
        floor = game.enter_new_floor()
        mermaid = floor.find_actors_at(6, 6)[0]

        for command in (
            Command.WALK_RIGHT,
            Command.WALK_DOWN,
            Command.WALK_RIGHT,
            Command.WALK_DOWN,
            Command.WALK_RIGHT,
        ):
            game.execute_command(command)
        assert floor.player.position == (4, 3)
        assert game.turn == 5

        game.execute_command(Command.WALK_DOWN)

        assert floor.player.position == (4, 4)
        assert game.turn == 7
        # The heron wades on the extra turn as well.
        assert game.get_messages() == [
            "Rogue is slowed wading in the water.",
            "Heron is slowed wading in the water.",
        ]
        assert mermaid.position == (5, 5)

    def test_deep_water_blocks(self, dice: ScriptedDice) -> None:
        """Deep water stops a player without a ring of swimming."""
        game = Game(GameSettings(test_level=2), dice=dice)
        floor = game.enter_new_floor()
        floor.set_cell(2, 1, CellType.DEEP_WATER)

        game.execute_command(Command.WALK_RIGHT)

        assert floor.player.position == (1, 1)
        assert game.turn == 1


class TestHarvestScenario:
    """Harvesting darkberries on test level 3."""

    def test_harvest_and_eat(self, dice: ScriptedDice) -> None:
        """Fetch a knife, harvest a shrub, and eat one of its berries."""
        game = Game(GameSettings(test_level=3), dice=dice)
        floor = game.enter_new_floor()
        player = floor.player

        game.execute_command(Command.WALK_RIGHT)
        game.execute_command(Command.WALK_DOWN)
        knife = floor.find_loose_items_at(2, 2)[0]
        game.execute_command(Command.GET_ITEM, knife)
        for _ in range(3):
            game.execute_command(Command.WALK_DOWN)
        game.execute_command(Command.WALK_RIGHT)
        assert player.position == (3, 5)

        game.execute_command(Command.ACTIVATE_RIGHT, knife)

        assert game.get_messages() == [
            "Rogue uses the steel knife.",
            "Darkberry shrub is harvested for 3 darkberries.",
        ]
        assert len(floor.find_loose_items_at(4, 5)) == 3

        game.execute_command(Command.WALK_RIGHT)
        game.execute_get_first_item()
        berry = player.inventory[-1]
        player.current_hp = 4
        game.execute_command(Command.CONSUME_ITEM, berry)

        assert player.current_hp == 5
        assert berry.is_destroyed
        assert len(floor.find_loose_items_at(4, 5)) == 2
        assert game.turn == 11
