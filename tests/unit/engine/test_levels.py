"""Tests for the canned test levels."""

from __future__ import annotations

import pytest

from rogue_engine.core.exceptions import ConfigurationError
from rogue_engine.engine.floor import Floor
from rogue_engine.engine.levels import TEST_LEVELS, populate_test_level
from rogue_engine.models.enums import Beatitude, CellType


@pytest.fixture
def empty_floor() -> Floor:
    floor = Floor(9, 9)
    floor.create_player(1, 1)
    return floor


class TestPopulateTestLevel:
    """Tests for populate_test_level."""

    @pytest.mark.parametrize("index", sorted(TEST_LEVELS))
    def test_levels_leave_player_start_clear(self, empty_floor: Floor, index: int) -> None:
        """Test no level places anything on the player's tile."""
        populate_test_level(empty_floor, index)

        assert empty_floor.find_actors_at(1, 1) == [empty_floor.player]
        assert empty_floor.get_cell_type(1, 1) == CellType.FLOOR

    def test_level_1(self, empty_floor: Floor) -> None:
        """Test the hazard level."""
        populate_test_level(empty_floor, 1)

        assert empty_floor.get_cell_type(3, 4) == CellType.DEFAULT_WALL
        assert empty_floor.get_cell_type(1, 4) == CellType.FLOWER_HAZARD
        assert [actor.name for actor in empty_floor.actors] == ["Rogue", "heron"]
        assert len(empty_floor.items) == 2

    def test_level_2(self, empty_floor: Floor) -> None:
        """Test the pond level."""
        populate_test_level(empty_floor, 2)

        assert empty_floor.get_cell_type(4, 4) == CellType.SHALLOW_WATER
        assert empty_floor.get_cell_type(5, 5) == CellType.DEEP_WATER
        assert empty_floor.find_actors_at(6, 6)[0].name == "mermaid"
        assert empty_floor.find_loose_items_at(2, 2)[0].display_name == "ring of swimming"

    def test_level_3(self, empty_floor: Floor) -> None:
        """Test the item level."""
        populate_test_level(empty_floor, 3)

        beatitudes = {item.display_name: item.beatitude for item in empty_floor.items}
        assert beatitudes["blessed healing herb"] == Beatitude.BLESSED
        assert beatitudes["cursed ring of fencing"] == Beatitude.CURSED
        assert len(empty_floor.actors) == 4

    def test_unknown_level(self, empty_floor: Floor) -> None:
        """Test unknown indices are rejected."""
        with pytest.raises(ConfigurationError) as exc_info:
            populate_test_level(empty_floor, 42)

        assert exc_info.value.details["available"] == [1, 2, 3]

    def test_floor_too_small(self) -> None:
        """Test levels need room."""
        floor = Floor(5, 5)
        floor.create_player(1, 1)

        with pytest.raises(ConfigurationError):
            populate_test_level(floor, 1)
