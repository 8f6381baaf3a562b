"""Tests for enumeration helpers."""

from __future__ import annotations

import pytest

from rogue_engine.models.enums import CellType, Direction


class TestCellType:
    """Tests for CellType."""

    @pytest.mark.parametrize("cell_type", [CellType.DEFAULT_WALL, CellType.OUT_OF_BOUNDS])
    def test_blocking(self, cell_type: CellType) -> None:
        """Test walls and the edge block movement."""
        assert cell_type.blocks_movement

    @pytest.mark.parametrize(
        "cell_type",
        [
            CellType.EMPTY,
            CellType.FLOOR,
            CellType.FLOWER_HAZARD,
            CellType.SHALLOW_WATER,
            CellType.DEEP_WATER,
        ],
    )
    def test_not_blocking(self, cell_type: CellType) -> None:
        """Test other terrain is not blocking on its own."""
        assert not cell_type.blocks_movement


class TestDirection:
    """Tests for Direction."""

    def test_deltas(self) -> None:
        """Test rows grow downward."""
        assert Direction.UP.delta == (0, -1)
        assert Direction.DOWN.delta == (0, 1)
        assert Direction.LEFT.delta == (-1, 0)
        assert Direction.RIGHT.delta == (1, 0)

    def test_from_delta(self) -> None:
        """Test every direction round-trips through its delta."""
        for direction in Direction:
            assert Direction.from_delta(*direction.delta) is direction

    @pytest.mark.parametrize("delta", [(0, 0), (1, 1), (2, 0), (-1, -1)])
    def test_from_delta_rejects_non_cardinal(self, delta: tuple[int, int]) -> None:
        """Test diagonal, zero, and long steps have no direction."""
        assert Direction.from_delta(*delta) is None
