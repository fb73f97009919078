"""
Tests for board.py - grid geometry, directions and board settings.
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from board import (
    OPPOSITE,
    ConfigError,
    Direction,
    Position,
    SnakeConfig,
    interior_cells,
    interior_size,
    is_opposite,
    is_wall,
)


class TestPosition:
    """Tests for Position arithmetic and equality."""

    def test_equality_is_by_value(self):
        """Positions with the same coordinates are equal, also to plain tuples."""
        assert Position(3, 4) == Position(3, 4)
        assert Position(3, 4) == (3, 4)
        assert Position(3, 4) != Position(4, 3)

    def test_step_each_direction(self):
        """step() moves exactly one cell in the requested direction."""
        pos = Position(5, 5)
        assert pos.step(Direction.UP) == (5, 4)
        assert pos.step(Direction.DOWN) == (5, 6)
        assert pos.step(Direction.LEFT) == (4, 5)
        assert pos.step(Direction.RIGHT) == (6, 5)

    def test_step_returns_new_position(self):
        """step() never mutates the original position."""
        pos = Position(5, 5)
        pos.step(Direction.RIGHT)
        assert pos == (5, 5)

    def test_step_saturates_at_zero(self):
        """Moving up/left from row/column 0 stays at 0 instead of wrapping."""
        assert Position(0, 3).step(Direction.LEFT) == (0, 3)
        assert Position(3, 0).step(Direction.UP) == (3, 0)


class TestDirections:
    """Tests for the opposite-direction table."""

    def test_opposites_are_symmetric(self):
        """Every pair in the table points back at itself."""
        for a, b in OPPOSITE.items():
            assert OPPOSITE[b] == a

    def test_is_opposite(self):
        """is_opposite() only matches true 180-degree pairs."""
        assert is_opposite(Direction.LEFT, Direction.RIGHT)
        assert is_opposite(Direction.DOWN, Direction.UP)
        assert not is_opposite(Direction.RIGHT, Direction.UP)
        assert not is_opposite(Direction.RIGHT, Direction.RIGHT)

    def test_direction_accepts_string_values(self):
        """Directions can be built from their lowercase names."""
        assert Direction("up") is Direction.UP


class TestGeometry:
    """Tests for border and interior helpers."""

    @pytest.mark.parametrize("pos", [(0, 5), (19, 5), (5, 0), (5, 9), (25, 5), (5, 12)])
    def test_border_and_beyond_is_wall(self, pos):
        """Border cells and anything outside are walls on a 20x10 board."""
        assert is_wall(pos, 20, 10)

    @pytest.mark.parametrize("pos", [(1, 1), (18, 8), (5, 5)])
    def test_interior_is_not_wall(self, pos):
        """Cells strictly inside the border are open."""
        assert not is_wall(pos, 20, 10)

    def test_interior_cells(self):
        """interior_cells() lists exactly the non-wall cells."""
        cells = interior_cells(20, 10)
        assert len(cells) == interior_size(20, 10) == 18 * 8
        assert len(set(cells)) == len(cells)
        assert all(not is_wall(cell, 20, 10) for cell in cells)


class TestSnakeConfig:
    """Tests for SnakeConfig defaults and validation."""

    def test_defaults(self):
        """Default board matches the reference 20x10 game."""
        config = SnakeConfig()
        config.validate()
        assert (config.width, config.height) == (20, 10)
        assert config.start == (5, 5)
        assert config.tick_ms == 120

    def test_default_start_is_pulled_inside_small_boards(self):
        """On boards too small for (5, 5) the start moves into the interior."""
        config = SnakeConfig(width=4, height=5)
        config.validate()
        assert config.start == (2, 3)

    def test_start_tuple_becomes_position(self):
        """An explicit start tuple is normalized to a Position."""
        config = SnakeConfig(start=(3, 3))
        assert isinstance(config.start, Position)

    @pytest.mark.parametrize(
        "width,height",
        [(0, 10), (-5, 10), (20, 0), (2, 10), (20, 2), (3, 3)],
    )
    def test_unplayable_boards_rejected(self, width, height):
        """Boards without room for a snake and one food cell fail fast."""
        with pytest.raises(ConfigError):
            SnakeConfig(width=width, height=height).validate()

    def test_non_integer_size_rejected(self):
        """Width/height must be integers."""
        with pytest.raises(ConfigError):
            SnakeConfig(width=20.5, height=10).validate()

    def test_start_on_border_rejected(self):
        """A start cell on the wall is a configuration error."""
        with pytest.raises(ConfigError):
            SnakeConfig(start=(0, 5)).validate()

    def test_bad_tick_and_cell_size_rejected(self):
        """Tick interval and cell size are range-checked."""
        with pytest.raises(ConfigError):
            SnakeConfig(tick_ms=0).validate()
        with pytest.raises(ConfigError):
            SnakeConfig(cell_size=500).validate()

    def test_config_error_is_value_error(self):
        """ConfigError can be caught as a plain ValueError."""
        assert issubclass(ConfigError, ValueError)
