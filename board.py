# Grid geometry for Snake: positions, directions, walls and board settings.
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


# Bounds used when validating board and driver settings.
MIN_BOARD_SIDE = 3
MIN_INTERIOR_CELLS = 2
MIN_CELL_SIZE = 12
MAX_CELL_SIZE = 48
DEFAULT_START = (5, 5)


class SnakeError(Exception):
    """Base class for errors raised by the game core."""


class ConfigError(SnakeError, ValueError):
    """Raised when a board configuration cannot produce a playable round."""


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def is_opposite(a: Direction, b: Direction) -> bool:
    """True when a and b point in exactly opposite directions."""
    return OPPOSITE[a] == b


class Position(NamedTuple):
    """One grid cell. Compares equal to a plain (x, y) tuple."""
    x: int
    y: int

    def step(self, direction: Direction) -> Position:
        """Move one cell; Up/Left stop at zero instead of wrapping."""
        if direction == Direction.UP:
            return Position(self.x, max(self.y - 1, 0))
        if direction == Direction.DOWN:
            return Position(self.x, self.y + 1)
        if direction == Direction.LEFT:
            return Position(max(self.x - 1, 0), self.y)
        return Position(self.x + 1, self.y)


def is_wall(pos: tuple[int, int], width: int, height: int) -> bool:
    """Border cells and anything beyond them are walls."""
    x, y = pos
    return x <= 0 or y <= 0 or x >= width - 1 or y >= height - 1


def interior_size(width: int, height: int) -> int:
    return max(width - 2, 0) * max(height - 2, 0)


def interior_cells(width: int, height: int) -> list[Position]:
    """Every cell a snake segment or food may occupy, row by row."""
    return [Position(x, y) for y in range(1, height - 1) for x in range(1, width - 1)]


@dataclass
class SnakeConfig:
    """Round settings shared between the logic layer and the drivers."""
    width: int = 20
    height: int = 10
    start: Position | None = None   # None -> DEFAULT_START, pulled inside small boards
    tick_ms: int = 120
    cell_size: int = 28

    def __post_init__(self) -> None:
        if self.start is None:
            x, y = DEFAULT_START
            if isinstance(self.width, int) and isinstance(self.height, int):
                x, y = min(x, self.width - 2), min(y, self.height - 2)
            self.start = Position(x, y)
        else:
            self.start = Position(*self.start)

    def validate(self) -> None:
        """Fail fast on boards that cannot hold a snake plus one food cell."""
        for label, value in (("width", self.width), ("height", self.height)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"Board {label} must be an integer, got {value!r}.")
            if value < MIN_BOARD_SIDE:
                raise ConfigError(f"Board {label} must be at least {MIN_BOARD_SIDE}, got {value}.")
        if interior_size(self.width, self.height) < MIN_INTERIOR_CELLS:
            raise ConfigError(
                f"A {self.width}x{self.height} board leaves fewer than "
                f"{MIN_INTERIOR_CELLS} interior cells."
            )
        if is_wall(self.start, self.width, self.height):
            raise ConfigError(f"Start position {tuple(self.start)} is not inside the border.")
        if self.tick_ms <= 0:
            raise ConfigError("Tick interval must be > 0 ms.")
        if not (MIN_CELL_SIZE <= self.cell_size <= MAX_CELL_SIZE):
            raise ConfigError(f"Cell size must be between {MIN_CELL_SIZE} and {MAX_CELL_SIZE}.")
