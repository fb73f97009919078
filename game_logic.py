# Core Snake game state and rules, independent from GUI/driver code.
from __future__ import annotations

from collections import deque
import logging
import random

try:
    from .board import (
        ConfigError,
        Direction,
        Position,
        SnakeConfig,
        SnakeError,
        interior_cells,
        is_opposite,
        is_wall,
    )
except ImportError:
    from board import (
        ConfigError,
        Direction,
        Position,
        SnakeConfig,
        SnakeError,
        interior_cells,
        is_opposite,
        is_wall,
    )


logger = logging.getLogger(__name__)

# Rejection samples tried before falling back to an explicit free-cell scan.
MAX_FOOD_ATTEMPTS = 64

END_WALL = "wall"
END_SELF = "self"
END_QUIT = "quit"

__all__ = [
    "BoardFullError",
    "ConfigError",
    "MAX_FOOD_ATTEMPTS",
    "SnakeGame",
    "initialize",
    "request_direction_change",
    "request_quit",
    "spawn_food",
    "tick",
]


class BoardFullError(SnakeError):
    """Raised when the snake leaves no interior cell free for food."""


def spawn_food(
    occupied: set[Position] | frozenset[Position],
    width: int,
    height: int,
    rng: random.Random | None = None,
) -> Position:
    """Pick a uniformly random interior cell that is not in `occupied`."""
    rng = rng or random
    for _ in range(MAX_FOOD_ATTEMPTS):
        pos = Position(rng.randrange(1, width - 1), rng.randrange(1, height - 1))
        if pos not in occupied:
            return pos

    # Nearly full board: sample the remaining cells directly.
    free = [pos for pos in interior_cells(width, height) if pos not in occupied]
    if not free:
        raise BoardFullError(f"No free interior cell left on a {width}x{height} board.")
    return rng.choice(free)


class SnakeGame:
    """Pure game state + rules (no Tkinter/UI code)."""
    def __init__(self, config: SnakeConfig | None = None, rng: random.Random | None = None) -> None:
        self.config = config or SnakeConfig()
        self.config.validate()
        self.rng = rng or random.Random()
        self.reset()

    def reset(self) -> None:
        """Initialize a fresh round: one segment at the start cell, heading right."""
        start = self.config.start
        self.snake: deque[Position] = deque([start])        # ordered body, head at index 0
        self.snake_set: set[Position] = {start}             # O(1) body collision lookup
        self.direction = Direction.RIGHT
        self.game_over = False
        self.end_reason: str | None = None
        self.score = 0
        self.ticks = 0
        self.food: Position | None = spawn_food(self.snake_set, self.width, self.height, self.rng)
        logger.debug("New round on %dx%d board, food at %s", self.width, self.height, self.food)

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def head(self) -> Position:
        return self.snake[0]

    @property
    def alive(self) -> bool:
        return not self.game_over

    def segments(self) -> tuple[Position, ...]:
        """Snapshot of the body from head to tail."""
        return tuple(self.snake)

    def set_snake(self, positions: list[tuple[int, int]], direction: Direction | None = None) -> None:
        """Replace the body (head first), e.g. to replay a recorded position."""
        body = [Position(*pos) for pos in positions]
        if not body:
            raise ValueError("Snake needs at least one segment.")
        if len(set(body)) != len(body):
            raise ValueError("Snake segments must not overlap.")
        for pos in body:
            if is_wall(pos, self.width, self.height):
                raise ValueError(f"Segment {tuple(pos)} is outside the interior.")
        for a, b in zip(body, body[1:]):
            if abs(a.x - b.x) + abs(a.y - b.y) != 1:
                raise ValueError(f"Segments {tuple(a)} and {tuple(b)} are not adjacent.")

        self.snake = deque(body)
        self.snake_set = set(body)
        if direction is not None:
            self.direction = Direction(direction)
        if self.food is None or self.food in self.snake_set:
            self.food = spawn_food(self.snake_set, self.width, self.height, self.rng)

    def _end(self, reason: str) -> None:
        self.game_over = True
        self.end_reason = reason
        logger.info("Round over (%s): length=%d score=%d ticks=%d", reason, len(self.snake), self.score, self.ticks)

    def tick(self) -> bool:
        """Advance one step. Returns False once the round is over."""
        if self.game_over:
            return False

        new_head = self.head.step(self.direction)

        # The tail cell still counts: it has not been vacated yet.
        if is_wall(new_head, self.width, self.height):
            self._end(END_WALL)
            return False
        if new_head in self.snake_set:
            self._end(END_SELF)
            return False

        self.snake.appendleft(new_head)
        self.snake_set.add(new_head)
        self.ticks += 1

        if new_head == self.food:
            self.score += 1
            logger.debug("Food eaten at %s, length now %d", new_head, len(self.snake))
            try:
                self.food = spawn_food(self.snake_set, self.width, self.height, self.rng)
            except BoardFullError:
                # Every move from here collides, so the next tick ends the round.
                logger.info("Snake fills the whole interior; no food left to place")
                self.food = None
        else:
            self.snake_set.discard(self.snake.pop())
        return True

    def request_direction_change(self, requested: Direction) -> bool:
        """Set a new heading; 180-degree reversals are silently ignored."""
        requested = Direction(requested)
        if self.game_over or is_opposite(self.direction, requested):
            return False
        self.direction = requested
        return True

    def request_quit(self) -> None:
        """End the round from outside the collision path."""
        if not self.game_over:
            self._end(END_QUIT)


def initialize(width: int, height: int, rng: random.Random | None = None) -> SnakeGame:
    """Start a round on a width x height board with the default start cell."""
    return SnakeGame(SnakeConfig(width=width, height=height), rng=rng)


def tick(state: SnakeGame) -> bool:
    return state.tick()


def request_direction_change(state: SnakeGame, requested: Direction) -> bool:
    return state.request_direction_change(requested)


def request_quit(state: SnakeGame) -> None:
    state.request_quit()
