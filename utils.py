# Shared helpers: numpy board encoding, text rendering, and a headless round driver.
from __future__ import annotations

from typing import Callable, Iterable

import numpy as np

try:
    from .board import is_wall
    from .game_logic import SnakeGame
    from .input_mapper import InputMapper
except ImportError:
    from board import is_wall
    from game_logic import SnakeGame
    from input_mapper import InputMapper


EMPTY = 0
BODY = 1
FOOD = 2
HEAD = 3
WALL = 4

TEXT_GLYPHS = {EMPTY: " ", BODY: "o", FOOD: "*", HEAD: "@", WALL: "#"}


def encode_board(game: SnakeGame) -> np.ndarray:
    """
    Board as a (height, width) int8 grid:
    - 0: empty
    - 1: snake body
    - 2: food
    - 3: snake head
    - 4: wall (border ring)
    """
    board = np.zeros((game.height, game.width), dtype=np.int8)
    board[0, :] = WALL
    board[-1, :] = WALL
    board[:, 0] = WALL
    board[:, -1] = WALL

    if game.food is not None:
        board[game.food.y, game.food.x] = FOOD

    for idx, (x, y) in enumerate(game.snake):
        board[y, x] = HEAD if idx == 0 else BODY

    return board


def render_text(game: SnakeGame) -> str:
    """ASCII frame of the board, top row first."""
    board = encode_board(game)
    lines = ["".join(TEXT_GLYPHS[int(cell)] for cell in row) for row in board]
    if game.game_over:
        lines.append(f"Game Over ({game.end_reason}). Length: {len(game.snake)}")
    return "\n".join(lines)


def interior_ok(game: SnakeGame) -> bool:
    """Check the body/food invariants: no overlaps, nothing on the border."""
    cells = list(game.snake)
    if len(set(cells)) != len(cells) or set(cells) != game.snake_set:
        return False
    if any(is_wall(pos, game.width, game.height) for pos in cells):
        return False
    if game.food is not None and (game.food in game.snake_set or is_wall(game.food, game.width, game.height)):
        return False
    return True


def play_round(
    game: SnakeGame,
    key_batches: Iterable[Iterable[str]],
    max_ticks: int | None = None,
    render_step: Callable[[SnakeGame, int], None] | None = None,
) -> int:
    """
    Drive a round without a window.

    Each batch holds the keys pressed between two frames; they are applied in
    order before that frame's tick. Stops at game over, when the batches run
    out, or after max_ticks frames. Returns the number of frames played.
    """
    if max_ticks is not None and max_ticks < 0:
        raise ValueError("max_ticks must be >= 0")

    mapper = InputMapper(game)
    frames = 0
    for keys in key_batches:
        if game.game_over or (max_ticks is not None and frames >= max_ticks):
            break
        mapper.drain(keys)
        # Quit is only observed between frames; it never interrupts a tick.
        if game.game_over:
            break
        game.tick()
        frames += 1
        if render_step is not None:
            render_step(game, frames)
    return frames
