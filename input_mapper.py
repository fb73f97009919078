# Key symbols -> direction/quit requests on a SnakeGame.
from __future__ import annotations

from enum import Enum
from typing import Iterable

try:
    from .board import Direction
    from .game_logic import SnakeGame
except ImportError:
    from board import Direction
    from game_logic import SnakeGame


class Command(str, Enum):
    DIRECTION = "direction"     # accepted direction change
    IGNORED = "ignored"         # direction key rejected by the reversal guard
    QUIT = "quit"
    UNKNOWN = "unknown"         # key with no binding


# Tk keysyms; letters are matched case-insensitively.
KEY_BINDINGS: dict[str, Direction | Command] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
    "q": Command.QUIT,
    "escape": Command.QUIT,
}


def map_key(key: str) -> Direction | Command | None:
    """Look up what a key means without touching any game state."""
    return KEY_BINDINGS.get(key.lower())


class InputMapper:
    """Applies key events to one game, in the order they arrive."""
    def __init__(self, game: SnakeGame) -> None:
        self.game = game

    def handle(self, key: str) -> Command:
        action = map_key(key)
        if action is None:
            return Command.UNKNOWN
        if action is Command.QUIT:
            self.game.request_quit()
            return Command.QUIT
        if self.game.request_direction_change(action):
            return Command.DIRECTION
        return Command.IGNORED

    def drain(self, keys: Iterable[str]) -> list[Command]:
        """Apply a batch of pending keys; later keys see earlier changes."""
        return [self.handle(key) for key in keys]
