# Manual Snake player GUI: Tkinter driver around the pure game core.
from __future__ import annotations

import argparse
import logging
import random
import tkinter as tk

# Support both package imports and running this file directly.
try:
    from .board import MAX_CELL_SIZE, MIN_CELL_SIZE, ConfigError, SnakeConfig
    from .game_logic import SnakeGame
    from .input_mapper import Command, InputMapper
except ImportError:
    from board import MAX_CELL_SIZE, MIN_CELL_SIZE, ConfigError, SnakeConfig
    from game_logic import SnakeGame
    from input_mapper import Command, InputMapper


logger = logging.getLogger(__name__)


class SnakeApp:
    """Tkinter presentation layer for SnakeGame."""
    BG = "#101418"
    BOARD_BG = "#1c2229"
    SIDEBAR_BG = "#0f1720"
    WALL_COLOR = "#3a4552"
    SNAKE_HEAD = "#45d483"
    SNAKE_BODY = "#1fb86b"
    FOOD_COLOR = "#ff5c74"
    TEXT_PRIMARY = "#e6eef7"
    TEXT_MUTED = "#95a4b8"
    ACCENT = "#42c4ff"

    def __init__(self, root: tk.Tk, config: SnakeConfig | None = None, rng: random.Random | None = None) -> None:
        self.root = root
        self.root.title("Snake")
        self.root.configure(bg=self.BG)

        self.config = config or SnakeConfig()
        self.game = SnakeGame(self.config, rng=rng)
        self.mapper = InputMapper(self.game)
        self.pending_keys: list[str] = []   # keys seen since the last frame
        self.running = False
        self.after_id: str | None = None    # Tkinter timer id for the game loop

        self._build_layout()
        self._bind_keys()
        self.draw()

    def _build_layout(self) -> None:
        """Create game canvas + right sidebar."""
        container = tk.Frame(self.root, bg=self.BG)
        container.pack(fill="both", expand=True, padx=16, pady=16)

        cell = self.config.cell_size
        self.canvas = tk.Canvas(
            container,
            width=self.config.width * cell,
            height=self.config.height * cell,
            bg=self.BOARD_BG,
            highlightthickness=0,
            bd=0,
        )
        self.canvas.pack(side="left", padx=(0, 16))

        sidebar = tk.Frame(container, bg=self.SIDEBAR_BG)
        sidebar.pack(side="left", fill="y")

        self.length_var = tk.StringVar()
        self.state_var = tk.StringVar(value="State: Ready")
        for var in (self.length_var, self.state_var):
            tk.Label(
                sidebar,
                textvariable=var,
                fg=self.TEXT_PRIMARY,
                bg=self.SIDEBAR_BG,
                font=("Helvetica", 12),
                anchor="w",
            ).pack(fill="x", padx=12, pady=4)

        for text, command in (
            ("Start", self.start_game),
            ("Pause", self.toggle_pause),
            ("Reset", self.reset_game),
        ):
            self._button(sidebar, text, command).pack(fill="x", padx=12, pady=4)

        tk.Label(
            sidebar,
            text="Move: Arrow keys / WASD\nPause: Space   Quit: Q / Esc",
            fg=self.TEXT_MUTED,
            bg=self.SIDEBAR_BG,
            justify="left",
            font=("Helvetica", 10),
        ).pack(anchor="w", padx=12, pady=(8, 12))

    def _button(self, parent: tk.Widget, text: str, command) -> tk.Button:
        return tk.Button(
            parent,
            text=text,
            command=command,
            fg="#09141f",
            bg=self.ACCENT,
            activebackground="#74d8ff",
            bd=0,
            relief="flat",
            font=("Helvetica", 11, "bold"),
            padx=12,
            pady=8,
        )

    def _bind_keys(self) -> None:
        """Queue every key; the next frame applies them in order."""
        self.root.bind("<KeyPress>", self.on_key)
        self.root.bind("<space>", lambda _e: self.toggle_pause())

    def on_key(self, event: tk.Event) -> None:
        if event.keysym == "space":
            return
        self.pending_keys.append(event.keysym)
        if self.after_id is None:
            # No frame pending (ready/paused/over), so nothing else will drain the queue.
            self._apply_pending_keys()

    def _apply_pending_keys(self) -> bool:
        """Feed queued keys to the game. Returns False if a quit closed the window."""
        commands = self.mapper.drain(self.pending_keys)
        self.pending_keys.clear()
        if Command.QUIT in commands:
            logger.info("Quit requested, closing window")
            self.root.destroy()
            return False
        return True

    def _cancel_loop(self) -> None:
        """Cancel scheduled tick callback if one exists."""
        if self.after_id is not None:
            self.root.after_cancel(self.after_id)
            self.after_id = None

    def start_game(self) -> None:
        """Start or resume live ticking from current state."""
        if self.game.game_over:
            self.reset_game()
        self.running = True
        self.state_var.set("State: Running")
        self._schedule()

    def toggle_pause(self) -> None:
        """Pause/resume without losing current board state."""
        if self.game.game_over:
            return
        if self.running:
            self.running = False
            self._cancel_loop()
            self.state_var.set("State: Paused")
        else:
            self.start_game()

    def reset_game(self) -> None:
        """Throw away the current round and start a fresh one."""
        self._cancel_loop()
        self.running = False
        self.pending_keys.clear()
        self.game.reset()
        self.state_var.set("State: Ready")
        self.draw()

    def _schedule(self) -> None:
        self._cancel_loop()
        self.after_id = self.root.after(self.config.tick_ms, self.frame)

    def frame(self) -> None:
        """One frame: apply queued keys, tick once, redraw, reschedule."""
        self.after_id = None
        if not self._apply_pending_keys() or not self.running:
            return

        if not self.game.tick():
            self.running = False
            self.state_var.set("State: Game Over")
            self.draw()
            return

        self.draw()
        self._schedule()

    def draw(self) -> None:
        """Render walls, food, snake, status label, and game-over overlay."""
        self.canvas.delete("all")
        cell = self.config.cell_size
        width_px = self.config.width * cell
        height_px = self.config.height * cell

        # Border ring is wall.
        self.canvas.create_rectangle(0, 0, width_px, height_px, fill=self.WALL_COLOR, outline="")
        self.canvas.create_rectangle(
            cell, cell, width_px - cell, height_px - cell, fill=self.BOARD_BG, outline=""
        )

        if self.game.food is not None:
            x, y = self.game.food
            self.canvas.create_oval(
                x * cell + 4, y * cell + 4, (x + 1) * cell - 4, (y + 1) * cell - 4,
                fill=self.FOOD_COLOR, outline="",
            )

        for idx, (x, y) in enumerate(self.game.snake):
            color = self.SNAKE_HEAD if idx == 0 else self.SNAKE_BODY
            self.canvas.create_rectangle(
                x * cell + 2, y * cell + 2, (x + 1) * cell - 2, (y + 1) * cell - 2,
                fill=color, outline="",
            )

        self.length_var.set(f"Length: {len(self.game.snake)}")

        if self.game.game_over:
            self.canvas.create_rectangle(0, 0, width_px, height_px, fill="#000000", stipple="gray50", outline="")
            self.canvas.create_text(
                width_px // 2,
                height_px // 2 - 12,
                text="Game Over",
                fill=self.TEXT_PRIMARY,
                font=("Helvetica", 22, "bold"),
            )
            self.canvas.create_text(
                width_px // 2,
                height_px // 2 + 20,
                text="Press Start or Reset, Q to quit",
                fill=self.TEXT_MUTED,
                font=("Helvetica", 12),
            )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Snake on a fixed 20x10 board")
    parser.add_argument(
        "--cell-size",
        type=int,
        default=SnakeConfig.cell_size,
        help=f"Pixel size of one cell ({MIN_CELL_SIZE}-{MAX_CELL_SIZE})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity",
    )
    return parser


def run_player_gui(argv: list[str] | None = None) -> None:
    """Launch the manual Snake player interface."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    config = SnakeConfig(cell_size=args.cell_size)
    try:
        config.validate()
    except ConfigError as exc:
        parser.error(str(exc))

    root = tk.Tk()
    app = SnakeApp(root, config, rng=random.Random(args.seed))
    app.start_game()
    root.mainloop()
    print(f"Final length: {len(app.game.snake)}")


if __name__ == "__main__":
    run_player_gui()
