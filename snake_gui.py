# Tkinter presentation layer for the Snake game.
from __future__ import annotations

import logging
import tkinter as tk
from tkinter import messagebox

# Support both package imports and running this file directly.
try:
    from .board import FOOD, SNAKE_BODY, SNAKE_HEAD, encode_board
    from .game_logic import PRESETS, SnakeConfig, Status, WallPolicy, preset_config, reconfigure
    from .game_loop import TickLoop
    from .snake_game import SnakeGame
except ImportError:
    from board import FOOD, SNAKE_BODY, SNAKE_HEAD, encode_board
    from game_logic import PRESETS, SnakeConfig, Status, WallPolicy, preset_config, reconfigure
    from game_loop import TickLoop
    from snake_game import SnakeGame


logger = logging.getLogger(__name__)


class SnakeApp:
    """Canvas + sidebar that renders SnakeGame state and forwards controls."""
    BG = "#101418"
    BOARD_BG = "#1c2229"
    SIDEBAR_BG = "#0f1720"
    GRID_COLOR = "#293340"
    SNAKE_HEAD = "#45d483"
    SNAKE_BODY = "#1fb86b"
    FOOD_COLOR = "#ff5c74"
    TEXT_PRIMARY = "#e6eef7"
    TEXT_MUTED = "#95a4b8"
    ACCENT = "#42c4ff"
    BORDER_COLOR = "#7f8b99"
    SIDEBAR_WIDTH = 300

    def __init__(self, root: tk.Tk, config: SnakeConfig, variant: str = "classic", seed: int | None = None) -> None:
        self.root = root
        self.root.title("Snake")
        self.root.configure(bg=self.BG)

        self.config = config
        self.seed = seed
        self.game = SnakeGame(config, seed=seed)
        self.loop = TickLoop(self.root.after, self.root.after_cancel, self.game, on_frame=self.refresh)

        self.variant_var = tk.StringVar(value=variant)

        self._build_layout()
        self._bind_keys()
        self._apply_canvas_size()
        self.refresh()

    def _build_layout(self) -> None:
        """Create game canvas + right sidebar panels."""
        container = tk.Frame(self.root, bg=self.BG)
        container.pack(fill="both", expand=True, padx=16, pady=16)

        self.canvas = tk.Canvas(container, bg=self.BOARD_BG, highlightthickness=0, bd=0)
        self.canvas.pack(side="left", padx=(0, 16))

        self.sidebar = tk.Frame(container, bg=self.SIDEBAR_BG, width=self.SIDEBAR_WIDTH)
        self.sidebar.pack(side="right", fill="y")

        tk.Label(
            self.sidebar,
            text="Snake",
            fg=self.TEXT_PRIMARY,
            bg=self.SIDEBAR_BG,
            font=("Helvetica", 16, "bold"),
        ).pack(anchor="w", padx=16, pady=(16, 10))

        self._build_status()
        self._build_settings()
        self._build_buttons()

    def _build_status(self) -> None:
        """Live score/length/speed/state labels."""
        frame = self._section("Status")

        self.score_var = tk.StringVar()
        self.length_var = tk.StringVar()
        self.speed_var = tk.StringVar()
        self.state_var = tk.StringVar()
        self.walls_var = tk.StringVar()

        for var in (self.score_var, self.length_var, self.speed_var, self.state_var, self.walls_var):
            tk.Label(
                frame,
                textvariable=var,
                fg=self.TEXT_PRIMARY,
                bg=self.SIDEBAR_BG,
                font=("Helvetica", 11),
                anchor="w",
            ).pack(fill="x", padx=10, pady=3)

    def _build_settings(self) -> None:
        """Variant picker; applying it rebuilds the game."""
        frame = self._section("Settings")

        row = tk.Frame(frame, bg=self.SIDEBAR_BG)
        row.pack(fill="x", padx=10, pady=4)
        tk.Label(row, text="Variant", fg=self.TEXT_PRIMARY, bg=self.SIDEBAR_BG, font=("Helvetica", 10)).pack(side="left")
        dropdown = tk.OptionMenu(row, self.variant_var, *PRESETS.keys())
        dropdown.config(width=10, bd=0, highlightthickness=0, font=("Helvetica", 10))
        dropdown.pack(side="right")

        self._button(frame, "Apply Settings", self.apply_settings).pack(fill="x", padx=10, pady=(4, 10))

    def _build_buttons(self) -> None:
        """Game controls. Availability follows the current status."""
        frame = tk.Frame(self.sidebar, bg=self.SIDEBAR_BG)
        frame.pack(fill="x", padx=16, pady=(0, 10))

        self.start_btn = self._button(frame, "Start", self.start_game)
        self.pause_btn = self._button(frame, "Pause", self.toggle_pause)
        self.restart_btn = self._button(frame, "Restart", self.restart_game)
        self.reset_btn = self._button(frame, "Reset", self.reset_game)
        self.faster_btn = self._button(frame, "Faster", self.faster)
        self.slower_btn = self._button(frame, "Slower", self.slower)
        self.walls_btn = self._button(frame, "Wall Mode", self.toggle_walls)

        for btn in (
            self.start_btn,
            self.pause_btn,
            self.restart_btn,
            self.reset_btn,
            self.faster_btn,
            self.slower_btn,
            self.walls_btn,
        ):
            btn.pack(fill="x", pady=3)

        self.hint_var = tk.StringVar()
        tk.Label(
            self.sidebar,
            textvariable=self.hint_var,
            fg=self.TEXT_MUTED,
            bg=self.SIDEBAR_BG,
            justify="left",
            wraplength=self.SIDEBAR_WIDTH - 32,
            font=("Helvetica", 10),
        ).pack(anchor="w", padx=16, pady=(4, 10))

    def _section(self, title: str) -> tk.LabelFrame:
        frame = tk.LabelFrame(
            self.sidebar,
            text=title,
            fg=self.TEXT_PRIMARY,
            bg=self.SIDEBAR_BG,
            bd=1,
            font=("Helvetica", 10, "bold"),
            labelanchor="n",
        )
        frame.pack(fill="x", padx=16, pady=(0, 12))
        return frame

    def _button(self, parent: tk.Widget, text: str, command) -> tk.Button:
        return tk.Button(
            parent,
            text=text,
            command=command,
            fg="#09141f",
            bg=self.ACCENT,
            activebackground="#74d8ff",
            activeforeground="#09141f",
            disabledforeground="#3d5566",
            bd=0,
            relief="flat",
            font=("Helvetica", 11, "bold"),
            padx=12,
            pady=6,
            cursor="hand2",
            takefocus=0,
        )

    def _bind_keys(self) -> None:
        """All keys go through the game's input mapper."""
        self.root.bind("<KeyPress>", self._on_key)

    def _on_key(self, event: tk.Event) -> str | None:
        if not self.game.on_key(event.keysym):
            return None
        self.loop.sync()
        self.refresh()
        # Consumed keys stop here; later bindings (e.g. "all") never see them.
        return "break"

    def apply_settings(self) -> None:
        """Rebuild the game with the selected variant, keeping launch settings."""
        try:
            config = reconfigure(self.config, self.variant_var.get())
        except ValueError as exc:
            messagebox.showerror("Invalid Setting", str(exc))
            return

        self.loop.cancel()
        self.config = config
        self.game = SnakeGame(config, seed=self.seed)
        self.loop.game = self.game
        self._apply_canvas_size()
        self.refresh()

    def _apply_canvas_size(self) -> None:
        """Resize board canvas to match current grid + tile size."""
        side_pixels = self.config.grid_size * self.config.cell_size
        self.canvas.configure(width=side_pixels, height=side_pixels)

    def start_game(self) -> None:
        if self.game.status is Status.GAME_OVER:
            self.game.restart()
        else:
            self.game.start()
        self.loop.sync()
        self.refresh()

    def toggle_pause(self) -> None:
        self.game.toggle_pause()
        self.refresh()

    def restart_game(self) -> None:
        self.game.restart()
        self.loop.schedule()
        self.refresh()

    def reset_game(self) -> None:
        self.game.reset()
        self.loop.sync()
        self.refresh()

    def faster(self) -> None:
        self._change_speed(self.game.faster)

    def slower(self) -> None:
        self._change_speed(self.game.slower)

    def _change_speed(self, change) -> None:
        if change():
            self.loop.rearm()
        self.refresh()

    def toggle_walls(self) -> None:
        self.game.toggle_wall_policy()
        self.refresh()

    def refresh(self) -> None:
        self._update_sidebar()
        self.draw()

    def _update_sidebar(self) -> None:
        state = self.game.state
        self.score_var.set(f"Score: {state.score}")
        self.length_var.set(f"Length: {state.length}")
        self.speed_var.set(f"Speed: {state.speed_ms} ms/step")
        self.state_var.set(f"State: {state.status.label}")
        walls = "Wrap-around" if state.wall_policy is WallPolicy.WRAP_AROUND else "Lethal"
        self.walls_var.set(f"Walls: {walls}")

        status = state.status
        self.start_btn.config(state="normal" if status in (Status.NOT_STARTED, Status.GAME_OVER) else "disabled")
        self.pause_btn.config(
            text="Resume" if status is Status.PAUSED else "Pause",
            state="normal" if status in (Status.RUNNING, Status.PAUSED) else "disabled",
        )
        speed_state = "normal" if self.config.manual_speed and status is not Status.GAME_OVER else "disabled"
        self.faster_btn.config(state=speed_state)
        self.slower_btn.config(state=speed_state)
        self.walls_btn.config(state="normal" if self.game.can_toggle_wall_policy() else "disabled")

        keys = "Arrow keys / WASD" if self.config.key_bindings == "arrows+wasd" else "Arrow keys"
        hint = f"Move: {keys}. Space: pause."
        if self.config.wall_toggle:
            hint += " Change wall mode before starting a game."
        self.hint_var.set(hint)

    def draw(self) -> None:
        """Render board, food, snake, and status overlays."""
        self.canvas.delete("all")
        state = self.game.state
        size = self.config.grid_size
        cell = self.config.cell_size
        side = size * cell

        for i in range(size + 1):
            pos = i * cell
            self.canvas.create_line(0, pos, side, pos, fill=self.GRID_COLOR)
            self.canvas.create_line(pos, 0, pos, side, fill=self.GRID_COLOR)

        # Solid border for lethal walls, dashed for wrap-around.
        dash = (6, 4) if state.wall_policy is WallPolicy.WRAP_AROUND else None
        self.canvas.create_rectangle(1, 1, side - 1, side - 1, outline=self.BORDER_COLOR, width=2, dash=dash)

        board = encode_board(state)
        for y in range(size):
            for x in range(size):
                kind = board[y, x]
                if kind == FOOD:
                    self.canvas.create_oval(
                        x * cell + 4, y * cell + 4, (x + 1) * cell - 4, (y + 1) * cell - 4,
                        fill=self.FOOD_COLOR, outline="",
                    )
                elif kind in (SNAKE_HEAD, SNAKE_BODY):
                    color = self.SNAKE_HEAD if kind == SNAKE_HEAD else self.SNAKE_BODY
                    self.canvas.create_rectangle(
                        x * cell + 2, y * cell + 2, (x + 1) * cell - 2, (y + 1) * cell - 2,
                        fill=color, outline="",
                    )

        if state.status is Status.NOT_STARTED:
            prompt = "Press an arrow key to start" if self.config.start_on_key else "Press Start"
            self._overlay(side, "Snake", prompt)
        elif state.status is Status.PAUSED:
            self._overlay(side, "Paused", "Press Space to resume")
        elif state.status is Status.GAME_OVER:
            self._overlay(side, "Game Over", f"Final score: {state.score}. Press Restart or Reset")

    def _overlay(self, side: int, title: str, subtitle: str) -> None:
        self.canvas.create_rectangle(0, 0, side, side, fill="#000000", stipple="gray50", outline="")
        self.canvas.create_text(
            side // 2,
            side // 2 - 12,
            text=title,
            fill=self.TEXT_PRIMARY,
            font=("Helvetica", 22, "bold"),
        )
        self.canvas.create_text(
            side // 2,
            side // 2 + 20,
            text=subtitle,
            fill=self.TEXT_MUTED,
            font=("Helvetica", 12),
        )


def run_player_gui(config: SnakeConfig | None = None, variant: str = "classic", seed: int | None = None) -> None:
    """Launch the Snake window."""
    if config is None:
        config = preset_config(variant)
    root = tk.Tk()
    SnakeApp(root, config, variant=variant, seed=seed)
    logger.info("Snake window opened (%s variant)", variant)
    root.mainloop()


if __name__ == "__main__":
    run_player_gui()
