# Core Snake game state and rules, independent from GUI code.
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
import logging

import numpy as np


logger = logging.getLogger(__name__)

Cell = tuple[int, int]

# Bounds used when validating configuration and GUI input.
MIN_GRID_SIZE = 8
MAX_GRID_SIZE = 60
MIN_CELL_SIZE = 12
MAX_CELL_SIZE = 48
MIN_SPEED_MS = 40
MAX_SPEED_MS = 1000

KEY_BINDINGS = ("arrows", "arrows+wasd")


class Heading(Enum):
    """Unit step the snake moves by on each tick."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def is_reverse_of(self, other: Heading) -> bool:
        return self.dx + other.dx == 0 and self.dy + other.dy == 0


class Status(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


class WallPolicy(Enum):
    LETHAL = "lethal"
    WRAP_AROUND = "wrap_around"

    def toggled(self) -> WallPolicy:
        return WallPolicy.WRAP_AROUND if self is WallPolicy.LETHAL else WallPolicy.LETHAL


@dataclass(frozen=True)
class SnakeConfig:
    """Rules and settings shared between the logic layer and GUI."""
    grid_size: int = 20
    cell_size: int = 24
    initial_snake: tuple[Cell, ...] = ((9, 10), (8, 10), (7, 10))
    initial_heading: Heading = Heading.RIGHT
    initial_food: Cell | None = None          # None draws a random cell
    speed_ms: int = 150
    min_speed_ms: int = MIN_SPEED_MS
    max_speed_ms: int = MAX_SPEED_MS
    speed_step_ms: int = 20                   # manual faster/slower step
    eat_speedup_ms: int = 4                   # interval shaved off per food
    food_reward: int = 1
    wall_policy: WallPolicy = WallPolicy.LETHAL
    wall_toggle: bool = False
    key_bindings: str = "arrows+wasd"
    start_on_key: bool = False
    manual_speed: bool = True

    def __post_init__(self) -> None:
        if not (MIN_GRID_SIZE <= self.grid_size <= MAX_GRID_SIZE):
            raise ValueError(f"Grid size must be between {MIN_GRID_SIZE} and {MAX_GRID_SIZE}.")
        if not (MIN_CELL_SIZE <= self.cell_size <= MAX_CELL_SIZE):
            raise ValueError(f"Cell size must be between {MIN_CELL_SIZE} and {MAX_CELL_SIZE}.")
        if not (0 < self.min_speed_ms <= self.max_speed_ms):
            raise ValueError("Speed bounds must satisfy 0 < min_speed_ms <= max_speed_ms.")
        if not (self.min_speed_ms <= self.speed_ms <= self.max_speed_ms):
            raise ValueError(
                f"Speed must be between {self.min_speed_ms} and {self.max_speed_ms} ms."
            )
        if self.speed_step_ms < 0 or self.eat_speedup_ms < 0:
            raise ValueError("Speed steps cannot be negative.")
        if self.food_reward < 0:
            raise ValueError("Food reward cannot be negative.")
        if self.key_bindings not in KEY_BINDINGS:
            raise ValueError(f"Key bindings must be one of {', '.join(KEY_BINDINGS)}.")

        if not self.initial_snake:
            raise ValueError("Initial snake needs at least one cell.")
        if len(set(self.initial_snake)) != len(self.initial_snake):
            raise ValueError("Initial snake cannot overlap itself.")
        # Food placement samples free cells, so the board can never start full.
        if len(self.initial_snake) >= self.grid_size * self.grid_size:
            raise ValueError("Initial snake must leave room for food.")
        for cell in self.initial_snake:
            if not self.in_bounds(cell):
                raise ValueError(f"Initial snake cell {cell} is outside the grid.")
        if len(self.initial_snake) > 1:
            (head_x, head_y), neck = self.initial_snake[0], self.initial_snake[1]
            heading = self.initial_heading
            if (head_x + heading.dx, head_y + heading.dy) == neck:
                raise ValueError(f"Initial heading {heading.name} points back into the snake.")
        if self.initial_food is not None:
            if not self.in_bounds(self.initial_food):
                raise ValueError(f"Initial food {self.initial_food} is outside the grid.")
            if self.initial_food in self.initial_snake:
                raise ValueError("Initial food cannot sit on the snake.")

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.grid_size and 0 <= y < self.grid_size


# Two rule sets: "classic" ramps speed up and always kills at the walls,
# "arcade" keeps a constant pace and lets the player pick the wall policy.
PRESETS: dict[str, dict] = {
    "classic": {},
    "arcade": dict(
        initial_snake=((10, 10),),
        initial_food=(15, 15),
        eat_speedup_ms=0,
        food_reward=10,
        wall_toggle=True,
        key_bindings="arrows",
        start_on_key=True,
        manual_speed=False,
    ),
}


PRESET_GRID_SIZE = 20


def preset_config(name: str, **overrides) -> SnakeConfig:
    """
    Build a config from a named preset, applying keyword overrides on top.

    Preset layouts are drawn for a 20x20 board. On other sizes the starting
    snake is shifted to keep its place relative to the center and a fixed
    starting food is scaled, unless those are overridden too.
    """
    try:
        base = PRESETS[name]
    except KeyError:
        raise ValueError(f"Unknown variant {name!r}; choose from {', '.join(PRESETS)}.")

    settings = {**base, **overrides}
    size = settings.get("grid_size", PRESET_GRID_SIZE)
    if size != PRESET_GRID_SIZE:
        if "initial_snake" not in overrides:
            shift = size // 2 - PRESET_GRID_SIZE // 2
            snake = settings.get("initial_snake", SnakeConfig.initial_snake)
            settings["initial_snake"] = tuple((x + shift, y + shift) for x, y in snake)
        if "initial_food" not in overrides and settings.get("initial_food") is not None:
            fx, fy = settings["initial_food"]
            settings["initial_food"] = (fx * size // PRESET_GRID_SIZE, fy * size // PRESET_GRID_SIZE)
    return SnakeConfig(**settings)


def reconfigure(config: SnakeConfig, variant: str) -> SnakeConfig:
    """Switch to another preset, keeping board geometry, starting speed and wall policy."""
    return preset_config(
        variant,
        grid_size=config.grid_size,
        cell_size=config.cell_size,
        speed_ms=config.speed_ms,
        wall_policy=config.wall_policy,
    )


@dataclass(frozen=True)
class GameState:
    """Immutable snapshot of one game; transitions return a new record."""
    config: SnakeConfig
    snake: tuple[Cell, ...]                   # ordered body, head at index 0
    heading: Heading                          # committed on the last tick
    pending_heading: Heading                  # last accepted input; applied next tick
    food: Cell
    score: int = 0
    speed_ms: int = 150
    status: Status = Status.NOT_STARTED
    wall_policy: WallPolicy = WallPolicy.LETHAL
    collision: str | None = None              # "wall" or "self" once the game ends
    ticks: int = 0
    occupied: frozenset[Cell] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "occupied", frozenset(self.snake))

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def grid_size(self) -> int:
        return self.config.grid_size

    @property
    def length(self) -> int:
        return len(self.snake)


def place_food(snake: tuple[Cell, ...] | frozenset[Cell], grid_size: int, rng: np.random.Generator) -> Cell:
    """
    Return a random cell not covered by the snake.

    Rejection sampling: draws uniform coordinates until one misses the body.
    There is no fallback for a board the snake fills completely.
    """
    occupied = snake if isinstance(snake, frozenset) else frozenset(snake)
    while True:
        x, y = rng.integers(0, grid_size, size=2)
        cell = (int(x), int(y))
        if cell not in occupied:
            return cell


def initial_state(
    config: SnakeConfig,
    rng: np.random.Generator,
    status: Status = Status.NOT_STARTED,
    wall_policy: WallPolicy | None = None,
) -> GameState:
    """Fresh board from config. Wall policy is carried over when given."""
    snake = tuple(config.initial_snake)
    if config.initial_food is not None:
        food = config.initial_food
    else:
        food = place_food(snake, config.grid_size, rng)
    return GameState(
        config=config,
        snake=snake,
        heading=config.initial_heading,
        pending_heading=config.initial_heading,
        food=food,
        score=0,
        speed_ms=config.speed_ms,
        status=status,
        wall_policy=config.wall_policy if wall_policy is None else wall_policy,
    )


def _end_game(state: GameState, reason: str) -> GameState:
    logger.info(
        "Game over (%s collision) at %s after %d ticks, score %d, length %d",
        reason,
        state.head,
        state.ticks,
        state.score,
        state.length,
    )
    return replace(state, status=Status.GAME_OVER, collision=reason)


def advance(state: GameState, rng: np.random.Generator | None = None) -> GameState:
    """Advance one tick. Returns the input unchanged unless the game is running."""
    if state.status is not Status.RUNNING:
        return state

    config = state.config
    size = config.grid_size
    heading = state.pending_heading
    head_x, head_y = state.head
    new_x, new_y = head_x + heading.dx, head_y + heading.dy

    # Wrap mode: crossing an edge teleports to the opposite edge.
    if state.wall_policy is WallPolicy.WRAP_AROUND:
        new_x %= size
        new_y %= size
    elif not (0 <= new_x < size and 0 <= new_y < size):
        return _end_game(state, "wall")

    new_head = (new_x, new_y)

    # Checked against the whole current body, tail included: the tail cell
    # is still occupied on the tick it would be vacated.
    if new_head in state.occupied:
        return _end_game(state, "self")

    if new_head == state.food:
        snake = (new_head,) + state.snake
        if rng is None:
            rng = np.random.default_rng()
        return replace(
            state,
            snake=snake,
            food=place_food(snake, size, rng),
            score=state.score + config.food_reward,
            speed_ms=max(config.min_speed_ms, state.speed_ms - config.eat_speedup_ms),
            heading=heading,
            ticks=state.ticks + 1,
        )

    return replace(
        state,
        snake=(new_head,) + state.snake[:-1],
        heading=heading,
        ticks=state.ticks + 1,
    )
