# Game controller: owns the live state record and exposes the control operations.
from __future__ import annotations

from dataclasses import replace
import logging

import numpy as np

try:
    from .board import board_to_text
    from .game_logic import GameState, SnakeConfig, Status, advance, initial_state
    from .input_mapper import on_key, toggle_pause
except ImportError:
    from board import board_to_text
    from game_logic import GameState, SnakeConfig, Status, advance, initial_state
    from input_mapper import on_key, toggle_pause


logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Single mutable handle around the immutable GameState.

    Control operations return True when they changed the state and False
    when the call was not valid for the current status (a no-op).
    """

    def __init__(self, config: SnakeConfig, seed: int | None = None) -> None:
        self.config = config
        self.rng = np.random.default_rng(seed)
        self.state: GameState = initial_state(config, self.rng)

    def _set(self, state: GameState) -> bool:
        changed = state is not self.state
        self.state = state
        return changed

    def _ignored(self, operation: str) -> bool:
        logger.debug("%s ignored while %s", operation, self.state.status.label)
        return False

    @property
    def status(self) -> Status:
        return self.state.status

    def start(self) -> bool:
        """Begin ticking a freshly reset board."""
        if self.state.status is not Status.NOT_STARTED:
            return self._ignored("start")
        logger.info("Game started")
        return self._set(replace(self.state, status=Status.RUNNING))

    def pause(self) -> bool:
        if self.state.status is not Status.RUNNING:
            return self._ignored("pause")
        return self._set(replace(self.state, status=Status.PAUSED))

    def resume(self) -> bool:
        if self.state.status is not Status.PAUSED:
            return self._ignored("resume")
        return self._set(replace(self.state, status=Status.RUNNING))

    def toggle_pause(self) -> bool:
        return self._set(toggle_pause(self.state))

    def reset(self) -> None:
        """Rebuild snake, food, score and speed; wait for start."""
        self.state = initial_state(self.config, self.rng, wall_policy=self.state.wall_policy)

    def restart(self) -> None:
        """Rebuild the board and begin ticking straight away."""
        self.state = initial_state(
            self.config,
            self.rng,
            status=Status.RUNNING,
            wall_policy=self.state.wall_policy,
        )
        logger.info("Game restarted (%s walls)", self.state.wall_policy.value)

    def set_speed(self, delta: int) -> bool:
        """Shift the tick interval by delta ms, clamped to the configured bounds."""
        if not self.config.manual_speed or self.state.status is Status.GAME_OVER:
            return self._ignored("set_speed")
        speed = min(self.config.max_speed_ms, max(self.config.min_speed_ms, self.state.speed_ms + delta))
        if speed == self.state.speed_ms:
            return False
        return self._set(replace(self.state, speed_ms=speed))

    def faster(self) -> bool:
        return self.set_speed(-self.config.speed_step_ms)

    def slower(self) -> bool:
        return self.set_speed(self.config.speed_step_ms)

    def can_toggle_wall_policy(self) -> bool:
        return self.config.wall_toggle and self.state.status in (Status.NOT_STARTED, Status.GAME_OVER)

    def toggle_wall_policy(self) -> bool:
        """Switch lethal/wrap-around walls; only between games."""
        if not self.can_toggle_wall_policy():
            return self._ignored("toggle_wall_policy")
        policy = self.state.wall_policy.toggled()
        logger.info("Wall policy set to %s", policy.value)
        return self._set(replace(self.state, wall_policy=policy))

    def tick(self) -> GameState:
        """Run one step of the tick engine and return the new state."""
        before = self.state.status
        self.state = advance(self.state, self.rng)
        if before is Status.RUNNING and self.state.status is Status.GAME_OVER:
            logger.debug("Final board:\n%s", board_to_text(self.state))
        return self.state

    def on_key(self, key: str) -> bool:
        """Feed one raw keysym through the input mapper; True if it was consumed."""
        state, handled = on_key(key, self.state)
        self.state = state
        return handled
