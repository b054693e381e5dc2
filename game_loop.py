# Timer policy for the game loop, independent from any particular toolkit.
from __future__ import annotations

import logging
from typing import Any, Callable

try:
    from .game_logic import Status
    from .snake_game import SnakeGame
except ImportError:
    from game_logic import Status
    from snake_game import SnakeGame


logger = logging.getLogger(__name__)

ACTIVE = (Status.RUNNING, Status.PAUSED)


class TickLoop:
    """
    Keeps at most one pending timer callback while a game is in progress.

    `after(ms, callback)` returns an id and `after_cancel(id)` drops that
    callback. These are Tk's `root.after` / `root.after_cancel`. A paused
    game keeps firing, and each tick is then a no-op.
    """

    def __init__(
        self,
        after: Callable[[int, Callable[[], None]], Any],
        after_cancel: Callable[[Any], None],
        game: SnakeGame,
        on_frame: Callable[[], None] | None = None,
    ) -> None:
        self.after = after
        self.after_cancel = after_cancel
        self.game = game
        self.on_frame = on_frame
        self.after_id: Any = None

    @property
    def armed(self) -> bool:
        return self.after_id is not None

    def cancel(self) -> None:
        """Cancel scheduled tick callback if one exists."""
        if self.after_id is not None:
            self.after_cancel(self.after_id)
            self.after_id = None

    def schedule(self) -> None:
        """(Re)arm the timer with the current speed."""
        self.cancel()
        self.after_id = self.after(self.game.state.speed_ms, self.fire)

    def sync(self) -> None:
        """Arm the loop for an active game, cancel it otherwise."""
        if self.game.status in ACTIVE:
            if self.after_id is None:
                self.schedule()
        else:
            self.cancel()

    def rearm(self) -> None:
        """Apply a new period now: drop the pending callback and schedule a fresh one."""
        if self.after_id is not None:
            logger.debug("Re-arming tick timer at %d ms", self.game.state.speed_ms)
            self.schedule()

    def fire(self) -> None:
        """Timer callback: one tick, then reschedule while the game is in progress."""
        self.after_id = None
        state = self.game.tick()
        if state.status in ACTIVE:
            self.schedule()
        if self.on_frame is not None:
            self.on_frame()
