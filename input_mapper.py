# Keyboard handling: maps Tk keysyms onto headings and pause toggles.
from __future__ import annotations

from dataclasses import replace
import logging

try:
    from .game_logic import GameState, Heading, Status
except ImportError:
    from game_logic import GameState, Heading, Status


logger = logging.getLogger(__name__)

ARROW_KEYS = {
    "Up": Heading.UP,
    "Down": Heading.DOWN,
    "Left": Heading.LEFT,
    "Right": Heading.RIGHT,
}
WASD_KEYS = {
    "w": Heading.UP,
    "s": Heading.DOWN,
    "a": Heading.LEFT,
    "d": Heading.RIGHT,
}
PAUSE_KEY = "space"


def map_key(key: str, bindings: str = "arrows+wasd") -> Heading | None:
    """Return the heading a key asks for, or None if it is not a direction key."""
    if key in ARROW_KEYS:
        return ARROW_KEYS[key]
    if bindings == "arrows+wasd":
        # Caps lock reports "W" instead of "w".
        return WASD_KEYS.get(key.lower())
    return None


def request_heading(state: GameState, heading: Heading) -> GameState:
    """Queue a heading for the next tick; reject instant 180-degree turns."""
    if state.status is Status.GAME_OVER:
        return state
    # Compared to the committed heading, so two quick turns within one tick
    # still cannot fold the snake back onto its neck.
    if heading.is_reverse_of(state.heading):
        logger.debug("Ignoring reversal %s while heading %s", heading.name, state.heading.name)
        return state
    if heading is state.pending_heading:
        return state
    return replace(state, pending_heading=heading)


def toggle_pause(state: GameState) -> GameState:
    """Flip between running and paused; other statuses are left alone."""
    if state.status is Status.RUNNING:
        return replace(state, status=Status.PAUSED)
    if state.status is Status.PAUSED:
        return replace(state, status=Status.RUNNING)
    return state


def on_key(key: str, state: GameState) -> tuple[GameState, bool]:
    """
    Apply one key press to the state.

    Returns the new state and whether the key was consumed, so the caller
    can suppress the toolkit's default handling (e.g. space activating a
    focused button).
    """
    if key == PAUSE_KEY:
        return toggle_pause(state), True

    heading = map_key(key, state.config.key_bindings)
    if heading is None:
        return state, False

    if state.config.start_on_key and state.status is Status.NOT_STARTED:
        logger.info("Game started by %s key", key)
        state = replace(state, status=Status.RUNNING)

    return request_heading(state, heading), True
