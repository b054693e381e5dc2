# Board encodings used for rendering and debug output.
from __future__ import annotations

import numpy as np

try:
    from .game_logic import GameState
except ImportError:
    from game_logic import GameState


EMPTY = 0
FOOD = 1
SNAKE_BODY = 2
SNAKE_HEAD = 3

CELL_CHARS = {EMPTY: ".", FOOD: "*", SNAKE_BODY: "o", SNAKE_HEAD: "@"}


def encode_board(state: GameState) -> np.ndarray:
    """
    Grid of cell kinds indexed as board[y, x]:
    - 0: empty
    - 1: food
    - 2: snake body
    - 3: snake head
    """
    size = state.grid_size
    board = np.full((size, size), EMPTY, dtype=np.int8)

    fx, fy = state.food
    board[fy, fx] = FOOD

    for idx, (x, y) in enumerate(state.snake):
        board[y, x] = SNAKE_HEAD if idx == 0 else SNAKE_BODY

    return board


def board_to_text(state: GameState) -> str:
    """ASCII rendering of the board, one row per line, (0, 0) at top left."""
    board = encode_board(state)
    return "\n".join("".join(CELL_CHARS[int(v)] for v in row) for row in board)
