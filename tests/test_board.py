"""
Tests for board.py - render grids and ASCII dumps.
"""

from dataclasses import replace

import numpy as np

from board import EMPTY, FOOD, SNAKE_BODY, SNAKE_HEAD, board_to_text, encode_board
from game_logic import SnakeConfig, initial_state


def make_state():
    config = SnakeConfig(grid_size=8, initial_snake=((3, 2), (2, 2), (1, 2)), initial_food=(6, 5))
    return initial_state(config, np.random.default_rng(0))


class TestEncodeBoard:

    def test_shape_and_dtype(self):
        board = encode_board(make_state())
        assert board.shape == (8, 8)
        assert board.dtype == np.int8

    def test_cell_kinds(self):
        board = encode_board(make_state())
        assert board[2, 3] == SNAKE_HEAD
        assert board[2, 2] == SNAKE_BODY
        assert board[2, 1] == SNAKE_BODY
        assert board[5, 6] == FOOD
        assert int((board == EMPTY).sum()) == 64 - 4

    def test_follows_state(self):
        state = replace(make_state(), snake=((0, 0),), food=(7, 7))
        board = encode_board(state)
        assert board[0, 0] == SNAKE_HEAD
        assert board[7, 7] == FOOD
        assert board[2, 3] == EMPTY


class TestBoardToText:

    def test_rows(self):
        lines = board_to_text(make_state()).splitlines()
        assert len(lines) == 8
        assert lines[2] == ".oo@...."
        assert lines[5] == "......*."
        assert lines[0] == "........"
