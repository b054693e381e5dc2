"""
Tests for snake_game.py - the controller and its control operations.
"""

import logging
from dataclasses import replace

import pytest

from game_logic import Heading, SnakeConfig, Status, WallPolicy, preset_config
from snake_game import SnakeGame


@pytest.fixture
def classic():
    game = SnakeGame(SnakeConfig(), seed=123)
    # Park the food out of the snake's row so straight runs never eat.
    game.state = replace(game.state, food=(0, 0))
    return game


@pytest.fixture
def arcade():
    return SnakeGame(preset_config("arcade"), seed=123)


class TestStatusTransitions:
    """NotStarted -> Running <-> Paused -> GameOver."""

    def test_start(self, classic):
        assert classic.status is Status.NOT_STARTED
        assert classic.start() is True
        assert classic.status is Status.RUNNING
        assert classic.start() is False

    def test_pause_and_resume(self, classic):
        assert classic.pause() is False
        classic.start()
        assert classic.pause() is True
        assert classic.status is Status.PAUSED
        assert classic.pause() is False
        assert classic.resume() is True
        assert classic.status is Status.RUNNING
        assert classic.resume() is False

    def test_toggle_pause(self, classic):
        classic.start()
        assert classic.toggle_pause() is True
        assert classic.status is Status.PAUSED
        assert classic.toggle_pause() is True
        assert classic.status is Status.RUNNING

    def test_paused_game_does_not_move(self, classic):
        classic.start()
        classic.pause()
        before = classic.state
        assert classic.tick() is before

    def test_not_started_game_does_not_move(self, classic):
        before = classic.state
        classic.tick()
        assert classic.state is before

    def test_wall_ends_game(self, classic):
        classic.start()
        for _ in range(10):
            classic.tick()
        assert classic.state.head == (19, 10)
        classic.tick()
        assert classic.status is Status.GAME_OVER
        assert classic.state.collision == "wall"

    def test_game_over_blocks_start_pause_resume(self, classic):
        classic.start()
        for _ in range(11):
            classic.tick()
        assert classic.status is Status.GAME_OVER
        assert classic.start() is False
        assert classic.pause() is False
        assert classic.resume() is False
        assert classic.toggle_pause() is False
        frozen = classic.state
        classic.tick()
        assert classic.state is frozen

    def test_game_over_is_logged(self, classic, caplog):
        caplog.set_level(logging.DEBUG)
        classic.start()
        for _ in range(11):
            classic.tick()
        assert "wall collision" in caplog.text
        assert "after 10 ticks" in caplog.text
        assert "Final board" in caplog.text


class TestResetRestart:
    """Reinitialisation restores every documented initial value."""

    def _play_and_eat(self, game):
        game.start()
        head_x, head_y = game.state.head
        game.state = replace(game.state, food=(head_x + 1, head_y))
        game.tick()
        assert game.state.score > 0

    def test_reset(self, classic):
        self._play_and_eat(classic)
        classic.reset()
        state = classic.state
        assert state.snake == classic.config.initial_snake
        assert state.heading is Heading.RIGHT
        assert state.score == 0
        assert state.speed_ms == classic.config.speed_ms
        assert state.status is Status.NOT_STARTED
        assert state.collision is None
        assert state.ticks == 0
        assert state.food not in state.snake

    def test_restart(self, arcade):
        self._play_and_eat(arcade)
        arcade.restart()
        state = arcade.state
        assert state.snake == ((10, 10),)
        assert state.food == (15, 15)
        assert state.score == 0
        assert state.status is Status.RUNNING

    def test_restart_after_game_over(self, classic):
        classic.start()
        for _ in range(11):
            classic.tick()
        classic.restart()
        assert classic.status is Status.RUNNING
        assert classic.state.collision is None

    def test_wall_policy_survives_reset(self, arcade):
        arcade.toggle_wall_policy()
        arcade.reset()
        assert arcade.state.wall_policy is WallPolicy.WRAP_AROUND
        arcade.restart()
        assert arcade.state.wall_policy is WallPolicy.WRAP_AROUND


class TestSpeed:
    """Manual speed adjustment."""

    def test_faster_and_slower(self, classic):
        assert classic.faster() is True
        assert classic.state.speed_ms == 130
        assert classic.slower() is True
        assert classic.state.speed_ms == 150

    def test_clamped_at_floor(self, classic):
        for _ in range(20):
            classic.faster()
        assert classic.state.speed_ms == 40
        assert classic.set_speed(-20) is False

    def test_clamped_at_ceiling(self, classic):
        classic.set_speed(5000)
        assert classic.state.speed_ms == 1000

    def test_adjustable_while_running(self, classic):
        classic.start()
        assert classic.set_speed(-50) is True
        assert classic.state.speed_ms == 100

    def test_constant_speed_variant_ignores_adjustment(self, arcade):
        assert arcade.set_speed(-20) is False
        assert arcade.state.speed_ms == 150

    def test_speed_ramps_on_food(self, classic):
        classic.start()
        classic.state = replace(classic.state, food=(10, 10))
        classic.tick()
        assert classic.state.speed_ms == 146


class TestWallPolicy:
    """Wall policy toggling is only allowed between games."""

    def test_toggle_before_start(self, arcade):
        assert arcade.toggle_wall_policy() is True
        assert arcade.state.wall_policy is WallPolicy.WRAP_AROUND
        assert arcade.toggle_wall_policy() is True
        assert arcade.state.wall_policy is WallPolicy.LETHAL

    def test_toggle_rejected_mid_game(self, arcade):
        arcade.start()
        assert arcade.toggle_wall_policy() is False
        arcade.pause()
        assert arcade.toggle_wall_policy() is False
        assert arcade.state.wall_policy is WallPolicy.LETHAL

    def test_toggle_after_game_over(self, arcade):
        arcade.start()
        for _ in range(10):
            arcade.tick()
        assert arcade.status is Status.GAME_OVER
        assert arcade.toggle_wall_policy() is True

    def test_classic_has_fixed_walls(self, classic):
        assert classic.can_toggle_wall_policy() is False
        assert classic.toggle_wall_policy() is False

    def test_wrap_keeps_game_going(self, arcade):
        arcade.toggle_wall_policy()
        arcade.start()
        for _ in range(10):
            arcade.tick()
        assert arcade.status is Status.RUNNING
        assert arcade.state.head == (0, 10)


class TestKeyboard:
    """Key events routed through the controller."""

    def test_arrow_starts_arcade_game(self, arcade):
        assert arcade.on_key("Down") is True
        assert arcade.status is Status.RUNNING
        arcade.tick()
        assert arcade.state.head == (10, 11)

    def test_unknown_key(self, arcade):
        assert arcade.on_key("x") is False
        assert arcade.status is Status.NOT_STARTED

    def test_space_pauses(self, classic):
        classic.start()
        assert classic.on_key("space") is True
        assert classic.status is Status.PAUSED


class TestScenario:
    """End-to-end run on the arcade rules."""

    def test_run_to_fixed_food(self, arcade):
        arcade.start()
        for _ in range(5):
            arcade.tick()
        assert arcade.state.head == (15, 10)
        arcade.tick()
        assert arcade.state.head == (16, 10)
        assert arcade.state.length == 1

        arcade.on_key("Down")
        arcade.tick()
        arcade.on_key("Left")
        arcade.tick()
        assert arcade.state.head == (15, 11)

        arcade.on_key("Down")
        for _ in range(4):
            arcade.tick()
        assert arcade.state.head == (15, 15)
        assert arcade.state.length == 2
        assert arcade.state.score == 10
        assert arcade.state.food not in arcade.state.snake
