"""
Tests for gui.py - command-line parsing into a SnakeConfig.
"""

import pytest

from game_logic import WallPolicy
from gui import config_from_args, main, parse_args


class TestLauncherArgs:

    def test_defaults(self):
        args = parse_args([])
        assert args.variant == "classic"
        assert args.seed is None
        config = config_from_args(args)
        assert config.wall_policy is WallPolicy.LETHAL
        assert config.speed_ms == 150

    def test_arcade_with_wrap(self):
        config = config_from_args(parse_args(["--variant", "arcade", "--wrap"]))
        assert config.wall_policy is WallPolicy.WRAP_AROUND
        assert config.initial_food == (15, 15)

    def test_overrides(self):
        args = parse_args(["--grid-size", "30", "--cell-size", "16", "--speed", "90", "--seed", "4"])
        config = config_from_args(args)
        assert config.grid_size == 30
        assert config.cell_size == 16
        assert config.speed_ms == 90
        assert args.seed == 4

    def test_unknown_variant_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["--variant", "hardcore"])

    def test_invalid_settings_exit_before_window(self):
        with pytest.raises(SystemExit, match="Invalid settings"):
            main(["--grid-size", "5"])
