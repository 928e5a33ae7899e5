"""
Tests for reversi_engine.utils.config

Tests the difficulty registry and runtime configuration.
"""

import pytest

from reversi_engine.core.types import Difficulty
from reversi_engine.utils.config import (
    CONTROLLERS,
    DEFAULT_CONFIG,
    DEFAULT_WORKER_COUNT,
    DIFFICULTIES,
    HUMAN,
    Config,
    SearchSettings,
)


class TestDifficultyRegistry:
    """DIFFICULTIES registry tests."""

    def test_every_tier_registered(self):
        assert set(DIFFICULTIES) == set(Difficulty)

    def test_easy_is_greedy(self):
        assert DIFFICULTIES[Difficulty.EASY].greedy

    def test_medium(self):
        settings = DIFFICULTIES[Difficulty.MEDIUM]
        assert not settings.greedy
        assert not settings.advanced
        assert settings.depth_for(60) == 3
        assert settings.depth_for(1) == 3

    @pytest.mark.parametrize("empties,depth", [(60, 4), (11, 4), (10, 6), (1, 6)])
    def test_hard_depth(self, empties, depth):
        settings = DIFFICULTIES[Difficulty.HARD]
        assert settings.advanced
        assert settings.depth_for(empties) == depth

    def test_settings_frozen(self):
        with pytest.raises(AttributeError):
            SearchSettings().depth = 9


class TestConfig:
    """Config tests."""

    def test_defaults(self):
        config = Config()
        assert config.first == HUMAN
        assert config.second == Difficulty.MEDIUM.value
        assert config.games == 1
        assert config.num_workers == DEFAULT_WORKER_COUNT
        assert config.log_level == "WARNING"
        assert not config.self_play

    def test_self_play(self):
        assert Config(first="easy", second="hard").self_play

    def test_normalizes_names(self):
        config = Config(first=" HARD ", second="Human", log_level="debug")
        assert config.first == "hard"
        assert config.second == HUMAN
        assert config.log_level == "DEBUG"

    def test_unknown_controller(self):
        with pytest.raises(ValueError, match="Unknown controller"):
            Config(first="robot")

    def test_games_at_least_one(self):
        assert Config(games=0).games == 1

    def test_controllers(self):
        assert CONTROLLERS == ("human", "easy", "medium", "hard")

    def test_default_config(self):
        assert DEFAULT_CONFIG.first == HUMAN
