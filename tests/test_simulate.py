"""Tests for headless simulation."""

import pytest

from reversal_snake.config import GameConfig
from reversal_snake.simulate import SimulationResult, simulate_games


class TestSimulateGames:
    def test_counts_add_up(self):
        result = simulate_games(num_games=10, max_ticks=200)
        assert isinstance(result, SimulationResult)
        assert result.total_games == 10
        assert result.wall_deaths + result.self_deaths <= 10
        assert result.total_ticks > 0
        assert result.ticks_per_second > 0

    def test_food_on_path_is_eaten(self):
        result = simulate_games(
            num_games=3,
            max_ticks=50,
            turn_probability=0.0,
            config=GameConfig(board_size=6, food_offset=1),
        )
        assert result.best_score >= 1
        assert result.wall_deaths + result.self_deaths == 3

    def test_deterministic_outcomes(self):
        a = simulate_games(num_games=5, max_ticks=100, seed=3)
        b = simulate_games(num_games=5, max_ticks=100, seed=3)
        assert (a.total_ticks, a.best_score, a.wall_deaths) == (
            b.total_ticks, b.best_score, b.wall_deaths,
        )

    def test_invalid_game_count(self):
        with pytest.raises(ValueError, match="at least 1"):
            simulate_games(num_games=0)

    def test_summary(self):
        result = simulate_games(num_games=1, max_ticks=10)
        assert result.summary().startswith("Simulation: 1 games")
