"""
Тесты для Moving-Average Growth — рост от min с удлинением

Проверяет:
1. Базовый сценарий на count = 10
2. Удлинение последовательности сверх count
3. Остановку до первой мутации при average == min
4. NoConvergence при исчерпании max_iterations
"""

from fractions import Fraction

import pytest

from src.core.domain import InvalidAverage, NoConvergence
from src.distribution.algorithms import MovingAverageConfig, MovingAverageGrowth


@pytest.fixture
def algorithm() -> MovingAverageGrowth:
    return MovingAverageGrowth()


class TestMovingAverageGrowth:
    def test_scenario_sequence(self, algorithm):
        values = algorithm.run("4.3", 1, 5, 10)
        assert values == (5, 5, 5, 4, 4, 4, 4, 4, 4, 4)

    def test_grows_beyond_count(self, algorithm):
        """1.5 на count = 1 недостижимо: [1] → [2] → [2, 1]."""
        values = algorithm.run("1.5", 1, 2, 1)
        assert values == (2, 1)

    def test_average_equals_min_stops_immediately(self, algorithm):
        assert algorithm.run("1", 1, 5, 10) == (1,) * 10

    def test_average_equals_max(self, algorithm):
        assert algorithm.run("5", 1, 5, 4) == (5,) * 4

    @pytest.mark.parametrize(
        "average,minimum,maximum,count",
        [
            ("4.3", 1, 5, 10),
            ("3.142", 1, 5, 1000),
            ("2.5", 1, 5, 2),
            ("4.25", 2, 7, 4),
        ],
    )
    def test_exact_mean_and_bounds(self, algorithm, average, minimum, maximum, count):
        values = algorithm.run(average, minimum, maximum, count)

        assert len(values) >= count
        assert Fraction(sum(values), len(values)) == Fraction(average)
        assert all(minimum <= v <= maximum for v in values)

    @pytest.mark.parametrize(
        "average,minimum,maximum,count",
        [("4.3", 1, 5, 10), ("3.142", 1, 5, 1000), ("-2.25", -4, -1, 100)],
    )
    def test_repeated_runs_identical(self, algorithm, average, minimum, maximum, count):
        """Детерминированный алгоритм: одинаковые входы → одинаковая последовательность."""
        first = algorithm.run(average, minimum, maximum, count)
        second = algorithm.run(average, minimum, maximum, count)

        assert first == second


class TestMovingAverageGrowthFailures:
    def test_iteration_budget(self):
        algorithm = MovingAverageGrowth(MovingAverageConfig(max_iterations=5))
        with pytest.raises(NoConvergence) as exc_info:
            algorithm.run("4.3", 1, 5, 10)

        assert exc_info.value.algorithm == "moving_average"
        assert exc_info.value.iterations == 5

    def test_invalid_inputs(self, algorithm):
        with pytest.raises(InvalidAverage):
            algorithm.run("0.5", 1, 5, 10)

    def test_invalid_count(self, algorithm):
        with pytest.raises(InvalidAverage):
            algorithm.run("4.3", 1, 5, 0)
