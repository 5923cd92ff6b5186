"""
Тесты для Subtraction Distribution — циклический декремент от max
"""

from fractions import Fraction

import pytest

from src.core.domain import InvalidAverage, Unsatisfiable
from src.core.math.rational_reducer import reduce
from src.distribution.algorithms import (
    SubtractionDistribution,
    SubtractionDistributionConfig,
)


@pytest.fixture
def algorithm() -> SubtractionDistribution:
    return SubtractionDistribution()


class TestSubtractionDistribution:
    def test_scenario_sequence(self, algorithm):
        """50 → 43: семь декрементов по индексам 0..6."""
        values = algorithm.run("4.3", 1, 5, 10)
        assert values == (4, 4, 4, 4, 4, 4, 4, 5, 5, 5)

    def test_average_equals_max(self, algorithm):
        """Сумма уже равна цели: ни одного декремента."""
        assert algorithm.run("5", 1, 5, 10) == (5,) * 10

    def test_average_equals_min(self, algorithm):
        """Индекс оборачивается, пока все элементы не дойдут до min."""
        assert algorithm.run("1", 1, 5, 10) == (1,) * 10

    @pytest.mark.parametrize(
        "average,minimum,maximum",
        [("4.3", 1, 5), ("3.142", 1, 5), ("1.05", 1, 2), ("-2.25", -4, 0)],
    )
    def test_exact_mean_and_bounds(self, algorithm, average, minimum, maximum):
        target = reduce(average)
        values = algorithm.run(average, minimum, maximum, target.count)

        assert len(values) == target.count
        assert Fraction(sum(values), len(values)) == Fraction(target.average)
        assert min(values) >= minimum
        assert max(values) <= maximum

    @pytest.mark.parametrize(
        "average,minimum,maximum,count",
        [("4.3", 1, 5, 10), ("3.142", 1, 5, 1000), ("-2.25", -4, -1, 100)],
    )
    def test_repeated_runs_identical(self, algorithm, average, minimum, maximum, count):
        """Детерминированный алгоритм: одинаковые входы → одинаковая последовательность."""
        first = algorithm.run(average, minimum, maximum, count)
        second = algorithm.run(average, minimum, maximum, count)

        assert first == second


class TestSubtractionDistributionFailures:
    def test_non_integral_target_sum(self, algorithm):
        with pytest.raises(Unsatisfiable) as exc_info:
            algorithm.run("4.3", 1, 5, 7)
        assert exc_info.value.algorithm == "subtraction_distribution"

    def test_iteration_budget(self):
        algorithm = SubtractionDistribution(
            SubtractionDistributionConfig(max_iterations=2)
        )
        with pytest.raises(Unsatisfiable, match="no convergence"):
            algorithm.run("4.3", 1, 5, 10)

    def test_invalid_inputs(self, algorithm):
        with pytest.raises(InvalidAverage, match="cannot be equal"):
            algorithm.run("3", 3, 3, 10)
