"""Subtraction Distribution — спуск от максимума к целевой сумме

Алгоритм:
1. Заполнить count элементов значением max
2. target_sum = average * count
3. Пока sum > target_sum, циклически уменьшать по одному элементу на 1
   (индекс возвращается к 0 после последнего элемента)

Нижняя граница проверяется на каждом шаге: уменьшение элемента ниже min
→ Unsatisfiable.
"""

import logging
from dataclasses import dataclass

from src.core.domain.distribution import AlgorithmName
from src.core.domain.errors import Unsatisfiable
from src.core.math.exact_decimal import ExactInput
from src.distribution.algorithms.common import prepare_target, verify_sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubtractionDistributionConfig:
    """Конфигурация Subtraction Distribution."""

    max_iterations: int = 1_000_000


class SubtractionDistribution:
    """Subtraction Distribution: циклический декремент от max."""

    name = AlgorithmName.SUBTRACTION_DISTRIBUTION

    def __init__(self, config: SubtractionDistributionConfig | None = None):
        self.config = config or SubtractionDistributionConfig()

    def run(
        self,
        average: ExactInput,
        minimum: int,
        maximum: int,
        count: int,
    ) -> tuple[int, ...]:
        """Построение последовательности длины count.

        Raises:
            InvalidAverage: нарушены предусловия
            Unsatisfiable: элемент ушёл бы ниже min или превышен max_iterations
        """
        exact_average, target_sum = prepare_target(
            self.name, average, minimum, maximum, count
        )

        values = [maximum] * count
        total = maximum * count

        index = 0
        iterations = 0

        while total > target_sum:
            if iterations >= self.config.max_iterations:
                raise Unsatisfiable(
                    f"{self.name.value}: no convergence within "
                    f"{self.config.max_iterations} iterations "
                    f"(sum={total}, target={target_sum})",
                    algorithm=self.name.value,
                )

            decremented = values[index] - 1
            if decremented < minimum:
                raise Unsatisfiable(
                    f"{self.name.value}: value at index {index} would drop to "
                    f"{decremented} below minimum {minimum}",
                    algorithm=self.name.value,
                )

            values[index] = decremented
            total -= 1
            iterations += 1
            index = (index + 1) % count

        logger.debug(
            f"{self.name.value}: converged after {iterations} decrements, count={count}"
        )
        return verify_sequence(
            self.name, values, exact_average, minimum, maximum, expected_length=count
        )
