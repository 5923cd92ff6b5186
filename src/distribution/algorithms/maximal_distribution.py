"""Maximal Distribution — усечение среднего и раздача дробного пула

Алгоритм:
1. Заполнить count элементов значением average
2. Усечь каждый элемент до целой части, сложив отброшенные дробные части в pool
3. Циклически обходить элементы по индексу:
   - pool > 0 и элемент < max → +1 к элементу, -1 из pool
   - pool < 0 и элемент > min → -1 к элементу, +1 в pool
   - иначе перейти к следующему индексу
4. Остановиться, когда sum == average * count

Если полный проход не изменил ни одного элемента при ненулевом pool,
headroom исчерпан → Unsatisfiable.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction

from src.core.domain.distribution import AlgorithmName
from src.core.domain.errors import Unsatisfiable
from src.core.math.exact_decimal import ExactInput, fractional_part, integer_part
from src.distribution.algorithms.common import prepare_target, verify_sequence

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class MaximalDistributionConfig:
    """Конфигурация Maximal Distribution.

    max_iterations ограничивает число посещений элементов.
    """

    max_iterations: int = 1_000_000


# =============================================================================
# ALGORITHM
# =============================================================================


class MaximalDistribution:
    """Maximal Distribution: усечение + циклическая раздача pool."""

    name = AlgorithmName.MAXIMAL_DISTRIBUTION

    def __init__(self, config: MaximalDistributionConfig | None = None):
        self.config = config or MaximalDistributionConfig()

    def run(
        self,
        average: ExactInput,
        minimum: int,
        maximum: int,
        count: int,
    ) -> tuple[int, ...]:
        """Построение последовательности длины count.

        Args:
            average: целевое среднее
            minimum: нижняя граница (включительно)
            maximum: верхняя граница (включительно)
            count: длина последовательности

        Returns:
            последовательность с sum == average * count

        Raises:
            InvalidAverage: нарушены предусловия
            Unsatisfiable: headroom исчерпан или превышен max_iterations
        """
        exact_average, target_sum = prepare_target(
            self.name, average, minimum, maximum, count
        )

        values, pool = self._truncate(exact_average, count)
        total = sum(values)

        index = 0
        iterations = 0
        idle_visits = 0

        while total != target_sum:
            if iterations >= self.config.max_iterations:
                raise Unsatisfiable(
                    f"{self.name.value}: no convergence within "
                    f"{self.config.max_iterations} iterations (pool={pool})",
                    algorithm=self.name.value,
                )
            if idle_visits >= count:
                raise Unsatisfiable(
                    f"{self.name.value}: headroom exhausted with pool={pool} "
                    f"in [{minimum}, {maximum}]",
                    algorithm=self.name.value,
                )

            value = values[index]
            if pool > 0 and value < maximum:
                values[index] = value + 1
                pool -= 1
                total += 1
                idle_visits = 0
            elif pool < 0 and value > minimum:
                values[index] = value - 1
                pool += 1
                total -= 1
                idle_visits = 0
            else:
                idle_visits += 1

            iterations += 1
            index = (index + 1) % count

        logger.debug(
            f"{self.name.value}: converged after {iterations} iterations, count={count}"
        )
        return verify_sequence(
            self.name, values, exact_average, minimum, maximum, expected_length=count
        )

    def _truncate(self, average: Decimal, count: int) -> tuple[list[int], int]:
        """Усечение average до целой части с накоплением pool.

        Returns:
            (values, pool), где pool = count * frac(average)
        """
        whole = integer_part(average)
        values = [whole] * count

        pool = Fraction(0)
        remainder = Fraction(fractional_part(average))
        for _ in range(count):
            pool += remainder

        # pool целый, т.к. average * count целое
        return values, int(pool)
