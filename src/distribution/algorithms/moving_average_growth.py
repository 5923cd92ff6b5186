"""Moving-Average Growth — рост от минимума с удлинением последовательности

Алгоритм:
1. Заполнить count элементов значением min
2. Пока среднее != average, на циклическом индексе:
   - элемент < max → +1
   - иначе → дописать новый элемент min (длина растёт)
   затем сдвинуть индекс (по модулю текущей длины)

Единственный алгоритм, у которого длина результата может превышать count.
Рост не ограничен, поэтому max_iterations обязателен → NoConvergence.
average * count не обязано быть целым: при недостижимом на count среднем
последовательность удлиняется до подходящей длины.

Условие остановки проверяется до первой мутации: при average == min
результат — count элементов min.
"""

import logging
from dataclasses import dataclass

from src.core.domain.distribution import AlgorithmName
from src.core.domain.errors import NoConvergence
from src.core.math.exact_decimal import ExactInput, is_exact_mean
from src.core.math.rational_reducer import validate_inputs
from src.distribution.algorithms.common import validate_count, verify_sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MovingAverageConfig:
    """Конфигурация Moving-Average Growth."""

    max_iterations: int = 1_000_000


class MovingAverageGrowth:
    """Moving-Average Growth: инкремент или удлинение до точного среднего."""

    name = AlgorithmName.MOVING_AVERAGE

    def __init__(self, config: MovingAverageConfig | None = None):
        self.config = config or MovingAverageConfig()

    def run(
        self,
        average: ExactInput,
        minimum: int,
        maximum: int,
        count: int,
    ) -> tuple[int, ...]:
        """Построение последовательности длины >= count.

        Raises:
            InvalidAverage: нарушены предусловия
            NoConvergence: превышен max_iterations
        """
        exact_average = validate_inputs(average, minimum, maximum)
        validate_count(count)

        values = [minimum] * count
        total = minimum * count

        index = 0
        iterations = 0

        while not is_exact_mean(total, len(values), exact_average):
            if iterations >= self.config.max_iterations:
                raise NoConvergence(
                    f"{self.name.value}: mean did not reach {exact_average} within "
                    f"{self.config.max_iterations} iterations (length={len(values)})",
                    algorithm=self.name.value,
                    iterations=iterations,
                )

            if values[index] < maximum:
                values[index] += 1
                total += 1
            else:
                values.append(minimum)
                total += minimum

            iterations += 1
            index = (index + 1) % len(values)

        logger.debug(
            f"{self.name.value}: converged after {iterations} iterations, "
            f"length={len(values)}"
        )
        return verify_sequence(self.name, values, exact_average, minimum, maximum)
