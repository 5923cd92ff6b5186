"""Random Adjustment — случайное заполнение с подгонкой к целевой сумме

Алгоритм:
1. Заполнить count элементов случайными целыми из [1, max]
   (при max < 1 — из [min, max])
2. Поднять значения ниже min до min
3. expected_sum = average * count, total = sum
4. total < expected_sum: обходить последовательность; для элемента < max
   difference = max - element; если difference < quarter_max
   (max / 4, FLOOR, 2 знака) — прибавить difference целиком, иначе +1
5. total > expected_sum: симметрично вниз к min
6. Остановка сразу при total == expected_sum

Шаг никогда не превышает оставшийся разрыв |expected_sum - total|, поэтому
сумма сходится точно. Источник случайности инжектируется (random.Random)
для воспроизводимых тестов.
"""

import logging
import random
from dataclasses import dataclass
from decimal import Decimal

from src.core.domain.distribution import AlgorithmName
from src.core.domain.errors import Unsatisfiable
from src.core.math.exact_decimal import QUARTER_SCALE, ExactInput, divide_floor
from src.distribution.algorithms.common import prepare_target, verify_sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RandomAdjustmentConfig:
    """Конфигурация Random Adjustment.

    max_iterations ограничивает число посещений элементов при подгонке.
    quarter_divisor задаёт порог прыжка: max / quarter_divisor.
    """

    max_iterations: int = 1_000_000
    quarter_divisor: int = 4


class RandomAdjustment:
    """Random Adjustment: случайный старт + подгонка суммы."""

    name = AlgorithmName.RANDOM_DISTRIBUTION

    def __init__(
        self,
        config: RandomAdjustmentConfig | None = None,
        rng: random.Random | None = None,
    ):
        self.config = config or RandomAdjustmentConfig()
        self.rng = rng or random.Random()

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
            Unsatisfiable: подгонка невозможна или превышен max_iterations
        """
        exact_average, expected_sum = prepare_target(
            self.name, average, minimum, maximum, count
        )

        values = [max(v, minimum) for v in self._draw(minimum, maximum, count)]
        total = sum(values)
        quarter = divide_floor(maximum, self.config.quarter_divisor, QUARTER_SCALE)

        if total < expected_sum:
            total = self._raise_values(values, total, expected_sum, maximum, quarter)
        elif total > expected_sum:
            total = self._lower_values(values, total, expected_sum, minimum, quarter)

        logger.debug(f"{self.name.value}: adjusted to sum={total}, count={count}")
        return verify_sequence(
            self.name, values, exact_average, minimum, maximum, expected_length=count
        )

    def _draw(self, minimum: int, maximum: int, count: int) -> list[int]:
        low = 1 if maximum >= 1 else minimum
        return [self.rng.randint(low, maximum) for _ in range(count)]

    def _raise_values(
        self,
        values: list[int],
        total: int,
        expected_sum: int,
        maximum: int,
        quarter: Decimal,
    ) -> int:
        """Подгонка вверх к expected_sum. Возвращает итоговую сумму."""
        iterations = 0

        while total < expected_sum:
            progressed = False
            for i, x in enumerate(values):
                if x >= maximum:
                    continue
                if iterations >= self.config.max_iterations:
                    raise self._exhausted(total, expected_sum)

                difference = maximum - x
                step = difference if difference < quarter else 1
                step = min(step, expected_sum - total)

                values[i] = x + step
                total += step
                iterations += 1
                progressed = True

                if total == expected_sum:
                    break

            if not progressed:
                raise Unsatisfiable(
                    f"{self.name.value}: all values at maximum {maximum}, "
                    f"sum {total} < expected {expected_sum}",
                    algorithm=self.name.value,
                )

        return total

    def _lower_values(
        self,
        values: list[int],
        total: int,
        expected_sum: int,
        minimum: int,
        quarter: Decimal,
    ) -> int:
        """Подгонка вниз к expected_sum. Возвращает итоговую сумму."""
        iterations = 0

        while total > expected_sum:
            progressed = False
            for i, x in enumerate(values):
                if x <= minimum:
                    continue
                if iterations >= self.config.max_iterations:
                    raise self._exhausted(total, expected_sum)

                difference = x - minimum
                step = difference if difference < quarter else 1
                step = min(step, total - expected_sum)

                values[i] = x - step
                total -= step
                iterations += 1
                progressed = True

                if total == expected_sum:
                    break

            if not progressed:
                raise Unsatisfiable(
                    f"{self.name.value}: all values at minimum {minimum}, "
                    f"sum {total} > expected {expected_sum}",
                    algorithm=self.name.value,
                )

        return total

    def _exhausted(self, total: int, expected_sum: int) -> Unsatisfiable:
        return Unsatisfiable(
            f"{self.name.value}: no convergence within "
            f"{self.config.max_iterations} iterations "
            f"(sum={total}, expected={expected_sum})",
            algorithm=self.name.value,
        )
