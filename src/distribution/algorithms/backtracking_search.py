"""Backtracking Search — поэлементный рост с ревизией последнего выбора

Алгоритм (явный цикл вместо рекурсии, бюджет max_steps):
1. Начать со списка [min]
2. На каждом шаге mean = floor(sum / len, precision):
   - mean < average: последний элемент < max → +1, иначе дописать min
   - mean > average: последний элемент > min → -1 и дописать min
   - mean == average и сумма точная → вернуть список
3. Бюджет исчерпан → NoConvergence

precision по умолчанию = число дробных знаков average + 1. Average
представим на этой шкале, поэтому floor(mean) < average ⇔ mean < average.
Равенство на шкале при неточной сумме означает mean в
[average, average + 10^-precision), т.е. перелёт, и обрабатывается как
mean > average. Возвращаемый список всегда имеет точное среднее.

Перелёт возможен только сразу после инкремента последнего элемента:
до него floor(mean) < average, а после декремента и добавления min среднее
снова меньше average. Поэтому при перелёте последний элемент всегда > min.

Длина результата не задаётся заранее (count не используется).
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from src.core.domain.distribution import AlgorithmName
from src.core.domain.errors import NoConvergence
from src.core.math.exact_decimal import (
    ExactInput,
    divide_floor,
    fractional_digits,
    is_exact_mean,
)
from src.core.math.rational_reducer import validate_inputs
from src.distribution.algorithms.common import verify_sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BacktrackingConfig:
    """Конфигурация Backtracking Search.

    precision=None → дробные знаки average + 1. Явная precision меньше
    числа дробных знаков average поднимается до этого числа.
    """

    max_steps: int = 1_000_000
    precision: Optional[int] = None


class BacktrackingSearch:
    """Backtracking Search: ревизия последнего элемента до точного среднего."""

    name = AlgorithmName.BACKTRACKING

    def __init__(self, config: BacktrackingConfig | None = None):
        self.config = config or BacktrackingConfig()

    def precision_for(self, average: Decimal) -> int:
        """Шкала сравнения mean для данного average."""
        digits = fractional_digits(average)
        if self.config.precision is None:
            return digits + 1
        return max(self.config.precision, digits)

    def run(self, average: ExactInput, minimum: int, maximum: int) -> tuple[int, ...]:
        """Поиск последовательности с точным средним.

        Raises:
            InvalidAverage: нарушены предусловия
            NoConvergence: превышен max_steps
        """
        exact_average = validate_inputs(average, minimum, maximum)
        precision = self.precision_for(exact_average)

        values = [minimum]
        total = minimum

        for step in range(self.config.max_steps):
            current_mean = divide_floor(total, len(values), precision)

            if current_mean == exact_average and is_exact_mean(
                total, len(values), exact_average
            ):
                logger.debug(
                    f"{self.name.value}: converged after {step} steps, "
                    f"length={len(values)}, precision={precision}"
                )
                return verify_sequence(
                    self.name, values, exact_average, minimum, maximum
                )

            if current_mean < exact_average:
                if values[-1] < maximum:
                    values[-1] += 1
                    total += 1
                else:
                    values.append(minimum)
                    total += minimum
            else:
                # перелёт следует только за инкрементом, поэтому values[-1] > min
                values[-1] -= 1
                values.append(minimum)
                total += minimum - 1

        raise NoConvergence(
            f"{self.name.value}: mean did not reach {exact_average} within "
            f"{self.config.max_steps} steps (length={len(values)})",
            algorithm=self.name.value,
            iterations=self.config.max_steps,
        )
