"""
Общие предусловия и постусловия алгоритмов построения.

Каждый алгоритм:
1. Проверяет (average, min, max) через validate_inputs → InvalidAverage
2. Получает target_sum = average * count (должен быть целым)
3. Перед возвратом проверяет точное среднее и границы → Unsatisfiable
"""

from decimal import Decimal
from fractions import Fraction
from typing import Optional

from src.core.domain.distribution import AlgorithmName, Bounds
from src.core.domain.errors import InvalidAverage, Unsatisfiable
from src.core.math.exact_decimal import ExactInput, is_exact_mean
from src.core.math.rational_reducer import validate_inputs


def validate_count(count: int) -> int:
    """
    Проверка count: положительное целое.

    Raises:
        InvalidAverage: count <= 0 или не int
    """
    if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
        raise InvalidAverage(f"Count must be a positive integer, got {count!r}")
    return count


def prepare_target(
    algorithm: AlgorithmName,
    average: ExactInput,
    minimum: int,
    maximum: int,
    count: int,
) -> tuple[Decimal, int]:
    """
    Валидация входов алгоритма с фиксированным count.

    Returns:
        (average как Decimal, target_sum)

    Raises:
        InvalidAverage: нарушены предусловия или count <= 0
        Unsatisfiable: average * count не целое
    """
    exact_average = validate_inputs(average, minimum, maximum)
    validate_count(count)

    target = Fraction(exact_average) * count
    if target.denominator != 1:
        raise Unsatisfiable(
            f"{algorithm.value}: average {exact_average} * count {count} "
            f"is not an integer sum",
            algorithm=algorithm.value,
        )

    return exact_average, int(target)


def verify_sequence(
    algorithm: AlgorithmName,
    values: list[int],
    average: Decimal,
    minimum: int,
    maximum: int,
    expected_length: Optional[int] = None,
) -> tuple[int, ...]:
    """
    Проверка постусловий и snapshot результата.

    Returns:
        Неизменяемая копия последовательности

    Raises:
        Unsatisfiable: нарушено точное среднее, границы или длина
    """
    if expected_length is not None and len(values) != expected_length:
        raise Unsatisfiable(
            f"{algorithm.value}: expected {expected_length} values, got {len(values)}",
            algorithm=algorithm.value,
        )

    bounds = Bounds(minimum=minimum, maximum=maximum)
    out_of_bounds = [v for v in values if not bounds.contains(v)]
    if out_of_bounds:
        raise Unsatisfiable(
            f"{algorithm.value}: values {out_of_bounds[:5]} outside "
            f"[{minimum}, {maximum}]",
            algorithm=algorithm.value,
        )

    if not is_exact_mean(sum(values), len(values), average):
        raise Unsatisfiable(
            f"{algorithm.value}: sum {sum(values)} over {len(values)} values "
            f"does not average to {average}",
            algorithm=algorithm.value,
        )

    return tuple(values)
