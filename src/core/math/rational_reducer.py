"""
Rational Reducer — сведение десятичного среднего к целому отношению

Модуль превращает десятичное среднее в пару (count, target_sum), такую что
target_sum / count == average точно:
- Валидация предусловий на (average, min, max)
- Масштабирование дробной части степенями 10 до исчезновения остатка
- Опциональный минимальный count (знаменатель несократимой дроби)

Историческое поведение: множитель начинается с 1 и умножается на 10 хотя бы
один раз, поэтому целое среднее (например 5) даёт count = 10. Режим
minimal=True возвращает несократимый знаменатель (5 → count = 1,
4.5 → count = 2) и не меняет поведение по умолчанию.

ФОРМУЛЫ:
    multiplier_0 = 1, remainder_0 = frac(average)
    multiplier_k = multiplier_{k-1} * 10
    remainder_k = frac(remainder_{k-1} * 10)
    stop при remainder_k == 0 (k >= 1)

    count = multiplier_k
    target_sum = average * count
"""

from decimal import Decimal
from fractions import Fraction
from typing import Final

from src.core.domain.distribution import Bounds, ReducedTarget
from src.core.domain.errors import InvalidAverage
from src.core.math.exact_decimal import (
    ExactInput,
    fractional_part,
    integer_part,
    to_exact,
)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Множитель масштабирования на каждом шаге
SCALING_BASE: Final[int] = 10

# Максимум шагов масштабирования (защита от бесконечного разложения)
MAX_SCALING_STEPS_DEFAULT: Final[int] = 64


# =============================================================================
# ВАЛИДАЦИЯ ПРЕДУСЛОВИЙ
# =============================================================================


def validate_inputs(average: ExactInput, minimum: int, maximum: int) -> Decimal:
    """
    Проверка предусловий на (average, min, max).

    Порядок проверок:
    1. Целая часть average != 0 (защита от деления на ноль)
    2. min != max
    3. min < max
    4. min <= average
    5. average <= max

    Args:
        average: Целевое среднее
        minimum: Нижняя граница (включительно)
        maximum: Верхняя граница (включительно)

    Returns:
        average как Decimal

    Raises:
        InvalidAverage: при нарушении любого предусловия
    """
    exact_average = to_exact(average)

    if isinstance(minimum, bool) or not isinstance(minimum, int):
        raise InvalidAverage(f"Minimum value must be an integer, got {minimum!r}")
    if isinstance(maximum, bool) or not isinstance(maximum, int):
        raise InvalidAverage(f"Maximum value must be an integer, got {maximum!r}")

    if integer_part(exact_average) == 0:
        raise InvalidAverage(
            f"Cannot divide by zero: average={exact_average}, "
            f"integer part of average is 0"
        )
    if minimum == maximum:
        raise InvalidAverage(
            f"Minimum value {minimum} cannot be equal to maximum value {maximum}"
        )
    if minimum > maximum:
        raise InvalidAverage(
            f"Minimum value {minimum} cannot be greater than maximum value {maximum}"
        )
    if minimum > exact_average:
        raise InvalidAverage(
            f"Minimum value cannot be larger than average: "
            f"minimum={minimum}, average={exact_average}"
        )
    if exact_average > maximum:
        raise InvalidAverage(
            f"Average cannot be larger than maximum value: "
            f"maximum={maximum}, average={exact_average}"
        )

    return exact_average


def validate_bounds(average: ExactInput, minimum: int, maximum: int) -> Bounds:
    """
    Валидация входов и построение Bounds.

    Raises:
        InvalidAverage: при нарушении предусловий
    """
    validate_inputs(average, minimum, maximum)
    return Bounds(minimum=minimum, maximum=maximum)


# =============================================================================
# REDUCTION
# =============================================================================


def scaling_multiplier(average: Decimal, max_steps: int = MAX_SCALING_STEPS_DEFAULT) -> int:
    """
    Множитель 10^k, делающий average целым (k >= 1).

    Args:
        average: Конечное Decimal значение
        max_steps: Максимум шагов масштабирования

    Returns:
        10^k для минимального k >= 1 с нулевым остатком

    Raises:
        InvalidAverage: если остаток не исчез за max_steps шагов

    Examples:
        >>> scaling_multiplier(Decimal("4.3"))
        10
        >>> scaling_multiplier(Decimal("3.142"))
        1000
        >>> scaling_multiplier(Decimal("5"))
        10
    """
    remainder = Fraction(fractional_part(average))
    multiplier = 1

    for _ in range(max_steps):
        multiplier *= SCALING_BASE
        scaled = remainder * SCALING_BASE
        remainder = scaled - int(scaled)
        if remainder == 0:
            return multiplier

    raise InvalidAverage(
        f"Average {average} has no finite decimal expansion "
        f"within {max_steps} scaling steps"
    )


def reduce(
    average: ExactInput,
    minimal: bool = False,
    max_steps: int = MAX_SCALING_STEPS_DEFAULT,
) -> ReducedTarget:
    """
    Сведение среднего к (count, target_sum).

    Args:
        average: Целевое среднее (целая часть != 0)
        minimal: Если True, count = несократимый знаменатель average
        max_steps: Максимум шагов масштабирования

    Returns:
        ReducedTarget с target_sum / count == average точно

    Raises:
        InvalidAverage: если целая часть average == 0 или разложение бесконечно

    Examples:
        >>> reduce("4.3").count, reduce("4.3").target_sum
        (10, 43)
        >>> reduce("4.5", minimal=True).count
        2
    """
    exact_average = to_exact(average)

    if integer_part(exact_average) == 0:
        raise InvalidAverage(
            f"Cannot divide by zero: average={exact_average}, "
            f"integer part of average is 0"
        )

    if minimal:
        count = Fraction(exact_average).denominator
    else:
        count = scaling_multiplier(exact_average, max_steps)

    target_sum = Fraction(exact_average) * count
    if target_sum.denominator != 1:
        raise InvalidAverage(
            f"Count {count} does not make average {exact_average} integral"
        )

    return ReducedTarget(
        average=exact_average,
        count=count,
        target_sum=int(target_sum),
    )


def reduce_for_bounds(
    average: ExactInput,
    minimum: int,
    maximum: int,
    minimal: bool = False,
    max_steps: int = MAX_SCALING_STEPS_DEFAULT,
) -> ReducedTarget:
    """
    Валидация предусловий и reduction за один вызов.

    Raises:
        InvalidAverage: при нарушении предусловий
    """
    exact_average = validate_inputs(average, minimum, maximum)
    return reduce(exact_average, minimal=minimal, max_steps=max_steps)

