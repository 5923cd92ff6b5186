"""
Statistics — сводная статистика над точными последовательностями

Чистые функции над упорядоченной коллекцией ExactValue (int или Decimal):
- sum_values: точная сумма
- mean: среднее с округлением FLOOR (0 для пустой коллекции)
- variance: дисперсия генеральной совокупности (mean of squared deviations)
- min_value / max_value: экстремумы (None для пустой коллекции)
- summarize: всё вместе в SequenceSummary

Промежуточные вычисления выполняются в Fraction; округление FLOOR
применяется один раз, к итоговому значению.
"""

from decimal import Decimal
from fractions import Fraction
from typing import Iterable, Optional, Union

from src.core.domain.distribution import SequenceSummary
from src.core.math.exact_decimal import (
    DEFAULT_MEAN_SCALE,
    divide_floor,
    fraction_to_decimal,
    to_exact,
)

Number = Union[int, Decimal]


def _exact_values(values: Iterable[Number]) -> list[Decimal]:
    return [to_exact(v) for v in values]


def sum_values(values: Iterable[Number]) -> Decimal:
    """
    Точная сумма элементов.

    Examples:
        >>> sum_values([5, 5, 5, 4])
        Decimal('19')
        >>> sum_values([])
        Decimal('0')
    """
    total = sum((Fraction(v) for v in _exact_values(values)), Fraction(0))
    return fraction_to_decimal(total)


def mean(values: Iterable[Number], scale: int = DEFAULT_MEAN_SCALE) -> Decimal:
    """
    Среднее с округлением FLOOR до scale знаков.

    Returns:
        0 для пустой коллекции, иначе floor(sum / count, scale)

    Examples:
        >>> mean([5, 4])
        Decimal('4.5000000000')
        >>> mean([])
        Decimal('0')
    """
    exact = _exact_values(values)
    if not exact:
        return Decimal(0)
    return divide_floor(sum_values(exact), len(exact), scale)


def variance(values: Iterable[Number], scale: int = DEFAULT_MEAN_SCALE) -> Decimal:
    """
    Дисперсия генеральной совокупности с округлением FLOOR.

    variance = sum((x - mean)^2) / count, mean вычисляется точно.

    Returns:
        0 для пустой коллекции

    Examples:
        >>> variance([5, 5, 5, 4, 4, 4, 4, 4, 4, 4], scale=2)
        Decimal('0.21')
    """
    exact = [Fraction(v) for v in _exact_values(values)]
    if not exact:
        return Decimal(0)

    exact_mean = sum(exact, Fraction(0)) / len(exact)
    squared = sum(((v - exact_mean) ** 2 for v in exact), Fraction(0))
    return divide_floor(squared, len(exact), scale)


def min_value(values: Iterable[Number]) -> Optional[Decimal]:
    """Минимальный элемент или None для пустой коллекции."""
    exact = _exact_values(values)
    return min(exact) if exact else None


def max_value(values: Iterable[Number]) -> Optional[Decimal]:
    """Максимальный элемент или None для пустой коллекции."""
    exact = _exact_values(values)
    return max(exact) if exact else None


def summarize(values: Iterable[Number], scale: int = DEFAULT_MEAN_SCALE) -> SequenceSummary:
    """
    Сводная статистика последовательности.

    Args:
        values: Последовательность int/Decimal
        scale: Шкала для mean и variance

    Returns:
        SequenceSummary(total, mean, variance, minimum, maximum, count)
    """
    exact = _exact_values(values)
    return SequenceSummary(
        total=sum_values(exact),
        mean=mean(exact, scale),
        variance=variance(exact, scale),
        minimum=min_value(exact),
        maximum=max_value(exact),
        count=len(exact),
    )
