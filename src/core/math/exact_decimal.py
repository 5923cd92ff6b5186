"""
Exact Decimal — точная арифметика для целевых средних

Модуль задаёт числовой тип ExactValue (decimal.Decimal на границе API) и
примитивы над ним:
- Конверсия входных значений в Decimal без потери точности
- Целая / дробная часть (truncation toward zero)
- Деление с явной шкалой и округлением FLOOR
- Единый предикат точного среднего (rational arithmetic)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Float никогда не участвует в вычислениях (только как вход через repr)
2. Проверки точности выполняются в Fraction и не зависят от decimal context
3. divide_floor округляет к -inf ровно до scale знаков после запятой
4. Все операции детерминированы и воспроизводимы
"""

import math
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import Final, Union

from src.core.domain.errors import InvalidAverage

# =============================================================================
# ПАРАМЕТРЫ ТОЧНОСТИ
# =============================================================================

# Шкала для отчётного mean/variance (число знаков после запятой)
DEFAULT_MEAN_SCALE: Final[int] = 10

# Шкала для порога quarter-max в Random Adjustment
QUARTER_SCALE: Final[int] = 2

ExactInput = Union[Decimal, int, str, float]


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def to_exact(value: ExactInput) -> Decimal:
    """
    Конверсия входного значения в Decimal.

    Float конвертируется через repr (кратчайшее десятичное представление),
    а не через двоичное разложение: to_exact(4.3) == Decimal("4.3").

    Args:
        value: Decimal, int, str или float

    Returns:
        Конечное Decimal значение

    Raises:
        InvalidAverage: если значение не парсится, NaN или Inf

    Examples:
        >>> to_exact("4.3")
        Decimal('4.3')
        >>> to_exact(4.3)
        Decimal('4.3')
        >>> to_exact(5)
        Decimal('5')
    """
    if isinstance(value, bool):
        raise InvalidAverage(f"Boolean is not a valid exact value: {value!r}")

    try:
        if isinstance(value, Decimal):
            exact = value
        elif isinstance(value, float):
            exact = Decimal(repr(value))
        elif isinstance(value, (int, str)):
            exact = Decimal(value.strip() if isinstance(value, str) else value)
        else:
            raise InvalidAverage(f"Unsupported exact value type: {type(value).__name__}")
    except InvalidOperation as e:
        raise InvalidAverage(f"Cannot parse exact value: {value!r}") from e

    if not exact.is_finite():
        raise InvalidAverage(f"Exact value must be finite, got {value!r}")

    return exact


def fraction_to_decimal(value: Fraction) -> Decimal:
    """
    Точная конверсия Fraction → Decimal.

    Допустимы только дроби с конечным десятичным разложением
    (знаменатель вида 2^a * 5^b).

    Raises:
        ValueError: если разложение бесконечное
    """
    rest = value.denominator
    twos = 0
    fives = 0
    while rest % 2 == 0:
        rest //= 2
        twos += 1
    while rest % 5 == 0:
        rest //= 5
        fives += 1
    if rest != 1:
        raise ValueError(f"Fraction {value} has no finite decimal expansion")

    scale = max(twos, fives)
    digits = value.numerator * (10 ** scale) // value.denominator
    return Decimal(f"{digits}E-{scale}")


# =============================================================================
# ЦЕЛАЯ / ДРОБНАЯ ЧАСТЬ
# =============================================================================


def integer_part(value: Decimal) -> int:
    """
    Целая часть (truncation toward zero): 4.3 → 4, -4.3 → -4.
    """
    return math.trunc(Fraction(value))


def fractional_part(value: Decimal) -> Decimal:
    """
    Дробная часть со знаком исходного значения: 4.3 → 0.3, -4.3 → -0.3.
    """
    return fraction_to_decimal(Fraction(value) - integer_part(value))


def fractional_digits(value: Decimal) -> int:
    """
    Количество значащих знаков после запятой.

    Examples:
        >>> fractional_digits(Decimal("4.30"))
        1
        >>> fractional_digits(Decimal("3.142"))
        3
        >>> fractional_digits(Decimal("5"))
        0
    """
    normalized = value.normalize()
    exponent = normalized.as_tuple().exponent
    return max(0, -exponent)


# =============================================================================
# ДЕЛЕНИЕ С ОКРУГЛЕНИЕМ
# =============================================================================


def divide_floor(
    numerator: Union[Decimal, int],
    denominator: Union[Decimal, int],
    scale: int = DEFAULT_MEAN_SCALE,
) -> Decimal:
    """
    Деление с округлением FLOOR до scale знаков после запятой.

    Деление выполняется в Fraction, поэтому результат не зависит от
    precision текущего decimal context.

    Args:
        numerator: Числитель
        denominator: Знаменатель (не ноль)
        scale: Число знаков после запятой (>= 0)

    Returns:
        Decimal ровно со scale знаками после запятой

    Raises:
        ZeroDivisionError: если denominator == 0
        ValueError: если scale < 0

    Examples:
        >>> divide_floor(43, 10, 2)
        Decimal('4.30')
        >>> divide_floor(10, 3, 3)
        Decimal('3.333')
        >>> divide_floor(-10, 3, 3)
        Decimal('-3.334')
    """
    if scale < 0:
        raise ValueError(f"scale must be non-negative, got {scale}")

    divisor = Fraction(denominator)
    if divisor == 0:
        raise ZeroDivisionError(f"Cannot divide {numerator} by zero")

    quotient = Fraction(numerator) / divisor
    scaled = math.floor(quotient * (10 ** scale))
    return Decimal(f"{scaled}E-{scale}")


# =============================================================================
# ТОЧНОЕ СРЕДНЕЕ
# =============================================================================


def exact_product(value: Decimal, count: int) -> Fraction:
    """Точное произведение value * count в rational arithmetic."""
    return Fraction(value) * count


def is_exact_mean(total: Union[Decimal, int], count: int, average: Decimal) -> bool:
    """
    Проверка точного среднего: total / count == average.

    Сравнение выполняется как total == average * count без деления,
    поэтому пустая последовательность (count == 0) никогда не совпадает.

    Examples:
        >>> is_exact_mean(43, 10, Decimal("4.3"))
        True
        >>> is_exact_mean(44, 10, Decimal("4.3"))
        False
    """
    if count <= 0:
        return False
    return Fraction(total) == exact_product(average, count)
