"""
Core math modules

Точная арифметика, сведение среднего к целому отношению и статистика.
"""

# Exact Decimal
from src.core.math.exact_decimal import (
    DEFAULT_MEAN_SCALE,
    QUARTER_SCALE,
    divide_floor,
    fraction_to_decimal,
    fractional_digits,
    fractional_part,
    integer_part,
    is_exact_mean,
    to_exact,
)

# Rational Reducer
from src.core.math.rational_reducer import (
    MAX_SCALING_STEPS_DEFAULT,
    SCALING_BASE,
    reduce,
    reduce_for_bounds,
    scaling_multiplier,
    validate_bounds,
    validate_inputs,
)

# Statistics
from src.core.math.statistics import (
    max_value,
    mean,
    min_value,
    sum_values,
    summarize,
    variance,
)

__all__ = [
    # Exact Decimal — Constants
    "DEFAULT_MEAN_SCALE",
    "QUARTER_SCALE",
    # Exact Decimal — Functions
    "divide_floor",
    "fraction_to_decimal",
    "fractional_digits",
    "fractional_part",
    "integer_part",
    "is_exact_mean",
    "to_exact",
    # Rational Reducer — Constants
    "MAX_SCALING_STEPS_DEFAULT",
    "SCALING_BASE",
    # Rational Reducer — Functions
    "reduce",
    "reduce_for_bounds",
    "scaling_multiplier",
    "validate_bounds",
    "validate_inputs",
    # Statistics
    "max_value",
    "mean",
    "min_value",
    "sum_values",
    "summarize",
    "variance",
]
