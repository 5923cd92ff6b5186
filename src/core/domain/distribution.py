"""
Distribution — модели целевого среднего и результатов построения

Immutable Pydantic модели:
- Bounds: диапазон [minimum, maximum] целых значений
- ReducedTarget: (count, target_sum) с target_sum / count == average точно
- SequenceSummary: сводная статистика последовательности
- DistributionResult / AlgorithmFailure: исход одного алгоритма
- DistributionReport: исходы всех алгоритмов для одного набора входов

Все модели frozen=True. Decimal поля сериализуются в JSON как строки,
чтобы не терять точность.
"""

from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator


# =============================================================================
# ENUMS
# =============================================================================


class AlgorithmName(str, Enum):
    """Имена алгоритмов построения последовательности"""

    MAXIMAL_DISTRIBUTION = "maximal_distribution"
    SUBTRACTION_DISTRIBUTION = "subtraction_distribution"
    MOVING_AVERAGE = "moving_average"
    RANDOM_DISTRIBUTION = "random_distribution"
    BACKTRACKING = "backtracking"


# =============================================================================
# BOUNDS
# =============================================================================


class Bounds(BaseModel):
    """
    Диапазон допустимых значений [minimum, maximum] (включительно).

    Инвариант: minimum < maximum.
    """

    minimum: int = Field(..., description="Нижняя граница (включительно)")
    maximum: int = Field(..., description="Верхняя граница (включительно)")

    model_config = {"frozen": True}

    @field_validator("maximum")
    @classmethod
    def validate_order(cls, v: int, info: ValidationInfo) -> int:
        """Проверка minimum < maximum."""
        minimum = info.data.get("minimum")
        if minimum is not None and v <= minimum:
            raise ValueError(f"maximum {v} must be greater than minimum {minimum}")
        return v

    def contains(self, value: int) -> bool:
        """True если minimum <= value <= maximum."""
        return self.minimum <= value <= self.maximum


# =============================================================================
# REDUCED TARGET
# =============================================================================


class ReducedTarget(BaseModel):
    """
    Целевое среднее, сведённое к целому отношению target_sum / count.
    """

    average: Decimal = Field(..., description="Целевое среднее")
    count: int = Field(..., gt=0, description="Множитель (число элементов)")
    target_sum: int = Field(..., description="Целевая сумма = average * count")

    model_config = {"frozen": True}

    @field_validator("target_sum")
    @classmethod
    def validate_exact_ratio(cls, v: int, info: ValidationInfo) -> int:
        """
        Проверка target_sum == average * count в rational arithmetic.
        """
        average = info.data.get("average")
        count = info.data.get("count")
        if average is None or count is None:
            return v
        if Fraction(average) * count != v:
            raise ValueError(
                f"target_sum {v} != average {average} * count {count}"
            )
        return v


# =============================================================================
# SUMMARY
# =============================================================================


class SequenceSummary(BaseModel):
    """
    Сводная статистика последовательности.

    mean и variance округлены FLOOR до фиксированной шкалы; minimum и
    maximum равны None для пустой последовательности.
    """

    total: Decimal = Field(..., description="Сумма элементов")
    mean: Decimal = Field(..., description="Среднее (0 для пустой последовательности)")
    variance: Decimal = Field(..., ge=0, description="Дисперсия генеральной совокупности")
    minimum: Optional[Decimal] = Field(None, description="Минимальный элемент")
    maximum: Optional[Decimal] = Field(None, description="Максимальный элемент")
    count: int = Field(..., ge=0, description="Число элементов")

    model_config = {"frozen": True}


# =============================================================================
# RESULTS
# =============================================================================


class DistributionResult(BaseModel):
    """Успешный исход одного алгоритма."""

    algorithm: AlgorithmName
    values: tuple[int, ...] = Field(..., min_length=1)
    summary: SequenceSummary
    elapsed_ns: int = Field(0, ge=0, description="Время выполнения (наносекунды)")

    model_config = {"frozen": True}

    @field_validator("summary")
    @classmethod
    def validate_summary_count(cls, v: SequenceSummary, info: ValidationInfo) -> SequenceSummary:
        """Summary должен описывать ту же последовательность."""
        values = info.data.get("values")
        if values is not None and v.count != len(values):
            raise ValueError(
                f"summary.count {v.count} != len(values) {len(values)}"
            )
        return v


class AlgorithmFailure(BaseModel):
    """Неуспешный исход одного алгоритма (Unsatisfiable / NoConvergence)."""

    algorithm: AlgorithmName
    error_type: str = Field(..., min_length=1)
    message: str
    elapsed_ns: int = Field(0, ge=0)

    model_config = {"frozen": True}


class DistributionReport(BaseModel):
    """Исходы всех алгоритмов для одного набора (average, min, max)."""

    average: Decimal
    bounds: Bounds
    target: ReducedTarget
    results: tuple[DistributionResult, ...] = ()
    failures: tuple[AlgorithmFailure, ...] = ()

    model_config = {"frozen": True}

    def result_for(self, algorithm: AlgorithmName) -> Optional[DistributionResult]:
        """Результат алгоритма или None, если алгоритм не сошёлся."""
        for result in self.results:
            if result.algorithm == algorithm:
                return result
        return None

    def failure_for(self, algorithm: AlgorithmName) -> Optional[AlgorithmFailure]:
        """Ошибка алгоритма или None."""
        for failure in self.failures:
            if failure.algorithm == algorithm:
                return failure
        return None
