"""
Тесты для доменных моделей: Bounds, ReducedTarget, SequenceSummary,
DistributionResult, AlgorithmFailure, DistributionReport

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Инварианты (minimum < maximum, target_sum == average * count)
3. Immutability (frozen=True)
4. Сериализацию в JSON (Decimal → строка)
"""

import json
from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.core.domain import (
    AlgorithmFailure,
    AlgorithmName,
    Bounds,
    DistributionError,
    DistributionReport,
    DistributionResult,
    InvalidAverage,
    NoConvergence,
    ReducedTarget,
    SequenceSummary,
    Unsatisfiable,
)
from src.core.math.statistics import summarize


# =============================================================================
# BOUNDS TESTS
# =============================================================================


class TestBounds:
    """Тесты для модели Bounds"""

    def test_valid_bounds(self):
        bounds = Bounds(minimum=1, maximum=5)
        assert bounds.minimum == 1
        assert bounds.maximum == 5

    def test_contains(self):
        bounds = Bounds(minimum=1, maximum=5)
        assert bounds.contains(1)
        assert bounds.contains(5)
        assert not bounds.contains(0)
        assert not bounds.contains(6)

    def test_equal_bounds_rejected(self):
        with pytest.raises(ValidationError, match="greater than minimum"):
            Bounds(minimum=3, maximum=3)

    def test_inverted_bounds_rejected(self):
        with pytest.raises(ValidationError):
            Bounds(minimum=5, maximum=1)

    def test_immutability(self):
        bounds = Bounds(minimum=1, maximum=5)
        with pytest.raises(ValidationError):
            bounds.minimum = 2


# =============================================================================
# REDUCED TARGET TESTS
# =============================================================================


class TestReducedTarget:
    """Тесты для модели ReducedTarget"""

    def test_valid_target(self):
        target = ReducedTarget(average=Decimal("4.3"), count=10, target_sum=43)
        assert target.target_sum == 43

    def test_inexact_ratio_rejected(self):
        with pytest.raises(ValidationError, match="target_sum"):
            ReducedTarget(average=Decimal("4.3"), count=10, target_sum=44)

    def test_non_positive_count_rejected(self):
        with pytest.raises(ValidationError):
            ReducedTarget(average=Decimal("4.3"), count=0, target_sum=0)

    def test_json_keeps_exact_average(self):
        target = ReducedTarget(average=Decimal("3.142"), count=1000, target_sum=3142)
        data = json.loads(target.model_dump_json())
        assert data == {"average": "3.142", "count": 1000, "target_sum": 3142}


# =============================================================================
# RESULT / REPORT TESTS
# =============================================================================


class TestDistributionResult:
    """Тесты для DistributionResult"""

    @pytest.fixture
    def values(self) -> tuple[int, ...]:
        return (5, 5, 5, 4, 4, 4, 4, 4, 4, 4)

    def test_valid_result(self, values):
        result = DistributionResult(
            algorithm=AlgorithmName.SUBTRACTION_DISTRIBUTION,
            values=values,
            summary=summarize(values),
            elapsed_ns=1200,
        )
        assert result.values == values
        assert result.summary.mean == Decimal("4.3")

    def test_empty_values_rejected(self):
        with pytest.raises(ValidationError):
            DistributionResult(
                algorithm=AlgorithmName.BACKTRACKING,
                values=(),
                summary=summarize([]),
            )

    def test_mismatched_summary_rejected(self, values):
        with pytest.raises(ValidationError, match="summary.count"):
            DistributionResult(
                algorithm=AlgorithmName.MAXIMAL_DISTRIBUTION,
                values=values,
                summary=summarize(values[:5]),
            )

    def test_negative_elapsed_rejected(self, values):
        with pytest.raises(ValidationError):
            DistributionResult(
                algorithm=AlgorithmName.MAXIMAL_DISTRIBUTION,
                values=values,
                summary=summarize(values),
                elapsed_ns=-1,
            )

    def test_algorithm_name_from_string(self, values):
        result = DistributionResult(
            algorithm="moving_average",
            values=values,
            summary=summarize(values),
        )
        assert result.algorithm is AlgorithmName.MOVING_AVERAGE


class TestDistributionReport:
    """Тесты для DistributionReport"""

    @pytest.fixture
    def report(self) -> DistributionReport:
        values = (5, 5, 5, 4, 4, 4, 4, 4, 4, 4)
        return DistributionReport(
            average=Decimal("4.3"),
            bounds=Bounds(minimum=1, maximum=5),
            target=ReducedTarget(average=Decimal("4.3"), count=10, target_sum=43),
            results=(
                DistributionResult(
                    algorithm=AlgorithmName.SUBTRACTION_DISTRIBUTION,
                    values=values,
                    summary=summarize(values),
                ),
            ),
            failures=(
                AlgorithmFailure(
                    algorithm=AlgorithmName.BACKTRACKING,
                    error_type="NoConvergence",
                    message="budget exhausted",
                ),
            ),
        )

    def test_lookup(self, report):
        assert report.result_for(AlgorithmName.SUBTRACTION_DISTRIBUTION) is not None
        assert report.result_for(AlgorithmName.BACKTRACKING) is None
        assert report.failure_for(AlgorithmName.BACKTRACKING).error_type == "NoConvergence"
        assert report.failure_for(AlgorithmName.MAXIMAL_DISTRIBUTION) is None

    def test_json_dump(self, report):
        data = report.model_dump(mode="json")
        assert data["average"] == "4.3"
        assert data["bounds"] == {"minimum": 1, "maximum": 5}
        assert data["results"][0]["algorithm"] == "subtraction_distribution"
        assert data["results"][0]["values"] == [5, 5, 5, 4, 4, 4, 4, 4, 4, 4]
        assert data["failures"][0]["error_type"] == "NoConvergence"

    def test_summary_model_defaults(self):
        summary = SequenceSummary(
            total=Decimal(0), mean=Decimal(0), variance=Decimal(0), count=0
        )
        assert summary.minimum is None
        assert summary.maximum is None


# =============================================================================
# ERROR TAXONOMY TESTS
# =============================================================================


class TestErrorTaxonomy:
    """Тесты иерархии ошибок"""

    def test_hierarchy(self):
        assert issubclass(InvalidAverage, DistributionError)
        assert issubclass(Unsatisfiable, DistributionError)
        assert issubclass(NoConvergence, DistributionError)

    def test_error_attributes(self):
        unsat = Unsatisfiable("headroom exhausted", algorithm="maximal_distribution")
        assert unsat.algorithm == "maximal_distribution"
        assert str(unsat) == "headroom exhausted"

        no_conv = NoConvergence("budget", algorithm="backtracking", iterations=10)
        assert no_conv.algorithm == "backtracking"
        assert no_conv.iterations == 10
