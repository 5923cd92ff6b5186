"""Distribution Runner — запуск всех алгоритмов для одного набора входов

Порядок:
1. Валидация (average, min, max) → InvalidAverage прерывает весь запуск
2. Reduction → ReducedTarget(count, target_sum)
3. Maximal / Subtraction / Moving-Average / Random на count,
   затем Backtracking Search (если не отключён)
4. Успех → DistributionResult, Unsatisfiable / NoConvergence → AlgorithmFailure;
   ошибка одного алгоритма не прерывает остальные
5. Лог: входы, строка на алгоритм, разделитель

Алгоритмы не разделяют состояние; время измеряется вокруг каждого вызова.
"""

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from src.core.domain.distribution import (
    AlgorithmFailure,
    AlgorithmName,
    DistributionReport,
    DistributionResult,
)
from src.core.domain.errors import NoConvergence, Unsatisfiable
from src.core.math.exact_decimal import ExactInput
from src.core.math.rational_reducer import reduce, validate_bounds
from src.core.math.statistics import summarize
from src.distribution.algorithms.backtracking_search import (
    BacktrackingConfig,
    BacktrackingSearch,
)
from src.distribution.algorithms.maximal_distribution import (
    MaximalDistribution,
    MaximalDistributionConfig,
)
from src.distribution.algorithms.moving_average_growth import (
    MovingAverageConfig,
    MovingAverageGrowth,
)
from src.distribution.algorithms.random_adjustment import (
    RandomAdjustment,
    RandomAdjustmentConfig,
)
from src.distribution.algorithms.subtraction_distribution import (
    SubtractionDistribution,
    SubtractionDistributionConfig,
)

logger = logging.getLogger(__name__)

SEPARATOR = "------------------------------"


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class RunnerConfig:
    """Конфигурация запуска.

    minimal_count: использовать несократимый знаменатель вместо 10^k
    include_backtracking: запускать Backtracking Search после остальных
    seed: seed для Random Adjustment (None → системный источник)
    """

    maximal: MaximalDistributionConfig = field(default_factory=MaximalDistributionConfig)
    subtraction: SubtractionDistributionConfig = field(
        default_factory=SubtractionDistributionConfig
    )
    moving_average: MovingAverageConfig = field(default_factory=MovingAverageConfig)
    random_adjustment: RandomAdjustmentConfig = field(default_factory=RandomAdjustmentConfig)
    backtracking: BacktrackingConfig = field(default_factory=BacktrackingConfig)
    minimal_count: bool = False
    include_backtracking: bool = True
    seed: Optional[int] = None


# =============================================================================
# RUNNER
# =============================================================================


class DistributionRunner:
    """Запуск всех алгоритмов и сбор DistributionReport."""

    def __init__(
        self,
        config: RunnerConfig | None = None,
        rng: random.Random | None = None,
    ):
        """Инициализация runner.

        Args:
            config: конфигурация (опционально, используется default)
            rng: источник случайности; приоритетнее config.seed
        """
        self.config = config or RunnerConfig()
        if rng is None:
            rng = random.Random(self.config.seed)
        self.rng = rng

    def run(self, average: ExactInput, minimum: int, maximum: int) -> DistributionReport:
        """Запуск всех алгоритмов.

        Returns:
            DistributionReport с результатами и ошибками алгоритмов

        Raises:
            InvalidAverage: нарушены предусловия (ни один алгоритм не запускается)
        """
        bounds = validate_bounds(average, minimum, maximum)
        target = reduce(average, minimal=self.config.minimal_count)
        count = target.count

        logger.info(
            f"Average: {target.average}, Minimum Value: {minimum}, "
            f"Maximum Value: {maximum}, Count: {count}, Target Sum: {target.target_sum}"
        )

        runs: list[tuple[AlgorithmName, Callable[[], tuple[int, ...]]]] = [
            (
                AlgorithmName.MAXIMAL_DISTRIBUTION,
                lambda: MaximalDistribution(self.config.maximal).run(
                    target.average, minimum, maximum, count
                ),
            ),
            (
                AlgorithmName.SUBTRACTION_DISTRIBUTION,
                lambda: SubtractionDistribution(self.config.subtraction).run(
                    target.average, minimum, maximum, count
                ),
            ),
            (
                AlgorithmName.MOVING_AVERAGE,
                lambda: MovingAverageGrowth(self.config.moving_average).run(
                    target.average, minimum, maximum, count
                ),
            ),
            (
                AlgorithmName.RANDOM_DISTRIBUTION,
                lambda: RandomAdjustment(self.config.random_adjustment, rng=self.rng).run(
                    target.average, minimum, maximum, count
                ),
            ),
        ]
        if self.config.include_backtracking:
            runs.append(
                (
                    AlgorithmName.BACKTRACKING,
                    lambda: BacktrackingSearch(self.config.backtracking).run(
                        target.average, minimum, maximum
                    ),
                )
            )

        results: list[DistributionResult] = []
        failures: list[AlgorithmFailure] = []

        for algorithm, call in runs:
            outcome = self._timed(algorithm, call)
            if isinstance(outcome, DistributionResult):
                results.append(outcome)
                log_result(outcome)
            else:
                failures.append(outcome)
                logger.warning(
                    f"{outcome.elapsed_ns:,} {algorithm.value}: "
                    f"{outcome.error_type}: {outcome.message}"
                )

        logger.info(SEPARATOR)

        return DistributionReport(
            average=target.average,
            bounds=bounds,
            target=target,
            results=tuple(results),
            failures=tuple(failures),
        )

    def _timed(
        self,
        algorithm: AlgorithmName,
        call: Callable[[], tuple[int, ...]],
    ) -> DistributionResult | AlgorithmFailure:
        """Замер времени одного алгоритма.

        InvalidAverage не перехватывается: предусловия уже проверены.
        """
        start = time.perf_counter_ns()
        try:
            values = call()
        except (Unsatisfiable, NoConvergence) as e:
            return AlgorithmFailure(
                algorithm=algorithm,
                error_type=type(e).__name__,
                message=str(e),
                elapsed_ns=time.perf_counter_ns() - start,
            )
        elapsed = time.perf_counter_ns() - start

        return DistributionResult(
            algorithm=algorithm,
            values=values,
            summary=summarize(values),
            elapsed_ns=elapsed,
        )


def format_result(result: DistributionResult) -> str:
    """Строка отчёта по одному алгоритму."""
    summary = result.summary
    values = ", ".join(str(v) for v in result.values)
    return (
        f"{result.elapsed_ns:,} {result.algorithm.value}: "
        f"sum={summary.total}, mean={summary.mean}, variance={summary.variance}, "
        f"min={summary.minimum}, max={summary.maximum}, "
        f"numElements={summary.count}; [{values}]"
    )


def log_result(result: DistributionResult) -> None:
    logger.info(format_result(result))


def run_all(
    average: ExactInput,
    minimum: int,
    maximum: int,
    config: RunnerConfig | None = None,
) -> DistributionReport:
    """Shortcut: DistributionRunner(config).run(average, minimum, maximum)."""
    return DistributionRunner(config).run(average, minimum, maximum)
