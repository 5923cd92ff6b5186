"""Distribution — построение целочисленных последовательностей с точным средним.

- algorithms/: Maximal, Subtraction, Moving-Average, Random, Backtracking
- runner: запуск всех алгоритмов, замер времени, лог сводок
"""

from .runner import DistributionRunner, RunnerConfig, run_all

__all__ = [
    "DistributionRunner",
    "RunnerConfig",
    "run_all",
]
