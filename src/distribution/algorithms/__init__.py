"""Алгоритмы построения последовательностей с заданным средним.

Четыре стратегии на фиксированном count и поиск с возвратом без count.
"""

from .backtracking_search import BacktrackingConfig, BacktrackingSearch
from .maximal_distribution import MaximalDistribution, MaximalDistributionConfig
from .moving_average_growth import MovingAverageConfig, MovingAverageGrowth
from .random_adjustment import RandomAdjustment, RandomAdjustmentConfig
from .subtraction_distribution import SubtractionDistribution, SubtractionDistributionConfig

__all__ = [
    "MaximalDistribution",
    "MaximalDistributionConfig",
    "SubtractionDistribution",
    "SubtractionDistributionConfig",
    "MovingAverageGrowth",
    "MovingAverageConfig",
    "RandomAdjustment",
    "RandomAdjustmentConfig",
    "BacktrackingSearch",
    "BacktrackingConfig",
]
