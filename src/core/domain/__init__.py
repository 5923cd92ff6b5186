"""
Domain models and value objects.

Contains target/result models for average distribution and the error taxonomy.
"""

from src.core.domain.distribution import (
    AlgorithmFailure,
    AlgorithmName,
    Bounds,
    DistributionReport,
    DistributionResult,
    ReducedTarget,
    SequenceSummary,
)
from src.core.domain.errors import (
    DistributionError,
    InvalidAverage,
    NoConvergence,
    Unsatisfiable,
)

__all__ = [
    # Models
    "AlgorithmName",
    "Bounds",
    "ReducedTarget",
    "SequenceSummary",
    "DistributionResult",
    "AlgorithmFailure",
    "DistributionReport",
    # Errors
    "DistributionError",
    "InvalidAverage",
    "Unsatisfiable",
    "NoConvergence",
]
