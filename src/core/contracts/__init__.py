"""
Contract Validation Module

Валидация JSON контрактов запроса и отчёта распределения.
"""

from .validators import (
    ContractName,
    ContractValidator,
    SchemaLoader,
    get_validator,
    validate_distribution_report,
    validate_distribution_request,
)

__all__ = [
    "ContractName",
    "SchemaLoader",
    "ContractValidator",
    "get_validator",
    "validate_distribution_request",
    "validate_distribution_report",
]
