"""
Contract Validation Module

Модуль для валидации JSON контрактов (эталонные векторы детерминизма).
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    VectorSuiteValidator,
    validate_vector_suite,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "VectorSuiteValidator",
    # Functions
    "validate_vector_suite",
]
