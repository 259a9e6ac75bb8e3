"""
Contract Validation Module

Модуль для валидации JSON контрактов numvec.
"""

from .validators import (
    ContractValidator,
    ExtremumResultValidator,
    SchemaLoader,
    VectorSnapshotValidator,
    validate_extremum_result,
    validate_vector_snapshot,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "VectorSnapshotValidator",
    "ExtremumResultValidator",
    # Functions
    "validate_vector_snapshot",
    "validate_extremum_result",
]
