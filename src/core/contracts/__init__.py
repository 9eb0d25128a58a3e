"""
Contract Validation Module

Модуль для валидации JSON контрактов filter primitives.
"""

from .validators import (
    ContractValidator,
    FilterPrimitiveValidator,
    SchemaLoader,
    validate_filter_primitive,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FilterPrimitiveValidator",
    # Functions
    "validate_filter_primitive",
]
