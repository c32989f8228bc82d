"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованных дат.
"""

from .validators import (
    ContractValidator,
    EpochDateValidator,
    SchemaLoader,
    validate_epoch_date,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "EpochDateValidator",
    # Functions
    "validate_epoch_date",
]
