"""
Contract Validation Module

Модуль для валидации JSON контрактов пакета math_numbers.
"""

from .validators import (
    ContractValidator,
    NumberSetReportValidator,
    NumberSetValidator,
    SchemaLoader,
    validate_number_set,
    validate_number_set_report,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "NumberSetValidator",
    "NumberSetReportValidator",
    # Functions
    "validate_number_set",
    "validate_number_set_report",
]
