"""
Domain models and value objects.

Contains NumberSet and the report models returned by NumberSet.evaluate().
"""

from math_numbers.core.domain.number_set import NumberSet
from math_numbers.core.domain.report import NumberEvaluation, NumberSetReport

__all__ = [
    "NumberSet",
    "NumberEvaluation",
    "NumberSetReport",
]
