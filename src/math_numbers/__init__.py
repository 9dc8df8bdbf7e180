"""
math_numbers — элементарная теория чисел над набором целых чисел.

НОД (алгоритм Евклида и brute-force), простота, делители, делимость и
взаимная простота.
"""

from math_numbers.core.domain import NumberEvaluation, NumberSet, NumberSetReport
from math_numbers.core.math import (
    MAX_SCAN_RANGE,
    ArityError,
    DomainError,
    NumberTheoryError,
    ScanLimits,
    ScanRangeOverflowError,
)

__version__ = "0.1.0"

__all__ = [
    "NumberSet",
    "NumberEvaluation",
    "NumberSetReport",
    "MAX_SCAN_RANGE",
    "ScanLimits",
    "NumberTheoryError",
    "ArityError",
    "DomainError",
    "ScanRangeOverflowError",
]
