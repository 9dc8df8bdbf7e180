"""
Core math modules для math_numbers

Целочисленные алгоритмы теории чисел: НОД, делители, простота.
"""

# Safeguards
from math_numbers.core.math.safeguards import (
    MAX_SCAN_RANGE,
    ArityError,
    DomainError,
    NumberTheoryError,
    ScanLimits,
    ScanRangeOverflowError,
    require_count,
    validate_non_negative_int,
    validate_positive_int,
    validate_scan_range,
)

# Divisors
from math_numbers.core.math.divisors import (
    divisors_in_reference_order,
    enumerate_divisors,
    is_divisor,
)

# GCD
from math_numbers.core.math.gcd import (
    GcdAlgorithm,
    bluto_gcd,
    euclidean_gcd,
    gcd_of,
    select_gcd_algorithm,
)

# Primality
from math_numbers.core.math.primality import is_prime_trial_division

__all__ = [
    # Safeguards — Constants
    "MAX_SCAN_RANGE",
    # Safeguards — Config
    "ScanLimits",
    # Safeguards — Exceptions
    "NumberTheoryError",
    "ArityError",
    "DomainError",
    "ScanRangeOverflowError",
    # Safeguards — Validation
    "require_count",
    "validate_non_negative_int",
    "validate_positive_int",
    "validate_scan_range",
    # Divisors
    "divisors_in_reference_order",
    "enumerate_divisors",
    "is_divisor",
    # GCD
    "GcdAlgorithm",
    "bluto_gcd",
    "euclidean_gcd",
    "gcd_of",
    "select_gcd_algorithm",
    # Primality
    "is_prime_trial_division",
]
