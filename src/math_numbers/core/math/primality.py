"""
Primality — Тест простоты делением

Перебор делителей i = 2..n-1, O(n). Эталонная, не производственная проверка.

ОСОБЕННОСТЬ (сохраняется намеренно):
    Для n = 0 и n = 1 перебор пуст, и тест возвращает True, хотя математически
    эти числа не простые. strict=True возвращает False для n < 2.
"""

import logging

from math_numbers.core.math.safeguards import (
    MAX_SCAN_RANGE,
    validate_non_negative_int,
    validate_scan_range,
)

logger = logging.getLogger(__name__)


def is_prime_trial_division(
    value: int,
    *,
    strict: bool = False,
    max_scan: int = MAX_SCAN_RANGE,
) -> bool:
    """
    Проверка простоты перебором делителей 2..value-1.

    Args:
        value: Неотрицательное целое число
        strict: True → 0 и 1 не считаются простыми (default: False)
        max_scan: Лимит длины перебора

    Returns:
        True если делитель в диапазоне 2..value-1 не найден

    Raises:
        DomainError: Если value < 0
        ScanRangeOverflowError: Если перебор длиннее max_scan

    Examples:
        >>> is_prime_trial_division(17)
        True
        >>> is_prime_trial_division(18)
        False
        >>> is_prime_trial_division(1)
        True
        >>> is_prime_trial_division(1, strict=True)
        False
    """
    validate_non_negative_int(value, "is_prime value")

    if strict and value < 2:
        return False

    validate_scan_range(max(value - 2, 0), "is_prime", max_scan)
    logger.debug("is_prime: trial division of %d", value)

    for i in range(2, value):
        if value % i == 0:
            return False

    return True
