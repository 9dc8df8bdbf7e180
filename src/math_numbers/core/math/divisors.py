"""
Divisors — Перечисление делителей и проверка делимости

Модуль содержит наивные O(n) переборы делителей:
- enumerate_divisors: все делители 1..|n| (используется в brute-force НОД)
- divisors_in_reference_order: делители 2..n/2, затем 1 и n (порядок get_divisors)
- is_divisor: делит ли divisor число candidate

ПОРЯДОК divisors_in_reference_order:
    [делители из 2..floor(n/2) по возрастанию] + [1, n]

    Для n == 1 диапазон пуст и результат [1, 1] (дубликат сохраняется).
"""

import logging

from math_numbers.core.math.safeguards import (
    MAX_SCAN_RANGE,
    DomainError,
    validate_positive_int,
    validate_scan_range,
)

logger = logging.getLogger(__name__)


def enumerate_divisors(value: int, max_scan: int = MAX_SCAN_RANGE) -> list[int]:
    """
    Все натуральные делители |value| по возрастанию (перебор 1..|value|).

    Args:
        value: Целое число (знак игнорируется)
        max_scan: Лимит длины перебора

    Returns:
        Список делителей по возрастанию; для value == 0 пустой список
        (перебор 1..0 пуст, вызывающий код обрабатывает ноль отдельно)

    Raises:
        ScanRangeOverflowError: Если |value| > max_scan

    Examples:
        >>> enumerate_divisors(12)
        [1, 2, 3, 4, 6, 12]
        >>> enumerate_divisors(-9)
        [1, 3, 9]
    """
    number = abs(value)
    validate_scan_range(number, "enumerate_divisors", max_scan)
    logger.debug("enumerate_divisors: scanning 1..%d", number)

    return [i for i in range(1, number + 1) if number % i == 0]


def divisors_in_reference_order(value: int, max_scan: int = MAX_SCAN_RANGE) -> list[int]:
    """
    Делители value в порядке get_divisors: сначала 2..floor(n/2), затем 1 и n.

    Args:
        value: Положительное целое число
        max_scan: Лимит длины перебора

    Returns:
        Список делителей (не отсортирован целиком, см. модульный docstring)

    Raises:
        DomainError: Если value <= 0
        ScanRangeOverflowError: Если перебор 2..value/2 длиннее max_scan

    Examples:
        >>> divisors_in_reference_order(28)
        [2, 4, 7, 14, 1, 28]
        >>> divisors_in_reference_order(1)
        [1, 1]
    """
    validate_positive_int(value, "get_divisors value")

    upper = value // 2
    validate_scan_range(max(upper - 1, 0), "get_divisors", max_scan)
    logger.debug("get_divisors: scanning 2..%d", upper)

    result = [i for i in range(2, upper + 1) if value % i == 0]
    result.extend((1, value))
    return result


def is_divisor(divisor: int, candidate: int) -> bool:
    """
    Проверка, делит ли divisor число candidate без остатка.

    Направление важно: is_divisor(3, 12) → True, is_divisor(12, 3) → False.

    Raises:
        DomainError: Если divisor == 0
    """
    if divisor == 0:
        raise DomainError("divisor must be non-zero")

    return candidate % divisor == 0
