"""
GCD — Наибольший общий делитель

Два алгоритма и диспетчер по количеству чисел:
- euclidean_gcd: алгоритм Евклида для двух чисел, O(log min(a, b))
- bluto_gcd: brute-force для трёх и более чисел, O(Σ|n_i|) по времени и памяти
- gcd_of: выбор алгоритма (2 числа → Евклид, больше → brute-force)

Оба алгоритма работают с абсолютными значениями и не зависят от порядка,
поэтому сортировка входа не выполняется.

ФОРМУЛЫ:
    euclid: (b, c) → (c, b mod c) пока c != 0; результат b
    bluto:  common = {d : d ∈ divisors(|n_i|) для всех ненулевых n_i}
            gcd = max(common)

НУЛИ:
    Ноль делится на любое целое, поэтому gcd(a, 0) = |a| и в brute-force нули
    не ограничивают множество общих делителей. Набор из одних нулей не имеет
    наибольшего общего делителя → DomainError.
"""

import logging
from collections import Counter
from enum import Enum
from typing import Sequence

from math_numbers.core.math.divisors import enumerate_divisors
from math_numbers.core.math.safeguards import (
    MAX_SCAN_RANGE,
    DomainError,
    require_count,
)

logger = logging.getLogger(__name__)


class GcdAlgorithm(str, Enum):
    """Алгоритм вычисления НОД."""

    EUCLIDEAN = "euclidean"  # ровно 2 числа
    BRUTE_FORCE = "brute_force"  # 3 и более чисел


# =============================================================================
# EUCLIDEAN ALGORITHM
# =============================================================================


def euclidean_gcd(a: int, b: int) -> int:
    """
    НОД двух чисел алгоритмом Евклида (итеративно).

    Args:
        a: Первое число (знак игнорируется)
        b: Второе число (знак игнорируется)

    Returns:
        Неотрицательный НОД |a| и |b|

    Raises:
        DomainError: Если a == b == 0

    Examples:
        >>> euclidean_gcd(8, 12)
        4
        >>> euclidean_gcd(-8, 12)
        4
        >>> euclidean_gcd(7, 0)
        7
    """
    if a == 0 and b == 0:
        raise DomainError("gcd is undefined when every number is zero")

    b_abs, c_abs = abs(a), abs(b)
    while c_abs:
        b_abs, c_abs = c_abs, b_abs % c_abs

    return b_abs


# =============================================================================
# BRUTE-FORCE MULTI-GCD
# =============================================================================


def bluto_gcd(numbers: Sequence[int], max_scan: int = MAX_SCAN_RANGE) -> int:
    """
    НОД произвольного количества чисел полным перебором делителей.

    Для каждого ненулевого числа перечисляются все делители 1..|n|, затем
    считается, в скольких списках встречается каждое значение. Общий делитель
    встречается во всех списках; результат равен максимальному из них.

    Медленный эталонный алгоритм: для двух чисел используйте euclidean_gcd.

    Args:
        numbers: Числа (знак игнорируется, дубликаты допустимы)
        max_scan: Лимит длины перебора для каждого числа

    Returns:
        Неотрицательный НОД

    Raises:
        DomainError: Если все числа нулевые или общий делитель не найден
        ScanRangeOverflowError: Если какое-либо |n| > max_scan

    Examples:
        >>> bluto_gcd([12, 18, 24])
        6
        >>> bluto_gcd([0, 4, 6])
        2
    """
    non_zero = [abs(n) for n in numbers if n != 0]
    if not non_zero:
        raise DomainError("gcd is undefined when every number is zero")

    counts: Counter[int] = Counter()
    for number in non_zero:
        counts.update(enumerate_divisors(number, max_scan=max_scan))

    common = [divisor for divisor, seen in counts.items() if seen == len(non_zero)]
    if not common:
        # 1 делит любое ненулевое число, сюда попасть нельзя
        raise DomainError(f"no common divisor found for {list(numbers)}")

    return max(common)


# =============================================================================
# DISPATCH
# =============================================================================


def select_gcd_algorithm(count: int) -> GcdAlgorithm:
    """
    Выбор алгоритма НОД по количеству чисел.

    Raises:
        ArityError: Если count < 2
    """
    require_count("gcd", count, at_least=2)

    if count == 2:
        return GcdAlgorithm.EUCLIDEAN
    return GcdAlgorithm.BRUTE_FORCE


def gcd_of(numbers: Sequence[int], max_scan: int = MAX_SCAN_RANGE) -> int:
    """
    НОД набора чисел с выбором алгоритма по количеству.

    - 2 числа → euclidean_gcd
    - 3 и более → bluto_gcd

    Raises:
        ArityError: Если чисел меньше двух
        DomainError: Если все числа нулевые
        ScanRangeOverflowError: Если brute-force перебор превышает max_scan
    """
    algorithm = select_gcd_algorithm(len(numbers))

    if algorithm is GcdAlgorithm.EUCLIDEAN:
        logger.debug("gcd: euclidean algorithm for %s", list(numbers))
        return euclidean_gcd(numbers[0], numbers[1])

    logger.debug("gcd: brute-force algorithm for %d numbers", len(numbers))
    return bluto_gcd(numbers, max_scan=max_scan)
