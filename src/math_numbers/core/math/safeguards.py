"""
Safeguards — Исключения, лимиты и валидация целочисленных аргументов

Модуль задаёт общие правила для всех целочисленных алгоритмов пакета:
- Единая иерархия исключений (NumberTheoryError и наследники)
- Лимит размера переборов (trial division, перечисление делителей)
- Валидация domain: неотрицательность, положительность, ненулевой делитель

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ошибка arity никогда не подменяется ошибкой domain (arity проверяется первой)
2. Перебор длиннее max_scan никогда не запускается (ScanRangeOverflowError)
3. Все ошибки выбрасываются синхронно и не перехватываются внутри пакета
"""

from dataclasses import dataclass
from typing import Final

# =============================================================================
# ЛИМИТЫ ПЕРЕБОРА
# =============================================================================

# Максимальная длина одного перебора (делители 1..n, trial division 2..n-1)
# Переборы O(n) намеренно наивные, лимит защищает от зависания на больших n
MAX_SCAN_RANGE: Final[int] = 10_000_000


@dataclass(frozen=True)
class ScanLimits:
    """Конфигурация лимитов перебора для NumberSet.

    max_scan_range: максимальная длина одного перебора.
    """

    max_scan_range: int = MAX_SCAN_RANGE

    def __post_init__(self) -> None:
        if self.max_scan_range <= 0:
            raise ValueError(f"max_scan_range must be positive, got {self.max_scan_range}")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NumberTheoryError(Exception):
    """Базовое исключение пакета math_numbers."""

    pass


class ArityError(NumberTheoryError, ValueError):
    """
    Нарушено требование к количеству чисел.

    Выбрасывается, когда операция требует строго одного числа (is_prime,
    get_divisors, is_divisor_of) или минимум двух (gcd, are_coprimes), а
    NumberSet хранит другое количество. Сообщение содержит имя операции и
    нарушенное условие.
    """

    pass


class DomainError(NumberTheoryError, ValueError):
    """
    Значение вне области определения операции.

    Примеры: get_divisors для n <= 0, is_prime для n < 0, НОД набора из одних
    нулей, is_divisor_of при делителе 0.
    """

    pass


class ScanRangeOverflowError(NumberTheoryError, OverflowError):
    """
    Перебор превышает допустимый лимит.

    Python int не переполняется, поэтому ограничивается объём работы:
    перебор длиннее max_scan отклоняется до начала вычислений.
    """

    pass


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def require_count(
    operation: str,
    count: int,
    *,
    exactly: int | None = None,
    at_least: int | None = None,
    what: str = "number",
) -> None:
    """
    Проверка arity операции.

    Args:
        operation: Имя операции (для сообщения об ошибке)
        count: Фактическое количество значений
        exactly: Требуемое точное количество (optional)
        at_least: Требуемое минимальное количество (optional)
        what: Что считаем ("number" для чисел NumberSet, "argument" для аргументов)

    Raises:
        ArityError: Если count не удовлетворяет условию

    Examples:
        >>> require_count("gcd", 2, at_least=2)
        >>> require_count("is_prime", 2, exactly=1)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ArityError: is_prime requires exactly one number, got 2
    """
    if exactly is not None and count != exactly:
        raise ArityError(
            f"{operation} requires exactly {_spell(exactly)} {_plural(what, exactly)}, "
            f"got {count}"
        )

    if at_least is not None and count < at_least:
        raise ArityError(
            f"{operation} requires at least {_spell(at_least)} {_plural(what, at_least)}, "
            f"got {count}"
        )


def validate_positive_int(value: int, name: str) -> None:
    """
    Валидация, что целое значение положительное.

    Raises:
        DomainError: Если value <= 0
    """
    if value <= 0:
        raise DomainError(f"{name} must be a positive integer, got {value}")


def validate_non_negative_int(value: int, name: str) -> None:
    """
    Валидация, что целое значение неотрицательное.

    Raises:
        DomainError: Если value < 0
    """
    if value < 0:
        raise DomainError(f"{name} must be a non-negative integer, got {value}")


def validate_scan_range(size: int, name: str, max_scan: int = MAX_SCAN_RANGE) -> None:
    """
    Валидация длины перебора.

    Args:
        size: Длина предстоящего перебора
        name: Имя перебора (для сообщения об ошибке)
        max_scan: Максимально допустимая длина (default: MAX_SCAN_RANGE)

    Raises:
        ValueError: Если max_scan <= 0
        ScanRangeOverflowError: Если size > max_scan
    """
    if max_scan <= 0:
        raise ValueError(f"max_scan must be positive, got {max_scan}")

    if size > max_scan:
        raise ScanRangeOverflowError(
            f"{name} would scan {size} candidates, limit is {max_scan}"
        )


_WORDS: Final[dict[int, str]] = {1: "one", 2: "two", 3: "three"}


def _spell(count: int) -> str:
    return _WORDS.get(count, str(count))


def _plural(word: str, count: int) -> str:
    return word if count == 1 else f"{word}s"
