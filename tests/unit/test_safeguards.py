"""
Тесты для модуля Safeguards

Проверяет:
1. Иерархию исключений (ArityError/DomainError/ScanRangeOverflowError)
2. Проверку arity и тексты сообщений
3. Валидацию domain целых чисел
4. Лимиты переборов и ScanLimits
"""

import pytest

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

# =============================================================================
# ТЕСТЫ ИЕРАРХИИ ИСКЛЮЧЕНИЙ
# =============================================================================


class TestExceptionHierarchy:
    """Все ошибки пакета наследуют NumberTheoryError"""

    def test_arity_error_is_value_error(self) -> None:
        assert issubclass(ArityError, NumberTheoryError)
        assert issubclass(ArityError, ValueError)

    def test_domain_error_is_value_error(self) -> None:
        assert issubclass(DomainError, NumberTheoryError)
        assert issubclass(DomainError, ValueError)

    def test_scan_overflow_is_overflow_error(self) -> None:
        assert issubclass(ScanRangeOverflowError, NumberTheoryError)
        assert issubclass(ScanRangeOverflowError, OverflowError)


# =============================================================================
# ТЕСТЫ ПРОВЕРКИ ARITY
# =============================================================================


class TestRequireCount:
    """Тесты для require_count"""

    def test_exact_count_passes(self) -> None:
        require_count("is_prime", 1, exactly=1)

    def test_at_least_passes(self) -> None:
        require_count("gcd", 2, at_least=2)
        require_count("gcd", 5, at_least=2)

    def test_exact_count_violated(self) -> None:
        """Сообщение содержит операцию и условие"""
        with pytest.raises(ArityError, match="is_prime requires exactly one number, got 2"):
            require_count("is_prime", 2, exactly=1)

    def test_at_least_violated(self) -> None:
        with pytest.raises(ArityError, match="gcd requires at least two numbers, got 1"):
            require_count("gcd", 1, at_least=2)

    def test_argument_wording(self) -> None:
        with pytest.raises(ArityError, match="exactly one argument, got 0"):
            require_count("is_divisor_of", 0, exactly=1, what="argument")

    def test_large_counts_use_digits(self) -> None:
        with pytest.raises(ArityError, match="at least 7 numbers"):
            require_count("op", 3, at_least=7)


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ DOMAIN
# =============================================================================


class TestDomainValidation:
    """Тесты для validate_positive_int / validate_non_negative_int"""

    def test_positive_accepts_positive(self) -> None:
        validate_positive_int(1, "n")
        validate_positive_int(10**12, "n")

    @pytest.mark.parametrize("value", [0, -1, -100])
    def test_positive_rejects_non_positive(self, value: int) -> None:
        with pytest.raises(DomainError, match="n must be a positive integer"):
            validate_positive_int(value, "n")

    def test_non_negative_accepts_zero(self) -> None:
        validate_non_negative_int(0, "n")

    def test_non_negative_rejects_negative(self) -> None:
        with pytest.raises(DomainError, match="non-negative"):
            validate_non_negative_int(-3, "n")


# =============================================================================
# ТЕСТЫ ЛИМИТОВ ПЕРЕБОРА
# =============================================================================


class TestScanLimits:
    """Тесты для validate_scan_range и ScanLimits"""

    def test_default_limit(self) -> None:
        assert ScanLimits().max_scan_range == MAX_SCAN_RANGE

    def test_within_limit(self) -> None:
        validate_scan_range(100, "scan", max_scan=100)

    def test_over_limit(self) -> None:
        with pytest.raises(ScanRangeOverflowError, match="scan would scan 101 candidates"):
            validate_scan_range(101, "scan", max_scan=100)

    def test_invalid_limit(self) -> None:
        with pytest.raises(ValueError, match="max_scan must be positive"):
            validate_scan_range(1, "scan", max_scan=0)

    def test_scan_limits_rejects_non_positive(self) -> None:
        with pytest.raises(ValueError, match="max_scan_range must be positive"):
            ScanLimits(max_scan_range=0)

    def test_scan_limits_is_frozen(self) -> None:
        limits = ScanLimits(max_scan_range=10)
        with pytest.raises(AttributeError):
            limits.max_scan_range = 20  # type: ignore[misc]
