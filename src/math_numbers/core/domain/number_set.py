"""
NumberSet — Набор целых чисел и операции теории чисел над ним

Immutable Pydantic модель. Числа задаются один раз при создании и хранятся в
исходном порядке. Количество чисел при создании не проверяется: каждая
операция сама проверяет свою arity и выбрасывает ArityError.

Arity операций:
- gcd, are_coprimes: минимум 2 числа
- is_divisor_of, get_divisors, is_prime: ровно 1 число
- evaluate: любое количество (включая 0)

Examples:
    >>> NumberSet(8, 12).gcd()
    4
    >>> NumberSet(8, 15).are_coprimes()
    True
    >>> NumberSet(3).is_divisor_of(12)
    True
    >>> NumberSet(28).get_divisors()
    [2, 4, 7, 14, 1, 28]
"""

from typing import Any

from pydantic import BaseModel, Field, StrictInt

from math_numbers.core.contracts.validators import validate_number_set
from math_numbers.core.domain.report import NumberEvaluation, NumberSetReport
from math_numbers.core.math.divisors import divisors_in_reference_order, is_divisor
from math_numbers.core.math.gcd import gcd_of, select_gcd_algorithm
from math_numbers.core.math.primality import is_prime_trial_division
from math_numbers.core.math.safeguards import ScanLimits, require_count


class NumberSet(BaseModel):
    """
    Упорядоченный набор целых чисел.

    Создание: NumberSet(12, 18, 24) или NumberSet(numbers=[12, 18, 24]).
    Нецелые значения (float, str, bool) отвергаются pydantic при создании.

    Immutable модель (frozen=True).
    """

    numbers: tuple[StrictInt, ...] = Field(
        default=(), description="Числа в исходном порядке (дубликаты допустимы)"
    )
    limits: ScanLimits = Field(
        default_factory=ScanLimits, exclude=True, description="Лимиты переборов"
    )

    model_config = {"frozen": True}

    def __init__(self, *numbers: int, **data: Any) -> None:
        if numbers:
            if "numbers" in data:
                raise TypeError("numbers given both positionally and by keyword")
            data["numbers"] = numbers
        super().__init__(**data)

    def __len__(self) -> int:
        return len(self.numbers)

    @classmethod
    def from_contract(cls, data: dict[str, Any], limits: ScanLimits | None = None) -> "NumberSet":
        """
        Создание NumberSet из данных контракта number_set.json.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        validate_number_set(data)
        return cls(numbers=data["numbers"], limits=limits or ScanLimits())

    # =========================================================================
    # ОПЕРАЦИИ НАД НАБОРОМ (>= 2 числа)
    # =========================================================================

    def gcd(self) -> int:
        """
        НОД всех чисел набора.

        2 числа → алгоритм Евклида, 3 и более → brute-force перебор делителей.

        Raises:
            ArityError: Если чисел меньше двух
            DomainError: Если все числа нулевые
            ScanRangeOverflowError: Если brute-force перебор превышает лимит
        """
        return gcd_of(self.numbers, max_scan=self.limits.max_scan_range)

    def are_coprimes(self) -> bool:
        """
        Взаимно простые ли числа набора (НОД == 1).

        Raises:
            ArityError: Если чисел меньше двух
        """
        require_count("are_coprimes", len(self.numbers), at_least=2)
        return self.gcd() == 1

    # =========================================================================
    # ОПЕРАЦИИ НАД ОДНИМ ЧИСЛОМ (ровно 1 число)
    # =========================================================================

    def is_divisor_of(self, *candidates: int) -> bool:
        """
        Делит ли число набора переданное число без остатка.

        NumberSet(3).is_divisor_of(12) → True (3 делит 12).

        Raises:
            ArityError: Если в наборе не одно число или передан не один аргумент
            DomainError: Если число набора равно 0
        """
        require_count("is_divisor_of", len(self.numbers), exactly=1)
        require_count("is_divisor_of", len(candidates), exactly=1, what="argument")
        return is_divisor(self.numbers[0], candidates[0])

    def get_divisors(self) -> list[int]:
        """
        Делители числа: сначала 2..n/2 по возрастанию, затем 1 и n.

        Для n == 1 возвращается [1, 1].

        Raises:
            ArityError: Если в наборе не одно число
            DomainError: Если n <= 0
        """
        require_count("get_divisors", len(self.numbers), exactly=1)
        return divisors_in_reference_order(
            self.numbers[0], max_scan=self.limits.max_scan_range
        )

    def is_prime(self, *, strict: bool = False) -> bool:
        """
        Простое ли число (перебор делителей 2..n-1).

        По умолчанию 0 и 1 считаются простыми (пустой перебор); strict=True
        возвращает для них False.

        Raises:
            ArityError: Если в наборе не одно число
            DomainError: Если n < 0
        """
        require_count("is_prime", len(self.numbers), exactly=1)
        return is_prime_trial_division(
            self.numbers[0], strict=strict, max_scan=self.limits.max_scan_range
        )

    # =========================================================================
    # ПОЭЛЕМЕНТНАЯ ОЦЕНКА
    # =========================================================================

    def evaluate(self) -> NumberSetReport:
        """
        Оценка каждого числа набора и свойств набора целиком.

        Не проверяет arity: пустой набор даёт пустой отчёт, для одного числа
        поля gcd/are_coprimes остаются None.
        """
        max_scan = self.limits.max_scan_range
        evaluations = []
        for value in self.numbers:
            divisors = None
            if value > 0:
                divisors = sorted(set(divisors_in_reference_order(value, max_scan=max_scan)))
            evaluations.append(
                NumberEvaluation(
                    value=value,
                    is_prime=value >= 0
                    and is_prime_trial_division(value, strict=True, max_scan=max_scan),
                    divisors=divisors,
                )
            )

        gcd = None
        algorithm = None
        coprimes = None
        if len(self.numbers) >= 2 and any(self.numbers):
            algorithm = select_gcd_algorithm(len(self.numbers))
            gcd = self.gcd()
            coprimes = gcd == 1

        return NumberSetReport(
            numbers=list(self.numbers),
            evaluations=evaluations,
            gcd=gcd,
            gcd_algorithm=algorithm,
            are_coprimes=coprimes,
        )
