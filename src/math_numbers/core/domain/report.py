"""
Report — Результаты поэлементной оценки NumberSet

Immutable Pydantic модели, которые возвращает NumberSet.evaluate():
- NumberEvaluation: простота и делители одного числа
- NumberSetReport: оценки всех чисел + НОД и взаимная простота набора

Сериализация model_dump(mode="json") соответствует контракту
number_set_report.json.
"""

from pydantic import BaseModel, Field

from math_numbers.core.math.gcd import GcdAlgorithm


class NumberEvaluation(BaseModel):
    """
    Оценка одного числа.

    is_prime вычисляется в строгом смысле: 0, 1 и отрицательные числа не
    простые. divisors: натуральные делители по возрастанию, None для n <= 0.
    """

    value: int = Field(..., description="Исходное число")
    is_prime: bool = Field(..., description="Простое ли число (строгая проверка)")
    divisors: list[int] | None = Field(
        None, description="Делители по возрастанию (None для n <= 0)"
    )

    model_config = {"frozen": True}


class NumberSetReport(BaseModel):
    """
    Сводный отчёт по NumberSet.

    gcd, gcd_algorithm и are_coprimes заполняются только для наборов из двух и
    более чисел, среди которых есть ненулевое.
    """

    numbers: list[int] = Field(..., description="Числа в исходном порядке")
    evaluations: list[NumberEvaluation] = Field(..., description="Оценка каждого числа")

    # Свойства набора
    gcd: int | None = Field(None, ge=1, description="НОД набора")
    gcd_algorithm: GcdAlgorithm | None = Field(None, description="Алгоритм НОД")
    are_coprimes: bool | None = Field(None, description="Взаимно простые ли числа")

    model_config = {"frozen": True}

    @property
    def primes(self) -> list[int]:
        """Простые числа набора в исходном порядке."""
        return [evaluation.value for evaluation in self.evaluations if evaluation.is_prime]
