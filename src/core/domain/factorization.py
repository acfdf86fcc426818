"""
FactorMultiset: разложение числа на простые множители

Immutable Pydantic модель результата факторизации. Проверяет инварианты
разложения, в том числе полученного извне.
"""

import math
from collections import Counter

from pydantic import BaseModel, Field, field_validator, model_validator


class FactorMultiset(BaseModel):
    """
    Упорядоченный мультимножество простых множителей числа n.

    Инварианты:
    - factors по возрастанию, кратность = повторение
    - каждый множитель >= 2
    - произведение factors равно n (для n = 1 множителей нет)

    Простота множителей моделью не проверяется: её гарантирует Factorizer.
    """

    n: int = Field(..., gt=0, description="Разложенное число")
    factors: tuple[int, ...] = Field(
        default=(), description="Простые множители по возрастанию, с кратностью"
    )

    model_config = {"frozen": True}

    @field_validator("factors")
    @classmethod
    def validate_factors_sorted(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Множители >= 2 и по неубыванию."""
        for factor in v:
            if factor < 2:
                raise ValueError(f"factor {factor} is not a valid prime factor (< 2)")
        for previous, current in zip(v, v[1:]):
            if current < previous:
                raise ValueError(f"factors must be ascending, got {previous} before {current}")
        return v

    @model_validator(mode="after")
    def validate_product(self) -> "FactorMultiset":
        """Произведение множителей равно n."""
        product = math.prod(self.factors)
        if product != self.n:
            raise ValueError(f"product of factors {product} != n {self.n}")
        return self

    def multiplicities(self) -> dict[int, int]:
        """
        Кратности множителей: {prime: exponent}.

        Examples:
            >>> FactorMultiset(n=360, factors=(2, 2, 2, 3, 3, 5)).multiplicities()
            {2: 3, 3: 2, 5: 1}
        """
        return dict(Counter(self.factors))

    def distinct_primes(self) -> tuple[int, ...]:
        return tuple(sorted(set(self.factors)))

    def is_prime(self) -> bool:
        """n простое ⇔ ровно один множитель."""
        return len(self.factors) == 1
