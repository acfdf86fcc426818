"""
RandomSource: явный источник случайности для вероятностных алгоритмов

Все функции, которым нужны случайные witnesses или кандидаты, принимают
RandomSource параметром. Уровень безопасности один:
- По умолчанию криптографически стойкий генератор (secrets.SystemRandom)
- RandomSource.seeded(seed) только для детерминированных тестов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все диапазоны проверяются до обращения к генератору (ArgumentError)
2. Выборка равномерная: без "модульного" смещения (randrange, не x % m)
"""

import random
import secrets
from typing import Optional

from src.core.math.errors import ArgumentError
from src.core.math.integer_safeguards import require_integer, validate_positive


class RandomSource:
    """
    Обёртка над random.Random-совместимым генератором.

    Подклассы могут переопределить randbelow для скриптованных
    последовательностей в тестах; остальные методы выражены через него.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Args:
            rng: Генератор (default: secrets.SystemRandom())
        """
        self._rng = rng if rng is not None else secrets.SystemRandom()

    @classmethod
    def secure(cls) -> "RandomSource":
        """Источник на базе ОС (os.urandom)."""
        return cls(secrets.SystemRandom())

    @classmethod
    def seeded(cls, seed: int) -> "RandomSource":
        """Детерминированный источник. НЕ для генерации ключей."""
        return cls(random.Random(seed))

    @property
    def is_secure(self) -> bool:
        return isinstance(self._rng, random.SystemRandom)

    def randbelow(self, n: int) -> int:
        """
        Равномерное целое в [0, n).

        Raises:
            ArgumentError: Если n <= 0
        """
        validate_positive(n, "n")
        return self._rng.randrange(n)

    def randint(self, low: int, high: int) -> int:
        """
        Равномерное целое в замкнутом диапазоне [low, high].

        Raises:
            ArgumentError: Если low > high
        """
        require_integer(low, "low")
        require_integer(high, "high")
        if low > high:
            raise ArgumentError(f"low must be <= high, got low={low}, high={high}")
        return low + self.randbelow(high - low + 1)

    def random_bits(self, bit_length: int) -> int:
        """
        Случайное неотрицательное целое < 2^bit_length.

        Raises:
            ArgumentError: Если bit_length <= 0
        """
        validate_positive(bit_length, "bit_length")
        return self.randbelow(1 << bit_length)

    def random_in_range(self, min_value: int, max_value: int) -> int:
        """
        Равномерное целое в полуоткрытом диапазоне [min_value, max_value).

        Raises:
            ArgumentError: Если min_value >= max_value
        """
        require_integer(min_value, "min_value")
        require_integer(max_value, "max_value")
        if min_value >= max_value:
            raise ArgumentError(
                f"min_value must be less than max_value, got {min_value} >= {max_value}"
            )
        return min_value + self.randbelow(max_value - min_value)

    def random_bit_length_range(self, min_bit_length: int, max_bit_length: int) -> int:
        """
        Случайное число, битовая длина которого выбирается из
        [min_bit_length, max_bit_length) (или равна min при min == max).

        Raises:
            ArgumentError: Если длины неположительные или min > max
        """
        validate_positive(min_bit_length, "min_bit_length")
        validate_positive(max_bit_length, "max_bit_length")
        if min_bit_length > max_bit_length:
            raise ArgumentError(
                "min_bit_length must be less than or equal to max_bit_length, "
                f"got {min_bit_length} > {max_bit_length}"
            )

        if min_bit_length == max_bit_length:
            bit_length = min_bit_length
        else:
            bit_length = min_bit_length + self.randbelow(max_bit_length - min_bit_length)
        return self.random_bits(bit_length)


# Глобальный экземпляр (криптографически стойкий)
_DEFAULT_SOURCE = RandomSource.secure()


def default_random_source() -> RandomSource:
    """Процессный источник по умолчанию."""
    return _DEFAULT_SOURCE


def resolve_random_source(random_source: Optional[RandomSource]) -> RandomSource:
    return random_source if random_source is not None else _DEFAULT_SOURCE
