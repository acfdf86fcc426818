"""
Primality: вероятностные тесты простоты и генерация простых

Три независимых теста:
- Fermat: a^(n-1) ≡ 1 (mod n)
- Miller-Rabin: сильная псевдопростота по основанию a
- Solovay-Strassen: критерий Эйлера через символ Якоби

Production-путь (генерация простых) использует Miller-Rabin с k = 20.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. False всегда корректен: простое число никогда не отвергается
2. True верен с вероятностью >= 1 - 4^-k для Miller-Rabin
3. Fermat пропускает числа Кармайкла (561, 1105, ...). Это свойство
   алгоритма, а не дефект: для надёжной проверки используйте Miller-Rabin
4. Случайность только через явный RandomSource (по умолчанию стойкий)
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

from src.core.math.errors import ArgumentError, ArithmeticFailure
from src.core.math.integer_safeguards import (
    DEFAULT_CONFIDENCE,
    PRODUCTION_CONFIDENCE,
    decompose_power_of_two,
    require_integer,
    validate_confidence,
    validate_in_range,
    validate_positive,
)
from src.core.math.random_source import RandomSource, resolve_random_source

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class PrimalityConfig:
    """Конфигурация тестов простоты."""

    # Раунды для каждого теста
    fermat_rounds: int = DEFAULT_CONFIDENCE
    miller_rabin_rounds: int = DEFAULT_CONFIDENCE
    solovay_strassen_rounds: int = DEFAULT_CONFIDENCE

    # Раунды production-пути (miller_rabin_test, генерация)
    production_rounds: int = PRODUCTION_CONFIDENCE

    # Лимит кандидатов при генерации; None = без ограничения
    max_generation_attempts: Optional[int] = None


# =============================================================================
# СИМВОЛ ЯКОБИ
# =============================================================================


def find_jacobi_symbol(a: int, n: int) -> int:
    """
    Символ Якоби J(a, n) для нечётного n > 0.

    Правила:
        a = 0   → 1 если n = 1, иначе 0
        a = -1  → -1
        a = 1   → 1
        a = 2   → 1 если n mod 8 ∈ {1, 7}; -1 если n mod 8 ∈ {3, 5}
        a >= n  → J(a mod n, n)
        a чётное → J(2, n) * J(a/2, n)
        a нечётное < n → -J(n, a) если a ≡ n ≡ 3 (mod 4), иначе J(n, a)

    Правила применяются итеративно: глубина не зависит от битовой длины
    n, поэтому функция работает на числах в тысячи бит.

    Returns:
        -1, 0 или 1

    Raises:
        ArgumentError: Если n не нечётное положительное

    Examples:
        >>> find_jacobi_symbol(2, 7)
        1
        >>> find_jacobi_symbol(3, 5)
        -1
        >>> find_jacobi_symbol(6, 15)
        0
    """
    require_integer(a, "a")
    validate_positive(n, "n")
    if n % 2 == 0:
        raise ArgumentError(f"Jacobi symbol requires odd n, got {n}")

    if a == 0:
        return 1 if n == 1 else 0
    if a == -1:
        return -1
    if a == 1:
        return 1
    if a == 2:
        return 1 if n % 8 in (1, 7) else -1

    a %= n
    result = 1
    while a != 0:
        # J(2, n) для каждого выделенного множителя 2
        while a % 2 == 0:
            a //= 2
            if n % 8 in (3, 5):
                result = -result

        # Квадратичный закон взаимности
        a, n = n, a
        if a % 4 == 3 and n % 4 == 3:
            result = -result
        a %= n

    return result if n == 1 else 0


# =============================================================================
# ВЕРОЯТНОСТНЫЕ ТЕСТЫ
# =============================================================================


def is_probable_prime_fermat(
    n: int,
    k: int = DEFAULT_CONFIDENCE,
    random_source: Optional[RandomSource] = None,
) -> bool:
    """
    Тест Ферма.

    k раундов со случайным a ∈ [2, n-2]: если a^(n-1) mod n != 1, то n
    составное. Числа Кармайкла проходят все раунды.

    Args:
        n: Проверяемое число
        k: Число раундов (>= 1)
        random_source: Источник witnesses (default: стойкий)

    Returns:
        False если n точно составное, True если вероятно простое
    """
    require_integer(n, "n")
    validate_confidence(k)

    if n <= 1:
        return False
    if n in (2, 3):
        return True

    rng = resolve_random_source(random_source)
    for _ in range(k):
        a = rng.randint(2, n - 2)
        if pow(a, n - 1, n) != 1:
            return False

    return True


def is_probable_prime_miller_rabin(
    n: int,
    k: int = DEFAULT_CONFIDENCE,
    random_source: Optional[RandomSource] = None,
) -> bool:
    """
    Тест Миллера-Рабина.

    n - 1 = d * 2^r, d нечётное. Для каждого witness a ∈ [2, n-2]:
    x = a^d mod n; witness проходит если x ∈ {1, n-1} или одно из
    r-1 последовательных возведений в квадрат даёт n-1.

    Args:
        n: Проверяемое число
        k: Число раундов (>= 1)
        random_source: Источник witnesses (default: стойкий)

    Returns:
        False если n точно составное, True если вероятно простое

    Examples:
        >>> is_probable_prime_miller_rabin(104729)
        True
        >>> is_probable_prime_miller_rabin(561)
        False
    """
    require_integer(n, "n")
    validate_confidence(k)

    if n < 2:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0:
        return False

    d, r = decompose_power_of_two(n - 1)
    rng = resolve_random_source(random_source)

    for _ in range(k):
        a = rng.randint(2, n - 2)
        x = pow(a, d, n)

        if x == 1 or x == n - 1:
            continue

        for _ in range(r - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False

    return True


def is_probable_prime_solovay_strassen(
    n: int,
    k: int = DEFAULT_CONFIDENCE,
    random_source: Optional[RandomSource] = None,
) -> bool:
    """
    Тест Соловея-Штрассена.

    Для a ∈ [1, n-1]: gcd(a, n) > 1 → составное; иначе сравнение
    J(a, n) mod n с a^((n-1)/2) mod n (критерий Эйлера).

    Символ Якоби определён только для нечётного n, поэтому чётные n > 2
    отвергаются до начала раундов.

    Args:
        n: Проверяемое число
        k: Число раундов (>= 1)
        random_source: Источник witnesses (default: стойкий)

    Returns:
        False если n точно составное, True если вероятно простое
    """
    require_integer(n, "n")
    validate_confidence(k)

    if n < 2:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0:
        return False

    rng = resolve_random_source(random_source)
    for _ in range(k):
        a = rng.randint(1, n - 1)
        if math.gcd(a, n) > 1:
            return False

        # J = -1 приводится к n - 1
        if find_jacobi_symbol(a, n) % n != pow(a, (n - 1) // 2, n):
            return False

    return True


def is_probable_prime(
    n: int,
    k: int = DEFAULT_CONFIDENCE,
    random_source: Optional[RandomSource] = None,
) -> bool:
    """Предикат простоты по умолчанию (Miller-Rabin)."""
    return is_probable_prime_miller_rabin(n, k, random_source)


# =============================================================================
# PRODUCTION: MILLER-RABIN И ГЕНЕРАЦИЯ ПРОСТЫХ
# =============================================================================


def miller_rabin_pass(a: int, s: int, d: int, n: int) -> bool:
    """
    Один раунд Миллера-Рабина для фиксированного witness.

    Args:
        a: Witness
        s: Показатель степени двойки в n - 1 = d * 2^s
        d: Нечётная часть n - 1
        n: Проверяемое число

    Returns:
        True если n сильно псевдопростое по основанию a
    """
    a_pow = pow(a, d, n)
    if a_pow == 1:
        return True

    for _ in range(s - 1):
        if a_pow == n - 1:
            return True
        a_pow = pow(a_pow, 2, n)

    return a_pow == n - 1


def generate_secure_random_below(
    max_value: int,
    random_source: Optional[RandomSource] = None,
) -> int:
    """
    Случайное целое в [1, max_value), по умолчанию из стойкого источника.

    Raises:
        ArgumentError: Если max_value < 2
    """
    validate_in_range(max_value, "max_value", min_value=2)
    rng = resolve_random_source(random_source)
    return 1 + rng.randbelow(max_value - 1)


def miller_rabin_test(
    n: int,
    k: int = PRODUCTION_CONFIDENCE,
    random_source: Optional[RandomSource] = None,
) -> bool:
    """
    Production-вариант Миллера-Рабина (k = 20 по умолчанию).

    n <= 1 или n = 4 → False; n <= 3 → True; чётные n → False.

    Args:
        n: Проверяемое число
        k: Число раундов (>= 1)
        random_source: Источник witnesses (default: стойкий)
    """
    require_integer(n, "n")
    validate_confidence(k)

    if n <= 1 or n == 4:
        return False
    if n <= 3:
        return True
    if n % 2 == 0:
        return False

    d, s = decompose_power_of_two(n - 1)
    rng = resolve_random_source(random_source)

    for _ in range(k):
        a = rng.randint(2, n - 2)
        if not miller_rabin_pass(a, s, d, n):
            return False

    return True


def generate_prime(
    bit_length: int,
    random_source: Optional[RandomSource] = None,
    k: int = PRODUCTION_CONFIDENCE,
    max_attempts: Optional[int] = None,
) -> int:
    """
    Генерация вероятно простого числа заданной битовой длины.

    Кандидаты берутся ниже 2^bit_length; старший бит выставляется
    (ровно bit_length бит), младший бит выставляется (нечётность).

    Args:
        bit_length: Битовая длина результата (>= 2)
        random_source: Источник кандидатов (default: стойкий)
        k: Раунды miller_rabin_test
        max_attempts: Лимит кандидатов (None = без ограничения)

    Returns:
        Простое p с p.bit_length() == bit_length

    Raises:
        ArgumentError: Если bit_length < 2
        ArithmeticFailure: Если max_attempts исчерпан
    """
    validate_in_range(bit_length, "bit_length", min_value=2)
    rng = resolve_random_source(random_source)

    top_bit = 1 << (bit_length - 1)
    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        candidate = rng.random_bits(bit_length) | top_bit | 1
        if miller_rabin_test(candidate, k, rng):
            logger.debug("Generated %d-bit prime after %d attempts", bit_length, attempts)
            return candidate

    raise ArithmeticFailure(
        f"No {bit_length}-bit prime found in {max_attempts} attempts"
    )


def generate_prime_in_range(
    start: int,
    stop: int,
    random_source: Optional[RandomSource] = None,
    k: int = PRODUCTION_CONFIDENCE,
    max_attempts: Optional[int] = None,
) -> int:
    """
    Генерация вероятно простого числа в [start, stop).

    Кандидат берётся равномерно из диапазона и делается нечётным; если
    после этого он выходит за stop, попытка повторяется.

    Args:
        start: Нижняя граница (включительно)
        stop: Верхняя граница (исключительно)
        random_source: Источник кандидатов (default: стойкий)
        k: Раунды miller_rabin_test
        max_attempts: Лимит кандидатов (None = без ограничения)

    Raises:
        ArgumentError: Если start >= stop
        ArithmeticFailure: Если max_attempts исчерпан
    """
    require_integer(start, "start")
    require_integer(stop, "stop")
    if start >= stop:
        raise ArgumentError(f"start must be less than stop, got {start} >= {stop}")

    rng = resolve_random_source(random_source)

    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        candidate = rng.random_in_range(start, stop)
        if candidate == 2:
            return candidate
        candidate |= 1
        if candidate >= stop:
            continue
        if miller_rabin_test(candidate, k, rng):
            logger.debug(
                "Generated prime in [%d, %d) after %d attempts", start, stop, attempts
            )
            return candidate

    raise ArithmeticFailure(
        f"No prime found in [{start}, {stop}) in {max_attempts} attempts"
    )


# =============================================================================
# PRIMALITY TESTER
# =============================================================================


class PrimalityTester:
    """
    Тесты простоты с зафиксированными конфигурацией и источником случайности.

    Удобен для внедрения в Factorizer и для детерминированных тестов:
    PrimalityTester(random_source=RandomSource.seeded(42)).
    """

    def __init__(
        self,
        config: Optional[PrimalityConfig] = None,
        random_source: Optional[RandomSource] = None,
    ):
        """
        Args:
            config: Конфигурация (default: PrimalityConfig())
            random_source: Источник случайности (default: стойкий)
        """
        self.config = config or PrimalityConfig()
        self.random_source = resolve_random_source(random_source)

    def is_probable_prime_fermat(self, n: int, k: Optional[int] = None) -> bool:
        return is_probable_prime_fermat(
            n, self.config.fermat_rounds if k is None else k, self.random_source
        )

    def is_probable_prime_miller_rabin(self, n: int, k: Optional[int] = None) -> bool:
        return is_probable_prime_miller_rabin(
            n, self.config.miller_rabin_rounds if k is None else k, self.random_source
        )

    def is_probable_prime_solovay_strassen(self, n: int, k: Optional[int] = None) -> bool:
        return is_probable_prime_solovay_strassen(
            n, self.config.solovay_strassen_rounds if k is None else k, self.random_source
        )

    def is_probable_prime(self, n: int, k: Optional[int] = None) -> bool:
        return self.is_probable_prime_miller_rabin(n, k)

    def miller_rabin_test(self, n: int, k: Optional[int] = None) -> bool:
        return miller_rabin_test(
            n, self.config.production_rounds if k is None else k, self.random_source
        )

    def generate_prime(self, bit_length: int) -> int:
        return generate_prime(
            bit_length,
            random_source=self.random_source,
            k=self.config.production_rounds,
            max_attempts=self.config.max_generation_attempts,
        )

    def generate_prime_in_range(self, start: int, stop: int) -> int:
        return generate_prime_in_range(
            start,
            stop,
            random_source=self.random_source,
            k=self.config.production_rounds,
            max_attempts=self.config.max_generation_attempts,
        )
