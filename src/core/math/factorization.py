"""
Factorization: решето Эратосфена, пробное деление, Pollard's Rho

Порядок разложения:
1. Пробное деление на простые из решета (limit = 1000 по умолчанию)
2. Остаток > 1 раскладывается Pollard's Rho через явный worklist
   (без рекурсии: глубина не зависит от числа множителей)

Результат pollards_rho трёхзначный (RhoOutcome):
- FOUND: найден нетривиальный делитель
- EXHAUSTED: исчерпан лимит итераций, d = 1
- CYCLE_FAILED: цикл Флойда замкнулся с d = n

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Произведение множителей равно исходному n
2. Множители упорядочены по возрастанию, кратность = повторение
3. Каждый множитель вероятно прост (тот же Miller-Rabin, что и в primality)
4. Неразложенный остаток никогда не возвращается как результат:
   он поднимается как ArithmeticFailure
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Final, Iterable, Optional

from src.core.math.errors import ArgumentError, ArithmeticFailure, OperationResult, capture
from src.core.math.integer_safeguards import (
    DEFAULT_CONFIDENCE,
    require_integer,
    validate_in_range,
    validate_positive,
)
from src.core.math.primality import PrimalityConfig, PrimalityTester

logger = logging.getLogger(__name__)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Верхняя граница решета для пробного деления
DEFAULT_SIEVE_LIMIT: Final[int] = 1000

# Стартовое значение x0 = y0 для Pollard's Rho
DEFAULT_RHO_SEED: Final[int] = 2


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class FactorizationConfig:
    """Конфигурация факторизации."""

    sieve_limit: int = DEFAULT_SIEVE_LIMIT
    rho_seed: int = DEFAULT_RHO_SEED

    # None = Pollard's Rho без ограничения итераций
    rho_max_iterations: Optional[int] = None

    # Раунды Miller-Rabin для проверки множителей
    primality_rounds: int = DEFAULT_CONFIDENCE


# =============================================================================
# RESULT
# =============================================================================


class RhoOutcome(str, Enum):
    """Исход одного запуска Pollard's Rho."""

    FOUND = "FOUND"
    EXHAUSTED = "EXHAUSTED"
    CYCLE_FAILED = "CYCLE_FAILED"


@dataclass(frozen=True)
class RhoResult:
    """Результат pollards_rho."""

    outcome: RhoOutcome
    divisor: Optional[int]
    iterations: int

    @property
    def found(self) -> bool:
        return self.outcome == RhoOutcome.FOUND


# =============================================================================
# РЕШЕТО И ПРОБНОЕ ДЕЛЕНИЕ
# =============================================================================


def eratosthenes_primes(limit: int = DEFAULT_SIEVE_LIMIT) -> list[int]:
    """
    Все простые <= limit по возрастанию (решето Эратосфена).

    Пересчитывается при каждом вызове.

    Examples:
        >>> eratosthenes_primes(30)
        [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
        >>> eratosthenes_primes(1)
        []
    """
    require_integer(limit, "limit")
    if limit < 2:
        return []

    sieve = bytearray([1]) * (limit + 1)
    sieve[0] = sieve[1] = 0

    p = 2
    while p * p <= limit:
        if sieve[p]:
            sieve[p * p :: p] = bytes(len(range(p * p, limit + 1, p)))
        p += 1

    return [i for i in range(2, limit + 1) if sieve[i]]


def trial_division(n: int, primes: Iterable[int]) -> tuple[list[int], int]:
    """
    Пробное деление n на заданные простые.

    Каждое простое делится столько раз, сколько входит в n; перебор
    останавливается, как только остаток становится 1.

    Returns:
        (factors, remainder)

    Examples:
        >>> trial_division(360, [2, 3, 5, 7])
        ([2, 2, 2, 3, 3, 5], 1)
        >>> trial_division(2 * 1009, [2, 3])
        ([2], 1009)
    """
    validate_positive(n, "n")

    factors: list[int] = []
    for p in primes:
        if n == 1:
            break
        while n % p == 0:
            factors.append(p)
            n //= p

    return factors, n


# =============================================================================
# POLLARD'S RHO
# =============================================================================


def pollards_rho(
    n: int,
    seed: int = DEFAULT_RHO_SEED,
    max_iterations: Optional[int] = None,
) -> RhoResult:
    """
    Поиск делителя методом Pollard's Rho (цикл Флойда).

    f(z) = (z^2 + 1) mod n; x ← f(x), y ← f(f(y)), d ← gcd(|x - y|, n)
    до тех пор, пока d = 1.

    Args:
        n: Раскладываемое число (>= 2)
        seed: Стартовое x0 = y0
        max_iterations: Лимит итераций (None = без ограничения)

    Returns:
        RhoResult: FOUND с делителем, EXHAUSTED или CYCLE_FAILED

    Raises:
        ArgumentError: Если n < 2 или max_iterations < 1

    Examples:
        >>> pollards_rho(8051).divisor in (83, 97)
        True
        >>> pollards_rho(10).divisor
        2
    """
    validate_in_range(n, "n", min_value=2)
    require_integer(seed, "seed")
    if max_iterations is not None:
        validate_in_range(max_iterations, "max_iterations", min_value=1)

    if n % 2 == 0:
        return RhoResult(outcome=RhoOutcome.FOUND, divisor=2, iterations=0)

    x = y = seed
    d = 1
    iterations = 0

    while d == 1:
        if max_iterations is not None and iterations >= max_iterations:
            logger.debug("Pollard's Rho exhausted %d iterations for n=%d", iterations, n)
            return RhoResult(outcome=RhoOutcome.EXHAUSTED, divisor=None, iterations=iterations)

        x = (x * x + 1) % n
        y = (y * y + 1) % n
        y = (y * y + 1) % n
        d = math.gcd(abs(x - y), n)
        iterations += 1

    if d == n:
        logger.debug("Pollard's Rho cycle collapsed for n=%d after %d iterations", n, iterations)
        return RhoResult(outcome=RhoOutcome.CYCLE_FAILED, divisor=None, iterations=iterations)

    return RhoResult(outcome=RhoOutcome.FOUND, divisor=d, iterations=iterations)


def factor_using_pollards_rho(
    n: int,
    factors: list[int],
    primality_tester: Optional[PrimalityTester] = None,
    seed: int = DEFAULT_RHO_SEED,
    max_iterations: Optional[int] = None,
) -> None:
    """
    Полное разложение n через Pollard's Rho; множители добавляются в factors.

    Явный worklist: вероятно простые числа уходят в результат, составные
    делятся на (divisor, n / divisor), обе части возвращаются в worklist.

    Args:
        n: Раскладываемое число (>= 1)
        factors: Список-приёмник (дополняется, порядок не гарантирован)
        primality_tester: Проверка простоты (default: PrimalityTester())
        seed: Стартовое значение Pollard's Rho
        max_iterations: Лимит итераций Pollard's Rho

    Raises:
        ArithmeticFailure: Если Pollard's Rho не разложил составное число
    """
    validate_positive(n, "n")
    tester = primality_tester or PrimalityTester()

    worklist = [n]
    while worklist:
        m = worklist.pop()
        if m == 1:
            continue

        if tester.is_probable_prime(m):
            factors.append(m)
            continue

        result = pollards_rho(m, seed, max_iterations)
        if not result.found:
            logger.warning(
                "Factorization failed: Pollard's Rho returned %s for %d", result.outcome.value, m
            )
            raise ArithmeticFailure(
                f"Failed to factor {m}: Pollard's Rho {result.outcome.value} "
                f"(seed={seed}, iterations={result.iterations})",
                n=m,
                outcome=result.outcome,
            )

        divisor = result.divisor
        logger.debug("Split %d = %d * %d", m, divisor, m // divisor)
        worklist.append(divisor)
        worklist.append(m // divisor)


# =============================================================================
# FACTORIZER
# =============================================================================


class Factorizer:
    """
    Факторизация: пробное деление по решету + Pollard's Rho.

    Простые решета вычисляются один раз при создании.
    """

    def __init__(
        self,
        config: Optional[FactorizationConfig] = None,
        primality_tester: Optional[PrimalityTester] = None,
    ):
        """
        Args:
            config: Конфигурация (default: FactorizationConfig())
            primality_tester: Проверка простоты множителей
                (default: PrimalityTester с config.primality_rounds)
        """
        self.config = config or FactorizationConfig()
        self.primality_tester = primality_tester or PrimalityTester(
            PrimalityConfig(miller_rabin_rounds=self.config.primality_rounds)
        )
        self._small_primes = eratosthenes_primes(self.config.sieve_limit)

    def factor(self, n: int) -> list[int]:
        """
        Разложение n на простые множители по возрастанию.

        Args:
            n: Положительное целое

        Returns:
            Множители с кратностью; [] для n = 1

        Raises:
            ArgumentError: Если n <= 0
            ArithmeticFailure: Если Pollard's Rho не разложил остаток
        """
        require_integer(n, "n")
        if n <= 0:
            raise ArgumentError(f"n must be positive, got {n}")

        factors, remainder = trial_division(n, self._small_primes)

        if remainder > 1:
            large_factors: list[int] = []
            factor_using_pollards_rho(
                remainder,
                large_factors,
                primality_tester=self.primality_tester,
                seed=self.config.rho_seed,
                max_iterations=self.config.rho_max_iterations,
            )
            factors.extend(sorted(large_factors))

        return factors

    def factor_multiset(self, n: int):
        """Разложение n как валидированная модель FactorMultiset."""
        # Локальный импорт: domain зависит от math, не наоборот
        from src.core.domain.factorization import FactorMultiset

        return FactorMultiset(n=n, factors=tuple(self.factor(n)))

    def try_factor(self, n: int) -> OperationResult[list[int]]:
        """factor без исключений: OperationResult с ErrorKind при ошибке."""
        return capture(self.factor, n)


# Глобальный экземпляр с конфигурацией по умолчанию
_DEFAULT_FACTORIZER: Optional[Factorizer] = None


def _default_factorizer() -> Factorizer:
    global _DEFAULT_FACTORIZER
    if _DEFAULT_FACTORIZER is None:
        _DEFAULT_FACTORIZER = Factorizer()
    return _DEFAULT_FACTORIZER


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def factor(n: int) -> list[int]:
    """
    Разложение n на простые множители (конфигурация по умолчанию).

    Examples:
        >>> factor(360)
        [2, 2, 2, 3, 3, 5]
        >>> factor(1)
        []
    """
    return _default_factorizer().factor(n)


def try_factor(n: int) -> OperationResult[list[int]]:
    """Разложение n без исключений."""
    return _default_factorizer().try_factor(n)
