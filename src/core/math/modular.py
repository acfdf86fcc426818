"""
Modular Arithmetic: CRT и обратные элементы по модулю

Функции:
- chinese_remainder_theorem: восстановление x mod Π m_i по остаткам
- mod_inverse_fermat: a^(m-2) mod m (только для простого m)
- mod_inverse: расширенный алгоритм Евклида (любой взаимно простой m)
- least_common_multiple, normalize_mod: вспомогательные

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат CRT всегда в [0, M), M = Π moduli
2. Попарная взаимная простота модулей проверяется заранее (ArgumentError)
3. Все возведения в степень через встроенный pow
"""

import math
from itertools import combinations
from typing import Sequence

from src.core.math.errors import ArgumentError, OperationResult, capture
from src.core.math.integer_safeguards import require_integer, validate_positive


# =============================================================================
# ОБРАТНЫЕ ЭЛЕМЕНТЫ
# =============================================================================


def mod_inverse_fermat(a: int, m: int) -> int:
    """
    Обратный элемент по малой теореме Ферма: a^(m-2) mod m.

    Корректен только для простого m; простота m не проверяется.

    Raises:
        ArgumentError: Если a <= 0 или m <= 1

    Examples:
        >>> mod_inverse_fermat(3, 11)
        4
    """
    require_integer(a, "a")
    require_integer(m, "m")
    if a <= 0 or m <= 1:
        raise ArgumentError(
            "a must be greater than 0, and m must be greater than 1 and be a prime number, "
            f"got a={a}, m={m}"
        )
    return pow(a, m - 2, m)


def mod_inverse(a: int, m: int) -> int:
    """
    Обратный элемент a^-1 mod m (расширенный алгоритм Евклида).

    Raises:
        ArgumentError: Если m <= 0 или gcd(a, m) != 1

    Examples:
        >>> mod_inverse(35, 3)
        2
    """
    require_integer(a, "a")
    validate_positive(m, "m")
    try:
        return pow(a, -1, m)
    except ValueError as e:
        raise ArgumentError(f"{a} is not invertible modulo {m}") from e


def normalize_mod(value: int, m: int) -> int:
    """
    Представитель value в [0, m).

    Raises:
        ArgumentError: Если m <= 0
    """
    require_integer(value, "value")
    validate_positive(m, "m")
    return value % m


def least_common_multiple(a: int, b: int) -> int:
    """
    НОК(a, b) = |a * b| / gcd(a, b); lcm(0, x) = 0.

    Examples:
        >>> least_common_multiple(4, 6)
        12
        >>> least_common_multiple(-4, 6)
        12
    """
    require_integer(a, "a")
    require_integer(b, "b")
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // math.gcd(a, b)


# =============================================================================
# CHINESE REMAINDER THEOREM
# =============================================================================


def validate_pairwise_coprime(moduli: Sequence[int]) -> None:
    """
    Проверка попарной взаимной простоты модулей.

    Raises:
        ArgumentError: Если какая-то пара имеет общий делитель > 1
    """
    for (i, m_i), (j, m_j) in combinations(enumerate(moduli), 2):
        g = math.gcd(m_i, m_j)
        if g != 1:
            raise ArgumentError(
                f"Moduli must be pairwise coprime: gcd(moduli[{i}]={m_i}, "
                f"moduli[{j}]={m_j}) = {g}"
            )


def chinese_remainder_theorem(residues: Sequence[int], moduli: Sequence[int]) -> int:
    """
    Решение системы x ≡ residues[i] (mod moduli[i]).

    Алгоритм:
        M = Π moduli[i]
        M_i = M / moduli[i], y_i = M_i^-1 mod moduli[i]
        x = Σ residues[i] * M_i * y_i  (mod M)

    Args:
        residues: Остатки (любого знака)
        moduli: Попарно взаимно простые модули (>= 1)

    Returns:
        Единственное x ∈ [0, M)

    Raises:
        ArgumentError: Если длины различаются, модуль < 1 или модули
            не попарно взаимно просты

    Examples:
        >>> chinese_remainder_theorem([2, 3, 2], [3, 5, 7])
        23
    """
    if len(residues) != len(moduli):
        raise ArgumentError(
            "The number of residues and moduli must be equal, "
            f"got {len(residues)} and {len(moduli)}"
        )

    for i, r in enumerate(residues):
        require_integer(r, f"residues[{i}]")
    for i, m in enumerate(moduli):
        validate_positive(m, f"moduli[{i}]")

    validate_pairwise_coprime(moduli)

    big_m = math.prod(moduli)

    x = 0
    for r_i, m_i in zip(residues, moduli):
        partial = big_m // m_i
        y_i = mod_inverse(partial, m_i)
        x += r_i * partial * y_i

    return x % big_m


def try_chinese_remainder_theorem(
    residues: Sequence[int],
    moduli: Sequence[int],
) -> OperationResult[int]:
    """chinese_remainder_theorem без исключений."""
    return capture(chinese_remainder_theorem, residues, moduli)
