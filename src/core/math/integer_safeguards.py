"""
Integer Safeguards: валидация целочисленных аргументов

Модуль обеспечивает единообразную проверку входов для всех number-theory
операций:
- Проверка типа (int, но не bool и не float)
- Проверки знака и диапазона с понятными сообщениями
- Разложение n = d * 2^s (общий шаг тестов Миллера-Рабина)
- Логарифм произвольно большого целого с DomainError вне области определения

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все ошибки валидации: ArgumentError (или DomainError для log)
2. Функции не мутируют аргументы и возвращают новые значения
3. Возведение в степень только через встроенный pow, без "редукций"
"""

import math
from typing import Final, Optional

from src.core.math.errors import ArgumentError, DomainError

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Число раундов по умолчанию для вероятностных тестов простоты
DEFAULT_CONFIDENCE: Final[int] = 10

# Число раундов production-пути (генерация простых)
PRODUCTION_CONFIDENCE: Final[int] = 20


# =============================================================================
# ПРОВЕРКА ТИПА
# =============================================================================


def is_integer(value: object) -> bool:
    """
    Проверка, что value является целым числом движка.

    bool формально наследует int, но как аргумент арифметики отвергается.

    Examples:
        >>> is_integer(10)
        True
        >>> is_integer(True)
        False
        >>> is_integer(10.0)
        False
    """
    return isinstance(value, int) and not isinstance(value, bool)


def require_integer(value: object, name: str) -> int:
    """
    Возвращает value, если это целое; иначе ArgumentError.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ArgumentError: Если value не int (или bool)
    """
    if not is_integer(value):
        raise ArgumentError(f"{name} must be an integer, got {type(value).__name__}")
    return value  # type: ignore[return-value]


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_positive(value: int, name: str) -> int:
    """
    Валидация, что значение целое и > 0.

    Raises:
        ArgumentError: Если value <= 0 или не int
    """
    require_integer(value, name)
    if value <= 0:
        raise ArgumentError(f"{name} must be positive, got {value}")
    return value


def validate_non_negative(value: int, name: str) -> int:
    """
    Валидация, что значение целое и >= 0.

    Raises:
        ArgumentError: Если value < 0 или не int
    """
    require_integer(value, name)
    if value < 0:
        raise ArgumentError(f"{name} must be non-negative, got {value}")
    return value


def validate_in_range(
    value: int,
    name: str,
    min_value: Optional[int] = None,
    max_value: Optional[int] = None,
) -> int:
    """
    Валидация, что значение в замкнутом диапазоне [min_value, max_value].

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Raises:
        ArgumentError: Если value вне диапазона или не int
    """
    require_integer(value, name)

    if min_value is not None and value < min_value:
        raise ArgumentError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ArgumentError(f"{name} must be <= {max_value}, got {value}")

    return value


def validate_confidence(k: int) -> int:
    """Число раундов вероятностного теста: целое >= 1."""
    return validate_in_range(k, "k", min_value=1)


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def decompose_power_of_two(n: int) -> tuple[int, int]:
    """
    Разложение n = d * 2^s с нечётным d.

    Используется тестами Миллера-Рабина для n - 1.

    Args:
        n: Положительное целое

    Returns:
        (d, s)

    Raises:
        ArgumentError: Если n <= 0

    Examples:
        >>> decompose_power_of_two(560)
        (35, 4)
        >>> decompose_power_of_two(7)
        (7, 0)
    """
    validate_positive(n, "n")

    # Число младших нулевых бит
    s = (n & -n).bit_length() - 1
    return n >> s, s


def integer_log(value: int, base: float = math.e) -> float:
    """
    Логарифм произвольно большого целого.

    math.log работает с int напрямую, без промежуточного перевода в float,
    поэтому переполнения для чисел > 2^1024 нет.

    Args:
        value: Аргумент логарифма (> 0)
        base: Основание (> 0 и != 1), по умолчанию e

    Returns:
        log_base(value)

    Raises:
        DomainError: Если value <= 0 или основание недопустимо

    Examples:
        >>> integer_log(1)
        0.0
        >>> round(integer_log(1024, 2), 12)
        10.0
    """
    require_integer(value, "value")

    if value <= 0:
        raise DomainError(f"Logarithm is undefined for non-positive values, got {value}")

    if base <= 0 or base == 1:
        raise DomainError(f"Logarithm base must be positive and != 1, got {base}")

    if base == math.e:
        return math.log(value)
    return math.log(value, base)
