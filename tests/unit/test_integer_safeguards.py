"""
Тесты для модуля Integer Safeguards

Проверяет:
1. Проверку типа int (bool отвергается)
2. Валидацию параметров
3. Разложение n = d * 2^s
4. Логарифм больших целых
"""

import math

import pytest

from src.core.math.errors import ArgumentError, DomainError
from src.core.math.integer_safeguards import (
    DEFAULT_CONFIDENCE,
    PRODUCTION_CONFIDENCE,
    decompose_power_of_two,
    integer_log,
    is_integer,
    require_integer,
    validate_confidence,
    validate_in_range,
    validate_non_negative,
    validate_positive,
)

# =============================================================================
# ТЕСТЫ ТИПОВ
# =============================================================================


class TestIsInteger:
    """Тесты для is_integer и require_integer"""

    def test_ints_accepted(self) -> None:
        assert is_integer(0)
        assert is_integer(-5)
        assert is_integer(2**4096)

    def test_non_ints_rejected(self) -> None:
        assert not is_integer(1.0)
        assert not is_integer("1")
        assert not is_integer(None)

    def test_bool_rejected(self) -> None:
        """bool - подкласс int, но как число не принимается"""
        assert not is_integer(True)

    def test_require_integer_returns_value(self) -> None:
        assert require_integer(7, "n") == 7

    def test_require_integer_raises(self) -> None:
        with pytest.raises(ArgumentError, match="n must be an integer"):
            require_integer(7.5, "n")


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidation:
    """Тесты функций валидации"""

    def test_validate_positive(self) -> None:
        assert validate_positive(1, "x") == 1
        with pytest.raises(ArgumentError):
            validate_positive(0, "x")

    def test_validate_non_negative(self) -> None:
        assert validate_non_negative(0, "x") == 0
        with pytest.raises(ArgumentError):
            validate_non_negative(-1, "x")

    def test_validate_in_range(self) -> None:
        assert validate_in_range(5, "x", min_value=1, max_value=10) == 5
        assert validate_in_range(1, "x", min_value=1) == 1
        assert validate_in_range(10, "x", max_value=10) == 10

    def test_validate_in_range_out_of_bounds(self) -> None:
        with pytest.raises(ArgumentError, match=">= 2"):
            validate_in_range(1, "x", min_value=2)
        with pytest.raises(ArgumentError, match="<= 3"):
            validate_in_range(4, "x", max_value=3)

    def test_validate_confidence(self) -> None:
        assert validate_confidence(1) == 1
        with pytest.raises(ArgumentError):
            validate_confidence(0)

    def test_confidence_constants(self) -> None:
        assert DEFAULT_CONFIDENCE == 10
        assert PRODUCTION_CONFIDENCE == 20


# =============================================================================
# ТЕСТЫ УТИЛИТ
# =============================================================================


class TestDecomposePowerOfTwo:
    """Тесты для decompose_power_of_two"""

    @pytest.mark.parametrize(
        "n, expected",
        [(1, (1, 0)), (7, (7, 0)), (8, (1, 3)), (560, (35, 4)), (2**100 * 3, (3, 100))],
    )
    def test_known_values(self, n: int, expected: tuple[int, int]) -> None:
        assert decompose_power_of_two(n) == expected

    def test_reconstructs_n(self) -> None:
        for n in range(1, 200):
            d, s = decompose_power_of_two(n)
            assert d % 2 == 1
            assert d * 2**s == n

    def test_non_positive_rejected(self) -> None:
        with pytest.raises(ArgumentError):
            decompose_power_of_two(0)


class TestIntegerLog:
    """Тесты для integer_log"""

    def test_natural_log(self) -> None:
        assert integer_log(1) == 0.0
        assert math.isclose(integer_log(1000), math.log(1000))

    def test_with_base(self) -> None:
        assert math.isclose(integer_log(1024, 2), 10.0)

    def test_huge_value(self) -> None:
        """2^4096 не помещается в float, но логарифм считается"""
        assert math.isclose(integer_log(2**4096, 2), 4096.0)

    def test_non_positive_value(self) -> None:
        with pytest.raises(DomainError):
            integer_log(0)
        with pytest.raises(DomainError):
            integer_log(-8)

    def test_invalid_base(self) -> None:
        with pytest.raises(DomainError):
            integer_log(8, 1)
        with pytest.raises(DomainError):
            integer_log(8, 0)
