"""
Тесты для модуля Modular Arithmetic

Проверяет:
1. Обратные элементы (Ферма и Евклид)
2. CRT: известные системы, восстановление x, отрицательные остатки
3. Ошибки CRT: длины, модули, взаимная простота
"""

import math

import pytest

from src.core.math.errors import ArgumentError, ErrorKind
from src.core.math.modular import (
    chinese_remainder_theorem,
    least_common_multiple,
    mod_inverse,
    mod_inverse_fermat,
    normalize_mod,
    try_chinese_remainder_theorem,
    validate_pairwise_coprime,
)
from src.core.math.primality import generate_prime
from src.core.math.random_source import RandomSource

# =============================================================================
# ОБРАТНЫЕ ЭЛЕМЕНТЫ
# =============================================================================


class TestModInverseFermat:
    """Тесты для mod_inverse_fermat"""

    def test_known_value(self) -> None:
        assert mod_inverse_fermat(3, 11) == 4

    @pytest.mark.parametrize("p", [5, 7, 13, 101, 2**61 - 1])
    def test_inverse_property(self, p: int) -> None:
        for a in (1, 2, 3, p - 1):
            assert a * mod_inverse_fermat(a, p) % p == 1

    def test_invalid_arguments(self) -> None:
        with pytest.raises(ArgumentError):
            mod_inverse_fermat(0, 11)
        with pytest.raises(ArgumentError):
            mod_inverse_fermat(-3, 11)
        with pytest.raises(ArgumentError):
            mod_inverse_fermat(3, 1)


class TestModInverse:
    """Тесты для mod_inverse"""

    def test_known_value(self) -> None:
        assert mod_inverse(35, 3) == 2

    def test_composite_modulus(self) -> None:
        assert 7 * mod_inverse(7, 40) % 40 == 1

    def test_negative_value(self) -> None:
        assert mod_inverse(-3, 7) == 2

    def test_not_invertible(self) -> None:
        with pytest.raises(ArgumentError, match="not invertible"):
            mod_inverse(2, 4)

    def test_non_positive_modulus(self) -> None:
        with pytest.raises(ArgumentError):
            mod_inverse(3, 0)


class TestHelpers:
    """Тесты вспомогательных функций"""

    def test_normalize_mod(self) -> None:
        assert normalize_mod(-1, 5) == 4
        assert normalize_mod(12, 5) == 2

    @pytest.mark.parametrize("a, b, expected", [(4, 6, 12), (-4, 6, 12), (0, 5, 0), (7, 13, 91)])
    def test_lcm(self, a: int, b: int, expected: int) -> None:
        assert least_common_multiple(a, b) == expected

    def test_validate_pairwise_coprime(self) -> None:
        validate_pairwise_coprime([3, 5, 7])
        with pytest.raises(ArgumentError, match="pairwise coprime"):
            validate_pairwise_coprime([3, 5, 9])


# =============================================================================
# CRT
# =============================================================================


class TestChineseRemainderTheorem:
    """Тесты для chinese_remainder_theorem"""

    def test_classic_system(self) -> None:
        assert chinese_remainder_theorem([2, 3, 2], [3, 5, 7]) == 23

    def test_single_congruence(self) -> None:
        assert chinese_remainder_theorem([4], [7]) == 4
        assert chinese_remainder_theorem([11], [7]) == 4

    def test_negative_residues(self) -> None:
        assert chinese_remainder_theorem([-1], [5]) == 4
        assert chinese_remainder_theorem([-1, -1], [3, 5]) == 14

    def test_recovers_every_x(self) -> None:
        moduli = [3, 5, 7, 11]
        big_m = math.prod(moduli)
        for x in range(big_m):
            residues = [x % m for m in moduli]
            assert chinese_remainder_theorem(residues, moduli) == x

    def test_large_prime_moduli(self) -> None:
        rng = RandomSource.seeded(17)
        moduli = [generate_prime(128, rng) for _ in range(3)]
        moduli = list(dict.fromkeys(moduli))
        x = rng.random_in_range(0, math.prod(moduli))
        assert chinese_remainder_theorem([x % m for m in moduli], moduli) == x

    def test_result_in_range(self) -> None:
        x = chinese_remainder_theorem([100, -200, 300], [7, 11, 13])
        assert 0 <= x < 7 * 11 * 13

    def test_length_mismatch(self) -> None:
        with pytest.raises(ArgumentError, match="must be equal"):
            chinese_remainder_theorem([1, 2], [3])

    def test_non_positive_modulus(self) -> None:
        with pytest.raises(ArgumentError):
            chinese_remainder_theorem([1, 2], [3, 0])

    def test_non_coprime_moduli(self) -> None:
        with pytest.raises(ArgumentError, match="pairwise coprime"):
            chinese_remainder_theorem([1, 2], [4, 6])

    def test_non_integer_residue(self) -> None:
        with pytest.raises(ArgumentError):
            chinese_remainder_theorem([1.5], [3])


class TestTryChineseRemainderTheorem:
    """Тесты для try_chinese_remainder_theorem"""

    def test_success(self) -> None:
        result = try_chinese_remainder_theorem([2, 3, 2], [3, 5, 7])
        assert result.ok
        assert result.value == 23

    def test_failure(self) -> None:
        result = try_chinese_remainder_theorem([1, 2], [4, 6])
        assert result.error_kind == ErrorKind.ARGUMENT
