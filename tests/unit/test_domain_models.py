"""
Тесты для Pydantic domain моделей

Проверяет:
1. FactorMultiset: валидация порядка, множителей и произведения
2. FactorMultiset: кратности, различные простые, сериализацию
3. CRTSystem: структуру, решение, неизменяемость
"""

import pytest
from pydantic import ValidationError

from src.core.domain import CRTSystem, FactorMultiset
from src.core.math.errors import ArgumentError

# =============================================================================
# FACTOR MULTISET
# =============================================================================


class TestFactorMultiset:
    """Тесты для FactorMultiset"""

    def test_valid(self) -> None:
        multiset = FactorMultiset(n=360, factors=(2, 2, 2, 3, 3, 5))
        assert multiset.n == 360
        assert multiset.multiplicities() == {2: 3, 3: 2, 5: 1}
        assert multiset.distinct_primes() == (2, 3, 5)
        assert not multiset.is_prime()

    def test_one_has_no_factors(self) -> None:
        multiset = FactorMultiset(n=1)
        assert multiset.factors == ()
        assert multiset.multiplicities() == {}

    def test_prime(self) -> None:
        assert FactorMultiset(n=2**61 - 1, factors=(2**61 - 1,)).is_prime()

    def test_list_coerced_to_tuple(self) -> None:
        assert FactorMultiset(n=6, factors=[2, 3]).factors == (2, 3)

    def test_unsorted_rejected(self) -> None:
        with pytest.raises(ValidationError, match="ascending"):
            FactorMultiset(n=6, factors=(3, 2))

    def test_factor_below_two_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FactorMultiset(n=6, factors=(1, 2, 3))

    def test_wrong_product_rejected(self) -> None:
        with pytest.raises(ValidationError, match="product"):
            FactorMultiset(n=12, factors=(2, 3))

    def test_non_positive_n_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FactorMultiset(n=0, factors=())

    def test_frozen(self) -> None:
        multiset = FactorMultiset(n=6, factors=(2, 3))
        with pytest.raises(ValidationError):
            multiset.n = 7

    def test_large_factors(self) -> None:
        multiset = FactorMultiset(n=2**64 + 1, factors=(274177, 67280421310721))
        assert multiset.distinct_primes() == (274177, 67280421310721)
        assert multiset == FactorMultiset(n=2**64 + 1, factors=[274177, 67280421310721])


# =============================================================================
# CRT SYSTEM
# =============================================================================


class TestCRTSystem:
    """Тесты для CRTSystem"""

    def test_solve(self) -> None:
        system = CRTSystem(residues=(2, 3, 2), moduli=(3, 5, 7))
        assert system.solve() == 23

    def test_length_mismatch_rejected(self) -> None:
        with pytest.raises(ValidationError, match="equal length"):
            CRTSystem(residues=(1, 2), moduli=(3,))

    def test_non_positive_modulus_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CRTSystem(residues=(1,), moduli=(0,))

    def test_non_coprime_detected_on_solve(self) -> None:
        """Модель структурно валидна, взаимную простоту проверяет solve"""
        system = CRTSystem(residues=(1, 2), moduli=(4, 6))
        with pytest.raises(ArgumentError):
            system.solve()

    def test_frozen(self) -> None:
        system = CRTSystem(residues=(1,), moduli=(3,))
        with pytest.raises(ValidationError):
            system.moduli = (5,)

    def test_negative_residues(self) -> None:
        system = CRTSystem(residues=(-1, 4), moduli=(3, 5))
        assert system.solve() == 14
