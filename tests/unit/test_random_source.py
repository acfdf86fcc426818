"""
Тесты для RandomSource

Проверяет:
1. Стойкий источник по умолчанию
2. Детерминизм seeded-источника
3. Границы всех диапазонов
4. Валидацию аргументов до обращения к генератору
"""

import pytest

from src.core.math.errors import ArgumentError
from src.core.math.random_source import (
    RandomSource,
    default_random_source,
    resolve_random_source,
)


@pytest.fixture
def rng() -> RandomSource:
    return RandomSource.seeded(12345)


class TestConstruction:
    """Тесты создания источника"""

    def test_default_is_secure(self) -> None:
        assert RandomSource().is_secure
        assert RandomSource.secure().is_secure

    def test_seeded_is_not_secure(self) -> None:
        assert not RandomSource.seeded(1).is_secure

    def test_seeded_is_deterministic(self) -> None:
        a = RandomSource.seeded(7)
        b = RandomSource.seeded(7)
        assert [a.random_bits(64) for _ in range(5)] == [b.random_bits(64) for _ in range(5)]

    def test_module_default_is_secure(self) -> None:
        assert default_random_source().is_secure

    def test_resolve(self, rng: RandomSource) -> None:
        assert resolve_random_source(rng) is rng
        assert resolve_random_source(None) is default_random_source()


class TestRanges:
    """Тесты диапазонов"""

    def test_randbelow(self, rng: RandomSource) -> None:
        for _ in range(200):
            assert 0 <= rng.randbelow(10) < 10
        assert rng.randbelow(1) == 0

    def test_randint_inclusive(self, rng: RandomSource) -> None:
        seen = {rng.randint(2, 4) for _ in range(300)}
        assert seen == {2, 3, 4}

    def test_randint_single_value(self, rng: RandomSource) -> None:
        assert rng.randint(5, 5) == 5

    def test_random_bits(self, rng: RandomSource) -> None:
        for _ in range(100):
            assert 0 <= rng.random_bits(256) < 2**256

    def test_random_in_range_half_open(self, rng: RandomSource) -> None:
        seen = {rng.random_in_range(10, 13) for _ in range(300)}
        assert seen == {10, 11, 12}

    def test_random_in_range_big(self, rng: RandomSource) -> None:
        low, high = 2**511, 2**512
        for _ in range(20):
            assert low <= rng.random_in_range(low, high) < high

    def test_random_bit_length_range(self, rng: RandomSource) -> None:
        for _ in range(100):
            assert rng.random_bit_length_range(8, 16) < 2**15

    def test_random_bit_length_range_equal(self, rng: RandomSource) -> None:
        for _ in range(50):
            assert rng.random_bit_length_range(8, 8) < 2**8


class TestArgumentValidation:
    """Тесты валидации"""

    def test_randbelow_non_positive(self, rng: RandomSource) -> None:
        with pytest.raises(ArgumentError):
            rng.randbelow(0)

    def test_randint_inverted(self, rng: RandomSource) -> None:
        with pytest.raises(ArgumentError):
            rng.randint(5, 4)

    def test_random_bits_non_positive(self, rng: RandomSource) -> None:
        with pytest.raises(ArgumentError):
            rng.random_bits(0)

    def test_random_in_range_empty(self, rng: RandomSource) -> None:
        with pytest.raises(ArgumentError):
            rng.random_in_range(5, 5)

    def test_random_bit_length_range_inverted(self, rng: RandomSource) -> None:
        with pytest.raises(ArgumentError):
            rng.random_bit_length_range(16, 8)

    def test_random_bit_length_range_non_positive(self, rng: RandomSource) -> None:
        with pytest.raises(ArgumentError):
            rng.random_bit_length_range(0, 8)
