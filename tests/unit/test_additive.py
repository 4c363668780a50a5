"""
Тесты для Comparator и Additive Engine (уровень модулей)

Проверяет:
1. Сравнение модулей: по длине, затем от старшего limb
2. Сложение модулей с распространением переноса
3. Вычитание модулей с заёмом и предусловие |a| >= |b|
4. Сырые поэлементные операции без переноса
"""

import random

import pytest

from src.core.arith.additive import (
    add_magnitudes,
    raw_accumulate,
    raw_add,
    raw_subtract_inplace,
    subtract_magnitudes,
)
from src.core.arith.comparator import compare_magnitude, less_than_magnitude
from src.core.arith.limbs import limbs_from_int, limbs_to_int


@pytest.fixture
def rng() -> random.Random:
    return random.Random(20240917)


# =============================================================================
# COMPARATOR
# =============================================================================


class TestCompareMagnitude:
    """Тесты для compare_magnitude / less_than_magnitude"""

    def test_fewer_limbs_is_smaller(self) -> None:
        assert compare_magnitude([9999], [0, 1]) == -1
        assert less_than_magnitude([9999], [0, 1])

    def test_more_limbs_is_larger(self) -> None:
        assert compare_magnitude([0, 0, 1], [9999, 9999]) == 1
        assert not less_than_magnitude([0, 0, 1], [9999, 9999])

    def test_most_significant_mismatch_decides(self) -> None:
        assert compare_magnitude([9999, 1], [0, 2]) == -1
        assert compare_magnitude([0, 2], [9999, 1]) == 1

    def test_equal(self) -> None:
        assert compare_magnitude([1, 2, 3], [1, 2, 3]) == 0
        assert not less_than_magnitude([1, 2, 3], [1, 2, 3])
        assert not less_than_magnitude([0], [0])

    def test_matches_int_ordering(self, rng: random.Random) -> None:
        for _ in range(200):
            x = rng.randrange(10**rng.randint(1, 30))
            y = rng.randrange(10**rng.randint(1, 30))
            expected = (x > y) - (x < y)
            assert compare_magnitude(limbs_from_int(x), limbs_from_int(y)) == expected


# =============================================================================
# СЛОЖЕНИЕ МОДУЛЕЙ
# =============================================================================


class TestAddMagnitudes:
    """Тесты для add_magnitudes"""

    def test_simple(self) -> None:
        assert add_magnitudes([2], [3]) == [5]

    def test_carry_chain_extends_length(self) -> None:
        assert add_magnitudes([9999, 9999], [1]) == [0, 0, 1]

    def test_operands_of_different_length(self) -> None:
        assert add_magnitudes([1], [0, 0, 5]) == [1, 0, 5]

    def test_zero(self) -> None:
        assert add_magnitudes([0], [0]) == [0]
        assert add_magnitudes([0], [7, 1]) == [7, 1]

    def test_does_not_mutate_operands(self) -> None:
        a, b = [9999], [1]
        add_magnitudes(a, b)
        assert a == [9999]
        assert b == [1]

    def test_matches_int_addition(self, rng: random.Random) -> None:
        for _ in range(200):
            x = rng.randrange(10**rng.randint(1, 60))
            y = rng.randrange(10**rng.randint(1, 60))
            result = add_magnitudes(limbs_from_int(x), limbs_from_int(y))
            assert limbs_to_int(result) == x + y
            assert len(result) == 1 or result[-1] != 0


# =============================================================================
# ВЫЧИТАНИЕ МОДУЛЕЙ
# =============================================================================


class TestSubtractMagnitudes:
    """Тесты для subtract_magnitudes"""

    def test_simple(self) -> None:
        assert subtract_magnitudes([5], [3]) == [2]

    def test_borrow_chain(self) -> None:
        assert subtract_magnitudes([0, 0, 1], [1]) == [9999, 9999]

    def test_equal_operands_give_zero(self) -> None:
        assert subtract_magnitudes([1, 2, 3], [1, 2, 3]) == [0]

    def test_result_normalized(self) -> None:
        assert subtract_magnitudes([5, 0, 1], [0, 0, 1]) == [5]

    def test_smaller_minuend_rejected(self) -> None:
        with pytest.raises(ValueError, match=r"\|a\| >= \|b\|"):
            subtract_magnitudes([1], [2])
        with pytest.raises(ValueError):
            subtract_magnitudes([9999], [0, 1])

    def test_matches_int_subtraction(self, rng: random.Random) -> None:
        for _ in range(200):
            x = rng.randrange(10**rng.randint(1, 60))
            y = rng.randrange(10**rng.randint(1, 60))
            x, y = max(x, y), min(x, y)
            result = subtract_magnitudes(limbs_from_int(x), limbs_from_int(y))
            assert limbs_to_int(result) == x - y
            assert len(result) == 1 or result[-1] != 0


# =============================================================================
# СЫРЫЕ ОПЕРАЦИИ
# =============================================================================


class TestRawOperations:
    """Поэлементные операции без переноса"""

    def test_raw_add_keeps_oversized_positions(self) -> None:
        assert raw_add([9999, 1], [9999]) == [19998, 1]
        assert raw_add([1], [2, 3, 4]) == [3, 3, 4]

    def test_raw_add_does_not_mutate(self) -> None:
        a = [1, 2]
        raw_add(a, [5, 5, 5])
        assert a == [1, 2]

    def test_raw_subtract_allows_negative_positions(self) -> None:
        target = [5, 1]
        assert raw_subtract_inplace(target, [7, 0, 2]) == [-2, 1, -2]
        assert target == [-2, 1, -2]

    def test_raw_accumulate_with_offset(self) -> None:
        assert raw_accumulate([1, 1], [5, 6], 1) == [1, 6, 6]
        assert raw_accumulate([0], [3], 3) == [0, 0, 0, 3]
