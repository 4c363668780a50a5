"""
Тесты для Divisive Engine (уровень модулей)

Проверяет:
1. Деление столбиком: частное и остаток за один проход
2. Валидацию делителя (тип, ноль, диапазон машинного слова)
"""

import random

import pytest

from src.core.arith.division import (
    DIVISOR_MAX,
    DIVISOR_MIN,
    divmod_magnitude,
    validate_divisor,
)
from src.core.arith.limbs import limbs_from_int, limbs_to_int


class TestDivmodMagnitude:
    """Тесты для divmod_magnitude"""

    def test_truncates_last_decimal_digits(self) -> None:
        quotient, remainder = divmod_magnitude(limbs_from_int(123456789), 1000)
        assert quotient == [3456, 12]
        assert remainder == 789

    def test_dividend_smaller_than_divisor(self) -> None:
        assert divmod_magnitude([7], 10) == ([0], 7)

    def test_divide_by_one(self) -> None:
        limbs = limbs_from_int(98765432101234)
        assert divmod_magnitude(limbs, 1) == (limbs, 0)

    def test_zero_dividend(self) -> None:
        assert divmod_magnitude([0], 17) == ([0], 0)

    def test_quotient_normalized(self) -> None:
        quotient, _ = divmod_magnitude([0, 0, 1], 10001)
        assert quotient[-1] != 0

    def test_large_divisor(self) -> None:
        dividend = 10**80 + 12345
        quotient, remainder = divmod_magnitude(limbs_from_int(dividend), DIVISOR_MAX)
        assert limbs_to_int(quotient) == dividend // DIVISOR_MAX
        assert remainder == dividend % DIVISOR_MAX

    def test_matches_int_divmod(self) -> None:
        rng = random.Random(7)
        for _ in range(200):
            dividend = rng.randrange(10**rng.randint(1, 80))
            divisor = rng.randint(1, 10**rng.randint(1, 18))
            quotient, remainder = divmod_magnitude(limbs_from_int(dividend), divisor)
            assert (limbs_to_int(quotient), remainder) == divmod(dividend, divisor)

    def test_non_positive_divisor_rejected(self) -> None:
        with pytest.raises(ValueError, match="must be positive"):
            divmod_magnitude([5], -1)


class TestValidateDivisor:
    """Тесты для validate_divisor"""

    def test_accepts_machine_word_range(self) -> None:
        for divisor in (1, -1, DIVISOR_MIN, DIVISOR_MAX):
            validate_divisor(divisor)

    def test_zero_rejected(self) -> None:
        with pytest.raises(ZeroDivisionError):
            validate_divisor(0)

    def test_out_of_range_rejected(self) -> None:
        with pytest.raises(ValueError, match="machine word range"):
            validate_divisor(DIVISOR_MAX + 1)
        with pytest.raises(ValueError, match="machine word range"):
            validate_divisor(DIVISOR_MIN - 1)

    @pytest.mark.parametrize("divisor", [True, 2.0, "3", None])
    def test_non_int_rejected(self, divisor: object) -> None:
        with pytest.raises(TypeError, match="must be int"):
            validate_divisor(divisor)  # type: ignore[arg-type]
