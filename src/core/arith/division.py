"""
Divisive Engine — деление модуля на одно машинное слово

Классическое деление столбиком от старшего limb к младшему за один
линейный проход: cur = r * BASE + limb, q_limb = cur // d, r = cur % d.
Знаковая конвенция (floor division) применяется в BigInteger.
"""

from collections.abc import Sequence
from typing import Final

from src.core.arith.limbs import BASE, normalize_limbs

# Диапазон делителя: знаковое 64-битное машинное слово
DIVISOR_MIN: Final[int] = -(2**63)
DIVISOR_MAX: Final[int] = 2**63 - 1


def validate_divisor(divisor: int) -> None:
    """
    Проверка делителя.

    Raises:
        TypeError: Если divisor не int (bool также отвергается)
        ZeroDivisionError: Если divisor == 0
        ValueError: Если divisor вне [DIVISOR_MIN, DIVISOR_MAX]
    """
    if isinstance(divisor, bool) or not isinstance(divisor, int):
        raise TypeError(f"divisor must be int, got {type(divisor).__name__}")
    if divisor == 0:
        raise ZeroDivisionError("BigInteger division by zero")
    if not DIVISOR_MIN <= divisor <= DIVISOR_MAX:
        raise ValueError(
            f"divisor {divisor} outside machine word range "
            f"[{DIVISOR_MIN}, {DIVISOR_MAX}]"
        )


def divmod_magnitude(limbs: Sequence[int], divisor: int) -> tuple[list[int], int]:
    """
    Деление модуля на положительный делитель.

    Args:
        limbs: Нормализованный модуль делимого
        divisor: Положительный делитель

    Returns:
        (quotient_limbs, remainder): нормализованное частное и остаток
        в [0, divisor)

    Examples:
        >>> divmod_magnitude([6789, 2345, 1], 1000)
        ([3456, 12], 789)
        >>> divmod_magnitude([7], 10)
        ([0], 7)
    """
    if divisor <= 0:
        raise ValueError(f"divisor must be positive, got {divisor}")

    quotient = [0] * len(limbs)
    remainder = 0
    for i in range(len(limbs) - 1, -1, -1):
        current = remainder * BASE + limbs[i]
        quotient[i], remainder = divmod(current, divisor)

    return normalize_limbs(quotient), remainder
