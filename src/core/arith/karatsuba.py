"""
Multiplicative Engine — умножение модулей методом Karatsuba

Рекурсивное divide-and-conquer умножение "сырых" последовательностей limbs:
- Base case (длинный операнд <= threshold limbs): прямая квадратичная свёртка
- Recursive case: три умножения половин вместо четырёх, O(n^1.585)

Промежуточные позиции НЕ нормализуются: они могут превышать BASE и быть
отрицательными (после вычитания z0 и z2 из среднего члена). Перенос
выполняется один раз в carry_normalize после всей рекурсии. Итоговая
сумма в каждой позиции неотрицательна по алгебраическому тождеству,
а не позиция за позицией на промежуточных уровнях.

Функции чистые: каждый вызов работает со своими буферами и не изменяет
входные последовательности.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from src.core.arith.additive import raw_accumulate, raw_add, raw_subtract_inplace
from src.core.arith.limbs import BASE, normalize_limbs

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Порог base case: при длине длинного операнда <= порога используется
# квадратичная свёртка (32 limbs ~ 128 десятичных цифр)
KARATSUBA_THRESHOLD: Final[int] = 32


@dataclass(frozen=True)
class MultiplicationConfig:
    """Конфигурация умножения.

    threshold — длина (в limbs), начиная с которой рекурсия прекращается.
    """

    threshold: int = KARATSUBA_THRESHOLD

    def __post_init__(self) -> None:
        _validate_threshold(self.threshold)


def _validate_threshold(threshold: int) -> None:
    if threshold < 1:
        raise ValueError(f"threshold must be >= 1, got {threshold}")


# =============================================================================
# BASE CASE
# =============================================================================


def schoolbook_multiply(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Квадратичная свёртка: res[i + j] += a[i] * b[j].

    Результат длины len(a) + len(b), позиции не нормализованы.

    Examples:
        >>> schoolbook_multiply([9999], [9999])
        [99980001, 0]
    """
    if not a or not b:
        return []
    result = [0] * (len(a) + len(b))
    for i, a_limb in enumerate(a):
        if a_limb == 0:
            continue
        for j, b_limb in enumerate(b):
            result[i + j] += a_limb * b_limb
    return result


# =============================================================================
# KARATSUBA
# =============================================================================


def magnitude_multiply(
    a: Sequence[int],
    b: Sequence[int],
    threshold: int = KARATSUBA_THRESHOLD,
) -> list[int]:
    """
    Рекурсивное умножение сырых последовательностей limbs.

    Алгоритм (n = len(a) >= len(b), k = n // 2):
        a = a1 + a2 * BASE^k,  b = b1 + b2 * BASE^k
        z0 = a1 * b1
        z2 = a2 * b2
        z1 = (a1 + a2) * (b1 + b2) - z0 - z2
        result = z0 + z1 * BASE^k + z2 * BASE^(2k)

    b разбивается в точке min(len(b), k), поэтому b2 может быть пустым
    (тогда z2 пустой).

    Args:
        a: Первый операнд (сырые limbs, неотрицательные)
        b: Второй операнд (сырые limbs, неотрицательные)
        threshold: Порог base case (default: KARATSUBA_THRESHOLD)

    Returns:
        Ненормализованные позиции произведения; пустой список, если
        любой операнд пуст

    Raises:
        ValueError: Если threshold < 1
    """
    _validate_threshold(threshold)
    return _karatsuba(a, b, threshold)


def _karatsuba(a: Sequence[int], b: Sequence[int], threshold: int) -> list[int]:
    if len(a) < len(b):
        a, b = b, a
    n = len(a)
    if not b:
        return []
    if n <= threshold:
        return schoolbook_multiply(a, b)

    k = n // 2
    split_b = min(len(b), k)

    a1, a2 = a[:k], a[k:]
    b1, b2 = b[:split_b], b[split_b:]

    z0 = _karatsuba(a1, b1, threshold)
    z2 = _karatsuba(a2, b2, threshold)

    z1 = _karatsuba(raw_add(a1, a2), raw_add(b1, b2), threshold)
    raw_subtract_inplace(z1, z0)
    raw_subtract_inplace(z1, z2)

    result = [0] * (len(z0) + 2 * (n - k))
    raw_accumulate(result, z0, 0)
    raw_accumulate(result, z1, k)
    raw_accumulate(result, z2, 2 * k)
    return result


# =============================================================================
# ФИНАЛЬНЫЙ ПЕРЕНОС
# =============================================================================


def carry_normalize(raw: Sequence[int]) -> list[int]:
    """
    Единственный проход переноса по сырым позициям произведения.

    divmod по Python int даёт limb в [0, BASE) и для отрицательных
    промежуточных позиций; остаток переноса после последней позиции
    неотрицателен, если итоговое значение неотрицательно.

    Raises:
        ValueError: Если суммарное значение отрицательно (сырые позиции
            не являются результатом magnitude_multiply)

    Examples:
        >>> carry_normalize([99980001, 0])
        [1, 9998]
        >>> carry_normalize([-1, 1])
        [9999]
        >>> carry_normalize([])
        [0]
    """
    result = []
    carry = 0
    for value in raw:
        carry, limb = divmod(value + carry, BASE)
        result.append(limb)

    if carry < 0:
        raise ValueError("raw limb positions sum to a negative value")

    while carry:
        carry, limb = divmod(carry, BASE)
        result.append(limb)

    return normalize_limbs(result)


def multiply_magnitudes(
    a: Sequence[int],
    b: Sequence[int],
    threshold: int = KARATSUBA_THRESHOLD,
) -> list[int]:
    """Произведение нормализованных модулей (рекурсия + перенос + нормализация)."""
    return carry_normalize(magnitude_multiply(a, b, threshold))
