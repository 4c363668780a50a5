"""
Additive Engine — беззнаковые сложение и вычитание limbs

Знаковая логика (сведение всех комбинаций знаков к сложению модулей или
к вычитанию |a| - |b| при |a| >= |b|) находится в BigInteger; здесь только
примитивы над модулями.

Также модуль содержит "сырые" поэлементные операции без переноса, которые
Multiplicative Engine использует для промежуточных сумм: значения позиций
в них могут выходить за пределы [0, BASE), в том числе быть отрицательными.
"""

from collections.abc import Sequence

from src.core.arith.limbs import BASE, normalize_limbs


# =============================================================================
# МОДУЛИ (С ПЕРЕНОСОМ / ЗАЁМОМ)
# =============================================================================


def add_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Сложение модулей с переносом.

    Перенос распространяется, пока у любого операнда остаются limbs
    или есть незакрытый carry.

    Examples:
        >>> add_magnitudes([9999, 9999], [1])
        [0, 0, 1]
        >>> add_magnitudes([0], [0])
        [0]
    """
    result = []
    carry = 0
    i = 0
    while i < len(a) or i < len(b) or carry:
        total = carry
        if i < len(a):
            total += a[i]
        if i < len(b):
            total += b[i]
        carry, limb = divmod(total, BASE)
        result.append(limb)
        i += 1
    return normalize_limbs(result)


def subtract_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Вычитание модулей |a| - |b| с заёмом.

    Предусловие: |a| >= |b| (проверяется вызывающей стороной через
    compare_magnitude). Цепочка заёма при этом всегда закрывается.

    Raises:
        ValueError: Если |a| < |b| (заём остался после старшего limb)

    Examples:
        >>> subtract_magnitudes([0, 0, 1], [1])
        [9999, 9999]
        >>> subtract_magnitudes([5], [5])
        [0]
    """
    result = []
    borrow = 0
    for i in range(len(a)):
        diff = a[i] - borrow - (b[i] if i < len(b) else 0)
        if diff < 0:
            diff += BASE
            borrow = 1
        else:
            borrow = 0
        result.append(diff)

    if borrow or len(b) > len(a):
        raise ValueError("subtract_magnitudes requires |a| >= |b|")

    return normalize_limbs(result)


# =============================================================================
# СЫРЫЕ ПОЭЛЕМЕНТНЫЕ ОПЕРАЦИИ (БЕЗ ПЕРЕНОСА)
# =============================================================================


def raw_add(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """
    Поэлементная сумма без переноса; длина = max(len(a), len(b)).

    Examples:
        >>> raw_add([9999, 1], [9999])
        [19998, 1]
    """
    if len(a) < len(b):
        a, b = b, a
    result = list(a)
    for i, value in enumerate(b):
        result[i] += value
    return result


def raw_subtract_inplace(target: list[int], values: Sequence[int]) -> list[int]:
    """
    Поэлементное вычитание values из target без заёма.

    target расширяется нулями, если values длиннее. Позиции могут стать
    отрицательными; они разрешаются финальным проходом переноса.
    """
    if len(values) > len(target):
        target.extend([0] * (len(values) - len(target)))
    for i, value in enumerate(values):
        target[i] -= value
    return target


def raw_accumulate(target: list[int], values: Sequence[int], offset: int) -> list[int]:
    """
    target[i + offset] += values[i] для всех i, с расширением target нулями.
    """
    needed = offset + len(values)
    if needed > len(target):
        target.extend([0] * (needed - len(target)))
    for i, value in enumerate(values):
        target[i + offset] += value
    return target
