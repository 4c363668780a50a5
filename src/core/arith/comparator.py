"""
Comparator — сравнение модулей нормализованных limbs

Оба операнда обязаны быть нормализованы (нет старших нулевых limbs),
поэтому меньшее количество limbs означает меньший модуль.
"""

from collections.abc import Sequence


def compare_magnitude(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Трёхзначное сравнение модулей.

    Сначала по количеству limbs, затем от старшего limb к младшему:
    первое несовпадение решает.

    Returns:
        -1 если |a| < |b|, 0 если равны, +1 если |a| > |b|

    Examples:
        >>> compare_magnitude([1, 1], [9999])
        1
        >>> compare_magnitude([3, 2], [4, 2])
        -1
        >>> compare_magnitude([0], [0])
        0
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1

    return 0


def less_than_magnitude(a: Sequence[int], b: Sequence[int]) -> bool:
    """True если |a| < |b|. Равные модули дают False."""
    return compare_magnitude(a, b) < 0
