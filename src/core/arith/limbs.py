"""
Limb Store — представление модуля числа в системе счисления BASE

Модуль описывает хранение модуля большого целого как последовательности
limbs (цифр по основанию 10000), младший limb первым:

- Разложение машинного int на limbs
- Разбор десятичной строки на limbs (группы по WIDTH символов с младшего конца)
- Нормализация: удаление старших нулевых limbs
- Десятичный рендеринг (старший limb без padding, остальные с zero-padding)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (после normalize_limbs):
1. Последовательность никогда не пустая (ноль = [0])
2. Нет старших нулевых limbs, кроме канонического нуля [0]
3. Каждый limb лежит в [0, BASE)
"""

from collections.abc import Sequence
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Основание системы счисления для limbs
BASE: Final[int] = 10000

# Количество десятичных цифр в одном limb (BASE == 10 ** WIDTH)
WIDTH: Final[int] = 4

_DIGIT_CHARS: Final[frozenset[str]] = frozenset("0123456789")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BigIntegerParseError(ValueError):
    """
    Некорректная десятичная запись большого целого.

    Допустимый формат: необязательный ведущий '-' и непустая
    последовательность ASCII-цифр. Значение не создаётся частично:
    ошибка поднимается до построения limbs.
    """

    pass


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize_limbs(limbs: list[int]) -> list[int]:
    """
    Удаление старших нулевых limbs (in-place).

    Пустой список превращается в канонический ноль [0].

    Args:
        limbs: Limbs, младший первым (все значения уже в [0, BASE))

    Returns:
        Тот же список без старших нулей

    Examples:
        >>> normalize_limbs([5, 0, 0])
        [5]
        >>> normalize_limbs([0, 0])
        [0]
        >>> normalize_limbs([])
        [0]
    """
    while len(limbs) > 1 and limbs[-1] == 0:
        limbs.pop()
    if not limbs:
        limbs.append(0)
    return limbs


def is_zero_limbs(limbs: Sequence[int]) -> bool:
    """True если limbs представляют канонический ноль."""
    return len(limbs) == 1 and limbs[0] == 0


# =============================================================================
# ПОСТРОЕНИЕ
# =============================================================================


def limbs_from_int(value: int) -> list[int]:
    """
    Разложение abs(value) на limbs, младший первым.

    Для нуля возвращается ровно один limb.

    Examples:
        >>> limbs_from_int(0)
        [0]
        >>> limbs_from_int(123456789)
        [6789, 2345, 1]
        >>> limbs_from_int(-10000)
        [0, 1]
    """
    value = abs(value)
    limbs = []
    while True:
        value, limb = divmod(value, BASE)
        limbs.append(limb)
        if value == 0:
            return limbs


def parse_decimal(text: str) -> tuple[list[int], bool]:
    """
    Разбор десятичной строки в (limbs, negative).

    Строка разбивается на группы до WIDTH символов начиная с младшего
    конца; старшая группа может быть короче. Ведущие нули допускаются
    и удаляются нормализацией, "-0" даёт неотрицательный ноль.

    Args:
        text: Строка вида -?[0-9]+

    Returns:
        (limbs, negative) — нормализованные limbs и флаг знака

    Raises:
        BigIntegerParseError: Пустая строка, одиночный '-', '+', пробелы
            или любые символы кроме ASCII-цифр

    Examples:
        >>> parse_decimal("123456789")
        ([6789, 2345, 1], False)
        >>> parse_decimal("-00042")
        ([42], True)
        >>> parse_decimal("-0")
        ([0], False)
    """
    if not isinstance(text, str):
        raise TypeError(f"decimal text must be str, got {type(text).__name__}")

    negative = text.startswith("-")
    body = text[1:] if negative else text

    if not body:
        raise BigIntegerParseError(f"no digits in decimal text {text!r}")
    # str.isdigit() пропускает unicode-цифры, поэтому проверяем ASCII явно
    if not _DIGIT_CHARS.issuperset(body):
        raise BigIntegerParseError(f"invalid decimal text {text!r}")

    limbs = []
    for end in range(len(body), 0, -WIDTH):
        limbs.append(int(body[max(0, end - WIDTH):end]))

    normalize_limbs(limbs)
    if is_zero_limbs(limbs):
        negative = False
    return limbs, negative


# =============================================================================
# РЕНДЕРИНГ
# =============================================================================


def render_decimal(limbs: Sequence[int], negative: bool) -> str:
    """
    Десятичная запись нормализованных limbs.

    '-' выводится только для строго отрицательных ненулевых значений.
    Старший limb без padding, каждый следующий дополняется нулями до WIDTH.

    Examples:
        >>> render_decimal([6789, 2345, 1], False)
        '123456789'
        >>> render_decimal([7, 0, 12], True)
        '-1200000007'
        >>> render_decimal([0], True)
        '0'
    """
    parts = [str(limbs[-1])]
    parts.extend(f"{limb:0{WIDTH}d}" for limb in reversed(limbs[:-1]))
    sign = "-" if negative and not is_zero_limbs(limbs) else ""
    return sign + "".join(parts)


def limbs_to_int(limbs: Sequence[int]) -> int:
    """Значение модуля как Python int (для конверсий и проверок)."""
    value = 0
    for limb in reversed(limbs):
        value = value * BASE + limb
    return value
