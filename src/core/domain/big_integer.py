"""
BigInteger — знаковое целое произвольной точности

Immutable Pydantic модель: модуль хранится как limbs по основанию BASE
(младший первым), знак — отдельным флагом. Каждая операция возвращает
новый экземпляр, операнды не изменяются.

Знаковая логика:
- Сложение одинаковых знаков → сложение модулей, знак общий
- Сложение разных знаков → вычитание: (-x) + y = y - x, x + (-y) = x - y
- Вычитание разных знаков → сложение: a - b = a + (-b)
- Вычитание одинаковых знаков при |a| < |b| → -(b - a)
- Умножение → произведение модулей, знак = XOR знаков
- Деление на int → floor division (как // и divmod для Python int)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (проверяются валидаторами):
1. digits никогда не пустой (ноль = (0,))
2. Нет старших нулевых limbs, кроме канонического нуля
3. Каждый limb в [0, BASE)
4. Ноль никогда не имеет negative=True
"""

import logging
from typing import Optional, TextIO

from pydantic import BaseModel, Field, StrictBool, StrictInt, field_validator, model_validator

from src.core.arith.additive import add_magnitudes, subtract_magnitudes
from src.core.arith.comparator import compare_magnitude, less_than_magnitude
from src.core.arith.division import divmod_magnitude, validate_divisor
from src.core.arith.karatsuba import MultiplicationConfig, multiply_magnitudes
from src.core.arith.limbs import (
    BASE,
    is_zero_limbs,
    limbs_from_int,
    limbs_to_int,
    normalize_limbs,
    parse_decimal,
    render_decimal,
)

logger = logging.getLogger(__name__)

_DEFAULT_MULTIPLICATION = MultiplicationConfig()


# =============================================================================
# BIG INTEGER MODEL
# =============================================================================


class BigInteger(BaseModel):
    """
    Знаковое целое произвольной точности.

    Immutable модель (frozen=True): все операции создают новый экземпляр.
    Каноническое представление гарантирует, что структурное равенство
    (==) совпадает с численным; int-операнды сравниваются через from_int.

    Examples:
        >>> a = BigInteger.from_str("-50")
        >>> b = BigInteger.from_int(30)
        >>> str(a + b), str(a - b), str(a * b)
        ('-20', '-80', '-1500')
    """

    # strict: без приведения "12" → 12 и "yes" → True при прямом построении
    digits: tuple[StrictInt, ...] = Field(
        default=(0,), min_length=1, strict=True, description="Limbs модуля, младший первым"
    )
    negative: StrictBool = Field(
        default=False, strict=True, description="True для строго отрицательных"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("digits")
    @classmethod
    def validate_limbs(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Каждый limb в [0, BASE) и нет старших нулевых limbs."""
        for limb in v:
            if not 0 <= limb < BASE:
                raise ValueError(f"limb {limb} outside [0, {BASE})")
        if len(v) > 1 and v[-1] == 0:
            raise ValueError("digits must not have leading (most-significant) zero limbs")
        return v

    @model_validator(mode="after")
    def validate_zero_sign(self) -> "BigInteger":
        """Отрицательный ноль запрещён."""
        if self.negative and is_zero_limbs(self.digits):
            raise ValueError("zero must not be negative")
        return self

    # =========================================================================
    # ПОСТРОЕНИЕ
    # =========================================================================

    @classmethod
    def _from_limbs(cls, limbs: list[int], negative: bool) -> "BigInteger":
        normalize_limbs(limbs)
        return cls(digits=tuple(limbs), negative=negative and not is_zero_limbs(limbs))

    @classmethod
    def zero(cls) -> "BigInteger":
        return cls()

    @classmethod
    def from_int(cls, value: int) -> "BigInteger":
        """
        Построение из Python int.

        Raises:
            TypeError: Если value не int (bool также отвергается)

        Examples:
            >>> BigInteger.from_int(-123456789).digits
            (6789, 2345, 1)
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"value must be int, got {type(value).__name__}")
        return cls._from_limbs(limbs_from_int(value), value < 0)

    @classmethod
    def from_str(cls, text: str) -> "BigInteger":
        """
        Построение из десятичной строки -?[0-9]+.

        Ведущие нули и "-0" допускаются и нормализуются.

        Raises:
            BigIntegerParseError: Для пустой строки, одиночного '-',
                '+', пробелов и не-ASCII-цифр
        """
        limbs, negative = parse_decimal(text)
        return cls._from_limbs(limbs, negative)

    # =========================================================================
    # ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    def __str__(self) -> str:
        return render_decimal(self.digits, self.negative)

    def __repr__(self) -> str:
        return f"BigInteger('{self}')"

    def to_int(self) -> int:
        magnitude = limbs_to_int(self.digits)
        return -magnitude if self.negative else magnitude

    def __int__(self) -> int:
        return self.to_int()

    def is_zero(self) -> bool:
        return is_zero_limbs(self.digits)

    def __bool__(self) -> bool:
        return not self.is_zero()

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def less_than(self, other: "BigInteger") -> bool:
        """
        Строгий знаковый порядок.

        Разные знаки: меньше отрицательный операнд (ноль никогда не
        отрицателен, поэтому 0 vs -x решается корректно). Одинаковые
        знаки: сравнение модулей, для отрицательных — в обратную сторону.
        """
        if self.negative != other.negative:
            return self.negative
        if self.negative:
            return less_than_magnitude(other.digits, self.digits)
        return less_than_magnitude(self.digits, other.digits)

    def compare(self, other: "BigInteger") -> int:
        """-1 / 0 / +1 по численному значению."""
        if self.negative != other.negative:
            return -1 if self.negative else 1
        result = compare_magnitude(self.digits, other.digits)
        return -result if self.negative else result

    def __lt__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.less_than(rhs)

    def __gt__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return rhs.less_than(self)

    def __le__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return not rhs.less_than(self)

    def __ge__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return not self.less_than(rhs)

    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.digits == rhs.digits and self.negative == rhs.negative

    def __hash__(self) -> int:
        # Согласовано с == для int: hash(x) == hash(int(x))
        return hash(self.to_int())

    # =========================================================================
    # ADDITIVE
    # =========================================================================

    def negate(self) -> "BigInteger":
        """Смена знака; ноль остаётся неотрицательным."""
        if self.is_zero():
            return self
        return BigInteger(digits=self.digits, negative=not self.negative)

    def add(self, other: "BigInteger") -> "BigInteger":
        """
        Знаковое сложение.

        Одинаковые знаки → сложение модулей с переносом.
        Разные знаки → делегирование в subtract.
        """
        if self.negative == other.negative:
            return BigInteger._from_limbs(
                add_magnitudes(self.digits, other.digits), self.negative
            )

        if self.negative:
            # (-x) + y = y - x
            return other.subtract(self.negate())
        # x + (-y) = x - y
        return self.subtract(other.negate())

    def subtract(self, other: "BigInteger") -> "BigInteger":
        """
        Знаковое вычитание.

        Разные знаки → a + (-b). Одинаковые знаки и |a| < |b| → -(b - a),
        иначе вычитание модулей с заёмом, знак a. Глубина рекурсии <= 2.
        """
        if self.negative != other.negative:
            return self.add(other.negate())

        if less_than_magnitude(self.digits, other.digits):
            return other.subtract(self).negate()

        return BigInteger._from_limbs(
            subtract_magnitudes(self.digits, other.digits), self.negative
        )

    def __neg__(self) -> "BigInteger":
        return self.negate()

    def __pos__(self) -> "BigInteger":
        return self

    def __abs__(self) -> "BigInteger":
        if not self.negative:
            return self
        return BigInteger(digits=self.digits, negative=False)

    def __add__(self, other: object) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.add(rhs)

    def __radd__(self, other: object) -> "BigInteger":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.add(self)

    def __sub__(self, other: object) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.subtract(rhs)

    def __rsub__(self, other: object) -> "BigInteger":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.subtract(self)

    # =========================================================================
    # MULTIPLICATIVE
    # =========================================================================

    def multiply(
        self,
        other: "BigInteger",
        config: Optional[MultiplicationConfig] = None,
    ) -> "BigInteger":
        """
        Знаковое умножение: Karatsuba по модулям, знак = XOR знаков.

        Args:
            other: Второй множитель
            config: Конфигурация умножения (default: порог 32 limbs)
        """
        config = config or _DEFAULT_MULTIPLICATION
        if max(len(self.digits), len(other.digits)) > config.threshold:
            logger.debug(
                "karatsuba multiply",
                extra={
                    "lhs_limbs": len(self.digits),
                    "rhs_limbs": len(other.digits),
                    "threshold": config.threshold,
                },
            )
        limbs = multiply_magnitudes(self.digits, other.digits, config.threshold)
        return BigInteger._from_limbs(limbs, self.negative != other.negative)

    def __mul__(self, other: object) -> "BigInteger":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.multiply(rhs)

    def __rmul__(self, other: object) -> "BigInteger":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.multiply(self)

    # =========================================================================
    # DIVISIVE
    # =========================================================================

    def divmod_int(self, divisor: int) -> tuple["BigInteger", int]:
        """
        Деление на машинное слово с floor-семантикой.

        Частное округляется к -inf, остаток имеет знак делителя:
        результат совпадает с divmod() для Python int.

        Args:
            divisor: Ненулевой int в диапазоне знакового 64-битного слова

        Returns:
            (quotient, remainder), где self == quotient * divisor + remainder

        Raises:
            TypeError: Если divisor не int
            ZeroDivisionError: Если divisor == 0
            ValueError: Если divisor вне диапазона машинного слова

        Examples:
            >>> q, r = BigInteger.from_int(-7).divmod_int(2)
            >>> str(q), r
            ('-4', 1)
        """
        validate_divisor(divisor)
        divisor_negative = divisor < 0
        magnitude = abs(divisor)

        quotient, remainder = divmod_magnitude(self.digits, magnitude)

        if self.negative == divisor_negative:
            return (
                BigInteger._from_limbs(quotient, False),
                -remainder if self.negative else remainder,
            )

        if remainder == 0:
            return BigInteger._from_limbs(quotient, True), 0

        # Разные знаки и ненулевой остаток: округление к -inf
        logger.debug(
            "floor adjustment", extra={"remainder": remainder, "divisor": divisor}
        )
        quotient = add_magnitudes(quotient, [1])
        remainder = magnitude - remainder
        return (
            BigInteger._from_limbs(quotient, True),
            -remainder if divisor_negative else remainder,
        )

    def divide_by_int(self, divisor: int) -> "BigInteger":
        """Частное floor division на машинное слово."""
        return self.divmod_int(divisor)[0]

    def __floordiv__(self, other: object) -> "BigInteger":
        if not isinstance(other, int):
            return NotImplemented
        return self.divide_by_int(other)

    def __mod__(self, other: object) -> int:
        if not isinstance(other, int):
            return NotImplemented
        return self.divmod_int(other)[1]

    def __divmod__(self, other: object) -> tuple["BigInteger", int]:
        if not isinstance(other, int):
            return NotImplemented
        return self.divmod_int(other)


# =============================================================================
# HELPERS
# =============================================================================


def _coerce(value: object) -> Optional[BigInteger]:
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigInteger.from_int(value)
    return None


def read_token(stream: TextIO) -> str:
    """
    Чтение следующего токена, разделённого пробельными символами.

    Raises:
        EOFError: Если в потоке не осталось токенов
    """
    chars = []
    while True:
        ch = stream.read(1)
        if not ch:
            break
        if ch.isspace():
            if chars:
                break
            continue
        chars.append(ch)

    if not chars:
        raise EOFError("no token left in input stream")
    return "".join(chars)


def read_big_integer(stream: TextIO) -> BigInteger:
    """Разбор следующего токена потока как BigInteger."""
    return BigInteger.from_str(read_token(stream))


