"""
Core arith modules для BigInteger

Примитивы над модулями (последовательностями limbs по основанию BASE):
хранение, сравнение, сложение/вычитание, Karatsuba, деление на слово.
"""

# Limb Store
from src.core.arith.limbs import (
    BASE,
    WIDTH,
    BigIntegerParseError,
    is_zero_limbs,
    limbs_from_int,
    limbs_to_int,
    normalize_limbs,
    parse_decimal,
    render_decimal,
)

# Comparator
from src.core.arith.comparator import compare_magnitude, less_than_magnitude

# Additive Engine
from src.core.arith.additive import (
    add_magnitudes,
    raw_accumulate,
    raw_add,
    raw_subtract_inplace,
    subtract_magnitudes,
)

# Multiplicative Engine
from src.core.arith.karatsuba import (
    KARATSUBA_THRESHOLD,
    MultiplicationConfig,
    carry_normalize,
    magnitude_multiply,
    multiply_magnitudes,
    schoolbook_multiply,
)

# Divisive Engine
from src.core.arith.division import (
    DIVISOR_MAX,
    DIVISOR_MIN,
    divmod_magnitude,
    validate_divisor,
)

__all__ = [
    # Limb Store — Constants
    "BASE",
    "WIDTH",
    # Limb Store — Exceptions
    "BigIntegerParseError",
    # Limb Store — Functions
    "is_zero_limbs",
    "limbs_from_int",
    "limbs_to_int",
    "normalize_limbs",
    "parse_decimal",
    "render_decimal",
    # Comparator
    "compare_magnitude",
    "less_than_magnitude",
    # Additive Engine
    "add_magnitudes",
    "raw_accumulate",
    "raw_add",
    "raw_subtract_inplace",
    "subtract_magnitudes",
    # Multiplicative Engine — Constants
    "KARATSUBA_THRESHOLD",
    # Multiplicative Engine — Types
    "MultiplicationConfig",
    # Multiplicative Engine — Functions
    "carry_normalize",
    "magnitude_multiply",
    "multiply_magnitudes",
    "schoolbook_multiply",
    # Divisive Engine — Constants
    "DIVISOR_MAX",
    "DIVISOR_MIN",
    # Divisive Engine — Functions
    "divmod_magnitude",
    "validate_divisor",
]
