"""
Domain models and value objects.

Contains the immutable signed arbitrary-precision integer BigInteger.
"""

from src.core.domain.big_integer import BigInteger, read_big_integer, read_token

__all__ = [
    "BigInteger",
    "read_big_integer",
    "read_token",
]
