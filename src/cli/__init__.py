"""Command-line calculator driver built on the BigInteger core."""

from .main import main, read_int, run

__all__ = [
    "main",
    "read_int",
    "run",
]
