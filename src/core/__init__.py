"""
Core arithmetic engine and domain model.

This package contains the limb-level magnitude primitives (arith) and the
immutable signed BigInteger value built on top of them (domain).
"""
