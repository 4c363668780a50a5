"""
Test suite for the BigInteger arithmetic engine

Contains:
- tests/unit/          : Unit tests for individual modules
"""
