"""
Test suite for bignum

Contains:
- tests/unit/          : Unit tests for the magnitude kernel, the BigInt model
                         and every signed operation
"""
