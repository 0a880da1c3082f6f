"""
Domain models and value objects.

Contains the BigInt value type, the Ordering enum and canonical values.
"""

from bignum.core.domain.bigint import BigInt, Ordering, normalize, one, zero

__all__ = [
    # Model
    "BigInt",
    "Ordering",
    # Canonical values
    "normalize",
    "zero",
    "one",
]
