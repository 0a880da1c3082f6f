"""
Core value type and arithmetic for arbitrary-precision integers.

This package is pure: no I/O, no shared mutable state. The magnitude kernel
(bignum.core.magnitude) is independent of the BigInt model; the math
subpackage builds signed operations on top of both.
"""
