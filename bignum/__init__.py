"""
bignum — arbitrary-precision signed integers

Exact integer arithmetic beyond native word size: sign + magnitude limbs in
base 10^9, decimal text conversion, comparison, add/sub/mul and truncating
division with remainder.

    >>> from bignum import from_decimal_text, mul
    >>> str(mul(from_decimal_text("123456789012345678901"), from_decimal_text("-10")))
    '-1234567890123456789010'
"""

from bignum.core.domain import BigInt, Ordering, normalize, one, zero
from bignum.core.magnitude import BASE, BASE_DIGITS
from bignum.core.math import (
    DivisionByZero,
    ParseError,
    absolute,
    add,
    compare,
    compare_magnitude,
    div_mod,
    equals,
    from_decimal_text,
    from_integer,
    greater_equal,
    greater_than,
    less_equal,
    less_than,
    mul,
    negate,
    not_equals,
    quotient,
    remainder,
    sub,
    to_decimal_text,
    to_integer,
)

__version__ = "0.1.0"

__all__ = [
    # Constants
    "BASE",
    "BASE_DIGITS",
    # Model
    "BigInt",
    "Ordering",
    "normalize",
    "zero",
    "one",
    # Conversion
    "from_integer",
    "from_decimal_text",
    "to_decimal_text",
    "to_integer",
    # Comparison
    "compare",
    "compare_magnitude",
    "equals",
    "not_equals",
    "less_than",
    "less_equal",
    "greater_than",
    "greater_equal",
    # Arithmetic
    "add",
    "sub",
    "mul",
    "negate",
    "absolute",
    # Division
    "div_mod",
    "quotient",
    "remainder",
    # Exceptions
    "ParseError",
    "DivisionByZero",
]
