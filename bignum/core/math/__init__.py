"""
Core math modules для bignum

Знаковые операции над BigInt: конверсии, сравнение, арифметика, деление.
"""

# Conversion
from bignum.core.math.conversion import (
    ParseError,
    from_decimal_text,
    from_integer,
    to_decimal_text,
    to_integer,
)

# Comparison
from bignum.core.math.comparison import (
    compare,
    compare_magnitude,
    equals,
    greater_equal,
    greater_than,
    less_equal,
    less_than,
    not_equals,
)

# Arithmetic
from bignum.core.math.arithmetic import (
    absolute,
    add,
    mul,
    negate,
    sub,
)

# Division
from bignum.core.math.division import (
    DivisionByZero,
    div_mod,
    quotient,
    remainder,
)

__all__ = [
    # Conversion — Exceptions
    "ParseError",
    # Conversion — Functions
    "from_decimal_text",
    "from_integer",
    "to_decimal_text",
    "to_integer",
    # Comparison
    "compare",
    "compare_magnitude",
    "equals",
    "greater_equal",
    "greater_than",
    "less_equal",
    "less_than",
    "not_equals",
    # Arithmetic
    "absolute",
    "add",
    "mul",
    "negate",
    "sub",
    # Division — Exceptions
    "DivisionByZero",
    # Division — Functions
    "div_mod",
    "quotient",
    "remainder",
]
