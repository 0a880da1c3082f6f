"""
Division — Деление BigInt с остатком (усечение к нулю)

Для a = b * q + r:
- |q| = floor(|a| / |b|)
- знак q: a XOR b (ноль → неотрицательный)
- знак r: как у a (ноль → неотрицательный)
- |r| < |b|

ВНИМАНИЕ: семантика отличается от встроенного divmod() Python,
который округляет частное вниз (к -inf):
    div_mod(-7, 2) → (-3, -1)
    divmod(-7, 2)  → (-4, 1)

Деление на ноль никогда не возвращает частичный результат, только
DivisionByZero exception.
"""

import logging

from bignum.core.domain.bigint import BigInt
from bignum.core.magnitude import mag_divmod

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivisionByZero(ZeroDivisionError):
    """Делитель имеет нулевую магнитуду."""

    pass


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def div_mod(a: BigInt, b: BigInt) -> tuple[BigInt, BigInt]:
    """
    Частное и остаток с усечением к нулю.

    Длинное деление магнитуд по одному limb частного за шаг, цифра
    частного ищется бинарным поиском в [0, BASE).

    Args:
        a: Делимое
        b: Делитель

    Returns:
        (quotient, remainder), оба нормализованы независимо

    Raises:
        DivisionByZero: Если b равен нулю

    Examples:
        >>> q, r = div_mod(BigInt(limbs=(7,), negative=True), BigInt(limbs=(2,)))
        >>> str(q), str(r)
        ('-3', '-1')
    """
    if not b.limbs:
        logger.debug("Division by zero: dividend=%s", a)
        raise DivisionByZero(f"division of {a} by zero")

    q_limbs, r_limbs = mag_divmod(a.limbs, b.limbs)
    quotient = BigInt(limbs=q_limbs, negative=a.negative != b.negative)
    remainder = BigInt(limbs=r_limbs, negative=a.negative)
    return quotient, remainder


def quotient(a: BigInt, b: BigInt) -> BigInt:
    """Частное a / b с усечением к нулю."""
    return div_mod(a, b)[0]


def remainder(a: BigInt, b: BigInt) -> BigInt:
    """Остаток со знаком делимого."""
    return div_mod(a, b)[1]
