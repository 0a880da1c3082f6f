"""
Arithmetic — Сложение, вычитание и умножение BigInt со знаком

Знаковые операции строятся поверх беззнаковых операций над магнитудами
(bignum.core.magnitude) с диспетчеризацией по знакам и сравнению магнитуд.

ПРАВИЛА ЗНАКА:
    add, одинаковые знаки:  |a| + |b|, знак общий
    add, разные знаки:      большая магнитуда − меньшая, знак операнда
                            с большей магнитудой
    sub(a, b):              add(a, -b)
    mul:                    |a| * |b|, знак a XOR b

Все результаты проходят нормализацию в валидаторах BigInt: ноль всегда
получает negative=False.
"""

from bignum.core.domain.bigint import BigInt
from bignum.core.magnitude import Limbs, mag_add, mag_compare, mag_mul, mag_sub


# =============================================================================
# ЗНАК
# =============================================================================


def negate(value: BigInt) -> BigInt:
    """-value (ноль остаётся неотрицательным)."""
    return BigInt(limbs=value.limbs, negative=not value.negative)


def absolute(value: BigInt) -> BigInt:
    """|value|"""
    if not value.negative:
        return value
    return BigInt(limbs=value.limbs)


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def _signed_sum(a_limbs: Limbs, a_negative: bool, b_limbs: Limbs, b_negative: bool) -> BigInt:
    """Сумма двух знаковых магнитуд."""
    if a_negative == b_negative:
        return BigInt(limbs=mag_add(a_limbs, b_limbs), negative=a_negative)

    # Разные знаки: вычитаем меньшую магнитуду из большей
    order = mag_compare(a_limbs, b_limbs)
    if order == 0:
        return BigInt()
    if order > 0:
        return BigInt(limbs=mag_sub(a_limbs, b_limbs), negative=a_negative)
    return BigInt(limbs=mag_sub(b_limbs, a_limbs), negative=b_negative)


def add(a: BigInt, b: BigInt) -> BigInt:
    """
    Сумма a + b.

    Examples:
        >>> str(add(BigInt(limbs=(999_999_999,)), BigInt(limbs=(1,))))
        '1000000000'
    """
    return _signed_sum(a.limbs, a.negative, b.limbs, b.negative)


def sub(a: BigInt, b: BigInt) -> BigInt:
    """
    Разность a - b.

    Одинаковые знаки сводятся к вычитанию магнитуд (знак берётся у операнда
    с большей магнитудой, с инверсией для вычитаемого); разные знаки сводятся
    к сложению магнитуд со знаком уменьшаемого.
    """
    return _signed_sum(a.limbs, a.negative, b.limbs, not b.negative)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def mul(a: BigInt, b: BigInt) -> BigInt:
    """
    Произведение a * b (школьный алгоритм, O(len(a) * len(b))).

    Знак: a XOR b; при нулевом произведении принудительно False.
    """
    return BigInt(limbs=mag_mul(a.limbs, b.limbs), negative=a.negative != b.negative)
