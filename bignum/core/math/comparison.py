"""
Comparison — Полный порядок над BigInt

Порядок согласован со знаковым целым значением:
1. Разные знаки → отрицательное меньше
2. Одинаковые знаки → сравнение магнитуд (длина, затем limbs от старшего)
3. Оба отрицательные → результат сравнения магнитуд инвертируется

Используется вычитанием (выбор знака) и делением, доступен вызывающему коду.
"""

from bignum.core.domain.bigint import BigInt, Ordering
from bignum.core.magnitude import mag_compare


def compare_magnitude(a: BigInt, b: BigInt) -> Ordering:
    """
    Сравнение |a| и |b|.

    Examples:
        >>> compare_magnitude(BigInt(limbs=(5,), negative=True), BigInt(limbs=(3,)))
        <Ordering.GREATER: 1>
    """
    return Ordering(mag_compare(a.limbs, b.limbs))


def compare(a: BigInt, b: BigInt) -> Ordering:
    """
    Сравнение двух BigInt.

    Returns:
        Ordering.LESS / EQUAL / GREATER
    """
    if a.negative != b.negative:
        return Ordering.LESS if a.negative else Ordering.GREATER

    result = mag_compare(a.limbs, b.limbs)
    if a.negative:
        result = -result
    return Ordering(result)


# =============================================================================
# ПРОИЗВОДНЫЕ ПРЕДИКАТЫ
# =============================================================================


def equals(a: BigInt, b: BigInt) -> bool:
    return compare(a, b) == Ordering.EQUAL


def not_equals(a: BigInt, b: BigInt) -> bool:
    return compare(a, b) != Ordering.EQUAL


def less_than(a: BigInt, b: BigInt) -> bool:
    return compare(a, b) == Ordering.LESS


def less_equal(a: BigInt, b: BigInt) -> bool:
    return compare(a, b) != Ordering.GREATER


def greater_than(a: BigInt, b: BigInt) -> bool:
    return compare(a, b) == Ordering.GREATER


def greater_equal(a: BigInt, b: BigInt) -> bool:
    return compare(a, b) != Ordering.LESS
