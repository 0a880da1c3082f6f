"""
Conversion — Построение BigInt и обратное преобразование

Единственный допустимый способ преобразований между:
- нативным int  → BigInt (from_integer)
- десятичной строкой → BigInt (from_decimal_text)
- BigInt → десятичной строкой (to_decimal_text)
- BigInt → нативным int (to_integer)

Формат десятичной строки:
    [+|-]digits, где digits: одна или более ASCII цифр 0-9.
    Ведущие нули допустимы и незначимы. Пробелы, '_' и не-ASCII цифры
    запрещены.
"""

import logging
import re
from typing import Final

from bignum.core.domain.bigint import BigInt
from bignum.core.magnitude import BASE, BASE_DIGITS

logger = logging.getLogger(__name__)

# Только ASCII цифры: str.isdigit() принимает также '²', '٣' и т.п.
_DIGITS_RE: Final[re.Pattern[str]] = re.compile(r"[0-9]+")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ParseError(ValueError):
    """
    Невалидная десятичная строка.

    Возникает, если строка пуста, содержит только знак или содержит
    символы, отличные от ASCII цифр (после необязательного знака).
    Никогда не заменяется молча на ноль.
    """

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid decimal integer {text!r}: {reason}")


# =============================================================================
# ПОСТРОЕНИЕ
# =============================================================================


def from_integer(value: int) -> BigInt:
    """
    Конверсия: нативный int → BigInt

    Магнитуда берётся как abs(value): int в Python не ограничен, поэтому
    минимальное знаковое 64-битное значение (и любое более широкое)
    обрабатывается без переполнения.

    Args:
        value: Целое число (bool не принимается)

    Returns:
        Нормализованный BigInt

    Raises:
        TypeError: Если value не int

    Examples:
        >>> from_integer(1002323809800980).limbs
        (809800980, 1002323)
        >>> from_integer(0).limbs
        ()
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"from_integer expects int, got {type(value).__name__}")

    magnitude = abs(value)
    limbs: list[int] = []
    while magnitude:
        magnitude, limb = divmod(magnitude, BASE)
        limbs.append(limb)

    return BigInt(limbs=tuple(limbs), negative=value < 0)


def from_decimal_text(text: str) -> BigInt:
    """
    Конверсия: десятичная строка → BigInt

    Цифры группируются по BASE_DIGITS начиная с младшего конца.

    Args:
        text: Строка вида [+|-]digits

    Returns:
        Нормализованный BigInt ("-0", "000" → канонический ноль)

    Raises:
        ParseError: Пустая строка, знак без цифр, посторонние символы
        TypeError: Если text не str

    Examples:
        >>> from_decimal_text("-1000000000").limbs
        (0, 1)
    """
    if not isinstance(text, str):
        raise TypeError(f"from_decimal_text expects str, got {type(text).__name__}")

    negative = False
    digits = text
    if digits[:1] in ("+", "-"):
        negative = digits[0] == "-"
        digits = digits[1:]

    if not digits:
        reason = "empty input" if not text else "sign without digits"
        logger.debug("Rejected decimal text %r: %s", text, reason)
        raise ParseError(text, reason)

    if _DIGITS_RE.fullmatch(digits) is None:
        logger.debug("Rejected decimal text %r: non-digit character", text)
        raise ParseError(text, "non-digit character")

    limbs: list[int] = []
    for end in range(len(digits), 0, -BASE_DIGITS):
        limbs.append(int(digits[max(0, end - BASE_DIGITS):end]))

    return BigInt(limbs=tuple(limbs), negative=negative)


# =============================================================================
# ОБРАТНЫЕ КОНВЕРТЕРЫ
# =============================================================================


def to_decimal_text(value: BigInt) -> str:
    """
    Конверсия: BigInt → десятичная строка

    Старший limb печатается без ведущих нулей, остальные дополняются
    нулями до BASE_DIGITS цифр. Ноль → "0".

    Examples:
        >>> to_decimal_text(BigInt(limbs=(809800980, 1002323)))
        '1002323809800980'
        >>> to_decimal_text(BigInt(limbs=(7, 1), negative=True))
        '-1000000007'
    """
    if not value.limbs:
        return "0"

    head = str(value.limbs[-1])
    tail = "".join(f"{limb:0{BASE_DIGITS}d}" for limb in reversed(value.limbs[:-1]))
    sign = "-" if value.negative else ""
    return f"{sign}{head}{tail}"


def to_integer(value: BigInt) -> int:
    """Конверсия: BigInt → нативный int (точная, без ограничения разрядности)."""
    result = 0
    for limb in reversed(value.limbs):
        result = result * BASE + limb
    return -result if value.negative else result
