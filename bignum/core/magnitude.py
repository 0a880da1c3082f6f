"""
Magnitude — беззнаковые операции над последовательностями limbs

Магнитуда хранится как tuple[int, ...] в смешанной системе счисления
по основанию BASE = 10^9, младший limb первым:

    value = limbs[0] + limbs[1] * BASE + limbs[2] * BASE^2 + ...

Модуль не знает о знаке и о модели BigInt: все функции принимают и
возвращают «голые» последовательности limbs.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат каждой функции не содержит старших нулевых limbs
2. Каждый limb результата лежит в [0, BASE)
3. Нулевая магнитуда: пустой tuple
4. Входные последовательности никогда не изменяются
"""

from typing import Final, Sequence

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Основание системы счисления limbs
BASE: Final[int] = 1_000_000_000

# Количество десятичных цифр в одном limb (BASE == 10 ** BASE_DIGITS)
BASE_DIGITS: Final[int] = 9

Limbs = tuple[int, ...]


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def strip_zero_limbs(limbs: Sequence[int]) -> Limbs:
    """
    Удаление старших нулевых limbs.

    Args:
        limbs: Последовательность limbs (младший первым)

    Returns:
        tuple без нулевых limbs в старших позициях

    Examples:
        >>> strip_zero_limbs([5, 0, 0])
        (5,)
        >>> strip_zero_limbs([0, 0])
        ()
    """
    end = len(limbs)
    while end > 0 and limbs[end - 1] == 0:
        end -= 1
    return tuple(limbs[:end])


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def mag_compare(x: Limbs, y: Limbs) -> int:
    """
    Сравнение двух нормализованных магнитуд.

    Сначала по количеству limbs (старших нулей нет, значит больше limbs,
    больше значение), затем лексикографически от старшего limb к младшему.

    Returns:
        -1 если x < y, 0 если x == y, +1 если x > y
    """
    if len(x) != len(y):
        return -1 if len(x) < len(y) else 1

    for i in range(len(x) - 1, -1, -1):
        if x[i] != y[i]:
            return -1 if x[i] < y[i] else 1

    return 0


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def mag_add(x: Limbs, y: Limbs) -> Limbs:
    """
    Сложение магнитуд с переносом.

    Длина результата: max(len(x), len(y)) или на один limb больше,
    если перенос остался после старшего limb.
    """
    if len(x) < len(y):
        x, y = y, x

    result: list[int] = []
    carry = 0
    for i in range(len(x)):
        total = x[i] + carry
        if i < len(y):
            total += y[i]
        if total >= BASE:
            result.append(total - BASE)
            carry = 1
        else:
            result.append(total)
            carry = 0

    if carry:
        result.append(carry)

    return tuple(result)


def mag_sub(x: Limbs, y: Limbs) -> Limbs:
    """
    Вычитание магнитуд с заёмом.

    Предусловие: x >= y (проверяется вызывающим кодом через mag_compare).

    Raises:
        ValueError: Если x < y (заём остался после старшего limb)
    """
    result: list[int] = []
    borrow = 0
    for i in range(len(x)):
        diff = x[i] - borrow
        if i < len(y):
            diff -= y[i]
        if diff < 0:
            result.append(diff + BASE)
            borrow = 1
        else:
            result.append(diff)
            borrow = 0

    if borrow or len(y) > len(x):
        raise ValueError("mag_sub requires minuend magnitude >= subtrahend magnitude")

    return strip_zero_limbs(result)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def mag_mul_small(x: Limbs, k: int) -> Limbs:
    """
    Умножение магнитуды на один limb k ∈ [0, BASE).

    Используется делением для проверки кандидатов цифры частного.
    """
    if not 0 <= k < BASE:
        raise ValueError(f"Single-limb factor must be in [0, {BASE}), got {k}")

    if k == 0 or not x:
        return ()

    result: list[int] = []
    carry = 0
    for limb in x:
        carry, low = divmod(limb * k + carry, BASE)
        result.append(low)

    if carry:
        result.append(carry)

    return tuple(result)


def mag_mul(x: Limbs, y: Limbs) -> Limbs:
    """
    Школьное (квадратичное) умножение магнитуд.

    Произведение x[i] * y[j] накапливается в позиции i + j с немедленным
    переносом; после каждой строки перенос протягивается до конца.
    Произведение двух limbs < 10^18, плюс накопитель и перенос — Python int
    не переполняется, но значения limbs всегда приводятся по модулю BASE.
    """
    if not x or not y:
        return ()

    result = [0] * (len(x) + len(y))
    for i, xi in enumerate(x):
        if xi == 0:
            continue
        carry = 0
        for j, yj in enumerate(y):
            carry, result[i + j] = divmod(result[i + j] + xi * yj + carry, BASE)
        k = i + len(y)
        while carry:
            carry, result[k] = divmod(result[k] + carry, BASE)
            k += 1

    return strip_zero_limbs(result)


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def mag_divmod_small(x: Limbs, k: int) -> tuple[Limbs, int]:
    """
    Короткое деление магнитуды на один limb k ∈ (0, BASE).

    Returns:
        (quotient, remainder), remainder — обычный int в [0, k)
    """
    if not 0 < k < BASE:
        raise ValueError(f"Single-limb divisor must be in (0, {BASE}), got {k}")

    quotient = [0] * len(x)
    rem = 0
    for i in range(len(x) - 1, -1, -1):
        quotient[i], rem = divmod(rem * BASE + x[i], k)

    return strip_zero_limbs(quotient), rem


def _quotient_digit(divisor: Limbs, window: Limbs) -> int:
    """
    Наибольшая цифра d ∈ [0, BASE) такая, что divisor * d <= window.

    Бинарный поиск; на входе гарантировано window < divisor * BASE.
    """
    if mag_compare(window, divisor) < 0:
        return 0

    lo, hi = 1, BASE - 1
    while lo < hi:
        mid = (lo + hi + 1) // 2
        if mag_compare(mag_mul_small(divisor, mid), window) <= 0:
            lo = mid
        else:
            hi = mid - 1

    return lo


def mag_divmod(x: Limbs, y: Limbs) -> tuple[Limbs, Limbs]:
    """
    Длинное деление магнитуд: x = y * quotient + remainder, remainder < y.

    Частное строится по одному limb от старшего к младшему. На каждом шаге
    к текущему остатку приписывается следующий limb делимого, цифра частного
    находится бинарным поиском, остаток уменьшается вычитанием.

    Raises:
        ZeroDivisionError: Если y — нулевая магнитуда
    """
    if not y:
        raise ZeroDivisionError("magnitude division by zero")

    if mag_compare(x, y) < 0:
        return (), x

    if len(y) == 1:
        quotient, rem = mag_divmod_small(x, y[0])
        return quotient, strip_zero_limbs((rem,))

    quotient = [0] * len(x)
    window: Limbs = ()
    for i in range(len(x) - 1, -1, -1):
        # window * BASE + x[i]
        window = strip_zero_limbs((x[i],) + window)
        digit = _quotient_digit(y, window)
        if digit:
            window = mag_sub(window, mag_mul_small(y, digit))
        quotient[i] = digit

    return strip_zero_limbs(quotient), window
