"""
BigInt — Модель целого числа произвольной точности

Immutable Pydantic модель: знак + магнитуда в limbs по основанию 10^9
(младший limb первым).

Каноническая форма обеспечивается валидаторами при создании, поэтому
любой существующий экземпляр BigInt уже нормализован:
1. Старшие нулевые limbs отсутствуют
2. Ноль: пустой tuple limbs и negative=False
3. Каждый limb лежит в [0, BASE)

Равенство (==) и hash определены по числовому значению и согласованы
с int: BigInt(5) == 5 и hash(BigInt(5)) == hash(5).

model_copy и model_construct переопределены и всегда проходят валидацию.
"""

from enum import IntEnum
from typing import Any, Mapping

from pydantic import (
    BaseModel,
    Field,
    StrictBool,
    StrictInt,
    ValidationInfo,
    field_validator,
)

from bignum.core.magnitude import BASE, strip_zero_limbs


# =============================================================================
# ENUMS
# =============================================================================


class Ordering(IntEnum):
    """Результат сравнения (знак совпадает со знаком разности a - b)"""

    LESS = -1
    EQUAL = 0
    GREATER = 1


# =============================================================================
# BIGINT MODEL
# =============================================================================


class BigInt(BaseModel):
    """
    Целое число со знаком произвольной точности.

    Immutable модель (frozen=True). Все арифметические операции
    возвращают новый экземпляр.

    Поля объявлены в порядке limbs → negative: валидатор знака видит
    уже нормализованные limbs и сбрасывает знак для нуля.
    """

    limbs: tuple[StrictInt, ...] = Field(
        default=(), description="Магнитуда в limbs по основанию 10^9, младший первым"
    )
    negative: StrictBool = Field(
        default=False, description="True если значение строго отрицательно"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("limbs")
    @classmethod
    def validate_limbs(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Проверка диапазона limbs и удаление старших нулей."""
        for index, limb in enumerate(v):
            if not 0 <= limb < BASE:
                raise ValueError(f"limb[{index}] = {limb} outside [0, {BASE})")
        return strip_zero_limbs(v)

    @field_validator("negative")
    @classmethod
    def validate_zero_sign(cls, v: bool, info: ValidationInfo) -> bool:
        """Ноль всегда неотрицателен."""
        if not info.data.get("limbs"):
            return False
        return v

    # -------------------------------------------------------------------------
    # Копирование и построение без обхода валидаторов
    # -------------------------------------------------------------------------

    def model_copy(
        self, *, update: Mapping[str, Any] | None = None, deep: bool = False
    ) -> "BigInt":
        """
        Копия с изменёнными полями.

        В отличие от BaseModel.model_copy, update проходит валидаторы:
        model_copy(update={"negative": True}) для нуля остаётся нулём.
        Поля immutable, поэтому deep не влияет на результат.
        """
        data: dict[str, Any] = {"limbs": self.limbs, "negative": self.negative}
        if update:
            data.update(update)
        return type(self).model_validate(data)

    @classmethod
    def model_construct(cls, _fields_set: set[str] | None = None, **values: Any) -> "BigInt":
        """Построение с обязательной валидацией (каноническая форма)."""
        return cls.model_validate(values)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_int(cls, value: int) -> "BigInt":
        """Создание из нативного int (см. conversion.from_integer)."""
        from bignum.core.math.conversion import from_integer

        return from_integer(value)

    @classmethod
    def parse(cls, text: str) -> "BigInt":
        """Разбор десятичной строки (см. conversion.from_decimal_text)."""
        from bignum.core.math.conversion import from_decimal_text

        return from_decimal_text(text)

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return not self.limbs

    @property
    def sign(self) -> int:
        """-1, 0 или +1"""
        if not self.limbs:
            return 0
        return -1 if self.negative else 1

    @property
    def limb_count(self) -> int:
        return len(self.limbs)

    # -------------------------------------------------------------------------
    # Деление с усечением к нулю
    # -------------------------------------------------------------------------

    def div_mod(self, other: "BigInt | int") -> tuple["BigInt", "BigInt"]:
        """
        Частное и остаток с усечением к нулю.

        Встроенный divmod() не перегружен: в Python он округляет вниз.

        Raises:
            DivisionByZero: Если делитель равен нулю
        """
        from bignum.core.math.division import div_mod

        divisor = _coerce(other)
        if divisor is None:
            raise TypeError(f"unsupported divisor type: {type(other).__name__}")
        return div_mod(self, divisor)

    # -------------------------------------------------------------------------
    # Python data model
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        from bignum.core.math.conversion import to_decimal_text

        return to_decimal_text(self)

    def __repr__(self) -> str:
        return f"BigInt({str(self)!r})"

    def __int__(self) -> int:
        from bignum.core.math.conversion import to_integer

        return to_integer(self)

    def __eq__(self, other: Any) -> bool:
        result = self._ordering(other)
        return NotImplemented if result is None else result == 0

    def __hash__(self) -> int:
        # Совпадает с hash(int), т.к. BigInt(5) == 5
        return hash(int(self))

    def __bool__(self) -> bool:
        return bool(self.limbs)

    def __neg__(self) -> "BigInt":
        from bignum.core.math.arithmetic import negate

        return negate(self)

    def __pos__(self) -> "BigInt":
        return self

    def __abs__(self) -> "BigInt":
        from bignum.core.math.arithmetic import absolute

        return absolute(self)

    def __add__(self, other: Any) -> "BigInt":
        from bignum.core.math.arithmetic import add

        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return add(self, rhs)

    def __radd__(self, other: Any) -> "BigInt":
        return self.__add__(other)

    def __sub__(self, other: Any) -> "BigInt":
        from bignum.core.math.arithmetic import sub

        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return sub(self, rhs)

    def __rsub__(self, other: Any) -> "BigInt":
        from bignum.core.math.arithmetic import sub

        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return sub(lhs, self)

    def __mul__(self, other: Any) -> "BigInt":
        from bignum.core.math.arithmetic import mul

        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return mul(self, rhs)

    def __rmul__(self, other: Any) -> "BigInt":
        return self.__mul__(other)

    def _ordering(self, other: Any) -> Ordering | None:
        from bignum.core.math.comparison import compare

        rhs = _coerce(other)
        if rhs is None:
            return None
        return compare(self, rhs)

    def __lt__(self, other: Any) -> bool:
        result = self._ordering(other)
        return NotImplemented if result is None else result < 0

    def __le__(self, other: Any) -> bool:
        result = self._ordering(other)
        return NotImplemented if result is None else result <= 0

    def __gt__(self, other: Any) -> bool:
        result = self._ordering(other)
        return NotImplemented if result is None else result > 0

    def __ge__(self, other: Any) -> bool:
        result = self._ordering(other)
        return NotImplemented if result is None else result >= 0


# =============================================================================
# НОРМАЛИЗАЦИЯ И КАНОНИЧЕСКИЕ ЗНАЧЕНИЯ
# =============================================================================


def normalize(value: BigInt) -> BigInt:
    """
    Каноническая форма значения.

    Удаляет старшие нулевые limbs и сбрасывает знак нуля. Идемпотентна;
    поскольку валидаторы BigInt уже выполняют нормализацию при создании,
    для любого экземпляра возвращает равное значение.
    """
    limbs = strip_zero_limbs(value.limbs)
    return BigInt(limbs=limbs, negative=value.negative and bool(limbs))


def zero() -> BigInt:
    """Канонический ноль: пустые limbs, negative=False."""
    return BigInt()


def one() -> BigInt:
    return BigInt(limbs=(1,))


def _coerce(value: Any) -> BigInt | None:
    """Приведение операнда оператора к BigInt (None, если тип не поддерживается)."""
    if isinstance(value, BigInt):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        from bignum.core.math.conversion import from_integer

        return from_integer(value)
    return None

